# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
#
# SPDX-License-Identifier: AGPL-3.0-or-later

# Code purpose: Check if methods in pylazyset are consistent

from pylazyset import Hyperplane, Line, Zonotope

SHARED_INTERFACE = ["dim", "support_vector", "support", "extreme", "contains", "__contains__"]

for set_class in [Zonotope, Hyperplane, Line]:
    missing_members = [v for v in SHARED_INTERFACE if v not in dir(set_class)]
    print(f"{set_class.__name__}: missing shared members\n", "\n".join(missing_members), end="\n\n")

in_hyperplane_but_not_in_line = [
    v
    for v in dir(Hyperplane)
    if (callable(getattr(Hyperplane, v)) and not (v in dir(Line) and callable(getattr(Line, v))))
]

in_line_but_not_in_hyperplane = [
    v
    for v in dir(Line)
    if (callable(getattr(Line, v)) and not (v in dir(Hyperplane) and callable(getattr(Hyperplane, v))))
]

print("in_hyperplane_but_not_in_line\n", "\n".join(in_hyperplane_but_not_in_line), end="\n")
print("\n\nin_line_but_not_in_hyperplane\n", "\n".join(in_line_but_not_in_hyperplane))
