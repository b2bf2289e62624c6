# Copyright (C) 2020-2024 Mitsubishi Electric Research Laboratories (MERL)
# Copyright (c) 2019 Tor Aksel N. Heirung
#
# SPDX-License-Identifier: AGPL-3.0-or-later
# SPDX-License-Identifier: MIT

# Code purpose:  __init__ script for pylazyset package

from .common import (
    LazySet,
    box_approximation,
    diameter,
    is_hyperplane,
    is_zonotope,
    norm,
    radius,
    sign_cadlag,
    support_function,
    support_vector,
)
from .common.convex_hull import convex_hull
from .Hyperplane import Hyperplane
from .Line import Line
from .Zonotope import Zonotope
