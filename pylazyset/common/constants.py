# Copyright (C) 2020-2024 Mitsubishi Electric Research Laboratories (MERL)
#
# SPDX-License-Identifier: AGPL-3.0-or-later

# Code purpose:  Specify the constants to be used with numpy, cvxpy, and cdd as well as testing workflows

PYLAZYSET_ZERO = 1e-6  # Zero threshold for numerical stability
# Zero threshold for merging near-duplicate points before and after the convex hull computation
PYLAZYSET_ZERO_CDD = 1e-9

# Solvers used by default
DEFAULT_LP_SOLVER_STR = "CLARABEL"  # CLARABEL, MOSEK, CVXOPT, SCS, ECOS, GUROBI, OSQP

# CVXPY args used by default (use "reoptimize": True when using GUROBI)
DEFAULT_CVXPY_ARGS_LP = {"solver": DEFAULT_LP_SOLVER_STR}

# Vertex enumeration visits 2^n_generators sign combinations
MAX_GENERATORS_FOR_VERTEX_ENUMERATION = 16

# Methods available to solve for the latent point when checking containment of a point in a zonotope
CONTAINMENT_METHODS = ("lp", "least-squares")

# Largest denominator used when converting a float order into a fraction in order reduction
ORDER_MAX_DENOMINATOR = 10**6
