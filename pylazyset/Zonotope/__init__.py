# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
#
# SPDX-License-Identifier: AGPL-3.0-or-later

# Code purpose:  Define the Zonotope class

from fractions import Fraction

import numpy as np

from pylazyset.common import (
    convex_set_extreme,
    convex_set_minimum_volume_circumscribing_rectangle,
    convex_set_support,
    diameter,
    norm,
    radius,
    sanitize_Gc,
)
from pylazyset.common.constants import DEFAULT_CVXPY_ARGS_LP
from pylazyset.Zonotope.operations_binary import (
    DOCSTRING_FOR_SUPPORT,
    contains,
    linear_map,
    minkowski_sum,
    scale,
    solve_latent_point,
    support_function,
    support_vector,
)
from pylazyset.Zonotope.operations_unary import interval_hull, reduce_order, vertices


class Zonotope:
    r"""Zonotope class

    A **zonotope** is the Minkowski sum of finitely many line segments. Formally,

    .. math::
            \mathcal{Z} = \left\{c + \sum_{i=1}^p \xi_i g_i\ \middle|\ \xi_i \in [-1, 1],\ i=1,\ldots,p\right\}
            = \{G \xi + c\ |\ \|\xi\|_\infty \leq 1\} \subset \mathbb{R}^n,

    where :math:`c\in\mathbb{R}^n` is the **center** and the columns :math:`g_i\in\mathbb{R}^n` of
    :math:`G\in\mathbb{R}^{n\times p}` are the **generators**. Equivalently, a zonotope is the image of the unit
    :math:`\ell_\infty`-norm ball in :math:`\mathbb{R}^p` under an affine transformation.

    Zonotope object construction admits **one** of the following combinations (as keyword arguments):

    #. (c, G) for a zonotope with center c and generator matrix G (columns are generators),
    #. (c, generators_list) for a zonotope with center c and the generators listed as vectors,
    #. (c, G=None) or (c) for a zonotope equivalent to a **single point** c, and
    #. (lb, ub) for a zonotope equivalent to an **axis-aligned cuboid** :math:`\{x\ |\ lb\leq x \leq ub\}`.

    Zonotopes are immutable. All operations return new Zonotope objects.

    Args:
        c (array_like, optional): Center of the zonotope. Must be 1D array, and the zonotope dimension is determined
            by the number of elements in c.
        G (array_like, optional): Generator matrix with as many rows as c. Each column is a generator.
        generators_list (list, optional): List of generators, each a 1D array_like with as many elements as c.
        lb (array_like, optional): Lower bounds of the axis-aligned cuboid. When lb is provided, ub must also be
            provided.
        ub (array_like, optional): Upper bounds of the axis-aligned cuboid. Must be 1D array of the same length as lb.

    Raises:
        ValueError: (c, G) is not compatible.
        ValueError: (c, generators_list) is not compatible.
        ValueError: (lb, ub) is not valid.
    """

    def __init__(self, **kwargs):
        """Constructor for Zonotope class"""
        # These attributes are used by CVXPY to solve problems
        self._cvxpy_args_lp = DEFAULT_CVXPY_ARGS_LP

        # Check how the constructor was called.
        lb_and_ub_passed = all(kw in kwargs for kw in ("lb", "ub"))
        generators_list_passed = "generators_list" in kwargs
        c_passed = "c" in kwargs

        if lb_and_ub_passed:
            if len(kwargs) != 2:
                raise ValueError("Cannot set bounds (lb, ub) with other arguments")
            G, c = self._get_Gc_from_bounds(kwargs.get("lb"), kwargs.get("ub"))
        elif c_passed and generators_list_passed:
            if len(kwargs) != 2:
                raise ValueError("Cannot set zonotope from (c, generators_list) with other arguments")
            G, c = self._get_Gc_from_generators_list(kwargs.get("c"), kwargs.get("generators_list"))
        elif c_passed:
            if len(kwargs) != 1 and not (len(kwargs) == 2 and "G" in kwargs):
                raise ValueError("Cannot set zonotope (c, G) with other arguments")
            G, c = sanitize_Gc(kwargs.get("G"), kwargs.get("c"))
        else:
            raise ValueError(
                "Got invalid arguments while defining a zonotope. Please specify either (c, G) or "
                "(c, generators_list) or (lb, ub) or c."
            )
        # Zonotopes are immutable
        G.flags.writeable = False
        c.flags.writeable = False
        self._G, self._c = G, c

    @staticmethod
    def _get_Gc_from_generators_list(c, generators_list):
        """Stack the generators in generators_list horizontally to define the generator matrix."""
        try:
            generators_list = [np.atleast_1d(np.squeeze(g)).astype(float) for g in generators_list]
        except (TypeError, ValueError) as err:
            raise ValueError("Expected generators_list to be a list of 1D float array_like") from err
        if len(generators_list) == 0:
            return sanitize_Gc(None, c)
        elif any(g.ndim != 1 or g.size != generators_list[0].size for g in generators_list):
            raise ValueError("Expected all generators in generators_list to be 1D arrays of the same length")
        return sanitize_Gc(np.column_stack(generators_list), c)

    @staticmethod
    def _get_Gc_from_bounds(lb, ub):
        r"""Define a zonotope from bounds (lb, ub), i.e., a zonotope that is equivalent to the box defined from the
        bounds (lb, ub).

        Args:
            lb (array_like): Lower bound of the zonotope.
            ub (array_like): Upper bound of the zonotope.

        Raises:
            ValueError: Mismatch in lb, ub shape
            ValueError: lb, ub is not convertible into 1D numpy float arrays
            ValueError: lb > ub for some dimension

        Notes:
            We use the following simple manipulations to define a zonotope from the bounds lb, ub:

            .. math ::
                newobj  &= {x\ |\ lb \leq x \leq ub}\\
                        &= {x\ |\ - (ub - lb)/2 \leq x - (ub + lb)/2 \leq + (ub - lb)/2}\\
                        &= {x\ |\ - d \leq x - c \leq d}\\
                        &= {diag(d)z + c\ |\ -1 \leq z \leq 1}

            Dimensions with lb = ub contribute an all-zero generator.
        """
        try:
            lb = np.atleast_1d(np.squeeze(lb)).astype(float)
            ub = np.atleast_1d(np.squeeze(ub)).astype(float)
        except (TypeError, ValueError) as err:
            raise ValueError("Expected lb, ub to convertible into 1D float numpy arrays") from err
        if lb.shape != ub.shape or lb.ndim != 1:
            raise ValueError("Expected lb, ub to 1D numpy arrays of same shape")
        elif np.any(ub < lb):
            raise ValueError("Expected lb <= ub! A zonotope can not be empty.")
        return sanitize_Gc(np.diag((ub - lb) / 2), (lb + ub) / 2)

    @property
    def dim(self):
        """Dimension of the zonotope.

        Returns:
            int: Dimension of the zonotope.
        """
        return self.G.shape[0]

    @property
    def c(self):
        """Center c of the zonotope.

        Returns:
            numpy.ndarray: Center c (read-only).
        """
        return self._c

    @property
    def G(self):
        """Generator matrix G of the zonotope.

        Returns:
            numpy.ndarray: Generator matrix G (read-only). Each column is a generator.
        """
        return self._G

    center = c
    generators = G

    @property
    def n_generators(self):
        """Number of generators of the zonotope.

        Returns:
            int: Number of columns in G.
        """
        return self.G.shape[1]

    @property
    def order(self):
        """Order of the zonotope, i.e., the ratio of the number of generators to the dimension.

        Returns:
            fractions.Fraction: Order of the zonotope. An order below 1 means that the zonotope is not full-dimensional.
        """
        return Fraction(self.n_generators, self.dim)

    @property
    def is_full_dimensional(self):
        """Check if the zonotope is full-dimensional, which is the case if and only if G has full row rank."""
        return self.n_generators > 0 and np.linalg.matrix_rank(self.G) == self.dim

    @property
    def cvxpy_args_lp(self):
        """CVXPY arguments in use when solving a linear program

        Returns:
            dict: CVXPY arguments in use when solving a linear program. Defaults to dictionary in
            `pylazyset.common.constants.DEFAULT_CVXPY_ARGS_LP`.
        """
        return self._cvxpy_args_lp

    @cvxpy_args_lp.setter
    def cvxpy_args_lp(self, value):
        """Update CVXPY arguments in use when solving a linear program

        Args:
            value: Dictionary with new CVXPY arguments in use when solving a linear program.
        """
        self._cvxpy_args_lp = value

    ##################
    # Unary operations
    ##################
    def copy(self):
        """Get a copy of the zonotope"""
        return self.__class__(c=self.c, G=self.G)

    interval_hull = interval_hull
    minimum_volume_circumscribing_rectangle = convex_set_minimum_volume_circumscribing_rectangle
    reduce_order = reduce_order
    vertices = vertices
    vertices_list = vertices
    norm = norm
    radius = radius
    diameter = diameter

    ######################
    # Comparison operators
    ######################
    contains = contains

    def __contains__(self, x):
        """Overload in operator for containment of a single point."""
        return self.contains(x)

    solve_latent_point = solve_latent_point

    ####################
    # Binary operations
    ####################
    minkowski_sum = minkowski_sum
    plus = minkowski_sum
    __add__ = minkowski_sum
    __radd__ = minkowski_sum

    def __sub__(self, Q):
        """Translate the zonotope by -Q. Only points are supported as Q."""
        if hasattr(Q, "dim"):
            raise TypeError(f"Unsupported operation: Zonotope - {type(Q)}!")
        try:
            Q = np.atleast_1d(Q).astype(float)
        except (TypeError, ValueError) as err:
            raise TypeError(f"Unsupported operation: Zonotope - {type(Q)}!") from err
        return self.minkowski_sum(-Q)

    def __rsub__(self, Q):
        raise TypeError(f"Unsupported operation: {type(Q)} - Zonotope!")

    __array_ufunc__ = None  # Allows for numpy matrix times Zonotope
    linear_map = linear_map
    scale = scale

    def __matmul__(self, M):
        """Do not allow Zonotope @ anything"""
        return NotImplemented

    def __mul__(self, x):
        """Do not allow Zonotope * anything"""
        return NotImplemented

    def __neg__(self):
        return self.scale(-1)

    # Matrix times Zonotope (called when left operand does not support multiplication)
    def __rmatmul__(self, M):
        """Overload @ operator for linear map (matrix times Zonotope)."""
        return self.linear_map(M)

    def __rmul__(self, m):
        """Overload * operator for scaling (scalar times Zonotope)."""
        return self.scale(m)

    extreme = convex_set_extreme
    support_function = support_function
    support_vector = support_vector

    def support(self, eta):
        return convex_set_support(self, eta)

    support.__doc__ = convex_set_support.__doc__ + DOCSTRING_FOR_SUPPORT

    ##########################
    # Zonotope representation
    ##########################
    def __str__(self):
        return f"Zonotope in R^{self.dim:d}"

    def __repr__(self):
        long_str = [str(self)]
        if self.n_generators == 0:
            long_str += ["\n\tthat represents a single point"]
        elif self.n_generators == 1:
            long_str += ["\n\twith 1 generator"]
        else:
            long_str += [f"\n\twith {self.n_generators:d} generators (order {str(self.order):s})"]
        return "".join(long_str)
