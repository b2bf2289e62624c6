# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
#
# SPDX-License-Identifier: AGPL-3.0-or-later

# Code purpose:  Define the methods involving just the Zonotope class

import itertools
import math
import numbers
import warnings
from fractions import Fraction

import numpy as np

from pylazyset.common.constants import MAX_GENERATORS_FOR_VERTEX_ENUMERATION, ORDER_MAX_DENOMINATOR
from pylazyset.common.convex_hull import convex_hull


def interval_hull(self):
    r"""Compute the interval hull of the zonotope, i.e., the tightest axis-aligned box containing it.

    Returns:
        Zonotope: Zonotope with the same center and the diagonal generator matrix :math:`\text{diag}(\sum_{i=1}^p
        |g_i|)`, where the absolute value is taken element-wise.
    """
    return self.__class__(c=self.c, G=np.diag(np.sum(np.abs(self.G), axis=1)))


def reduce_order(self, r):
    r"""Reduce the order of the zonotope by over-approximating it with a zonotope with fewer generators.

    Args:
        r (float | fractions.Fraction): Desired order (ratio of the number of generators to dimension). In practice,
            r >= 1. Integers and fractions are used exactly, and floats are converted to the closest fraction with
            denominator at most ORDER_MAX_DENOMINATOR.

    Raises:
        ValueError: r is not a non-negative finite scalar
        UserWarning: When r < 1, since the reduced zonotope has self.dim generators irrespective of r

    Returns:
        Zonotope: Zonotope that contains self and has at most :math:`p - m + n` generators, where :math:`n` is
        self.dim, :math:`p` is self.n_generators, and :math:`m = p - \lfloor n (r - 1)\rfloor`. When the order of self
        is at most r, self is returned.

    Notes:
        This function implements the order reduction in [Gir05]_. The generators are sorted (stable) in ascending
        order of :math:`h_i=\|g_i\|_1 - \|g_i\|_\infty`, which is zero for axis-aligned generators. The first
        :math:`m` generators in the sorted order are replaced by their interval hull
        :math:`\text{diag}(\sum_{i\ \text{reduced}} |g_i|)`, and the remaining generators are kept in their original
        order, followed by the :math:`n` columns of the interval hull.

        Since the reduced generators are collectively over-approximated by their interval hull, the result always
        contains self. This is not an optimal (minimum volume) order reduction.

    References:
        .. [Gir05] A. Girard, "Reachability of uncertain linear systems using zonotopes", in Hybrid Systems:
           Computation and Control (HSCC), 2005.
    """
    if isinstance(r, numbers.Rational):
        r = Fraction(r)
    else:
        try:
            r = float(np.squeeze(r))
        except (TypeError, ValueError) as err:
            raise ValueError(f"Expected r to be a scalar float! Got {type(r)}") from err
        if not np.isfinite(r):
            raise ValueError(f"Expected r to be a non-negative finite scalar! Got {r}")
        # Floats like 1.2 are not exact in binary. Recover 6/5 so that floor(n (r - 1)) is exact.
        r = Fraction(r).limit_denominator(ORDER_MAX_DENOMINATOR)
    if r < 0:
        raise ValueError(f"Expected r to be a non-negative finite scalar! Got {r}")
    n, p = self.dim, self.n_generators
    if r * n >= p:
        return self
    if r < 1:
        warnings.warn(
            f"Requested order {r} is smaller than 1. The reduced zonotope will have {n:d} generators.", UserWarning
        )

    G = self.G
    h = np.linalg.norm(G, ord=1, axis=0) - np.linalg.norm(G, ord=np.inf, axis=0)
    sorted_indices = np.argsort(h, kind="stable")
    m = min(p - math.floor(n * (r - 1)), p)  # Number of generators to reduce
    reduced_indices = sorted_indices[:m]
    kept_indices = np.sort(sorted_indices[m:])

    G_box = np.diag(np.sum(np.abs(G[:, reduced_indices]), axis=1))
    return self.__class__(c=self.c, G=np.hstack((G[:, kept_indices], G_box)))


def vertices(self, max_generators=MAX_GENERATORS_FOR_VERTEX_ENUMERATION):
    r"""Compute the vertices of the zonotope.

    Args:
        max_generators (int, optional): Largest number of generators for which vertex enumeration is performed.
            Defaults to MAX_GENERATORS_FOR_VERTEX_ENUMERATION from pylazyset.common.constants.

    Raises:
        ValueError: When self.n_generators exceeds max_generators

    Returns:
        numpy.ndarray: Matrix (N times self.dim), where each row is a vertex of the zonotope.

    Notes:
        This function enumerates all :math:`2^p` points :math:`c + G\xi` with :math:`\xi\in\{-1, 1\}^p`, where
        :math:`p` is self.n_generators, and then computes their convex hull using
        :meth:`pylazyset.common.convex_hull.convex_hull`. The computational cost grows exponentially with :math:`p`.
        For zonotopes with many generators, use :meth:`reduce_order` first to obtain a zonotope with fewer generators
        that contains the given zonotope.
    """
    p = self.n_generators
    if p > max_generators:
        raise ValueError(
            f"Vertex enumeration requires 2^{p:d} evaluations, which exceeds the limit of 2^{max_generators:d}. Use "
            "reduce_order to reduce the number of generators first, or increase max_generators."
        )
    elif p == 0:
        return np.array([self.c])
    latent_vertices = np.array(list(itertools.product([1.0, -1.0], repeat=p)))
    return convex_hull(self.c + latent_vertices @ self.G.T)
