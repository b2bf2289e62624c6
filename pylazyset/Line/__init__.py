# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
#
# SPDX-License-Identifier: AGPL-3.0-or-later

# Code purpose:  Define the Line class

import numpy as np

from pylazyset.common import convex_set_extreme, convex_set_support
from pylazyset.Hyperplane import Hyperplane


class Line:
    r"""Line class

    A line is a hyperplane in two dimensions,

    .. math::
            \mathcal{L} = \{x\in\mathbb{R}^2\ |\ a^\top x = b\},

    with a non-zero normal vector :math:`a\in\mathbb{R}^2` and a constant :math:`b\in\mathbb{R}`. For example, the line
    :math:`y = -x + 1` is Line(a=[1, 1], b=1).

    Args:
        a (array_like): Normal vector. Must have two elements, at least one of them non-zero.
        b (float): Constant.

    Raises:
        ValueError: a does not have two elements
        ValueError: a is not a non-zero float array free from NaNs and infs
    """

    def __init__(self, a, b):
        """Constructor for Line class"""
        self._hyperplane = Hyperplane(a, b)
        if self._hyperplane.dim != 2:
            raise ValueError(f"Expected a line to be two-dimensional! Got a with {self._hyperplane.dim:d} elements.")

    @property
    def a(self):
        """Normal vector a of the line."""
        return self._hyperplane.a

    @property
    def b(self):
        """Constant b of the line."""
        return self._hyperplane.b

    @property
    def dim(self):
        """Dimension of the line, which is 2."""
        return 2

    def an_element(self):
        r"""Compute some point on the line.

        Returns:
            numpy.ndarray: The origin when :math:`b = 0`. Otherwise, for the first index :math:`i` with
            :math:`a_i\neq 0` and the other index :math:`j`, the point with :math:`x_j = 1` and :math:`x_i = (b - a_j) /
            a_i`.
        """
        if self.b == 0:
            return np.zeros((2,))
        i = 1 if self.a[0] == 0 else 0
        j = 1 - i
        x = np.zeros((2,))
        x[j] = 1
        x[i] = (self.b - self.a[j]) / self.a[i]
        return x

    def support_vector(self, direction):
        """Evaluate the support vector of the line along a direction. See
        :meth:`pylazyset.Hyperplane.Hyperplane.support_vector`."""
        return self._hyperplane.support_vector(direction)

    def contains(self, Q):
        """Check containment of a point or a collection of points in the line. See
        :meth:`pylazyset.Hyperplane.Hyperplane.contains`."""
        return self._hyperplane.contains(Q)

    def __contains__(self, x):
        """Overload in operator for containment of a single point."""
        return self.contains(x)

    extreme = convex_set_extreme

    def support(self, eta):
        return convex_set_support(self, eta)

    support.__doc__ = convex_set_support.__doc__

    def __str__(self):
        return "Line in R^2"

    def __repr__(self):
        return f"{str(self):s}\n\twith normal vector {np.array2string(self.a):s} and constant {self.b:g}"
