# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
#
# SPDX-License-Identifier: AGPL-3.0-or-later

# Code purpose:  Define the Hyperplane class

import numpy as np

from pylazyset.common import convex_set_extreme, convex_set_support, sanitize_vector
from pylazyset.common.constants import PYLAZYSET_ZERO


class Hyperplane:
    r"""Hyperplane class

    A hyperplane is the affine set

    .. math::
            \mathcal{H} = \{x\in\mathbb{R}^n\ |\ a^\top x = b\},

    with a non-zero normal vector :math:`a\in\mathbb{R}^n` and a constant :math:`b\in\mathbb{R}`.

    Args:
        a (array_like): Normal vector. Must be 1D array with at least one non-zero entry. The hyperplane dimension is
            determined by number of elements in a.
        b (float): Constant.

    Raises:
        ValueError: a is not a non-zero 1D float array free from NaNs and infs
        ValueError: b is not a finite scalar
    """

    def __init__(self, a, b):
        """Constructor for Hyperplane class"""
        self._a, self._b = self._sanitize_ab(a, b)

    @staticmethod
    def _sanitize_ab(a, b):
        try:
            a = np.atleast_1d(np.squeeze(a)).astype(float)
            b = np.squeeze(b).astype(float)
        except (TypeError, ValueError) as err:
            raise ValueError(
                "Expected a, b to be convertible into a 1D float array and a float. "
                f"Got a: {np.array2string(np.array(a))} and b: {np.array2string(np.array(b))}"
            ) from err
        if a.ndim != 1 or b.ndim != 0:
            raise ValueError(f"Expected a to be a 1D array and b to be a scalar! Got a: {a.shape} and b: {b.shape}")
        elif not np.all(np.isfinite(a)) or not np.isfinite(b):
            raise ValueError("Expected a, b to be free from NaNs and infs")
        elif np.all(a == 0):
            raise ValueError("Expected the normal vector a to be non-zero!")
        a.flags.writeable = False
        return a, float(b)

    @property
    def a(self):
        """Normal vector a of the hyperplane."""
        return self._a

    @property
    def b(self):
        """Constant b of the hyperplane."""
        return self._b

    @property
    def dim(self):
        """Dimension of the hyperplane.

        Returns:
            int: Dimension of the ambient space of the hyperplane.
        """
        return self.a.size

    def an_element(self):
        r"""Compute some point on the hyperplane.

        Returns:
            numpy.ndarray: Point :math:`x` with :math:`x_i = b / a_i` for the first index :math:`i` with
            :math:`a_i\neq 0`, and zero elsewhere.
        """
        x = np.zeros((self.dim,))
        first_nonzero_index = np.flatnonzero(self.a)[0]
        x[first_nonzero_index] = self.b / self.a[first_nonzero_index]
        return x

    def support_vector(self, direction):
        r"""Evaluate the support vector of the hyperplane along a direction.

        Args:
            direction (array_like): Support direction of length self.dim

        Raises:
            ValueError: direction does not have self.dim entries
            ValueError: direction is not parallel to the normal vector, and the support function is unbounded

        Returns:
            numpy.ndarray: Support vector along direction, which is :meth:`an_element`.

        Notes:
            The support function of a hyperplane is finite only along directions :math:`d=\lambda a` for some
            :math:`\lambda\in\mathbb{R}`, in which case every point on the hyperplane is a support vector.
        """
        direction = sanitize_vector(direction, self.dim, name="direction")
        projection_on_a = (self.a @ direction) / (self.a @ self.a) * self.a
        if np.linalg.norm(direction - projection_on_a) > PYLAZYSET_ZERO * max(1.0, np.linalg.norm(direction)):
            raise ValueError(
                "The support vector of a hyperplane is defined only along directions parallel to its normal vector! "
                f"Got direction {np.array2string(direction):s}"
            )
        return self.an_element()

    def contains(self, Q):
        r"""Check containment of a point or a collection of points in the hyperplane.

        Args:
            Q (array_like): Point or a collection of points (N times self.dim) with each row is a point.

        Raises:
            ValueError: Dimension mismatch between Q and the hyperplane

        Returns:
            bool | numpy.ndarray([bool]): True for points with :math:`|a^\top x - b| \leq` PYLAZYSET_ZERO.
        """
        try:
            points = np.atleast_2d(Q).astype(float)
        except (TypeError, ValueError) as err:
            raise ValueError(f"Expected Q to be convertible into a 2D float array! Got {type(Q)}") from err
        if points.ndim != 2 or points.shape[1] != self.dim:
            raise ValueError(f"Mismatch in dimensions (self.dim: {self.dim:d} and Q with shape {points.shape})")
        containment_flag = np.abs(points @ self.a - self.b) <= PYLAZYSET_ZERO
        if np.ndim(Q) == 2:
            return containment_flag
        else:
            return bool(containment_flag[0])

    def __contains__(self, x):
        """Overload in operator for containment of a single point."""
        return self.contains(x)

    extreme = convex_set_extreme

    def support(self, eta):
        return convex_set_support(self, eta)

    support.__doc__ = convex_set_support.__doc__

    def __str__(self):
        return f"Hyperplane in R^{self.dim:d}"

    def __repr__(self):
        return f"{str(self):s}\n\twith normal vector {np.array2string(self.a):s} and constant {self.b:g}"
