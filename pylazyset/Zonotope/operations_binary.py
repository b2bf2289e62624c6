# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
#
# SPDX-License-Identifier: AGPL-3.0-or-later

# Code purpose:  Define the methods involving another set, a point, or a matrix used with Zonotope class
# Coverage: This file has 1 untested statement to handle unexpected errors from np.linalg.lstsq

import warnings

import cvxpy as cp
import numpy as np

from pylazyset.common import is_zonotope, sanitize_vector, sign_cadlag
from pylazyset.common.constants import CONTAINMENT_METHODS, PYLAZYSET_ZERO

DOCSTRING_FOR_SUPPORT = (
    "\n"
    + r"""
    Notes:
        For a zonotope :math:`\mathcal{Z}=\{G\xi + c\ |\ \|\xi\|_\infty\leq 1\}` and a support direction
        :math:`\eta\in\mathbb{R}^{\mathcal{Z}.\text{dim}}`, the support vector is available in closed form (see
        :meth:`support_vector`) and no optimization problem is solved.
    """
)


def support_vector(self, direction):
    r"""Evaluate the support vector of the zonotope along a direction.

    Args:
        direction (array_like): Support direction of length self.dim

    Raises:
        ValueError: direction does not have self.dim entries

    Returns:
        numpy.ndarray: Support vector :math:`c + G\,\text{sign}^+(G^\top d)` where :math:`\text{sign}^+` is the
        right-continuous sign function (+1 for non-negative arguments, -1 otherwise).

    Notes:
        Along a direction orthogonal to a generator, the coefficient of that generator is +1. In particular, the zero
        direction yields :math:`c + G\mathbf{1}`, the vertex with all latent coefficients at +1.
    """
    direction = sanitize_vector(direction, self.dim, name="direction")
    return self.c + self.G @ sign_cadlag(self.G.T @ direction)


def support_function(self, direction):
    r"""Evaluate the support function :math:`\rho_{\mathcal{Z}}(d) = d^\top \sigma_{\mathcal{Z}}(d)` of the zonotope.

    Args:
        direction (array_like): Support direction of length self.dim

    Returns:
        float: Support function of the zonotope along direction, which is :math:`d^\top c + \|G^\top d\|_1`.
    """
    direction = sanitize_vector(direction, self.dim, name="direction")
    return float(direction @ self.c + np.linalg.norm(self.G.T @ direction, ord=1))


def solve_latent_point(self, x, method="lp"):
    r"""Solve for a latent point :math:`\xi` such that :math:`G\xi = x - c` and :math:`\|\xi\|_\infty\leq 1`.

    Args:
        x (array_like): Point of length self.dim
        method (str, optional): Method to use when G is not square or is singular. Can be one of ['lp',
            'least-squares']. Defaults to 'lp'.

    Raises:
        ValueError: x does not have self.dim entries
        ValueError: Invalid method

    Returns:
        tuple: A tuple with two items:
            #. solve_status (str): Can be one of ["feasible", "infeasible", "unsolved"].
            #. xi (numpy.ndarray | None): Latent point that solves :math:`G\xi = x - c`. None when solve_status is
               "unsolved".

    Notes:
        When G is square and non-singular, :math:`\xi` is obtained from np.linalg.solve. Otherwise,

        * for method 'lp', we solve the linear program (via CVXPY) that minimizes :math:`\|\xi\|_\infty` subject to
          :math:`G\xi = x - c`, so that "infeasible" is reported only when no latent point in the unit box exists, and
        * for method 'least-squares', we use the least-norm solution from np.linalg.lstsq. This method can report
          "infeasible" for points in the zonotope whose least-norm latent point lies outside the unit box.

        The status is "unsolved" when the linear system :math:`G\xi = x - c` has no solution, or when the solver fails.
    """
    if method not in CONTAINMENT_METHODS:
        raise ValueError(f"Invalid method provided. Should be in {list(CONTAINMENT_METHODS)}. Got {method}!")
    x = sanitize_vector(x, self.dim, name="x")
    b = x - self.c
    if self.n_generators == 0:
        if np.max(np.abs(b)) <= PYLAZYSET_ZERO:
            return "feasible", np.empty((0,))
        else:
            return "unsolved", None

    xi = None
    if self.n_generators == self.dim:
        try:
            xi = np.linalg.solve(self.G, b)
        except np.linalg.LinAlgError:
            # Singular G. Fall back to method
            xi = None
        if xi is not None and not np.all(np.isfinite(xi)):
            xi = None

    if xi is None and method == "lp":
        xi_var = cp.Variable((self.n_generators,))
        problem = cp.Problem(cp.Minimize(cp.norm(xi_var, p="inf")), [self.G @ xi_var == b])
        try:
            problem.solve(**self.cvxpy_args_lp)
        except cp.error.SolverError:
            return "unsolved", None
        if problem.status in [cp.OPTIMAL, cp.OPTIMAL_INACCURATE]:
            xi = xi_var.value
        else:
            # Infeasible linear system, or a status that gives no latent point
            return "unsolved", None
    elif xi is None:
        try:
            xi, _, _, _ = np.linalg.lstsq(self.G, b, rcond=None)
        except np.linalg.LinAlgError:
            return "unsolved", None
        if np.max(np.abs(self.G @ xi - b)) > PYLAZYSET_ZERO:
            # Inconsistent linear system
            return "unsolved", None

    if np.max(np.abs(xi)) <= 1 + PYLAZYSET_ZERO:
        return "feasible", xi
    else:
        return "infeasible", xi


def contains(self, Q, method="lp"):
    r"""Check containment of a point or a collection of points :math:`Q \in \mathbb{R}^{n_Q \times
    \mathcal{Z}.\text{dim}}` in the given zonotope.

    Args:
        Q (array_like): Point or a collection of points to be tested for containment within the zonotope. When
            providing a collection of points, Q is a matrix (N times self.dim) with each row is a point.
        method (str, optional): Method used by :meth:`solve_latent_point` when the generator matrix is not square or
            is singular. Can be one of ['lp', 'least-squares']. Defaults to 'lp'.

    Raises:
        ValueError: Dimension mismatch between Q and the zonotope
        UserWarning: When the latent point could not be computed for some point (it is reported as not contained)

    Returns:
        bool | numpy.ndarray([bool]): Boolean corresponding to :math:`Q\in\mathcal{Z}`, or an array of booleans, one
        for each row in Q.

    Notes:
        A zonotope with center :math:`c` and generators :math:`g_i` contains a point :math:`x` if and only if
        :math:`x - c = \sum_{i=1}^p \xi_i g_i` for some :math:`\xi_i\in[-1, 1]`. We use :meth:`solve_latent_point` to
        solve for :math:`\xi`. Infeasibility is reported as False and never as an exception.
    """
    try:
        points = np.atleast_2d(Q).astype(float)
    except (TypeError, ValueError) as err:
        raise ValueError(f"Expected Q to be convertible into a 2D float array! Got {type(Q)}") from err
    if points.ndim != 2 or points.shape[1] != self.dim:
        raise ValueError(f"Mismatch in dimensions (self.dim: {self.dim:d} and Q with shape {points.shape})")
    containment_flag = np.zeros((points.shape[0],), dtype="bool")
    n_unsolved = 0
    for index, point in enumerate(points):
        solve_status, _ = self.solve_latent_point(point, method=method)
        containment_flag[index] = solve_status == "feasible"
        n_unsolved += solve_status == "unsolved"
    if n_unsolved > 0:
        reason_str = "the zonotope is not full-dimensional" if not self.is_full_dimensional else "the solver failed"
        warnings.warn(
            f"Unable to solve for the latent point of {n_unsolved:d} point(s) since {reason_str:s}. These points are "
            "reported as not contained.",
            UserWarning,
        )
    if np.ndim(Q) == 2:
        return containment_flag
    else:
        return bool(containment_flag[0])


def linear_map(self, M):
    r"""Multiply a matrix or a scalar with a zonotope

    Args:
        M (array_like): Matrix (N times self.dim) or a scalar to be multiplied with a zonotope
            When self.dim is not 1, a 1x1 matrix is treated as the scalar it holds (see :meth:`scale`).

    Raises:
        ValueError: M is not convertible into a 2D float array
        ValueError: M does not have self.dim columns

    Returns:
        Zonotope: Zonotope which is the product of M and self. Specifically, given a zonotope :math:`\mathcal{Z}`, and a
        matrix :math:`M\in\mathbb{R}^{m\times \mathcal{Z}.\text{dim}}` or scalar :math:`M`, then this function returns a
        zonotope :math:`\mathcal{R}=\{Mx|x\in\mathcal{Z}\}` with center :math:`Mc` and generators :math:`MG`.
    """
    try:
        M = np.atleast_2d(M).astype(float)
    except (TypeError, ValueError) as err:
        raise ValueError(f"M must be convertible to a numpy 2D array of float! Got {type(M)}") from err
    if M.ndim > 2:
        raise ValueError(f"M is must be convertible into a 2D numpy.ndarray. But got {M.ndim:d}D array.")
    elif self.dim != 1 and M.shape == (1, 1):
        return self.scale(M[0][0])
    elif M.shape[1] != self.dim:
        raise ValueError(f"Expected M upon promotion to 2D array to have {self.dim:d} columns. M: {M.shape} matrix")
    return self.__class__(c=M @ self.c, G=M @ self.G)


def minkowski_sum(self, Q):
    r"""Add a point or a zonotope Q to a zonotope (Minkowski sum).

    Args:
        Q (array_like | Zonotope): The point or zonotope to add

    Raises:
        TypeError: When Q is neither convertible into a 1D numpy array nor a zonotope.
        ValueError: When Q has a dimension mismatch with self.

    Returns:
        Zonotope: Minkowski sum of self and Q.

    Notes:
        Given zonotopes :math:`\mathcal{Z}_1` (self) and :math:`\mathcal{Z}_2` (Q), the Minkowski sum
        :math:`\{x + y|x\in\mathcal{Z}_1, y\in\mathcal{Z}_2\}` is a zonotope whose center is the sum of the centers and
        whose generator matrix is :math:`[G_1, G_2]`. When Q is a point, this function translates the zonotope by Q.
    """
    if is_zonotope(Q):
        if Q.dim != self.dim:
            raise ValueError(f"Expected a zonotope of dim. {self.dim:d}! Got Q with dim:{Q.dim:d}")
        return self.__class__(c=self.c + Q.c, G=np.hstack((self.G, Q.G)))
    else:
        try:
            Q = np.atleast_1d(np.squeeze(Q)).astype(float)
        except (TypeError, ValueError) as err:
            raise TypeError(f"Unsupported operation: {type(Q)} + Zonotope") from err
        if Q.ndim != 1 or Q.size != self.dim:
            raise ValueError(f"Q must be a numpy 1D array of float of length {self.dim:d}! Got Q with shape:{Q.shape}")
        return self.__class__(c=self.c + Q, G=self.G)


def scale(self, alpha):
    r"""Scale a zonotope by a scalar.

    Args:
        alpha (float): Scalar multiplier. It can be negative or zero.

    Raises:
        TypeError: alpha is not convertible into a scalar float

    Returns:
        Zonotope: Zonotope :math:`\{\alpha x| x\in\mathcal{Z}\}` with center :math:`\alpha c` and generators
        :math:`\alpha G`.
    """
    try:
        alpha = np.squeeze(alpha).astype(float)
    except (TypeError, ValueError) as err:
        raise TypeError(f"Unsupported operation: {type(alpha)} * Zonotope!") from err
    if alpha.ndim != 0:
        raise TypeError(f"Expected a scalar multiplier. Got an array of shape {alpha.shape}!")
    return self.__class__(c=alpha * self.c, G=alpha * self.G)
