# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
# Copyright (c) 2019 Tor Aksel N. Heirung
#
# SPDX-License-Identifier: AGPL-3.0-or-later
# SPDX-License-Identifier: MIT

# Code purpose: Describe various constants and methods that are common to different set representations.

import numpy as np

from pylazyset.common.lazy_set import LazySet, support_function, support_vector


def check_matrices_are_equal_ignoring_row_order(A, B):
    """Check matrices are equal while ignoring row order

    Args:
        A (array_like): Matrix 1
        B (array_like): Matrix 2

    Returns:
        bool: A == B

    Notes:
        isclose does element-wise comparison, all with axis=1, provides a row-wise test, and finally any checks for some
        row where row-wise match is true
    """
    A = np.array(A).astype(float)
    B = np.array(B).astype(float)
    return A.shape == B.shape and sum([np.any(np.all(np.isclose(row, B), axis=1)) for row in A]) == B.shape[0]


def convex_set_support(self, eta):
    r"""Evaluates the support function and support vector of a set.

    The support function of a set :math:`\mathcal{P}` is defined as :math:`\rho_{\mathcal{P}}(\eta) =
    \max_{x\in\mathcal{P}} \eta^\top x`. The support vector of a set :math:`\mathcal{P}` is defined as
    :math:`\sigma_{\mathcal{P}}(\eta) = \arg\max_{x\in\mathcal{P}} \eta^\top x`.

    Args:
        eta (array_like): Support directions. Matrix (N times self.dim), where each row is a support direction.

    Raises:
        ValueError: Mismatch in eta dimension
        ValueError: eta is not convertible into a 2D array

    Returns:
        tuple: A tuple with two items:
            1. support_function_evaluations (numpy.ndarray): Support function evaluation(s) as a 1D numpy.ndarray.
               Vector (N,) with as many rows as eta.
            2. support_vectors (numpy.ndarray): Support vectors as a 2D numpy.ndarray. Matrix N x self.dim with as many
               rows as eta.
    """
    try:
        eta = np.atleast_2d(eta).astype(float)
    except (TypeError, ValueError) as err:
        raise ValueError(f"Expected eta to be convertible into a 2D float array! Got {type(eta)}") from err
    if eta.ndim > 2:
        raise ValueError("Expected eta to be a 1D/2D numpy array")
    elif eta.shape[1] != self.dim:
        raise ValueError(f"eta dim. ({eta.shape[1]:d}), no. of columns, is different from set dimension ({self.dim:d})")
    support_function_list = []
    support_vector_list = []
    for single_eta in eta:
        support_vector_single_eta = self.support_vector(single_eta)
        support_function_list.append(single_eta @ support_vector_single_eta)
        support_vector_list.append(support_vector_single_eta)
    return np.array(support_function_list), np.array(support_vector_list)


def convex_set_extreme(self, eta):
    """Wrapper for :meth:`support` to compute the extreme point.

    Args:
        eta (array_like): Support directions. Matrix (N times self.dim), where each row is a support direction.

    Returns:
        numpy.ndarray: Support vector evaluation(s) as a 2D numpy.ndarray. The array has as many rows as eta.

    Notes:
        For more detailed description, see documentation for :meth:`support` function.
    """
    return self.support(eta)[1]


def convex_set_minimum_volume_circumscribing_rectangle(self):
    r"""Compute the minimum volume circumscribing rectangle for a set.

    Returns:
        tuple: A tuple of two elements
            - lb (numpy.ndarray): Lower bound :math:`l` on the set,
              :math:`\mathcal{P}\subseteq\{l\}\oplus\mathbb{R}_{\geq 0}`.
            - ub (numpy.ndarray): Upper bound :math:`u` on the set,
              :math:`\mathcal{P}\subseteq\{u\}\oplus(-\mathbb{R}_{\geq 0})`.

    Notes:
        This function computes the lower/upper bound by an element-wise support computation (2n support vector
        evaluations), where n is attr:`self.dim`. The lower bound is obtained from

        .. math::
            \inf_{x\in\mathcal{P}} e_i^\top x=-\sup_{x\in\mathcal{P}} -e_i^\top x=-\rho_{\mathcal{P}}(-e_i),

        where :math:`e_i\in\mathbb{R}^n` denotes the standard coordinate vector, and :math:`\rho_{\mathcal{P}}` is the
        support function of :math:`\mathcal{P}`.
    """
    lb = np.array([-support_function(-e_i, self) for e_i in np.eye(self.dim)])
    ub = np.array([support_function(e_i, self) for e_i in np.eye(self.dim)])
    return lb, ub


def box_approximation(S):
    """Axis-aligned bounds (lb, ub) of any set that provides support_vector and dim. See
    :meth:`convex_set_minimum_volume_circumscribing_rectangle`."""
    return convex_set_minimum_volume_circumscribing_rectangle(S)


def norm(S, p="inf"):
    r"""Compute the norm of a set, i.e., the largest p-norm among its elements.

    Args:
        S (LazySet): Set whose norm is to be computed
        p (int | str, optional): Norm type. It can be 1, 2, or 'inf'. Defaults to 'inf'.

    Raises:
        ValueError: Unhandled norm type

    Returns:
        float: p-norm of the farthest vertex of the box approximation of S.

    Notes:
        For :math:`p=\infty`, this value is exact and equals :math:`\max_{x\in S}\|x\|_\infty`. For other norm types,
        this value upper bounds :math:`\max_{x\in S}\|x\|_p`.
    """
    lb, ub = box_approximation(S)
    return _vector_norm(np.maximum(np.abs(lb), np.abs(ub)), p)


def radius(S, p="inf"):
    """Compute the radius of a set, i.e., the p-norm of the half-widths of its box approximation.

    Args:
        S (LazySet): Set whose radius is to be computed
        p (int | str, optional): Norm type. It can be 1, 2, or 'inf'. Defaults to 'inf'.

    Returns:
        float: Radius of S about the center of its box approximation.
    """
    lb, ub = box_approximation(S)
    return _vector_norm((ub - lb) / 2, p)


def diameter(S, p="inf"):
    """Compute the diameter of a set, which is twice its :meth:`radius`."""
    return 2 * radius(S, p=p)


def _vector_norm(vector, p):
    if p in [1, 2]:
        return float(np.linalg.norm(vector, ord=p))
    elif str(p).lower() == "inf":
        return float(np.linalg.norm(vector, ord=np.inf))
    else:
        raise ValueError(f"Unhandled p norm: {p}!")


def is_zonotope(Q):
    """Check if the set is a zonotope

    Args:
        Q (object): Set to check

    Returns:
        bool: Returns True if the set is a zonotope, False otherwise
    """
    return hasattr(Q, "reduce_order")


def is_hyperplane(Q):
    """Check if the set is a hyperplane (lines included)

    Args:
        Q (object): Set to check

    Returns:
        bool: Returns True if the set is a hyperplane, False otherwise
    """
    return hasattr(Q, "an_element")


def sign_cadlag(x):
    """Element-wise right-continuous sign function that maps non-negative entries to +1 and negative entries to -1.

    Args:
        x (array_like): Values to take the sign of

    Returns:
        numpy.ndarray: Array of the same shape as x with entries in {-1, +1}. Unlike np.sign, zero maps to +1.
    """
    return np.where(np.asarray(x) >= 0, 1.0, -1.0)


def sanitize_Gc(G, c):
    """Sanitize and check if (`G`, `c`) to make a valid zonotope generator combination

    Args:
        G (array_like): Can be numpy arrays, list, or tuples or None
        c (array_like): Can be numpy arrays, list, or tuples

    Raises:
        ValueError: G is not 2D numpy array free from NaNs and infs
        ValueError: c is not 1D numpy array free from NaNs and infs
        ValueError: G and c have different number of rows

    Returns:
        tuple: A tuple with two items:
            # G (numpy.ndarray): 2D generator matrix. It has zero columns when G is None.
            # c (numpy.ndarray): 1D center vector.

    Notes:
        This function is used in the constructor of Zonotope to check if (G, c) is compatible.
    """
    if c is None:
        raise ValueError("Expected c to be provided!")
    try:
        c = np.atleast_1d(np.squeeze(c)).astype(float)
        if c.ndim != 1:
            raise ValueError("c is not a one-dimensional array!")
    except (TypeError, ValueError) as err:
        raise ValueError(f"Expected c to be a 1D float array. Got {np.array2string(np.array(c)):s}") from err
    if G is None:
        # Singleton set with dimension provided by c
        return np.empty((c.size, 0)), c
    try:
        G = np.array(G).astype(float)
        if G.ndim == 1 and G.size == c.size:
            # A single generator
            G = G[:, np.newaxis]
        elif G.ndim == 1 and G.size == 0:
            G = np.empty((c.size, 0))
        if G.ndim != 2:
            raise ValueError("G is not a two-dimensional array!")
    except (TypeError, ValueError) as err:
        raise ValueError(f"Expected G to be a 2D float matrix. Got {np.array2string(np.array(G)):s}") from err
    if np.any(np.isinf(G)) or np.any(np.isinf(c)) or np.any(np.isnan(G)) or np.any(np.isnan(c)):
        raise ValueError(
            f"Expected G, c to be 2D and 1D array free from NaNs and infs. "
            f"Got {np.array2string(np.array(G)):s}, {np.array2string(np.array(c)):s}"
        )
    elif G.shape[0] != c.shape[0]:
        raise ValueError(f"G and c has different number of rows! G: {G.shape[0]:d} and c: {c.shape[0]:d}.")
    return G, c


def sanitize_vector(x, dim, name="x"):
    """Sanitize a vector x and check that it has dim entries

    Args:
        x (array_like): Vector to sanitize
        dim (int): Expected number of entries
        name (str, optional): Name of the vector used in error messages. Defaults to 'x'.

    Raises:
        ValueError: x is not convertible into a 1D float array of length dim

    Returns:
        numpy.ndarray: 1D float array
    """
    try:
        x = np.atleast_1d(np.squeeze(x)).astype(float)
    except (TypeError, ValueError) as err:
        raise ValueError(f"Expected {name:s} to be convertible into a 1D float array! Got {type(x)}") from err
    if x.ndim != 1 or x.size != dim:
        raise ValueError(f"Expected {name:s} to be a 1D array of length {dim:d}! Got {name:s} with shape {x.shape}")
    return x

