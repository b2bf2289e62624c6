# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
# Copyright (c) 2019 Tor Aksel N. Heirung
#
# SPDX-License-Identifier: AGPL-3.0-or-later
# SPDX-License-Identifier: MIT

# Code purpose:  Define the convex hull computation used to reduce a point cloud to its vertices
# Coverage: This file has 2 untested statements to handle unexpected errors from pycddlib

import cdd  # pycddlib -- for redundancy removal of lower-dimensional point clouds
import numpy as np
from scipy.spatial import ConvexHull  # qhull -- for redundancy removal of full-dimensional point clouds

from pylazyset.common.constants import PYLAZYSET_ZERO_CDD


def convex_hull(points):
    """Compute the vertices of the convex hull of a collection of points.

    Args:
        points (array_like): Matrix (N times n), where each row is a point.

    Raises:
        ValueError: points is not convertible into a non-empty 2D float array
        ValueError: Redundancy removal using cdd failed

    Returns:
        numpy.ndarray: Matrix (M times n), M <= N, where each row is a vertex of the convex hull of points. No two rows
        are closer than PYLAZYSET_ZERO_CDD.

    Notes:
        We use qhull (via scipy) when the points span the whole space, and cdd otherwise. One-dimensional point clouds
        are reduced to their extrema. The order of the rows is the one returned by qhull or cdd.
    """
    try:
        V = np.atleast_2d(points).astype(float)
    except (TypeError, ValueError) as err:
        raise ValueError(f"Expected points to be convertible into a 2D float array! Got {type(points)}") from err
    if V.ndim != 2 or V.size == 0:
        raise ValueError(f"Expected points to be a non-empty 2D array! Got points with shape {V.shape}")
    n_points, n_dim = V.shape
    spread = np.max(np.abs(V - V[0, :]))
    if n_points == 1 or spread <= PYLAZYSET_ZERO_CDD:
        return V[:1, :]
    elif n_dim == 1:
        return np.vstack((np.min(V, keepdims=True), np.max(V, keepdims=True)))
    elif np.linalg.matrix_rank(V - V[0, :], tol=PYLAZYSET_ZERO_CDD) == n_dim:
        # Indices of the unique vertices forming the convex hull:
        i_V_minimal = ConvexHull(V).vertices
        return prune_close_points(V[i_V_minimal, :])
    else:
        V_cddP = get_cdd_polyhedron_from_V(V)
        tV_cdd_matrix = cdd.copy_generators(V_cddP)
        cdd.matrix_canonicalize(tV_cdd_matrix)  # Minimize redundant vertices
        return prune_close_points(get_V_from_cdd(tV_cdd_matrix))


def get_cdd_polyhedron_from_V(V):
    """Get CDD polyhedron in generator form from given V

    Args:
        V (array_like): n_points times n matrix

    Returns:
        cdd.Polyhedron: CDD Polyhedron
    """
    n_points = V.shape[0]
    # t is 1 to indicate that all are vertices
    tV_list = np.hstack((np.ones((n_points, 1)), V)).tolist()
    tV_cdd = cdd.matrix_from_array(tV_list, rep_type=cdd.RepType.GENERATOR)
    try:
        return cdd.polyhedron_from_matrix(tV_cdd)
    except RuntimeError as err:
        raise ValueError("Computation of CDD polyhedron failed due to numerical inconsistency in point list") from err


def get_V_from_cdd(tV_cdd_matrix):
    tV = np.array(tV_cdd_matrix.array)
    if (tV[:, 0] == 0).any():
        raise ValueError("Convex hull computation yielded rays! Possibly due to numerical issues!")
    return tV[:, 1:]


def prune_close_points(V, tolerance=PYLAZYSET_ZERO_CDD):
    """Filter through the points to skip any point that has another point (down in the list) that is close to it.

    Args:
        V (array_like): Matrix of points (N times n)
        tolerance (float, optional): Points closer than tolerance (in Euclidean norm) are merged. Defaults to
            PYLAZYSET_ZERO_CDD from pylazyset.common.constants.

    Returns:
        numpy.ndarray: The pruned array of points.
    """
    n_points = V.shape[0]
    new_point_list = []
    for ind_1 in range(n_points):
        found_at_least_one_point_in_future_that_is_close_to_this_point = False
        for ind_2 in range(ind_1 + 1, n_points):
            if np.linalg.norm(V[ind_1, :] - V[ind_2, :]) <= tolerance:
                found_at_least_one_point_in_future_that_is_close_to_this_point = True
                break
        if not found_at_least_one_point_in_future_that_is_close_to_this_point:
            new_point_list += [V[ind_1, :]]
    return np.array(new_point_list)
