# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
#
# SPDX-License-Identifier: AGPL-3.0-or-later

# Code purpose: Test the Zonotope class for vertex enumeration, order reduction, and bounding boxes

from fractions import Fraction

import numpy as np
import pytest

from pylazyset import Zonotope, box_approximation, diameter, norm, radius
from pylazyset.common import check_matrices_are_equal_ignoring_row_order


def test_vertices():
    Z = Zonotope(c=[1.0, 0.0], G=0.1 * np.eye(2))
    V = Z.vertices()
    assert check_matrices_are_equal_ignoring_row_order(V, [[1.1, 0.1], [1.1, -0.1], [0.9, 0.1], [0.9, -0.1]])
    assert check_matrices_are_equal_ignoring_row_order(Z.vertices_list(), V)

    # Hexagon, where two sign combinations map to the interior point c
    Z = Zonotope(c=[0, 0], G=[[1, 0, 1], [0, 1, 1]])
    V = Z.vertices()
    assert check_matrices_are_equal_ignoring_row_order(V, [[2, 2], [0, 2], [-2, 0], [-2, -2], [0, -2], [2, 0]])

    # Single point
    Z = Zonotope(c=[1, 2])
    assert np.allclose(Z.vertices(), [[1, 2]])
    # Segments in R^1 and R^2
    Z = Zonotope(c=[1], G=[[1, 2]])
    assert check_matrices_are_equal_ignoring_row_order(Z.vertices(), [[-2], [4]])
    Z = Zonotope(c=[0, 0], G=[[1], [1]])
    assert check_matrices_are_equal_ignoring_row_order(Z.vertices(), [[1, 1], [-1, -1]])
    Z = Zonotope(c=[0, 0], G=[[1, 1], [1, 1]])
    assert check_matrices_are_equal_ignoring_row_order(Z.vertices(), [[2, 2], [-2, -2]])
    # Flat zonotope in R^3
    Z = Zonotope(c=[0, 0, 1], G=[[1, 0], [0, 1], [0, 0]])
    assert check_matrices_are_equal_ignoring_row_order(
        Z.vertices(), [[1, 1, 1], [1, -1, 1], [-1, 1, 1], [-1, -1, 1]]
    )


def test_vertices_guard():
    rng = np.random.default_rng(3)
    Z = Zonotope(c=np.zeros((2,)), G=rng.standard_normal((2, 17)))
    with pytest.raises(ValueError):
        Z.vertices()
    with pytest.raises(ValueError):
        Z.vertices(max_generators=4)
    Z = Zonotope(c=np.zeros((2,)), G=rng.standard_normal((2, 5)))
    with pytest.raises(ValueError):
        Z.vertices(max_generators=4)
    # A zonotope in R^2 with p generators in general position has 2p vertices
    assert Z.vertices(max_generators=5).shape == (10, 2)


def test_reduce_order():
    rng = np.random.default_rng(4)
    G = rng.standard_normal((2, 6))
    Z = Zonotope(c=[1, -1], G=G)
    assert Z.order == 3

    # Reduce to a box
    Z_reduced = Z.reduce_order(1)
    assert Z_reduced.n_generators == 2
    assert Z_reduced.order == 1
    assert np.allclose(Z_reduced.c, Z.c)
    assert np.allclose(Z_reduced.G, np.diag(np.sum(np.abs(G), axis=1)))
    assert np.allclose(Z_reduced.G, Z.interval_hull().G)

    # Reduced zonotope contains the original zonotope
    for r in [1, 1.5, 2, 2.5]:
        Z_reduced = Z.reduce_order(r)
        assert Z_reduced.n_generators <= int(np.floor(r * Z.dim))
        assert np.all(Z_reduced.contains(Z.vertices()))
        for direction in rng.standard_normal((10, 2)):
            assert Z_reduced.support_function(direction) >= Z.support_function(direction) - 1e-8
        # Idempotence
        Z_reduced_again = Z_reduced.reduce_order(r)
        assert np.allclose(Z_reduced_again.G, Z_reduced.G)
        assert np.allclose(Z_reduced_again.c, Z_reduced.c)

    # No reduction when the order is already small enough
    for r in [3, 4, 10.5]:
        Z_reduced = Z.reduce_order(r)
        assert np.allclose(Z_reduced.G, Z.G)
        assert np.allclose(Z_reduced.c, Z.c)


def test_reduce_order_keeps_generator_order():
    # h = ||g||_1 - ||g||_inf is 1 for g1, g3, g5 and 0 for g2, g4
    G = np.array([[1, 1, 2, 0, 1], [1, 0, 1, 3, 2]])
    Z = Zonotope(c=[0, 0], G=G)
    Z_reduced = Z.reduce_order(2)
    # Reduce g2, g4, g1 (stable sort), and keep g3, g5 in the original order followed by the box
    assert np.allclose(Z_reduced.G, [[2, 1, 2, 0], [1, 2, 0, 4]])
    assert Z_reduced.n_generators == 4


def test_reduce_order_with_rational_order():
    rng = np.random.default_rng(6)
    Z = Zonotope(c=np.zeros((5,)), G=rng.standard_normal((5, 7)))
    # m = 7 - floor(5 * (6/5 - 1)) = 6 reduced generators, 1 kept generator, and 5 box generators
    for r in [Fraction(6, 5), 1.2, np.float64(1.2)]:
        Z_reduced = Z.reduce_order(r)
        assert Z_reduced.n_generators == 6
        assert Z_reduced.order == Fraction(6, 5)
    # r * d = 7 generators already meets the target
    assert Z.reduce_order(Fraction(7, 5)).n_generators == 7
    assert Z.reduce_order(1.4).n_generators == 7
    # The order of a zonotope is a valid target for itself
    assert np.allclose(Z.reduce_order(Z.order).G, Z.G)
    Z_reduced = Z.reduce_order(Fraction(6, 5))
    assert np.allclose(Z_reduced.reduce_order(Z_reduced.order).G, Z_reduced.G)
    # Integer types are used exactly
    assert Z.reduce_order(np.int64(1)).n_generators == 5
    rng = np.random.default_rng(7)
    Z = Zonotope(c=np.zeros((7,)), G=rng.standard_normal((7, 14)))
    assert Z.reduce_order(Fraction(12, 7)).n_generators == 12


def test_reduce_order_edge_cases():
    Z = Zonotope(c=[0, 0], G=[[1, 0, 1], [0, 1, 1]])
    with pytest.warns(UserWarning):
        Z_reduced = Z.reduce_order(0.5)
    assert np.allclose(Z_reduced.G, np.diag([2, 2]))
    with pytest.raises(ValueError):
        Z.reduce_order(-1)
    with pytest.raises(ValueError):
        Z.reduce_order(np.inf)
    with pytest.raises(ValueError):
        Z.reduce_order(np.nan)
    with pytest.raises(ValueError):
        Z.reduce_order("char")
    with pytest.raises(ValueError):
        Z.reduce_order([1, 2])
    # Zonotopes without generators are left untouched
    Z = Zonotope(c=[1, 2])
    assert Z.reduce_order(1).n_generators == 0


def test_interval_hull_and_box_approximation():
    Z = Zonotope(c=[1, 1], G=[[1, 0, 1], [0, 1, 1]])
    Z_box = Z.interval_hull()
    assert np.allclose(Z_box.c, [1, 1])
    assert np.allclose(Z_box.G, np.diag([2, 2]))
    lb, ub = Z.minimum_volume_circumscribing_rectangle()
    assert np.allclose(lb, [-1, -1])
    assert np.allclose(ub, [3, 3])
    lb_alt, ub_alt = box_approximation(Z)
    assert np.allclose(lb_alt, lb)
    assert np.allclose(ub_alt, ub)
    # Box approximation matches the interval hull
    rng = np.random.default_rng(5)
    Z = Zonotope(c=rng.standard_normal((3,)), G=rng.standard_normal((3, 7)))
    lb, ub = box_approximation(Z)
    Z_box = Z.interval_hull()
    assert np.allclose(lb, Z_box.c - np.diag(Z_box.G))
    assert np.allclose(ub, Z_box.c + np.diag(Z_box.G))


def test_norm_radius_diameter():
    Z = Zonotope(c=[1.0, 0.0], G=0.1 * np.eye(2))
    assert np.isclose(norm(Z), 1.1)
    assert np.isclose(Z.norm(), 1.1)
    assert np.isclose(norm(Z, p=1), 1.2)
    assert np.isclose(norm(Z, p=2), np.linalg.norm([1.1, 0.1]))
    assert np.isclose(radius(Z), 0.1)
    assert np.isclose(Z.radius(p=2), np.sqrt(2) * 0.1)
    assert np.isclose(diameter(Z), 0.2)
    assert np.isclose(Z.diameter(p=1), 0.4)
    assert np.isclose(norm(Zonotope(c=[-3, 1])), 3)
    assert np.isclose(radius(Zonotope(c=[-3, 1])), 0)
    with pytest.raises(ValueError):
        norm(Z, p=3)
    with pytest.raises(ValueError):
        radius(Z, p="fro")
