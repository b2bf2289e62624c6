# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
#
# SPDX-License-Identifier: AGPL-3.0-or-later

# Code purpose: Test the Hyperplane and Line classes

import numpy as np
import pytest

from pylazyset import Hyperplane, LazySet, Line, box_approximation, is_hyperplane, norm, support_function


def _check_support_vector_of_hyperplane(hp):
    d1 = np.array(hp.a)
    assert hp.support_vector(d1) in hp
    assert hp.support_vector(2 * d1) in hp
    assert hp.support_vector(-d1) in hp
    with pytest.raises(ValueError):
        hp.support_vector([1, 0, 0])
    with pytest.raises(ValueError):
        hp.support_vector([1, 1, 2])
    assert hp.support_vector(np.zeros((3,))) in hp


def test_hyperplane():
    hp = Hyperplane(np.ones((3,)), 5)
    assert hp.dim == 3
    assert isinstance(hp, LazySet)
    assert is_hyperplane(hp)
    assert np.allclose(hp.a, [1, 1, 1])
    assert hp.b == 5
    _check_support_vector_of_hyperplane(hp)
    _check_support_vector_of_hyperplane(Hyperplane([0, 0, 1], 5))

    # an_element is on the hyperplane
    assert hp.an_element() in hp
    assert np.allclose(hp.an_element(), [5, 0, 0])
    hp_alt = Hyperplane([0, 2, 1], 4)
    assert np.allclose(hp_alt.an_element(), [0, 2, 0])
    assert hp_alt.contains(hp_alt.an_element())

    # Support function is finite along the normal
    assert np.isclose(support_function(hp.a, hp), 5)
    assert np.isclose(support_function(-hp.a, hp), -5)
    support_values, support_vectors = hp.support([[1, 1, 1], [2, 2, 2]])
    assert np.allclose(support_values, [5, 10])
    assert np.all(hp.contains(support_vectors))
    assert np.allclose(hp.extreme([1, 1, 1]), [hp.an_element()])
    with pytest.raises(ValueError):
        hp.support([[1, 1, 1], [1, 0, 0]])

    # Unbounded sets have no box approximation
    with pytest.raises(ValueError):
        box_approximation(hp)
    with pytest.raises(ValueError):
        norm(hp)

    assert str(hp) == "Hyperplane in R^3"
    assert "normal vector" in repr(hp)


def test_hyperplane_contains():
    hp = Hyperplane([1, 1, 1], 5)
    assert hp.contains([1, 2, 2])
    assert [5, 0, 0] in hp
    assert [0, 0, 0] not in hp
    assert np.all(hp.contains([[1, 2, 2], [0, 0, 0], [5, 5, -5]]) == [True, False, True])
    with pytest.raises(ValueError):
        hp.contains([1, 2])
    with pytest.raises(ValueError):
        hp.contains("char")


def test_hyperplane_init_errors():
    with pytest.raises(ValueError):
        Hyperplane([0, 0, 0], 1)
    with pytest.raises(ValueError):
        Hyperplane([1, np.nan], 1)
    with pytest.raises(ValueError):
        Hyperplane([1, 1], np.inf)
    with pytest.raises(ValueError):
        Hyperplane([1, 1], [1, 2])
    with pytest.raises(ValueError):
        Hyperplane([[1, 1], [1, 0]], 1)
    with pytest.raises(ValueError):
        Hyperplane("char", 1)
    hp = Hyperplane([1, 1], 1)
    with pytest.raises(ValueError):
        hp.a[0] = 2
    with pytest.raises(AttributeError):
        hp.b = 2


def test_line():
    # y = -x + 1
    L = Line([1, 1], 1)
    assert L.dim == 2
    assert isinstance(L, LazySet)
    assert is_hyperplane(L)
    assert np.allclose(L.an_element(), [0, 1])
    assert L.an_element() in L
    assert L.contains([1, 0])
    assert not L.contains([1, 1])
    assert np.all(L.contains([[1, 0], [0.5, 0.5], [0, 0]]) == [True, True, False])

    # Vertical and horizontal lines, and lines through the origin
    L = Line([0, 2], 4)
    assert np.allclose(L.an_element(), [1, 2])
    assert L.an_element() in L
    L = Line([3, 0], 6)
    assert np.allclose(L.an_element(), [2, 1])
    assert L.an_element() in L
    L = Line([1, -1], 0)
    assert np.allclose(L.an_element(), [0, 0])
    assert [2, 2] in L

    # Support vector along the normal
    L = Line([1, 1], 1)
    assert L.support_vector([1, 1]) in L
    assert L.support_vector([-3, -3]) in L
    assert L.support_vector([0, 0]) in L
    assert np.isclose(support_function([2, 2], L), 2)
    with pytest.raises(ValueError):
        L.support_vector([1, 0])
    with pytest.raises(ValueError):
        L.support_vector([1, 1, 1])
    support_values, support_vectors = L.support([[1, 1]])
    assert np.allclose(support_values, [1])
    assert np.allclose(L.extreme([[1, 1]]), support_vectors)

    assert str(L) == "Line in R^2"
    assert "normal vector" in repr(L)


def test_line_init_errors():
    with pytest.raises(ValueError):
        Line([1, 1, 1], 1)
    with pytest.raises(ValueError):
        Line([1], 1)
    with pytest.raises(ValueError):
        Line([0, 0], 1)
    with pytest.raises(ValueError):
        Line([1, np.inf], 1)
