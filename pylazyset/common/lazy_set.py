# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
#
# SPDX-License-Identifier: AGPL-3.0-or-later

# Code purpose:  Define the capability contract shared by all lazily-represented convex sets

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class LazySet(Protocol):
    r"""Capability contract for lazily-represented convex sets.

    A convex set :math:`\mathcal{S}\subseteq\mathbb{R}^n` is described implicitly through its support vector
    :math:`\sigma_{\mathcal{S}}(d) \in \arg\max_{x\in\mathcal{S}} d^\top x`. Every set type in pylazyset provides

    #. support_vector(direction) returning the support vector (numpy.ndarray) along direction, and
    #. dim, the ambient dimension :math:`n`.

    Set types satisfy this protocol structurally; they do not inherit from it. Use ``isinstance(S, LazySet)`` to check
    for the capability.
    """

    @property
    def dim(self) -> int: ...

    def support_vector(self, direction) -> np.ndarray: ...


def support_vector(direction, S):
    """Evaluate the support vector of the set S along the given direction.

    Args:
        direction (array_like): Support direction of length S.dim
        S (LazySet): Set

    Returns:
        numpy.ndarray: Support vector of S along direction.
    """
    return S.support_vector(direction)


def support_function(direction, S):
    r"""Evaluate the support function :math:`\rho_{\mathcal{S}}(d) = d^\top \sigma_{\mathcal{S}}(d)` of the set S along
    the given direction.

    Args:
        direction (array_like): Support direction of length S.dim
        S (LazySet): Set

    Returns:
        float: Support function of S along direction.
    """
    direction = np.atleast_1d(np.squeeze(direction)).astype(float)
    return float(direction @ S.support_vector(direction))
