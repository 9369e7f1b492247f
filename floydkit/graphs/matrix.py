"""
Distance and next-hop matrix storage.

Distances live in ``int64`` numpy arrays. Unreachable pairs hold the sentinel
``INF``, chosen so that adding two finite entries never overflows ``int64``;
relaxation floors every candidate at ``-INF`` for the same reason. Code outside
this package should not compare against ``INF`` and goes through
:func:`is_reachable_value` or :func:`finite_mask` instead.
"""

from typing import TYPE_CHECKING, Tuple

import numpy as np

if TYPE_CHECKING:
    from .core import Graph

INF: int = 2**62
NEG_FLOOR: int = -INF
NO_HOP: int = -1


def is_reachable_value(value: int) -> bool:
    """Return True if a distance entry denotes an existing path."""
    return int(value) < INF


def finite_mask(dist: np.ndarray) -> np.ndarray:
    """Boolean mask of the entries of ``dist`` that denote existing paths."""
    return dist < INF


def empty_matrices(n: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Allocate an ``n x n`` distance matrix and next-hop matrix.

    The diagonal is 0 with ``next[i][i] = i``; every other distance is ``INF``
    with no next hop.
    """
    dist = np.full((n, n), INF, dtype=np.int64)
    next_hop = np.full((n, n), NO_HOP, dtype=np.int64)
    if n:
        np.fill_diagonal(dist, 0)
        np.fill_diagonal(next_hop, np.arange(n, dtype=np.int64))
    return dist, next_hop


def initial_matrices(graph: "Graph") -> Tuple[np.ndarray, np.ndarray]:
    """
    Build the relaxation input for ``graph``.

    Every direct edge ``(u, v, w)`` sets ``dist[u][v] = w`` and
    ``next[u][v] = v``. A self-loop only lowers the diagonal: a negative loop
    seeds cycle detection, a non-negative one leaves ``dist[u][u] = 0``.

    Args:
        graph: Graph whose edges seed the matrices.

    Returns:
        Tuple of (dist, next_hop) ``int64`` arrays of shape ``(V, V)``.
    """
    dist, next_hop = empty_matrices(graph.num_vertices)
    for u, v, weight in graph.edges():
        if u == v:
            if weight < 0:
                dist[u, u] = weight
            continue
        dist[u, v] = weight
        next_hop[u, v] = v
    return dist, next_hop


def freeze(array: np.ndarray) -> np.ndarray:
    """Mark an array read-only and return it."""
    array.setflags(write=False)
    return array
