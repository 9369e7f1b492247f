"""
Transitive closure and strongly connected components.

Uses the Floyd-Warshall recurrence over booleans (Warshall's algorithm):
``reach[i][j] |= reach[i][k] and reach[k][j]`` for ``k = 0..V-1``, vectorized
one phase at a time. Weights play no part, so the closure stays meaningful
when the graph has negative cycles.
"""

from typing import TYPE_CHECKING, List

import numpy as np

if TYPE_CHECKING:
    from .core import Graph


def adjacency_matrix(graph: "Graph") -> np.ndarray:
    """Boolean ``(V, V)`` matrix with True on the diagonal and for every edge."""
    n = graph.num_vertices
    reach = np.eye(n, dtype=bool)
    for u, v, _ in graph.edges():
        reach[u, v] = True
    return reach


def closure_from_adjacency(adjacency: np.ndarray) -> np.ndarray:
    """
    Transitive closure of a boolean adjacency matrix.

    Args:
        adjacency: Square boolean matrix; the diagonal is forced to True.

    Returns:
        New boolean matrix where ``result[i, j]`` means j is reachable from i.

    Complexity: O(V^3) element operations, O(V) numpy calls.
    """
    reach = np.array(adjacency, dtype=bool, copy=True)
    if reach.ndim != 2 or reach.shape[0] != reach.shape[1]:
        raise ValueError(f"adjacency must be a square matrix, got shape {reach.shape}")
    n = reach.shape[0]
    if n:
        np.fill_diagonal(reach, True)
    for k in range(n):
        reach |= np.outer(reach[:, k], reach[k, :])
    return reach


def transitive_closure(graph: "Graph") -> np.ndarray:
    """Reachability matrix of ``graph``."""
    return closure_from_adjacency(adjacency_matrix(graph))


def mutually_reachable(reach: np.ndarray, i: int, j: int) -> bool:
    """True if i reaches j and j reaches i."""
    return bool(reach[i, j] and reach[j, i])


def strongly_connected_components(reach: np.ndarray) -> List[List[int]]:
    """
    Partition vertices by mutual reachability.

    Quadratic in V given the closure matrix. Components are ordered by their
    smallest vertex and list their members in ascending order.

    Example:
        >>> reach = closure_from_adjacency(np.array([[0, 1, 0], [1, 0, 0], [0, 0, 0]], dtype=bool))
        >>> strongly_connected_components(reach)
        [[0, 1], [2]]
    """
    n = reach.shape[0]
    mutual = reach & reach.T
    assigned = np.zeros(n, dtype=bool)
    components: List[List[int]] = []
    for i in range(n):
        if assigned[i]:
            continue
        members = np.flatnonzero(mutual[i] & ~assigned)
        assigned[members] = True
        components.append([int(v) for v in members])
    return components
