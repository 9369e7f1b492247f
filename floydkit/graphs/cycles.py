"""
Negative-cycle detection.

After relaxation, ``dist[i][i] < 0`` marks vertices that close a negative-weight
walk; every vertex of a negative simple cycle is marked. Once any vertex is
marked every distance is unusable.
"""

from typing import TYPE_CHECKING, List, Optional, Tuple

import numpy as np

if TYPE_CHECKING:
    from .core import Graph


def negative_cycle_vertices(dist: np.ndarray) -> Tuple[int, ...]:
    """Return the vertices with a negative self-distance, in ascending order."""
    if dist.size == 0:
        return ()
    return tuple(int(i) for i in np.flatnonzero(np.diagonal(dist) < 0))


def has_negative_cycle(dist: np.ndarray) -> bool:
    """Return True if any diagonal entry of ``dist`` is negative."""
    return dist.size > 0 and bool(np.any(np.diagonal(dist) < 0))


def find_negative_cycle(graph: "Graph") -> Optional[List[int]]:
    """
    Extract one explicit negative-weight cycle.

    Runs Bellman-Ford from a virtual source joined to every vertex with weight
    0. If the V-th round still relaxes an edge, following predecessors V times
    from that edge's target lands on a cycle, which is then walked once.

    Args:
        graph: Graph to inspect.

    Returns:
        The cycle as a vertex list whose first vertex is repeated at the end
        (e.g. ``[0, 1, 2, 0]``), or None if the graph has no negative cycle.

    Complexity: O(VE).

    Example:
        >>> g = Graph.from_edges(3, [(0, 1, 1), (1, 2, -5), (2, 0, 1)])
        >>> find_negative_cycle(g)
        [0, 1, 2, 0]
    """
    n = graph.num_vertices
    edges = graph.edges()
    dist = [0] * n
    parent: List[Optional[int]] = [None] * n

    last_relaxed: Optional[int] = None
    for _ in range(n):
        last_relaxed = None
        for u, v, weight in edges:
            if dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                parent[v] = u
                last_relaxed = v
        if last_relaxed is None:
            return None

    if last_relaxed is None:
        return None

    # Step back V times to make sure we are on the cycle itself.
    x = last_relaxed
    for _ in range(n):
        x = parent[x]

    cycle = [x]
    current = parent[x]
    while current != x:
        cycle.append(current)
        current = parent[current]
    cycle.append(x)
    cycle.reverse()

    # Rotate so the smallest vertex leads, for a stable answer.
    body = cycle[:-1]
    start = body.index(min(body))
    body = body[start:] + body[:start]
    return body + [body[0]]
