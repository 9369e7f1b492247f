"""
Single-source shortest paths: Bellman-Ford.

Answers the same questions as one row of the all-pairs solver, in O(VE). Used
to cross-check the solver on sparse graphs and for single-source queries.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.1 (Bellman-Ford).
"""

from typing import List, Optional, Tuple

from .core import Graph


def bellman_ford(
    graph: Graph, source: int
) -> Tuple[List[Optional[int]], List[Optional[int]], bool]:
    """
    Bellman-Ford algorithm for single-source shortest paths.

    Args:
        graph: Graph (may have negative weights).
        source: Source vertex.

    Returns:
        Tuple of:
        - dist: ``dist[v]`` is the shortest distance from source, or None if
          v is unreachable
        - parent: ``parent[v]`` is the previous vertex on the shortest path,
          or None for the source and unreachable vertices
        - has_negative_cycle: True if a negative cycle is reachable from source

    Raises:
        InvalidVertexError: If source is not a vertex of the graph.

    Complexity: O(VE).

    Example:
        >>> g = Graph.from_edges(3, [(0, 1, 1), (1, 2, -2)])
        >>> dist, parent, has_cycle = bellman_ford(g, 0)
        >>> dist, has_cycle
        ([0, 1, -1], False)
    """
    source = graph.check_vertex(source, "source")
    n = graph.num_vertices
    edges = graph.edges()

    dist: List[Optional[int]] = [None] * n
    parent: List[Optional[int]] = [None] * n
    dist[source] = 0

    for _ in range(n - 1):
        changed = False
        for u, v, weight in edges:
            du = dist[u]
            if du is None:
                continue
            if dist[v] is None or du + weight < dist[v]:
                dist[v] = du + weight
                parent[v] = u
                changed = True
        if not changed:
            break

    has_negative_cycle = any(
        dist[u] is not None and (dist[v] is None or dist[u] + weight < dist[v])
        for u, v, weight in edges
    )
    return dist, parent, has_negative_cycle
