"""
All-pairs shortest paths over labeled nodes.

A dictionary-based front end to the solver for callers whose nodes are not
already numbered ``0..n-1``.
"""

from typing import Dict, Hashable, Iterable, List, Optional, Tuple

from ..config import SolverConfig
from ..errors import NegativeCycleError
from .solver import solve
from .utils import graph_from_labeled_edges


def floyd_warshall(
    nodes: Iterable[Hashable],
    edges: Iterable[Tuple[Hashable, Hashable, int]],
    config: Optional[SolverConfig] = None,
) -> Tuple[
    Dict[Tuple[Hashable, Hashable], float],
    Dict[Tuple[Hashable, Hashable], Optional[List[Hashable]]],
]:
    """
    Floyd-Warshall algorithm for all-pairs shortest paths.

    Args:
        nodes: All nodes of the graph.
        edges: Iterable of (u, v, weight) tuples with integer weights. A
            repeated (u, v) pair keeps the last weight.
        config: Optional solver configuration.

    Returns:
        Tuple of:
        - dist: Dictionary mapping (u, v) -> shortest distance (int, or
          ``float("inf")`` if v is unreachable from u)
        - path: Dictionary mapping (u, v) -> list of nodes on a shortest path,
          or None if no path exists

    Raises:
        NegativeCycleError: If the graph contains a negative cycle; its
            ``vertices`` are node labels.
        ValueError: If an edge references an unknown node.

    Complexity: O(n^3) where n is number of nodes.

    Example:
        >>> dist, path = floyd_warshall(['A', 'B', 'C'], [('A', 'B', 1), ('B', 'C', 2)])
        >>> dist[('A', 'C')]
        3
        >>> path[('A', 'C')]
        ['A', 'B', 'C']
    """
    graph, idx_to_node = graph_from_labeled_edges(nodes, edges)
    result = solve(graph, config=config)
    if result.has_negative_cycle:
        raise NegativeCycleError(idx_to_node[i] for i in result.negative_cycle_vertices)

    dist: Dict[Tuple[Hashable, Hashable], float] = {}
    path: Dict[Tuple[Hashable, Hashable], Optional[List[Hashable]]] = {}
    for i, u in enumerate(idx_to_node):
        for j, v in enumerate(idx_to_node):
            d = result.distance(i, j)
            dist[(u, v)] = float("inf") if d is None else d
            indices = result.path(i, j)
            path[(u, v)] = None if indices is None else [idx_to_node[k] for k in indices]
    return dist, path
