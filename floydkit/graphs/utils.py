"""
Utility functions for working with labeled graphs.

The engine works on integer vertices; these helpers map arbitrary hashable
labels onto ``0..n-1`` and back.
"""

from typing import Dict, Hashable, Iterable, List, Tuple

from .core import Graph


def node_index_map(nodes: Iterable[Hashable]) -> Tuple[Dict[Hashable, int], List[Hashable]]:
    """
    Create deterministic mapping from nodes to indices 0..n-1.

    Nodes are sorted by string representation for deterministic ordering.

    Args:
        nodes: Iterable of hashable nodes; duplicates are collapsed.

    Returns:
        Tuple of (node_to_index dict, index_to_node list).

    Example:
        >>> node_to_idx, idx_to_node = node_index_map(['c', 'a', 'b'])
        >>> node_to_idx
        {'a': 0, 'b': 1, 'c': 2}
        >>> idx_to_node
        ['a', 'b', 'c']
    """
    ordered = sorted(set(nodes), key=str)
    return {node: idx for idx, node in enumerate(ordered)}, ordered


def graph_from_labeled_edges(
    nodes: Iterable[Hashable],
    edges: Iterable[Tuple[Hashable, Hashable, int]],
) -> Tuple[Graph, List[Hashable]]:
    """
    Build an integer Graph from labeled ``(u, v, weight)`` edges.

    Args:
        nodes: All node labels (edge endpoints must be among them).
        edges: Directed labeled edges; later duplicates win.

    Returns:
        Tuple of (graph, index_to_node list).

    Raises:
        ValueError: If an edge references a node missing from ``nodes``.
    """
    node_to_idx, idx_to_node = node_index_map(nodes)
    graph = Graph(len(idx_to_node))
    for u, v, weight in edges:
        if u not in node_to_idx or v not in node_to_idx:
            missing = u if u not in node_to_idx else v
            raise ValueError(f"Edge ({u!r}, {v!r}) references unknown node {missing!r}")
        graph.add_edge(node_to_idx[u], node_to_idx[v], weight)
    return graph, idx_to_node
