"""
All-pairs shortest path engine.

This package provides:
- Graph, a directed integer-weighted graph on vertices 0..V-1
- Floyd-Warshall relaxation with sequential, threaded and tensor strategies
- Negative-cycle detection and extraction
- Path reconstruction from next-hop matrices
- Transitive closure and strongly connected components
- A labeled-node front end and Bellman-Ford for single-source queries

Results are deterministic and identical across strategies.
"""

from .matrix import initial_matrices, is_reachable_value
from .core import Graph
from .cancellation import CancellationToken
from .relaxation import relax
from .cycles import find_negative_cycle, has_negative_cycle, negative_cycle_vertices
from .paths import path_weight, reconstruct_path
from .closure import (
    closure_from_adjacency,
    mutually_reachable,
    strongly_connected_components,
    transitive_closure,
)
from .solver import ShortestPaths, Status, solve
from .allpairs import floyd_warshall
from .shortest import bellman_ford
from .utils import graph_from_labeled_edges, node_index_map

__all__ = [
    "Graph",
    "CancellationToken",
    "ShortestPaths",
    "Status",
    "solve",
    "relax",
    "initial_matrices",
    "is_reachable_value",
    "negative_cycle_vertices",
    "has_negative_cycle",
    "find_negative_cycle",
    "reconstruct_path",
    "path_weight",
    "transitive_closure",
    "closure_from_adjacency",
    "mutually_reachable",
    "strongly_connected_components",
    "floyd_warshall",
    "bellman_ford",
    "node_index_map",
    "graph_from_labeled_edges",
]

# Example usage:
# from floydkit.graphs import Graph
#
# g = Graph(3)
# g.add_edge(0, 1, 1)
# g.add_edge(1, 2, 2)
# result = g.solve()
# result.distance(0, 2)  # 3
# result.path(0, 2)      # [0, 1, 2]
