"""floydkit - all-pairs shortest paths with Floyd-Warshall."""

__version__ = "0.1.0"

# Graph engine
from .graphs import (
    CancellationToken,
    Graph,
    ShortestPaths,
    Status,
    bellman_ford,
    closure_from_adjacency,
    find_negative_cycle,
    floyd_warshall,
    graph_from_labeled_edges,
    has_negative_cycle,
    initial_matrices,
    is_reachable_value,
    mutually_reachable,
    negative_cycle_vertices,
    node_index_map,
    path_weight,
    reconstruct_path,
    relax,
    solve,
    strongly_connected_components,
    transitive_closure,
)

# Configuration and devices
from .config import SolverConfig, default_config
from .core import Device, default_device, device

# Diagnostics
from .diagnostics import (
    check_next_hops,
    check_triangle_inequality,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
    triangle_violations,
)

# Errors
from .errors import (
    FloydkitError,
    InternalConsistencyError,
    InvalidVertexError,
    NegativeCycleError,
    SolveCancelledError,
)

__all__ = [
    "__version__",
    # Graph engine
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
    # Configuration and devices
    "SolverConfig",
    "default_config",
    "Device",
    "device",
    "default_device",
    # Diagnostics
    "triangle_violations",
    "check_triangle_inequality",
    "check_next_hops",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Errors
    "FloydkitError",
    "InvalidVertexError",
    "NegativeCycleError",
    "InternalConsistencyError",
    "SolveCancelledError",
]
