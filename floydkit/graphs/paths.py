"""
Path reconstruction from a next-hop matrix.
"""

from typing import TYPE_CHECKING, List, Optional, Sequence

import numpy as np

from ..errors import InternalConsistencyError
from .matrix import NO_HOP

if TYPE_CHECKING:
    from .core import Graph


def reconstruct_path(next_hop: np.ndarray, start: int, end: int) -> Optional[List[int]]:
    """
    Walk next hops from ``start`` until ``end`` is reached.

    The caller is expected to have ruled out negative cycles. The matrix is
    only read.

    Args:
        next_hop: ``(V, V)`` matrix where ``next_hop[i][j]`` is the vertex after
            ``i`` on the recorded path to ``j``, or ``-1``.
        start: First vertex of the path.
        end: Last vertex of the path.

    Returns:
        ``[start, ..., end]``, ``[start]`` when ``start == end``, or None if
        ``next_hop[start][end]`` is unset.

    Raises:
        InternalConsistencyError: If the walk meets an unset or out-of-range
            hop, or needs more than V steps.

    Example:
        >>> next_hop = np.array([[0, 1, 1], [-1, 1, 2], [-1, -1, 2]])
        >>> reconstruct_path(next_hop, 0, 2)
        [0, 1, 2]
    """
    n = next_hop.shape[0]
    if int(next_hop[start, end]) == NO_HOP:
        return None

    path = [start]
    current = start
    steps = 0
    while current != end:
        if steps >= n:
            raise InternalConsistencyError(
                f"Path walk from {start} to {end} exceeded {n} steps; "
                f"next-hop matrix is corrupted (partial walk {path[:10]}...)"
            )
        hop = int(next_hop[current, end])
        if hop == NO_HOP or not 0 <= hop < n:
            raise InternalConsistencyError(
                f"Path walk from {start} to {end} reached vertex {current} "
                f"with invalid next hop {hop}"
            )
        path.append(hop)
        current = hop
        steps += 1
    return path


def path_weight(graph: "Graph", path: Sequence[int]) -> int:
    """
    Sum the edge weights along ``path``.

    Raises:
        InternalConsistencyError: If two consecutive vertices are not joined
            by an edge.
    """
    total = 0
    for u, v in zip(path, path[1:]):
        weight = graph.weight(u, v)
        if weight is None:
            raise InternalConsistencyError(f"Path {list(path)} uses missing edge ({u}, {v})")
        total += weight
    return total
