"""
All-pairs shortest path solver and its query surface.

``solve`` runs the whole pipeline once: seed the matrices from the graph,
relax them, scan the diagonal for negative cycles and compute the
transitive closure. The returned ShortestPaths is a read-only snapshot; the
graph can keep changing without affecting it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Tuple

import numpy as np

from ..config import SolverConfig, default_config
from ..diagnostics import check_next_hops, check_triangle_inequality, is_debug_enabled
from ..errors import NegativeCycleError
from ..logging import get_logger
from .cancellation import CancellationToken
from .closure import mutually_reachable, strongly_connected_components, transitive_closure
from .core import check_index
from .cycles import negative_cycle_vertices
from .matrix import finite_mask, freeze, initial_matrices, is_reachable_value
from .paths import reconstruct_path
from .relaxation import relax

if TYPE_CHECKING:
    from .core import Graph

logger = get_logger(__name__)


class Status(Enum):
    """Outcome of a solve."""

    OK = "ok"
    NEGATIVE_CYCLE = "negative_cycle"


@dataclass(frozen=True, eq=False)
class ShortestPaths:
    """
    Result of an all-pairs shortest path computation.

    Attributes:
        distances: Read-only ``(V, V)`` int64 matrix. Unreachable pairs hold an
            internal sentinel; use :meth:`distance` or :meth:`distance_matrix`
            instead of reading it directly.
        next_hops: Read-only ``(V, V)`` int64 matrix, ``-1`` where unset.
        reachability: Read-only ``(V, V)`` boolean transitive closure.
        negative_cycle_vertices: Vertices with a negative self-distance.
        strategy: Name of the relaxation strategy that produced the result.
    """

    distances: np.ndarray
    next_hops: np.ndarray
    reachability: np.ndarray
    negative_cycle_vertices: Tuple[int, ...]
    strategy: str

    @property
    def num_vertices(self) -> int:
        return self.distances.shape[0]

    @property
    def has_negative_cycle(self) -> bool:
        return bool(self.negative_cycle_vertices)

    @property
    def status(self) -> Status:
        return Status.NEGATIVE_CYCLE if self.negative_cycle_vertices else Status.OK

    def _pair(self, i: int, j: int) -> Tuple[int, int]:
        n = self.num_vertices
        return check_index(i, n, "from"), check_index(j, n, "to")

    def _require_no_negative_cycle(self) -> None:
        if self.negative_cycle_vertices:
            raise NegativeCycleError(self.negative_cycle_vertices)

    def distance(self, i: int, j: int) -> Optional[int]:
        """
        Shortest distance from i to j.

        Returns:
            The distance, or None if j is unreachable from i.

        Raises:
            InvalidVertexError: If i or j is out of range.
            NegativeCycleError: If the graph has a negative cycle.
        """
        i, j = self._pair(i, j)
        self._require_no_negative_cycle()
        value = int(self.distances[i, j])
        return value if is_reachable_value(value) else None

    def path(self, i: int, j: int) -> Optional[List[int]]:
        """
        Vertices of a shortest path from i to j, both ends included.

        Returns:
            ``[i, ..., j]`` (``[i]`` when ``i == j``), or None if j is
            unreachable from i.

        Raises:
            InvalidVertexError: If i or j is out of range.
            NegativeCycleError: If the graph has a negative cycle.
            InternalConsistencyError: If the next-hop matrix is corrupted.
        """
        i, j = self._pair(i, j)
        self._require_no_negative_cycle()
        if not is_reachable_value(self.distances[i, j]):
            return None
        return reconstruct_path(self.next_hops, i, j)

    def reachable(self, i: int, j: int) -> bool:
        """
        Whether a path from i to j exists, ignoring weights.

        Answered from the transitive closure, so it stays available when the
        graph has a negative cycle.
        """
        i, j = self._pair(i, j)
        return bool(self.reachability[i, j])

    def mutually_reachable(self, i: int, j: int) -> bool:
        i, j = self._pair(i, j)
        return mutually_reachable(self.reachability, i, j)

    def strongly_connected_components(self) -> List[List[int]]:
        return strongly_connected_components(self.reachability)

    def distance_matrix(self) -> np.ndarray:
        """
        Distances as a new float matrix with ``inf`` for unreachable pairs.

        Raises:
            NegativeCycleError: If the graph has a negative cycle.
        """
        self._require_no_negative_cycle()
        return np.where(finite_mask(self.distances), self.distances.astype(float), np.inf)


def solve(
    graph: "Graph",
    config: Optional[SolverConfig] = None,
    token: Optional[CancellationToken] = None,
) -> ShortestPaths:
    """
    Compute all-pairs shortest paths of ``graph`` with Floyd-Warshall.

    A negative cycle does not raise here: it is reported through
    ``has_negative_cycle`` / ``status`` and the distance and path queries of
    the result refuse to answer.

    Args:
        graph: Graph to solve.
        config: Execution settings. None reads them from the environment
            (see :func:`floydkit.config.default_config`).
        token: Optional cancellation token, checked between phases.

    Returns:
        Immutable ShortestPaths snapshot.

    Raises:
        SolveCancelledError: If the token was cancelled.
        InternalConsistencyError: In debug mode, if the result fails its
            invariant checks.

    Complexity: O(V^3) time, O(V^2) memory.

    Example:
        >>> g = Graph(3)
        >>> g.add_edge(0, 1, 1)
        >>> g.add_edge(1, 2, 2)
        >>> g.add_edge(0, 2, 4)
        >>> result = solve(g)
        >>> result.distance(0, 2), result.path(0, 2)
        (3, [0, 1, 2])
    """
    if config is None:
        config = default_config()

    logger.debug(
        "solving %d vertices, %d edges (strategy=%s)",
        graph.num_vertices,
        graph.num_edges,
        config.strategy,
    )
    dist, next_hop = initial_matrices(graph)
    relax(dist, next_hop, config, token)

    cycle_vertices = negative_cycle_vertices(dist)
    if cycle_vertices:
        logger.warning(
            "negative cycle detected; %d vertices have a negative self-distance",
            len(cycle_vertices),
        )
    elif is_debug_enabled():
        check_triangle_inequality(dist)
        check_next_hops(graph, dist, next_hop)

    reach = transitive_closure(graph)
    return ShortestPaths(
        distances=freeze(dist),
        next_hops=freeze(next_hop),
        reachability=freeze(reach),
        negative_cycle_vertices=cycle_vertices,
        strategy=config.strategy,
    )
