"""
Core graph data structure.

Provides Graph, a directed graph over the integer vertices ``0..V-1`` with
integer edge weights. Vertices are fixed at construction; edges are added
incrementally and a repeated ``(u, v)`` pair keeps only the latest weight.
"""

from numbers import Integral
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Tuple

from ..errors import InvalidVertexError

if TYPE_CHECKING:
    import numpy as np

    from ..config import SolverConfig
    from .cancellation import CancellationToken
    from .solver import ShortestPaths

Edge = Tuple[int, int, int]  # (u, v, weight)

DEFAULT_MAX_ABS_WEIGHT = 2**31


def _require_int(value: object, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"{what} must be an integer, got {type(value).__name__}")
    return int(value)


def check_index(vertex: object, num_vertices: int, role: str = "vertex") -> int:
    """
    Validate a vertex index against ``[0, num_vertices)`` and return it as an int.

    Raises:
        TypeError: If vertex is not an integer.
        InvalidVertexError: If vertex is out of range.
    """
    index = _require_int(vertex, role)
    if not 0 <= index < num_vertices:
        raise InvalidVertexError(vertex, num_vertices, role)
    return index


class Graph:
    """
    Directed integer-weighted graph on a fixed vertex set.

    Attributes:
        num_vertices: Number of vertices V; vertices are ``0..V-1``.
        max_abs_weight: Largest accepted absolute edge weight.

    Complexity:
        - add_edge: O(1)
        - add_undirected_edge: O(1)
        - edges: O(E log E), sorted for determinism
        - solve: O(V^3)
    """

    def __init__(self, num_vertices: int, max_abs_weight: int = DEFAULT_MAX_ABS_WEIGHT):
        """
        Initialize a graph without edges.

        Args:
            num_vertices: Vertex count V (>= 0).
            max_abs_weight: Edge weights must satisfy ``|w| <= max_abs_weight``.

        Raises:
            TypeError: If num_vertices is not an integer.
            ValueError: If num_vertices is negative or max_abs_weight < 1.
        """
        num_vertices = _require_int(num_vertices, "num_vertices")
        if num_vertices < 0:
            raise ValueError(f"num_vertices must be >= 0, got {num_vertices}")
        max_abs_weight = _require_int(max_abs_weight, "max_abs_weight")
        if max_abs_weight < 1:
            raise ValueError(f"max_abs_weight must be >= 1, got {max_abs_weight}")

        self._num_vertices = num_vertices
        self.max_abs_weight = max_abs_weight
        self._weights: Dict[Tuple[int, int], int] = {}

    @classmethod
    def from_edges(
        cls,
        num_vertices: int,
        edges: Iterable[Tuple[int, int, int]],
        undirected: bool = False,
    ) -> "Graph":
        """
        Build a graph from an iterable of ``(u, v, weight)`` triples.

        Args:
            num_vertices: Vertex count V.
            edges: Edges to add in order (later duplicates win).
            undirected: If True, every edge is added in both directions.
        """
        graph = cls(num_vertices)
        add = graph.add_undirected_edge if undirected else graph.add_edge
        for u, v, weight in edges:
            add(u, v, weight)
        return graph

    @property
    def num_vertices(self) -> int:
        return self._num_vertices

    @property
    def num_edges(self) -> int:
        """Number of distinct directed ``(u, v)`` pairs carrying a weight."""
        return len(self._weights)

    def __repr__(self) -> str:
        return f"Graph(num_vertices={self._num_vertices}, num_edges={self.num_edges})"

    def check_vertex(self, vertex: object, role: str = "vertex") -> int:
        """Validate a vertex of this graph; see :func:`check_index`."""
        return check_index(vertex, self._num_vertices, role)

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """
        Add the directed edge ``u -> v``, replacing any earlier weight.

        Args:
            u: Source vertex.
            v: Target vertex.
            weight: Integer weight; may be negative or zero.

        Raises:
            InvalidVertexError: If u or v is outside ``[0, V)``.
            TypeError: If an argument is not an integer.
            ValueError: If ``|weight|`` exceeds max_abs_weight.
        """
        u = self.check_vertex(u, "from")
        v = self.check_vertex(v, "to")
        weight = _require_int(weight, "weight")
        if abs(weight) > self.max_abs_weight:
            raise ValueError(
                f"|weight| must be <= {self.max_abs_weight}, got {weight} on edge ({u}, {v})"
            )
        self._weights[(u, v)] = weight

    def add_undirected_edge(self, u: int, v: int, weight: int) -> None:
        """Add ``u -> v`` and ``v -> u`` with the same weight."""
        self.add_edge(u, v, weight)
        self.add_edge(v, u, weight)

    def remove_edge(self, u: int, v: int) -> None:
        """
        Remove the directed edge ``u -> v``.

        Raises:
            KeyError: If the edge does not exist.
        """
        u = self.check_vertex(u, "from")
        v = self.check_vertex(v, "to")
        if (u, v) not in self._weights:
            raise KeyError(f"Edge ({u}, {v}) not in graph")
        del self._weights[(u, v)]

    def has_edge(self, u: int, v: int) -> bool:
        return (self.check_vertex(u, "from"), self.check_vertex(v, "to")) in self._weights

    def weight(self, u: int, v: int) -> Optional[int]:
        """Return the weight of ``u -> v``, or None if there is no such edge."""
        return self._weights.get((self.check_vertex(u, "from"), self.check_vertex(v, "to")))

    def edges(self) -> List[Edge]:
        """Return all edges as ``(u, v, weight)`` sorted by ``(u, v)``."""
        return [(u, v, w) for (u, v), w in sorted(self._weights.items())]

    def successors(self, u: int) -> List[Tuple[int, int]]:
        """Return ``(v, weight)`` pairs for the edges leaving u, sorted by v."""
        u = self.check_vertex(u, "from")
        return sorted((v, w) for (src, v), w in self._weights.items() if src == u)

    def solve(
        self,
        config: Optional["SolverConfig"] = None,
        token: Optional["CancellationToken"] = None,
    ) -> "ShortestPaths":
        """Compute all-pairs shortest paths; see :func:`floydkit.graphs.solver.solve`."""
        from .solver import solve

        return solve(self, config=config, token=token)

    def transitive_closure(self) -> "np.ndarray":
        """Boolean reachability matrix; see :func:`floydkit.graphs.closure.transitive_closure`."""
        from .closure import transitive_closure

        return transitive_closure(self)

    def strongly_connected_components(self) -> List[List[int]]:
        """Group vertices by mutual reachability."""
        from .closure import strongly_connected_components

        return strongly_connected_components(self.transitive_closure())
