"""
Exception types raised by the shortest path engine.

Unreachable pairs are not errors: queries report them with ``None``. The
classes below cover the remaining outcomes a caller has to tell apart.
"""

from typing import Iterable, Tuple


class FloydkitError(Exception):
    """Base class for every floydkit error."""


class InvalidVertexError(FloydkitError, IndexError):
    """A vertex index outside ``[0, V)`` was passed to the graph or a query."""

    def __init__(self, vertex: object, num_vertices: int, role: str = "vertex"):
        self.vertex = vertex
        self.num_vertices = num_vertices
        self.role = role
        super().__init__(
            f"{role} {vertex!r} is out of range for a graph with "
            f"{num_vertices} vertices (expected 0 <= {role} < {num_vertices})"
        )


class NegativeCycleError(FloydkitError):
    """
    The graph contains a negative-weight cycle.

    Shortest distances are undefined once a negative cycle exists, so distance
    and path queries refuse to answer. ``vertices`` lists every vertex whose
    self-distance went negative.
    """

    def __init__(self, vertices: Iterable[object]):
        self.vertices: Tuple[object, ...] = tuple(vertices)
        super().__init__(
            f"Negative-weight cycle detected through vertices {list(self.vertices)}; "
            f"shortest distances are undefined."
        )


class InternalConsistencyError(FloydkitError, RuntimeError):
    """The computed matrices violate an invariant of the algorithm."""


class SolveCancelledError(FloydkitError):
    """A solve was stopped through its cancellation token."""

    def __init__(self, phase: int, num_phases: int):
        self.phase = phase
        self.num_phases = num_phases
        super().__init__(f"Solve cancelled before phase {phase} of {num_phases}.")


__all__ = [
    "FloydkitError",
    "InvalidVertexError",
    "NegativeCycleError",
    "InternalConsistencyError",
    "SolveCancelledError",
]
