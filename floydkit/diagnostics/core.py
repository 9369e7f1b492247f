"""Invariant checks for solved distance and next-hop matrices."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from ..errors import InternalConsistencyError
from ..graphs.matrix import NO_HOP, finite_mask

if TYPE_CHECKING:
    from ..graphs.core import Graph


def triangle_violations(dist: np.ndarray) -> int:
    """
    Count triples ``(i, k, j)`` with ``dist[i][j] > dist[i][k] + dist[k][j]``.

    Only triples where both ``i -> k`` and ``k -> j`` are reachable are
    considered. Meaningful only for matrices without negative cycles.

    Parameters
    ----------
    dist:
        Solved ``(V, V)`` int64 distance matrix.

    Returns
    -------
    int
        Number of violating triples (0 for a correct matrix).
    """
    finite = finite_mask(dist)
    safe = np.where(finite, dist, 0)
    violations = 0
    for k in range(dist.shape[0]):
        both = finite[:, k, None] & finite[None, k, :]
        through_k = safe[:, k, None] + safe[None, k, :]
        violations += int(np.count_nonzero(both & (through_k < dist)))
    return violations


def check_triangle_inequality(dist: np.ndarray) -> None:
    """
    Raise if the triangle inequality fails anywhere in ``dist``.

    Raises
    ------
    InternalConsistencyError
        If at least one triple violates the inequality.
    """
    violations = triangle_violations(dist)
    if violations:
        raise InternalConsistencyError(
            f"Distance matrix violates the triangle inequality in {violations} triples."
        )


def check_next_hops(graph: "Graph", dist: np.ndarray, next_hop: np.ndarray) -> None:
    """
    Check that next hops agree with the distances.

    For every ordered pair ``i != j``: ``next[i][j]`` is unset exactly when
    ``j`` is unreachable from ``i``; otherwise ``h = next[i][j]`` is joined to
    ``i`` by an edge and ``dist[i][j] == w(i, h) + dist[h][j]``.

    Raises
    ------
    InternalConsistencyError
        On the first pair that breaks the rule.
    """
    n = dist.shape[0]
    finite = finite_mask(dist)
    for i in range(n):
        for j in range(n):
            if i == j:
                continue
            hop = int(next_hop[i, j])
            if not finite[i, j]:
                if hop != NO_HOP:
                    raise InternalConsistencyError(
                        f"Pair ({i}, {j}) is unreachable but has next hop {hop}."
                    )
                continue
            if hop == NO_HOP:
                raise InternalConsistencyError(f"Pair ({i}, {j}) is reachable but has no next hop.")
            weight = graph.weight(i, hop)
            if weight is None:
                raise InternalConsistencyError(
                    f"Next hop {hop} of pair ({i}, {j}) is not a successor of {i}."
                )
            rest = int(dist[hop, j]) if hop != j else 0
            if int(dist[i, j]) != weight + rest:
                raise InternalConsistencyError(
                    f"dist[{i}][{j}] = {int(dist[i, j])} but edge ({i}, {hop}) plus "
                    f"dist[{hop}][{j}] gives {weight + rest}."
                )
