"""
Floyd-Warshall relaxation engine.

Phase ``k`` allows vertex ``k`` as an intermediate: every pair ``(i, j)`` with
``dist[i][k] + dist[k][j] < dist[i][j]`` takes the shorter distance and the
first hop of ``i -> k``. Phases must run in order ``k = 0..V-1``; within one
phase the rows are independent, which is what the threaded and tensor
strategies exploit. Comparisons are strict, so the first minimal path found
is kept.

Row ``k`` and column ``k`` are left alone during phase ``k``. When
``dist[k][k] >= 0`` they cannot improve anyway, and when it is negative
skipping them keeps a single negative self-loop at its own weight instead of
doubling it. Row ``k`` and column ``k`` are therefore stable for the whole
phase, so every strategy reads the same operands and produces the same
matrices, negative cycles included.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.2 (Floyd-Warshall).
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict, List, Optional, Sequence

import numpy as np
import torch

from ..config import SolverConfig
from ..core.device import device as make_device
from ..logging import get_logger
from .cancellation import CancellationToken
from .matrix import INF, NEG_FLOOR

logger = get_logger(__name__)


def _check_cancel(token: Optional[CancellationToken], k: int, n: int) -> None:
    if token is not None:
        token.raise_if_cancelled(k, n)


def _relax_row(
    row_i: List[int],
    next_i: List[int],
    dik: int,
    hop: int,
    row_k: Sequence[int],
    k: int,
) -> None:
    # Inner loop of one (i, k) step: update row i through k.
    for j, dkj in enumerate(row_k):
        if dkj >= INF or j == k:
            continue
        candidate = dik + dkj
        if candidate < NEG_FLOOR:
            candidate = NEG_FLOOR
        if candidate < row_i[j]:
            row_i[j] = candidate
            next_i[j] = hop


def relax_sequential(
    dist: np.ndarray,
    next_hop: np.ndarray,
    config: SolverConfig,
    token: Optional[CancellationToken] = None,
) -> None:
    """
    Run the textbook triple loop with ``k`` outermost.

    Rows with ``dist[i][k]`` unreachable are skipped, as are columns with
    ``dist[k][j]`` unreachable. Works on Python lists and writes the result
    back into ``dist`` and ``next_hop`` only after the last phase.
    """
    n = dist.shape[0]
    d = dist.tolist()
    nx = next_hop.tolist()

    for k in range(n):
        _check_cancel(token, k, n)
        row_k = d[k]
        for i in range(n):
            dik = d[i][k]
            if dik >= INF or i == k:
                continue
            _relax_row(d[i], nx[i], dik, nx[i][k], row_k, k)

    dist[...] = d
    next_hop[...] = nx


def _row_partitions(n: int, parts: int) -> List[range]:
    """Split ``range(n)`` into at most ``parts`` contiguous, non-empty ranges."""
    parts = max(1, min(parts, n))
    base, extra = divmod(n, parts)
    ranges = []
    start = 0
    for p in range(parts):
        stop = start + base + (1 if p < extra else 0)
        ranges.append(range(start, stop))
        start = stop
    return ranges


def _relax_rows(
    d: List[List[int]],
    nx: List[List[int]],
    rows: range,
    k: int,
) -> None:
    row_k = d[k]
    for i in rows:
        dik = d[i][k]
        if dik >= INF or i == k:
            continue
        _relax_row(d[i], nx[i], dik, nx[i][k], row_k, k)


def relax_threaded(
    dist: np.ndarray,
    next_hop: np.ndarray,
    config: SolverConfig,
    token: Optional[CancellationToken] = None,
) -> None:
    """
    Barrier-synchronized row-parallel relaxation.

    Rows are split into contiguous blocks, one per worker, so every cell has a
    single writer. Row ``k`` and column ``k`` are not written during phase
    ``k``, so workers read them in place. Every block must finish phase ``k``
    before any block starts phase ``k + 1``.
    """
    n = dist.shape[0]
    if n == 0:
        return
    d = dist.tolist()
    nx = next_hop.tolist()
    blocks = _row_partitions(n, config.resolved_workers())

    with ThreadPoolExecutor(
        max_workers=len(blocks), thread_name_prefix="floydkit-relax"
    ) as pool:
        for k in range(n):
            _check_cancel(token, k, n)
            futures = [pool.submit(_relax_rows, d, nx, rows, k) for rows in blocks]
            # Barrier: result() re-raises any worker failure.
            for future in futures:
                future.result()

    dist[...] = d
    next_hop[...] = nx


def relax_tensor(
    dist: np.ndarray,
    next_hop: np.ndarray,
    config: SolverConfig,
    token: Optional[CancellationToken] = None,
) -> None:
    """
    Vectorized relaxation: each phase is one masked torch update of the whole
    matrix on the configured device.

    Unreachable operands are replaced by 0 before the addition and masked out
    afterwards, so the sentinel never takes part in arithmetic.
    """
    n = dist.shape[0]
    if n == 0:
        return
    dev = make_device(config.device)
    torch_device = dev.as_torch_device()

    D = torch.as_tensor(dist, dtype=dev.dtype).to(torch_device).clone()
    P = torch.as_tensor(next_hop, dtype=dev.index_dtype).to(torch_device).clone()
    zero = torch.zeros((), dtype=dev.dtype, device=torch_device)
    idx = torch.arange(n, device=torch_device)

    for k in range(n):
        _check_cancel(token, k, n)
        col = D[:, k].clone().unsqueeze(1)
        row = D[k, :].clone().unsqueeze(0)
        hop = P[:, k].clone().unsqueeze(1)

        col_ok = (col < INF) & (idx != k).unsqueeze(1)
        row_ok = (row < INF) & (idx != k).unsqueeze(0)
        candidate = torch.where(col_ok, col, zero) + torch.where(row_ok, row, zero)
        candidate = torch.clamp(candidate, min=NEG_FLOOR)

        update = col_ok & row_ok & (candidate < D)
        D = torch.where(update, candidate, D)
        P = torch.where(update, hop, P)

    dist[...] = D.cpu().numpy()
    next_hop[...] = P.cpu().numpy()


RelaxFn = Callable[[np.ndarray, np.ndarray, SolverConfig, Optional[CancellationToken]], None]

_STRATEGIES: Dict[str, RelaxFn] = {
    "sequential": relax_sequential,
    "threaded": relax_threaded,
    "tensor": relax_tensor,
}


def relax(
    dist: np.ndarray,
    next_hop: np.ndarray,
    config: SolverConfig,
    token: Optional[CancellationToken] = None,
) -> None:
    """
    Relax ``dist`` and ``next_hop`` in place with the configured strategy.

    Args:
        dist: ``(V, V)`` int64 distance matrix from :func:`initial_matrices`.
        next_hop: ``(V, V)`` int64 next-hop matrix, ``-1`` where unset.
        config: Selects the execution strategy.
        token: Optional cancellation token, checked before every phase.

    Raises:
        ValueError: If the matrices are not square and of equal shape.
        SolveCancelledError: If the token is cancelled; the matrices are left
            unchanged in that case.
    """
    if dist.ndim != 2 or dist.shape[0] != dist.shape[1]:
        raise ValueError(f"dist must be a square matrix, got shape {dist.shape}")
    if next_hop.shape != dist.shape:
        raise ValueError(
            f"next_hop shape {next_hop.shape} does not match dist shape {dist.shape}"
        )
    n = dist.shape[0]
    if n == 0:
        return
    logger.debug("relaxing %d phases with the %s strategy", n, config.strategy)
    _STRATEGIES[config.strategy](dist, next_hop, config, token)
