"""Solver configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

STRATEGIES = ("sequential", "threaded", "tensor")

_STRATEGY_ENV_VAR = "FLOYDKIT_STRATEGY"
_WORKERS_ENV_VAR = "FLOYDKIT_WORKERS"
_DEVICE_ENV_VAR = "FLOYDKIT_DEVICE"


@dataclass(frozen=True)
class SolverConfig:
    """
    How a solve runs. The strategy never changes the answer, only how the
    relaxation phases are executed.

    Args:
        strategy: "sequential" (plain triple loop), "threaded" (row partitions
            on a thread pool, synchronized after every phase) or "tensor"
            (one vectorized torch update per phase).
        num_workers: Thread count for the threaded strategy. None uses
            ``min(32, os.cpu_count() + 4)``.
        device: Device name for the tensor strategy ("cpu" or "cuda").
    """

    strategy: str = "sequential"
    num_workers: int | None = None
    device: str = "cpu"

    def __post_init__(self) -> None:
        """Validate SolverConfig invariants."""
        if self.strategy not in STRATEGIES:
            raise ValueError(
                f"Unsupported strategy: {self.strategy!r}. Supported strategies: {list(STRATEGIES)}"
            )
        if self.num_workers is not None and self.num_workers < 1:
            raise ValueError(f"num_workers must be >= 1, got {self.num_workers}.")
        if self.device not in ("cpu", "cuda"):
            raise ValueError(f"device must be 'cpu' or 'cuda', got {self.device!r}.")

    def resolved_workers(self) -> int:
        if self.num_workers is not None:
            return self.num_workers
        return min(32, (os.cpu_count() or 1) + 4)


def default_config() -> SolverConfig:
    """
    Build a SolverConfig from the environment.

    Reads FLOYDKIT_STRATEGY, FLOYDKIT_WORKERS and FLOYDKIT_DEVICE; unset
    variables keep the SolverConfig defaults.

    Raises:
        ValueError: If a variable holds an unsupported value.
    """
    strategy = os.getenv(_STRATEGY_ENV_VAR, "sequential").strip().lower()
    device = os.getenv(_DEVICE_ENV_VAR, "cpu").strip().lower()
    workers_raw = os.getenv(_WORKERS_ENV_VAR, "").strip()
    try:
        num_workers = int(workers_raw) if workers_raw else None
    except ValueError:
        raise ValueError(
            f"{_WORKERS_ENV_VAR} must be an integer, got {workers_raw!r}."
        ) from None
    return SolverConfig(strategy=strategy, num_workers=num_workers, device=device)
