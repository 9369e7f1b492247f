"""Cooperative cancellation for long-running solves."""

import threading

from ..errors import SolveCancelledError


class CancellationToken:
    """
    Flag shared between a caller and a running solve.

    The relaxation engine checks the token once before every ``k`` phase, so
    cancellation takes effect at the next phase boundary; matrices are never
    left half-way through a phase. Safe to cancel from another thread.

    Example:
        >>> token = CancellationToken()
        >>> threading.Timer(5.0, token.cancel).start()
        >>> result = graph.solve(token=token)  # may raise SolveCancelledError
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self, phase: int, num_phases: int) -> None:
        """
        Raise if cancellation was requested.

        Raises:
            SolveCancelledError: If cancel() has been called.
        """
        if self._event.is_set():
            raise SolveCancelledError(phase, num_phases)
