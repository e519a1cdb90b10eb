"""Delay strategies for the artificial page-fetch latency.

The view model never sleeps; it hands a callback to a scheduler and returns.
Production code uses the Qt timer scheduler from ``gui.ui.tasks``; tests use
:class:`ManualScheduler` to decide exactly when a pending load completes.
"""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Protocol, Tuple


class Scheduler(Protocol):
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None: ...


class ImmediateScheduler:
    """Run callbacks synchronously, ignoring the requested delay."""

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None:
        callback()


class ManualScheduler:
    """Queue callbacks until the owner explicitly runs them."""

    def __init__(self) -> None:
        self._pending: Deque[Tuple[int, Callable[[], None]]] = deque()

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None:
        self._pending.append((delay_ms, callback))

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def run_next(self) -> bool:
        if not self._pending:
            return False
        _, callback = self._pending.popleft()
        callback()
        return True

    def run_pending(self) -> int:
        """Run queued callbacks, including ones scheduled while running.

        Returns the number of callbacks executed.
        """
        count = 0
        while self.run_next():
            count += 1
        return count
