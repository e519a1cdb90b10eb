"""Qt event-loop implementation of the picker's delay strategy."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QTimer


class QtTimerScheduler:
    """Defer callbacks with ``QTimer.singleShot`` on the GUI thread."""

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None:
        QTimer.singleShot(max(0, int(delay_ms)), callback)
