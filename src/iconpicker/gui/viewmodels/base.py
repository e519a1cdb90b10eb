"""BaseViewModel, pure Python, no Qt dependency.

Tracks the signal connections a view model makes on behalf of itself so that
``dispose()`` can tear them down when the dialog closes.
"""

from __future__ import annotations

from typing import Callable

from .signal import Signal


class BaseViewModel:
    """ViewModel base class: pure Python, no Qt dependency."""

    def __init__(self) -> None:
        self._connections: list[tuple[Signal, Callable]] = []
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    def track_connection(self, signal: Signal, handler: Callable) -> None:
        """Connect *handler* to *signal* and remember it for ``dispose()``."""
        signal.connect(handler)
        self._connections.append((signal, handler))

    def dispose(self) -> None:
        """Drop every tracked signal connection."""
        for signal, handler in self._connections:
            try:
                signal.disconnect(handler)
            except ValueError:
                continue
        self._connections.clear()
        self._disposed = True
