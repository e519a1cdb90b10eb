"""Pure Python signal system, no Qt dependency.

``Signal`` carries observer callbacks between the picker view model and its
collaborators; ``ObservableProperty`` wraps a value and announces changes.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

_logger = logging.getLogger(__name__)


class Signal:
    """Observer list invoked in connection order.

    The picker lives on a single cooperative thread, so no locking is done.
    A handler that raises is logged and skipped; the remaining handlers still
    run.
    """

    def __init__(self, name: str = "") -> None:
        self._name = name
        self._handlers: list[Callable] = []

    def __repr__(self) -> str:
        return f"<Signal {self._name or hex(id(self))} handlers={len(self._handlers)}>"

    def connect(self, handler: Callable) -> None:
        if handler not in self._handlers:
            self._handlers.append(handler)

    def disconnect(self, handler: Callable) -> None:
        self._handlers.remove(handler)

    def disconnect_all(self) -> None:
        self._handlers.clear()

    def emit(self, *args: Any, **kwargs: Any) -> None:
        # Snapshot so handlers may disconnect themselves while running.
        for handler in list(self._handlers):
            try:
                handler(*args, **kwargs)
            except Exception as exc:
                _logger.error("Handler %r on %r failed: %s", handler, self, exc)

    @property
    def handler_count(self) -> int:
        return len(self._handlers)


class ObservableProperty:
    """Value holder emitting ``changed(new_value, old_value)`` on change."""

    def __init__(self, initial_value: Any = None) -> None:
        self._value = initial_value
        self.changed = Signal("changed")

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, new_value: Any) -> None:
        if self._value != new_value:
            old_value = self._value
            self._value = new_value
            self.changed.emit(new_value, old_value)
