"""Two-state machine guarding single-flight page loads."""

from __future__ import annotations

import logging
from enum import Enum

from .signal import Signal

LOGGER = logging.getLogger(__name__)


class LoadState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"


class LoadStateMachine:
    """``IDLE --begin--> LOADING --finish--> IDLE``.

    ``begin()`` while already loading is a self-loop: it changes nothing and
    returns ``False``.  ``finish()`` while idle is likewise ignored.
    """

    def __init__(self) -> None:
        self._state = LoadState.IDLE
        self.state_changed = Signal("state_changed")

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return self._state is LoadState.LOADING

    def begin(self) -> bool:
        if self._state is LoadState.LOADING:
            LOGGER.debug("begin() ignored: load already in flight")
            return False
        self._transition(LoadState.LOADING)
        return True

    def finish(self) -> bool:
        if self._state is LoadState.IDLE:
            return False
        self._transition(LoadState.IDLE)
        return True

    def _transition(self, new_state: LoadState) -> None:
        old_state = self._state
        self._state = new_state
        LOGGER.debug("Load state %s -> %s", old_state.value, new_state.value)
        self.state_changed.emit(new_state, old_state)
