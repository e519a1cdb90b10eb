"""Single-selection tracking for the picker list."""

from __future__ import annotations

import logging
from typing import Optional

from .signal import Signal

LOGGER = logging.getLogger(__name__)


class SelectionState:
    """Hold at most one selected id.

    Ids are taken as reported by the view and are not checked against the
    catalog, so a selection survives a later filter that hides its item.
    Once :meth:`confirm` has run the selection is final.
    """

    def __init__(self) -> None:
        self._selected_id: Optional[str] = None
        self._confirmed = False
        self.selection_changed = Signal("selection_changed")  # (new_id, old_id)
        self.confirmed = Signal("confirmed")  # (icon_id)

    @property
    def selected_id(self) -> Optional[str]:
        return self._selected_id

    @property
    def is_confirmed(self) -> bool:
        return self._confirmed

    def get_selected(self) -> Optional[str]:
        return self._selected_id

    def select(self, icon_id: str) -> None:
        if self._confirmed:
            LOGGER.debug("select(%r) ignored after confirmation", icon_id)
            return
        self._set(icon_id)

    def confirm(self, icon_id: str) -> None:
        if self._confirmed:
            LOGGER.debug("confirm(%r) ignored after confirmation", icon_id)
            return
        self._set(icon_id)
        self._confirmed = True
        self.confirmed.emit(icon_id)

    def clear(self) -> None:
        if self._confirmed:
            return
        self._set(None)

    def _set(self, icon_id: Optional[str]) -> None:
        old_id = self._selected_id
        self._selected_id = icon_id
        if old_id != icon_id:
            self.selection_changed.emit(icon_id, old_id)
