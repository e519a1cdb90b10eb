"""Modal icon picker dialog backed by :class:`IconPickerViewModel`."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from PySide6.QtCore import QSize, Qt
from PySide6.QtGui import QIcon
from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QVBoxLayout,
    QWidget,
)

from ....config import DIALOG_DEFAULT_SIZE, DIALOG_TITLE, ICON_PREVIEW_SIZE, SEARCH_PLACEHOLDER
from ....domain.models.item import IconItem
from ....errors import IconPickerError, PageRenderError
from ....errors.handler import ErrorHandler
from ....events.bus import EventBus
from ....io.icon_source import list_icon_names
from ...viewmodels.icon_picker_viewmodel import IconPickerViewModel, PickerOptions
from ...viewmodels.infinite_scroll import ScrollMetrics
from ..render import ItemHandler, ScrollHandler
from ..tasks.timer_scheduler import QtTimerScheduler
from .dialogs import error_callback

LOGGER = logging.getLogger(__name__)

ID_ROLE = Qt.ItemDataRole.UserRole


class QtListRenderAdapter:
    """Render adapter over a ``QListWidget``.

    Scroll metrics come from the vertical scroll bar: its value is the offset,
    its page step the viewport height and ``maximum + pageStep`` the content
    height, all in pixels with per-pixel scrolling.
    """

    def __init__(self, list_widget: QListWidget) -> None:
        self._list = list_widget
        self._scroll_handlers: List[ScrollHandler] = []
        self._click_handlers: List[ItemHandler] = []
        self._double_click_handlers: List[ItemHandler] = []

        self._list.verticalScrollBar().valueChanged.connect(self._emit_scroll)
        self._list.verticalScrollBar().rangeChanged.connect(self._emit_scroll)
        self._list.itemClicked.connect(self._on_item_clicked)
        self._list.itemDoubleClicked.connect(self._on_item_double_clicked)

    def append(self, items: Sequence[IconItem]) -> None:
        for item in items:
            row = QListWidgetItem(QIcon(item.icon_path), item.display_text)
            row.setData(ID_ROLE, item.id)
            row.setToolTip(item.id)
            self._list.addItem(row)

    def clear(self) -> None:
        self._list.clear()

    def on_scroll(self, handler: ScrollHandler) -> None:
        self._scroll_handlers.append(handler)

    def on_click(self, handler: ItemHandler) -> None:
        self._click_handlers.append(handler)

    def on_double_click(self, handler: ItemHandler) -> None:
        self._double_click_handlers.append(handler)

    def current_metrics(self) -> ScrollMetrics:
        bar = self._list.verticalScrollBar()
        return ScrollMetrics(
            scroll_offset=bar.value(),
            viewport_height=bar.pageStep(),
            content_height=bar.maximum() + bar.pageStep(),
        )

    def _emit_scroll(self, *_args) -> None:
        metrics = self.current_metrics()
        for handler in list(self._scroll_handlers):
            handler(metrics)

    def _on_item_clicked(self, row: QListWidgetItem) -> None:
        self._dispatch(self._click_handlers, row)

    def _on_item_double_clicked(self, row: QListWidgetItem) -> None:
        self._dispatch(self._double_click_handlers, row)

    @staticmethod
    def _dispatch(handlers: List[Callable[[str], object]], row: QListWidgetItem) -> None:
        item_id = row.data(ID_ROLE)
        if item_id is None:
            return
        for handler in list(handlers):
            handler(str(item_id))


class IconPickerDialog(QDialog):
    """Search box above an infinitely scrolling icon list.

    A single click highlights an icon, a double click picks it and accepts
    the dialog.  :meth:`selected_id` reports the choice after ``exec()``.
    """

    def __init__(
        self,
        view_model: Optional[IconPickerViewModel] = None,
        parent: Optional[QWidget] = None,
        *,
        title: str = DIALOG_TITLE,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle(title)
        self.setModal(True)
        self.resize(*DIALOG_DEFAULT_SIZE)

        self._view_model = view_model or IconPickerViewModel(scheduler=QtTimerScheduler())
        self._selected_id: Optional[str] = None
        self._error_handler = error_handler

        self._search = QLineEdit(self)
        self._search.setPlaceholderText(SEARCH_PLACEHOLDER)
        self._search.setClearButtonEnabled(True)

        self._list = QListWidget(self)
        self._list.setSelectionMode(QListWidget.SelectionMode.SingleSelection)
        self._list.setVerticalScrollMode(QListWidget.ScrollMode.ScrollPerPixel)
        self._list.setIconSize(QSize(ICON_PREVIEW_SIZE, ICON_PREVIEW_SIZE))
        self._list.setUniformItemSizes(True)

        self._buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel,
            self,
        )
        self._buttons.accepted.connect(self.accept)
        self._buttons.rejected.connect(self.reject)

        layout = QVBoxLayout(self)
        layout.addWidget(self._search)
        layout.addWidget(self._list, 1)
        layout.addWidget(self._buttons)

        self._adapter = QtListRenderAdapter(self._list)
        self._view_model.bind(self._adapter)
        self._view_model.accepted.connect(self._on_accepted)
        self._view_model.error_occurred.connect(self._on_error)
        # Rendering a page can leave the list short of a full viewport, in
        # which case no scroll signal arrives; re-check after each append.
        self._view_model.items_appended.connect(self._on_items_appended)
        self._search.textChanged.connect(self._view_model.search)
        self.finished.connect(self._on_finished)

    @property
    def view_model(self) -> IconPickerViewModel:
        return self._view_model

    @property
    def list_widget(self) -> QListWidget:
        return self._list

    @property
    def search_input(self) -> QLineEdit:
        return self._search

    def populate(self, base_path: str | Path, names: Sequence[str]) -> None:
        """Load the catalog and request the first page."""
        self._view_model.open(base_path, names)
        self._search.setFocus()

    def selected_id(self) -> Optional[str]:
        return self._selected_id

    def _on_items_appended(self, _items) -> None:
        self._view_model.on_scroll(self._adapter.current_metrics())

    def _on_accepted(self, _icon_id: str) -> None:
        self.accept()

    def _on_error(self, message: str) -> None:
        if self._error_handler is None:
            return
        self._error_handler.handle(
            PageRenderError(message),
            context={"page": self._view_model.current_page + 1},
        )

    def _on_finished(self, _result: int) -> None:
        self._selected_id = self._view_model.get_selected()
        self._view_model.dispose()


def pick_icon(
    base_path: str | Path,
    *,
    parent: Optional[QWidget] = None,
    options: Optional[PickerOptions] = None,
    suffix: Optional[str] = None,
    query: str = "",
    error_handler: Optional[ErrorHandler] = None,
) -> Optional[str]:
    """Show the picker for *base_path* and return the accepted icon id.

    Returns ``None`` when the dialog is cancelled.  Enumeration and catalog
    errors are reported through *error_handler* (a message box by default)
    and then re-raised to the caller; page rendering failures inside the
    open dialog are reported the same way.
    """

    if error_handler is None:
        error_handler = ErrorHandler(LOGGER, EventBus())
        error_handler.register_ui_callback(error_callback(parent))

    view_model = IconPickerViewModel(scheduler=QtTimerScheduler(), options=options)
    dialog = IconPickerDialog(view_model, parent, error_handler=error_handler)
    try:
        names = list_icon_names(base_path, suffix)
        dialog.populate(base_path, names)
    except IconPickerError as exc:
        error_handler.handle(exc, context={"base_path": str(base_path)})
        view_model.dispose()
        raise
    if query:
        dialog.search_input.setText(query)

    if dialog.exec() == QDialog.DialogCode.Accepted:
        return dialog.selected_id()
    return None
