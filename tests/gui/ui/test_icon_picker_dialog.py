from __future__ import annotations

from pathlib import Path

import pytest

QtWidgets = pytest.importorskip("PySide6.QtWidgets", exc_type=ImportError)
QApplication = QtWidgets.QApplication
QDialog = QtWidgets.QDialog

from iconpicker.gui.ui.widgets.icon_picker_dialog import (
    ID_ROLE,
    IconPickerDialog,
    QtListRenderAdapter,
)
from iconpicker.gui.viewmodels.icon_picker_viewmodel import IconPickerViewModel, PickerOptions
from iconpicker.gui.viewmodels.scheduler import ManualScheduler


@pytest.fixture()
def qapp() -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


def _dialog(page_size: int = 50):
    scheduler = ManualScheduler()
    vm = IconPickerViewModel(scheduler=scheduler, options=PickerOptions(page_size=page_size))
    return IconPickerDialog(vm), vm, scheduler


def _names(count: int) -> list[str]:
    return [f"icon-{i:03d}.svg" for i in range(count)]


def test_populate_renders_first_page(qapp: QApplication, tmp_path: Path) -> None:
    dialog, vm, scheduler = _dialog(page_size=10)

    dialog.populate(tmp_path, _names(25))
    scheduler.run_next()

    widget = dialog.list_widget
    assert widget.count() >= 10
    assert widget.item(0).text() == "icon 000"
    assert widget.item(0).data(ID_ROLE) == "icon-000.svg"


def test_search_text_refilters_list(qapp: QApplication, tmp_path: Path) -> None:
    dialog, vm, scheduler = _dialog()
    dialog.populate(tmp_path, ["icon-home.svg", "logo.svg"])
    scheduler.run_pending()

    dialog.search_input.setText("logo")
    scheduler.run_pending()

    widget = dialog.list_widget
    assert widget.count() == 1
    assert widget.item(0).data(ID_ROLE) == "logo.svg"


def test_click_and_double_click(qapp: QApplication, tmp_path: Path) -> None:
    dialog, vm, scheduler = _dialog()
    dialog.populate(tmp_path, ["a.svg", "b.svg"])
    scheduler.run_pending()
    widget = dialog.list_widget

    widget.itemClicked.emit(widget.item(0))
    assert vm.get_selected() == "a.svg"

    widget.itemDoubleClicked.emit(widget.item(1))

    assert dialog.result() == QDialog.DialogCode.Accepted
    assert dialog.selected_id() == "b.svg"
    assert vm.disposed is True


def test_reject_keeps_last_click(qapp: QApplication, tmp_path: Path) -> None:
    dialog, vm, scheduler = _dialog()
    dialog.populate(tmp_path, ["a.svg"])
    scheduler.run_pending()
    dialog.list_widget.itemClicked.emit(dialog.list_widget.item(0))

    dialog.reject()

    assert dialog.result() == QDialog.DialogCode.Rejected
    assert dialog.selected_id() == "a.svg"


def test_adapter_reports_scroll_metrics(qapp: QApplication) -> None:
    widget = QtWidgets.QListWidget()
    adapter = QtListRenderAdapter(widget)

    metrics = adapter.current_metrics()

    bar = widget.verticalScrollBar()
    assert metrics.scroll_offset == bar.value()
    assert metrics.content_height == bar.maximum() + bar.pageStep()


def test_pick_icon_reports_missing_directory(qapp: QApplication, tmp_path: Path) -> None:
    import logging
    from unittest.mock import Mock

    from iconpicker.errors import CatalogIOError
    from iconpicker.errors.handler import ErrorHandler, ErrorSeverity
    from iconpicker.events.bus import EventBus
    from iconpicker.gui.ui.widgets.icon_picker_dialog import pick_icon

    handler = ErrorHandler(logging.getLogger("test.dialog"), EventBus())
    ui = Mock()
    handler.register_ui_callback(ui)

    with pytest.raises(CatalogIOError):
        pick_icon(tmp_path / "missing", error_handler=handler)

    ui.assert_called_once()
    assert ui.call_args.args[1] is ErrorSeverity.ERROR


def test_render_failure_reaches_error_handler(qapp: QApplication, tmp_path: Path) -> None:
    import logging
    from unittest.mock import Mock

    from iconpicker.errors import PageRenderError
    from iconpicker.errors.handler import ErrorHandler, ErrorOccurredEvent
    from iconpicker.events.bus import EventBus

    bus = EventBus()
    events = []
    bus.subscribe(ErrorOccurredEvent, events.append)
    handler = ErrorHandler(logging.getLogger("test.dialog"), bus)
    ui = Mock()
    handler.register_ui_callback(ui)
    vm = IconPickerViewModel(scheduler=ManualScheduler())
    dialog = IconPickerDialog(vm, error_handler=handler)
    dialog.populate(tmp_path, _names(3))

    vm.error_occurred.emit("widget gone")

    ui.assert_called_once()
    assert ui.call_args.args[0] == "widget gone"
    assert isinstance(events[0].error, PageRenderError)
    assert events[0].context == {"page": 1}
