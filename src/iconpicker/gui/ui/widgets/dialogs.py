"""Message box helpers for the picker dialog."""

from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import QMessageBox, QWidget

from ....errors.handler import ErrorSeverity

_ICONS = {
    ErrorSeverity.INFO: QMessageBox.Icon.Information,
    ErrorSeverity.WARNING: QMessageBox.Icon.Warning,
    ErrorSeverity.ERROR: QMessageBox.Icon.Critical,
    ErrorSeverity.CRITICAL: QMessageBox.Icon.Critical,
}


def error_callback(parent: Optional[QWidget], *, title: str = "Icon Picker"):
    """Return an ``ErrorHandler`` UI callback that shows a message box on *parent*."""

    def _show(message: str, severity: ErrorSeverity) -> None:
        box = QMessageBox(_ICONS[severity], title, message, QMessageBox.StandardButton.Ok, parent)
        box.exec()

    return _show
