"""Yes/no confirmation prompt."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtWidgets import QMessageBox, QWidget

Confirm = Callable[[str, str], bool]


def message_box_confirm(parent: Optional[QWidget] = None) -> Confirm:
    """Return a Confirm backed by a modal ``QMessageBox``."""

    def confirm(title: str, text: str) -> bool:
        answer = QMessageBox.question(
            parent,
            title,
            text,
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        return answer == QMessageBox.StandardButton.Yes

    return confirm
