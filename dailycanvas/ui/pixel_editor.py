"""Pixel-art editor: the paintable grid widget and its toolbar."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from PySide6.QtCore import QEvent, QObject, QPoint, QRect, Qt
from PySide6.QtGui import QColor, QPainter, QPen
from PySide6.QtWidgets import (
    QApplication,
    QColorDialog,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from dailycanvas.core.export import default_filename, export_png
from dailycanvas.core.painting import PixelCanvas
from dailycanvas.ui.colors import CanvasColors
from dailycanvas.ui.dialogs import Confirm

logger = logging.getLogger(__name__)


class PixelGridWidget(QWidget):
    """Paints a PixelCanvas and forwards press/drag/release to it.

    While editable and visible, an application-wide event filter catches
    mouse release anywhere so a drag that ends outside the grid still stops
    painting.
    """

    def __init__(self, canvas: PixelCanvas, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._canvas = canvas
        self._release_filter_installed = False
        self.setMinimumSize(240, 240)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setCursor(Qt.ForbiddenCursor if canvas.read_only else Qt.CrossCursor)

    @property
    def canvas(self) -> PixelCanvas:
        return self._canvas

    def _cell_size(self) -> int:
        return max(1, min(self.width(), self.height()) // self._canvas.size)

    def _grid_rect(self) -> QRect:
        side = self._cell_size() * self._canvas.size
        return QRect((self.width() - side) // 2, (self.height() - side) // 2, side, side)

    def cell_at(self, pos: QPoint) -> Optional[tuple[int, int]]:
        rect = self._grid_rect()
        if not rect.contains(pos):
            return None
        cell = self._cell_size()
        return ((pos.y() - rect.top()) // cell, (pos.x() - rect.left()) // cell)

    def paintEvent(self, event) -> None:
        super().paintEvent(event)
        painter = QPainter(self)
        rect = self._grid_rect()
        cell = self._cell_size()
        size = self._canvas.size
        for r in range(size):
            for c in range(size):
                painter.fillRect(rect.left() + c * cell, rect.top() + r * cell, cell, cell, QColor(self._canvas.color_at(r, c)))
        if cell >= 6:
            painter.setPen(QPen(QColor(CanvasColors.GRID_LINE), 1))
            for i in range(size + 1):
                painter.drawLine(rect.left() + i * cell, rect.top(), rect.left() + i * cell, rect.bottom())
                painter.drawLine(rect.left(), rect.top() + i * cell, rect.right(), rect.top() + i * cell)

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.LeftButton:
            cell = self.cell_at(event.position().toPoint())
            if cell is not None and self._canvas.press(*cell):
                self.update()
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event) -> None:
        cell = self.cell_at(event.position().toPoint())
        if cell is not None and self._canvas.enter(*cell):
            self.update()
        super().mouseMoveEvent(event)

    def leaveEvent(self, event) -> None:
        self._canvas.release()
        super().leaveEvent(event)

    def showEvent(self, event) -> None:
        super().showEvent(event)
        self._install_release_filter()

    def hideEvent(self, event) -> None:
        self._remove_release_filter()
        self._canvas.release()
        super().hideEvent(event)

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if event.type() == QEvent.Type.MouseButtonRelease:
            self._canvas.release()
        return False

    def _install_release_filter(self) -> None:
        app = QApplication.instance()
        if self._canvas.read_only or self._release_filter_installed or app is None:
            return
        app.installEventFilter(self)
        self._release_filter_installed = True

    def _remove_release_filter(self) -> None:
        app = QApplication.instance()
        if self._release_filter_installed and app is not None:
            app.removeEventFilter(self)
        self._release_filter_installed = False


class PixelArtEditor(QWidget):
    """Color picker, reset and download controls above a PixelGridWidget."""

    def __init__(
        self,
        *,
        grid_size: int,
        initial_pixels: Optional[List[List[str]]],
        read_only: bool,
        confirm: Confirm,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._confirm = confirm
        self._canvas = PixelCanvas(grid_size, initial_pixels, read_only=read_only)

        self._color_button = QPushButton("Pick a color")
        self._color_button.setEnabled(not read_only)
        self._color_button.clicked.connect(self._pick_color)
        self._swatch = QLabel("")
        self._swatch.setFixedSize(22, 22)

        self._reset_button = QPushButton("Reset Grid")
        self._reset_button.setEnabled(not read_only)
        self._reset_button.clicked.connect(self._reset_grid)

        self._download_button = QPushButton("Download PNG")
        self._download_button.clicked.connect(self._download)

        controls = QHBoxLayout()
        controls.setSpacing(8)
        controls.addWidget(self._color_button)
        controls.addWidget(self._swatch)
        controls.addStretch(1)
        controls.addWidget(self._reset_button)
        controls.addWidget(self._download_button)

        self._grid = PixelGridWidget(self._canvas)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)
        layout.addLayout(controls)
        layout.addWidget(self._grid, 1)

        self._refresh_swatch()

    @property
    def canvas(self) -> PixelCanvas:
        return self._canvas

    def has_unsaved_changes(self) -> bool:
        return self._canvas.dirty

    def edited_pixels(self) -> Optional[List[List[str]]]:
        """Snapshot of the grid if it was edited since it was loaded."""
        return self._canvas.snapshot() if self._canvas.dirty else None

    def _refresh_swatch(self) -> None:
        self._swatch.setStyleSheet(
            f"background: {self._canvas.selected_color}; border: 1px solid {CanvasColors.TEXT_MUTED}; border-radius: 4px;"
        )

    def _pick_color(self) -> None:
        color = QColorDialog.getColor(QColor(self._canvas.selected_color), self, "Pick a color")
        if color.isValid():
            self._canvas.selected_color = color.name()
            self._refresh_swatch()

    def _reset_grid(self) -> None:
        if self._canvas.read_only:
            return
        if self._confirm("Reset Grid", "Are you sure you want to reset this pixel art? Any unsaved changes will be lost."):
            self._canvas.reset()
            self._grid.update()

    def _download(self) -> None:
        size = self._canvas.size
        path, _ = QFileDialog.getSaveFileName(
            self,
            "Download PNG",
            str(Path.home() / default_filename(size)),
            "PNG image (*.png)",
        )
        if path:
            export_png(self._canvas.snapshot(), Path(path))
