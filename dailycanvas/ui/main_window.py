from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from dailycanvas.core.board import ChallengeBoard
from dailycanvas.core.catalog import ChallengeCatalog
from dailycanvas.core.errors import StorageError
from dailycanvas.core.selection import SelectionController
from dailycanvas.ui.challenge_grid import ChallengeGridWidget
from dailycanvas.ui.challenge_panel import ChallengePanel
from dailycanvas.ui.colors import CanvasColors
from dailycanvas.ui.dialogs import Confirm, message_box_confirm
from dailycanvas.ui.models import TileViewState, build_tile_view_states

logger = logging.getLogger(__name__)

TITLE = "30 Days of Creativity"
DESCRIPTION = (
    "Complete one creative task each day. "
    "The next task unlocks only after finishing the current one."
)


class MainWindow(QMainWindow):
    """Header with progress summary and reset, above the scrolling tile grid."""

    def __init__(
        self,
        catalog: ChallengeCatalog,
        board: ChallengeBoard,
        *,
        unlock_all: bool = False,
        confirm: Optional[Confirm] = None,
    ) -> None:
        super().__init__()
        self._catalog = catalog
        self._board = board
        self._controller = SelectionController(catalog, board)
        self._unlock_all = unlock_all
        self._confirm = confirm or message_box_confirm(self)
        self._panel: Optional[ChallengePanel] = None

        self._summary_label: Optional[QLabel] = None
        self._grid: Optional[ChallengeGridWidget] = None

        self._build_ui()
        self._refresh()

    @property
    def controller(self) -> SelectionController:
        return self._controller

    @property
    def panel(self) -> Optional[ChallengePanel]:
        return self._panel

    def _build_ui(self) -> None:
        self.setWindowTitle(TITLE)
        central = QWidget()
        central.setObjectName("centralWidget")
        central.setStyleSheet(
            f"""
            QWidget#centralWidget {{
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 {CanvasColors.BG_TOP}, stop:1 {CanvasColors.BG_BOTTOM});
            }}
            QLabel#appTitle {{
                color: {CanvasColors.PRIMARY_DARK};
                font-size: 28px;
                font-weight: 900;
            }}
            QLabel#appDescription, QLabel#appSummary {{
                color: {CanvasColors.TEXT_SECONDARY};
                font-size: 13px;
            }}
            """
        )

        title = QLabel(TITLE)
        title.setObjectName("appTitle")
        description = QLabel(DESCRIPTION)
        description.setObjectName("appDescription")
        description.setWordWrap(True)

        self._summary_label = QLabel("")
        self._summary_label.setObjectName("appSummary")
        reset_button = QPushButton("Reset progress")
        reset_button.clicked.connect(lambda: self._reset_progress())

        header_row = QHBoxLayout()
        header_row.addWidget(self._summary_label, 1)
        header_row.addWidget(reset_button, 0, Qt.AlignRight)

        self._grid = ChallengeGridWidget(on_tile_clicked=self._on_tile_clicked)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        scroll.setStyleSheet("QScrollArea { background: transparent; }")
        scroll.setWidget(self._grid)

        layout = QVBoxLayout(central)
        layout.setContentsMargins(28, 22, 28, 22)
        layout.setSpacing(12)
        layout.addWidget(title)
        layout.addWidget(description)
        layout.addLayout(header_row)
        layout.addWidget(scroll, 1)
        self.setCentralWidget(central)
        self.resize(960, 720)

    def _refresh(self) -> None:
        """Rebuild tile states from the board and sync the header summary."""
        states = build_tile_view_states(
            self._board.tiles,
            self._catalog,
            selected_id=self._controller.selected_id,
            unlock_all=self._unlock_all,
        )
        if self._summary_label is not None:
            self._summary_label.setText(f"{self._board.completed_count()}/{self._board.total_challenges} completed")
        if self._grid is not None:
            self._grid.set_tile_states(states)

    def _on_tile_clicked(self, state: TileViewState) -> None:
        if self._panel is not None:
            if self._panel.challenge_id == state.id:
                return
            if not self._panel.request_close():
                return
        if not self._controller.open(state.tile):
            return
        self._panel = ChallengePanel(
            challenge_id=state.id,
            controller=self._controller,
            confirm=self._confirm,
            on_closed=self._on_panel_closed,
            on_completed=self._on_challenge_completed,
        )
        if self._grid is not None:
            self._grid.set_panel(self._panel, state.id)
        self._refresh()

    def _drop_panel(self) -> None:
        self._panel = None
        if self._grid is not None:
            self._grid.set_panel(None, None)

    def _on_panel_closed(self) -> None:
        self._drop_panel()
        self._refresh()

    def _on_challenge_completed(self, challenge_id: int) -> None:
        logger.info("Challenge %d completed from the editor", challenge_id)
        self._drop_panel()
        self._refresh()

    def _reset_progress(self) -> None:
        """Ask for confirmation and, if confirmed, wipe progress and drawings."""
        if not self._confirm(
            "Reset progress",
            "This erases all progress and saved drawings. This cannot be undone. Continue?",
        ):
            return
        try:
            self._controller.reset()
        except StorageError as e:
            logger.error("Reset failed: %s", e)
            QMessageBox.warning(self, "Reset progress", f"Could not reset progress: {e}")
        self._drop_panel()
        self._refresh()

    def closeEvent(self, event: QCloseEvent) -> None:
        """Ask before dropping an unsaved drawing on exit."""
        if self._panel is not None and not self._panel.request_close():
            event.ignore()
            return
        super().closeEvent(event)
