"""Expanded editor panel shown beneath the selected tile's row."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from dailycanvas.core.catalog import ChallengeDefinition
from dailycanvas.core.errors import ChallengeNotFoundError, DailyCanvasError
from dailycanvas.core.selection import SelectionController
from dailycanvas.ui.colors import CanvasColors
from dailycanvas.ui.dialogs import Confirm
from dailycanvas.ui.pixel_editor import PixelArtEditor

logger = logging.getLogger(__name__)


class ChallengePanel(QFrame):
    """Full-row panel for one open challenge.

    Falls back to a "not found" placeholder with a close button when the
    catalog has no entry for the id.
    """

    def __init__(
        self,
        *,
        challenge_id: int,
        controller: SelectionController,
        confirm: Confirm,
        on_closed: Callable[[], None],
        on_completed: Callable[[int], None],
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._challenge_id = challenge_id
        self._controller = controller
        self._confirm = confirm
        self._on_closed = on_closed
        self._on_completed = on_completed
        self._editor: Optional[PixelArtEditor] = None
        self._status: Optional[QLabel] = None

        self.setObjectName("challengePanel")
        self.setStyleSheet(
            f"""
            QFrame#challengePanel {{
                background: {CanvasColors.PANEL_BG};
                border: 1px solid {CanvasColors.PANEL_BORDER};
                border-radius: 16px;
            }}
            QLabel#challengePanelTitle {{
                color: {CanvasColors.TEXT_PRIMARY};
                font-size: 18px;
                font-weight: 900;
            }}
            QLabel#challengePanelMeta {{
                color: {CanvasColors.TEXT_MUTED};
                font-size: 12px;
            }}
            QLabel#challengePanelStatus {{
                color: {CanvasColors.WARNING};
                font-weight: 700;
            }}
            """
        )

        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(18, 14, 18, 18)
        self._layout.setSpacing(10)

        try:
            definition = controller.resolve_content(challenge_id)
        except ChallengeNotFoundError as e:
            logger.warning("%s; showing placeholder", e)
            self._build_not_found()
        else:
            self._build_content(definition)

    @property
    def challenge_id(self) -> int:
        return self._challenge_id

    @property
    def editor(self) -> Optional[PixelArtEditor]:
        return self._editor

    def request_close(self) -> bool:
        """Close unless the user keeps unsaved drawing edits."""
        if self._editor is not None and self._editor.has_unsaved_changes():
            if not self._confirm("Discard changes?", "Your drawing has unsaved changes. Close it anyway?"):
                return False
        self._controller.close()
        self._on_closed()
        return True

    def _header(self, title: str) -> QHBoxLayout:
        row = QHBoxLayout()
        label = QLabel(title)
        label.setObjectName("challengePanelTitle")
        label.setWordWrap(True)
        close_button = QPushButton("✕")
        close_button.setObjectName("challengePanelClose")
        close_button.setFixedSize(32, 32)
        close_button.setToolTip("Close")
        close_button.clicked.connect(lambda: self.request_close())
        row.addWidget(label, 1)
        row.addWidget(close_button, 0, Qt.AlignRight | Qt.AlignTop)
        return row

    def _build_not_found(self) -> None:
        self._layout.addLayout(self._header(f"Challenge #{self._challenge_id}"))
        message = QLabel("This challenge isn't available yet. Check back soon!")
        message.setWordWrap(True)
        self._layout.addWidget(message)

    def _build_content(self, definition: ChallengeDefinition) -> None:
        completed = self._controller.is_read_only(definition.id)
        read_only = not self._controller.is_editable(definition.id)
        self._layout.addLayout(self._header(f"Challenge #{definition.id}: {definition.title}"))

        meta = QLabel(
            " · ".join(
                part
                for part in (
                    definition.category.value.title(),
                    definition.difficulty.value.title(),
                    definition.estimated_time,
                )
                if part
            )
        )
        meta.setObjectName("challengePanelMeta")
        self._layout.addWidget(meta)

        description = QLabel(definition.description)
        description.setWordWrap(True)
        self._layout.addWidget(description)

        if definition.tips:
            tips = QLabel("\n".join(f"• {tip}" for tip in definition.tips))
            tips.setWordWrap(True)
            self._layout.addWidget(tips)

        if definition.is_pixel_art:
            self._editor = PixelArtEditor(
                grid_size=definition.grid_size or 0,
                initial_pixels=self._controller.saved_pixels(definition.id),
                read_only=read_only,
                confirm=self._confirm,
            )
            self._layout.addWidget(self._editor, 1)

        self._status = QLabel("")
        self._status.setObjectName("challengePanelStatus")
        self._status.setVisible(False)
        self._layout.addWidget(self._status)

        actions = QHBoxLayout()
        actions.addStretch(1)
        if read_only:
            done = QLabel("✓ Completed" if completed else "🔒 Preview only")
            done.setObjectName("challengePanelMeta")
            actions.addWidget(done)
        else:
            label = "Save & Complete" if definition.is_pixel_art else "Complete Challenge"
            button = QPushButton(label)
            button.setObjectName("challengePanelComplete")
            button.clicked.connect(lambda: self._complete(definition))
            actions.addWidget(button)
        self._layout.addLayout(actions)

    def _show_status(self, text: str) -> None:
        if self._status is not None:
            self._status.setText(text)
            self._status.setVisible(True)

    def _complete(self, definition: ChallengeDefinition) -> None:
        try:
            if definition.is_pixel_art and self._editor is not None:
                done = self._controller.save_artifact_and_complete(definition.id, self._editor.edited_pixels())
                if not done:
                    self._show_status("Draw something before completing this challenge.")
                    return
            elif not self._controller.complete(definition.id):
                self._show_status("This challenge can't be completed yet.")
                return
        except (DailyCanvasError, ValueError) as e:
            logger.error("Could not complete challenge %d: %s", definition.id, e)
            self._show_status(str(e))
            return
        self._on_completed(definition.id)
