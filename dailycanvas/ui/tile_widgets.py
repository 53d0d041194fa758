"""Compact progress tile for one challenge."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor
from PySide6.QtWidgets import QGraphicsDropShadowEffect, QLabel, QVBoxLayout, QWidget

from dailycanvas.ui.colors import CanvasColors, blend_hex, tile_color
from dailycanvas.ui.models import TileViewState

TILE_SIZE = 110


class ChallengeTile(QWidget):
    """A clickable tile: number, short title and lock/check badge."""

    def __init__(
        self,
        *,
        on_click: Callable[[TileViewState], None],
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._on_click = on_click
        self._state: Optional[TileViewState] = None

        self.setObjectName("challengeTile")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setAttribute(Qt.WidgetAttribute.WA_Hover, True)
        self.setFixedSize(TILE_SIZE, TILE_SIZE)

        self._number = QLabel("")
        self._number.setObjectName("challengeTileNumber")
        self._number.setAlignment(Qt.AlignCenter)

        self._caption = QLabel("")
        self._caption.setObjectName("challengeTileCaption")
        self._caption.setAlignment(Qt.AlignCenter)
        self._caption.setWordWrap(True)

        self._badge = QLabel("")
        self._badge.setObjectName("challengeTileBadge")
        self._badge.setAlignment(Qt.AlignCenter)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(2)
        layout.addWidget(self._number, 1)
        layout.addWidget(self._caption, 0)
        layout.addWidget(self._badge, 0)

        shadow = QGraphicsDropShadowEffect(self)
        shadow.setBlurRadius(18)
        shadow.setOffset(0, 6)
        shadow.setColor(QColor(15, 23, 42, 60))
        self.setGraphicsEffect(shadow)

    @property
    def state(self) -> Optional[TileViewState]:
        return self._state

    def set_state(self, state: TileViewState) -> None:
        self._state = state
        self._number.setText(str(state.id))
        title = state.definition.title if state.definition else ""
        self._caption.setText(title if state.unlocked else "")

        if state.completed:
            self._badge.setText("✓ Complete")
        elif state.unlocked:
            self._badge.setText("Start" if state.is_current else "Open")
        else:
            self._badge.setText("🔒")
        self.setCursor(Qt.PointingHandCursor if state.unlocked else Qt.ForbiddenCursor)
        self.setToolTip(f"Challenge #{state.id}" + (f"\n{title}" if title and state.unlocked else ""))
        self._apply_styles()

    def _apply_styles(self) -> None:
        state = self._state
        if state is None:
            return
        base = tile_color(state.unlocked, state.completed)
        top = blend_hex(base, "#FFFFFF", 0.18)
        bottom = blend_hex(base, "#000000", 0.08)
        if state.is_selected:
            border = f"3px solid {CanvasColors.PRIMARY_DARK}"
        elif state.is_current:
            border = f"2px solid {CanvasColors.TILE_CURRENT_RING}"
        else:
            border = "1px solid rgba(255, 255, 255, 0.40)"
        self.setStyleSheet(
            f"""
            QWidget#challengeTile {{
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 {top},
                    stop:1 {bottom}
                );
                border-radius: 14px;
                border: {border};
            }}
            QLabel#challengeTileNumber {{
                color: rgba(255, 255, 255, 0.96);
                font-weight: 900;
                font-size: 26px;
            }}
            QLabel#challengeTileCaption {{
                color: rgba(255, 255, 255, 0.90);
                font-size: 10px;
                font-weight: 700;
            }}
            QLabel#challengeTileBadge {{
                color: rgba(255, 255, 255, 0.92);
                font-size: 11px;
                font-weight: 800;
            }}
            """
        )

    def mousePressEvent(self, event) -> None:
        if self._state is not None and self._state.unlocked:
            self._on_click(self._state)
        super().mousePressEvent(event)
