"""Reflowing grid of challenge tiles with an inline editor panel."""

from __future__ import annotations

from typing import Callable, List, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QGridLayout, QWidget

from dailycanvas.core.grid_placement import column_count, grid_positions, insertion_index, splice
from dailycanvas.ui.models import TileViewState
from dailycanvas.ui.tile_widgets import TILE_SIZE, ChallengeTile

GRID_SPACING = 14


class ChallengeGridWidget(QWidget):
    """Lays tiles out left-to-right and splices the panel after the selected row."""

    def __init__(
        self,
        *,
        on_tile_clicked: Callable[[TileViewState], None],
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._on_tile_clicked = on_tile_clicked
        self._tiles: List[ChallengeTile] = []
        self._panel: Optional[QWidget] = None
        self._selected_id: Optional[int] = None
        self._columns = 0

        # Explicit minimum so the layout never pins the width and columns can shrink.
        self.setMinimumWidth(TILE_SIZE)

        self._layout = QGridLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(GRID_SPACING)
        self._layout.setAlignment(Qt.AlignTop | Qt.AlignHCenter)

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def panel(self) -> Optional[QWidget]:
        return self._panel

    def set_tile_states(self, states: List[TileViewState]) -> None:
        while len(self._tiles) < len(states):
            self._tiles.append(ChallengeTile(on_click=self._on_tile_clicked, parent=self))
        for tile, state in zip(self._tiles, states):
            tile.set_state(state)
            tile.show()
        for tile in self._tiles[len(states):]:
            tile.setParent(None)
            tile.deleteLater()
        del self._tiles[len(states):]
        self._relayout(force=True)

    def set_panel(self, panel: Optional[QWidget], selected_id: Optional[int]) -> None:
        if self._panel is not None and self._panel is not panel:
            self._layout.removeWidget(self._panel)
            self._panel.setParent(None)
            self._panel.deleteLater()
        self._panel = panel
        self._selected_id = selected_id if panel is not None else None
        if panel is not None:
            panel.setParent(self)
            panel.show()
        self._relayout(force=True)

    def measured_tile_width(self) -> Optional[int]:
        if not self._tiles:
            return None
        width = self._tiles[0].width()
        return width + GRID_SPACING if width > 0 else None

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._relayout()

    def _relayout(self, force: bool = False) -> None:
        columns = column_count(self.width() + GRID_SPACING, self.measured_tile_width())
        if not force and columns == self._columns:
            return
        self._columns = columns

        while self._layout.count():
            self._layout.takeAt(0)

        items: List[QWidget] = list(self._tiles)
        panel_index: Optional[int] = None
        if self._panel is not None and self._selected_id is not None:
            panel_index = min(insertion_index(self._selected_id, columns), len(items))
            items = splice(items, panel_index, self._panel)

        for widget, (row, col, span) in zip(items, grid_positions(len(items), columns, panel_index)):
            self._layout.addWidget(widget, row, col, 1, span)
