from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional

from dailycanvas.core.catalog import clamp_grid_size
from dailycanvas.core.schemas import is_hex_color

logger = logging.getLogger(__name__)

DEFAULT_INITIAL_COLOR = "#FFFFFF"
DEFAULT_SELECTED_COLOR = "#000000"


class PaintState(Enum):
    IDLE = "idle"
    PAINTING = "painting"


class PixelCanvas:
    """Editable square color matrix with drag-to-paint support.

    ``press`` engages painting, ``enter`` paints while engaged and
    ``release`` always returns to idle. A read-only canvas ignores all of
    them.
    """

    def __init__(
        self,
        grid_size: int,
        initial_pixels: Optional[List[List[str]]] = None,
        *,
        initial_color: str = DEFAULT_INITIAL_COLOR,
        read_only: bool = False,
    ) -> None:
        self._size = clamp_grid_size(grid_size)
        self._initial_color = initial_color
        self._read_only = read_only
        self._selected_color = DEFAULT_SELECTED_COLOR
        self._state = PaintState.IDLE
        self._dirty = False
        self._pixels = self._blank()
        if initial_pixels is not None:
            if self._matches_size(initial_pixels):
                self._pixels = [list(row) for row in initial_pixels]
            else:
                logger.warning("Saved pixels do not match a %dx%d grid; starting blank", self._size, self._size)

    @property
    def size(self) -> int:
        return self._size

    @property
    def read_only(self) -> bool:
        return self._read_only

    @property
    def state(self) -> PaintState:
        return self._state

    @property
    def dirty(self) -> bool:
        """True once the grid differs from what it was loaded with."""
        return self._dirty

    @property
    def selected_color(self) -> str:
        return self._selected_color

    @selected_color.setter
    def selected_color(self, color: str) -> None:
        if self._read_only:
            return
        if not is_hex_color(color):
            raise ValueError(f"Not a #RRGGBB color: {color!r}")
        self._selected_color = color.upper()

    def color_at(self, row: int, col: int) -> str:
        return self._pixels[row][col]

    def snapshot(self) -> List[List[str]]:
        return [list(row) for row in self._pixels]

    def press(self, row: int, col: int) -> bool:
        if self._read_only:
            return False
        self._state = PaintState.PAINTING
        return self._paint(row, col)

    def enter(self, row: int, col: int) -> bool:
        if self._read_only or self._state is not PaintState.PAINTING:
            return False
        return self._paint(row, col)

    def release(self) -> None:
        self._state = PaintState.IDLE

    def reset(self) -> None:
        """Back to a blank grid. Callers confirm with the user first."""
        if self._read_only:
            return
        self._pixels = self._blank()
        self._state = PaintState.IDLE
        self._dirty = True

    def _paint(self, row: int, col: int) -> bool:
        if not (0 <= row < self._size and 0 <= col < self._size):
            return False
        if self._pixels[row][col] == self._selected_color:
            return False
        self._pixels[row][col] = self._selected_color
        self._dirty = True
        return True

    def _blank(self) -> List[List[str]]:
        return [[self._initial_color] * self._size for _ in range(self._size)]

    def _matches_size(self, pixels: List[List[str]]) -> bool:
        return len(pixels) == self._size and all(len(row) == self._size for row in pixels)
