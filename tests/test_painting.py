"""Tests for dailycanvas.core.painting – pixel canvas and drag-to-paint."""

from __future__ import annotations

import pytest

from dailycanvas.core.painting import (
    DEFAULT_INITIAL_COLOR,
    DEFAULT_SELECTED_COLOR,
    PaintState,
    PixelCanvas,
)


@pytest.fixture()
def canvas() -> PixelCanvas:
    return PixelCanvas(8)


# ===========================================================================
# Construction
# ===========================================================================

class TestConstruction:
    def test_blank_grid(self, canvas: PixelCanvas):
        assert canvas.size == 8
        assert canvas.snapshot() == [[DEFAULT_INITIAL_COLOR] * 8 for _ in range(8)]
        assert canvas.selected_color == DEFAULT_SELECTED_COLOR
        assert canvas.state is PaintState.IDLE
        assert canvas.dirty is False

    @pytest.mark.parametrize("raw,expected", [(4, 8), (40, 32), (24, 24)])
    def test_size_clamped(self, raw: int, expected: int):
        assert PixelCanvas(raw).size == expected

    def test_loads_initial_pixels(self):
        pixels = [["#FF0000"] * 8 for _ in range(8)]
        c = PixelCanvas(8, pixels)
        assert c.snapshot() == pixels
        assert c.dirty is False

    def test_mismatched_initial_pixels_ignored(self):
        c = PixelCanvas(16, [["#FF0000"] * 8 for _ in range(8)])
        assert c.size == 16
        assert c.color_at(0, 0) == DEFAULT_INITIAL_COLOR

    def test_snapshot_is_a_copy(self, canvas: PixelCanvas):
        snap = canvas.snapshot()
        snap[0][0] = "#123456"
        assert canvas.color_at(0, 0) == DEFAULT_INITIAL_COLOR


# ===========================================================================
# Pointer state machine
# ===========================================================================

class TestPainting:
    def test_press_paints_and_engages(self, canvas: PixelCanvas):
        assert canvas.press(1, 2) is True
        assert canvas.state is PaintState.PAINTING
        assert canvas.color_at(1, 2) == DEFAULT_SELECTED_COLOR
        assert canvas.dirty is True

    def test_enter_without_press_does_nothing(self, canvas: PixelCanvas):
        assert canvas.enter(0, 0) is False
        assert canvas.color_at(0, 0) == DEFAULT_INITIAL_COLOR

    def test_drag_paints_cells(self, canvas: PixelCanvas):
        canvas.press(0, 0)
        canvas.enter(0, 1)
        canvas.enter(0, 2)
        assert [canvas.color_at(0, c) for c in range(3)] == [DEFAULT_SELECTED_COLOR] * 3

    def test_release_stops_drag(self, canvas: PixelCanvas):
        canvas.press(0, 0)
        canvas.release()
        assert canvas.state is PaintState.IDLE
        assert canvas.enter(0, 1) is False

    def test_release_when_idle(self, canvas: PixelCanvas):
        canvas.release()
        assert canvas.state is PaintState.IDLE

    def test_out_of_bounds_ignored(self, canvas: PixelCanvas):
        assert canvas.press(8, 0) is False
        assert canvas.state is PaintState.PAINTING
        assert canvas.dirty is False

    def test_selected_color(self, canvas: PixelCanvas):
        canvas.selected_color = "#ff0000"
        canvas.press(0, 0)
        assert canvas.color_at(0, 0) == "#FF0000"

    def test_invalid_color_rejected(self, canvas: PixelCanvas):
        with pytest.raises(ValueError):
            canvas.selected_color = "red"

    def test_reset(self, canvas: PixelCanvas):
        canvas.press(0, 0)
        canvas.reset()
        assert canvas.color_at(0, 0) == DEFAULT_INITIAL_COLOR
        assert canvas.state is PaintState.IDLE
        assert canvas.dirty is True


# ===========================================================================
# Read-only
# ===========================================================================

class TestReadOnly:
    @pytest.fixture()
    def saved(self) -> list[list[str]]:
        return [["#00FF00"] * 8 for _ in range(8)]

    def test_press_and_enter_ignored(self, saved):
        c = PixelCanvas(8, saved, read_only=True)
        assert c.press(0, 0) is False
        assert c.enter(0, 1) is False
        assert c.state is PaintState.IDLE
        assert c.snapshot() == saved

    def test_color_change_ignored(self, saved):
        c = PixelCanvas(8, saved, read_only=True)
        c.selected_color = "#FF0000"
        assert c.selected_color == DEFAULT_SELECTED_COLOR

    def test_reset_ignored(self, saved):
        c = PixelCanvas(8, saved, read_only=True)
        c.reset()
        assert c.snapshot() == saved
        assert c.dirty is False
