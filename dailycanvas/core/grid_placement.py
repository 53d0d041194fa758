"""Where to splice the expanded editor panel into a reflowing tile grid.

Tiles flow left-to-right, top-to-bottom. The panel goes right after the
last tile of the selected tile's row so it spans the row beneath it.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")

# Used when no tile has been laid out yet (empty grid, first paint).
FALLBACK_TILE_WIDTH = 120


def column_count(container_width: float, tile_width: Optional[float] = None) -> int:
    width = tile_width if tile_width and tile_width > 0 else FALLBACK_TILE_WIDTH
    return max(1, int(max(0.0, container_width) // width))


def insertion_index(challenge_id: int, columns: int) -> int:
    columns = max(1, int(columns))
    row = (challenge_id - 1) // columns
    return (row + 1) * columns


def resolve_insertion_index(
    challenge_id: int,
    container_width: float,
    tile_width: Optional[float] = None,
) -> int:
    return insertion_index(challenge_id, column_count(container_width, tile_width))


def splice(items: Sequence[T], index: int, panel: T) -> List[T]:
    """Insert *panel* at *index*, clamped to the end for a partial last row."""
    result = list(items)
    result.insert(max(0, min(index, len(result))), panel)
    return result


def grid_positions(count: int, columns: int, panel_index: Optional[int] = None) -> List[Tuple[int, int, int]]:
    """``(row, column, column_span)`` for each item of a spliced sequence.

    *count* includes the panel. The panel starts a new row and spans all
    columns; tiles after it continue on the following row.
    """
    columns = max(1, int(columns))
    positions: List[Tuple[int, int, int]] = []
    row = col = 0
    for i in range(count):
        if i == panel_index:
            if col:
                row, col = row + 1, 0
            positions.append((row, 0, columns))
            row += 1
            continue
        positions.append((row, col, 1))
        col += 1
        if col == columns:
            row, col = row + 1, 0
    return positions
