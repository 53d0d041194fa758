"""Pure unlock/completion transitions over a tile sequence.

Progress is monotonic: nothing here ever clears ``unlocked`` or
``completed``.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional, Sequence

from dailycanvas.core.progress import ChallengeTileState

logger = logging.getLogger(__name__)


def initialize(catalog_size: int) -> List[ChallengeTileState]:
    """Return ``catalog_size`` tiles with only the first one unlocked."""
    if catalog_size < 1:
        raise ValueError(f"catalog_size must be >= 1, got {catalog_size}")
    return [ChallengeTileState(id=i, unlocked=(i == 1), completed=False) for i in range(1, catalog_size + 1)]


def complete(
    tiles: Sequence[ChallengeTileState],
    challenge_id: int,
    catalog_size: int,
) -> List[ChallengeTileState]:
    """Complete *challenge_id* and unlock its successor.

    Locked, already-completed or unknown ids leave the sequence unchanged.
    """
    target = find_tile(tiles, challenge_id)
    if target is None or not target.unlocked or target.completed:
        logger.debug("Ignoring completion of challenge %s (tile %r)", challenge_id, target)
        return list(tiles)

    next_id = challenge_id + 1
    result: List[ChallengeTileState] = []
    for tile in tiles:
        if tile.id == challenge_id:
            tile = replace(tile, completed=True)
        elif tile.id == next_id and challenge_id < catalog_size and not tile.unlocked:
            tile = replace(tile, unlocked=True)
        result.append(tile)
    return result


def find_tile(tiles: Sequence[ChallengeTileState], challenge_id: int) -> Optional[ChallengeTileState]:
    for tile in tiles:
        if tile.id == challenge_id:
            return tile
    return None


def completed_count(tiles: Sequence[ChallengeTileState]) -> int:
    return sum(1 for t in tiles if t.completed)


def current_challenge(tiles: Sequence[ChallengeTileState]) -> Optional[ChallengeTileState]:
    """First unlocked tile that is not completed yet, if any."""
    for tile in tiles:
        if tile.unlocked and not tile.completed:
            return tile
    return None
