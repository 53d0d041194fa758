"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from dailycanvas.core.catalog import ChallengeCatalog, ChallengeDefinition
from dailycanvas.core.progress import ChallengeTileState


@dataclass
class TileViewState:
    """What a single tile shows: its progress flags, catalog entry and selection."""

    tile: ChallengeTileState
    definition: Optional[ChallengeDefinition] = None
    is_current: bool = False
    is_selected: bool = False

    @property
    def id(self) -> int:
        return self.tile.id

    @property
    def unlocked(self) -> bool:
        return self.tile.unlocked

    @property
    def completed(self) -> bool:
        return self.tile.completed


def build_tile_view_states(
    tiles: List[ChallengeTileState],
    catalog: ChallengeCatalog,
    selected_id: Optional[int] = None,
    unlock_all: bool = False,
) -> List[TileViewState]:
    """Combine tiles with catalog entries and mark the current target."""
    states: List[TileViewState] = []
    current_marked = False
    for tile in tiles:
        if unlock_all and not tile.unlocked:
            tile = ChallengeTileState(id=tile.id, unlocked=True, completed=tile.completed)
        is_current = False
        if not current_marked and tile.unlocked and not tile.completed:
            is_current = current_marked = True
        states.append(
            TileViewState(
                tile=tile,
                definition=catalog.find(tile.id),
                is_current=is_current,
                is_selected=(tile.id == selected_id),
            )
        )
    return states
