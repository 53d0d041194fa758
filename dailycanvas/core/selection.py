from __future__ import annotations

import logging
from typing import Optional

from dailycanvas.core.artifacts import Matrix
from dailycanvas.core.board import ChallengeBoard
from dailycanvas.core.catalog import ChallengeCatalog, ChallengeDefinition
from dailycanvas.core.errors import ReadOnlyChallengeError
from dailycanvas.core.progress import ChallengeTileState

logger = logging.getLogger(__name__)


class SelectionController:
    """Tracks the single challenge open for editing.

    ``selected_id`` is ``None`` while closed. Locked tiles never open.
    """

    def __init__(self, catalog: ChallengeCatalog, board: ChallengeBoard) -> None:
        self._catalog = catalog
        self._board = board
        self._selected_id: Optional[int] = None

    @property
    def selected_id(self) -> Optional[int]:
        return self._selected_id

    @property
    def is_open(self) -> bool:
        return self._selected_id is not None

    def open(self, tile: ChallengeTileState) -> bool:
        if not tile.unlocked:
            logger.debug("Tile %d is locked; ignoring open", tile.id)
            return False
        self._selected_id = tile.id
        return True

    def close(self) -> None:
        self._selected_id = None

    def resolve_content(self, challenge_id: int) -> ChallengeDefinition:
        """Catalog entry for *challenge_id*; raises ChallengeNotFoundError."""
        return self._catalog.get(challenge_id)

    def is_read_only(self, challenge_id: int) -> bool:
        return self._board.is_completed(challenge_id)

    def is_editable(self, challenge_id: int) -> bool:
        """Unlocked on the board and not completed yet."""
        tile = self._board.tile(challenge_id)
        return bool(tile and tile.unlocked and not tile.completed)

    def saved_pixels(self, challenge_id: int) -> Optional[Matrix]:
        record = self._board.find_artifact(challenge_id)
        return record.pixels if record else None

    def save_artifact_and_complete(self, challenge_id: int, pixels: Optional[Matrix]) -> bool:
        """Store the drawing, then complete the challenge, then close.

        With no new drawing and nothing saved before, logs a warning and
        leaves everything (selection included) untouched.
        A drawing whose size differs from the challenge grid raises ValueError
        before anything is stored.
        """
        if self.is_read_only(challenge_id):
            raise ReadOnlyChallengeError(challenge_id)
        tile = self._board.tile(challenge_id)
        if tile is None or not tile.unlocked:
            logger.warning("Challenge %d is not unlocked; nothing saved", challenge_id)
            return False
        definition = self._catalog.find(challenge_id)
        if pixels is not None and definition is not None and definition.grid_size is not None:
            if len(pixels) != definition.grid_size:
                raise ValueError(
                    f"Challenge {challenge_id} expects a {definition.grid_size}x{definition.grid_size} grid, got {len(pixels)} rows"
                )
        if pixels is None:
            if self._board.find_artifact(challenge_id) is None:
                logger.warning("No pixel art to save for challenge %d", challenge_id)
                return False
        else:
            self._board.save_artifact(challenge_id, pixels)
        self._board.complete(challenge_id)
        self.close()
        return True

    def complete(self, challenge_id: int) -> bool:
        if self.is_read_only(challenge_id):
            raise ReadOnlyChallengeError(challenge_id)
        changed = self._board.complete(challenge_id)
        if changed:
            self.close()
        return changed

    def reset(self) -> None:
        self.close()
        self._board.reset()
