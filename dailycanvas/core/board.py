from __future__ import annotations

import logging
from typing import List, Optional

from dailycanvas.core import progression
from dailycanvas.core.artifacts import ArtifactRecord, ArtifactStore, Matrix
from dailycanvas.core.progress import ChallengeTileState, ProgressStore

logger = logging.getLogger(__name__)


class ChallengeBoard:
    """Live tile sequence plus the two stores it is persisted through.

    Tiles are loaded once at construction; a missing or discarded blob is
    replaced by a freshly initialized sequence and written back.
    """

    def __init__(
        self,
        progress_store: ProgressStore,
        artifact_store: ArtifactStore,
        total_challenges: int,
        progress_key: str = "creativityProgress",
        artifacts_key: str = "creativityArtifacts",
    ) -> None:
        self._progress_store = progress_store
        self._artifact_store = artifact_store
        self._total = total_challenges
        self._progress_key = progress_key
        self._artifacts_key = artifacts_key
        self._tiles = self._load_or_initialize()

    @property
    def total_challenges(self) -> int:
        return self._total

    @property
    def tiles(self) -> List[ChallengeTileState]:
        return list(self._tiles)

    def tile(self, challenge_id: int) -> Optional[ChallengeTileState]:
        return progression.find_tile(self._tiles, challenge_id)

    def is_completed(self, challenge_id: int) -> bool:
        tile = self.tile(challenge_id)
        return bool(tile and tile.completed)

    def completed_count(self) -> int:
        return progression.completed_count(self._tiles)

    def current_challenge(self) -> Optional[ChallengeTileState]:
        return progression.current_challenge(self._tiles)

    def complete(self, challenge_id: int) -> bool:
        """Apply a completion and persist. Returns True if anything changed."""
        updated = progression.complete(self._tiles, challenge_id, self._total)
        if updated == self._tiles:
            return False
        self._progress_store.save(self._progress_key, updated)
        self._tiles = updated
        logger.info("Challenge %d completed (%d/%d)", challenge_id, self.completed_count(), self._total)
        return True

    def find_artifact(self, challenge_id: int) -> Optional[ArtifactRecord]:
        return self._artifact_store.find(self._artifacts_key, challenge_id)

    def save_artifact(self, challenge_id: int, pixels: Matrix) -> ArtifactRecord:
        return self._artifact_store.upsert(self._artifacts_key, challenge_id, pixels)

    def reset(self) -> None:
        """Erase both stores and start over from tile 1."""
        self._artifact_store.clear(self._artifacts_key)
        self._progress_store.clear(self._progress_key)
        self._tiles = progression.initialize(self._total)
        self._progress_store.save(self._progress_key, self._tiles)
        logger.info("Progress and artifacts reset")

    def _load_or_initialize(self) -> List[ChallengeTileState]:
        tiles = self._progress_store.load(self._progress_key, self._total)
        if tiles is None:
            logger.info("No usable progress under %r; starting fresh", self._progress_key)
            tiles = progression.initialize(self._total)
            self._progress_store.save(self._progress_key, tiles)
        return tiles
