from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from pydantic import ValidationError

from dailycanvas.core.schemas import TILE_LIST, TileStateModel
from dailycanvas.core.storage import StoragePort

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChallengeTileState:
    id: int
    unlocked: bool = False
    completed: bool = False


class ProgressStore:
    """Persists the ordered tile sequence as one JSON blob per key.

    A stored blob that does not match the expected shape is erased on load
    and reported as absent, so the caller starts from a fresh sequence.
    """

    def __init__(self, storage: StoragePort) -> None:
        self._storage = storage

    def load(self, key: str, expected_count: int) -> Optional[List[ChallengeTileState]]:
        raw = self._storage.get(key)
        if raw is None:
            return None
        try:
            models = TILE_LIST.validate_python(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning("Discarding unreadable progress under %r: %s", key, _short(e))
            self.clear(key)
            return None

        if len(models) != expected_count:
            logger.warning(
                "Discarding progress under %r: %d tiles stored, %d expected",
                key,
                len(models),
                expected_count,
            )
            self.clear(key)
            return None

        ids = [m.id for m in models]
        if ids != list(range(1, expected_count + 1)):
            logger.warning("Discarding progress under %r: tile ids out of order", key)
            self.clear(key)
            return None

        return [ChallengeTileState(id=m.id, unlocked=m.is_unlocked, completed=m.is_completed) for m in models]

    def save(self, key: str, tiles: Sequence[ChallengeTileState]) -> None:
        payload = [
            TileStateModel(id=t.id, is_unlocked=t.unlocked, is_completed=t.completed).model_dump(by_alias=True)
            for t in tiles
        ]
        self._storage.set(key, json.dumps(payload))

    def clear(self, key: str) -> None:
        self._storage.remove(key)


def _short(error: Exception) -> str:
    text = str(error).splitlines()
    return text[0] if text else type(error).__name__
