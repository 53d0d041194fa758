from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from pydantic import ValidationError

from dailycanvas.core.schemas import ArtifactModel, validate_matrix
from dailycanvas.core.storage import StoragePort

logger = logging.getLogger(__name__)

Matrix = List[List[str]]


@dataclass
class ArtifactRecord:
    challenge_id: int
    pixels: Matrix = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.pixels)


class ArtifactStore:
    """Saved drawings, one record per challenge id.

    Artifacts are supplementary to progress: unreadable data is logged and
    skipped instead of failing the load.
    """

    def __init__(self, storage: StoragePort) -> None:
        self._storage = storage

    def load(self, key: str) -> List[ArtifactRecord]:
        raw = self._storage.get(key)
        if raw is None:
            return []
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Could not parse artifacts under %r: %s", key, e)
            return []
        if not isinstance(payload, list):
            logger.warning("Artifacts under %r are not a list; treating as empty", key)
            return []

        by_id: dict[int, ArtifactRecord] = {}
        for index, item in enumerate(payload):
            try:
                model = ArtifactModel.model_validate(item)
            except ValidationError as e:
                logger.warning("Skipping malformed artifact #%d under %r: %s", index, key, e.error_count())
                continue
            # later duplicates replace earlier ones, keeping first position
            by_id[model.challenge_id] = ArtifactRecord(challenge_id=model.challenge_id, pixels=model.pixels)
        return list(by_id.values())

    def find(self, key: str, challenge_id: int) -> Optional[ArtifactRecord]:
        for record in self.load(key):
            if record.challenge_id == challenge_id:
                return record
        return None

    def upsert(self, key: str, challenge_id: int, pixels: Matrix) -> ArtifactRecord:
        """Replace the record for *challenge_id* or append a new one."""
        snapshot = [list(row) for row in validate_matrix(pixels)]
        records = self.load(key)
        for record in records:
            if record.challenge_id == challenge_id:
                record.pixels = snapshot
                saved = record
                break
        else:
            saved = ArtifactRecord(challenge_id=challenge_id, pixels=snapshot)
            records.append(saved)
        self._write(key, records)
        logger.info("Saved %dx%d artifact for challenge %d", saved.size, saved.size, challenge_id)
        return saved

    def clear(self, key: str) -> None:
        self._storage.remove(key)

    def _write(self, key: str, records: Sequence[ArtifactRecord]) -> None:
        payload = [
            ArtifactModel(challenge_id=r.challenge_id, pixels=r.pixels).model_dump(by_alias=True) for r in records
        ]
        self._storage.set(key, json.dumps(payload))
