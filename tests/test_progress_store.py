"""Tests for dailycanvas.core.progress – tile persistence and recovery."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from dailycanvas.core.errors import StorageError
from dailycanvas.core.progress import ChallengeTileState, ProgressStore
from dailycanvas.core.progression import complete, initialize
from dailycanvas.core.storage import JsonFileStorage, MemoryStorage

KEY = "creativityProgress"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture()
def store(storage: MemoryStorage) -> ProgressStore:
    return ProgressStore(storage)


def _blob(tiles: list[dict]) -> str:
    return json.dumps(tiles)


# ---------------------------------------------------------------------------
# ChallengeTileState dataclass
# ---------------------------------------------------------------------------

class TestChallengeTileState:
    def test_defaults(self):
        t = ChallengeTileState(id=1)
        assert t.unlocked is False
        assert t.completed is False

    def test_frozen(self):
        t = ChallengeTileState(id=1)
        with pytest.raises(AttributeError):
            t.completed = True  # type: ignore[misc]


# ---------------------------------------------------------------------------
# save / load round trip
# ---------------------------------------------------------------------------

class TestRoundTrip:
    def test_absent_key(self, store: ProgressStore):
        assert store.load(KEY, 30) is None

    def test_fresh_sequence(self, store: ProgressStore):
        tiles = initialize(30)
        store.save(KEY, tiles)
        assert store.load(KEY, 30) == tiles

    def test_after_completions(self, store: ProgressStore):
        tiles = complete(complete(initialize(5), 1, 5), 2, 5)
        store.save(KEY, tiles)
        assert store.load(KEY, 5) == tiles

    def test_blob_uses_stored_field_names(self, store: ProgressStore, storage: MemoryStorage):
        store.save(KEY, initialize(2))
        data = json.loads(storage.get(KEY))
        assert data == [
            {"id": 1, "isUnlocked": True, "isCompleted": False},
            {"id": 2, "isUnlocked": False, "isCompleted": False},
        ]

    def test_last_write_wins(self, store: ProgressStore):
        store.save(KEY, initialize(3))
        later = complete(initialize(3), 1, 3)
        store.save(KEY, later)
        assert store.load(KEY, 3) == later

    def test_clear(self, store: ProgressStore, storage: MemoryStorage):
        store.save(KEY, initialize(3))
        store.clear(KEY)
        assert storage.get(KEY) is None
        assert store.load(KEY, 3) is None

    def test_file_backend(self, tmp_path: Path):
        s = ProgressStore(JsonFileStorage(tmp_path))
        tiles = complete(initialize(4), 1, 4)
        s.save(KEY, tiles)
        assert (tmp_path / f"{KEY}.json").exists()
        assert ProgressStore(JsonFileStorage(tmp_path)).load(KEY, 4) == tiles

    def test_read_failure_keeps_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        s = ProgressStore(JsonFileStorage(tmp_path))
        tiles = complete(initialize(4), 1, 4)
        s.save(KEY, tiles)

        def _fail(self, *args, **kwargs):
            raise OSError("I/O error")

        monkeypatch.setattr(Path, "read_text", _fail)
        with pytest.raises(StorageError):
            s.load(KEY, 4)
        monkeypatch.undo()
        assert s.load(KEY, 4) == tiles


# ---------------------------------------------------------------------------
# load – discard and recover
# ---------------------------------------------------------------------------

class TestLoadDiscards:
    def test_length_mismatch(self, store: ProgressStore, storage: MemoryStorage):
        store.save(KEY, initialize(5))
        assert store.load(KEY, 30) is None
        assert storage.get(KEY) is None

    def test_invalid_json(self, store: ProgressStore, storage: MemoryStorage):
        storage.set(KEY, "NOT VALID JSON")
        assert store.load(KEY, 3) is None
        assert storage.get(KEY) is None

    def test_empty_string(self, store: ProgressStore, storage: MemoryStorage):
        storage.set(KEY, "")
        assert store.load(KEY, 3) is None
        assert storage.get(KEY) is None

    def test_not_a_list(self, store: ProgressStore, storage: MemoryStorage):
        storage.set(KEY, json.dumps({"id": 1, "isUnlocked": True, "isCompleted": False}))
        assert store.load(KEY, 1) is None
        assert storage.get(KEY) is None

    def test_missing_field(self, store: ProgressStore, storage: MemoryStorage):
        storage.set(KEY, _blob([{"id": 1, "isUnlocked": True}]))
        assert store.load(KEY, 1) is None
        assert storage.get(KEY) is None

    def test_wrong_field_type(self, store: ProgressStore, storage: MemoryStorage):
        storage.set(KEY, _blob([{"id": 1, "isUnlocked": "yes", "isCompleted": False}]))
        assert store.load(KEY, 1) is None

    def test_string_id_not_coerced(self, store: ProgressStore, storage: MemoryStorage):
        storage.set(KEY, _blob([{"id": "1", "isUnlocked": True, "isCompleted": False}]))
        assert store.load(KEY, 1) is None

    def test_ids_out_of_order(self, store: ProgressStore, storage: MemoryStorage):
        storage.set(
            KEY,
            _blob(
                [
                    {"id": 2, "isUnlocked": True, "isCompleted": False},
                    {"id": 1, "isUnlocked": True, "isCompleted": False},
                ]
            ),
        )
        assert store.load(KEY, 2) is None
        assert storage.get(KEY) is None

    def test_completed_but_locked(self, store: ProgressStore, storage: MemoryStorage):
        storage.set(KEY, _blob([{"id": 1, "isUnlocked": False, "isCompleted": True}]))
        assert store.load(KEY, 1) is None
