"""Tests for dailycanvas.core.storage – key/value backends."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from dailycanvas.core.errors import StorageError
from dailycanvas.core.storage import JsonFileStorage, MemoryStorage


# ===========================================================================
# MemoryStorage
# ===========================================================================

class TestMemoryStorage:
    def test_get_missing(self):
        assert MemoryStorage().get("x") is None

    def test_set_get_remove(self):
        s = MemoryStorage()
        s.set("a", "1")
        assert s.get("a") == "1"
        s.remove("a")
        assert s.get("a") is None

    def test_remove_missing_is_quiet(self):
        MemoryStorage().remove("nothing")

    def test_initial_copy(self):
        initial = {"a": "1"}
        s = MemoryStorage(initial)
        s.set("b", "2")
        assert "b" not in initial
        assert s.keys() == ["a", "b"]


# ===========================================================================
# JsonFileStorage
# ===========================================================================

class TestJsonFileStorage:
    def test_creates_directory(self, tmp_path: Path):
        d = tmp_path / "nested" / "storage"
        JsonFileStorage(d)
        assert d.is_dir()

    def test_round_trip(self, tmp_path: Path):
        s = JsonFileStorage(tmp_path)
        s.set("progress", '[{"id": 1}]')
        assert s.get("progress") == '[{"id": 1}]'
        assert (tmp_path / "progress.json").read_text(encoding="utf-8") == '[{"id": 1}]'

    def test_get_missing(self, tmp_path: Path):
        assert JsonFileStorage(tmp_path).get("missing") is None

    def test_overwrite_leaves_no_temp_files(self, tmp_path: Path):
        s = JsonFileStorage(tmp_path)
        s.set("k", "one")
        s.set("k", "two")
        assert s.get("k") == "two"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["k.json"]

    def test_remove(self, tmp_path: Path):
        s = JsonFileStorage(tmp_path)
        s.set("k", "v")
        s.remove("k")
        assert s.get("k") is None
        s.remove("k")

    @pytest.mark.parametrize("key", ["", "../escape", "a/b", "with space"])
    def test_rejects_bad_keys(self, tmp_path: Path, key: str):
        with pytest.raises(ValueError):
            JsonFileStorage(tmp_path).set(key, "v")

    def test_write_failure_raises_storage_error(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        s = JsonFileStorage(tmp_path)

        def _fail(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(os, "replace", _fail)
        with pytest.raises(StorageError):
            s.set("k", "v")
        assert list(tmp_path.iterdir()) == []

    def test_undecodable_file_reads_as_garbage(self, tmp_path: Path):
        (tmp_path / "k.json").write_bytes(b"\xff\xfe\x00bad")
        assert JsonFileStorage(tmp_path).get("k") == ""

    def test_read_failure_raises_storage_error(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        s = JsonFileStorage(tmp_path)
        s.set("k", '[{"id": 1}]')

        def _fail(self, *args, **kwargs):
            raise PermissionError("denied")

        monkeypatch.setattr(Path, "read_text", _fail)
        with pytest.raises(StorageError):
            s.get("k")
        monkeypatch.undo()
        assert s.get("k") == '[{"id": 1}]'
