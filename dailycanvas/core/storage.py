"""Key/value storage backends used by the progress and artifact stores."""

from __future__ import annotations

import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol

from dailycanvas.core.errors import StorageError

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class StoragePort(Protocol):
    """Minimal string storage interface (mirrors browser local storage)."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStorage:
    """Process-local storage. Used by tests and ephemeral sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._data)


class JsonFileStorage:
    """Stores each key as ``<directory>/<key>.json``.

    Writes go to a temporary file in the same directory and are moved into
    place with ``os.replace``, so a reader never sees a half-written blob.
    """

    def __init__(self, directory: Path) -> None:
        self._directory = Path(directory)
        self._directory.mkdir(parents=True, exist_ok=True)

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self._directory / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            # Undecodable bytes count as garbage so the stores run their recovery path.
            logger.warning("Could not decode %s: %s", path, e)
            return ""
        except OSError as e:
            logger.error("Could not read %s: %s", path, e)
            raise StorageError(f"Could not read {path}: {e}") from e

    def set(self, key: str, value: str) -> None:
        path = self.path_for(key)
        self._directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self._directory), prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(value)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_path, path)
        except OSError as e:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            logger.error("Could not write %s: %s", path, e)
            raise StorageError(f"Could not write {path}: {e}") from e

    def remove(self, key: str) -> None:
        path = self.path_for(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.error("Could not remove %s: %s", path, e)
            raise StorageError(f"Could not remove {path}: {e}") from e
