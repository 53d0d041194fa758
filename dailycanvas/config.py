"""Runtime settings: defaults, optional ``config.yaml`` and environment overrides."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_HOME = Path.home() / ".dailycanvas"
CONFIG_FILENAME = "config.yaml"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    home: Path = DEFAULT_HOME
    total_challenges: int = 30
    progress_key: str = "creativityProgress"
    artifacts_key: str = "creativityArtifacts"
    unlock_all: bool = False
    log_level: str = "INFO"

    @property
    def storage_dir(self) -> Path:
        return self.home / "storage"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        home = Path(env.get("DAILYCANVAS_HOME") or DEFAULT_HOME).expanduser()
        file_values = _read_config_file(home / CONFIG_FILENAME)

        def pick(name: str, default: Any) -> Any:
            value = env.get(f"DAILYCANVAS_{name.upper()}")
            if value is not None:
                return value
            return file_values.get(name, default)

        return cls(
            home=home,
            total_challenges=_as_int(pick("total_challenges", 30), "total_challenges"),
            progress_key=str(pick("progress_key", "creativityProgress")),
            artifacts_key=str(pick("artifacts_key", "creativityArtifacts")),
            unlock_all=_as_bool(pick("unlock_all", False)),
            log_level=str(pick("log_level", "INFO")),
        ).normalized()

    def normalized(self) -> "Settings":
        """Validate fields. Raises ValueError on invalid configuration."""
        if self.total_challenges < 1:
            raise ValueError(f"total_challenges must be >= 1, got: {self.total_challenges}")
        progress_key = self.progress_key.strip()
        artifacts_key = self.artifacts_key.strip()
        if not progress_key or not artifacts_key:
            raise ValueError("progress_key and artifacts_key must be non-empty")
        if progress_key == artifacts_key:
            raise ValueError("progress_key and artifacts_key must differ")
        log_level = self.log_level.strip().upper()
        if log_level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got: {self.log_level}")
        return Settings(
            home=self.home,
            total_challenges=self.total_challenges,
            progress_key=progress_key,
            artifacts_key=artifacts_key,
            unlock_all=self.unlock_all,
            log_level=log_level,
        )


def _read_config_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, OSError) as e:
        logger.warning("Could not read config from %s: %s", path, e)
        return {}
    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected a mapping", path)
        return {}
    return data


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got: {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer, got: {value!r}") from None


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")
