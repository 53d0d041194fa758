from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

from dailycanvas.core.errors import ChallengeNotFoundError

MIN_GRID_SIZE = 8
MAX_GRID_SIZE = 32
DEFAULT_GRID_SIZE = 16

DEFAULT_CATALOG_DIR = Path(__file__).resolve().parent.parent / "data" / "challenges"


class Category(str, Enum):
    WRITING = "writing"
    VISUAL = "visual"
    MUSIC = "music"
    THINKING = "thinking"
    MIXED = "mixed"


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class ChallengeKind(str, Enum):
    STANDARD = "standard"
    PIXEL_ART = "pixel-art"


def clamp_grid_size(size: int) -> int:
    return max(MIN_GRID_SIZE, min(MAX_GRID_SIZE, int(size)))


@dataclass(frozen=True)
class ChallengeDefinition:
    id: int
    title: str
    description: str
    tips: Tuple[str, ...] = ()
    category: Category = Category.MIXED
    difficulty: Difficulty = Difficulty.EASY
    estimated_time: str = ""
    kind: ChallengeKind = ChallengeKind.STANDARD
    grid_size: Optional[int] = None

    @property
    def is_pixel_art(self) -> bool:
        return self.kind is ChallengeKind.PIXEL_ART


class ChallengeCatalog:
    """Immutable, ordered list of challenge definitions.

    Definitions are read from ``challenge<N>.yaml`` files. Identifiers must be
    contiguous starting at 1.
    """

    def __init__(self, definitions: Optional[List[ChallengeDefinition]] = None, base_dir: Optional[Path] = None) -> None:
        if definitions is None:
            definitions = self._load_definitions(base_dir or DEFAULT_CATALOG_DIR)
        self._definitions: Dict[int, ChallengeDefinition] = {}
        for expected_id, definition in enumerate(definitions, start=1):
            if definition.id != expected_id:
                raise ValueError(
                    f"Challenge ids must be contiguous from 1: expected {expected_id}, got {definition.id}"
                )
            self._definitions[definition.id] = definition

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, challenge_id: object) -> bool:
        return challenge_id in self._definitions

    def all(self) -> List[ChallengeDefinition]:
        return list(self._definitions.values())

    def get(self, challenge_id: int) -> ChallengeDefinition:
        try:
            return self._definitions[challenge_id]
        except KeyError:
            raise ChallengeNotFoundError(challenge_id) from None

    def find(self, challenge_id: int) -> Optional[ChallengeDefinition]:
        return self._definitions.get(challenge_id)

    @staticmethod
    def _load_definitions(base_dir: Path) -> List[ChallengeDefinition]:
        if not base_dir.exists():
            raise FileNotFoundError(f"Challenges directory not found: {base_dir}")

        def _sort_key(p: Path) -> tuple[int, str]:
            m = re.match(r"^challenge(\d+)$", p.stem)
            if m:
                return (int(m.group(1)), p.stem)
            return (10**9, p.stem)

        definitions: List[ChallengeDefinition] = []
        for path in sorted(base_dir.glob("challenge*.yaml"), key=_sort_key):
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
            definitions.append(parse_definition(raw, source=path.name))

        if not definitions:
            raise ValueError(f"No challenge files (challenge*.yaml) found in {base_dir}")
        return definitions


def parse_definition(raw: object, source: str = "<memory>") -> ChallengeDefinition:
    """Build a ChallengeDefinition from one parsed YAML document."""
    if not raw or not isinstance(raw, dict):
        raise ValueError(f"{source}: expected YAML mapping with 'id', 'title' and 'description'")

    challenge_id = raw.get("id")
    if not isinstance(challenge_id, int) or isinstance(challenge_id, bool) or challenge_id < 1:
        raise ValueError(f"{source}: 'id' must be a positive integer")
    title = raw.get("title")
    if not title or not isinstance(title, str):
        raise ValueError(f"{source}: missing or invalid 'title'")
    description = raw.get("description")
    if not description or not isinstance(description, str):
        raise ValueError(f"{source}: missing or invalid 'description'")

    tips_raw = raw.get("tips") or []
    if not isinstance(tips_raw, list):
        raise ValueError(f"{source}: 'tips' must be a list")
    tips = tuple(str(t).strip() for t in tips_raw if str(t).strip())

    try:
        category = Category(raw.get("category", Category.MIXED.value))
        difficulty = Difficulty(raw.get("difficulty", Difficulty.EASY.value))
        kind = ChallengeKind(raw.get("type", ChallengeKind.STANDARD.value))
    except ValueError as e:
        raise ValueError(f"{source}: {e}") from e

    grid_size: Optional[int] = None
    if kind is ChallengeKind.PIXEL_ART:
        params = raw.get("params") or {}
        if not isinstance(params, dict):
            raise ValueError(f"{source}: 'params' must be a mapping")
        size = params.get("grid_size", DEFAULT_GRID_SIZE)
        if not isinstance(size, int) or isinstance(size, bool):
            raise ValueError(f"{source}: 'grid_size' must be an integer")
        grid_size = clamp_grid_size(size)

    return ChallengeDefinition(
        id=challenge_id,
        title=title.strip(),
        description=" ".join(description.split()),
        tips=tips,
        category=category,
        difficulty=difficulty,
        estimated_time=str(raw.get("estimated_time", "")).strip(),
        kind=kind,
        grid_size=grid_size,
    )
