"""Pydantic models for the persisted progress and artifact blobs.

Field names match the stored JSON (``isUnlocked``, ``challengeId`` ...) so
blobs written by earlier versions of the app keep loading.
"""

from __future__ import annotations

import re
from typing import List

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, TypeAdapter, field_validator, model_validator

HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")


def is_hex_color(value: object) -> bool:
    return isinstance(value, str) and bool(HEX_COLOR.match(value))


def validate_matrix(pixels: List[List[str]]) -> List[List[str]]:
    """Check that *pixels* is a non-empty square matrix of ``#RRGGBB`` colors."""
    if not isinstance(pixels, (list, tuple)):
        raise ValueError(f"pixel matrix must be a list of rows, got {type(pixels).__name__}")
    size = len(pixels)
    if size == 0:
        raise ValueError("pixel matrix is empty")
    for r, row in enumerate(pixels):
        if not isinstance(row, (list, tuple)):
            raise ValueError(f"row {r} is not a list")
        if len(row) != size:
            raise ValueError(f"row {r} has {len(row)} cells, expected {size}")
        for c, color in enumerate(row):
            if not is_hex_color(color):
                raise ValueError(f"cell ({r}, {c}) is not a #RRGGBB color: {color!r}")
    return pixels


class TileStateModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: StrictInt = Field(ge=1)
    is_unlocked: StrictBool = Field(alias="isUnlocked")
    is_completed: StrictBool = Field(alias="isCompleted")

    @model_validator(mode="after")
    def _completed_implies_unlocked(self) -> "TileStateModel":
        if self.is_completed and not self.is_unlocked:
            raise ValueError(f"tile {self.id} is completed but locked")
        return self


class ArtifactModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    challenge_id: StrictInt = Field(alias="challengeId", ge=1)
    pixels: List[List[str]]

    @field_validator("pixels")
    @classmethod
    def _square_hex_matrix(cls, value: List[List[str]]) -> List[List[str]]:
        return validate_matrix(value)


TILE_LIST = TypeAdapter(List[TileStateModel])
