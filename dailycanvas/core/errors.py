"""Exception types shared by the core modules."""

from __future__ import annotations


class DailyCanvasError(Exception):
    """Base class for errors raised by Daily Canvas."""


class StorageError(DailyCanvasError):
    """A storage backend could not write or erase a key."""


class ChallengeNotFoundError(DailyCanvasError, KeyError):
    """No catalog entry exists for the requested challenge id."""

    def __init__(self, challenge_id: int) -> None:
        super().__init__(challenge_id)
        self.challenge_id = challenge_id

    def __str__(self) -> str:
        return f"Challenge #{self.challenge_id} not found in catalog"


class ReadOnlyChallengeError(DailyCanvasError):
    """A mutation was attempted on a challenge that is already completed."""

    def __init__(self, challenge_id: int) -> None:
        super().__init__(f"Challenge #{challenge_id} is completed and read-only")
        self.challenge_id = challenge_id
