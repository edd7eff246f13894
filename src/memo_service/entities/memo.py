"""Memo domain entity."""

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class Memo:
    """Domain entity for a persisted note.

    This is an internal representation used by handlers and repositories.
    For API contracts, use the DTO classes from the dto package.

    Attributes:
        id: Unique identifier, assigned at creation and never reused
        timestamp: When this memo was created (UTC)
        done: Whether the memo has been resolved; the only mutable field
        text: The note itself, supplied by the caller
    """

    id: uuid.UUID
    timestamp: datetime
    done: bool
    text: str

    @classmethod
    def new(cls, text: str) -> "Memo":
        """Build a fresh, not yet done memo with a generated id and timestamp."""
        return cls(
            id=uuid.uuid4(),
            timestamp=datetime.now(timezone.utc),
            done=False,
            text=text,
        )
