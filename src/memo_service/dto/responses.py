"""Response DTOs for API endpoints."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from memo_service.entities import Memo


class MemoResponse(BaseModel):
    """Response DTO for a single memo."""

    id: UUID = Field(..., description="Unique memo id")
    timestamp: datetime = Field(..., description="When the memo was created (ISO 8601)")
    done: bool = Field(..., description="Whether the memo is resolved")
    text: str = Field(..., description="The note itself")

    @classmethod
    def from_entity(cls, memo: Memo) -> "MemoResponse":
        return cls(id=memo.id, timestamp=memo.timestamp, done=memo.done, text=memo.text)

    def to_entity(self) -> Memo:
        return Memo(id=self.id, timestamp=self.timestamp, done=self.done, text=self.text)
