"""Request DTOs for API endpoints."""

from uuid import UUID

from pydantic import BaseModel, Field, StrictBool, StrictStr


class CreateMemoRequest(BaseModel):
    """Request DTO for creating a memo.

    The id, timestamp and done flag are assigned by the service.
    """

    text: StrictStr = Field(..., description="The note to store")


class ResolveMemoRequest(BaseModel):
    """Request DTO for setting the done flag of a memo."""

    id: UUID = Field(..., description="Id of the memo to update")
    done: StrictBool = Field(..., description="New value of the done flag")


class DeleteMemoRequest(BaseModel):
    """Request DTO for deleting a memo."""

    id: UUID = Field(..., description="Id of the memo to delete")
