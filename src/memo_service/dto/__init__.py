"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import CreateMemoRequest, DeleteMemoRequest, ResolveMemoRequest
from .responses import MemoResponse

__all__ = [
    "CreateMemoRequest",
    "ResolveMemoRequest",
    "DeleteMemoRequest",
    "MemoResponse",
]
