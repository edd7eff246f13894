"""Repository layer for data access.

This layer hides the storage engine behind the MemoStore protocol.
The repositories are protocol-based (structural typing), not
inheritance-based: any class implementing the four memo operations
satisfies the protocol.
"""

from memo_service.protocols import MemoStore

from .redis_repository import RedisMemoRepository

__all__ = [
    "MemoStore",
    "RedisMemoRepository",
]
