"""Memo storage protocol.

Defines the interface for any durable backend that can hold memos.
Handlers depend on this protocol only, so the backend can be swapped
(Redis, an SQL database, an in-memory double for tests) without
touching request handling.
"""

from typing import Protocol, runtime_checkable
from uuid import UUID

from memo_service.entities import Memo


@runtime_checkable
class MemoStore(Protocol):
    """Protocol for memo storage backends.

    Any type that implements these coroutines satisfies the protocol,
    no explicit inheritance needed. Every operation touches at most one
    memo and is atomic with respect to it.

    Implementations raise ``StorageError`` for connectivity, constraint
    or query faults and never leak backend-specific exceptions.
    """

    async def list_all(self) -> list[Memo]:
        """Return all memos ordered ascending by timestamp.

        Returns:
            The memos, or an empty list if there are none
        """
        ...

    async def insert(self, memo: Memo) -> None:
        """Persist a fully formed memo.

        Args:
            memo: The memo to store; it is not modified

        Raises:
            StorageError: If a memo with the same id exists or the store fails
        """
        ...

    async def set_done(self, memo_id: UUID, done: bool) -> bool:
        """Update the done flag of a memo.

        Args:
            memo_id: Id of the memo to update
            done: The new value of the flag

        Returns:
            True if the memo existed and was updated, False otherwise
        """
        ...

    async def delete(self, memo_id: UUID) -> bool:
        """Delete a memo.

        Args:
            memo_id: Id of the memo to delete

        Returns:
            True if a memo was removed, False otherwise
        """
        ...
