"""
Shared fixtures for the memo service tests.
"""

from uuid import UUID

import pytest
from fastapi.testclient import TestClient

from memo_service.api.app import create_app
from memo_service.entities import Memo
from memo_service.exceptions import StorageError


class InMemoryMemoStore:
    """MemoStore double keeping memos in a dict."""

    def __init__(self) -> None:
        self.memos: dict[UUID, Memo] = {}

    async def list_all(self) -> list[Memo]:
        return sorted(self.memos.values(), key=lambda memo: memo.timestamp)

    async def insert(self, memo: Memo) -> None:
        if memo.id in self.memos:
            raise StorageError(f"Memo already exists: {memo.id}")
        self.memos[memo.id] = memo

    async def set_done(self, memo_id: UUID, done: bool) -> bool:
        memo = self.memos.get(memo_id)
        if memo is None:
            return False
        self.memos[memo_id] = Memo(id=memo.id, timestamp=memo.timestamp, done=done, text=memo.text)
        return True

    async def delete(self, memo_id: UUID) -> bool:
        return self.memos.pop(memo_id, None) is not None


class FailingMemoStore:
    """MemoStore double whose every operation fails."""

    async def list_all(self) -> list[Memo]:
        raise StorageError("connection refused")

    async def insert(self, memo: Memo) -> None:
        raise StorageError("connection refused")

    async def set_done(self, memo_id: UUID, done: bool) -> bool:
        raise StorageError("connection refused")

    async def delete(self, memo_id: UUID) -> bool:
        raise StorageError("connection refused")


@pytest.fixture
def store():
    """Create an empty in-memory store."""
    return InMemoryMemoStore()


@pytest.fixture
def client(store):
    """Create a test client serving from the in-memory store."""
    with TestClient(create_app(store=store)) as test_client:
        yield test_client


@pytest.fixture
def failing_store():
    """Create a store whose every operation fails."""
    return FailingMemoStore()


@pytest.fixture
def failing_client(failing_store):
    """Create a test client whose store always fails."""
    with TestClient(create_app(store=failing_store)) as test_client:
        yield test_client
