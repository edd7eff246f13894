"""
Tests for MemoClient, run against the app in-process.
"""

import asyncio
import uuid

import httpx
import pytest

from memo_service.api.app import create_app
from memo_service.client import MemoClient


async def run_with_client(app, scenario):
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with MemoClient(base_url="http://testserver", transport=transport) as client:
            return await scenario(client)


def test_client_lifecycle(store):
    """Test the full memo lifecycle through the client."""

    async def scenario(client):
        memo = await client.create_memo("buy milk")
        listed = await client.list_memos()
        resolved = await client.resolve_memo(memo.id, True)
        after_resolve = await client.list_memos()
        deleted = await client.delete_memo(memo.id)
        deleted_again = await client.delete_memo(memo.id)
        return memo, listed, resolved, after_resolve, deleted, deleted_again, await client.list_memos()

    memo, listed, resolved, after_resolve, deleted, deleted_again, final = asyncio.run(
        run_with_client(create_app(store=store), scenario)
    )

    assert memo.text == "buy milk"
    assert memo.done is False
    assert listed == [memo]
    assert resolved is True
    assert after_resolve[0].done is True
    assert (deleted, deleted_again) == (True, False)
    assert final == []


def test_client_unknown_id(store):
    async def scenario(client):
        return await client.resolve_memo(uuid.uuid4(), True)

    assert asyncio.run(run_with_client(create_app(store=store), scenario)) is False


def test_client_raises_on_server_error(failing_store):
    """Test that a 500 surfaces as an HTTPStatusError."""

    async def scenario(client):
        await client.list_memos()

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(run_with_client(create_app(store=failing_store), scenario))
