"""Redis implementation of MemoStore.

Layout:
- each memo is a hash at ``{prefix}:{id}`` with ``timestamp``, ``done`` and ``text``
- ``{prefix}:index`` is a sorted set of memo ids scored by creation time

Writes that depend on whether a memo exists run under WATCH/MULTI so a
memo is never created twice and a deleted memo is never brought back.
"""

import logging
from datetime import datetime
from uuid import UUID

import redis.asyncio as aioredis
from redis.exceptions import RedisError, WatchError

from memo_service.config import Settings, create_connection_pool, settings
from memo_service.entities import Memo
from memo_service.exceptions import StorageError

logger = logging.getLogger(__name__)


def _memo_to_row(memo: Memo) -> dict[str, str]:
    return {
        "timestamp": memo.timestamp.isoformat(),
        "done": _encode_done(memo.done),
        "text": memo.text,
    }


def _row_to_memo(memo_id: str, row: dict[str, str]) -> Memo:
    return Memo(
        id=UUID(memo_id),
        timestamp=datetime.fromisoformat(row["timestamp"]),
        done=row["done"] == "1",
        text=row["text"],
    )


def _encode_done(done: bool) -> str:
    return "1" if done else "0"


class RedisMemoRepository:
    """Redis implementation of the MemoStore protocol.

    This class satisfies the MemoStore protocol through structural
    typing - no explicit inheritance needed.

    The client must be created with ``decode_responses=True``. Every
    command borrows a connection from the client's pool for the duration
    of that command (or transaction) only.
    """

    def __init__(
        self,
        client: aioredis.Redis,
        key_prefix: str | None = None,
    ) -> None:
        """Initialize the Redis memo repository.

        Args:
            client: Async Redis client backed by the shared connection pool.
            key_prefix: Namespace for memo keys. Defaults to settings.
        """
        self._client = client
        self._prefix = key_prefix or settings.memo_key_prefix
        self._index_key = f"{self._prefix}:index"

    @classmethod
    def create(cls, app_settings: Settings | None = None) -> "RedisMemoRepository":
        """Factory method building the pool and client from settings.

        Args:
            app_settings: Settings to read the URL and pool size from.
                If None, uses the global settings.

        Returns:
            Configured RedisMemoRepository
        """
        app_settings = app_settings or settings
        pool = create_connection_pool(app_settings)
        client = aioredis.Redis(connection_pool=pool)
        return cls(client=client, key_prefix=app_settings.memo_key_prefix)

    def _memo_key(self, memo_id: UUID | str) -> str:
        return f"{self._prefix}:{memo_id}"

    async def list_all(self) -> list[Memo]:
        """Return all memos ordered ascending by timestamp."""
        try:
            memo_ids = await self._client.zrange(self._index_key, 0, -1)
            if not memo_ids:
                return []

            async with self._client.pipeline(transaction=False) as pipe:
                for memo_id in memo_ids:
                    pipe.hgetall(self._memo_key(memo_id))
                rows = await pipe.execute()
        except RedisError as e:
            raise StorageError(f"Failed to list memos: {e}") from e

        # A memo deleted between the two reads has an empty hash
        try:
            return [
                _row_to_memo(memo_id, row)
                for memo_id, row in zip(memo_ids, rows)
                if row
            ]
        except (KeyError, ValueError) as e:
            raise StorageError(f"Malformed memo record: {e!r}") from e

    async def insert(self, memo: Memo) -> None:
        """Store a new memo and add it to the ordering index.

        Raises:
            StorageError: If the id is already taken or Redis fails
        """
        key = self._memo_key(memo.id)
        try:
            async with self._client.pipeline(transaction=True) as pipe:
                await pipe.watch(key)
                if await pipe.exists(key):
                    raise StorageError(f"Memo already exists: {memo.id}")

                pipe.multi()
                pipe.hset(key, mapping=_memo_to_row(memo))
                pipe.zadd(self._index_key, {str(memo.id): memo.timestamp.timestamp()})
                await pipe.execute()
        except WatchError as e:
            # Another writer touched the same id between WATCH and EXEC
            raise StorageError(f"Concurrent insert of memo {memo.id}") from e
        except RedisError as e:
            raise StorageError(f"Failed to insert memo {memo.id}: {e}") from e

    async def set_done(self, memo_id: UUID, done: bool) -> bool:
        """Update the done flag of an existing memo.

        Concurrent updates of the same memo are retried until one
        transaction commits last, so the last write wins.
        """
        key = self._memo_key(memo_id)
        while True:
            try:
                async with self._client.pipeline(transaction=True) as pipe:
                    await pipe.watch(key)
                    if not await pipe.exists(key):
                        return False

                    pipe.multi()
                    pipe.hset(key, "done", _encode_done(done))
                    await pipe.execute()
                    return True
            except WatchError:
                logger.debug("Memo %s changed during update, retrying", memo_id)
                continue
            except RedisError as e:
                raise StorageError(f"Failed to update memo {memo_id}: {e}") from e

    async def delete(self, memo_id: UUID) -> bool:
        """Delete a memo and its index entry."""
        try:
            async with self._client.pipeline(transaction=True) as pipe:
                pipe.delete(self._memo_key(memo_id))
                pipe.zrem(self._index_key, str(memo_id))
                deleted, _ = await pipe.execute()
        except RedisError as e:
            raise StorageError(f"Failed to delete memo {memo_id}: {e}") from e

        return deleted > 0

    async def ping(self) -> None:
        """Check that Redis is reachable.

        Raises:
            StorageError: If the server cannot be reached
        """
        try:
            await self._client.ping()
        except RedisError as e:
            raise StorageError(f"Redis is unreachable: {e}") from e

    async def close(self) -> None:
        """Close the client and disconnect every pooled connection."""
        await self._client.aclose()
        await self._client.connection_pool.disconnect()

    @property
    def client(self) -> aioredis.Redis:
        """Get the Redis client."""
        return self._client
