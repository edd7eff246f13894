"""Async HTTP client for the memo API.

Wraps the four verbs of the memo collection endpoint and converts
responses back into Memo entities.

Example:
    ```python
    async with MemoClient() as client:
        memo = await client.create_memo("buy milk")
        await client.resolve_memo(memo.id, done=True)
        print(await client.list_memos())
    ```
"""

from uuid import UUID

import httpx

from memo_service.config import settings
from memo_service.dto import MemoResponse
from memo_service.entities import Memo


class MemoClient:
    """Client for a running memo API.

    404 answers to resolve/delete are reported as ``False``; any other
    error status raises ``httpx.HTTPStatusError``.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the memo client.

        Args:
            base_url: Root URL of the API. Defaults to settings.api_url.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (e.g. ASGITransport in tests).
        """
        self._base_url = base_url or settings.api_url
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "MemoClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def list_memos(self) -> list[Memo]:
        """Fetch every memo, oldest first."""
        response = await self._client.get("/")
        response.raise_for_status()
        return [MemoResponse.model_validate(item).to_entity() for item in response.json()]

    async def create_memo(self, text: str) -> Memo:
        """Create a memo and return it as stored by the server."""
        response = await self._client.post("/", json={"text": text})
        response.raise_for_status()
        return MemoResponse.model_validate(response.json()).to_entity()

    async def resolve_memo(self, memo_id: UUID, done: bool) -> bool:
        """Set the done flag of a memo.

        Returns:
            True if updated, False if the server doesn't know the id
        """
        response = await self._client.put("/", json={"id": str(memo_id), "done": done})
        return self._found(response)

    async def delete_memo(self, memo_id: UUID) -> bool:
        """Delete a memo.

        Returns:
            True if deleted, False if the server doesn't know the id
        """
        response = await self._client.request("DELETE", "/", json={"id": str(memo_id)})
        return self._found(response)

    @staticmethod
    def _found(response: httpx.Response) -> bool:
        if response.status_code == httpx.codes.NOT_FOUND:
            return False
        response.raise_for_status()
        return True

    @property
    def base_url(self) -> str:
        """Get the API base URL."""
        return self._base_url
