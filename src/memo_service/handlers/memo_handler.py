"""HTTP handlers for memo operations.

Handlers convert between DTOs (API contracts) and store calls.
Store failures are not caught here: ``StorageError`` propagates to the
application's exception handler, which answers 500 with an empty body.
"""

import logging

from fastapi import Response, status

from memo_service.dto import (
    CreateMemoRequest,
    DeleteMemoRequest,
    MemoResponse,
    ResolveMemoRequest,
)
from memo_service.entities import Memo
from memo_service.exceptions import MemoNotFoundError
from memo_service.protocols import MemoStore

logger = logging.getLogger(__name__)


class MemoHandler:
    """HTTP handlers for the memo collection.

    One method per HTTP verb, each making exactly one store call:
    - GET    -> list_memos
    - POST   -> create_memo
    - PUT    -> resolve_memo
    - DELETE -> delete_memo

    Handlers hold no memo state between requests.

    Example:
        ```python
        handler = MemoHandler(store=RedisMemoRepository.create())

        @router.post("/", response_model=MemoResponse)
        async def create_memo(request: CreateMemoRequest):
            return await handler.create_memo(request)
        ```
    """

    def __init__(self, store: MemoStore) -> None:
        """Initialize the memo handler.

        Args:
            store: The memo store (required).
        """
        self._store = store

    async def list_memos(self) -> list[MemoResponse]:
        """Handle GET / requests.

        Returns:
            Every memo, oldest first
        """
        memos = await self._store.list_all()
        return [MemoResponse.from_entity(memo) for memo in memos]

    async def create_memo(self, request: CreateMemoRequest) -> MemoResponse:
        """Handle POST / requests.

        Args:
            request: The create memo request DTO

        Returns:
            The stored memo, including its generated id and timestamp
        """
        memo = Memo.new(request.text)
        await self._store.insert(memo)

        logger.info("Created memo %s", memo.id)
        return MemoResponse.from_entity(memo)

    async def resolve_memo(self, request: ResolveMemoRequest) -> Response:
        """Handle PUT / requests.

        Args:
            request: The resolve memo request DTO

        Returns:
            Empty 200 response

        Raises:
            MemoNotFoundError: If no memo has the requested id
        """
        if not await self._store.set_done(request.id, request.done):
            raise MemoNotFoundError(request.id)

        logger.info("Set memo %s done=%s", request.id, request.done)
        return Response(status_code=status.HTTP_200_OK)

    async def delete_memo(self, request: DeleteMemoRequest) -> Response:
        """Handle DELETE / requests.

        Args:
            request: The delete memo request DTO

        Returns:
            Empty 200 response

        Raises:
            MemoNotFoundError: If no memo has the requested id
        """
        if not await self._store.delete(request.id):
            raise MemoNotFoundError(request.id)

        logger.info("Deleted memo %s", request.id)
        return Response(status_code=status.HTTP_200_OK)
