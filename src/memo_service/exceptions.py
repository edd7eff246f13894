"""Error taxonomy and the exception handlers that map it to HTTP responses.

Clients never see internal detail: domain errors become an empty response
carrying only the status code, and malformed payloads become a 400.
"""

import logging
from uuid import UUID

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class MemoServiceError(Exception):
    """Base exception for the memo service.

    Subclasses set ``status_code`` to the HTTP status they map to.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class StorageError(MemoServiceError):
    """Raised on any connectivity, constraint or query fault in the store."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class MemoNotFoundError(MemoServiceError):
    """Raised when an operation targets a memo id that doesn't exist."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, memo_id: UUID) -> None:
        super().__init__(f"Memo not found: {memo_id}")
        self.memo_id = memo_id


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid at startup."""


async def memo_service_exception_handler(request: Request, exc: MemoServiceError) -> Response:
    """Convert a MemoServiceError into an empty response with its status code."""
    if exc.status_code >= 500:
        logger.error(
            "%s %s failed: %s",
            request.method,
            request.url.path,
            exc.message,
            exc_info=exc,
        )
    else:
        logger.info("%s %s: %s", request.method, request.url.path, exc.message)
    return Response(status_code=exc.status_code)


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle request payload validation errors as 400 Bad Request."""
    logger.info("%s %s rejected invalid payload: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request payload"},
    )
