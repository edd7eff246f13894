"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - The store is either injected through create_app() or built from
      settings during lifespan
    - The handler is created once and stored in app.state
    - Dependency functions retrieve it from request.app.state
    - No global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from memo_service.config import settings
from memo_service.exceptions import StorageError
from memo_service.handlers import MemoHandler
from memo_service.repositories import RedisMemoRepository

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> MemoHandler:
    """Dependency injection for MemoHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The MemoHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "memo_handler", None)
    if handler is None:
        raise RuntimeError("MemoHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes the layers and stores the handler in app.state:
    1. Store - the one passed to create_app(), or a RedisMemoRepository
       built from settings whose connection is checked before serving
    2. Handler - stored in app.state.memo_handler

    An unreachable database aborts startup.

    Args:
        app: The FastAPI application instance

    Yields:
        None
    """
    store = getattr(app.state, "memo_store", None)
    repository: RedisMemoRepository | None = None

    if store is None:
        app_settings = getattr(app.state, "settings", settings)
        repository = RedisMemoRepository.create(app_settings)
        try:
            await repository.ping()
        except StorageError:
            logger.critical("Could not connect to the database, aborting startup")
            await repository.close()
            raise
        store = repository
        logger.info(
            "Connected to the database (pool size %d)",
            app_settings.pool_max_connections,
        )

    app.state.memo_handler = MemoHandler(store=store)
    logger.info("Memo service started")

    yield

    del app.state.memo_handler
    if repository is not None:
        await repository.close()
    logger.info("Memo service shut down")


# Type alias for cleaner dependency injection
HandlerDep = Annotated[MemoHandler, Depends(get_handler)]
