import logging

from fastapi import APIRouter, FastAPI, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from memo_service.api.dependencies import HandlerDep, lifespan
from memo_service.config import Settings, settings
from memo_service.dto import (
    CreateMemoRequest,
    DeleteMemoRequest,
    MemoResponse,
    ResolveMemoRequest,
)
from memo_service.exceptions import (
    MemoServiceError,
    memo_service_exception_handler,
    validation_exception_handler,
)
from memo_service.protocols import MemoStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=list[MemoResponse])
async def list_memos(handler: HandlerDep) -> list[MemoResponse]:
    """List every memo, oldest first."""
    return await handler.list_memos()


@router.post("/", response_model=MemoResponse)
async def create_memo(request: CreateMemoRequest, handler: HandlerDep) -> MemoResponse:
    """Create a memo from the given text."""
    return await handler.create_memo(request)


@router.put("/", response_class=Response, status_code=status.HTTP_200_OK)
async def resolve_memo(request: ResolveMemoRequest, handler: HandlerDep) -> Response:
    """Set the done flag of a memo."""
    return await handler.resolve_memo(request)


@router.delete("/", response_class=Response, status_code=status.HTTP_200_OK)
async def delete_memo(request: DeleteMemoRequest, handler: HandlerDep) -> Response:
    """Delete a memo."""
    return await handler.delete_memo(request)


def create_app(store: MemoStore | None = None, app_settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        store: Memo store to serve from. If None, a Redis repository is
            built from settings at startup.
        app_settings: Settings to use. If None, uses the global settings.

    Returns:
        The configured application
    """
    app = FastAPI(
        title="Memo API",
        description="Create, list, resolve and delete short text memos",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = app_settings or settings
    if store is not None:
        app.state.memo_store = store

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(MemoServiceError, memo_service_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(router)
    return app


app = create_app()


def configure_logging(level: str) -> None:
    """Configure root logging for the server process."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main() -> None:
    """Run the API server with uvicorn."""
    import uvicorn

    settings.require_server_settings()
    configure_logging(settings.log_level)

    logger.info("Starting Memo API on %s:%s", settings.backend_host, settings.backend_port)
    uvicorn.run(
        "memo_service.api.app:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
