"""Memo Service - a small persisted todo-item API.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (MemoStore)
    - repositories: Data access implementations (Redis)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from memo_service.repositories import RedisMemoRepository
    from memo_service.handlers import MemoHandler

    handler = MemoHandler(store=RedisMemoRepository.create())
    ```

For HTTP API:
    ```python
    from memo_service.api.app import app
    ```
"""

from memo_service.client import MemoClient
from memo_service.config import Settings, settings
from memo_service.dto import (
    CreateMemoRequest,
    DeleteMemoRequest,
    MemoResponse,
    ResolveMemoRequest,
)
from memo_service.entities import Memo
from memo_service.exceptions import (
    ConfigurationError,
    MemoNotFoundError,
    MemoServiceError,
    StorageError,
)
from memo_service.handlers import MemoHandler
from memo_service.protocols import MemoStore
from memo_service.repositories import RedisMemoRepository

__all__ = [
    # Configuration
    "settings",
    "Settings",
    # Protocols (interfaces)
    "MemoStore",
    # Handlers (HTTP)
    "MemoHandler",
    # Repositories (data access)
    "RedisMemoRepository",
    # Entities (domain models)
    "Memo",
    # DTOs (API contracts)
    "CreateMemoRequest",
    "ResolveMemoRequest",
    "DeleteMemoRequest",
    "MemoResponse",
    # Errors
    "MemoServiceError",
    "StorageError",
    "MemoNotFoundError",
    "ConfigurationError",
    # Client
    "MemoClient",
]
