"""Protocol interfaces for swappable implementations.

Protocols enable:
- Easy swapping of storage backends
- Unit testing with in-memory implementations
- Clear separation of concerns

Usage:
    ```python
    from memo_service.protocols import MemoStore

    store: MemoStore = RedisMemoRepository(client)
    ```
"""

from .memo_store import MemoStore

__all__ = [
    "MemoStore",
]
