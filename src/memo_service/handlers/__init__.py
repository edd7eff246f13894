"""Handler layer for HTTP endpoints.

Handlers depend on the MemoStore protocol, not on a concrete repository.

Architecture:
    Router -> Handler -> Store
    (HTTP) -> (Boundary) -> (Data Access)
"""

from .memo_handler import MemoHandler

__all__ = [
    "MemoHandler",
]
