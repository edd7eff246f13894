import os
from dataclasses import dataclass
from functools import lru_cache

import redis.asyncio as aioredis
from dotenv import load_dotenv

from memo_service.exceptions import ConfigurationError

load_dotenv()


def _env_int(name: str) -> int | None:
    """Read an integer environment variable, returning None when unset."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Database (Redis)
    database_url: str | None = os.getenv("DATABASE_URL")
    pool_max_connections: int = int(os.getenv("POOL_MAX_CONNECTIONS", "10"))
    memo_key_prefix: str = os.getenv("MEMO_KEY_PREFIX", "memo")

    # API
    backend_host: str = os.getenv("BACKEND_HOST", "0.0.0.0")
    backend_port: int | None = _env_int("BACKEND_PORT")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Client
    api_url: str = os.getenv("MEMO_API_URL", "http://localhost:3000")

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.backend_port is not None and not 0 < self.backend_port < 65536:
            raise ValueError(f"BACKEND_PORT must be between 1 and 65535, got {self.backend_port}")

        if self.pool_max_connections < 1:
            raise ValueError(
                f"POOL_MAX_CONNECTIONS must be at least 1, got {self.pool_max_connections}"
            )

        if not self.memo_key_prefix:
            raise ValueError("MEMO_KEY_PREFIX must not be empty")

    def require_server_settings(self) -> None:
        """Check the values the server cannot start without.

        Raises:
            ConfigurationError: If DATABASE_URL or BACKEND_PORT is missing
        """
        if not self.database_url:
            raise ConfigurationError("DATABASE_URL must be set to the Redis connection URL")
        if self.backend_port is None:
            raise ConfigurationError("BACKEND_PORT must be set to the listening port")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def create_connection_pool(app_settings: Settings | None = None) -> aioredis.BlockingConnectionPool:
    """Create the bounded connection pool shared by all requests.

    Acquiring a connection waits for a free one instead of failing
    when all ``pool_max_connections`` are in use.
    """
    app_settings = app_settings or settings
    if not app_settings.database_url:
        raise ConfigurationError("DATABASE_URL must be set to the Redis connection URL")

    return aioredis.BlockingConnectionPool.from_url(
        app_settings.database_url,
        max_connections=app_settings.pool_max_connections,
        timeout=None,
        decode_responses=True,
    )
