"""
Tests for settings validation and startup wiring.
"""

import pytest
from fastapi.testclient import TestClient

from memo_service.api.app import create_app
from memo_service.config import Settings, create_connection_pool
from memo_service.exceptions import ConfigurationError, StorageError


def test_valid_settings():
    settings = Settings(database_url="redis://localhost:6379/0", backend_port=3000)
    settings.require_server_settings()
    assert settings.pool_max_connections >= 1


def test_missing_database_url():
    with pytest.raises(ConfigurationError, match="DATABASE_URL"):
        Settings(database_url=None, backend_port=3000).require_server_settings()


def test_missing_port():
    with pytest.raises(ConfigurationError, match="BACKEND_PORT"):
        Settings(database_url="redis://localhost:6379/0", backend_port=None).require_server_settings()


@pytest.mark.parametrize("port", [0, 70000])
def test_port_out_of_range(port):
    with pytest.raises(ValueError):
        Settings(backend_port=port)


def test_pool_size_must_be_positive():
    with pytest.raises(ValueError):
        Settings(pool_max_connections=0)


def test_connection_pool_is_bounded():
    settings = Settings(database_url="redis://localhost:6379/0", pool_max_connections=4)
    pool = create_connection_pool(settings)
    assert pool.max_connections == 4
    assert pool.timeout is None


def test_connection_pool_requires_url():
    with pytest.raises(ConfigurationError):
        create_connection_pool(Settings(database_url=None))


def test_unreachable_database_aborts_startup():
    """Test that startup fails when the database cannot be reached."""
    # Nothing listens on port 1, so the startup ping fails fast
    settings = Settings(database_url="redis://127.0.0.1:1/0", backend_port=3000)
    app = create_app(app_settings=settings)

    with pytest.raises(StorageError):
        with TestClient(app):
            pass
