"""Shared test fixtures.

Provides a mock asyncpg pool and a ``test_client`` whose app lifespan receives
that pool instead of connecting to PostgreSQL.
"""

from collections.abc import Generator
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def mock_pool() -> MagicMock:
    """A pool stand-in with the three query methods the repositories use."""
    pool = MagicMock()
    pool.fetch = AsyncMock(return_value=[])
    pool.fetchrow = AsyncMock(return_value=None)
    pool.execute = AsyncMock(return_value="DELETE 0")
    pool.close = AsyncMock()
    return pool


@pytest.fixture()
def test_client(mock_pool: MagicMock) -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient wired to ``mock_pool``."""
    with patch("core.db.create_pool", AsyncMock(return_value=mock_pool)), patch("main.setup_logging"):
        from main import app

        with TestClient(app) as client:
            yield client
