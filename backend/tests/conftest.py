"""
StreetMap Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the test suite.
How:   The environment is pointed at an in-memory SQLite database BEFORE any
       streetmap module is imported, so the settings singleton and the
       module-level app never try to reach PostgreSQL.

Fixtures:
    ├── mock_db_session: AsyncMock session for repository unit tests
    ├── engine:          in-memory SQLite engine with tables created
    ├── test_app:        app built by create_app() around that engine
    └── test_client:     HTTPX AsyncClient talking to test_app
"""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["STORAGE_TIMEOUT"] = "5"

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from streetmap.config import Settings  # noqa: E402
from streetmap.database import build_engine, init_models  # noqa: E402
from streetmap.main import create_app  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
def test_settings():
    return Settings(database_url=TEST_DATABASE_URL, log_level="WARNING", storage_timeout=5)


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_update(mock_db_session):
            mock_db_session.get.return_value = street
            await StreetRepository(mock_db_session).update_color(...)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def engine(test_settings):
    """Fresh in-memory database per test, tables created."""
    engine = build_engine(test_settings)
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def test_app(test_settings, engine):
    return create_app(test_settings, engine=engine)


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    HTTPX AsyncClient routed straight into the ASGI app.

    ASGITransport does not run the lifespan, which is why the engine
    fixture creates the tables itself.
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def sample_street_body():
    return {
        "name": "Main Street",
        "coordinates": [
            [{"lat": 55.751, "lng": 37.617}, {"lat": 55.752, "lng": 37.619}],
            [{"lat": 55.753, "lng": 37.620}],
        ],
        "bounds": {
            "northEast": {"lat": 55.753, "lng": 37.620},
            "southWest": {"lat": 55.751, "lng": 37.617},
        },
        "color": "#3388ff",
    }
