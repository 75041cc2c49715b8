"""
Forum Backend — Test Configuration (conftest.py)
==================================================

Shared pytest fixtures.

Fixture Hierarchy (all function-scoped):
    ├── test_settings:    Settings for an isolated in-memory SQLite store
    ├── mock_db_session:  AsyncMock standing in for AsyncSession (service unit tests)
    ├── database:         Initialized + seeded Database
    ├── db_session:       Real AsyncSession on `database`
    ├── app:              Fresh FastAPI app with its own initialized store
    └── test_client:      HTTPX AsyncClient bound to `app` via ASGITransport

Every test that uses `database` or `app` starts from the same seed rows:
    subreddits 1 javascript, 2 webdev; users 1 sailesh, 2 john;
    posts 1 and 3 in subreddit 1, post 2 in subreddit 2 (posts 2, 3 by john).
"""

import os

# Set before any forum import so the module-level settings never point elsewhere
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from forum.config import Settings
from forum.database import Database
from forum.main import create_app
from forum.seed import initialize_database


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        log_level="WARNING",
        seed_on_startup=True,
    )


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_missing_subreddit(mock_db_session, result_with):
            mock_db_session.execute.return_value = result_with(None)
            ...
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.scalar = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def result_with():
    """Factory for a mock Result whose scalar_one_or_none() returns the given value."""
    def _make(value):
        result = MagicMock()
        result.scalar_one_or_none.return_value = value
        return result
    return _make


@pytest_asyncio.fixture
async def database(test_settings):
    db = Database(test_settings)
    await initialize_database(db, seed=True)
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def db_session(database):
    async with database.session() as session:
        yield session


@pytest_asyncio.fixture
async def app(test_settings):
    """
    A fresh application with its own seeded in-memory store.

    ASGITransport does not run lifespan events, so the store is initialized
    here the same way the lifespan does it.
    """
    application = create_app(test_settings)
    await initialize_database(application.state.database, seed=True)
    yield application
    await application.state.database.dispose()


@pytest_asyncio.fixture
async def test_client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
