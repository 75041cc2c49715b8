"""
Forum Backend — Database Session Management
=============================================

What:  Async SQLAlchemy engine, session factory, and FastAPI session dependency.
How:   A `Database` object owns one engine and one session factory. The
       application creates it in `create_app()` and stores it on `app.state`;
       `get_db_session` hands each request its own AsyncSession from that
       object, committing on success and rolling back on error.
Who:   Route handlers receive sessions via `Depends(get_db_session)`.
When:  Tables and seed rows are created once in the application lifespan,
       before the first request is served.

Connection Strategy:
    SQLite (default, in-memory):
        poolclass=StaticPool:   every session shares the single connection,
                                otherwise each connection would get its own
                                empty :memory: database
        check_same_thread=False: the connection is used from the event loop
    Server databases (e.g. PostgreSQL/asyncpg):
        pool_size / max_overflow / pool_pre_ping from settings
        pool_recycle=3600
"""

import logging
from typing import Any, AsyncGenerator, Dict

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from forum.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all forum ORM models; shares one metadata object."""
    pass


class Database:
    """
    One relational store: engine, session factory and lifecycle helpers.

    Usage:
        database = Database(settings)
        await database.create_schema()
        async with database.session() as session:
            ...
        await database.dispose()
    """

    def __init__(self, settings: Settings):
        self.engine: AsyncEngine = create_async_engine(
            settings.database_url,
            echo=settings.log_level == "DEBUG",
            **self._engine_options(settings),
        )
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @staticmethod
    def _engine_options(settings: Settings) -> Dict[str, Any]:
        if settings.is_sqlite:
            return {
                "poolclass": StaticPool,
                "connect_args": {"check_same_thread": False},
            }
        return {
            "pool_size": settings.db_pool_size,
            "max_overflow": settings.db_max_overflow,
            "pool_pre_ping": settings.db_pool_pre_ping,
            "pool_recycle": 3600,
        }

    def session(self) -> AsyncSession:
        """Open a new AsyncSession (use as `async with database.session() as s`)."""
        return self.session_factory()

    async def create_schema(self) -> None:
        """
        Create all six tables if they do not exist.

        metadata.create_all sorts tables by foreign-key dependency, so parents
        (users, subreddits) are created before posts, and posts before
        subscriptions, upvotes and comments.
        """
        # Register every model with Base.metadata before create_all
        import forum.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ready (%d tables)", len(Base.metadata.tables))

    async def ping(self) -> None:
        """Run SELECT 1; raises if the store is unreachable."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def dispose(self) -> None:
        """Close all pooled connections. For :memory: SQLite this discards the data."""
        await self.engine.dispose()


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Opens a session from the Database stored on app.state
        2. Yields it to the route handler
        3. On success: commits the transaction
        4. On error: rolls back and re-raises for the global error handlers
        5. Always: closes the session (returns the connection to the pool)

    Example usage in a route:
        @router.get("/subreddits/{subreddit_id}/posts")
        async def list_posts(subreddit_id: int, db: AsyncSession = Depends(get_db_session)):
            ...
    """
    database: Database = request.app.state.database
    async with database.session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
