"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL or SQLite.
"""

from typing import Any

import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from ident.config import Settings
from ident.persistence.tables import metadata


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    url = settings.database.url
    kwargs: dict[str, Any] = {
        "echo": settings.debug,  # Log SQL queries in debug mode
    }

    if url.startswith("sqlite"):
        if ":memory:" in url or url.endswith("://"):
            # A single shared connection, otherwise every connection gets
            # its own empty in-memory database
            kwargs["poolclass"] = StaticPool
            kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs["pool_pre_ping"] = True
        kwargs["pool_size"] = settings.database.pool_size
        kwargs["max_overflow"] = settings.database.max_overflow

    return create_async_engine(url, **kwargs)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
    )


async def init_schema(engine: AsyncEngine) -> None:
    """Create missing tables.

    Existing tables are left alone, so this is safe to run on every startup.

    Args:
        engine: Database engine
    """
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all, checkfirst=True)
    logfire.info("Database schema ready", tables=sorted(metadata.tables))

