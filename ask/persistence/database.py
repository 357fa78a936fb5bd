"""Database connection and session management.

Provides async database engine, session factory and the per-request
transaction for PostgreSQL.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ask.config import Settings
from ask.domain.service import MutationEffects


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


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


@asynccontextmanager
async def transaction(
    session_factory: async_sessionmaker[AsyncSession], effects: MutationEffects
) -> AsyncIterator[AsyncSession]:
    """Run a unit of work and apply its effects once it has committed.

    Cache invalidation and events queued on ``effects`` are flushed only
    after ``commit`` returns. A rollback discards them.
    """
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
            logfire.debug("Session committed")
        except Exception as e:
            logfire.warn("Session rollback", error=str(e))
            await session.rollback()
            effects.discard()
            raise

    await effects.flush()
