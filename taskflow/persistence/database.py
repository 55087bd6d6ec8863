"""Async engine and session factory for Postgres (asyncpg driver)."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from taskflow.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the pooled engine.

    Pool sizing comes from DATABASE__POOL_SIZE, DATABASE__MAX_OVERFLOW and
    DATABASE__POOL_TIMEOUT. Connections are pinged on checkout.
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        pool_timeout=settings.database.pool_timeout,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the per-request session factory.

    Repositories issue Core statements and flush explicitly, and loaded
    rows are mapped to immutable domain models, so nothing relies on
    autoflush or on expiring state after commit.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
