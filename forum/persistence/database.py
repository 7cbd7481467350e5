"""Async engine and session factory for PostgreSQL (asyncpg driver)."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from forum.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Engine sized by ``DATABASE__POOL_SIZE`` and ``DATABASE__MAX_OVERFLOW``.

    SQL is echoed when ``DEBUG`` is set.
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory for one-session-per-request use.

    Objects stay readable after commit, and nothing is flushed until the
    repositories execute their statements explicitly.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
