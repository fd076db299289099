"""Database connection management.

Provides the async engine used by the SQL key-value store.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from topten.config import StorageSettings


def create_engine(settings: StorageSettings, echo: bool = False) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Storage settings with database URL and pool sizes
        echo: Log SQL statements

    Returns:
        Configured async engine
    """
    kwargs: dict = {"echo": echo, "pool_pre_ping": True}
    if not settings.database_url.startswith("sqlite"):
        kwargs["pool_size"] = settings.pool_size
        kwargs["max_overflow"] = settings.max_overflow
    return create_async_engine(settings.database_url, **kwargs)


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
        expire_on_commit=False,
        autoflush=False,
    )
