"""
Database configuration and session management.
"""

from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from fieldops.config.logging import get_logger
from fieldops.config.settings import settings

logger = get_logger(__name__)

_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def get_database_url() -> str:
    """Get database URL from settings."""
    return str(settings.DATABASE_URL)


def create_engine(database_url: str = None) -> AsyncEngine:
    """Create async SQLAlchemy engine."""
    url = database_url or get_database_url()

    if settings.ENVIRONMENT == "test" or url.startswith("sqlite"):
        return create_async_engine(
            url, echo=settings.DATABASE_ECHO, poolclass=NullPool, future=True
        )

    return create_async_engine(
        url,
        echo=settings.DATABASE_ECHO,
        pool_size=settings.DATABASE_POOL_SIZE,
        max_overflow=settings.DATABASE_MAX_OVERFLOW,
        pool_timeout=settings.DATABASE_POOL_TIMEOUT,
        pool_recycle=settings.DATABASE_POOL_RECYCLE,
        pool_pre_ping=True,
        future=True,
    )


def get_engine() -> AsyncEngine:
    """Get the process-wide engine, creating it on first use."""
    global _engine
    if _engine is None:
        _engine = create_engine()
    return _engine


def get_async_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get async session factory."""
    global _session_factory
    if _session_factory is None:
        _session_factory = async_sessionmaker(
            get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
    return _session_factory


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for getting database session."""
    async with get_async_session_factory()() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def close_database_connections() -> None:
    """Dispose of the engine and its connection pool."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
        logger.info("Database connections closed")
    _engine = None
    _session_factory = None
