"""Database connection utilities."""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from school.config import get_settings

logger = logging.getLogger(__name__)

# Base class for models
Base = declarative_base()


def get_db_url() -> str:
    """Build database URL from settings.

    ``DATABASE_URL`` wins over the individual ``DB_*`` values when set.
    """
    settings = get_settings()
    if settings.DATABASE_URL:
        return settings.DATABASE_URL
    return (
        f"postgresql+asyncpg://{settings.DB_USER}:{settings.DB_PASSWORD}"
        f"@{settings.DB_HOST}:{settings.DB_PORT}/{settings.DB_NAME}"
    )


class DatabaseManager:
    """Owns the async engine and hands out one session per operation.

    The engine is created lazily so that importing the application never
    opens a connection.

    Usage:
        async with db_manager.session() as session:
            await session.execute(...)
        # committed on success, rolled back on error, always closed
    """

    def __init__(self, url: Optional[str] = None) -> None:
        """Initialize manager.

        Args:
            url: Database URL. Defaults to ``get_db_url()`` at first use.
        """
        self._url = url
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def url(self) -> str:
        return self._url or get_db_url()

    @property
    def engine(self) -> AsyncEngine:
        """Get or create database engine."""
        if self._engine is None:
            self._engine = create_async_engine(
                self.url,
                echo=get_settings().DEBUG,
                pool_pre_ping=True,  # Verify connections before using
            )
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        if self._session_factory is None:
            self._session_factory = async_sessionmaker(
                self.engine, class_=AsyncSession, expire_on_commit=False
            )
        return self._session_factory

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Acquire a session for a single operation.

        Yields:
            AsyncSession bound to the engine.
        """
        session = self.session_factory()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def verify_connection(self) -> bool:
        """Verify database connection. Raises exception if connection fails."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True

    async def create_tables(self) -> None:
        """Create missing tables for all registered models."""
        # Register models with Base.metadata
        import school.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured")

    async def close(self) -> None:
        """Close database connections."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None


# Global database manager
db_manager = DatabaseManager()


async def verify_db_connection() -> bool:
    """Verify connection of the global database manager."""
    return await db_manager.verify_connection()


async def init_db() -> None:
    """Initialize database and verify connection. Exits application on failure."""
    try:
        if get_settings().DB_CREATE_TABLES:
            await db_manager.create_tables()
        await verify_db_connection()
    except Exception as e:
        logger.critical(f"Failed to initialize database: {e}", exc_info=True)
        sys.exit(1)


async def close_db() -> None:
    """Close database connections."""
    await db_manager.close()
