"""
Global database session and engine management.

This module manages the global AsyncEngine and async_sessionmaker instances
that are used throughout the application for database access.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from panelhub.server.core.config import settings

from .utils import StoreBundle, build_stores, create_all, create_engine, create_sessionmaker

# Create global engine and session factory
engine = create_engine(settings.database_url)
async_session_maker = create_sessionmaker(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with async_session_maker() as session:
        yield session


def get_stores() -> StoreBundle:
    """Dependency returning the stores bound to the global session factory."""
    return build_stores(session_factory=async_session_maker, playlist_uid_attempts=settings.playlist_uid_attempts)


async def init_db() -> None:
    """
    Initialize the database.

    SQLite databases (local development and tests) get their tables created
    directly. Other backends are migrated by Alembic before the application
    starts, so nothing is done for them here.
    """
    if engine.dialect.name == "sqlite":
        await create_all(engine)
