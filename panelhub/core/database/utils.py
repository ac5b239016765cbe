"""
Database utility functions for engine and session management.

This module provides the core utility functions for creating database engines,
session factories, transactional scopes and store bundles. Built with async
SQLAlchemy so the stores can be shared by the FastAPI application and tests.

Functions:
- create_engine: Creates async SQLAlchemy engine with URL normalization
- create_sessionmaker: Creates async session factory with safe defaults
- create_all: Creates all tables from ORM metadata (for tests/dev)
- transactional_session: Session scope wrapped in a single transaction
- db_session: Session scope that commits once on exit
- build_stores: Builds the store bundle for dependency injection
"""

from __future__ import annotations

import re
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, AsyncIterator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from . import entities  # noqa: F401  (registers tables on Base.metadata)
from .base import Base

if TYPE_CHECKING:
    from .repositories.correlations import CorrelationStore
    from .repositories.playlists import PlaylistStore


def create_engine(db_url: str) -> AsyncEngine:
    """Create an async SQLAlchemy engine.

    The helper normalizes Postgres URLs to ensure the async driver is used.
    For example, it rewrites ``postgresql://`` and other variants to
    ``postgresql+asyncpg://``. In-memory SQLite URLs get a single shared
    connection so every session sees the same database.

    Args:
        db_url: Database connection URL

    Returns:
        Configured AsyncEngine instance
    """
    url = re.sub(r"^postgres(?:ql)?(?:\+[a-z0-9_]+)?://", "postgresql+asyncpg://", db_url, count=1)
    if url.startswith("sqlite"):
        if ":memory:" in url or url.rstrip("/").endswith("sqlite+aiosqlite:"):
            return create_async_engine(url, connect_args={"check_same_thread": False}, poolclass=StaticPool)
        return create_async_engine(url, connect_args={"check_same_thread": False})
    return create_async_engine(url, pool_pre_ping=True)


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create an ``async_sessionmaker`` with safe defaults for this project.

    Args:
        engine: Async SQLAlchemy engine

    Returns:
        Configured async session factory
    """
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_all(engine: AsyncEngine) -> None:
    """Create all tables for the current ORM metadata.

    This is mainly intended for tests and local development.
    Production should use Alembic migrations instead.

    Args:
        engine: Async SQLAlchemy engine
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@asynccontextmanager
async def transactional_session(session_factory: async_sessionmaker[AsyncSession]) -> AsyncIterator[AsyncSession]:
    """Open a session whose work is committed as one transaction.

    The transaction commits when the block exits normally and rolls back when
    it raises; the exception is re-raised unchanged.
    """
    async with session_factory() as session:
        async with session.begin():
            yield session


@asynccontextmanager
async def db_session(session_factory: async_sessionmaker[AsyncSession]) -> AsyncIterator[AsyncSession]:
    """Open a session and commit whatever it did when the block exits."""
    async with session_factory() as session:
        yield session
        await session.commit()


@dataclass(frozen=True)
class StoreBundle:
    """Convenience bundle of all stores for dependency injection."""

    correlations: CorrelationStore
    playlists: PlaylistStore
    session_factory: async_sessionmaker[AsyncSession]


def build_stores(*, session_factory: async_sessionmaker[AsyncSession], playlist_uid_attempts: int = 3) -> StoreBundle:
    """Build a ``StoreBundle`` from a session factory.

    Args:
        session_factory: Async session factory the stores open sessions from
        playlist_uid_attempts: How many uids playlist creation tries

    Returns:
        Bundle containing all store instances
    """
    from .repositories.correlations import CorrelationStore
    from .repositories.playlists import PlaylistStore

    return StoreBundle(
        correlations=CorrelationStore(session_factory),
        playlists=PlaylistStore(session_factory, uid_attempts=playlist_uid_attempts),
        session_factory=session_factory,
    )
