"""
Centralized database layer for Panelhub.

This package provides a unified location for all database entities and stores,
organized by business domain and table relationships.

Structure:
- entities/: Database entity models organized by table/business logic
- repositories/: Data access layer (data sources, correlations, playlists)
- session.py: Global engine and session factory management
- utils.py: Database utility functions (engine, session scopes, store bundle)
"""

from .base import Base
from .session import (
    async_session_maker,
    engine,
    get_session,
    get_stores,
    init_db,
)
from .utils import (
    StoreBundle,
    build_stores,
    create_all,
    create_engine,
    create_sessionmaker,
    db_session,
    transactional_session,
)

__all__ = [
    "Base",
    "StoreBundle",
    "async_session_maker",
    "build_stores",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "db_session",
    "engine",
    "get_session",
    "get_stores",
    "init_db",
    "transactional_session",
]
