"""
Database repository layer using SQLModel.

This package contains the data access classes for each business domain.

- base: AsyncBaseRepository interface and QueryBuilder utilities
- data_sources: Session-bound data source repository
- correlations: Correlation store (transactional, validates data sources)
- playlists: Playlist store (transactional, bounded-retry uid generation)
"""

from . import (
    correlations,
    data_sources,
    playlists,
)
from .correlations import CorrelationStore
from .data_sources import DataSourceRepository
from .playlists import PlaylistStore

__all__ = [
    "CorrelationStore",
    "DataSourceRepository",
    "PlaylistStore",
    "correlations",
    "data_sources",
    "playlists",
]
