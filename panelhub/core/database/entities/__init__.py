"""
Database entity models.

This package contains all database entity models organized by business domain
and table relationships. Each module represents either:

1. A single database table and its related logic
2. A business domain that spans multiple related tables

Modules:
- data_sources: Data sources that correlations point at
- correlations: Links between a source and a target data source
- playlists: Playlists and their ordered dashboard items
"""

from . import (
    correlations,
    data_sources,
    playlists,
)
from .correlations import Correlation
from .data_sources import DataSource
from .playlists import Playlist, PlaylistItem, PlaylistItemType

__all__ = [
    "Correlation",
    "DataSource",
    "Playlist",
    "PlaylistItem",
    "PlaylistItemType",
    "correlations",
    "data_sources",
    "playlists",
]
