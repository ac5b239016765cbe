"""Commands, queries and result DTOs exchanged with the stores."""

from __future__ import annotations

from .base import BaseSchema
from .correlations import (
    CreateCorrelationCommand,
    DeleteCorrelationCommand,
    DeleteCorrelationsBySourceUIDCommand,
    DeleteCorrelationsByTargetUIDCommand,
    GetCorrelationQuery,
    GetCorrelationsBySourceUIDQuery,
    UpdateCorrelationCommand,
)
from .playlists import (
    CreatePlaylistCommand,
    DeletePlaylistCommand,
    GetPlaylistByUidQuery,
    GetPlaylistItemsByUidQuery,
    GetPlaylistsQuery,
    PlaylistDTO,
    PlaylistItemCommand,
    PlaylistItemDTO,
    UpdatePlaylistCommand,
)

__all__ = [
    "BaseSchema",
    "CreateCorrelationCommand",
    "CreatePlaylistCommand",
    "DeleteCorrelationCommand",
    "DeleteCorrelationsBySourceUIDCommand",
    "DeleteCorrelationsByTargetUIDCommand",
    "DeletePlaylistCommand",
    "GetCorrelationQuery",
    "GetCorrelationsBySourceUIDQuery",
    "GetPlaylistByUidQuery",
    "GetPlaylistItemsByUidQuery",
    "GetPlaylistsQuery",
    "PlaylistDTO",
    "PlaylistItemCommand",
    "PlaylistItemDTO",
    "UpdateCorrelationCommand",
    "UpdatePlaylistCommand",
]
