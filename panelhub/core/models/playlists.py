"""
Playlist commands, queries and DTOs.

Commands carry the caller's org id explicitly; an org id of ``0`` or an empty
uid is rejected by the store with ``CommandValidationError``.
"""

from __future__ import annotations

from typing import List

from pydantic import Field

from .base import BaseSchema


class PlaylistItemCommand(BaseSchema):
    """One item of a create/update playlist command."""

    type: str = Field(description="dashboard_by_uid, dashboard_by_tag or dashboard_by_id")
    value: str = Field(description="Dashboard uid, tag or id depending on type")
    title: str = Field(default="", description="Display title of the item")
    order: int = Field(default=0, description="Position of the item in the playlist")


class CreatePlaylistCommand(BaseSchema):
    name: str
    interval: str
    org_id: int
    items: List[PlaylistItemCommand] = Field(default_factory=list)


class UpdatePlaylistCommand(BaseSchema):
    uid: str
    org_id: int
    name: str
    interval: str
    items: List[PlaylistItemCommand] = Field(default_factory=list)


class GetPlaylistByUidQuery(BaseSchema):
    uid: str
    org_id: int


class DeletePlaylistCommand(BaseSchema):
    uid: str
    org_id: int


class GetPlaylistsQuery(BaseSchema):
    org_id: int
    name: str = ""
    limit: int = Field(default=1000, ge=0)


class GetPlaylistItemsByUidQuery(BaseSchema):
    playlist_uid: str
    org_id: int


class PlaylistItemDTO(BaseSchema):
    id: int
    playlist_id: int
    type: str
    value: str
    title: str
    order: int


class PlaylistDTO(BaseSchema):
    """Playlist together with its items, as returned by update."""

    id: int
    uid: str
    org_id: int
    name: str
    interval: str
    items: List[PlaylistItemDTO] = Field(default_factory=list)
