"""
Playlist entity models.

This module contains the database entities for playlists and their items.
A playlist cycles through its items (dashboards) at a fixed interval; items
are kept in their own table and linked by ``playlist_id``.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from sqlalchemy import Text, UniqueConstraint
from sqlmodel import Field

from ..base import Base


class PlaylistItemType(str, Enum):
    """How a playlist item refers to dashboards."""

    DASHBOARD_BY_UID = "dashboard_by_uid"
    DASHBOARD_BY_TAG = "dashboard_by_tag"
    DASHBOARD_BY_ID = "dashboard_by_id"


class Playlist(Base, table=True):
    """Persistent playlist.

    Table: playlist
    """

    __tablename__ = "playlist"
    __table_args__ = (
        UniqueConstraint("org_id", "uid", name="uq_playlist_org_id_uid"),
        {"extend_existing": True},
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    uid: str = Field(max_length=80)
    name: str = Field(max_length=255)
    interval: str = Field(max_length=255)
    org_id: int = Field(index=True)

    def __repr__(self) -> str:
        return f"Playlist(uid={self.uid}, org_id={self.org_id}, name={self.name})"


class PlaylistItem(Base, table=True):
    """A single entry of a playlist.

    Table: playlist_item
    """

    __tablename__ = "playlist_item"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    playlist_id: int = Field(index=True)
    type: str = Field(max_length=255)
    value: str = Field(sa_type=Text)
    title: str = Field(default="", sa_type=Text)
    order: int = Field(default=0)

    def __repr__(self) -> str:
        return f"PlaylistItem(playlist_id={self.playlist_id}, type={self.type}, order={self.order})"
