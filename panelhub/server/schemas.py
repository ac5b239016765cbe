"""
API Schemas.

This module contains Pydantic models used for API request bodies and response validation.
These schemas define the interface contract between the client and the server.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from panelhub.core.database.entities.playlists import PlaylistItemType


class DataSourceCreate(BaseModel):
    """
    Schema for registering a data source.

    The uid is generated when omitted.
    """

    name: str = Field(..., max_length=190, description="Unique name within the org.", examples=["Prometheus"])
    type: str = Field(..., max_length=255, description="Plugin type of the data source.", examples=["prometheus"])
    uid: Optional[str] = Field(default=None, max_length=40, description="Public identifier.", examples=["P1809F7CD0C75ACF3"])
    url: Optional[str] = Field(default=None, max_length=255, description="Backend address.")
    read_only: bool = Field(default=False, description="Provisioned data sources are read only.")


class DataSourceRead(BaseModel):
    """Schema for returning a data source."""

    id: int
    org_id: int
    uid: str
    name: str
    type: str
    url: Optional[str] = None
    read_only: bool

    model_config = ConfigDict(from_attributes=True)


class CorrelationCreate(BaseModel):
    """
    Schema for creating a correlation.

    The source data source is taken from the URL path.
    """

    target_uid: str = Field(..., description="UID of the data source to correlate with.", examples=["PDDA8E780A17E7EF1"])
    label: str = Field(default="", description="Label shown for the correlation.", examples=["logs"])
    description: str = Field(default="", description="Optional description.")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "target_uid": "PDDA8E780A17E7EF1",
                "label": "logs",
                "description": "Jump from metrics to matching logs",
            }
        }
    )


class CorrelationUpdate(BaseModel):
    """Schema for updating a correlation. At least one field must be given."""

    label: Optional[str] = Field(default=None, description="New label.")
    description: Optional[str] = Field(default=None, description="New description.")


class CorrelationRead(BaseModel):
    """Schema for returning a correlation."""

    uid: str
    source_uid: str
    target_uid: str
    label: str
    description: str

    model_config = ConfigDict(from_attributes=True)


class CorrelationResult(BaseModel):
    """Envelope returned by create and update."""

    message: str
    result: CorrelationRead


class MessageResponse(BaseModel):
    message: str


class PlaylistItemIn(BaseModel):
    """Schema for one playlist item in create/update requests."""

    type: PlaylistItemType = Field(..., description="How the item refers to dashboards.")
    value: str = Field(..., description="Dashboard uid, tag or id.", examples=["ZTYT7aH4z"])
    title: str = Field(default="", description="Display title.")
    order: int = Field(default=0, description="Position of the item (create only).")


class PlaylistCreate(BaseModel):
    """Schema for creating a playlist."""

    name: str = Field(..., max_length=255, examples=["NOC wall"])
    interval: str = Field(..., max_length=255, description="Time spent on each dashboard.", examples=["5m"])
    items: List[PlaylistItemIn] = Field(default_factory=list)


class PlaylistUpdate(PlaylistCreate):
    """Schema for replacing a playlist. Items are renumbered in the given order."""


class PlaylistRead(BaseModel):
    """Schema for returning a playlist without items."""

    id: int
    uid: str
    org_id: int
    name: str
    interval: str

    model_config = ConfigDict(from_attributes=True)


class PlaylistItemRead(BaseModel):
    id: int
    playlist_id: int
    type: str
    value: str
    title: str
    order: int

    model_config = ConfigDict(from_attributes=True)


class PlaylistWithItemsRead(PlaylistRead):
    items: List[PlaylistItemRead] = Field(default_factory=list)
