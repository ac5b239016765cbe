"""
Data source entity models.

A data source is a configured connection to a backend that panels query.
Only the fields needed to resolve correlation endpoints are persisted here.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, UniqueConstraint
from sqlmodel import Field

from ..base import Base, _utc_now_naive


class DataSource(Base, table=True):
    """Entity for a data source.

    Read-only data sources are provisioned from files and must not have their
    correlations edited through the API.

    Table: data_source
    """

    __tablename__ = "data_source"
    __table_args__ = (
        UniqueConstraint("org_id", "uid", name="uq_data_source_org_id_uid"),
        UniqueConstraint("org_id", "name", name="uq_data_source_org_id_name"),
        {"extend_existing": True},
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    org_id: int = Field(index=True)
    uid: str = Field(max_length=40)
    name: str = Field(max_length=190)
    type: str = Field(max_length=255)
    url: Optional[str] = Field(default=None, max_length=255)
    read_only: bool = Field(default=False)

    created: datetime = Field(default_factory=_utc_now_naive, sa_type=DateTime)
    updated: datetime = Field(
        default_factory=_utc_now_naive, sa_type=DateTime, sa_column_kwargs={"onupdate": _utc_now_naive}
    )

    def __repr__(self) -> str:
        return f"DataSource(uid={self.uid}, org_id={self.org_id}, type={self.type}, read_only={self.read_only})"
