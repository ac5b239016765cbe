"""
Correlation entity models.

A correlation links a source data source to a target data source so that
results from the source can be explored in the target.
"""

from __future__ import annotations

from sqlalchemy import Text
from sqlmodel import Field

from ..base import Base


class Correlation(Base, table=True):
    """Entity for a correlation between two data sources.

    Correlations are identified by ``(uid, source_uid)``; the same uid may
    exist under different sources.

    Table: correlation
    """

    __tablename__ = "correlation"
    __table_args__ = ({"extend_existing": True},)

    uid: str = Field(primary_key=True, max_length=40)
    source_uid: str = Field(primary_key=True, max_length=40, index=True)
    target_uid: str = Field(max_length=40, index=True)
    label: str = Field(default="", sa_type=Text)
    description: str = Field(default="", sa_type=Text)

    def __repr__(self) -> str:
        return f"Correlation(uid={self.uid}, source_uid={self.source_uid}, target_uid={self.target_uid})"
