"""
Correlation commands and queries.

The HTTP layer builds these from the request path, the request body and the
caller's org; the correlation store consumes them.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from .base import BaseSchema


class CreateCorrelationCommand(BaseSchema):
    """Create a correlation from ``source_uid`` to ``target_uid``."""

    source_uid: str = Field(description="UID of the data source the correlation starts from")
    org_id: int = Field(description="Organisation both data sources belong to")
    target_uid: str = Field(description="UID of the data source the correlation points at")
    label: str = Field(default="", description="Short label shown in the UI")
    description: str = Field(default="", description="Free text description")
    skip_read_only_check: bool = Field(
        default=False, description="Allow correlations on read-only sources (used by provisioning)"
    )


class UpdateCorrelationCommand(BaseSchema):
    """Update label and/or description. ``None`` leaves a field untouched."""

    uid: str
    source_uid: str
    org_id: int
    label: Optional[str] = None
    description: Optional[str] = None


class DeleteCorrelationCommand(BaseSchema):
    uid: str
    source_uid: str
    org_id: int


class DeleteCorrelationsBySourceUIDCommand(BaseSchema):
    source_uid: str


class DeleteCorrelationsByTargetUIDCommand(BaseSchema):
    target_uid: str


class GetCorrelationQuery(BaseSchema):
    uid: str
    source_uid: str
    org_id: int


class GetCorrelationsBySourceUIDQuery(BaseSchema):
    source_uid: str
    org_id: int
