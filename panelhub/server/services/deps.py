"""
Request Dependencies.

Provides the store bundle and the caller's organisation to API endpoints.
"""

from typing import Annotated, Optional

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from panelhub.core.database import StoreBundle, get_session, get_stores
from panelhub.server.core import constant
from panelhub.server.core.config import settings


def get_org_id(x_org_id: Optional[int] = Header(default=None, alias=constant.ORG_ID_HEADER, ge=1)) -> int:
    """Resolve the organisation from the X-Org-Id header, falling back to the default org."""
    return x_org_id if x_org_id is not None else settings.default_org_id


StoresDep = Annotated[StoreBundle, Depends(get_stores)]
SessionDep = Annotated[AsyncSession, Depends(get_session)]
OrgIdDep = Annotated[int, Depends(get_org_id)]
