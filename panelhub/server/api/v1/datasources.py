"""
API endpoints for data sources.

Only the operations correlations depend on are exposed: registering a data
source, reading it and deleting it. Deleting a data source also removes every
correlation that uses it.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Query, status
from sqlalchemy.exc import IntegrityError

from panelhub.core.database.entities.data_sources import DataSource
from panelhub.core.database.repositories.data_sources import DataSourceRepository
from panelhub.core.errors import CommandValidationError, DataSourceAlreadyExistsError, DataSourceNotFoundError
from panelhub.core.logging_config import get_logger
from panelhub.core.uid import generate_short_uid, is_valid_short_uid
from panelhub.server.schemas import DataSourceCreate, DataSourceRead, MessageResponse
from panelhub.server.services.deps import OrgIdDep, SessionDep, StoresDep

logger = get_logger(__name__)

router = APIRouter(tags=["datasources"])


@router.post(
    "",
    response_model=DataSourceRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Data Source",
    responses={
        201: {"description": "Data source created"},
        400: {"description": "Invalid uid"},
        409: {"description": "A data source with the same uid or name exists"},
    },
)
async def create_data_source(payload: DataSourceCreate, session: SessionDep, org_id: OrgIdDep) -> DataSourceRead:
    """
    Register a data source in the caller's org.

    - **uid**: optional; generated when omitted. Must be URL safe and at most 40 characters.
    - **read_only**: provisioned data sources cannot have their correlations edited.
    """
    uid = payload.uid or generate_short_uid()
    if not is_valid_short_uid(uid):
        raise CommandValidationError(f"invalid data source uid: {uid!r}")

    repo = DataSourceRepository(session)
    if await repo.get_by_uid(org_id, uid) is not None or await repo.get_by_name(org_id, payload.name) is not None:
        raise DataSourceAlreadyExistsError()

    try:
        data_source = await repo.create(
            DataSource(
                org_id=org_id,
                uid=uid,
                name=payload.name,
                type=payload.type,
                url=payload.url,
                read_only=payload.read_only,
            )
        )
        await session.commit()
    except IntegrityError as e:
        # A concurrent request registered the same uid or name after the lookup above
        await session.rollback()
        logger.info(f"Data source {uid} in org {org_id} lost a uniqueness race: {e.orig}")
        raise DataSourceAlreadyExistsError() from e
    return DataSourceRead.model_validate(data_source)


@router.get(
    "",
    response_model=List[DataSourceRead],
    summary="List Data Sources",
)
async def list_data_sources(
    session: SessionDep,
    org_id: OrgIdDep,
    limit: int = Query(default=100, ge=1, le=1000),
    offset: int = Query(default=0, ge=0),
) -> List[DataSourceRead]:
    """List the data sources of the caller's org ordered by name."""
    data_sources = await DataSourceRepository(session).list(limit=limit, offset=offset, filters={"org_id": org_id})
    logger.debug(f"Retrieved {len(data_sources)} data sources (org_id={org_id})")
    return [DataSourceRead.model_validate(ds) for ds in data_sources]


@router.get(
    "/uid/{uid}",
    response_model=DataSourceRead,
    summary="Get Data Source by UID",
    responses={404: {"description": "Data source not found"}},
)
async def get_data_source(uid: str, session: SessionDep, org_id: OrgIdDep) -> DataSourceRead:
    data_source = await DataSourceRepository(session).get_by_uid(org_id, uid)
    if data_source is None:
        raise DataSourceNotFoundError()
    return DataSourceRead.model_validate(data_source)


@router.delete(
    "/uid/{uid}",
    response_model=MessageResponse,
    summary="Delete Data Source by UID",
    responses={404: {"description": "Data source not found"}},
)
async def delete_data_source(uid: str, session: SessionDep, stores: StoresDep, org_id: OrgIdDep) -> MessageResponse:
    """
    Delete a data source and every correlation that starts or ends at it.
    """
    if not await DataSourceRepository(session).delete_by_uid(org_id, uid):
        raise DataSourceNotFoundError()
    await session.commit()

    await stores.correlations.handle_data_source_deleted(uid)
    return MessageResponse(message="Data source deleted")
