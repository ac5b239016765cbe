"""
API endpoints for correlations.

Correlations are nested under their source data source:
``/datasources/uid/{source_uid}/correlations``. Store errors are translated
into HTTP responses by the registered exception handlers.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter

from panelhub.core.logging_config import get_logger
from panelhub.core.models.correlations import (
    CreateCorrelationCommand,
    DeleteCorrelationCommand,
    GetCorrelationQuery,
    GetCorrelationsBySourceUIDQuery,
    UpdateCorrelationCommand,
)
from panelhub.server.schemas import (
    CorrelationCreate,
    CorrelationRead,
    CorrelationResult,
    CorrelationUpdate,
    MessageResponse,
)
from panelhub.server.services.deps import OrgIdDep, StoresDep

logger = get_logger(__name__)

router = APIRouter(tags=["correlations"])

_ERROR_RESPONSES = {
    403: {"description": "Source data source is read only"},
    404: {"description": "Source data source, target data source or correlation not found"},
}


@router.post(
    "/uid/{source_uid}/correlations",
    response_model=CorrelationResult,
    summary="Create Correlation",
    responses=_ERROR_RESPONSES,
)
async def create_correlation(
    source_uid: str, payload: CorrelationCreate, stores: StoresDep, org_id: OrgIdDep
) -> CorrelationResult:
    """
    Create a correlation from the data source in the path to ``target_uid``.

    Both data sources must exist in the caller's org and the source must not be read only.
    """
    correlation = await stores.correlations.create_correlation(
        CreateCorrelationCommand(
            source_uid=source_uid,
            org_id=org_id,
            target_uid=payload.target_uid,
            label=payload.label,
            description=payload.description,
        )
    )
    return CorrelationResult(message="Correlation created", result=CorrelationRead.model_validate(correlation))


@router.get(
    "/uid/{source_uid}/correlations",
    response_model=List[CorrelationRead],
    summary="List Correlations of a Data Source",
    responses={404: {"description": "Source data source not found"}},
)
async def list_correlations(source_uid: str, stores: StoresDep, org_id: OrgIdDep) -> List[CorrelationRead]:
    correlations = await stores.correlations.get_correlations_by_source_uid(
        GetCorrelationsBySourceUIDQuery(source_uid=source_uid, org_id=org_id)
    )
    logger.debug(f"Retrieved {len(correlations)} correlations for source {source_uid}")
    return [CorrelationRead.model_validate(c) for c in correlations]


@router.get(
    "/uid/{source_uid}/correlations/{correlation_uid}",
    response_model=CorrelationRead,
    summary="Get Correlation",
    responses={404: {"description": "Source data source or correlation not found"}},
)
async def get_correlation(
    source_uid: str, correlation_uid: str, stores: StoresDep, org_id: OrgIdDep
) -> CorrelationRead:
    correlation = await stores.correlations.get_correlation(
        GetCorrelationQuery(uid=correlation_uid, source_uid=source_uid, org_id=org_id)
    )
    return CorrelationRead.model_validate(correlation)


@router.patch(
    "/uid/{source_uid}/correlations/{correlation_uid}",
    response_model=CorrelationResult,
    summary="Update Correlation",
    responses={400: {"description": "Neither label nor description given"}, **_ERROR_RESPONSES},
)
async def update_correlation(
    source_uid: str, correlation_uid: str, payload: CorrelationUpdate, stores: StoresDep, org_id: OrgIdDep
) -> CorrelationResult:
    """
    Update the label and/or description of a correlation.

    Fields left out of the body are not changed; an empty string clears a field.
    """
    correlation = await stores.correlations.update_correlation(
        UpdateCorrelationCommand(
            uid=correlation_uid,
            source_uid=source_uid,
            org_id=org_id,
            label=payload.label,
            description=payload.description,
        )
    )
    return CorrelationResult(message="Correlation updated", result=CorrelationRead.model_validate(correlation))


@router.delete(
    "/uid/{source_uid}/correlations/{correlation_uid}",
    response_model=MessageResponse,
    summary="Delete Correlation",
    responses=_ERROR_RESPONSES,
)
async def delete_correlation(
    source_uid: str, correlation_uid: str, stores: StoresDep, org_id: OrgIdDep
) -> MessageResponse:
    await stores.correlations.delete_correlation(
        DeleteCorrelationCommand(uid=correlation_uid, source_uid=source_uid, org_id=org_id)
    )
    return MessageResponse(message="Correlation deleted")
