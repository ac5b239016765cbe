"""
API endpoints for playlists.

Playlists are addressed by uid within the caller's org. Updating a playlist
replaces its items; the response always reflects the stored state.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Query, status

from panelhub.core.logging_config import get_logger
from panelhub.core.models.playlists import (
    CreatePlaylistCommand,
    DeletePlaylistCommand,
    GetPlaylistByUidQuery,
    GetPlaylistItemsByUidQuery,
    GetPlaylistsQuery,
    PlaylistItemCommand,
    UpdatePlaylistCommand,
)
from panelhub.server.schemas import (
    PlaylistCreate,
    PlaylistItemIn,
    PlaylistItemRead,
    PlaylistRead,
    PlaylistUpdate,
    PlaylistWithItemsRead,
)
from panelhub.server.services.deps import OrgIdDep, StoresDep

logger = get_logger(__name__)

router = APIRouter(tags=["playlists"])


def _to_item_commands(items: List[PlaylistItemIn]) -> List[PlaylistItemCommand]:
    return [
        PlaylistItemCommand(type=item.type.value, value=item.value, title=item.title, order=item.order)
        for item in items
    ]


@router.get(
    "",
    response_model=List[PlaylistRead],
    summary="Search Playlists",
)
async def search_playlists(
    stores: StoresDep,
    org_id: OrgIdDep,
    query: str = Query(default="", description="Substring the playlist name must contain"),
    limit: int = Query(default=1000, ge=0),
) -> List[PlaylistRead]:
    playlists = await stores.playlists.list(GetPlaylistsQuery(org_id=org_id, name=query, limit=limit))
    logger.debug(f"Retrieved {len(playlists)} playlists (org_id={org_id}, query={query!r})")
    return [PlaylistRead.model_validate(p) for p in playlists]


@router.post(
    "",
    response_model=PlaylistRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Playlist",
    responses={500: {"description": "No unique uid could be generated"}},
)
async def create_playlist(payload: PlaylistCreate, stores: StoresDep, org_id: OrgIdDep) -> PlaylistRead:
    """
    Create a playlist with its items.

    Item ``order`` values are stored as sent.
    """
    playlist = await stores.playlists.insert(
        CreatePlaylistCommand(
            name=payload.name,
            interval=payload.interval,
            org_id=org_id,
            items=_to_item_commands(payload.items),
        )
    )
    return PlaylistRead.model_validate(playlist)


@router.get(
    "/{uid}",
    response_model=PlaylistWithItemsRead,
    summary="Get Playlist",
    responses={404: {"description": "Playlist not found"}},
)
async def get_playlist(uid: str, stores: StoresDep, org_id: OrgIdDep) -> PlaylistWithItemsRead:
    playlist = await stores.playlists.get(GetPlaylistByUidQuery(uid=uid, org_id=org_id))
    items = await stores.playlists.get_items(GetPlaylistItemsByUidQuery(playlist_uid=uid, org_id=org_id))
    return PlaylistWithItemsRead(
        **PlaylistRead.model_validate(playlist).model_dump(),
        items=[PlaylistItemRead.model_validate(item) for item in items],
    )


@router.get(
    "/{uid}/items",
    response_model=List[PlaylistItemRead],
    summary="Get Playlist Items",
    responses={404: {"description": "Playlist not found"}},
)
async def get_playlist_items(uid: str, stores: StoresDep, org_id: OrgIdDep) -> List[PlaylistItemRead]:
    items = await stores.playlists.get_items(GetPlaylistItemsByUidQuery(playlist_uid=uid, org_id=org_id))
    return [PlaylistItemRead.model_validate(item) for item in items]


@router.put(
    "/{uid}",
    response_model=PlaylistWithItemsRead,
    summary="Update Playlist",
    responses={404: {"description": "Playlist not found"}},
)
async def update_playlist(
    uid: str, payload: PlaylistUpdate, stores: StoresDep, org_id: OrgIdDep
) -> PlaylistWithItemsRead:
    """
    Replace name, interval and items of a playlist.

    Items are renumbered from 1 in the order they are sent.
    """
    dto = await stores.playlists.update(
        UpdatePlaylistCommand(
            uid=uid,
            org_id=org_id,
            name=payload.name,
            interval=payload.interval,
            items=_to_item_commands(payload.items),
        )
    )
    return PlaylistWithItemsRead.model_validate(dto.model_dump())


@router.delete(
    "/{uid}",
    summary="Delete Playlist",
    responses={404: {"description": "Playlist not found"}},
)
async def delete_playlist(uid: str, stores: StoresDep, org_id: OrgIdDep) -> dict:
    await stores.playlists.delete(DeletePlaylistCommand(uid=uid, org_id=org_id))
    return {}
