"""
Playlist store.

This module provides data access operations for playlists and their items.
Playlists are looked up by ``(uid, org_id)``; items are stored in a separate
table and are replaced wholesale on update.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlmodel import select

from panelhub.core.errors import (
    CommandValidationError,
    PlaylistFailedGenerateUniqueUidError,
    PlaylistNotFoundError,
)
from panelhub.core.logging_config import get_logger
from panelhub.core.models.playlists import (
    CreatePlaylistCommand,
    DeletePlaylistCommand,
    GetPlaylistByUidQuery,
    GetPlaylistItemsByUidQuery,
    GetPlaylistsQuery,
    PlaylistDTO,
    PlaylistItemDTO,
    UpdatePlaylistCommand,
)
from panelhub.core.uid import generate_unique_uid

from ..entities.playlists import Playlist, PlaylistItem
from ..utils import transactional_session

logger = get_logger(__name__)


class PlaylistStore:
    """Store for playlists and playlist items."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession], uid_attempts: int = 3) -> None:
        """Initialize the store.

        Args:
            session_factory: Factory used to open one session per operation
            uid_attempts: How many random uids to try before giving up on insert
        """
        self.session_factory = session_factory
        self.uid_attempts = uid_attempts

    async def insert(self, cmd: CreatePlaylistCommand) -> Playlist:
        """Create a playlist and its items.

        Args:
            cmd: Create command; item ``order`` values are stored as given

        Returns:
            The persisted playlist

        Raises:
            PlaylistFailedGenerateUniqueUidError: No free uid found within the allowed attempts
        """
        uid = await self._generate_uid(cmd.org_id)
        playlist = Playlist(name=cmd.name, interval=cmd.interval, org_id=cmd.org_id, uid=uid)

        async with transactional_session(self.session_factory) as session:
            session.add(playlist)
            await session.flush()

            session.add_all(
                [
                    PlaylistItem(
                        playlist_id=playlist.id,
                        type=item.type,
                        value=item.value,
                        title=item.title,
                        order=item.order,
                    )
                    for item in cmd.items
                ]
            )

        logger.info(f"Created playlist {playlist.uid} in org {playlist.org_id} with {len(cmd.items)} items")
        return playlist

    async def update(self, cmd: UpdatePlaylistCommand) -> PlaylistDTO:
        """Replace name, interval and items of an existing playlist.

        Items are renumbered from 1 in the order they appear in the command.

        Raises:
            CommandValidationError: uid or org id missing
            PlaylistNotFoundError: No playlist with this uid in the org
        """
        self._validate(cmd.uid, cmd.org_id)

        async with transactional_session(self.session_factory) as session:
            playlist = await self._find(session, cmd.uid, cmd.org_id)
            if playlist is None:
                raise PlaylistNotFoundError()

            playlist.name = cmd.name
            playlist.interval = cmd.interval
            session.add(playlist)

            await session.execute(delete(PlaylistItem).where(PlaylistItem.playlist_id == playlist.id))

            items = [
                PlaylistItem(
                    playlist_id=playlist.id,
                    type=item.type,
                    value=item.value,
                    title=item.title,
                    order=index + 1,
                )
                for index, item in enumerate(cmd.items)
            ]
            session.add_all(items)
            await session.flush()

            dto = PlaylistDTO(
                id=playlist.id,
                uid=playlist.uid,
                org_id=playlist.org_id,
                name=playlist.name,
                interval=playlist.interval,
                items=[PlaylistItemDTO.model_validate(item) for item in items],
            )

        logger.info(f"Updated playlist {cmd.uid} in org {cmd.org_id} with {len(items)} items")
        return dto

    async def get(self, query: GetPlaylistByUidQuery) -> Playlist:
        """Get a playlist by uid.

        Raises:
            CommandValidationError: uid or org id missing
            PlaylistNotFoundError: No playlist with this uid in the org
        """
        self._validate(query.uid, query.org_id)

        async with self.session_factory() as session:
            playlist = await self._find(session, query.uid, query.org_id)

        if playlist is None:
            raise PlaylistNotFoundError()
        return playlist

    async def delete(self, cmd: DeletePlaylistCommand) -> None:
        """Delete a playlist together with its items.

        Raises:
            CommandValidationError: uid or org id missing
            PlaylistNotFoundError: No playlist with this uid in the org
        """
        self._validate(cmd.uid, cmd.org_id)

        async with transactional_session(self.session_factory) as session:
            playlist = await self._find(session, cmd.uid, cmd.org_id)
            if playlist is None:
                raise PlaylistNotFoundError()

            await session.execute(
                delete(Playlist).where((Playlist.uid == cmd.uid) & (Playlist.org_id == cmd.org_id))
            )
            await session.execute(delete(PlaylistItem).where(PlaylistItem.playlist_id == playlist.id))

        logger.info(f"Deleted playlist {cmd.uid} in org {cmd.org_id}")

    async def list(self, query: GetPlaylistsQuery) -> List[Playlist]:
        """List playlists of an org, optionally filtered by name.

        Raises:
            CommandValidationError: org id missing
        """
        if query.org_id == 0:
            logger.debug("Rejected playlist listing without org id")
            raise CommandValidationError()

        stmt = select(Playlist).where(Playlist.org_id == query.org_id)
        if query.name:
            stmt = stmt.where(Playlist.name.like(f"%{query.name}%"))
        stmt = stmt.order_by(Playlist.id).limit(query.limit)

        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return list(result.scalars().all())

    async def get_items(self, query: GetPlaylistItemsByUidQuery) -> List[PlaylistItem]:
        """Get the items of a playlist ordered by position.

        Raises:
            CommandValidationError: uid or org id missing
            PlaylistNotFoundError: No playlist with this uid in the org
        """
        self._validate(query.playlist_uid, query.org_id)

        async with self.session_factory() as session:
            playlist = await self._find(session, query.playlist_uid, query.org_id)
            if playlist is None:
                raise PlaylistNotFoundError()

            stmt = (
                select(PlaylistItem)
                .where(PlaylistItem.playlist_id == playlist.id)
                .order_by(PlaylistItem.order, PlaylistItem.id)
            )
            result = await session.execute(stmt)
            return list(result.scalars().all())

    async def _generate_uid(self, org_id: int) -> str:
        async with self.session_factory() as session:

            async def exists(candidate: str) -> bool:
                return await self._find(session, candidate, org_id) is not None

            return await generate_unique_uid(
                exists, error=PlaylistFailedGenerateUniqueUidError, attempts=self.uid_attempts
            )

    @staticmethod
    def _validate(uid: str, org_id: int) -> None:
        if not uid or org_id == 0:
            logger.debug(f"Rejected playlist command with uid={uid!r} org_id={org_id}")
            raise CommandValidationError()

    @staticmethod
    async def _find(session: AsyncSession, uid: str, org_id: int) -> Optional[Playlist]:
        stmt = select(Playlist).where((Playlist.uid == uid) & (Playlist.org_id == org_id))
        result = await session.execute(stmt)
        return result.scalar_one_or_none()
