"""Unit tests for playlist store.

Tests store operations against in-memory SQLite. Uid collisions are forced by
patching the short uid generator.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
from sqlmodel import select

from panelhub.core.database.entities.playlists import Playlist, PlaylistItem
from panelhub.core.database.repositories.playlists import PlaylistStore
from panelhub.core.errors import CommandValidationError, PlaylistFailedGenerateUniqueUidError, PlaylistNotFoundError
from panelhub.core.models.playlists import (
    CreatePlaylistCommand,
    DeletePlaylistCommand,
    GetPlaylistByUidQuery,
    GetPlaylistItemsByUidQuery,
    GetPlaylistsQuery,
    PlaylistDTO,
    PlaylistItemCommand,
    UpdatePlaylistCommand,
)

GENERATOR = "panelhub.core.uid.generate_short_uid"


def _items(*values: str, start: int = 1):
    return [
        PlaylistItemCommand(type="dashboard_by_uid", value=value, title=f"Dashboard {value}", order=start + i)
        for i, value in enumerate(values)
    ]


async def _insert(store, name="NOC wall", org_id=1, items=None):
    return await store.insert(
        CreatePlaylistCommand(name=name, interval="5m", org_id=org_id, items=items or [])
    )


async def _stored_items(session_factory):
    async with session_factory() as session:
        result = await session.execute(select(PlaylistItem).order_by(PlaylistItem.id))
        return list(result.scalars().all())


class TestInsertPlaylist:
    """Tests for PlaylistStore.insert."""

    async def test_insert_with_items(self, playlist_store, session_factory):
        playlist = await _insert(playlist_store, items=_items("dash-a", "dash-b"))

        assert playlist.id is not None
        assert len(playlist.uid) == 14
        assert playlist.org_id == 1
        assert playlist.interval == "5m"

        items = await _stored_items(session_factory)
        assert [(i.playlist_id, i.value, i.order) for i in items] == [
            (playlist.id, "dash-a", 1),
            (playlist.id, "dash-b", 2),
        ]

    async def test_insert_keeps_item_order_from_command(self, playlist_store, session_factory):
        items = [
            PlaylistItemCommand(type="dashboard_by_tag", value="prod", order=7),
            PlaylistItemCommand(type="dashboard_by_id", value="42", order=3),
        ]

        await _insert(playlist_store, items=items)

        assert [(i.value, i.order) for i in await _stored_items(session_factory)] == [("prod", 7), ("42", 3)]

    async def test_insert_without_items(self, playlist_store, session_factory):
        playlist = await _insert(playlist_store)

        assert playlist.id is not None
        assert await _stored_items(session_factory) == []

    async def test_insert_retries_on_uid_collision(self, playlist_store):
        with patch(GENERATOR, side_effect=["aaaaaaaaaaaaaa", "aaaaaaaaaaaaaa", "bbbbbbbbbbbbbb"]) as generator:
            first = await _insert(playlist_store)
            second = await _insert(playlist_store, name="Second")

        assert first.uid == "aaaaaaaaaaaaaa"
        assert second.uid == "bbbbbbbbbbbbbb"
        assert generator.call_count == 3

    async def test_insert_fails_when_uids_exhausted(self, session_factory):
        store = PlaylistStore(session_factory, uid_attempts=2)

        with patch(GENERATOR, return_value="aaaaaaaaaaaaaa") as generator:
            await _insert(store)
            with pytest.raises(PlaylistFailedGenerateUniqueUidError):
                await _insert(store, name="Second")

        assert generator.call_count == 3
        async with session_factory() as session:
            result = await session.execute(select(Playlist))
            assert len(result.scalars().all()) == 1

    async def test_same_uid_allowed_in_other_org(self, playlist_store):
        with patch(GENERATOR, return_value="aaaaaaaaaaaaaa"):
            first = await _insert(playlist_store, org_id=1)
            second = await _insert(playlist_store, org_id=2)

        assert first.uid == second.uid
        assert first.id != second.id


class TestGetPlaylist:
    """Tests for PlaylistStore.get."""

    async def test_get(self, playlist_store):
        created = await _insert(playlist_store)

        found = await playlist_store.get(GetPlaylistByUidQuery(uid=created.uid, org_id=1))

        assert found.id == created.id
        assert found.name == "NOC wall"

    async def test_get_wrong_org(self, playlist_store):
        created = await _insert(playlist_store)

        with pytest.raises(PlaylistNotFoundError):
            await playlist_store.get(GetPlaylistByUidQuery(uid=created.uid, org_id=2))

    @pytest.mark.parametrize("uid,org_id", [("", 1), ("abc", 0)])
    async def test_get_invalid_query(self, playlist_store, uid, org_id):
        with pytest.raises(CommandValidationError):
            await playlist_store.get(GetPlaylistByUidQuery(uid=uid, org_id=org_id))


class TestUpdatePlaylist:
    """Tests for PlaylistStore.update."""

    async def test_update_replaces_items(self, playlist_store, session_factory):
        created = await _insert(playlist_store, items=_items("old-1", "old-2", "old-3"))
        new_items = [
            PlaylistItemCommand(type="dashboard_by_tag", value="prod", title="Prod", order=99),
            PlaylistItemCommand(type="dashboard_by_uid", value="dash-z", order=5),
        ]

        dto = await playlist_store.update(
            UpdatePlaylistCommand(uid=created.uid, org_id=1, name="Renamed", interval="10m", items=new_items)
        )

        assert isinstance(dto, PlaylistDTO)
        assert dto.id == created.id
        assert dto.uid == created.uid
        assert dto.name == "Renamed"
        assert dto.interval == "10m"
        assert [(i.value, i.order, i.playlist_id) for i in dto.items] == [
            ("prod", 1, created.id),
            ("dash-z", 2, created.id),
        ]
        assert all(i.id is not None for i in dto.items)

        stored = await _stored_items(session_factory)
        assert [(i.value, i.order) for i in stored] == [("prod", 1), ("dash-z", 2)]

        found = await playlist_store.get(GetPlaylistByUidQuery(uid=created.uid, org_id=1))
        assert found.name == "Renamed"

    async def test_update_to_no_items(self, playlist_store, session_factory):
        created = await _insert(playlist_store, items=_items("old-1"))

        dto = await playlist_store.update(
            UpdatePlaylistCommand(uid=created.uid, org_id=1, name="Empty", interval="1m")
        )

        assert dto.items == []
        assert await _stored_items(session_factory) == []

    async def test_update_not_found(self, playlist_store):
        with pytest.raises(PlaylistNotFoundError):
            await playlist_store.update(UpdatePlaylistCommand(uid="missing", org_id=1, name="x", interval="1m"))

    async def test_update_invalid_command(self, playlist_store):
        with pytest.raises(CommandValidationError):
            await playlist_store.update(UpdatePlaylistCommand(uid="", org_id=1, name="x", interval="1m"))


class TestDeletePlaylist:
    """Tests for PlaylistStore.delete."""

    async def test_delete_removes_items(self, playlist_store, session_factory):
        created = await _insert(playlist_store, items=_items("dash-a", "dash-b"))
        other = await _insert(playlist_store, name="Other", items=_items("dash-c"))

        await playlist_store.delete(DeletePlaylistCommand(uid=created.uid, org_id=1))

        with pytest.raises(PlaylistNotFoundError):
            await playlist_store.get(GetPlaylistByUidQuery(uid=created.uid, org_id=1))
        assert [i.playlist_id for i in await _stored_items(session_factory)] == [other.id]

    async def test_delete_not_found(self, playlist_store):
        with pytest.raises(PlaylistNotFoundError):
            await playlist_store.delete(DeletePlaylistCommand(uid="missing", org_id=1))

    async def test_delete_invalid_command(self, playlist_store):
        with pytest.raises(CommandValidationError):
            await playlist_store.delete(DeletePlaylistCommand(uid="abc", org_id=0))


class TestListPlaylists:
    """Tests for PlaylistStore.list."""

    async def test_list_by_org_ordered_by_id(self, playlist_store):
        first = await _insert(playlist_store, name="Beta")
        second = await _insert(playlist_store, name="Alpha")
        await _insert(playlist_store, name="Other org", org_id=2)

        found = await playlist_store.list(GetPlaylistsQuery(org_id=1))

        assert [p.id for p in found] == [first.id, second.id]

    async def test_list_filters_by_name(self, playlist_store):
        await _insert(playlist_store, name="NOC wall")
        await _insert(playlist_store, name="Office wall")
        await _insert(playlist_store, name="Kiosk")

        found = await playlist_store.list(GetPlaylistsQuery(org_id=1, name="wall"))

        assert [p.name for p in found] == ["NOC wall", "Office wall"]

    async def test_list_applies_limit(self, playlist_store):
        for i in range(3):
            await _insert(playlist_store, name=f"Playlist {i}")

        found = await playlist_store.list(GetPlaylistsQuery(org_id=1, limit=2))

        assert [p.name for p in found] == ["Playlist 0", "Playlist 1"]

    async def test_list_empty(self, playlist_store):
        assert await playlist_store.list(GetPlaylistsQuery(org_id=5)) == []

    async def test_list_without_org(self, playlist_store):
        with pytest.raises(CommandValidationError):
            await playlist_store.list(GetPlaylistsQuery(org_id=0))


class TestGetPlaylistItems:
    """Tests for PlaylistStore.get_items."""

    async def test_get_items_ordered(self, playlist_store):
        items = [
            PlaylistItemCommand(type="dashboard_by_uid", value="third", order=3),
            PlaylistItemCommand(type="dashboard_by_uid", value="first", order=1),
            PlaylistItemCommand(type="dashboard_by_uid", value="second", order=2),
        ]
        created = await _insert(playlist_store, items=items)

        found = await playlist_store.get_items(GetPlaylistItemsByUidQuery(playlist_uid=created.uid, org_id=1))

        assert [i.value for i in found] == ["first", "second", "third"]

    async def test_get_items_only_for_playlist(self, playlist_store):
        created = await _insert(playlist_store, items=_items("mine"))
        await _insert(playlist_store, name="Other", items=_items("theirs"))

        found = await playlist_store.get_items(GetPlaylistItemsByUidQuery(playlist_uid=created.uid, org_id=1))

        assert [i.value for i in found] == ["mine"]

    async def test_get_items_not_found(self, playlist_store):
        with pytest.raises(PlaylistNotFoundError):
            await playlist_store.get_items(GetPlaylistItemsByUidQuery(playlist_uid="missing", org_id=1))

    async def test_get_items_invalid_query(self, playlist_store):
        with pytest.raises(CommandValidationError):
            await playlist_store.get_items(GetPlaylistItemsByUidQuery(playlist_uid="", org_id=1))
