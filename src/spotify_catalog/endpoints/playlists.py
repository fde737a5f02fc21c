"""Playlist reads, edits and item management."""

import base64
from collections.abc import Sequence

from pydantic import TypeAdapter

from spotify_catalog.constants import (
    DEFAULT_LIMIT,
    MAX_PAGE_LIMIT,
    MAX_PLAYLIST_TRACKS_LIMIT,
    MAX_PLAYLIST_URIS,
    MAX_PLAYLISTS_OFFSET,
    ME_URL,
    PLAYLISTS_URL,
    USERS_URL,
)
from spotify_catalog.core import ACCEPTED, CREATED, OK, BaseClient, decode, guarded, json_fields, query, segment
from spotify_catalog.exceptions import InvalidUsageError
from spotify_catalog.mapping import map_page, map_playlist, map_playlist_track
from spotify_catalog.models.common import Image
from spotify_catalog.models.domain import Page, Playlist, PlaylistTrack, SpotifyURI
from spotify_catalog.models.wire import WirePage, WirePlaylist, WirePlaylistTrack, WireSnapshot
from spotify_catalog.validation import require_ids, require_limit, require_non_empty, require_offset

_IMAGES = TypeAdapter(list[Image])


def _snapshot_id(body: object) -> str:
    return WireSnapshot.model_validate(body).snapshot_id


def _require_position(value: int, name: str) -> None:
    if value < 0:
        raise InvalidUsageError(f"{name} must be non-negative, got {value}")


class PlaylistsMixin(BaseClient):
    # -------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------

    @guarded
    async def get_playlist(
        self,
        playlist_id: str,
        *,
        fields: str | None = None,
        market: str | None = None,
    ) -> Playlist:
        """GET /playlists/{id}.

        *fields* filters the response; a filter that drops required playlist
        fields yields an undecodable-body ``ApiError``.
        """
        require_non_empty(playlist_id, "playlist_id")
        response = await self._request(
            "GET",
            f"{PLAYLISTS_URL}/{segment(playlist_id)}",
            params=query(fields=fields, market=market),
        )
        return decode(response, lambda body: map_playlist(WirePlaylist.model_validate(body)))

    @guarded
    async def get_playlist_tracks(
        self,
        playlist_id: str,
        *,
        fields: str | None = None,
        limit: int = MAX_PLAYLIST_TRACKS_LIMIT,
        offset: int = 0,
        market: str | None = None,
    ) -> Page[PlaylistTrack]:
        """GET /playlists/{id}/tracks (limit 1..100)."""
        require_non_empty(playlist_id, "playlist_id")
        require_limit(limit, MAX_PLAYLIST_TRACKS_LIMIT)
        require_offset(offset)
        response = await self._request(
            "GET",
            f"{PLAYLISTS_URL}/{segment(playlist_id)}/tracks",
            params=query(fields=fields, limit=limit, offset=offset, market=market),
        )
        return decode(
            response,
            lambda body: map_page(
                WirePage[WirePlaylistTrack].model_validate(body), map_playlist_track, PlaylistTrack
            ),
        )

    @guarded
    async def get_current_user_playlists(self, *, limit: int = DEFAULT_LIMIT, offset: int = 0) -> Page[Playlist]:
        """GET /me/playlists."""
        return await self._playlists_page(f"{ME_URL}/playlists", limit, offset)

    @guarded
    async def get_user_playlists(
        self,
        user_id: str,
        *,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
    ) -> Page[Playlist]:
        """GET /users/{id}/playlists."""
        require_non_empty(user_id, "user_id")
        return await self._playlists_page(f"{USERS_URL}/{segment(user_id)}/playlists", limit, offset)

    async def _playlists_page(self, url: str, limit: int, offset: int) -> Page[Playlist]:
        require_limit(limit, MAX_PAGE_LIMIT)
        require_offset(offset, MAX_PLAYLISTS_OFFSET)
        response = await self._request("GET", url, params=query(limit=limit, offset=offset))
        return decode(
            response,
            lambda body: map_page(WirePage[WirePlaylist].model_validate(body), map_playlist, Playlist),
        )

    @guarded
    async def get_playlist_cover_image(self, playlist_id: str) -> list[Image]:
        """GET /playlists/{id}/images."""
        require_non_empty(playlist_id, "playlist_id")
        response = await self._request("GET", f"{PLAYLISTS_URL}/{segment(playlist_id)}/images")
        return decode(response, _IMAGES.validate_python)

    # -------------------------------------------------------------------
    # Playlist details
    # -------------------------------------------------------------------

    @guarded
    async def create_playlist(
        self,
        user_id: str,
        name: str,
        *,
        public: bool | None = None,
        collaborative: bool | None = None,
        description: str | None = None,
    ) -> Playlist:
        """POST /users/{id}/playlists. Only the current user can create playlists for themselves."""
        require_non_empty(user_id, "user_id")
        require_non_empty(name, "name")
        response = await self._request(
            "POST",
            f"{USERS_URL}/{segment(user_id)}/playlists",
            success=CREATED,
            json_body=json_fields(
                name=name,
                public=public,
                collaborative=collaborative,
                description=description,
            ),
        )
        return decode(response, lambda body: map_playlist(WirePlaylist.model_validate(body)))

    @guarded
    async def change_playlist_details(
        self,
        playlist_id: str,
        *,
        name: str | None = None,
        public: bool | None = None,
        collaborative: bool | None = None,
        description: str | None = None,
    ) -> None:
        """PUT /playlists/{id}. At least one detail must be given."""
        require_non_empty(playlist_id, "playlist_id")
        body = json_fields(name=name, public=public, collaborative=collaborative, description=description)
        if not body:
            raise InvalidUsageError("At least one of name, public, collaborative or description is required")
        await self._request("PUT", f"{PLAYLISTS_URL}/{segment(playlist_id)}", json_body=body)

    @guarded
    async def upload_custom_playlist_cover_image(self, playlist_id: str, image: bytes | str) -> None:
        """PUT /playlists/{id}/images.

        *image* is raw JPEG bytes or an already Base64-encoded string; the API
        caps the encoded payload at 256 KB.
        """
        require_non_empty(playlist_id, "playlist_id")
        require_non_empty(image, "image")
        encoded = base64.b64encode(image).decode("ascii") if isinstance(image, bytes) else image
        await self._request(
            "PUT",
            f"{PLAYLISTS_URL}/{segment(playlist_id)}/images",
            success=ACCEPTED,
            content=encoded,
            headers={"Content-Type": "image/jpeg"},
        )

    # -------------------------------------------------------------------
    # Items
    # -------------------------------------------------------------------

    @guarded
    async def add_items_to_playlist(
        self,
        playlist_id: str,
        uris: Sequence[str | SpotifyURI],
        *,
        position: int | None = None,
    ) -> str:
        """POST /playlists/{id}/tracks. Returns the new snapshot ID."""
        require_non_empty(playlist_id, "playlist_id")
        require_ids(uris, MAX_PLAYLIST_URIS, "URIs")
        if position is not None:
            _require_position(position, "position")
        response = await self._request(
            "POST",
            f"{PLAYLISTS_URL}/{segment(playlist_id)}/tracks",
            success=CREATED,
            json_body=json_fields(uris=[str(uri) for uri in uris], position=position),
        )
        return decode(response, _snapshot_id)

    @guarded
    async def remove_playlist_items(
        self,
        playlist_id: str,
        uris: Sequence[str | SpotifyURI],
        *,
        positions: Sequence[Sequence[int]] = (),
        snapshot_id: str | None = None,
    ) -> str:
        """DELETE /playlists/{id}/tracks. Returns the new snapshot ID.

        *positions*, when given, holds one list of zero-based positions per
        URI, restricting removal to those occurrences.
        """
        require_non_empty(playlist_id, "playlist_id")
        require_ids(uris, MAX_PLAYLIST_URIS, "URIs")
        if positions and len(positions) != len(uris):
            raise InvalidUsageError(f"Expected one positions list per URI ({len(uris)}), got {len(positions)}")
        tracks: list[dict[str, object]]
        if positions:
            tracks = [{"uri": str(uri), "positions": list(p)} for uri, p in zip(uris, positions, strict=True)]
        else:
            tracks = [{"uri": str(uri)} for uri in uris]
        response = await self._request(
            "DELETE",
            f"{PLAYLISTS_URL}/{segment(playlist_id)}/tracks",
            json_body=json_fields(tracks=tracks, snapshot_id=snapshot_id),
        )
        return decode(response, _snapshot_id)

    @guarded
    async def reorder_playlist_items(
        self,
        playlist_id: str,
        range_start: int,
        insert_before: int,
        *,
        range_length: int = 1,
        snapshot_id: str | None = None,
    ) -> str:
        """PUT /playlists/{id}/tracks moving ``range_length`` items. Returns the new snapshot ID."""
        require_non_empty(playlist_id, "playlist_id")
        _require_position(range_start, "range_start")
        _require_position(insert_before, "insert_before")
        if range_length < 1:
            raise InvalidUsageError(f"range_length must be at least 1, got {range_length}")
        response = await self._request(
            "PUT",
            f"{PLAYLISTS_URL}/{segment(playlist_id)}/tracks",
            json_body=json_fields(
                range_start=range_start,
                insert_before=insert_before,
                range_length=range_length,
                snapshot_id=snapshot_id,
            ),
        )
        return decode(response, _snapshot_id)

    @guarded
    async def replace_playlist_items(self, playlist_id: str, uris: Sequence[str | SpotifyURI]) -> None:
        """PUT /playlists/{id}/tracks with a new item list."""
        require_non_empty(playlist_id, "playlist_id")
        require_ids(uris, MAX_PLAYLIST_URIS, "URIs")
        await self._request(
            "PUT",
            f"{PLAYLISTS_URL}/{segment(playlist_id)}/tracks",
            success=OK | CREATED,
            json_body={"uris": [str(uri) for uri in uris]},
        )
