"""The current user's saved albums, shows and tracks."""

from collections.abc import Sequence

import httpx
from pydantic import TypeAdapter

from spotify_catalog.constants import DEFAULT_LIMIT, MAX_LIBRARY_IDS, MAX_PAGE_LIMIT, ME_URL
from spotify_catalog.core import BaseClient, decode, guarded, query
from spotify_catalog.mapping import map_page, map_saved_album, map_saved_show, map_saved_track
from spotify_catalog.models.domain import Page, SavedAlbum, SavedShow, SavedTrack
from spotify_catalog.models.wire import WirePage, WireSavedAlbum, WireSavedShow, WireSavedTrack
from spotify_catalog.validation import require_ids, require_limit, require_offset

_FLAGS = TypeAdapter(list[bool])


class LibraryMixin(BaseClient):
    # -------------------------------------------------------------------
    # Shared request shapes
    # -------------------------------------------------------------------

    async def _contains(self, collection: str, ids: Sequence[str]) -> list[bool]:
        require_ids(ids, MAX_LIBRARY_IDS)
        response = await self._request("GET", f"{ME_URL}/{collection}/contains", params=query(ids=ids))
        return decode(response, _FLAGS.validate_python)

    async def _save(self, collection: str, ids: Sequence[str]) -> None:
        require_ids(ids, MAX_LIBRARY_IDS)
        await self._request("PUT", f"{ME_URL}/{collection}", params=query(ids=ids))

    async def _remove(self, collection: str, ids: Sequence[str]) -> None:
        require_ids(ids, MAX_LIBRARY_IDS)
        await self._request("DELETE", f"{ME_URL}/{collection}", params=query(ids=ids))

    async def _saved_page(self, collection: str, limit: int, offset: int, market: str | None) -> httpx.Response:
        require_limit(limit, MAX_PAGE_LIMIT)
        require_offset(offset)
        response = await self._request(
            "GET",
            f"{ME_URL}/{collection}",
            params=query(limit=limit, offset=offset, market=market),
        )
        return response

    # -------------------------------------------------------------------
    # Albums
    # -------------------------------------------------------------------

    @guarded
    async def are_albums_saved(self, album_ids: Sequence[str]) -> list[bool]:
        """GET /me/albums/contains."""
        return await self._contains("albums", album_ids)

    @guarded
    async def get_saved_albums(
        self, *, limit: int = DEFAULT_LIMIT, offset: int = 0, market: str | None = None
    ) -> Page[SavedAlbum]:
        """GET /me/albums."""
        response = await self._saved_page("albums", limit, offset, market)
        return decode(
            response,
            lambda body: map_page(WirePage[WireSavedAlbum].model_validate(body), map_saved_album, SavedAlbum),
        )

    @guarded
    async def save_albums(self, album_ids: Sequence[str]) -> None:
        """PUT /me/albums."""
        await self._save("albums", album_ids)

    @guarded
    async def remove_saved_albums(self, album_ids: Sequence[str]) -> None:
        """DELETE /me/albums."""
        await self._remove("albums", album_ids)

    # -------------------------------------------------------------------
    # Shows
    # -------------------------------------------------------------------

    @guarded
    async def are_shows_saved(self, show_ids: Sequence[str]) -> list[bool]:
        """GET /me/shows/contains."""
        return await self._contains("shows", show_ids)

    @guarded
    async def get_saved_shows(self, *, limit: int = DEFAULT_LIMIT, offset: int = 0) -> Page[SavedShow]:
        """GET /me/shows."""
        response = await self._saved_page("shows", limit, offset, None)
        return decode(
            response,
            lambda body: map_page(WirePage[WireSavedShow].model_validate(body), map_saved_show, SavedShow),
        )

    @guarded
    async def save_shows(self, show_ids: Sequence[str]) -> None:
        """PUT /me/shows."""
        await self._save("shows", show_ids)

    @guarded
    async def remove_saved_shows(self, show_ids: Sequence[str]) -> None:
        """DELETE /me/shows."""
        await self._remove("shows", show_ids)

    # -------------------------------------------------------------------
    # Tracks
    # -------------------------------------------------------------------

    @guarded
    async def are_tracks_saved(self, track_ids: Sequence[str]) -> list[bool]:
        """GET /me/tracks/contains."""
        return await self._contains("tracks", track_ids)

    @guarded
    async def get_saved_tracks(
        self, *, limit: int = DEFAULT_LIMIT, offset: int = 0, market: str | None = None
    ) -> Page[SavedTrack]:
        """GET /me/tracks."""
        response = await self._saved_page("tracks", limit, offset, market)
        return decode(
            response,
            lambda body: map_page(WirePage[WireSavedTrack].model_validate(body), map_saved_track, SavedTrack),
        )

    @guarded
    async def save_tracks(self, track_ids: Sequence[str]) -> None:
        """PUT /me/tracks."""
        await self._save("tracks", track_ids)

    @guarded
    async def remove_saved_tracks(self, track_ids: Sequence[str]) -> None:
        """DELETE /me/tracks."""
        await self._remove("tracks", track_ids)
