"""Album lookups."""

from collections.abc import Sequence

from pydantic import TypeAdapter

from spotify_catalog.constants import ALBUMS_URL, DEFAULT_LIMIT, MAX_ALBUM_IDS, MAX_PAGE_LIMIT
from spotify_catalog.core import BaseClient, decode, guarded, query, segment
from spotify_catalog.mapping import map_album, map_batch, map_page, map_track
from spotify_catalog.models.domain import Album, Page, Track
from spotify_catalog.models.wire import WireAlbum, WirePage, WireTrack
from spotify_catalog.validation import require_ids, require_limit, require_non_empty, require_offset

_ALBUMS = TypeAdapter(list[WireAlbum | None])


class AlbumsMixin(BaseClient):
    @guarded
    async def get_album(self, album_id: str, *, market: str | None = None) -> Album:
        """GET /albums/{id}."""
        require_non_empty(album_id, "album_id")
        response = await self._request("GET", f"{ALBUMS_URL}/{segment(album_id)}", params=query(market=market))
        return decode(response, lambda body: map_album(WireAlbum.model_validate(body)))

    @guarded
    async def get_albums(self, album_ids: Sequence[str], *, market: str | None = None) -> list[Album | None]:
        """GET /albums?ids=... (max 20). Unknown IDs come back as ``None`` in their slot."""
        require_ids(album_ids, MAX_ALBUM_IDS, "album IDs")
        response = await self._request("GET", ALBUMS_URL, params=query(ids=album_ids, market=market))
        return decode(response, lambda body: map_batch(map_album, _ALBUMS.validate_python(body["albums"])))

    @guarded
    async def get_album_tracks(
        self,
        album_id: str,
        *,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
        market: str | None = None,
    ) -> Page[Track]:
        """GET /albums/{id}/tracks. Items are simplified tracks."""
        require_non_empty(album_id, "album_id")
        require_limit(limit, MAX_PAGE_LIMIT)
        require_offset(offset)
        response = await self._request(
            "GET",
            f"{ALBUMS_URL}/{segment(album_id)}/tracks",
            params=query(limit=limit, offset=offset, market=market),
        )
        return decode(response, lambda body: map_page(WirePage[WireTrack].model_validate(body), map_track, Track))
