"""Artist lookups and artist-scoped listings."""

from collections.abc import Sequence

from pydantic import TypeAdapter

from spotify_catalog.constants import ARTISTS_URL, DEFAULT_LIMIT, MAX_ARTIST_IDS, MAX_PAGE_LIMIT
from spotify_catalog.core import BaseClient, decode, guarded, query, segment
from spotify_catalog.mapping import map_album, map_artist, map_batch, map_page, map_track
from spotify_catalog.models.domain import Album, Artist, Page, Track
from spotify_catalog.models.enums import IncludeGroup
from spotify_catalog.models.wire import WireAlbum, WireArtist, WirePage, WireTrack
from spotify_catalog.validation import require_choice, require_ids, require_limit, require_non_empty, require_offset

_ARTISTS = TypeAdapter(list[WireArtist | None])
_FULL_ARTISTS = TypeAdapter(list[WireArtist])
_TRACKS = TypeAdapter(list[WireTrack])


class ArtistsMixin(BaseClient):
    @guarded
    async def get_artist(self, artist_id: str) -> Artist:
        """GET /artists/{id}."""
        require_non_empty(artist_id, "artist_id")
        response = await self._request("GET", f"{ARTISTS_URL}/{segment(artist_id)}")
        return decode(response, lambda body: map_artist(WireArtist.model_validate(body)))

    @guarded
    async def get_artists(self, artist_ids: Sequence[str]) -> list[Artist | None]:
        """GET /artists?ids=... (max 50)."""
        require_ids(artist_ids, MAX_ARTIST_IDS, "artist IDs")
        response = await self._request("GET", ARTISTS_URL, params=query(ids=artist_ids))
        return decode(response, lambda body: map_batch(map_artist, _ARTISTS.validate_python(body["artists"])))

    @guarded
    async def get_artist_albums(
        self,
        artist_id: str,
        *,
        include_groups: Sequence[IncludeGroup | str] = (),
        market: str | None = None,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
    ) -> Page[Album]:
        """GET /artists/{id}/albums, optionally filtered by album group."""
        require_non_empty(artist_id, "artist_id")
        require_choice(include_groups, set(IncludeGroup), "include_groups")
        require_limit(limit, MAX_PAGE_LIMIT)
        require_offset(offset)
        response = await self._request(
            "GET",
            f"{ARTISTS_URL}/{segment(artist_id)}/albums",
            params=query(include_groups=include_groups, market=market, limit=limit, offset=offset),
        )
        return decode(response, lambda body: map_page(WirePage[WireAlbum].model_validate(body), map_album, Album))

    @guarded
    async def get_artist_top_tracks(self, artist_id: str, country: str) -> list[Track]:
        """GET /artists/{id}/top-tracks. *country* is required by the API."""
        require_non_empty(artist_id, "artist_id")
        require_non_empty(country, "country")
        response = await self._request(
            "GET",
            f"{ARTISTS_URL}/{segment(artist_id)}/top-tracks",
            params=query(country=country),
        )
        return decode(response, lambda body: [map_track(t) for t in _TRACKS.validate_python(body["tracks"])])

    @guarded
    async def get_artist_related_artists(self, artist_id: str) -> list[Artist]:
        require_non_empty(artist_id, "artist_id")
        response = await self._request("GET", f"{ARTISTS_URL}/{segment(artist_id)}/related-artists")
        return decode(response, lambda body: [map_artist(a) for a in _FULL_ARTISTS.validate_python(body["artists"])])
