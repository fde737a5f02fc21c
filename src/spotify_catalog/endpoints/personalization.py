"""The current user's top artists and tracks."""

from spotify_catalog.constants import DEFAULT_LIMIT, MAX_PAGE_LIMIT, ME_URL
from spotify_catalog.core import BaseClient, decode, guarded, query
from spotify_catalog.mapping import map_artist, map_page, map_track
from spotify_catalog.models.domain import Artist, Page, Track
from spotify_catalog.models.enums import TimeRange
from spotify_catalog.models.wire import WireArtist, WirePage, WireTrack
from spotify_catalog.validation import require_choice, require_limit, require_offset


class PersonalizationMixin(BaseClient):
    @guarded
    async def get_top_artists(
        self,
        *,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
        time_range: TimeRange | None = None,
    ) -> Page[Artist]:
        """GET /me/top/artists. The API defaults *time_range* to ``medium_term``."""
        require_limit(limit, MAX_PAGE_LIMIT)
        require_offset(offset)
        if time_range is not None:
            require_choice([time_range], set(TimeRange), "time_range")
        response = await self._request(
            "GET",
            f"{ME_URL}/top/artists",
            params=query(limit=limit, offset=offset, time_range=time_range),
        )
        return decode(response, lambda body: map_page(WirePage[WireArtist].model_validate(body), map_artist, Artist))

    @guarded
    async def get_top_tracks(
        self,
        *,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
        time_range: TimeRange | None = None,
    ) -> Page[Track]:
        """GET /me/top/tracks."""
        require_limit(limit, MAX_PAGE_LIMIT)
        require_offset(offset)
        if time_range is not None:
            require_choice([time_range], set(TimeRange), "time_range")
        response = await self._request(
            "GET",
            f"{ME_URL}/top/tracks",
            params=query(limit=limit, offset=offset, time_range=time_range),
        )
        return decode(response, lambda body: map_page(WirePage[WireTrack].model_validate(body), map_track, Track))
