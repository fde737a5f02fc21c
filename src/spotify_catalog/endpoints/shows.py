"""Podcast show lookups."""

from collections.abc import Sequence

from pydantic import TypeAdapter

from spotify_catalog.constants import DEFAULT_LIMIT, MAX_PAGE_LIMIT, MAX_SHOW_IDS, SHOWS_URL
from spotify_catalog.core import BaseClient, decode, guarded, query, segment
from spotify_catalog.mapping import map_batch, map_episode, map_page, map_show
from spotify_catalog.models.domain import Episode, Page, Show
from spotify_catalog.models.wire import WireEpisode, WirePage, WireShow
from spotify_catalog.validation import require_ids, require_limit, require_non_empty, require_offset

_SHOWS = TypeAdapter(list[WireShow | None])


class ShowsMixin(BaseClient):
    @guarded
    async def get_show(self, show_id: str, *, market: str | None = None) -> Show:
        """GET /shows/{id}."""
        require_non_empty(show_id, "show_id")
        response = await self._request("GET", f"{SHOWS_URL}/{segment(show_id)}", params=query(market=market))
        return decode(response, lambda body: map_show(WireShow.model_validate(body)))

    @guarded
    async def get_shows(self, show_ids: Sequence[str], *, market: str | None = None) -> list[Show | None]:
        """GET /shows?ids=... (max 50). Items are simplified shows."""
        require_ids(show_ids, MAX_SHOW_IDS, "show IDs")
        response = await self._request("GET", SHOWS_URL, params=query(ids=show_ids, market=market))
        return decode(response, lambda body: map_batch(map_show, _SHOWS.validate_python(body["shows"])))

    @guarded
    async def get_show_episodes(
        self,
        show_id: str,
        *,
        market: str | None = None,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
    ) -> Page[Episode]:
        """GET /shows/{id}/episodes."""
        require_non_empty(show_id, "show_id")
        require_limit(limit, MAX_PAGE_LIMIT)
        require_offset(offset)
        response = await self._request(
            "GET",
            f"{SHOWS_URL}/{segment(show_id)}/episodes",
            params=query(market=market, limit=limit, offset=offset),
        )
        return decode(
            response,
            lambda body: map_page(WirePage[WireEpisode].model_validate(body), map_episode, Episode),
        )
