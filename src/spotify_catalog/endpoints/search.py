"""Catalog search across one or more object types."""

import functools
from collections.abc import Callable, Sequence
from typing import Any

from spotify_catalog.constants import DEFAULT_LIMIT, MAX_PAGE_LIMIT, MAX_SEARCH_OFFSET, SEARCH_URL
from spotify_catalog.core import BaseClient, decode, guarded, query
from spotify_catalog.errors import ApiError
from spotify_catalog.mapping import map_album, map_artist, map_episode, map_page, map_show, map_track
from spotify_catalog.models.domain import Album, Artist, Episode, Page, Show, Track
from spotify_catalog.models.enums import SEARCHABLE_TYPES, ObjectType
from spotify_catalog.models.wire import WireAlbum, WireArtist, WireEpisode, WirePage, WireShow, WireTrack
from spotify_catalog.validation import require_choice, require_limit, require_non_empty, require_offset

# object type -> (wire page model, item mapper, domain item type)
_SEARCH_DECODERS: dict[ObjectType, tuple[Any, Callable[[Any], Any], type[Any]]] = {
    ObjectType.ALBUM: (WirePage[WireAlbum], map_album, Album),
    ObjectType.ARTIST: (WirePage[WireArtist], map_artist, Artist),
    ObjectType.EPISODE: (WirePage[WireEpisode], map_episode, Episode),
    ObjectType.SHOW: (WirePage[WireShow], map_show, Show),
    ObjectType.TRACK: (WirePage[WireTrack], map_track, Track),
}


class SearchMixin(BaseClient):
    async def search(
        self,
        q: str,
        object_types: Sequence[ObjectType | str],
        *,
        market: str | None = None,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
        include_external: str | None = None,
    ) -> dict[ObjectType, Page[Any]] | ApiError:
        """GET /search once per object type, run concurrently.

        All requests run to completion; if any failed, the first failure in the
        order of *object_types* is returned. Duplicate types are searched once.
        """
        require_non_empty(q, "q")
        require_non_empty(object_types, "object_types")
        require_choice(object_types, SEARCHABLE_TYPES, "search types")
        require_limit(limit, MAX_PAGE_LIMIT)
        require_offset(offset, MAX_SEARCH_OFFSET)

        types = list(dict.fromkeys(ObjectType(t) for t in object_types))
        params = query(q=q, market=market, limit=limit, offset=offset, include_external=include_external)
        pages = await self._fan_out([functools.partial(self._search_one, object_type, params) for object_type in types])
        if isinstance(pages, ApiError):
            return pages
        return dict(zip(types, pages, strict=True))

    @guarded
    async def _search_one(self, object_type: ObjectType, params: dict[str, str]) -> Page[Any]:
        response = await self._request("GET", SEARCH_URL, params={**params, "type": object_type.value})
        wire_page, mapper, item_type = _SEARCH_DECODERS[object_type]
        return decode(
            response,
            lambda body: map_page(wire_page.model_validate(body[object_type.search_key]), mapper, item_type),
        )
