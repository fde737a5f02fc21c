"""Browse categories, editorial playlists, new releases and recommendations."""

from collections.abc import Mapping, Sequence

from spotify_catalog.constants import (
    BROWSE_URL,
    DEFAULT_LIMIT,
    MAX_PAGE_LIMIT,
    MAX_RECOMMENDATION_SEEDS,
    MAX_RECOMMENDATIONS_LIMIT,
    RECOMMENDATIONS_URL,
)
from spotify_catalog.core import BaseClient, decode, guarded, query, segment
from spotify_catalog.exceptions import InvalidUsageError
from spotify_catalog.mapping import map_album, map_featured_playlists, map_page, map_playlist, map_recommendations
from spotify_catalog.models.common import Category
from spotify_catalog.models.domain import Album, FeaturedPlaylists, Page, Playlist, Recommendations
from spotify_catalog.models.wire import WireAlbum, WireFeaturedPlaylists, WirePage, WirePlaylist, WireRecommendations
from spotify_catalog.validation import require_limit, require_non_empty, require_offset

TUNABLE_ATTRIBUTE_PREFIXES = ("min_", "max_", "target_")


def _same(category: Category) -> Category:
    return category


class BrowseMixin(BaseClient):
    @guarded
    async def get_category(
        self,
        category_id: str,
        *,
        country: str | None = None,
        locale: str | None = None,
    ) -> Category:
        """GET /browse/categories/{id}."""
        require_non_empty(category_id, "category_id")
        response = await self._request(
            "GET",
            f"{BROWSE_URL}/categories/{segment(category_id)}",
            params=query(country=country, locale=locale),
        )
        return decode(response, Category.model_validate)

    @guarded
    async def get_categories(
        self,
        *,
        country: str | None = None,
        locale: str | None = None,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
    ) -> Page[Category]:
        """GET /browse/categories."""
        require_limit(limit, MAX_PAGE_LIMIT)
        require_offset(offset)
        response = await self._request(
            "GET",
            f"{BROWSE_URL}/categories",
            params=query(country=country, locale=locale, limit=limit, offset=offset),
        )
        return decode(
            response,
            lambda body: map_page(WirePage[Category].model_validate(body["categories"]), _same, Category),
        )

    @guarded
    async def get_category_playlists(
        self,
        category_id: str,
        *,
        country: str | None = None,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
    ) -> Page[Playlist]:
        """GET /browse/categories/{id}/playlists."""
        require_non_empty(category_id, "category_id")
        require_limit(limit, MAX_PAGE_LIMIT)
        require_offset(offset)
        response = await self._request(
            "GET",
            f"{BROWSE_URL}/categories/{segment(category_id)}/playlists",
            params=query(country=country, limit=limit, offset=offset),
        )
        return decode(
            response,
            lambda body: map_page(WirePage[WirePlaylist].model_validate(body["playlists"]), map_playlist, Playlist),
        )

    @guarded
    async def get_featured_playlists(
        self,
        *,
        locale: str | None = None,
        country: str | None = None,
        timestamp: str | None = None,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
    ) -> FeaturedPlaylists:
        """GET /browse/featured-playlists. *timestamp* is ISO 8601 (``yyyy-MM-ddTHH:mm:ss``)."""
        require_limit(limit, MAX_PAGE_LIMIT)
        require_offset(offset)
        response = await self._request(
            "GET",
            f"{BROWSE_URL}/featured-playlists",
            params=query(locale=locale, country=country, timestamp=timestamp, limit=limit, offset=offset),
        )
        return decode(response, lambda body: map_featured_playlists(WireFeaturedPlaylists.model_validate(body)))

    @guarded
    async def get_new_releases(
        self,
        *,
        country: str | None = None,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
    ) -> Page[Album]:
        """GET /browse/new-releases."""
        require_limit(limit, MAX_PAGE_LIMIT)
        require_offset(offset)
        response = await self._request(
            "GET",
            f"{BROWSE_URL}/new-releases",
            params=query(country=country, limit=limit, offset=offset),
        )
        return decode(
            response,
            lambda body: map_page(WirePage[WireAlbum].model_validate(body["albums"]), map_album, Album),
        )

    @guarded
    async def get_recommendations(
        self,
        *,
        limit: int = DEFAULT_LIMIT,
        market: str | None = None,
        attributes: Mapping[str, float | int | str] | None = None,
        seed_artists: Sequence[str] = (),
        seed_genres: Sequence[str] = (),
        seed_tracks: Sequence[str] = (),
    ) -> Recommendations:
        """GET /recommendations.

        Between one and five seeds in total across artists, genres and tracks.
        *attributes* are tunable track attributes such as ``min_energy`` or
        ``target_tempo``; every key must start with ``min_``, ``max_`` or
        ``target_``.
        """
        require_limit(limit, MAX_RECOMMENDATIONS_LIMIT)
        seeds = len(seed_artists) + len(seed_genres) + len(seed_tracks)
        if not 1 <= seeds <= MAX_RECOMMENDATION_SEEDS:
            raise InvalidUsageError(
                f"Between 1 and {MAX_RECOMMENDATION_SEEDS} seed artists, genres and tracks are required, got {seeds}"
            )
        attributes = attributes or {}
        bad_keys = sorted(key for key in attributes if not key.startswith(TUNABLE_ATTRIBUTE_PREFIXES))
        if bad_keys:
            raise InvalidUsageError(f"Tunable attributes must start with min_, max_ or target_: {', '.join(bad_keys)}")

        response = await self._request(
            "GET",
            RECOMMENDATIONS_URL,
            params=query(
                limit=limit,
                market=market,
                seed_artists=seed_artists,
                seed_genres=seed_genres,
                seed_tracks=seed_tracks,
                **attributes,
            ),
        )
        return decode(response, lambda body: map_recommendations(WireRecommendations.model_validate(body)))
