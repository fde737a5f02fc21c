"""Following artists, users and playlists."""

from collections.abc import Sequence

from pydantic import TypeAdapter

from spotify_catalog.constants import (
    DEFAULT_LIMIT,
    MAX_FOLLOW_IDS,
    MAX_PAGE_LIMIT,
    MAX_PLAYLIST_FOLLOWER_IDS,
    ME_URL,
    PLAYLISTS_URL,
)
from spotify_catalog.core import NO_CONTENT, BaseClient, decode, guarded, json_fields, query, segment
from spotify_catalog.mapping import map_artist, map_cursor_page
from spotify_catalog.models.domain import Artist, CursorPage
from spotify_catalog.models.enums import FollowType
from spotify_catalog.models.wire import WireArtist, WireCursorPage
from spotify_catalog.validation import require_choice, require_ids, require_limit, require_non_empty

_FLAGS = TypeAdapter(list[bool])


class FollowMixin(BaseClient):
    @guarded
    async def is_following(self, follow_type: FollowType, ids: Sequence[str]) -> list[bool]:
        """GET /me/following/contains. One flag per ID, in request order."""
        require_choice([follow_type], set(FollowType), "follow type")
        require_ids(ids, MAX_FOLLOW_IDS)
        response = await self._request(
            "GET",
            f"{ME_URL}/following/contains",
            params=query(type=follow_type, ids=ids),
        )
        return decode(response, _FLAGS.validate_python)

    @guarded
    async def are_users_following_playlist(self, playlist_id: str, user_ids: Sequence[str]) -> list[bool]:
        """GET /playlists/{id}/followers/contains (max 5 users)."""
        require_non_empty(playlist_id, "playlist_id")
        require_ids(user_ids, MAX_PLAYLIST_FOLLOWER_IDS, "user IDs")
        response = await self._request(
            "GET",
            f"{PLAYLISTS_URL}/{segment(playlist_id)}/followers/contains",
            params=query(ids=user_ids),
        )
        return decode(response, _FLAGS.validate_python)

    @guarded
    async def follow(self, follow_type: FollowType, ids: Sequence[str]) -> None:
        """PUT /me/following."""
        require_choice([follow_type], set(FollowType), "follow type")
        require_ids(ids, MAX_FOLLOW_IDS)
        await self._request(
            "PUT",
            f"{ME_URL}/following",
            success=NO_CONTENT,
            params=query(type=follow_type, ids=ids),
        )

    @guarded
    async def unfollow(self, follow_type: FollowType, ids: Sequence[str]) -> None:
        """DELETE /me/following."""
        require_choice([follow_type], set(FollowType), "follow type")
        require_ids(ids, MAX_FOLLOW_IDS)
        await self._request(
            "DELETE",
            f"{ME_URL}/following",
            success=NO_CONTENT,
            params=query(type=follow_type, ids=ids),
        )

    @guarded
    async def follow_playlist(self, playlist_id: str, *, public: bool | None = None) -> None:
        """PUT /playlists/{id}/followers. Playlists are followed publicly unless *public* is False."""
        require_non_empty(playlist_id, "playlist_id")
        await self._request(
            "PUT",
            f"{PLAYLISTS_URL}/{segment(playlist_id)}/followers",
            json_body=json_fields(public=public),
        )

    @guarded
    async def unfollow_playlist(self, playlist_id: str) -> None:
        """DELETE /playlists/{id}/followers."""
        require_non_empty(playlist_id, "playlist_id")
        await self._request("DELETE", f"{PLAYLISTS_URL}/{segment(playlist_id)}/followers")

    @guarded
    async def get_followed_artists(self, *, limit: int = DEFAULT_LIMIT, after: str | None = None) -> CursorPage[Artist]:
        """GET /me/following?type=artist. Pass ``cursors.after`` of the previous page to continue."""
        require_limit(limit, MAX_PAGE_LIMIT)
        response = await self._request(
            "GET",
            f"{ME_URL}/following",
            params=query(type=FollowType.ARTIST, limit=limit, after=after),
        )
        return decode(
            response,
            lambda body: map_cursor_page(
                WireCursorPage[WireArtist].model_validate(body["artists"]), map_artist, Artist
            ),
        )
