"""Podcast episode lookups."""

from collections.abc import Sequence

from pydantic import TypeAdapter

from spotify_catalog.constants import EPISODES_URL, MAX_EPISODE_IDS
from spotify_catalog.core import BaseClient, decode, guarded, query, segment
from spotify_catalog.mapping import map_batch, map_episode
from spotify_catalog.models.domain import Episode
from spotify_catalog.models.wire import WireEpisode
from spotify_catalog.validation import require_ids, require_non_empty

_EPISODES = TypeAdapter(list[WireEpisode | None])


class EpisodesMixin(BaseClient):
    @guarded
    async def get_episode(self, episode_id: str, *, market: str | None = None) -> Episode:
        """GET /episodes/{id}. Without *market* the user's country is used when the token has one."""
        require_non_empty(episode_id, "episode_id")
        response = await self._request("GET", f"{EPISODES_URL}/{segment(episode_id)}", params=query(market=market))
        return decode(response, lambda body: map_episode(WireEpisode.model_validate(body)))

    @guarded
    async def get_episodes(self, episode_ids: Sequence[str], *, market: str | None = None) -> list[Episode | None]:
        """GET /episodes?ids=... (max 50)."""
        require_ids(episode_ids, MAX_EPISODE_IDS, "episode IDs")
        response = await self._request("GET", EPISODES_URL, params=query(ids=episode_ids, market=market))
        return decode(response, lambda body: map_batch(map_episode, _EPISODES.validate_python(body["episodes"])))
