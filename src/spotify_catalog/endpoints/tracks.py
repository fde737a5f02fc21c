"""Track lookups and audio analysis."""

from collections.abc import Sequence

from pydantic import TypeAdapter

from spotify_catalog.constants import (
    AUDIO_ANALYSIS_URL,
    AUDIO_FEATURES_URL,
    MAX_AUDIO_FEATURES_IDS,
    MAX_TRACK_IDS,
    TRACKS_URL,
)
from spotify_catalog.core import BaseClient, decode, guarded, query, segment
from spotify_catalog.mapping import map_audio_analysis, map_audio_features, map_batch, map_track
from spotify_catalog.models.domain import AudioAnalysis, AudioFeatures, Track
from spotify_catalog.models.wire import WireAudioAnalysis, WireAudioFeatures, WireTrack
from spotify_catalog.validation import require_ids, require_non_empty

_TRACKS = TypeAdapter(list[WireTrack | None])
_AUDIO_FEATURES = TypeAdapter(list[WireAudioFeatures | None])


class TracksMixin(BaseClient):
    @guarded
    async def get_track(self, track_id: str, *, market: str | None = None) -> Track:
        """GET /tracks/{id}."""
        require_non_empty(track_id, "track_id")
        response = await self._request("GET", f"{TRACKS_URL}/{segment(track_id)}", params=query(market=market))
        return decode(response, lambda body: map_track(WireTrack.model_validate(body)))

    @guarded
    async def get_tracks(self, track_ids: Sequence[str], *, market: str | None = None) -> list[Track | None]:
        """GET /tracks?ids=... (max 50)."""
        require_ids(track_ids, MAX_TRACK_IDS, "track IDs")
        response = await self._request("GET", TRACKS_URL, params=query(ids=track_ids, market=market))
        return decode(response, lambda body: map_batch(map_track, _TRACKS.validate_python(body["tracks"])))

    @guarded
    async def get_track_audio_features(self, track_id: str) -> AudioFeatures:
        """GET /audio-features/{id}."""
        require_non_empty(track_id, "track_id")
        response = await self._request("GET", f"{AUDIO_FEATURES_URL}/{segment(track_id)}")
        return decode(response, lambda body: map_audio_features(WireAudioFeatures.model_validate(body)))

    @guarded
    async def get_tracks_audio_features(self, track_ids: Sequence[str]) -> list[AudioFeatures | None]:
        """GET /audio-features?ids=... (max 100)."""
        require_ids(track_ids, MAX_AUDIO_FEATURES_IDS, "track IDs")
        response = await self._request("GET", AUDIO_FEATURES_URL, params=query(ids=track_ids))
        return decode(
            response,
            lambda body: map_batch(map_audio_features, _AUDIO_FEATURES.validate_python(body["audio_features"])),
        )

    @guarded
    async def get_track_audio_analysis(self, track_id: str) -> AudioAnalysis:
        """GET /audio-analysis/{id}."""
        require_non_empty(track_id, "track_id")
        response = await self._request("GET", f"{AUDIO_ANALYSIS_URL}/{segment(track_id)}")
        return decode(response, lambda body: map_audio_analysis(WireAudioAnalysis.model_validate(body)))
