"""Pydantic models matching Spotify's JSON structure field-for-field.

Fields that only the "full" variant of an object carries default to ``None``
so the simplified variants embedded in other objects parse with the same
model. No renaming or enum decoding happens here; see
:mod:`spotify_catalog.mapping` for the conversion to domain entities.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from spotify_catalog.models.common import Cursor, Followers, Image, Restrictions, TimeInterval, TracksRef

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Paging envelopes
# ---------------------------------------------------------------------------


class WirePage(BaseModel, Generic[T]):
    """Offset-based paging object. ``items`` stays ``None`` when omitted."""

    href: str
    items: list[T] | None = None
    limit: int
    next: str | None = None
    offset: int
    previous: str | None = None
    total: int


class WireCursorPage(BaseModel, Generic[T]):
    """Cursor-based paging object (forward only)."""

    href: str
    items: list[T] | None = None
    limit: int | None = None
    next: str | None = None
    cursors: Cursor
    total: int | None = None


# ---------------------------------------------------------------------------
# Artists
# ---------------------------------------------------------------------------


class WireArtist(BaseModel):
    """Artist object. Simplified artists omit followers, genres, images and popularity."""

    external_urls: dict[str, str]
    followers: Followers | None = None
    genres: list[str] | None = None
    href: str
    id: str
    images: list[Image] | None = None
    name: str
    popularity: int | None = None
    type: str
    uri: str


# ---------------------------------------------------------------------------
# Albums
# ---------------------------------------------------------------------------


class WireCopyright(BaseModel):
    text: str
    type: str


class WireAlbum(BaseModel):
    """Album object. Full albums add copyrights, external_ids, genres, label, popularity and tracks."""

    album_group: str | None = None
    album_type: str
    artists: list[WireArtist]
    available_markets: list[str] = Field(default_factory=list)
    copyrights: list[WireCopyright] | None = None
    external_ids: dict[str, str] | None = None
    external_urls: dict[str, str]
    genres: list[str] | None = None
    href: str
    id: str
    images: list[Image]
    label: str | None = None
    name: str
    popularity: int | None = None
    release_date: str
    release_date_precision: str
    restrictions: Restrictions | None = None
    total_tracks: int | None = None
    tracks: WirePage[WireTrack] | None = None
    type: str
    uri: str


class WireSavedAlbum(BaseModel):
    added_at: str
    album: WireAlbum


# ---------------------------------------------------------------------------
# Tracks
# ---------------------------------------------------------------------------


class WireLinkedTrack(BaseModel):
    """Original track referenced by a relinked track's ``linked_from``."""

    external_urls: dict[str, str]
    href: str
    id: str
    type: str
    uri: str


class WireTrack(BaseModel):
    """Track object. Simplified tracks omit album, external_ids and popularity.

    Local files carry ``null`` id and href.
    """

    album: WireAlbum | None = None
    artists: list[WireArtist]
    available_markets: list[str] = Field(default_factory=list)
    disc_number: int
    duration_ms: int
    explicit: bool
    external_ids: dict[str, str] | None = None
    external_urls: dict[str, str]
    href: str | None = None
    id: str | None = None
    is_playable: bool | None = None
    linked_from: WireLinkedTrack | None = None
    restrictions: Restrictions | None = None
    name: str
    popularity: int | None = None
    preview_url: str | None = None
    track_number: int
    type: str
    uri: str
    is_local: bool = False


class WireSavedTrack(BaseModel):
    added_at: str
    track: WireTrack


class WireAudioFeatures(BaseModel):
    acousticness: float
    analysis_url: str
    danceability: float
    duration_ms: int
    energy: float
    id: str
    instrumentalness: float
    key: int
    liveness: float
    loudness: float
    mode: int
    speechiness: float
    tempo: float
    time_signature: int
    track_href: str
    type: str
    uri: str
    valence: float


class WireSection(BaseModel):
    start: float
    duration: float
    confidence: float
    loudness: float
    tempo: float
    tempo_confidence: float
    key: int
    key_confidence: float
    mode: int
    mode_confidence: float
    time_signature: int
    time_signature_confidence: float


class WireSegment(BaseModel):
    start: float
    duration: float
    confidence: float
    loudness_start: float
    loudness_max: float
    loudness_max_time: float
    loudness_end: float | None = None
    pitches: list[float]
    timbre: list[float]


class WireAudioAnalysis(BaseModel):
    bars: list[TimeInterval]
    beats: list[TimeInterval]
    sections: list[WireSection]
    segments: list[WireSegment]
    tatums: list[TimeInterval]


# ---------------------------------------------------------------------------
# Recommendations
# ---------------------------------------------------------------------------


class WireRecommendationSeed(BaseModel):
    """Recommendation seed. The only camelCase object in the Web API."""

    afterFilteringSize: int
    afterRelinkingSize: int
    href: str | None = None
    id: str
    initialPoolSize: int
    type: str


class WireRecommendations(BaseModel):
    seeds: list[WireRecommendationSeed]
    tracks: list[WireTrack]


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class WireUser(BaseModel):
    """Public or private user object. Private fields need the matching scopes."""

    country: str | None = None
    display_name: str | None = None
    email: str | None = None
    external_urls: dict[str, str]
    followers: Followers | None = None
    href: str
    id: str
    images: list[Image] | None = None
    product: str | None = None
    type: str
    uri: str


# ---------------------------------------------------------------------------
# Shows & episodes
# ---------------------------------------------------------------------------


class WireResumePoint(BaseModel):
    fully_played: bool
    resume_position_ms: int


class WireEpisode(BaseModel):
    """Episode object. Simplified episodes omit show."""

    audio_preview_url: str | None = None
    description: str
    duration_ms: int
    explicit: bool
    external_urls: dict[str, str]
    href: str
    id: str
    images: list[Image]
    is_externally_hosted: bool
    is_playable: bool | None = None
    languages: list[str]
    name: str
    release_date: str
    release_date_precision: str
    resume_point: WireResumePoint | None = None
    show: WireShow | None = None
    type: str
    uri: str


class WireShow(BaseModel):
    """Show object. Simplified shows omit episodes."""

    available_markets: list[str] = Field(default_factory=list)
    copyrights: list[WireCopyright]
    description: str
    explicit: bool
    episodes: WirePage[WireEpisode] | None = None
    external_urls: dict[str, str]
    href: str
    id: str
    images: list[Image]
    is_externally_hosted: bool | None = None
    languages: list[str]
    media_type: str
    name: str
    publisher: str
    total_episodes: int | None = None
    type: str
    uri: str


class WireSavedShow(BaseModel):
    added_at: str
    show: WireShow


# ---------------------------------------------------------------------------
# Playlists
# ---------------------------------------------------------------------------


class WirePlaylistTrack(BaseModel):
    """Item of a playlist. ``track`` is ``null`` when the item is unavailable."""

    added_at: str | None = None
    added_by: WireUser | None = None
    is_local: bool = False
    track: WireTrack | WireEpisode | None = None


class WirePlaylist(BaseModel):
    """Playlist object. Simplified playlists reference their tracks by href and total only."""

    collaborative: bool
    description: str | None = None
    external_urls: dict[str, str]
    followers: Followers | None = None
    href: str
    id: str
    images: list[Image] | None = None
    name: str
    owner: WireUser
    public: bool | None = None
    snapshot_id: str
    tracks: WirePage[WirePlaylistTrack] | TracksRef
    type: str
    uri: str


# ---------------------------------------------------------------------------
# Response envelopes
# ---------------------------------------------------------------------------


class WireFeaturedPlaylists(BaseModel):
    message: str | None = None
    playlists: WirePage[WirePlaylist]


class WireSnapshot(BaseModel):
    """Response of playlist item mutations."""

    snapshot_id: str


for _model in (
    WireAlbum,
    WireSavedAlbum,
    WireTrack,
    WireSavedTrack,
    WireRecommendations,
    WireEpisode,
    WireShow,
    WireSavedShow,
    WirePlaylistTrack,
    WirePlaylist,
    WireFeaturedPlaylists,
):
    _model.model_rebuild()
