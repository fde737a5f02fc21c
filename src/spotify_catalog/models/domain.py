"""Domain entities produced by :mod:`spotify_catalog.mapping`.

Fields documented as full-only are ``None`` when the entity was mapped from
a simplified wire object; they are never filled with a stand-in value.
"""

from __future__ import annotations

from typing import Generic, Self, TypeVar

from pydantic import BaseModel, ConfigDict

from spotify_catalog.models.common import Cursor, Followers, Image, Restrictions, TimeInterval, TracksRef
from spotify_catalog.models.enums import AlbumType, CopyrightType, ObjectType, ReleaseDatePrecision

T = TypeVar("T")


class _Entity(BaseModel):
    model_config = ConfigDict(frozen=True)


class SpotifyURI(_Entity):
    """A ``spotify:<kind>:<id>`` resource identifier.

    Non-canonical URIs (local files, legacy user-scoped playlist URIs) keep
    ``kind`` and ``id`` as ``None`` and are still round-tripped through ``raw``.
    """

    raw: str
    kind: str | None = None
    id: str | None = None

    @classmethod
    def parse(cls, uri: str) -> Self:
        parts = uri.split(":")
        if len(parts) == 3 and parts[0] == "spotify" and parts[1] and parts[2]:
            return cls(raw=uri, kind=parts[1], id=parts[2])
        return cls(raw=uri)

    def __str__(self) -> str:
        return self.raw


# ---------------------------------------------------------------------------
# Paging
# ---------------------------------------------------------------------------


class Page(_Entity, Generic[T]):
    """One page of an offset-paged collection.

    ``items`` is ``None`` only when the API omitted the key, which is distinct
    from an empty page.
    """

    href: str
    items: list[T] | None = None
    limit: int
    next: str | None = None
    offset: int
    previous: str | None = None
    total: int


class CursorPage(_Entity, Generic[T]):
    """One page of a cursor-paged collection. Iterate forward with ``cursors.after``."""

    href: str
    items: list[T] | None = None
    limit: int | None = None
    next: str | None = None
    cursors: Cursor
    total: int | None = None


# ---------------------------------------------------------------------------
# Artists & albums
# ---------------------------------------------------------------------------


class Artist(_Entity):
    """Full-only: ``followers``, ``genres``, ``images``, ``popularity``."""

    external_urls: dict[str, str]
    followers: Followers | None = None
    genres: list[str] | None = None
    href: str
    id: str
    images: list[Image] | None = None
    name: str
    popularity: int | None = None
    object_type: ObjectType
    uri: SpotifyURI


class Copyright(_Entity):
    text: str
    copyright_type: CopyrightType


class Album(_Entity):
    """Full-only: ``copyrights``, ``external_ids``, ``genres``, ``label``, ``popularity``, ``tracks``."""

    album_group: str | None = None
    album_type: AlbumType
    artists: list[Artist]
    available_markets: list[str]
    copyrights: list[Copyright] | None = None
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
    release_date_precision: ReleaseDatePrecision
    restrictions: Restrictions | None = None
    total_tracks: int | None = None
    tracks: Page[Track] | None = None
    object_type: ObjectType
    uri: SpotifyURI


class SavedAlbum(_Entity):
    added_at: str
    album: Album


# ---------------------------------------------------------------------------
# Tracks
# ---------------------------------------------------------------------------


class LinkedTrack(_Entity):
    external_urls: dict[str, str]
    href: str
    id: str
    object_type: ObjectType
    uri: SpotifyURI


class Track(_Entity):
    """Full-only: ``album``, ``external_ids``, ``popularity``."""

    album: Album | None = None
    artists: list[Artist]
    available_markets: list[str]
    disc_number: int
    duration_ms: int
    explicit: bool
    external_ids: dict[str, str] | None = None
    external_urls: dict[str, str]
    href: str | None = None
    id: str | None = None
    is_playable: bool | None = None
    linked_from: LinkedTrack | None = None
    restrictions: Restrictions | None = None
    name: str
    popularity: int | None = None
    preview_url: str | None = None
    track_number: int
    object_type: ObjectType
    uri: SpotifyURI
    is_local: bool


class SavedTrack(_Entity):
    added_at: str
    track: Track


class AudioFeatures(_Entity):
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
    object_type: str
    uri: SpotifyURI
    valence: float


class Section(_Entity):
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


class Segment(_Entity):
    start: float
    duration: float
    confidence: float
    loudness_start: float
    loudness_max: float
    loudness_max_time: float
    loudness_end: float | None = None
    pitches: list[float]
    timbre: list[float]


class AudioAnalysis(_Entity):
    bars: list[TimeInterval]
    beats: list[TimeInterval]
    sections: list[Section]
    segments: list[Segment]
    tatums: list[TimeInterval]


class RecommendationSeed(_Entity):
    after_filtering_size: int
    after_relinking_size: int
    href: str | None = None
    id: str
    initial_pool_size: int
    seed_type: str


class Recommendations(_Entity):
    seeds: list[RecommendationSeed]
    tracks: list[Track]


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class User(_Entity):
    """Private fields (``country``, ``email``, ``product``) need the matching scopes."""

    country: str | None = None
    display_name: str | None = None
    email: str | None = None
    external_urls: dict[str, str]
    followers: Followers | None = None
    href: str
    id: str
    images: list[Image] | None = None
    product: str | None = None
    object_type: ObjectType
    uri: SpotifyURI


# ---------------------------------------------------------------------------
# Shows & episodes
# ---------------------------------------------------------------------------


class ResumePoint(_Entity):
    fully_played: bool
    resume_position_ms: int


class Episode(_Entity):
    """Full-only: ``show``."""

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
    release_date_precision: ReleaseDatePrecision
    resume_point: ResumePoint | None = None
    show: Show | None = None
    object_type: ObjectType
    uri: SpotifyURI


class Show(_Entity):
    """Full-only: ``episodes``."""

    available_markets: list[str]
    copyrights: list[Copyright]
    description: str
    explicit: bool
    episodes: Page[Episode] | None = None
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
    object_type: ObjectType
    uri: SpotifyURI


class SavedShow(_Entity):
    added_at: str
    show: Show


# ---------------------------------------------------------------------------
# Playlists
# ---------------------------------------------------------------------------


class PlaylistTrack(_Entity):
    """Playlist item. ``track`` is ``None`` when the item is unavailable."""

    added_at: str | None = None
    added_by: User | None = None
    is_local: bool
    track: Track | Episode | None = None


class Playlist(_Entity):
    """``tracks`` is a :class:`Page` on full playlists and a :class:`TracksRef` on simplified ones."""

    collaborative: bool
    description: str | None = None
    external_urls: dict[str, str]
    followers: Followers | None = None
    href: str
    id: str
    images: list[Image] | None = None
    name: str
    owner: User
    public: bool | None = None
    snapshot_id: str
    tracks: Page[PlaylistTrack] | TracksRef
    object_type: ObjectType
    uri: SpotifyURI


class FeaturedPlaylists(_Entity):
    message: str | None = None
    playlists: Page[Playlist]


for _model in (Album, SavedAlbum, Track, SavedTrack, Recommendations, Episode, Show, SavedShow, PlaylistTrack):
    _model.model_rebuild()
