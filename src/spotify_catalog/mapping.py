"""Entity mapper: wire models to domain entities.

Every ``map_*`` function is pure. Enumerated fields are decoded through
``from_wire`` and raise :class:`~spotify_catalog.exceptions.DecodeError` on
unknown values. Batch lookups answer unknown IDs with ``null``; callers use
:func:`map_nullable` / :func:`map_batch` so those slots stay ``None``.
"""

from collections.abc import Callable, Sequence
from typing import TypeVar

from spotify_catalog.models.common import TracksRef
from spotify_catalog.models.domain import (
    Album,
    Artist,
    AudioAnalysis,
    AudioFeatures,
    Copyright,
    CursorPage,
    Episode,
    FeaturedPlaylists,
    LinkedTrack,
    Page,
    Playlist,
    PlaylistTrack,
    Recommendations,
    RecommendationSeed,
    ResumePoint,
    SavedAlbum,
    SavedShow,
    SavedTrack,
    Section,
    Segment,
    Show,
    SpotifyURI,
    Track,
    User,
)
from spotify_catalog.models.enums import AlbumType, CopyrightType, ObjectType, ReleaseDatePrecision
from spotify_catalog.models.wire import (
    WireAlbum,
    WireArtist,
    WireAudioAnalysis,
    WireAudioFeatures,
    WireCopyright,
    WireCursorPage,
    WireEpisode,
    WireFeaturedPlaylists,
    WireLinkedTrack,
    WirePage,
    WirePlaylist,
    WirePlaylistTrack,
    WireRecommendations,
    WireRecommendationSeed,
    WireResumePoint,
    WireSavedAlbum,
    WireSavedShow,
    WireSavedTrack,
    WireSection,
    WireSegment,
    WireShow,
    WireTrack,
    WireUser,
)

W = TypeVar("W")
D = TypeVar("D")


# ---------------------------------------------------------------------------
# Generic helpers
# ---------------------------------------------------------------------------


def map_nullable(mapper: Callable[[W], D], wire: W | None) -> D | None:
    """Apply *mapper* unless *wire* is the API's ``null`` placeholder."""
    if wire is None:
        return None
    return mapper(wire)


def map_batch(mapper: Callable[[W], D], items: Sequence[W | None]) -> list[D | None]:
    """Map a batch lookup result, keeping one slot per requested ID."""
    return [map_nullable(mapper, item) for item in items]


def map_page(page: WirePage[W], mapper: Callable[[W], D], item_type: type[D]) -> Page[D]:
    """Map every item of *page* into a ``Page[item_type]``; envelope metadata is copied unchanged."""
    items = None if page.items is None else [mapper(item) for item in page.items]
    return Page[item_type](  # type: ignore[valid-type]
        href=page.href,
        items=items,
        limit=page.limit,
        next=page.next,
        offset=page.offset,
        previous=page.previous,
        total=page.total,
    )


def map_cursor_page(page: WireCursorPage[W], mapper: Callable[[W], D], item_type: type[D]) -> CursorPage[D]:
    items = None if page.items is None else [mapper(item) for item in page.items]
    return CursorPage[item_type](  # type: ignore[valid-type]
        href=page.href,
        items=items,
        limit=page.limit,
        next=page.next,
        cursors=page.cursors,
        total=page.total,
    )


# ---------------------------------------------------------------------------
# Artists & albums
# ---------------------------------------------------------------------------


def map_artist(wire: WireArtist) -> Artist:
    return Artist(
        external_urls=wire.external_urls,
        followers=wire.followers,
        genres=wire.genres,
        href=wire.href,
        id=wire.id,
        images=wire.images,
        name=wire.name,
        popularity=wire.popularity,
        object_type=ObjectType.from_wire(wire.type),
        uri=SpotifyURI.parse(wire.uri),
    )


def map_copyright(wire: WireCopyright) -> Copyright:
    return Copyright(text=wire.text, copyright_type=CopyrightType.from_wire(wire.type))


def map_album(wire: WireAlbum) -> Album:
    return Album(
        album_group=wire.album_group,
        album_type=AlbumType.from_wire(wire.album_type),
        artists=[map_artist(artist) for artist in wire.artists],
        available_markets=wire.available_markets,
        copyrights=None if wire.copyrights is None else [map_copyright(c) for c in wire.copyrights],
        external_ids=wire.external_ids,
        external_urls=wire.external_urls,
        genres=wire.genres,
        href=wire.href,
        id=wire.id,
        images=wire.images,
        label=wire.label,
        name=wire.name,
        popularity=wire.popularity,
        release_date=wire.release_date,
        release_date_precision=ReleaseDatePrecision.from_wire(wire.release_date_precision),
        restrictions=wire.restrictions,
        total_tracks=wire.total_tracks,
        tracks=None if wire.tracks is None else map_page(wire.tracks, map_track, Track),
        object_type=ObjectType.from_wire(wire.type),
        uri=SpotifyURI.parse(wire.uri),
    )


def map_saved_album(wire: WireSavedAlbum) -> SavedAlbum:
    return SavedAlbum(added_at=wire.added_at, album=map_album(wire.album))


# ---------------------------------------------------------------------------
# Tracks
# ---------------------------------------------------------------------------


def map_linked_track(wire: WireLinkedTrack) -> LinkedTrack:
    return LinkedTrack(
        external_urls=wire.external_urls,
        href=wire.href,
        id=wire.id,
        object_type=ObjectType.from_wire(wire.type),
        uri=SpotifyURI.parse(wire.uri),
    )


def map_track(wire: WireTrack) -> Track:
    return Track(
        album=map_nullable(map_album, wire.album),
        artists=[map_artist(artist) for artist in wire.artists],
        available_markets=wire.available_markets,
        disc_number=wire.disc_number,
        duration_ms=wire.duration_ms,
        explicit=wire.explicit,
        external_ids=wire.external_ids,
        external_urls=wire.external_urls,
        href=wire.href,
        id=wire.id,
        is_playable=wire.is_playable,
        linked_from=map_nullable(map_linked_track, wire.linked_from),
        restrictions=wire.restrictions,
        name=wire.name,
        popularity=wire.popularity,
        preview_url=wire.preview_url,
        track_number=wire.track_number,
        object_type=ObjectType.from_wire(wire.type),
        uri=SpotifyURI.parse(wire.uri),
        is_local=wire.is_local,
    )


def map_saved_track(wire: WireSavedTrack) -> SavedTrack:
    return SavedTrack(added_at=wire.added_at, track=map_track(wire.track))


def map_audio_features(wire: WireAudioFeatures) -> AudioFeatures:
    return AudioFeatures(
        acousticness=wire.acousticness,
        analysis_url=wire.analysis_url,
        danceability=wire.danceability,
        duration_ms=wire.duration_ms,
        energy=wire.energy,
        id=wire.id,
        instrumentalness=wire.instrumentalness,
        key=wire.key,
        liveness=wire.liveness,
        loudness=wire.loudness,
        mode=wire.mode,
        speechiness=wire.speechiness,
        tempo=wire.tempo,
        time_signature=wire.time_signature,
        track_href=wire.track_href,
        object_type=wire.type,
        uri=SpotifyURI.parse(wire.uri),
        valence=wire.valence,
    )


def map_section(wire: WireSection) -> Section:
    return Section(**wire.model_dump())


def map_segment(wire: WireSegment) -> Segment:
    return Segment(**wire.model_dump())


def map_audio_analysis(wire: WireAudioAnalysis) -> AudioAnalysis:
    return AudioAnalysis(
        bars=wire.bars,
        beats=wire.beats,
        sections=[map_section(section) for section in wire.sections],
        segments=[map_segment(segment) for segment in wire.segments],
        tatums=wire.tatums,
    )


def map_recommendation_seed(wire: WireRecommendationSeed) -> RecommendationSeed:
    return RecommendationSeed(
        after_filtering_size=wire.afterFilteringSize,
        after_relinking_size=wire.afterRelinkingSize,
        href=wire.href,
        id=wire.id,
        initial_pool_size=wire.initialPoolSize,
        seed_type=wire.type,
    )


def map_recommendations(wire: WireRecommendations) -> Recommendations:
    return Recommendations(
        seeds=[map_recommendation_seed(seed) for seed in wire.seeds],
        tracks=[map_track(track) for track in wire.tracks],
    )


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


def map_user(wire: WireUser) -> User:
    return User(
        country=wire.country,
        display_name=wire.display_name,
        email=wire.email,
        external_urls=wire.external_urls,
        followers=wire.followers,
        href=wire.href,
        id=wire.id,
        images=wire.images,
        product=wire.product,
        object_type=ObjectType.from_wire(wire.type),
        uri=SpotifyURI.parse(wire.uri),
    )


# ---------------------------------------------------------------------------
# Shows & episodes
# ---------------------------------------------------------------------------


def map_resume_point(wire: WireResumePoint) -> ResumePoint:
    return ResumePoint(fully_played=wire.fully_played, resume_position_ms=wire.resume_position_ms)


def map_episode(wire: WireEpisode) -> Episode:
    return Episode(
        audio_preview_url=wire.audio_preview_url,
        description=wire.description,
        duration_ms=wire.duration_ms,
        explicit=wire.explicit,
        external_urls=wire.external_urls,
        href=wire.href,
        id=wire.id,
        images=wire.images,
        is_externally_hosted=wire.is_externally_hosted,
        is_playable=wire.is_playable,
        languages=wire.languages,
        name=wire.name,
        release_date=wire.release_date,
        release_date_precision=ReleaseDatePrecision.from_wire(wire.release_date_precision),
        resume_point=map_nullable(map_resume_point, wire.resume_point),
        show=map_nullable(map_show, wire.show),
        object_type=ObjectType.from_wire(wire.type),
        uri=SpotifyURI.parse(wire.uri),
    )


def map_show(wire: WireShow) -> Show:
    return Show(
        available_markets=wire.available_markets,
        copyrights=[map_copyright(c) for c in wire.copyrights],
        description=wire.description,
        explicit=wire.explicit,
        episodes=None if wire.episodes is None else map_page(wire.episodes, map_episode, Episode),
        external_urls=wire.external_urls,
        href=wire.href,
        id=wire.id,
        images=wire.images,
        is_externally_hosted=wire.is_externally_hosted,
        languages=wire.languages,
        media_type=wire.media_type,
        name=wire.name,
        publisher=wire.publisher,
        total_episodes=wire.total_episodes,
        object_type=ObjectType.from_wire(wire.type),
        uri=SpotifyURI.parse(wire.uri),
    )


def map_saved_show(wire: WireSavedShow) -> SavedShow:
    return SavedShow(added_at=wire.added_at, show=map_show(wire.show))


# ---------------------------------------------------------------------------
# Playlists
# ---------------------------------------------------------------------------


def map_playlist_track(wire: WirePlaylistTrack) -> PlaylistTrack:
    track: Track | Episode | None
    if isinstance(wire.track, WireEpisode):
        track = map_episode(wire.track)
    else:
        track = map_nullable(map_track, wire.track)
    return PlaylistTrack(
        added_at=wire.added_at,
        added_by=map_nullable(map_user, wire.added_by),
        is_local=wire.is_local,
        track=track,
    )


def map_playlist(wire: WirePlaylist) -> Playlist:
    tracks: Page[PlaylistTrack] | TracksRef
    if isinstance(wire.tracks, TracksRef):
        tracks = wire.tracks
    else:
        tracks = map_page(wire.tracks, map_playlist_track, PlaylistTrack)
    return Playlist(
        collaborative=wire.collaborative,
        description=wire.description,
        external_urls=wire.external_urls,
        followers=wire.followers,
        href=wire.href,
        id=wire.id,
        images=wire.images,
        name=wire.name,
        owner=map_user(wire.owner),
        public=wire.public,
        snapshot_id=wire.snapshot_id,
        tracks=tracks,
        object_type=ObjectType.from_wire(wire.type),
        uri=SpotifyURI.parse(wire.uri),
    )


def map_featured_playlists(wire: WireFeaturedPlaylists) -> FeaturedPlaylists:
    return FeaturedPlaylists(message=wire.message, playlists=map_page(wire.playlists, map_playlist, Playlist))
