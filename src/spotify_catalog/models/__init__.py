"""Wire models, domain entities and enumerations."""

from spotify_catalog.models.common import Category, Cursor, Followers, Image, Restrictions, TimeInterval, TracksRef
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
from spotify_catalog.models.enums import (
    AlbumType,
    CopyrightType,
    FollowType,
    IncludeGroup,
    ObjectType,
    ReleaseDatePrecision,
    TimeRange,
)

__all__ = [
    "Album",
    "AlbumType",
    "Artist",
    "AudioAnalysis",
    "AudioFeatures",
    "Category",
    "Copyright",
    "CopyrightType",
    "Cursor",
    "CursorPage",
    "Episode",
    "FeaturedPlaylists",
    "FollowType",
    "Followers",
    "Image",
    "IncludeGroup",
    "LinkedTrack",
    "ObjectType",
    "Page",
    "Playlist",
    "PlaylistTrack",
    "Recommendations",
    "RecommendationSeed",
    "ReleaseDatePrecision",
    "Restrictions",
    "ResumePoint",
    "SavedAlbum",
    "SavedShow",
    "SavedTrack",
    "Section",
    "Segment",
    "Show",
    "SpotifyURI",
    "TimeInterval",
    "TimeRange",
    "Track",
    "TracksRef",
    "User",
]
