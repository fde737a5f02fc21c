"""Endpoint bindings, one mixin per API family."""

from spotify_catalog.endpoints.albums import AlbumsMixin
from spotify_catalog.endpoints.artists import ArtistsMixin
from spotify_catalog.endpoints.browse import BrowseMixin
from spotify_catalog.endpoints.episodes import EpisodesMixin
from spotify_catalog.endpoints.follow import FollowMixin
from spotify_catalog.endpoints.library import LibraryMixin
from spotify_catalog.endpoints.personalization import PersonalizationMixin
from spotify_catalog.endpoints.playlists import PlaylistsMixin
from spotify_catalog.endpoints.search import SearchMixin
from spotify_catalog.endpoints.shows import ShowsMixin
from spotify_catalog.endpoints.tracks import TracksMixin
from spotify_catalog.endpoints.users import UsersMixin

__all__ = [
    "AlbumsMixin",
    "ArtistsMixin",
    "BrowseMixin",
    "EpisodesMixin",
    "FollowMixin",
    "LibraryMixin",
    "PersonalizationMixin",
    "PlaylistsMixin",
    "SearchMixin",
    "ShowsMixin",
    "TracksMixin",
    "UsersMixin",
]
