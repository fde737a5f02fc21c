"""Shared fixtures: a client holding a static token and wire payload builders."""

from collections.abc import Callable
from typing import Any

import pytest

from spotify_catalog.auth.flows import ClientCredentialsFlow
from spotify_catalog.auth.models import Token
from spotify_catalog.client import SpotifyClient

API = "https://api.spotify.com/v1"

Payload = dict[str, Any]


@pytest.fixture
def token() -> Token:
    return Token(access_token="test-token", token_type="Bearer", expires_in=3600)


@pytest.fixture
def client(token: Token) -> SpotifyClient:
    return SpotifyClient.from_token(ClientCredentialsFlow("test-client-id", "test-client-secret"), token)


@pytest.fixture
def make_artist() -> Callable[..., Payload]:
    """Simplified artist; pass ``full=True`` for the full representation."""

    def build(artist_id: str = "0OdUWJ0sBjDrqHygGUXeCF", name: str = "Band of Horses", full: bool = False) -> Payload:
        payload: Payload = {
            "external_urls": {"spotify": f"https://open.spotify.com/artist/{artist_id}"},
            "href": f"{API}/artists/{artist_id}",
            "id": artist_id,
            "name": name,
            "type": "artist",
            "uri": f"spotify:artist:{artist_id}",
        }
        if full:
            payload |= {
                "followers": {"href": None, "total": 1_200_000},
                "genres": ["indie folk", "indie rock"],
                "images": [{"url": "https://i.scdn.co/image/artist", "height": 640, "width": 640}],
                "popularity": 68,
            }
        return payload

    return build


@pytest.fixture
def make_track(make_artist: Callable[..., Payload]) -> Callable[..., Payload]:
    def build(
        track_id: str = "3n3Ppam7vgaVa1iaRUc9Lp",
        name: str = "Mr. Brightside",
        album: Payload | None = None,
    ) -> Payload:
        payload: Payload = {
            "artists": [make_artist()],
            "available_markets": ["US", "GB"],
            "disc_number": 1,
            "duration_ms": 222_075,
            "explicit": False,
            "external_urls": {"spotify": f"https://open.spotify.com/track/{track_id}"},
            "href": f"{API}/tracks/{track_id}",
            "id": track_id,
            "name": name,
            "preview_url": None,
            "track_number": 2,
            "type": "track",
            "uri": f"spotify:track:{track_id}",
            "is_local": False,
        }
        if album is not None:
            payload |= {"album": album, "external_ids": {"isrc": "USIR20400274"}, "popularity": 80}
        return payload

    return build


@pytest.fixture
def make_album(make_artist: Callable[..., Payload], make_track: Callable[..., Payload]) -> Callable[..., Payload]:
    """Simplified album; ``full=True`` adds copyrights, label, popularity and a page of tracks."""

    def build(album_id: str = "0sNOF9WDwhWunNAHPD3Baj", name: str = "She's So Unusual", full: bool = False) -> Payload:
        payload: Payload = {
            "album_type": "album",
            "artists": [make_artist()],
            "available_markets": ["US"],
            "external_urls": {"spotify": f"https://open.spotify.com/album/{album_id}"},
            "href": f"{API}/albums/{album_id}",
            "id": album_id,
            "images": [{"url": "https://i.scdn.co/image/album", "height": 300, "width": 300}],
            "name": name,
            "release_date": "1983",
            "release_date_precision": "year",
            "total_tracks": 1,
            "type": "album",
            "uri": f"spotify:album:{album_id}",
        }
        if full:
            payload |= {
                "copyrights": [{"text": "(P) 1983 Sony", "type": "P"}],
                "external_ids": {"upc": "074643825429"},
                "genres": [],
                "label": "Epic",
                "popularity": 62,
                "tracks": {
                    "href": f"{API}/albums/{album_id}/tracks?offset=0&limit=50",
                    "items": [make_track()],
                    "limit": 50,
                    "next": None,
                    "offset": 0,
                    "previous": None,
                    "total": 1,
                },
            }
        return payload

    return build


@pytest.fixture
def make_user() -> Callable[..., Payload]:
    def build(user_id: str = "smedjan") -> Payload:
        return {
            "display_name": "Smedjan",
            "external_urls": {"spotify": f"https://open.spotify.com/user/{user_id}"},
            "href": f"{API}/users/{user_id}",
            "id": user_id,
            "type": "user",
            "uri": f"spotify:user:{user_id}",
        }

    return build


@pytest.fixture
def make_episode() -> Callable[..., Payload]:
    def build(episode_id: str = "512ojhOuo1ktJprKbVcKyQ") -> Payload:
        return {
            "audio_preview_url": None,
            "description": "A Spotify podcast sharing fresh insights.",
            "duration_ms": 1_502_795,
            "explicit": False,
            "external_urls": {"spotify": f"https://open.spotify.com/episode/{episode_id}"},
            "href": f"{API}/episodes/{episode_id}",
            "id": episode_id,
            "images": [],
            "is_externally_hosted": False,
            "is_playable": True,
            "languages": ["en"],
            "name": "Following the Money",
            "release_date": "2020-03-05",
            "release_date_precision": "day",
            "type": "episode",
            "uri": f"spotify:episode:{episode_id}",
        }

    return build


@pytest.fixture
def make_show() -> Callable[..., Payload]:
    def build(show_id: str = "38bS44xjbVVZ3No3ByF1dJ") -> Payload:
        return {
            "available_markets": ["US"],
            "copyrights": [],
            "description": "Candid conversations.",
            "explicit": False,
            "external_urls": {"spotify": f"https://open.spotify.com/show/{show_id}"},
            "href": f"{API}/shows/{show_id}",
            "id": show_id,
            "images": [],
            "is_externally_hosted": False,
            "languages": ["en"],
            "media_type": "audio",
            "name": "Vetenskapsradion Historia",
            "publisher": "Sveriges Radio",
            "total_episodes": 500,
            "type": "show",
            "uri": f"spotify:show:{show_id}",
        }

    return build


@pytest.fixture
def make_playlist(make_user: Callable[..., Payload]) -> Callable[..., Payload]:
    """Simplified playlist; pass *items* to get a full playlist with a track page."""

    def build(playlist_id: str = "3cEYpjA9oz9GiPac4AsH4n", items: list[Payload] | None = None) -> Payload:
        tracks: Payload = {"href": f"{API}/playlists/{playlist_id}/tracks", "total": 0 if items is None else len(items)}
        if items is not None:
            tracks = make_page(f"{API}/playlists/{playlist_id}/tracks", items)
        return {
            "collaborative": False,
            "description": "A playlist for testing.",
            "external_urls": {"spotify": f"https://open.spotify.com/playlist/{playlist_id}"},
            "href": f"{API}/playlists/{playlist_id}",
            "id": playlist_id,
            "images": [],
            "name": "Spotify Web API Testing playlist",
            "owner": make_user(),
            "public": True,
            "snapshot_id": "MTgsZWFmNmZiNTIzYTg4ODM0OGQzZWQzOGI4NTdkNTJlMjU0OWFkYTUxMA==",
            "tracks": tracks,
            "type": "playlist",
            "uri": f"spotify:playlist:{playlist_id}",
        }

    return build


def make_page(href: str, items: list[Any], *, limit: int = 20, offset: int = 0, total: int | None = None) -> Payload:
    return {
        "href": href,
        "items": items,
        "limit": limit,
        "next": None,
        "offset": offset,
        "previous": None,
        "total": len(items) if total is None else total,
    }


@pytest.fixture
def page() -> Callable[..., Payload]:
    return make_page
