"""Tests for playlist reads and write operations."""

import base64
import json

import httpx
import pytest
import respx

from spotify_catalog.client import SpotifyClient
from spotify_catalog.constants import ME_URL, PLAYLISTS_URL, USERS_URL
from spotify_catalog.errors import ApiError
from spotify_catalog.exceptions import InvalidUsageError
from spotify_catalog.models.common import Image, TracksRef
from spotify_catalog.models.domain import Episode, Page, Playlist, SpotifyURI, Track

PLAYLIST_ID = "3cEYpjA9oz9GiPac4AsH4n"
SNAPSHOT = {"snapshot_id": "JbtmHBDBAYu3/bt8BOXKjzKx3i0b6LCa/wVjyl6qQ2Yf6nFXkbmzuEa+ZI/U1yF+"}
TRACK_URIS = ["spotify:track:4iV5W9uYEdYUVa79Axb7Rh", "spotify:track:1301WleyT98MSxVHPZCA6M"]


@respx.mock
async def test_get_playlist_with_mixed_items(client: SpotifyClient, make_playlist, make_track, make_episode) -> None:
    """A full playlist maps track and episode items, and unavailable items to None."""
    items = [
        {"added_at": "2024-01-01T00:00:00Z", "is_local": False, "track": make_track()},
        {"added_at": "2024-01-02T00:00:00Z", "is_local": False, "track": make_episode()},
        {"added_at": None, "is_local": False, "track": None},
    ]
    respx.get(f"{PLAYLISTS_URL}/{PLAYLIST_ID}").mock(
        return_value=httpx.Response(200, json=make_playlist(items=items))
    )

    result = await client.get_playlist(PLAYLIST_ID)

    assert isinstance(result, Playlist)
    assert isinstance(result.tracks, Page)
    tracks = result.tracks.items
    assert tracks is not None
    assert isinstance(tracks[0].track, Track)
    assert isinstance(tracks[1].track, Episode)
    assert tracks[2].track is None


@respx.mock
async def test_get_current_user_playlists_simplified(client: SpotifyClient, make_playlist, page) -> None:
    """Simplified playlists keep their tracks reference."""
    route = respx.get(f"{ME_URL}/playlists").mock(
        return_value=httpx.Response(200, json=page(f"{ME_URL}/playlists", [make_playlist()]))
    )

    result = await client.get_current_user_playlists(limit=50, offset=100_000)

    assert isinstance(result, Page)
    assert result.items is not None
    assert isinstance(result.items[0].tracks, TracksRef)
    assert route.calls[0].request.url.params["offset"] == "100000"


async def test_get_user_playlists_rejects_offset(client: SpotifyClient) -> None:
    with pytest.raises(InvalidUsageError, match="Offset"):
        await client.get_user_playlists("smedjan", offset=100_001)


@respx.mock
async def test_get_playlist_tracks_limit_up_to_100(client: SpotifyClient, page) -> None:
    route = respx.get(f"{PLAYLISTS_URL}/{PLAYLIST_ID}/tracks").mock(
        return_value=httpx.Response(200, json=page(f"{PLAYLISTS_URL}/{PLAYLIST_ID}/tracks", [], limit=100))
    )

    result = await client.get_playlist_tracks(PLAYLIST_ID, fields="items(track(name))")

    assert isinstance(result, Page)
    assert result.items == []
    params = route.calls[0].request.url.params
    assert params["limit"] == "100"
    assert params["fields"] == "items(track(name))"

    with pytest.raises(InvalidUsageError):
        await client.get_playlist_tracks(PLAYLIST_ID, limit=101)


@respx.mock
async def test_create_playlist_posts_json(client: SpotifyClient, make_playlist) -> None:
    """Create sends only the given fields and expects 201."""
    route = respx.post(f"{USERS_URL}/smedjan/playlists").mock(
        return_value=httpx.Response(201, json=make_playlist(items=[]))
    )

    result = await client.create_playlist("smedjan", "New Playlist", public=False)

    assert isinstance(result, Playlist)
    assert json.loads(route.calls[0].request.content) == {"name": "New Playlist", "public": False}


@respx.mock
async def test_change_playlist_details(client: SpotifyClient) -> None:
    route = respx.put(f"{PLAYLISTS_URL}/{PLAYLIST_ID}").mock(return_value=httpx.Response(200))

    result = await client.change_playlist_details(PLAYLIST_ID, description="Updated")

    assert result is None
    assert json.loads(route.calls[0].request.content) == {"description": "Updated"}


async def test_change_playlist_details_requires_a_field(client: SpotifyClient) -> None:
    with pytest.raises(InvalidUsageError, match="At least one"):
        await client.change_playlist_details(PLAYLIST_ID)


@respx.mock
async def test_change_playlist_details_forbidden(client: SpotifyClient) -> None:
    """A rejected write returns the parsed error envelope."""
    respx.put(f"{PLAYLISTS_URL}/{PLAYLIST_ID}").mock(
        return_value=httpx.Response(403, json={"error": {"status": 403, "message": "You cannot edit this playlist"}})
    )

    result = await client.change_playlist_details(PLAYLIST_ID, name="Mine now")

    assert result == ApiError(status=403, message="You cannot edit this playlist")


@respx.mock
async def test_add_items_returns_snapshot(client: SpotifyClient) -> None:
    route = respx.post(f"{PLAYLISTS_URL}/{PLAYLIST_ID}/tracks").mock(return_value=httpx.Response(201, json=SNAPSHOT))

    uris = [SpotifyURI.parse(TRACK_URIS[0]), TRACK_URIS[1]]
    result = await client.add_items_to_playlist(PLAYLIST_ID, uris, position=0)

    assert result == SNAPSHOT["snapshot_id"]
    assert json.loads(route.calls[0].request.content) == {"uris": TRACK_URIS, "position": 0}


async def test_add_items_rejects_too_many_uris(client: SpotifyClient) -> None:
    with pytest.raises(InvalidUsageError, match="At most 100"):
        await client.add_items_to_playlist(PLAYLIST_ID, [TRACK_URIS[0]] * 101)


@respx.mock
async def test_remove_items_with_positions(client: SpotifyClient) -> None:
    """Positions are attached per URI and the snapshot is passed through."""
    route = respx.delete(f"{PLAYLISTS_URL}/{PLAYLIST_ID}/tracks").mock(return_value=httpx.Response(200, json=SNAPSHOT))

    result = await client.remove_playlist_items(PLAYLIST_ID, TRACK_URIS, positions=[[0], [3, 7]], snapshot_id="abc")

    assert result == SNAPSHOT["snapshot_id"]
    assert json.loads(route.calls[0].request.content) == {
        "tracks": [
            {"uri": TRACK_URIS[0], "positions": [0]},
            {"uri": TRACK_URIS[1], "positions": [3, 7]},
        ],
        "snapshot_id": "abc",
    }


async def test_remove_items_positions_must_align(client: SpotifyClient) -> None:
    with pytest.raises(InvalidUsageError, match="one positions list per URI"):
        await client.remove_playlist_items(PLAYLIST_ID, TRACK_URIS, positions=[[0]])


@respx.mock
async def test_reorder_items(client: SpotifyClient) -> None:
    route = respx.put(f"{PLAYLISTS_URL}/{PLAYLIST_ID}/tracks").mock(return_value=httpx.Response(200, json=SNAPSHOT))

    result = await client.reorder_playlist_items(PLAYLIST_ID, 1, 3, range_length=2)

    assert result == SNAPSHOT["snapshot_id"]
    assert json.loads(route.calls[0].request.content) == {"range_start": 1, "insert_before": 3, "range_length": 2}


@pytest.mark.parametrize(
    ("range_start", "insert_before", "range_length"),
    [(-1, 0, 1), (0, -1, 1), (0, 1, 0)],
)
async def test_reorder_items_preconditions(
    client: SpotifyClient, range_start: int, insert_before: int, range_length: int
) -> None:
    with pytest.raises(InvalidUsageError):
        await client.reorder_playlist_items(PLAYLIST_ID, range_start, insert_before, range_length=range_length)


@pytest.mark.parametrize("status", [200, 201])
@respx.mock
async def test_replace_items(client: SpotifyClient, status: int) -> None:
    """Replacing items accepts both 200 and 201."""
    route = respx.put(f"{PLAYLISTS_URL}/{PLAYLIST_ID}/tracks").mock(return_value=httpx.Response(status, json=SNAPSHOT))

    result = await client.replace_playlist_items(PLAYLIST_ID, TRACK_URIS)

    assert result is None
    assert json.loads(route.calls[0].request.content) == {"uris": TRACK_URIS}


@respx.mock
async def test_upload_cover_image_encodes_bytes(client: SpotifyClient) -> None:
    """Raw bytes are Base64-encoded and sent as image/jpeg; 202 is success."""
    route = respx.put(f"{PLAYLISTS_URL}/{PLAYLIST_ID}/images").mock(return_value=httpx.Response(202))
    image = b"\xff\xd8\xff\xe0fake-jpeg"

    result = await client.upload_custom_playlist_cover_image(PLAYLIST_ID, image)

    assert result is None
    request = route.calls[0].request
    assert request.headers["Content-Type"] == "image/jpeg"
    assert request.content == base64.b64encode(image)


@respx.mock
async def test_get_playlist_cover_image(client: SpotifyClient) -> None:
    respx.get(f"{PLAYLISTS_URL}/{PLAYLIST_ID}/images").mock(
        return_value=httpx.Response(200, json=[{"url": "https://mosaic.scdn.co/640/abc", "height": 640, "width": 640}])
    )

    result = await client.get_playlist_cover_image(PLAYLIST_ID)

    assert result == [Image(url="https://mosaic.scdn.co/640/abc", height=640, width=640)]
