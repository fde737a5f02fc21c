"""Tests for album endpoints, including batch and boundary behaviour."""

import httpx
import pytest
import respx

from spotify_catalog.client import SpotifyClient
from spotify_catalog.constants import ALBUMS_URL, MAX_ALBUM_IDS
from spotify_catalog.errors import ApiError
from spotify_catalog.exceptions import InvalidUsageError
from spotify_catalog.models.domain import Album, Page, Track
from spotify_catalog.models.enums import AlbumType, ObjectType, ReleaseDatePrecision

ALBUM_ID = "0sNOF9WDwhWunNAHPD3Baj"


@respx.mock
async def test_get_album_success(client: SpotifyClient, make_album) -> None:
    """A 200 album body maps to a domain Album with the requested id."""
    route = respx.get(f"{ALBUMS_URL}/{ALBUM_ID}").mock(
        return_value=httpx.Response(200, json=make_album(ALBUM_ID, full=True))
    )

    result = await client.get_album(ALBUM_ID, market="US")

    assert isinstance(result, Album)
    assert result.id == ALBUM_ID
    assert result.album_type is AlbumType.ALBUM
    assert result.release_date_precision is ReleaseDatePrecision.YEAR
    assert result.object_type is ObjectType.ALBUM
    assert result.uri.id == ALBUM_ID
    assert result.label == "Epic"
    assert isinstance(result.tracks, Page)
    assert isinstance(result.tracks.items[0], Track)
    assert route.calls[0].request.url.params["market"] == "US"


@respx.mock
async def test_get_album_bad_request(client: SpotifyClient) -> None:
    """A 400 yields an ApiError carrying the stub's status and message."""
    respx.get(f"{ALBUMS_URL}/{ALBUM_ID}").mock(
        return_value=httpx.Response(400, json={"error": {"status": 400, "message": "invalid id"}})
    )

    result = await client.get_album(ALBUM_ID, market="US")

    assert result == ApiError(status=400, message="invalid id")


@respx.mock
async def test_get_album_is_idempotent(client: SpotifyClient, make_album) -> None:
    """Two identical reads against unchanged state are structurally equal."""
    respx.get(f"{ALBUMS_URL}/{ALBUM_ID}").mock(return_value=httpx.Response(200, json=make_album(full=True)))

    first = await client.get_album(ALBUM_ID)
    second = await client.get_album(ALBUM_ID)

    assert first == second


@respx.mock
async def test_get_albums_keeps_unknown_positions(client: SpotifyClient, make_album) -> None:
    """Unknown IDs stay as None in their slot, in request order."""
    ids = ["album-a", "unknown", "album-c"]
    route = respx.get(ALBUMS_URL).mock(
        return_value=httpx.Response(200, json={"albums": [make_album("album-a"), None, make_album("album-c")]})
    )

    result = await client.get_albums(ids)

    assert isinstance(result, list)
    assert len(result) == 3
    assert result[0] is not None and result[0].id == "album-a"
    assert result[1] is None
    assert result[2] is not None and result[2].id == "album-c"
    assert route.calls[0].request.url.params["ids"] == "album-a,unknown,album-c"


@respx.mock
async def test_get_albums_accepts_maximum_ids(client: SpotifyClient, make_album) -> None:
    """Exactly the maximum number of IDs passes the local check."""
    ids = [f"album-{i}" for i in range(MAX_ALBUM_IDS)]
    route = respx.get(ALBUMS_URL).mock(
        return_value=httpx.Response(200, json={"albums": [make_album(i) for i in ids]})
    )

    result = await client.get_albums(ids)

    assert isinstance(result, list)
    assert len(result) == MAX_ALBUM_IDS
    assert route.call_count == 1


@respx.mock
async def test_get_albums_rejects_too_many_ids(client: SpotifyClient) -> None:
    """One ID over the maximum fails locally without a request."""
    route = respx.get(ALBUMS_URL).mock(return_value=httpx.Response(200, json={"albums": []}))

    with pytest.raises(InvalidUsageError, match="At most 20"):
        await client.get_albums([f"album-{i}" for i in range(MAX_ALBUM_IDS + 1)])
    assert route.call_count == 0


async def test_get_albums_rejects_empty_ids(client: SpotifyClient) -> None:
    with pytest.raises(InvalidUsageError):
        await client.get_albums([])


@respx.mock
async def test_get_album_tracks_page(client: SpotifyClient, make_track, page) -> None:
    """Album tracks come back as a page; limit and offset are always sent."""
    route = respx.get(f"{ALBUMS_URL}/{ALBUM_ID}/tracks").mock(
        return_value=httpx.Response(200, json=page(f"{ALBUMS_URL}/{ALBUM_ID}/tracks", [make_track()], total=12))
    )

    result = await client.get_album_tracks(ALBUM_ID)

    assert isinstance(result, Page)
    assert result.total == 12
    assert result.items is not None and result.items[0].album is None
    params = route.calls[0].request.url.params
    assert params["limit"] == "20"
    assert params["offset"] == "0"


@pytest.mark.parametrize("limit", [0, 51])
async def test_get_album_tracks_rejects_limit(client: SpotifyClient, limit: int) -> None:
    with pytest.raises(InvalidUsageError, match="Limit"):
        await client.get_album_tracks(ALBUM_ID, limit=limit)
