"""Tests for the request pipeline: parameter encoding, guard and dispatch."""

import httpx
import pytest
import respx

from spotify_catalog.client import SpotifyClient
from spotify_catalog.constants import ALBUMS_URL, TRANSPORT_ERROR_STATUS
from spotify_catalog.core import json_fields, query
from spotify_catalog.errors import ApiError
from spotify_catalog.exceptions import InvalidUsageError
from spotify_catalog.models.enums import IncludeGroup, TimeRange

ALBUM_ID = "0sNOF9WDwhWunNAHPD3Baj"


# ---------------------------------------------------------------------------
# Parameter encoding
# ---------------------------------------------------------------------------


def test_query_drops_unset_values() -> None:
    """None, empty strings and empty sequences are never sent."""
    assert query(market=None, fields="", ids=[], locale="sv_SE") == {"locale": "sv_SE"}


def test_query_renders_values() -> None:
    """Sequences are comma-joined, enums use their value and booleans are lowercase."""
    params = query(
        ids=["a", "b", "c"],
        include_groups=[IncludeGroup.ALBUM, IncludeGroup.APPEARS_ON],
        time_range=TimeRange.SHORT_TERM,
        public=False,
        limit=20,
        offset=0,
    )
    assert params == {
        "ids": "a,b,c",
        "include_groups": "album,appears_on",
        "time_range": "short_term",
        "public": "false",
        "limit": "20",
        "offset": "0",
    }


def test_json_fields_drops_none_only() -> None:
    assert json_fields(name="Mix", public=False, description=None) == {"name": "Mix", "public": False}


# ---------------------------------------------------------------------------
# Dispatch and guard
# ---------------------------------------------------------------------------


@respx.mock
async def test_request_sends_bearer_token(client: SpotifyClient, make_album) -> None:
    """Every request carries the held access token."""
    route = respx.get(f"{ALBUMS_URL}/{ALBUM_ID}").mock(return_value=httpx.Response(200, json=make_album()))

    await client.get_album(ALBUM_ID)

    assert route.calls[0].request.headers["Authorization"] == "Bearer test-token"
    assert "market" not in route.calls[0].request.url.params


@respx.mock
async def test_transport_failure_becomes_api_error(client: SpotifyClient) -> None:
    """Connection failures are returned as transport ApiErrors."""
    respx.get(f"{ALBUMS_URL}/{ALBUM_ID}").mock(side_effect=httpx.ConnectTimeout("timed out"))

    result = await client.get_album(ALBUM_ID)

    assert isinstance(result, ApiError)
    assert result.status == TRANSPORT_ERROR_STATUS
    assert result.is_transport_error


@pytest.mark.parametrize(
    "failure",
    [httpx.TooManyRedirects("Exceeded maximum allowed redirects."), httpx.DecodingError("incorrect header check")],
)
@respx.mock
async def test_request_error_becomes_api_error(client: SpotifyClient, failure: httpx.RequestError) -> None:
    """Every httpx request failure is returned, not only connection errors."""
    respx.get(f"{ALBUMS_URL}/{ALBUM_ID}").mock(side_effect=failure)

    result = await client.get_album(ALBUM_ID)

    assert isinstance(result, ApiError)
    assert result.is_transport_error


@respx.mock
async def test_corrupt_content_encoding_becomes_api_error(client: SpotifyClient) -> None:
    respx.get(f"{ALBUMS_URL}/{ALBUM_ID}").mock(
        return_value=httpx.Response(
            200, headers={"Content-Encoding": "gzip"}, stream=httpx.ByteStream(b"not gzip at all")
        )
    )

    result = await client.get_album(ALBUM_ID)

    assert isinstance(result, ApiError)
    assert result.is_transport_error


@respx.mock
async def test_malformed_error_envelope_becomes_api_error(client: SpotifyClient) -> None:
    """A null status in the error envelope falls back to the HTTP status."""
    respx.get(f"{ALBUMS_URL}/{ALBUM_ID}").mock(
        return_value=httpx.Response(502, json={"error": {"status": None, "message": "gateway"}})
    )

    result = await client.get_album(ALBUM_ID)

    assert result == ApiError(status=502, message="gateway")


@respx.mock
async def test_path_ids_are_percent_encoded(client: SpotifyClient, make_album) -> None:
    """An ID cannot add path segments or a query string."""
    route = respx.get(url__startswith=ALBUMS_URL).mock(return_value=httpx.Response(200, json=make_album()))

    await client.get_album("a/b?c")

    assert route.calls[0].request.url.raw_path == b"/v1/albums/a%2Fb%3Fc"


@respx.mock
async def test_undecodable_success_body_becomes_api_error(client: SpotifyClient) -> None:
    """A 200 whose body does not match the album shape is an ApiError with that status."""
    respx.get(f"{ALBUMS_URL}/{ALBUM_ID}").mock(return_value=httpx.Response(200, json={"id": ALBUM_ID}))

    result = await client.get_album(ALBUM_ID)

    assert isinstance(result, ApiError)
    assert result.status == 200
    assert result.message.startswith("Could not decode response body")


@respx.mock
async def test_non_json_success_body_becomes_api_error(client: SpotifyClient) -> None:
    respx.get(f"{ALBUMS_URL}/{ALBUM_ID}").mock(return_value=httpx.Response(200, text="<html>oops</html>"))

    result = await client.get_album(ALBUM_ID)

    assert isinstance(result, ApiError)
    assert result.status == 200


@respx.mock
async def test_unknown_enum_value_becomes_api_error(client: SpotifyClient, make_album) -> None:
    """An unrecognized enumerated value fails decoding instead of defaulting."""
    body = make_album()
    body["release_date_precision"] = "decade"
    respx.get(f"{ALBUMS_URL}/{ALBUM_ID}").mock(return_value=httpx.Response(200, json=body))

    result = await client.get_album(ALBUM_ID)

    assert isinstance(result, ApiError)
    assert "decade" in result.message


@respx.mock
async def test_unexpected_success_status_is_error(client: SpotifyClient) -> None:
    """A status outside the operation's success set is an ApiError even if 2xx."""
    respx.put("https://api.spotify.com/v1/me/following").mock(return_value=httpx.Response(200, json={}))

    result = await client.follow("artist", ["0OdUWJ0sBjDrqHygGUXeCF"])  # type: ignore[arg-type]

    assert isinstance(result, ApiError)
    assert result.status == 200


async def test_invalid_usage_propagates(client: SpotifyClient) -> None:
    """Precondition violations are raised, not returned."""
    with pytest.raises(InvalidUsageError, match="album_id"):
        await client.get_album("")
