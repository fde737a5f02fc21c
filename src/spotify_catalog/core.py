"""Request pipeline shared by every endpoint binding.

Each public operation is wrapped in :func:`guarded`, validates its arguments
locally, dispatches exactly one request through :meth:`BaseClient._request`
(or several through :meth:`BaseClient._fan_out`) and decodes the body with
:func:`decode`. Everything that can go wrong after validation comes back as
an :class:`~spotify_catalog.errors.ApiError` value.
"""

import asyncio
import enum
import functools
import json
import logging
from collections.abc import Awaitable, Callable, Collection, Sequence
from typing import Any, ParamSpec, TypeVar
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from spotify_catalog.auth.holder import TokenHolder
from spotify_catalog.constants import (
    DEFAULT_CONCURRENCY_LIMIT,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_TOKEN_EXPIRY_BUFFER_SECONDS,
)
from spotify_catalog.errors import ApiError
from spotify_catalog.exceptions import DecodeError

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")

OK = frozenset({200})
CREATED = frozenset({201})
ACCEPTED = frozenset({202})
NO_CONTENT = frozenset({204})


class UndecodableResponseError(Exception):
    """A success response whose body does not match the expected shape.

    Raised by :func:`decode` and turned into an ``ApiError`` by :func:`guarded`.
    """

    def __init__(self, status: int, cause: Exception) -> None:
        self.status = status
        self.cause = cause
        super().__init__(f"HTTP {status}: {cause}")


# ---------------------------------------------------------------------------
# Boundary helpers
# ---------------------------------------------------------------------------


def guarded(operation: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R | ApiError]]:
    """Turn transport, status and decode failures of *operation* into ``ApiError`` values.

    ``InvalidUsageError`` is left to propagate: it is raised before anything
    is sent and signals a bug in the caller.
    """

    @functools.wraps(operation)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R | ApiError:
        try:
            return await operation(*args, **kwargs)
        except httpx.HTTPStatusError as exc:
            return ApiError.from_response(exc.response)
        except httpx.RequestError as exc:
            logger.warning("Spotify request failed: %r", exc)
            return ApiError.from_transport_error(exc)
        except UndecodableResponseError as exc:
            logger.warning("Spotify returned an undecodable body (HTTP %d): %s", exc.status, exc.cause)
            return ApiError.undecodable(exc.status, exc.cause)

    return wrapper


def decode(response: httpx.Response, parse: Callable[[Any], R]) -> R:
    """Apply *parse* to the JSON body of a success response."""
    try:
        return parse(response.json())
    except (ValidationError, DecodeError, json.JSONDecodeError, KeyError, TypeError) as exc:
        raise UndecodableResponseError(response.status_code, exc) from exc


def _render(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, enum.Enum):
        return str(value.value)
    return str(value)


def query(**params: object) -> dict[str, str]:
    """Encode optional query parameters.

    ``None``, empty strings and empty sequences are left out entirely;
    sequences are comma-joined.
    """
    rendered: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, Sequence) and not isinstance(value, str):
            text = ",".join(_render(item) for item in value)
        else:
            text = _render(value)
        if text:
            rendered[key] = text
    return rendered


def json_fields(**fields: object) -> dict[str, Any]:
    """JSON request body with unset (``None``) fields left out."""
    return {key: value for key, value in fields.items() if value is not None}


def segment(value: str) -> str:
    """Percent-encode *value* for use as a single URL path segment."""
    return quote(value, safe="")


# ---------------------------------------------------------------------------
# Client core
# ---------------------------------------------------------------------------


class BaseClient:
    """Authenticated request dispatch against the Web API.

    Holds the token for the life of the client; see
    :class:`~spotify_catalog.client.SpotifyClient` for construction.
    """

    def __init__(
        self,
        tokens: TokenHolder,
        *,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
        concurrency_limit: int = DEFAULT_CONCURRENCY_LIMIT,
        token_expiry_buffer_seconds: int = DEFAULT_TOKEN_EXPIRY_BUFFER_SECONDS,
    ) -> None:
        self._tokens = tokens
        self._request_timeout = request_timeout
        self._semaphore = asyncio.Semaphore(concurrency_limit)
        self._token_expiry_buffer_seconds = token_expiry_buffer_seconds

    async def _request(
        self,
        method: str,
        url: str,
        *,
        success: Collection[int] = OK,
        params: dict[str, str] | None = None,
        json_body: dict[str, Any] | list[Any] | None = None,
        content: bytes | str | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Send one request with the bearer token.

        Any status outside *success* raises ``httpx.HTTPStatusError``, which
        :func:`guarded` turns into an ``ApiError``.
        """
        request_headers = self._tokens.authorization_header()
        if headers:
            request_headers.update(headers)

        logger.debug("Spotify %s %s params=%s", method, url, params, extra={"method": method, "url": url})
        async with self._semaphore:
            async with httpx.AsyncClient(timeout=self._request_timeout) as client:
                response = await client.request(
                    method,
                    url,
                    params=params,
                    json=json_body,
                    content=content,
                    headers=request_headers,
                )

        if response.status_code not in success:
            logger.warning(
                "Spotify %s %s returned HTTP %d",
                method,
                url,
                response.status_code,
                extra={"method": method, "url": url, "status": response.status_code},
            )
            raise httpx.HTTPStatusError(
                f"Unexpected status {response.status_code} for {method} {url}",
                request=response.request,
                response=response,
            )
        return response

    async def _fan_out(self, calls: Sequence[Callable[[], Awaitable[R | ApiError]]]) -> list[R] | ApiError:
        """Run guarded sub-operations concurrently and join them all.

        Concurrency is bounded by the client's semaphore in :meth:`_request`.
        Returns the first ``ApiError`` in call order, otherwise every result
        in call order.
        """
        logger.debug("Spotify fan-out of %d requests", len(calls))
        results = await asyncio.gather(*(call() for call in calls))
        values: list[R] = []
        for result in results:
            if isinstance(result, ApiError):
                return result
            values.append(result)
        return values
