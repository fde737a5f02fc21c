"""Error values returned, never raised, across the public boundary."""

import json
from typing import Any, Self

import httpx
from pydantic import BaseModel, ConfigDict

from spotify_catalog.constants import TRANSPORT_ERROR_STATUS


class AuthError(BaseModel):
    """Authentication or token refresh failed."""

    model_config = ConfigDict(frozen=True)

    error: str
    error_description: str | None = None

    @classmethod
    def from_response(cls, response: httpx.Response) -> Self:
        """Parse the token endpoint's ``{"error", "error_description"}`` body."""
        body = _json_or_none(response)
        if isinstance(body, dict):
            error = body.get("error")
            if isinstance(error, str):
                description = body.get("error_description")
                return cls(error=error, error_description=description if isinstance(description, str) else None)
            if isinstance(error, dict) and "message" in error:
                return cls(error=f"http_{response.status_code}", error_description=str(error["message"]))
        return cls(error=f"http_{response.status_code}", error_description=_excerpt(response))


class ApiError(BaseModel):
    """The Web API rejected a request, or no response could be obtained.

    ``status`` is the HTTP status code, or ``TRANSPORT_ERROR_STATUS`` when the
    request never produced a response.
    """

    model_config = ConfigDict(frozen=True)

    status: int
    message: str
    reason: str | None = None
    retry_after: float | None = None

    @property
    def is_transport_error(self) -> bool:
        return self.status == TRANSPORT_ERROR_STATUS

    @classmethod
    def from_response(cls, response: httpx.Response) -> Self:
        """Parse an error envelope, nested under ``error`` or flat."""
        retry_after = _retry_after(response)
        body = _json_or_none(response)
        if isinstance(body, dict):
            envelope: Any = body.get("error", body)
            if isinstance(envelope, dict) and "message" in envelope:
                reason = envelope.get("reason")
                return cls(
                    status=_status(envelope.get("status"), response.status_code),
                    message=str(envelope["message"]),
                    reason=reason if isinstance(reason, str) else None,
                    retry_after=retry_after,
                )
            if isinstance(envelope, str):
                # Token-endpoint style: {"error": "code", "error_description": "..."}
                return cls(
                    status=response.status_code,
                    message=str(body.get("error_description") or envelope),
                    reason=envelope,
                    retry_after=retry_after,
                )
        return cls(status=response.status_code, message=_excerpt(response), retry_after=retry_after)

    @classmethod
    def from_transport_error(cls, exc: httpx.RequestError) -> Self:
        return cls(status=TRANSPORT_ERROR_STATUS, message=f"Transport error: {exc!r}")

    @classmethod
    def undecodable(cls, status: int, exc: Exception) -> Self:
        return cls(status=status, message=f"Could not decode response body: {exc}")


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None


def _status(value: object, fallback: int) -> int:
    """Envelope status, or *fallback* when it is missing or not numeric."""
    if isinstance(value, bool):
        return fallback
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isdigit():
        return int(value)
    return fallback


def _excerpt(response: httpx.Response) -> str:
    if response.text:
        return response.text[:200]
    return f"HTTP {response.status_code}"


def _retry_after(response: httpx.Response) -> float | None:
    header = response.headers.get("Retry-After")
    if header is None:
        return None
    try:
        return float(header)
    except ValueError:
        return None
