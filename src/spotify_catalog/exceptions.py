"""Spotify client exceptions.

Remote failures are returned as values (see :mod:`spotify_catalog.errors`).
The exceptions here signal problems in the caller's own program: invalid
arguments, a client that could not authenticate, or a payload the mapper
cannot decode.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from spotify_catalog.errors import AuthError


class SpotifyClientError(Exception):
    """Base exception for Spotify client errors."""


class InvalidUsageError(SpotifyClientError, ValueError):
    """A local precondition was violated; no request was sent."""


class AuthenticationFailedError(SpotifyClientError):
    """The auth flow failed while constructing a client."""

    def __init__(self, auth_error: "AuthError") -> None:
        self.auth_error = auth_error
        detail = auth_error.error_description or auth_error.error
        super().__init__(f"An error occurred while authenticating: '{detail}'")


class DecodeError(SpotifyClientError, ValueError):
    """A wire value could not be decoded into its domain representation."""

    def __init__(self, kind: str, value: object) -> None:
        self.kind = kind
        self.value = value
        super().__init__(f"Unrecognized {kind}: {value!r}")
