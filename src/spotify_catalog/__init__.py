"""Typed async client for the Spotify Web API catalog."""

from spotify_catalog.auth import (
    AuthFlow,
    AuthorizationCodeFlow,
    AuthorizationCodeWithPKCEFlow,
    ClientCredentialsFlow,
    ConsolePrompt,
    Token,
)
from spotify_catalog.client import SpotifyClient
from spotify_catalog.errors import ApiError, AuthError
from spotify_catalog.exceptions import (
    AuthenticationFailedError,
    DecodeError,
    InvalidUsageError,
    SpotifyClientError,
)
from spotify_catalog.retry import call_with_retry
from spotify_catalog.settings import SpotifySettings, get_settings

__all__ = [
    "ApiError",
    "AuthError",
    "AuthFlow",
    "AuthenticationFailedError",
    "AuthorizationCodeFlow",
    "AuthorizationCodeWithPKCEFlow",
    "ClientCredentialsFlow",
    "ConsolePrompt",
    "DecodeError",
    "InvalidUsageError",
    "SpotifyClient",
    "SpotifyClientError",
    "SpotifySettings",
    "Token",
    "call_with_retry",
    "get_settings",
]
