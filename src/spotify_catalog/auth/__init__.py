"""OAuth2 flows and token state."""

from spotify_catalog.auth.flows import (
    AuthFlow,
    AuthorizationCodeFlow,
    AuthorizationCodeWithPKCEFlow,
    ClientCredentialsFlow,
)
from spotify_catalog.auth.holder import TokenHolder
from spotify_catalog.auth.models import Token, TokenResponse
from spotify_catalog.auth.prompt import AuthorizationPrompt, ConsolePrompt

__all__ = [
    "AuthFlow",
    "AuthorizationCodeFlow",
    "AuthorizationCodeWithPKCEFlow",
    "AuthorizationPrompt",
    "ClientCredentialsFlow",
    "ConsolePrompt",
    "Token",
    "TokenHolder",
    "TokenResponse",
]
