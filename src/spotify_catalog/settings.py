"""Client configuration loaded from environment variables."""

import functools

from pydantic_settings import BaseSettings

from spotify_catalog.auth.flows import AuthFlow, AuthorizationCodeFlow, ClientCredentialsFlow
from spotify_catalog.auth.prompt import AuthorizationPrompt, ConsolePrompt
from spotify_catalog.constants import (
    DEFAULT_CONCURRENCY_LIMIT,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_TOKEN_EXPIRY_BUFFER_SECONDS,
)
from spotify_catalog.exceptions import InvalidUsageError

CLIENT_CREDENTIALS = "client_credentials"
AUTHORIZATION_CODE = "authorization_code"


class SpotifySettings(BaseSettings):
    """Spotify client configuration."""

    # Spotify credentials
    SPOTIFY_CLIENT_ID: str = ""
    SPOTIFY_CLIENT_SECRET: str = ""
    SPOTIFY_REDIRECT_URI: str = ""
    SPOTIFY_SCOPES: str = ""  # space-separated
    SPOTIFY_AUTH_FLOW: str = CLIENT_CREDENTIALS  # "client_credentials" or "authorization_code"

    # Requests
    REQUEST_TIMEOUT_SECONDS: float = DEFAULT_REQUEST_TIMEOUT
    CONCURRENCY_LIMIT: int = DEFAULT_CONCURRENCY_LIMIT
    TOKEN_EXPIRY_BUFFER_SECONDS: int = DEFAULT_TOKEN_EXPIRY_BUFFER_SECONDS

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"  # "json" or "text"

    model_config = {"env_prefix": ""}

    @property
    def scopes(self) -> tuple[str, ...]:
        return tuple(self.SPOTIFY_SCOPES.split())


@functools.lru_cache(maxsize=1)
def get_settings() -> SpotifySettings:
    """Return cached settings singleton."""
    return SpotifySettings()


def build_auth_flow(settings: SpotifySettings, prompt: AuthorizationPrompt | None = None) -> AuthFlow:
    """Build the auth flow selected by ``SPOTIFY_AUTH_FLOW``."""
    if not settings.SPOTIFY_CLIENT_ID or not settings.SPOTIFY_CLIENT_SECRET:
        raise InvalidUsageError("SPOTIFY_CLIENT_ID and SPOTIFY_CLIENT_SECRET must be set")

    if settings.SPOTIFY_AUTH_FLOW == CLIENT_CREDENTIALS:
        return ClientCredentialsFlow(
            client_id=settings.SPOTIFY_CLIENT_ID,
            client_secret=settings.SPOTIFY_CLIENT_SECRET,
            request_timeout=settings.REQUEST_TIMEOUT_SECONDS,
        )
    if settings.SPOTIFY_AUTH_FLOW == AUTHORIZATION_CODE:
        if not settings.SPOTIFY_REDIRECT_URI:
            raise InvalidUsageError("SPOTIFY_REDIRECT_URI must be set for the authorization code flow")
        return AuthorizationCodeFlow(
            client_id=settings.SPOTIFY_CLIENT_ID,
            client_secret=settings.SPOTIFY_CLIENT_SECRET,
            redirect_uri=settings.SPOTIFY_REDIRECT_URI,
            scopes=settings.scopes,
            prompt=prompt or ConsolePrompt(),
            request_timeout=settings.REQUEST_TIMEOUT_SECONDS,
        )
    raise InvalidUsageError(
        f"Unsupported SPOTIFY_AUTH_FLOW {settings.SPOTIFY_AUTH_FLOW!r}; "
        f"expected {CLIENT_CREDENTIALS!r} or {AUTHORIZATION_CODE!r}"
    )
