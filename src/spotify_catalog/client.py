"""The public Spotify Web API client."""

import logging
from typing import Self

from spotify_catalog.auth.flows import AuthFlow
from spotify_catalog.auth.holder import TokenHolder
from spotify_catalog.auth.models import Token
from spotify_catalog.auth.prompt import AuthorizationPrompt
from spotify_catalog.constants import (
    DEFAULT_CONCURRENCY_LIMIT,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_TOKEN_EXPIRY_BUFFER_SECONDS,
)
from spotify_catalog.endpoints import (
    AlbumsMixin,
    ArtistsMixin,
    BrowseMixin,
    EpisodesMixin,
    FollowMixin,
    LibraryMixin,
    PersonalizationMixin,
    PlaylistsMixin,
    SearchMixin,
    ShowsMixin,
    TracksMixin,
    UsersMixin,
)
from spotify_catalog.errors import AuthError
from spotify_catalog.exceptions import AuthenticationFailedError
from spotify_catalog.settings import SpotifySettings, build_auth_flow

logger = logging.getLogger(__name__)


class SpotifyClient(
    AlbumsMixin,
    ArtistsMixin,
    BrowseMixin,
    EpisodesMixin,
    FollowMixin,
    LibraryMixin,
    PersonalizationMixin,
    PlaylistsMixin,
    SearchMixin,
    ShowsMixin,
    TracksMixin,
    UsersMixin,
):
    """Async Spotify Web API client.

    Build one with :meth:`create` (runs the auth flow), :meth:`from_token`
    (installs a token obtained elsewhere) or :meth:`from_settings`. Every
    operation returns its result or an :class:`~spotify_catalog.errors.ApiError`;
    nothing is retried and the token is refreshed only when the caller asks
    (:meth:`refresh_token`, :meth:`ensure_valid_token`).

    Usage::

        client = await SpotifyClient.create(ClientCredentialsFlow(client_id, client_secret))
        album = await client.get_album("0sNOF9WDwhWunNAHPD3Baj", market="US")
        if isinstance(album, ApiError):
            ...
    """

    @classmethod
    async def create(
        cls,
        flow: AuthFlow,
        *,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
        concurrency_limit: int = DEFAULT_CONCURRENCY_LIMIT,
        token_expiry_buffer_seconds: int = DEFAULT_TOKEN_EXPIRY_BUFFER_SECONDS,
    ) -> Self:
        """Authenticate with *flow*; raises ``AuthenticationFailedError`` if it fails."""
        result = await flow.authenticate()
        if isinstance(result, AuthError):
            logger.warning("Authentication failed: %s", result.error)
            raise AuthenticationFailedError(result)
        logger.info("Authenticated with %s", type(flow).__name__)
        return cls.from_token(
            flow,
            result,
            request_timeout=request_timeout,
            concurrency_limit=concurrency_limit,
            token_expiry_buffer_seconds=token_expiry_buffer_seconds,
        )

    @classmethod
    def from_token(
        cls,
        flow: AuthFlow,
        token: Token,
        *,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
        concurrency_limit: int = DEFAULT_CONCURRENCY_LIMIT,
        token_expiry_buffer_seconds: int = DEFAULT_TOKEN_EXPIRY_BUFFER_SECONDS,
    ) -> Self:
        return cls(
            TokenHolder(flow, token),
            request_timeout=request_timeout,
            concurrency_limit=concurrency_limit,
            token_expiry_buffer_seconds=token_expiry_buffer_seconds,
        )

    @classmethod
    async def from_settings(cls, settings: SpotifySettings, *, prompt: AuthorizationPrompt | None = None) -> Self:
        return await cls.create(
            build_auth_flow(settings, prompt),
            request_timeout=settings.REQUEST_TIMEOUT_SECONDS,
            concurrency_limit=settings.CONCURRENCY_LIMIT,
            token_expiry_buffer_seconds=settings.TOKEN_EXPIRY_BUFFER_SECONDS,
        )

    @property
    def token(self) -> Token:
        return self._tokens.token

    async def refresh_token(self) -> Token | AuthError:
        """Replace the held token with a refreshed one; the old token is kept on failure."""
        return await self._tokens.refresh()

    async def ensure_valid_token(self) -> Token | AuthError:
        """Refresh only if the held token expires within the configured buffer."""
        return await self._tokens.ensure_valid(self._token_expiry_buffer_seconds)
