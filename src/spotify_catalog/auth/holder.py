"""Process-local holder for the current token."""

import asyncio
import logging

from spotify_catalog.auth.flows import AuthFlow
from spotify_catalog.auth.models import Token
from spotify_catalog.errors import AuthError

logger = logging.getLogger(__name__)


class TokenHolder:
    """Owns the current :class:`Token` and the flow that can refresh it.

    The token is only replaced by :meth:`refresh`, which swaps the reference
    in a single assignment, so readers see either the old or the new token.
    """

    def __init__(self, flow: AuthFlow, token: Token) -> None:
        self._flow = flow
        self._token = token
        self._lock = asyncio.Lock()

    @property
    def flow(self) -> AuthFlow:
        return self._flow

    @property
    def token(self) -> Token:
        return self._token

    def authorization_header(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._token.access_token}"}

    async def refresh(self) -> Token | AuthError:
        """Ask the flow for a new token; keep the current one on failure."""
        async with self._lock:
            result = await self._flow.request_refreshed_token(self._token.refresh_token or "")
            if isinstance(result, AuthError):
                logger.warning("Token refresh failed: %s", result.error)
                return result
            self._token = result
            logger.info("Token refreshed, expires at %s", result.expires_at.isoformat())
            return result

    async def ensure_valid(self, buffer_seconds: int) -> Token | AuthError:
        """Return the current token, refreshing first if it expires within *buffer_seconds*."""
        if not self._token.is_expired(buffer_seconds):
            return self._token
        return await self.refresh()
