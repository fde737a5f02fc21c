"""Authorization flows: obtain and refresh access tokens from the accounts service.

Every flow reports failure as an :class:`~spotify_catalog.errors.AuthError`
value. Non-200 responses and transport failures are both normalized; no
``httpx`` exception escapes a flow.
"""

import abc
import base64
import json
import logging
from dataclasses import dataclass, field
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError

from spotify_catalog.auth.models import Token, TokenResponse
from spotify_catalog.auth.prompt import AuthorizationPrompt, ConsolePrompt
from spotify_catalog.auth.state import generate_state, verify_state
from spotify_catalog.constants import DEFAULT_REQUEST_TIMEOUT, SPOTIFY_AUTHORIZE_URL, SPOTIFY_TOKEN_URL
from spotify_catalog.errors import AuthError

logger = logging.getLogger(__name__)

CANNOT_REFRESH_ERROR = AuthError(
    error="Cannot refresh token",
    error_description="Cannot refresh token with client credentials flow",
)


def basic_auth_header(client_id: str, client_secret: str) -> dict[str, str]:
    """``Authorization: Basic base64(client_id:client_secret)``."""
    encoded = base64.b64encode(f"{client_id}:{client_secret}".encode()).decode("ascii")
    return {"Authorization": f"Basic {encoded}"}


async def request_token(
    data: dict[str, str],
    *,
    headers: dict[str, str] | None = None,
    timeout: float = DEFAULT_REQUEST_TIMEOUT,
    previous_refresh_token: str | None = None,
) -> Token | AuthError:
    """POST a form-encoded grant to the token endpoint."""
    grant_type = data.get("grant_type", "?")
    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.post(SPOTIFY_TOKEN_URL, data=data, headers=headers)
    except httpx.RequestError as exc:
        logger.warning("Token request (%s) failed: %r", grant_type, exc)
        return AuthError(error="transport_error", error_description=repr(exc))

    if response.status_code != 200:
        error = AuthError.from_response(response)
        logger.warning("Token request (%s) rejected: HTTP %d %s", grant_type, response.status_code, error.error)
        return error

    try:
        payload = TokenResponse.model_validate(response.json())
    except (ValidationError, json.JSONDecodeError) as exc:
        logger.warning("Token request (%s) returned an unreadable body", grant_type)
        return AuthError(error="invalid_token_response", error_description=str(exc))

    logger.info("Token request (%s) succeeded, expires in %ds", grant_type, payload.expires_in)
    return Token.from_response(payload, previous_refresh_token=previous_refresh_token)


class AuthFlow(abc.ABC):
    """A way of obtaining, and possibly refreshing, an access token."""

    @abc.abstractmethod
    async def authenticate(self) -> Token | AuthError:
        """Obtain a new token."""

    @abc.abstractmethod
    async def request_refreshed_token(self, refresh_token: str) -> Token | AuthError:
        """Exchange *refresh_token* for a new token."""


@dataclass(frozen=True)
class ClientCredentialsFlow(AuthFlow):
    """App-only access with no user context. Tokens cannot be refreshed."""

    client_id: str
    client_secret: str = field(repr=False)
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    async def authenticate(self) -> Token | AuthError:
        """App tokens carry no refresh token and no scopes, whatever the server sends."""
        result = await request_token(
            {"grant_type": "client_credentials"},
            headers=basic_auth_header(self.client_id, self.client_secret),
            timeout=self.request_timeout,
        )
        if isinstance(result, AuthError):
            return result
        return result.model_copy(update={"refresh_token": None, "scopes": []})

    async def request_refreshed_token(self, refresh_token: str) -> Token | AuthError:
        return CANNOT_REFRESH_ERROR


@dataclass(frozen=True)
class AuthorizationCodeFlow(AuthFlow):
    """User-interactive flow producing a refreshable token.

    :meth:`authenticate` sends the resource owner to the authorization page
    through *prompt* and validates the redirect it returns before exchanging
    the code. Web applications that receive the redirect themselves can call
    :meth:`authorization_url` and :meth:`exchange_code` directly.
    """

    client_id: str
    client_secret: str = field(repr=False)
    redirect_uri: str
    scopes: tuple[str, ...] = ()
    prompt: AuthorizationPrompt = field(default_factory=ConsolePrompt, repr=False, compare=False)
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    def authorization_url(self, state: str) -> str:
        params = {
            "client_id": self.client_id,
            "response_type": "code",
            "redirect_uri": self.redirect_uri,
            "state": state,
        }
        if self.scopes:
            params["scope"] = " ".join(self.scopes)
        return f"{SPOTIFY_AUTHORIZE_URL}?{urlencode(params)}"

    async def authenticate(self) -> Token | AuthError:
        state = generate_state()
        try:
            callback_url = await self.prompt(self.authorization_url(state))
        except Exception as exc:
            logger.warning("Authorization prompt failed: %r", exc)
            return AuthError(error="authorization_aborted", error_description=repr(exc))
        return await self.complete(callback_url, expected_state=state)

    async def complete(self, callback_url: str, *, expected_state: str) -> Token | AuthError:
        """Validate the redirect callback and exchange its code for a token.

        The state is checked first; a mismatch never reaches the token endpoint.
        """
        try:
            params = httpx.URL(callback_url).params
        except httpx.InvalidURL as exc:
            return AuthError(error="invalid_request", error_description=f"Malformed callback URL: {exc}")

        received_state = params.get("state")
        if not verify_state(expected_state, received_state):
            logger.warning("Authorization callback carried a state that does not match the one sent")
            return AuthError(
                error="Wrong state",
                error_description=f"Expected state '{expected_state}', received '{received_state or ''}'",
            )

        reason = params.get("error")
        if reason is not None:
            return AuthError(error=reason, error_description=f"Authorization denied: {reason}")

        code = params.get("code")
        if not code:
            return AuthError(error="invalid_request", error_description="Callback URL carries neither code nor error")

        return await self.exchange_code(code)

    async def exchange_code(self, code: str) -> Token | AuthError:
        return await request_token(
            {"grant_type": "authorization_code", "code": code, "redirect_uri": self.redirect_uri},
            headers=basic_auth_header(self.client_id, self.client_secret),
            timeout=self.request_timeout,
        )

    async def request_refreshed_token(self, refresh_token: str) -> Token | AuthError:
        return await request_token(
            {"grant_type": "refresh_token", "refresh_token": refresh_token},
            headers=basic_auth_header(self.client_id, self.client_secret),
            timeout=self.request_timeout,
            previous_refresh_token=refresh_token,
        )


@dataclass(frozen=True)
class AuthorizationCodeWithPKCEFlow(AuthFlow):
    """Proof-key variant for installed apps; refreshing never sends the client secret."""

    client_id: str
    client_secret: str = field(repr=False)
    redirect_uri: str
    scopes: tuple[str, ...] = ()
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    async def authenticate(self) -> Token | AuthError:
        """Not supported; install a token obtained elsewhere with ``SpotifyClient.from_token``."""
        raise NotImplementedError("Interactive PKCE authorization is not supported yet")

    async def request_refreshed_token(self, refresh_token: str) -> Token | AuthError:
        return await request_token(
            {"grant_type": "refresh_token", "refresh_token": refresh_token, "client_id": self.client_id},
            timeout=self.request_timeout,
            previous_refresh_token=refresh_token,
        )
