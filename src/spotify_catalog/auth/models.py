"""Token models for the accounts service."""

from datetime import UTC, datetime, timedelta
from typing import Self

from pydantic import BaseModel, ConfigDict, Field


class TokenResponse(BaseModel):
    """Response from Spotify's /api/token endpoint."""

    access_token: str
    token_type: str
    expires_in: int
    refresh_token: str | None = None
    scope: str | None = None


class Token(BaseModel):
    """An access token and the metadata it was issued with.

    Instances are immutable; a refresh produces a new ``Token`` that replaces
    the old one wholesale. Expiry is advisory: nothing refreshes a token
    automatically.
    """

    model_config = ConfigDict(frozen=True)

    access_token: str
    token_type: str
    expires_in: int
    refresh_token: str | None = None
    scopes: list[str] = Field(default_factory=list)
    obtained_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def from_response(cls, response: TokenResponse, *, previous_refresh_token: str | None = None) -> Self:
        """Build a token, keeping *previous_refresh_token* if the response omits one."""
        return cls(
            access_token=response.access_token,
            token_type=response.token_type,
            expires_in=response.expires_in,
            refresh_token=response.refresh_token or previous_refresh_token,
            scopes=(response.scope or "").split(),
        )

    @property
    def expires_at(self) -> datetime:
        return self.obtained_at + timedelta(seconds=self.expires_in)

    def is_expired(self, buffer_seconds: int = 0) -> bool:
        """Whether the token expires within *buffer_seconds* from now."""
        return datetime.now(UTC) + timedelta(seconds=buffer_seconds) >= self.expires_at
