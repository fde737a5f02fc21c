"""User profiles."""

from spotify_catalog.constants import ME_URL, USERS_URL
from spotify_catalog.core import BaseClient, decode, guarded, segment
from spotify_catalog.mapping import map_user
from spotify_catalog.models.domain import User
from spotify_catalog.models.wire import WireUser
from spotify_catalog.validation import require_non_empty


class UsersMixin(BaseClient):
    @guarded
    async def get_current_user_profile(self) -> User:
        """GET /me. ``country``, ``email`` and ``product`` need the user-read-private/email scopes."""
        response = await self._request("GET", ME_URL)
        return decode(response, lambda body: map_user(WireUser.model_validate(body)))

    @guarded
    async def get_user_profile(self, user_id: str) -> User:
        """GET /users/{id}."""
        require_non_empty(user_id, "user_id")
        response = await self._request("GET", f"{USERS_URL}/{segment(user_id)}")
        return decode(response, lambda body: map_user(WireUser.model_validate(body)))
