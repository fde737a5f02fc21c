"""Resource-owner interaction for the authorization-code flow.

The flow only needs something that shows the authorization URL to a human
and hands back the URL the browser was redirected to. How that happens (a
pasted URL, a local HTTP listener, a web framework route) is up to the
caller.
"""

import asyncio
from collections.abc import Callable
from typing import Protocol


class AuthorizationPrompt(Protocol):
    async def __call__(self, authorization_url: str) -> str:
        """Present *authorization_url* and return the redirect callback URL."""
        ...


class ConsolePrompt:
    """Print the authorization URL and read the pasted redirect URL from stdin."""

    def __init__(
        self,
        *,
        writer: Callable[[str], object] = print,
        reader: Callable[[str], str] = input,
    ) -> None:
        self._writer = writer
        self._reader = reader

    async def __call__(self, authorization_url: str) -> str:
        self._writer(f"Open this URL in a browser and authorize the application:\n{authorization_url}")
        callback_url = await asyncio.to_thread(self._reader, "Paste the URL you were redirected to: ")
        return callback_url.strip()
