"""Caller-side retry for operations returning ``ApiError`` values.

The client never retries on its own. Wrap an operation explicitly::

    album = await call_with_retry(
        lambda: client.get_album(album_id),
        refresh=client.refresh_token,
    )
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from spotify_catalog.constants import DEFAULT_MAX_RETRIES, DEFAULT_RETRY_BASE_DELAY
from spotify_catalog.errors import ApiError, AuthError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def call_with_retry(
    operation: Callable[[], Awaitable[T | ApiError]],
    *,
    refresh: Callable[[], Awaitable[Any]] | None = None,
    max_retries: int = DEFAULT_MAX_RETRIES,
    retry_base_delay: float = DEFAULT_RETRY_BASE_DELAY,
) -> T | ApiError:
    """Call *operation*, retrying on 401 (once, after *refresh*), 429 and 5xx.

    Retry loop:
    1. Call the operation
    2. If it did not return an ApiError: return the result
    3. If 401 and *refresh* given and not already refreshed: refresh, retry
    4. If 429: sleep(retry_after or exponential backoff), retry
    5. If 5xx: sleep(exponential backoff), retry
    6. Anything else, or retries exhausted: return the last result
    """
    already_refreshed = False
    result = await operation()

    for attempt in range(max_retries):
        if not isinstance(result, ApiError):
            return result

        if result.status == 401:
            if refresh is None or already_refreshed:
                return result
            already_refreshed = True
            logger.info("Spotify returned 401, attempting token refresh")
            refreshed = await refresh()
            if isinstance(refreshed, AuthError):
                logger.warning("Token refresh failed: %s", refreshed.error)
                return result

        elif result.status == 429:
            delay = result.retry_after if result.retry_after is not None else retry_base_delay * (2**attempt)
            logger.warning(
                "Spotify rate limited (429), sleeping %.1fs (attempt %d/%d)",
                delay,
                attempt + 1,
                max_retries,
            )
            await asyncio.sleep(delay)

        elif result.status >= 500:
            delay = retry_base_delay * (2**attempt)
            logger.warning(
                "Spotify server error %d, sleeping %.1fs (attempt %d/%d)",
                result.status,
                delay,
                attempt + 1,
                max_retries,
            )
            await asyncio.sleep(delay)

        else:
            return result

        result = await operation()

    return result
