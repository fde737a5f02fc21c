"""OAuth state parameter management for CSRF protection."""

import hmac
import secrets

STATE_NBYTES = 32


def generate_state() -> str:
    """Return a fresh, URL-safe random state nonce."""
    return secrets.token_urlsafe(STATE_NBYTES)


def verify_state(expected: str, received: str | None) -> bool:
    """Constant-time comparison of the sent and returned state values."""
    if not received:
        return False
    return hmac.compare_digest(expected.encode(), received.encode())
