"""Tests for the authorization state nonce."""

from spotify_catalog.auth.state import generate_state, verify_state


def test_generate_state_is_random() -> None:
    """Each call returns a fresh URL-safe nonce."""
    first, second = generate_state(), generate_state()
    assert first != second
    assert len(first) >= 43
    assert all(c.isalnum() or c in "-_" for c in first)


def test_verify_state_accepts_match() -> None:
    state = generate_state()
    assert verify_state(state, state)


def test_verify_state_rejects_mismatch() -> None:
    """A different or missing state fails verification."""
    state = generate_state()
    assert not verify_state(state, "tampered")
    assert not verify_state(state, None)
    assert not verify_state(state, "")
