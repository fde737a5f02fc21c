"""Local precondition checks run before any request is dispatched."""

from collections.abc import Collection, Iterable, Sized

from spotify_catalog.exceptions import InvalidUsageError


def require_limit(limit: int, maximum: int, minimum: int = 1) -> None:
    if not minimum <= limit <= maximum:
        raise InvalidUsageError(f"Limit must be between {minimum} and {maximum}, got {limit}")


def require_offset(offset: int, maximum: int | None = None) -> None:
    if offset < 0:
        raise InvalidUsageError(f"Offset must be non-negative, got {offset}")
    if maximum is not None and offset > maximum:
        raise InvalidUsageError(f"Offset must be at most {maximum}, got {offset}")


def require_ids(ids: Sized, maximum: int, name: str = "IDs") -> None:
    """*ids* must hold between 1 and *maximum* entries."""
    if len(ids) == 0:
        raise InvalidUsageError(f"At least one of {name} is required")
    if len(ids) > maximum:
        raise InvalidUsageError(f"At most {maximum} {name} are allowed, got {len(ids)}")


def require_non_empty(value: str | Sized, name: str) -> None:
    if len(value) == 0:
        raise InvalidUsageError(f"{name} must not be empty")


def require_choice(values: Iterable[str], allowed: Collection[str], name: str) -> None:
    invalid = sorted(str(v) for v in values if v not in allowed)
    if invalid:
        raise InvalidUsageError(f"Unsupported {name}: {', '.join(invalid)}; expected one of {sorted(allowed)}")
