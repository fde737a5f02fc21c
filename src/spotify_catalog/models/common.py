"""Value objects whose wire and domain shapes are identical."""

from pydantic import BaseModel, ConfigDict


class _Value(BaseModel):
    model_config = ConfigDict(frozen=True)


class Image(_Value):
    """Image object (album art, artist photos, playlist covers, category icons)."""

    url: str
    height: int | None = None
    width: int | None = None


class Followers(_Value):
    href: str | None = None
    total: int


class Restrictions(_Value):
    """Why a track or album is unavailable (e.g. ``market``, ``product``, ``explicit``)."""

    reason: str


class Category(_Value):
    """Browse category used to tag playlists."""

    href: str
    icons: list[Image]
    id: str
    name: str


class TimeInterval(_Value):
    """A bar, beat or tatum of an audio analysis."""

    start: float
    duration: float
    confidence: float


class Cursor(_Value):
    """Cursor of a cursor-paged collection."""

    after: str | None = None
    before: str | None = None


class TracksRef(_Value):
    """Link to a collection's tracks, embedded in simplified playlists."""

    href: str
    total: int
