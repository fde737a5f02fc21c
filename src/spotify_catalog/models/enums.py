"""Closed sets of values that appear as bare strings on the wire."""

import enum
from typing import Self

from spotify_catalog.exceptions import DecodeError


class _WireEnum(enum.StrEnum):
    """String enum whose wire decoding rejects unknown values."""

    @classmethod
    def from_wire(cls, value: str) -> Self:
        try:
            return cls(value)
        except ValueError:
            raise DecodeError(cls.__name__, value) from None


class ObjectType(_WireEnum):
    """Catalog object type carried in the ``type`` field."""

    ALBUM = "album"
    ARTIST = "artist"
    EPISODE = "episode"
    SHOW = "show"
    TRACK = "track"
    PLAYLIST = "playlist"
    USER = "user"

    @classmethod
    def from_wire(cls, value: str) -> Self:
        return super().from_wire(value.lower())

    @property
    def search_key(self) -> str:
        """Top-level key wrapping this type's page in a search response."""
        return f"{self.value}s"


SEARCHABLE_TYPES = frozenset(
    {ObjectType.ALBUM, ObjectType.ARTIST, ObjectType.EPISODE, ObjectType.SHOW, ObjectType.TRACK}
)


class AlbumType(_WireEnum):
    ALBUM = "album"
    SINGLE = "single"
    COMPILATION = "compilation"

    @classmethod
    def from_wire(cls, value: str) -> Self:
        return super().from_wire(value.lower())


class ReleaseDatePrecision(_WireEnum):
    YEAR = "year"
    MONTH = "month"
    DAY = "day"


class CopyrightType(_WireEnum):
    """C = copyright, P = sound recording (performance) copyright."""

    C = "C"
    P = "P"


class TimeRange(_WireEnum):
    """Time frame over which personalization affinities are computed."""

    SHORT_TERM = "short_term"
    MEDIUM_TERM = "medium_term"
    LONG_TERM = "long_term"


class IncludeGroup(_WireEnum):
    """Album groups accepted by the artist-albums filter."""

    ALBUM = "album"
    SINGLE = "single"
    APPEARS_ON = "appears_on"
    COMPILATION = "compilation"


class FollowType(_WireEnum):
    ARTIST = "artist"
    USER = "user"
