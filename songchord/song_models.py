"""Data models for song records and their formatted lyrics."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class LineType(str, Enum):
    """Kind of a single lyric line."""

    CHORD = "chord"
    TEXT = "text"
    EMPTY = "empty"


@dataclass(frozen=True)
class LyricLine:
    """One classified line of a lyric block."""

    type: LineType
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type.value, "content": self.content}


def _lines_to_dicts(lines: list[LyricLine]) -> list[dict[str, str]]:
    return [line.to_dict() for line in lines]


@dataclass
class Song:
    """
    A stored song record.

    Attributes:
        id:            String identifier assigned by the store ("1", "2", ...).
        title:         Song title.
        artist:        Performing artist or composer.
        lyrics:        Lyric text with chord lines above the sung lines.
        original_key:  Key the lyrics are written in, if known (e.g. "G").
        category:      Free-form grouping such as "Hymn".
        date_created:  Creation timestamp (UTC).
        date_modified: Last update timestamp (UTC).
    """

    id: str
    title: str
    artist: str
    lyrics: str
    original_key: str | None
    category: str | None
    date_created: datetime
    date_modified: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "artist": self.artist,
            "lyrics": self.lyrics,
            "originalKey": self.original_key,
            "category": self.category,
            "dateCreated": self.date_created.isoformat(),
            "dateModified": self.date_modified.isoformat(),
        }


@dataclass(frozen=True)
class SongSummary:
    """List/search view of a song (no lyrics)."""

    id: str
    title: str
    artist: str
    original_key: str | None
    category: str | None
    date_created: datetime

    @classmethod
    def from_song(cls, song: Song) -> "SongSummary":
        return cls(
            id=song.id,
            title=song.title,
            artist=song.artist,
            original_key=song.original_key,
            category=song.category,
            date_created=song.date_created,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "artist": self.artist,
            "originalKey": self.original_key,
            "category": self.category,
            "dateCreated": self.date_created.isoformat(),
        }


@dataclass(frozen=True)
class SongDetail:
    """A song together with its lyrics split into classified lines."""

    id: str
    title: str
    artist: str
    lyrics: str
    original_key: str | None
    category: str | None
    date_created: datetime
    date_modified: datetime
    formatted_lyrics: list[LyricLine] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "artist": self.artist,
            "lyrics": self.lyrics,
            "originalKey": self.original_key,
            "category": self.category,
            "dateCreated": self.date_created.isoformat(),
            "dateModified": self.date_modified.isoformat(),
            "formattedLyrics": _lines_to_dicts(self.formatted_lyrics),
        }


@dataclass(frozen=True)
class TransposedSong:
    """
    Result of transposing a stored song.

    ``lyrics`` holds the transposed text while ``original_key`` is the
    record's stored key, untouched. ``transposed_key`` is None when the
    song has neither a stored key nor a detectable chord line.
    """

    id: str
    title: str
    artist: str
    lyrics: str
    original_key: str | None
    transposed_key: str | None
    category: str | None
    date_created: datetime
    date_modified: datetime
    formatted_lyrics: list[LyricLine] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "artist": self.artist,
            "lyrics": self.lyrics,
            "originalKey": self.original_key,
            "transposedKey": self.transposed_key,
            "category": self.category,
            "dateCreated": self.date_created.isoformat(),
            "dateModified": self.date_modified.isoformat(),
            "formattedLyrics": _lines_to_dicts(self.formatted_lyrics),
        }


@dataclass(frozen=True)
class SongSheet:
    """Neutral, display-ready song representation consumed by renderers."""

    title: str
    artist: str
    category: str | None
    original_key: str | None
    display_key: str | None
    lines: list[LyricLine]

    @property
    def is_transposed(self) -> bool:
        return (
            self.display_key is not None
            and self.original_key is not None
            and self.display_key != self.original_key
        )

    @classmethod
    def from_detail(cls, detail: SongDetail) -> "SongSheet":
        return cls(
            title=detail.title,
            artist=detail.artist,
            category=detail.category,
            original_key=detail.original_key,
            display_key=detail.original_key,
            lines=list(detail.formatted_lyrics),
        )

    @classmethod
    def from_transposed(cls, song: TransposedSong) -> "SongSheet":
        return cls(
            title=song.title,
            artist=song.artist,
            category=song.category,
            original_key=song.original_key,
            display_key=song.transposed_key or song.original_key,
            lines=list(song.formatted_lyrics),
        )
