"""Pydantic request models validating input to the song service."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

MIN_SEMITONES = -11
MAX_SEMITONES = 11

TITLE_MAX_LENGTH = 200
ARTIST_MAX_LENGTH = 100
LYRICS_MAX_LENGTH = 5000
KEY_MAX_LENGTH = 10
CATEGORY_MAX_LENGTH = 50
SEARCH_MAX_LENGTH = 200


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value


class SongCreateRequest(BaseModel):
    """Fields for a new song. Title, artist and lyrics are required."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    artist: str = Field(min_length=1, max_length=ARTIST_MAX_LENGTH)
    lyrics: str = Field(min_length=1, max_length=LYRICS_MAX_LENGTH)
    original_key: str | None = Field(default=None, max_length=KEY_MAX_LENGTH)
    category: str | None = Field(default=None, max_length=CATEGORY_MAX_LENGTH)

    @field_validator("original_key", "category")
    @classmethod
    def _optional_text(cls, value: str | None) -> str | None:
        return _blank_to_none(value)


class SongUpdateRequest(BaseModel):
    """
    Partial update of a song.

    Only fields that were explicitly passed are applied, so
    ``SongUpdateRequest(original_key=None)`` clears the stored key while
    ``SongUpdateRequest()`` changes nothing but the modification date.
    """

    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, min_length=1, max_length=TITLE_MAX_LENGTH)
    artist: str | None = Field(default=None, min_length=1, max_length=ARTIST_MAX_LENGTH)
    lyrics: str | None = Field(default=None, min_length=1, max_length=LYRICS_MAX_LENGTH)
    original_key: str | None = Field(default=None, max_length=KEY_MAX_LENGTH)
    category: str | None = Field(default=None, max_length=CATEGORY_MAX_LENGTH)

    @field_validator("original_key", "category")
    @classmethod
    def _optional_text(cls, value: str | None) -> str | None:
        return _blank_to_none(value)

    @field_validator("title", "artist", "lyrics")
    @classmethod
    def _not_null(cls, value: str | None) -> str | None:
        if value is None:
            raise ValueError("field cannot be null")
        return value

    def changes(self) -> dict[str, str | None]:
        """Explicitly set fields, keyed by Song attribute name."""
        return self.model_dump(include=self.model_fields_set)


class SongSearchParams(BaseModel):
    """Search filters. ``query`` matches any text field; the rest narrow by one field."""

    model_config = ConfigDict(extra="forbid")

    query: str | None = Field(default=None, max_length=SEARCH_MAX_LENGTH)
    title: str | None = Field(default=None, max_length=TITLE_MAX_LENGTH)
    artist: str | None = Field(default=None, max_length=ARTIST_MAX_LENGTH)
    category: str | None = Field(default=None, max_length=CATEGORY_MAX_LENGTH)
    lyrics: str | None = Field(default=None, max_length=SEARCH_MAX_LENGTH)


class TransposeRequest(BaseModel):
    """Semitone delta for a transposition, limited to one octave either way."""

    semitones: int = Field(strict=True, ge=MIN_SEMITONES, le=MAX_SEMITONES)
