"""SongService: in-memory song records plus the transpose use case."""

import dataclasses
import logging
import threading
from datetime import datetime, timezone

from songchord.chord_transposer import transpose_chord
from songchord.lyric_parser import detect_original_key, parse_lyrics, transpose_lyrics
from songchord.song_models import Song, SongDetail, SongSummary, TransposedSong
from songchord.song_requests import (
    SongCreateRequest,
    SongSearchParams,
    SongUpdateRequest,
    TransposeRequest,
)

logger = logging.getLogger(__name__)


class SongNotFoundError(LookupError):
    """Raised when no song exists with the requested id."""

    def __init__(self, song_id: str) -> None:
        super().__init__(f"Song not found: {song_id!r}")
        self.song_id = song_id


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _contains(haystack: str | None, needle: str) -> bool:
    return haystack is not None and needle in haystack.lower()


class SongService:
    """
    Owns the lifecycle of song records held in memory.

    Ids are sequential strings starting at "1" and are never reused within
    one service instance. Writers are serialised by an internal lock; the
    chord engine itself is stateless and called outside of it.

    Usage:

        service = SongService()
        song = service.create(SongCreateRequest(title=..., artist=..., lyrics=...))
        result = service.transpose(song.id, 2)
    """

    def __init__(self) -> None:
        self._songs: list[Song] = []
        self._next_id = 1
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _find(self, song_id: str) -> Song:
        for song in self._songs:
            if song.id == song_id:
                return song
        logger.warning("Song %s not found", song_id)
        raise SongNotFoundError(song_id)

    def _resolve_transposed_key(self, song: Song, semitones: int) -> str | None:
        """Transpose the stored key, falling back to the key detected from the lyrics."""
        if song.original_key:
            return transpose_chord(song.original_key, semitones)

        detected_key = detect_original_key(song.lyrics)
        if detected_key is None:
            return None
        logger.debug("Song %s has no stored key, detected %s", song.id, detected_key)
        return transpose_chord(detected_key, semitones)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def create(self, request: SongCreateRequest) -> Song:
        now = _utcnow()
        with self._lock:
            song = Song(
                id=str(self._next_id),
                title=request.title,
                artist=request.artist,
                lyrics=request.lyrics,
                original_key=request.original_key,
                category=request.category,
                date_created=now,
                date_modified=now,
            )
            self._next_id += 1
            self._songs.append(song)
            song = dataclasses.replace(song)
        logger.info("Created song %s (%s - %s)", song.id, song.title, song.artist)
        return song

    def list_songs(self) -> list[SongSummary]:
        with self._lock:
            return [SongSummary.from_song(song) for song in self._songs]

    def get(self, song_id: str) -> Song:
        """Return a copy of the stored song; changes go through `update`."""
        with self._lock:
            return dataclasses.replace(self._find(song_id))

    def get_detail(self, song_id: str) -> SongDetail:
        """Return a song with its lyrics split into chord, text and empty lines."""
        song = self.get(song_id)
        return SongDetail(
            id=song.id,
            title=song.title,
            artist=song.artist,
            lyrics=song.lyrics,
            original_key=song.original_key,
            category=song.category,
            date_created=song.date_created,
            date_modified=song.date_modified,
            formatted_lyrics=parse_lyrics(song.lyrics),
        )

    def update(self, song_id: str, request: SongUpdateRequest) -> Song:
        """
        Apply the fields set on *request* to a stored song.

        Raises:
            SongNotFoundError: If *song_id* does not exist.
        """
        changes = request.changes()
        with self._lock:
            song = self._find(song_id)
            for name, value in changes.items():
                setattr(song, name, value)
            song.date_modified = _utcnow()
            song = dataclasses.replace(song)
        logger.info("Updated song %s (%s)", song_id, ", ".join(sorted(changes)) or "no fields")
        return song

    def delete(self, song_id: str) -> None:
        with self._lock:
            song = self._find(song_id)
            self._songs.remove(song)
        logger.info("Deleted song %s", song_id)

    def search(self, params: SongSearchParams) -> list[SongSummary]:
        """
        Case-insensitive substring search.

        ``params.query`` matches title, artist, lyrics or category; every other
        filter that is set narrows the result to songs whose field contains it.
        """
        with self._lock:
            matches = [dataclasses.replace(song) for song in self._songs]

        if params.query:
            query = params.query.lower()
            matches = [
                song
                for song in matches
                if _contains(song.title, query)
                or _contains(song.artist, query)
                or _contains(song.lyrics, query)
                or _contains(song.category, query)
            ]

        for field_name in ("title", "artist", "category", "lyrics"):
            needle = getattr(params, field_name)
            if needle:
                needle = needle.lower()
                matches = [song for song in matches if _contains(getattr(song, field_name), needle)]

        return [SongSummary.from_song(song) for song in matches]

    def transpose(self, song_id: str, semitones: int) -> TransposedSong:
        """
        Transpose a stored song without modifying it.

        Args:
            song_id:   Id of the song to transpose.
            semitones: Offset in semitones, -11 to 11.

        Returns:
            TransposedSong with transposed lyrics, the transposed key (or None
            if no key is stored or detectable) and the formatted lines.

        Raises:
            pydantic.ValidationError: If *semitones* is not an int in range.
            SongNotFoundError: If *song_id* does not exist.
        """
        semitones = TransposeRequest(semitones=semitones).semitones
        song = self.get(song_id)

        transposed_lyrics = transpose_lyrics(song.lyrics, semitones)
        transposed_key = self._resolve_transposed_key(song, semitones)
        logger.info(
            "Transposed song %s by %+d semitones (key %s -> %s)",
            song.id,
            semitones,
            song.original_key,
            transposed_key,
        )

        return TransposedSong(
            id=song.id,
            title=song.title,
            artist=song.artist,
            lyrics=transposed_lyrics,
            original_key=song.original_key,
            transposed_key=transposed_key,
            category=song.category,
            date_created=song.date_created,
            date_modified=song.date_modified,
            formatted_lyrics=parse_lyrics(transposed_lyrics),
        )
