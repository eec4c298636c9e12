"""songchord — song lyrics with chords, formatting and transposition."""

__version__ = "0.1.0"

from songchord.chord_transposer import calculate_interval, transpose_chord
from songchord.lyric_parser import (
    classify_line,
    detect_original_key,
    parse_lyrics,
    transpose_lyrics,
)
from songchord.song_models import (
    LineType,
    LyricLine,
    Song,
    SongDetail,
    SongSheet,
    SongSummary,
    TransposedSong,
)
from songchord.song_service import SongNotFoundError, SongService

__all__ = [
    "__version__",
    "LineType",
    "LyricLine",
    "Song",
    "SongDetail",
    "SongNotFoundError",
    "SongService",
    "SongSheet",
    "SongSummary",
    "TransposedSong",
    "calculate_interval",
    "classify_line",
    "detect_original_key",
    "parse_lyrics",
    "transpose_chord",
    "transpose_lyrics",
]
