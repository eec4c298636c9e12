"""Lyric parsing: chord-line detection, formatting and whole-lyric transposition."""

import re

from songchord.chord_transposer import transpose_chord
from songchord.song_models import LineType, LyricLine

#: A single chord token inside a chord line: root, accidental, then word chars
#: or slashes ("Cmaj7/G" is one token). Word chars are ASCII only, while the
#: line separators below are any Unicode whitespace (NBSP included).
CHORD_TOKEN_PATTERN = re.compile(r"[A-G][#b]?[A-Za-z0-9_/]*")

#: A whole line made of whitespace-separated chord tokens and nothing else.
#: Same token grammar as above; a flat sign is consumed by the word class.
CHORD_LINE_PATTERN = re.compile(r"\s*[A-G]#?[A-Za-z0-9_/]*(?:\s+[A-G]#?[A-Za-z0-9_/]*)*\s*")


def classify_line(line: str) -> LineType:
    """
    Classify one line of lyric text.

    A line is a chord line only when every non-blank run on it is a chord
    token, e.g. ``"    C        G"``. Lines with nothing but whitespace are
    empty; anything else is text.
    """
    if not line.strip():
        return LineType.EMPTY
    if CHORD_LINE_PATTERN.fullmatch(line):
        return LineType.CHORD
    return LineType.TEXT


def parse_lyrics(lyrics: str) -> list[LyricLine]:
    """
    Split lyric text into classified lines for display.

    One entry is produced per newline-separated line, in order. Chord and text
    lines keep their content verbatim (leading spaces align chords over the
    words); empty lines always carry an empty string.
    """
    result: list[LyricLine] = []
    for line in lyrics.split("\n"):
        line_type = classify_line(line)
        content = "" if line_type is LineType.EMPTY else line
        result.append(LyricLine(type=line_type, content=content))
    return result


def transpose_chord_line(line: str, semitones: int) -> str:
    """Transpose every chord token on *line*, leaving the spacing between them intact."""
    return CHORD_TOKEN_PATTERN.sub(
        lambda match: transpose_chord(match.group(0), semitones),
        line,
    )


def transpose_lyrics(lyrics: str, semitones: int) -> str:
    """
    Transpose all chord lines of a lyric block by *semitones*.

    Text and empty lines pass through unchanged and the number of lines is
    preserved exactly.

    Example:
        >>> transpose_lyrics("    C        G\\nVerse", 2)
        '    D        A\\nVerse'
    """
    transposed: list[str] = []
    for line in lyrics.split("\n"):
        if classify_line(line) is LineType.CHORD:
            transposed.append(transpose_chord_line(line, semitones))
        else:
            transposed.append(line)
    return "\n".join(transposed)


def detect_original_key(lyrics: str) -> str | None:
    """
    Guess the key of a song from the first chord of its first chord line.

    Returns None if no line of *lyrics* is a chord line.
    """
    for line in lyrics.split("\n"):
        if classify_line(line) is not LineType.CHORD:
            continue
        first_chord = CHORD_TOKEN_PATTERN.search(line)
        if first_chord:
            return first_chord.group(0)
    return None
