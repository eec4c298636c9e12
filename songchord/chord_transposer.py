"""Chord transposition: shifts chord roots along the chromatic scale."""

import re
from dataclasses import dataclass

# Chromatic pitch class names (index 0 = C), sharp spelling only
NOTE_NAMES: list[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

#: Flat roots are mapped onto their sharp equivalents before lookup.
FLAT_TO_SHARP: dict[str, str] = {
    "Db": "C#",
    "Eb": "D#",
    "Gb": "F#",
    "Ab": "G#",
    "Bb": "A#",
}

SEMITONES_PER_OCTAVE = 12

_CHORD_PATTERN = re.compile(r"([A-G][#b]?)(.*)")
_ROOT_PATTERN = re.compile(r"^([A-G][#b]?)")


@dataclass(frozen=True)
class Chord:
    """
    A chord token split into its root and an opaque suffix.

    Attributes:
        root:   Root letter plus optional accidental, e.g. "C#" or "Bb".
        suffix: Everything after the root ("m7", "maj7/G", ...). Never altered.
    """

    root: str
    suffix: str = ""

    @property
    def name(self) -> str:
        """Full chord token, e.g. 'Am7'."""
        return f"{self.root}{self.suffix}"


def parse_chord(token: str) -> Chord | None:
    """Split a chord token into root and suffix, or return None if it has no root."""
    match = _CHORD_PATTERN.fullmatch(token)
    if not match:
        return None
    return Chord(root=match.group(1), suffix=match.group(2))


def normalize_root(root: str) -> str:
    """Return the sharp spelling of a flat root; other roots are returned as-is."""
    return FLAT_TO_SHARP.get(root, root)


def root_index(key: str) -> int | None:
    """
    Chromatic index (0-11) of the root at the start of *key*.

    Returns None when *key* does not start with a recognizable root.
    """
    match = _ROOT_PATTERN.match(key)
    if not match:
        return None
    root = normalize_root(match.group(1))
    if root not in NOTE_NAMES:
        return None
    return NOTE_NAMES.index(root)


def transpose_chord(chord: str, semitones: int) -> str:
    """
    Transpose a single chord token by *semitones*.

    Only the root is remapped; the suffix (quality, extensions, slash bass)
    is carried through untouched. Flat roots come back sharp-spelled, so
    ``transpose_chord("Db", 0) == "C#"``. Tokens without a recognizable root
    are returned unchanged.

    Args:
        chord:     Chord token, e.g. "Am", "G7", "Cmaj7/G".
        semitones: Offset in semitones. Any integer is accepted and wrapped
                   modulo 12.

    Returns:
        The transposed chord token.
    """
    if not chord or not chord.strip():
        return chord

    parsed = parse_chord(chord)
    if parsed is None:
        return chord

    root = normalize_root(parsed.root)
    if root not in NOTE_NAMES:
        return chord

    new_index = (NOTE_NAMES.index(root) + semitones) % SEMITONES_PER_OCTAVE
    return Chord(root=NOTE_NAMES[new_index], suffix=parsed.suffix).name


def calculate_interval(from_key: str, to_key: str) -> int:
    """
    Number of semitones up from *from_key* to *to_key* (0-11).

    Only the leading root of each key is considered, so
    ``calculate_interval("Am", "Bm") == 2``. Returns 0 if either key has no
    recognizable root.
    """
    from_index = root_index(from_key)
    to_index = root_index(to_key)
    if from_index is None or to_index is None:
        return 0
    return (to_index - from_index) % SEMITONES_PER_OCTAVE
