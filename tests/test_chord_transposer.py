"""Unit tests for single-chord transposition and key intervals."""

import pytest

from songchord.chord_transposer import (
    NOTE_NAMES,
    Chord,
    calculate_interval,
    normalize_root,
    parse_chord,
    root_index,
    transpose_chord,
)

SHARP_CHORDS = ["C", "Am", "G7", "C#maj7", "D/F#", "F#m7b5", "Bsus4", "Eadd9", "A#dim"]


def test_transpose_major_chord_up() -> None:
    assert transpose_chord("C", 2) == "D"


def test_transpose_keeps_minor_suffix() -> None:
    assert transpose_chord("Am", 2) == "Bm"


def test_transpose_down() -> None:
    assert transpose_chord("G7", -3) == "E7"


def test_transpose_keeps_extension() -> None:
    assert transpose_chord("Cmaj7", 5) == "Fmaj7"


def test_transpose_slash_chord_only_remaps_leading_root() -> None:
    assert transpose_chord("Cmaj7/G", 2) == "Dmaj7/G"


def test_transpose_wraps_past_b() -> None:
    assert transpose_chord("B", 1) == "C"
    assert transpose_chord("C", -1) == "B"


def test_transpose_extreme_offsets() -> None:
    assert transpose_chord("C", 11) == "B"
    assert transpose_chord("C", -11) == "C#"


def test_flat_root_is_spelled_sharp() -> None:
    assert transpose_chord("Db", 0) == "C#"
    assert transpose_chord("Bbm", -2) == "G#m"
    assert transpose_chord("Eb7", 1) == "E7"


def test_empty_and_blank_chords_pass_through() -> None:
    assert transpose_chord("", 3) == ""
    assert transpose_chord("   ", 3) == "   "


def test_unrecognized_token_passes_through() -> None:
    assert transpose_chord("X", 4) == "X"
    assert transpose_chord("verse", 4) == "verse"
    assert transpose_chord("c", 4) == "c"


def test_unknown_flat_spelling_passes_through() -> None:
    # Cb and Fb have no entry in the flat table
    assert transpose_chord("Cb", 2) == "Cb"
    assert transpose_chord("Fbm", 2) == "Fbm"


@pytest.mark.parametrize("chord", SHARP_CHORDS)
def test_zero_offset_is_identity(chord: str) -> None:
    assert transpose_chord(chord, 0) == chord


@pytest.mark.parametrize("chord", SHARP_CHORDS)
@pytest.mark.parametrize("semitones", [1, 5, 7, 11, 14, -8])
def test_inverse_offset_round_trips(chord: str, semitones: int) -> None:
    assert transpose_chord(transpose_chord(chord, semitones), -semitones) == chord


@pytest.mark.parametrize("chord", ["C", "Bbm", "F#7"])
def test_transposition_is_periodic(chord: str) -> None:
    for semitones in range(-11, 12):
        expected = transpose_chord(chord, semitones)
        assert transpose_chord(chord, semitones + 12) == expected
        assert transpose_chord(chord, semitones - 12) == expected


def test_suffix_is_preserved_for_every_offset() -> None:
    for semitones in range(-11, 12):
        assert transpose_chord("Gm7/D", semitones).endswith("m7/D")


def test_every_note_reachable_from_c() -> None:
    assert [transpose_chord("C", n) for n in range(12)] == NOTE_NAMES


def test_parse_chord_splits_root_and_suffix() -> None:
    assert parse_chord("Bbmaj7") == Chord(root="Bb", suffix="maj7")
    assert parse_chord("E") == Chord(root="E", suffix="")
    assert parse_chord("H7") is None


def test_chord_name_joins_root_and_suffix() -> None:
    assert Chord(root="F#", suffix="m").name == "F#m"


def test_normalize_root() -> None:
    assert normalize_root("Ab") == "G#"
    assert normalize_root("G#") == "G#"


def test_root_index() -> None:
    assert root_index("C") == 0
    assert root_index("Bbm") == 10
    assert root_index("Nope") is None


def test_interval_up() -> None:
    assert calculate_interval("C", "D") == 2


def test_interval_is_never_negative() -> None:
    assert calculate_interval("G", "E") == 9


def test_interval_ignores_quality() -> None:
    assert calculate_interval("Am", "Bm") == 2


def test_interval_normalizes_flats() -> None:
    assert calculate_interval("Db", "C#") == 0
    assert calculate_interval("Bb", "C") == 2


def test_interval_same_key_is_zero() -> None:
    for note in NOTE_NAMES:
        assert calculate_interval(note, note) == 0


def test_interval_unrecognized_keys_are_zero() -> None:
    assert calculate_interval("X", "Y") == 0
    assert calculate_interval("C", "Y") == 0
    assert calculate_interval("", "D") == 0


def test_interval_range() -> None:
    for from_key in NOTE_NAMES:
        for to_key in NOTE_NAMES:
            assert 0 <= calculate_interval(from_key, to_key) <= 11


def test_interval_agrees_with_transposition() -> None:
    for semitones in range(12):
        assert calculate_interval("E", transpose_chord("E", semitones)) == semitones
