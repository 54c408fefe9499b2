"""Tests for chord symbol parsing."""

import pytest

from chordsheet.converter import chord_components, is_chord, parse_chord, to_pychord
from chordsheet.models import Chord


class TestParseChord:
    """Test parsing chord symbols into Chord objects."""

    def test_major(self) -> None:
        assert parse_chord("C") == Chord("C")

    def test_quality(self) -> None:
        assert parse_chord("Gm7") == Chord("G", "m7")

    def test_slash_chord(self) -> None:
        """Test slash chords keep their bass note."""
        assert parse_chord("C/E") == Chord("C", "", "E")
        assert parse_chord("Am/G") == Chord("A", "m", "G")

    def test_unicode_accidentals(self) -> None:
        """Test that typographic accidentals are canonicalised."""
        assert parse_chord("B♭/D") == Chord("Bb", "", "D")
        assert parse_chord("F♯m") == Chord("F#", "m")

    @pytest.mark.parametrize("suffix", ["+", "sus", "min", "-", "M", "maj", "7sus"])
    def test_alias_qualities_kept_verbatim(self, suffix: str) -> None:
        """Test spellings pychord does not know are accepted as written."""
        chord = parse_chord(f"D{suffix}")
        assert chord is not None
        assert chord.quality == suffix

    def test_round_trip(self) -> None:
        """Test that str() gives back the parsed text."""
        for text in ["Cmaj7", "Dsus4", "F#m7/C#", "Bbm", "E7", "Asus2", "Gadd9"]:
            assert str(parse_chord(text)) == text


class TestParseChordRejects:
    """Test inputs that are not chord symbols."""

    @pytest.mark.parametrize(
        "text",
        ["", "Hello", "Xyz123", "Amazing", "Cxyz", "C/H", "C/", "x2", "the", "[C]"],
    )
    def test_not_a_chord(self, text: str) -> None:
        """Test that non-chords return None instead of raising."""
        assert parse_chord(text) is None

    def test_too_long(self) -> None:
        """Test that overlong tokens are rejected."""
        assert parse_chord("C" + "m" * 20) is None


class TestIsChord:
    """Test chord detection."""

    @pytest.mark.parametrize("text", ["C", "Am", "Bb", "F#", "Bdim", "Faug", "G/B", "Abm7"])
    def test_valid(self, text: str) -> None:
        assert is_chord(text) is True

    @pytest.mark.parametrize("text", ["Hello", "world", "I", "(x2)"])
    def test_invalid(self, text: str) -> None:
        assert is_chord(text) is False


class TestToPychord:
    """Test conversion to pychord notation."""

    def test_plain(self) -> None:
        assert to_pychord(Chord("G", "m7")) == "Gm7"

    def test_alias(self) -> None:
        """Test that aliased suffixes are translated."""
        assert to_pychord(Chord("C", "+", "E")) == "Caug/E"
        assert to_pychord(Chord("D", "sus")) == "Dsus4"


class TestChordComponents:
    """Test spelling chords out as notes."""

    def test_minor(self) -> None:
        assert chord_components(Chord("A", "m")) == ["A", "C", "E"]

    def test_major(self) -> None:
        assert chord_components(Chord("C")) == ["C", "E", "G"]

    def test_seventh(self) -> None:
        assert chord_components(Chord("G", "7")) == ["G", "B", "D", "F"]
