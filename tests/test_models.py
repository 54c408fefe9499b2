"""Tests for the Chord model."""

import pytest

from chordsheet.models import Chord


class TestChordStr:
    """Test canonical chord strings."""

    def test_plain(self) -> None:
        assert str(Chord("C")) == "C"

    def test_quality(self) -> None:
        assert str(Chord("G", "m7")) == "Gm7"

    def test_slash(self) -> None:
        assert str(Chord("F#", "m7", "C#")) == "F#m7/C#"


class TestChordTranspose:
    """Test chord transposition."""

    def test_root_and_bass(self) -> None:
        """Test that root and bass move together."""
        assert Chord("G", "", "B").transpose(2) == Chord("A", "", "C#")

    def test_quality_verbatim(self) -> None:
        """Test that the quality text is never rewritten."""
        assert Chord("C", "+").transpose(5) == Chord("F", "+")
        assert Chord("D", "7sus").transpose(-2) == Chord("C", "7sus")

    def test_flat_root(self) -> None:
        """Test flat spelled roots stay flat."""
        assert str(Chord("Bb", "m7").transpose(2)) == "Cm7"
        assert str(Chord("Eb").transpose(1)) == "E"
        assert str(Chord("Ab").transpose(1)) == "A"
        assert str(Chord("Db").transpose(1)) == "D"
        assert str(Chord("Gb").transpose(-1)) == "F"
        assert str(Chord("Eb").transpose(3)) == "Gb"

    @pytest.mark.parametrize("semitones", [0, 12, -24])
    def test_identity(self, semitones: int) -> None:
        """Test that whole octaves return the chord itself."""
        chord = Chord("E#", "m")
        assert chord.transpose(semitones) is chord

    def test_inverse(self) -> None:
        """Test that shifting up and down again restores the chord."""
        chord = Chord("F#", "m7", "A")
        assert chord.transpose(5).transpose(-5) == chord

    def test_frozen(self) -> None:
        """Test that chords are immutable."""
        chord = Chord("C")
        with pytest.raises(AttributeError):
            chord.root = "D"  # type: ignore[misc]
