"""Tests that verify parsing of the sample songs in testdata."""

import pytest

from chordsheet import chordpro, tab_parser
from chordsheet.song import TagLine
from chordsheet.transform import extract_chords, find_unparseable_chords, transpose


@pytest.fixture
def amazing_grace(testdata_dir) -> str:
    return (testdata_dir / "amazing_grace.cho").read_text()


@pytest.fixture
def hello_there(testdata_dir) -> str:
    return (testdata_dir / "hello_there.txt").read_text()


class TestAmazingGrace:
    """ChordPro sample with comments, sections and a tab block."""

    def test_metadata(self, amazing_grace: str) -> None:
        song = chordpro.parse(amazing_grace)
        assert song.title == "Amazing Grace"
        assert song.artist == "John Newton"
        assert song.metadata["key"] == "G"

    def test_all_chords_parse(self, amazing_grace: str) -> None:
        assert find_unparseable_chords(chordpro.parse(amazing_grace)) == []

    def test_transposed_chords(self, amazing_grace: str) -> None:
        song = transpose(chordpro.parse(amazing_grace), 2)
        assert [str(c) for c in extract_chords(song)] == ["A", "E", "A7", "D", "F#m"]
        assert TagLine("comment", "Intro: [A]%20[E]") in song.lines

    def test_chordpro_round_trip(self, amazing_grace: str) -> None:
        song = chordpro.parse(amazing_grace)
        assert chordpro.parse(chordpro.format_song(song)) == song


class TestHelloThere:
    """Chords-over-lyrics sample."""

    def test_chords(self, hello_there: str) -> None:
        song = tab_parser.parse(hello_there)
        assert [str(c) for c in extract_chords(song)] == ["Am", "G", "C", "F", "C/E", "Dm"]

    def test_sections(self, hello_there: str) -> None:
        song = tab_parser.parse(hello_there)
        names = [line.name for line in song.lines if line.kind == "tag"]
        assert names == [
            "title",
            "comment",
            "start_of_verse",
            "comment",
            "end_of_verse",
            "start_of_chorus",
            "end_of_chorus",
        ]

    def test_to_chordpro(self, hello_there: str) -> None:
        """Test conversion to ChordPro and back keeps the chords."""
        song = tab_parser.parse(hello_there)
        again = chordpro.parse(chordpro.format_song(song))
        assert extract_chords(again) == extract_chords(song)
