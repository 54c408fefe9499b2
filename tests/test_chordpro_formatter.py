"""Tests for the ChordPro formatter."""

from chordsheet import chordpro
from chordsheet.chordpro import ChordProFormatter
from chordsheet.chordpro.formatter import format_directive, format_segments
from chordsheet.song import CommentLine, Segment, SegmentLine, Song, TagLine


class TestFormatParts:
    """Test formatting of single lines."""

    def test_segments(self) -> None:
        line = SegmentLine((Segment(lyrics="A"), Segment("G", "mazing")))
        assert format_segments(line) == "A[G]mazing"

    def test_directive_with_value(self) -> None:
        assert format_directive(TagLine("title", "Test")) == "{title: Test}"

    def test_directive_without_value(self) -> None:
        assert format_directive(TagLine("end_of_chorus")) == "{end_of_chorus}"

    def test_comment_line(self) -> None:
        formatter = ChordProFormatter()
        assert formatter.format_line(CommentLine("note")) == "# note"
        assert formatter.format_line(CommentLine("")) == "#"


class TestFormatSong:
    """Test formatting of whole songs."""

    def test_empty_song(self) -> None:
        assert chordpro.format_song(Song()) == ""

    def test_round_trip(self, chordpro_text: str) -> None:
        """Test that canonical ChordPro text formats back unchanged."""
        text = chordpro_text.replace("# source comment", "# source comment\n")
        assert chordpro.format_song(chordpro.parse(text)) == text

    def test_short_directives_expanded(self) -> None:
        song = chordpro.parse("{t: X}\n{soc}\n[C]a\n{eoc}")
        assert chordpro.format_song(song) == (
            "{title: X}\n{start_of_chorus}\n[C]a\n{end_of_chorus}\n"
        )

    def test_tab_section_literal(self) -> None:
        text = "{start_of_tab}\nB|--[x]--|\n{end_of_tab}\n"
        assert chordpro.format_song(chordpro.parse(text)) == text
