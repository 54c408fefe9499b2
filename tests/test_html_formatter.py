"""Tests for the HTML formatter."""

from chordsheet import chordpro
from chordsheet.html_formatter import HtmlFormatter, format_segment, format_song, format_tag
from chordsheet.song import CommentLine, Segment, Song, TagLine


class TestFormatSegment:
    """Test segment columns."""

    def test_chord_and_lyrics(self) -> None:
        assert format_segment(Segment("C", "Hello ")) == (
            '<div class="column"><div class="chord">C</div>'
            '<div class="lyrics">Hello </div></div>'
        )

    def test_short_lyrics_padded(self) -> None:
        """Test that lyrics shorter than the chord leave room for it."""
        assert '<div class="lyrics">I  </div>' in format_segment(Segment("Am", "I"))

    def test_no_chord(self) -> None:
        assert format_segment(Segment(lyrics="la")) == (
            '<div class="column"><div class="chord"></div><div class="lyrics">la</div></div>'
        )

    def test_escaped(self) -> None:
        html = format_segment(Segment("C", "<b>rock & roll</b>"))
        assert "&lt;b&gt;rock &amp; roll&lt;/b&gt;" in html


class TestFormatTag:
    """Test tag rendering."""

    def test_title_and_artist(self) -> None:
        assert format_tag(TagLine("title", "T")) == '<div class="title">T</div>'
        assert format_tag(TagLine("artist", "A")) == '<div class="artist">A</div>'

    def test_sections(self) -> None:
        assert format_tag(TagLine("start_of_chorus")) == '<div class="comment">Chorus</div>'
        assert format_tag(TagLine("start_of_verse", "Verse 2")) == '<div class="comment">Verse 2</div>'
        assert format_tag(TagLine("end_of_verse")) == ""

    def test_comment(self) -> None:
        assert format_tag(TagLine("comment", "x2")) == '<div class="comment">x2</div>'

    def test_metadata(self) -> None:
        assert format_tag(TagLine("key", "G")) == (
            '<div><div class="meta-label">key</div><div class="meta-value">G</div></div>'
        )

    def test_empty_metadata(self) -> None:
        assert format_tag(TagLine("new_page")) == ""


class TestFormatSong:
    """Test whole-song rendering."""

    def test_song(self) -> None:
        song = chordpro.parse("{title: T}\n# hidden\n[C]a\n")
        assert format_song(song) == (
            '<div class="chord-sheet">\n'
            '  <div class="row"><div class="title">T</div></div>\n'
            '  <div class="row"><div class="column"><div class="chord">C</div>'
            '<div class="lyrics">a </div></div></div>\n'
            "</div>\n"
        )

    def test_blank_line_is_empty_row(self) -> None:
        html = HtmlFormatter().format(chordpro.parse("\n"))
        assert html == '<div class="chord-sheet">\n  <div class="row"></div>\n</div>\n'

    def test_empty_song(self) -> None:
        assert format_song(Song()) == '<div class="chord-sheet">\n</div>\n'

    def test_source_comment_not_rendered(self) -> None:
        assert HtmlFormatter().format_line(CommentLine("x")) is None
