"""Tests for chord sheet tokenizer."""

from chordsheet.tab_parser.tokenizer import tokenize_line


class TestTokenizeLineBasic:
    """Basic tokenization tests."""

    def test_chord_line(self) -> None:
        """Test that chord columns are kept."""
        tokens = tokenize_line("C       G")
        assert [(t.text, t.start, t.end) for t in tokens] == [("C", 0, 1), ("G", 8, 9)]

    def test_lyric_line(self) -> None:
        tokens = tokenize_line("Hello  world")
        assert [(t.text, t.start, t.end) for t in tokens] == [("Hello", 0, 5), ("world", 7, 12)]

    def test_kind_unclassified(self) -> None:
        """Test that tokens start out unclassified."""
        assert all(t.kind == "other" and t.chord is None for t in tokenize_line("Am G"))


class TestTokenizeLineWhitespace:
    """Whitespace handling tests."""

    def test_leading_spaces(self) -> None:
        """Test that leading spaces shift the columns."""
        tokens = tokenize_line("   F#m7")
        assert (tokens[0].start, tokens[0].end) == (3, 7)

    def test_tabs_separate_tokens(self) -> None:
        assert [t.text for t in tokenize_line("C\tG")] == ["C", "G"]

    def test_empty_line(self) -> None:
        assert tokenize_line("") == []

    def test_whitespace_only(self) -> None:
        assert tokenize_line("     ") == []
