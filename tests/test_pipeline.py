"""Tests for the parse, transpose and render pipeline."""

import pytest

from chordsheet import pipeline
from chordsheet.exceptions import (
    ChordParseFailure,
    FormatError,
    ParseError,
    TransformError,
)
from chordsheet.models import Chord
from chordsheet.pipeline import SheetOptions, process


class TestProcess:
    """Test successful runs."""

    def test_defaults_render_html(self, chordpro_text: str) -> None:
        result = process(chordpro_text)
        assert result.output.startswith('<div class="chord-sheet">')
        assert '<div class="title">Test</div>' in result.output
        assert result.chords == [Chord("C"), Chord("G")]
        assert result.failures == []

    def test_transpose_to_chordpro(self) -> None:
        result = process("[C]Hello [G]world", SheetOptions(transpose=2, output="chordpro"))
        assert result.output == "[D]Hello [A]world\n"
        assert [str(c) for c in result.chords] == ["D", "A"]

    def test_transposed_chords_include_comment_chords(self) -> None:
        """Test that the chord list holds only chords of the new key."""
        result = process("# riff: [C]\n[C]Hello", SheetOptions(transpose=2, output="chordpro"))
        assert result.output == "# riff: [D]\n[D]Hello\n"
        assert result.chords == [Chord("D")]

    def test_chord_sheet_to_chordpro(self) -> None:
        options = SheetOptions(chord_pro=False, output="chordpro")
        result = process("C       G\nHello there friend\n", options)
        assert result.output == "[C]Hello [G]there friend\n"

    def test_chordpro_to_text(self) -> None:
        result = process("[C]Hello [G]world", SheetOptions(output="text"))
        assert result.output == "C     G\nHello world\n"

    def test_hide_tabs(self, testdata_dir) -> None:
        source = (testdata_dir / "amazing_grace.cho").read_text()
        shown = process(source, SheetOptions(output="chordpro"))
        hidden = process(source, SheetOptions(show_tabs=False, output="chordpro"))
        assert "e|-----0-----|" in shown.output
        assert "e|-----0-----|" not in hidden.output
        assert len(hidden.song.lines) == len(shown.song.lines) - 4

    def test_collapse_blank_lines(self) -> None:
        options = SheetOptions(chord_pro=False, preserve_whitespace=False, output="chordpro")
        assert process("a\n\n\n\nb", options).output == "a\n\nb\n"

    def test_failures_reported(self) -> None:
        result = process("[C]a [*Riff]b")
        assert result.failures == [ChordParseFailure(text="*Riff", line_index=0)]
        assert result.chords == [Chord("C")]

    def test_unknown_output(self) -> None:
        with pytest.raises(ValueError, match="Unknown output format"):
            process("[C]a", SheetOptions(output="pdf"))  # type: ignore[arg-type]


class TestStageErrors:
    """Test that failures name their stage."""

    def test_parse_error_propagates(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            process("[C Hello")
        assert excinfo.value.stage == "Parser"

    def test_transpose_error(self, monkeypatch) -> None:
        def boom(song, semitones):
            raise RuntimeError("no")

        monkeypatch.setattr(pipeline, "transpose", boom)
        with pytest.raises(TransformError) as excinfo:
            process("[C]a", SheetOptions(transpose=1))
        assert excinfo.value.stage == "Transpose"

    def test_chords_error(self, monkeypatch) -> None:
        def boom(song):
            raise RuntimeError("no")

        monkeypatch.setattr(pipeline, "extract_chords", boom)
        with pytest.raises(TransformError) as excinfo:
            process("[C]a")
        assert excinfo.value.stage == "Chords"

    def test_format_error(self, monkeypatch) -> None:
        def boom(song):
            raise RuntimeError("no")

        monkeypatch.setitem(pipeline.FORMATTERS, "html", boom)
        with pytest.raises(FormatError) as excinfo:
            process("[C]a")
        assert excinfo.value.stage == "Formatter"
        assert str(excinfo.value) == "no"
