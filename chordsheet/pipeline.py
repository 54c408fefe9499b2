"""Parse, transpose, collect and render a chord sheet in one call.

Each stage works on an immutable :class:`~chordsheet.song.Song`, so a
stage that fails never leaves a half-modified song behind. Failures are
reported with the name of the stage that raised them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Literal

from chordsheet import chordpro, tab_parser
from chordsheet.exceptions import (
    ChordParseFailure,
    ChordSheetError,
    FormatError,
    TransformError,
)
from chordsheet.html_formatter import HtmlFormatter
from chordsheet.models import Chord
from chordsheet.song import Song
from chordsheet.transform import extract_chords, find_unparseable_chords, transpose

logger = logging.getLogger(__name__)

OutputFormat = Literal["html", "chordpro", "text"]

FORMATTERS: dict[str, Callable[[Song], str]] = {
    "html": HtmlFormatter().format,
    "chordpro": chordpro.ChordProFormatter().format,
    "text": tab_parser.ChordsOverLyricsFormatter().format,
}


@dataclass(frozen=True)
class SheetOptions:
    """Settings for :func:`process`.

    Parameters
    ----------
    chord_pro : bool
        Read the source as ChordPro; False reads chords-over-lyrics text.
    transpose : int
        Semitones to transpose by (positive = up).
    show_tabs : bool
        Keep ``{start_of_tab}`` sections of ChordPro sources.
    preserve_whitespace : bool
        Keep every blank line of chords-over-lyrics sources.
    max_blank_lines : int
        Longest run of blank lines kept when not preserving whitespace.
    output : {"html", "chordpro", "text"}
        Rendering of the result.
    """

    chord_pro: bool = True
    transpose: int = 0
    show_tabs: bool = True
    preserve_whitespace: bool = True
    max_blank_lines: int = tab_parser.DEFAULT_MAX_BLANK_LINES
    output: OutputFormat = "html"


@dataclass(frozen=True)
class RenderResult:
    """Outcome of :func:`process`."""

    song: Song
    chords: list[Chord] = field(default_factory=list)
    output: str = ""
    failures: list[ChordParseFailure] = field(default_factory=list)


def parse_source(source: str, options: SheetOptions) -> Song:
    """Parse *source* with the parser selected by *options*."""
    if options.chord_pro:
        return chordpro.parse(source, show_tabs=options.show_tabs)
    return tab_parser.parse(
        source,
        preserve_whitespace=options.preserve_whitespace,
        max_blank_lines=options.max_blank_lines,
    )


def process(source: str, options: SheetOptions | None = None) -> RenderResult:
    """Run a chord sheet through parse, transpose, chord collection and rendering.

    Parameters
    ----------
    source : str
        The chord sheet text.
    options : SheetOptions | None
        Pipeline settings; defaults to ``SheetOptions()``.

    Returns
    -------
    RenderResult
        The transposed song, its distinct chords, the rendered output and
        the chord annotations that could not be parsed.

    Raises
    ------
    ParseError
        If the source is malformed.
    TransformError
        If transposing ("Transpose") or collecting chords ("Chords") fails.
    FormatError
        If rendering fails.

    Examples
    --------
    >>> result = process("[C]Hello [G]world", SheetOptions(transpose=2, output="chordpro"))
    >>> result.output
    '[D]Hello [A]world\\n'
    >>> [str(c) for c in result.chords]
    ['D', 'A']
    """
    if options is None:
        options = SheetOptions()
    if options.output not in FORMATTERS:
        msg = f"Unknown output format {options.output!r}, expected one of {sorted(FORMATTERS)}"
        raise ValueError(msg)

    song = parse_source(source, options)
    failures = find_unparseable_chords(song)
    for failure in failures:
        logger.warning("Unparseable chord %r on line %d", failure.text, failure.line_index + 1)

    try:
        song = transpose(song, options.transpose)
    except ChordSheetError:
        raise
    except Exception as exc:
        raise TransformError("Transpose", str(exc)) from exc

    try:
        chords = extract_chords(song)
    except ChordSheetError:
        raise
    except Exception as exc:
        raise TransformError("Chords", str(exc)) from exc

    try:
        output = FORMATTERS[options.output](song)
    except Exception as exc:
        raise FormatError(str(exc)) from exc

    logger.debug("Rendered %d lines with %d distinct chords", len(song.lines), len(chords))
    return RenderResult(song=song, chords=chords, output=output, failures=failures)
