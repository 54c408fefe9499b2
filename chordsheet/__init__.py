"""Chord sheet library for ChordPro and chords-over-lyrics text.

This library parses chord sheets written in ChordPro (``[C]Hello``) or as
plain text with chords above the lyrics into one song model, transposes
them and renders them back as ChordPro, chords-over-lyrics text or HTML.

Examples
--------
>>> from chordsheet import chordpro, tab_parser, transpose

>>> # Parse ChordPro and transpose
>>> song = chordpro.parse("{title: Demo}\\n[C]Hello [G]world")
>>> print(chordpro.format_song(transpose(song, 2)), end="")
{title: Demo}
[D]Hello [A]world

>>> # Render as chords over lyrics
>>> print(tab_parser.format_song(song), end="")
{title: Demo}
C     G
Hello world

>>> # Single chords
>>> from chordsheet import parse_chord
>>> str(parse_chord("Bbm7").transpose(2))
'Cm7'
"""

from chordsheet import chordpro, tab_parser
from chordsheet.converter import chord_components, is_chord, parse_chord
from chordsheet.diagrams import ChordDiagrams, diagram_name
from chordsheet.exceptions import (
    ChordParseFailure,
    ChordSheetError,
    FormatError,
    ParseError,
    TransformError,
)
from chordsheet.html_formatter import HtmlFormatter
from chordsheet.models import Chord
from chordsheet.pipeline import RenderResult, SheetOptions, process
from chordsheet.song import CommentLine, Segment, SegmentLine, Song, TagLine
from chordsheet.transform import extract_chords, find_unparseable_chords, transpose

__all__ = [
    "Chord",
    "ChordDiagrams",
    "ChordParseFailure",
    "ChordSheetError",
    "CommentLine",
    "FormatError",
    "HtmlFormatter",
    "ParseError",
    "RenderResult",
    "Segment",
    "SegmentLine",
    "SheetOptions",
    "Song",
    "TagLine",
    "TransformError",
    "chord_components",
    "chordpro",
    "diagram_name",
    "extract_chords",
    "find_unparseable_chords",
    "is_chord",
    "parse_chord",
    "process",
    "tab_parser",
    "transpose",
]
