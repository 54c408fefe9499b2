"""Chords-over-lyrics sheet parser.

This module provides functionality to parse plain-text chord sheets, where
chord names sit on their own line above the lyrics, into structured songs,
and to format songs back into that layout.
"""

from chordsheet.tab_parser.formatter import ChordsOverLyricsFormatter, format_song
from chordsheet.tab_parser.models import LineType, Token
from chordsheet.tab_parser.parser import DEFAULT_MAX_BLANK_LINES, parse

__all__ = [
    "DEFAULT_MAX_BLANK_LINES",
    "ChordsOverLyricsFormatter",
    "LineType",
    "Token",
    "format_song",
    "parse",
]
