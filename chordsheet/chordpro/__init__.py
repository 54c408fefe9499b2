"""ChordPro notation: inline ``[Chord]`` markers and ``{tag: value}`` directives."""

from chordsheet.chordpro.formatter import ChordProFormatter, format_song
from chordsheet.chordpro.parser import parse, strip_tab_sections

__all__ = [
    "ChordProFormatter",
    "format_song",
    "parse",
    "strip_tab_sections",
]
