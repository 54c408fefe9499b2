"""Data models for parsed chord sheets.

This module defines the structured song document shared by both parsers,
the transforms and the formatters: segments pairing a chord with lyric
text, tag lines for metadata and section markers, and source comments.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

LineKind = Literal["segments", "tag", "comment"]

TITLE = "title"
SUBTITLE = "subtitle"
ARTIST = "artist"
KEY = "key"
CAPO = "capo"
COMMENT = "comment"
COMMENT_ITALIC = "comment_italic"
COMMENT_BOX = "comment_box"
START_OF_CHORUS = "start_of_chorus"
END_OF_CHORUS = "end_of_chorus"
START_OF_VERSE = "start_of_verse"
END_OF_VERSE = "end_of_verse"
START_OF_BRIDGE = "start_of_bridge"
END_OF_BRIDGE = "end_of_bridge"
START_OF_TAB = "start_of_tab"
END_OF_TAB = "end_of_tab"

# Short directive names and their long form
TAG_ALIASES: dict[str, str] = {
    "t": TITLE,
    "st": SUBTITLE,
    "a": ARTIST,
    "k": KEY,
    "c": COMMENT,
    "ci": COMMENT_ITALIC,
    "cb": COMMENT_BOX,
    "soc": START_OF_CHORUS,
    "eoc": END_OF_CHORUS,
    "sov": START_OF_VERSE,
    "eov": END_OF_VERSE,
    "sob": START_OF_BRIDGE,
    "eob": END_OF_BRIDGE,
    "sot": START_OF_TAB,
    "eot": END_OF_TAB,
}

COMMENT_TAGS = frozenset({COMMENT, COMMENT_ITALIC, COMMENT_BOX})

# Section start tag -> matching end tag
SECTION_TAGS: dict[str, str] = {
    START_OF_CHORUS: END_OF_CHORUS,
    START_OF_VERSE: END_OF_VERSE,
    START_OF_BRIDGE: END_OF_BRIDGE,
    START_OF_TAB: END_OF_TAB,
}

SECTION_END_TAGS = frozenset(SECTION_TAGS.values())

# Default label for a section start tag without a value
SECTION_LABELS: dict[str, str] = {
    START_OF_CHORUS: "Chorus",
    START_OF_VERSE: "Verse",
    START_OF_BRIDGE: "Bridge",
    START_OF_TAB: "Tab",
}


def normalize_tag_name(name: str) -> str:
    """Return the long form of a directive name.

    Examples
    --------
    >>> normalize_tag_name("SOC")
    'start_of_chorus'
    >>> normalize_tag_name("x_custom")
    'x_custom'
    """
    name = name.strip().lower()
    return TAG_ALIASES.get(name, name)


@dataclass(frozen=True)
class Segment:
    """A run of lyric text with the chord played on its first syllable.

    Parameters
    ----------
    chord : str
        The chord text as written, or "" when the segment has no chord.
    lyrics : str
        The lyric text, possibly empty.

    Examples
    --------
    >>> Segment(chord="C", lyrics="Hello ").has_chord
    True
    """

    chord: str = ""
    lyrics: str = ""

    @property
    def has_chord(self) -> bool:
        return self.chord != ""


@dataclass(frozen=True)
class SegmentLine:
    """A lyric line split into segments. No segments means a blank line."""

    segments: tuple[Segment, ...] = ()
    kind: Literal["segments"] = "segments"

    @property
    def lyrics(self) -> str:
        """The lyric line with all chord annotations removed."""
        return "".join(segment.lyrics for segment in self.segments)

    @property
    def has_chords(self) -> bool:
        return any(segment.has_chord for segment in self.segments)

    @property
    def is_blank(self) -> bool:
        return not self.segments


@dataclass(frozen=True)
class TagLine:
    """A metadata or section-marker directive.

    Parameters
    ----------
    name : str
        Long-form directive name (e.g., "title", "start_of_chorus").
    value : str
        The directive value, "" when absent.
    """

    name: str
    value: str = ""
    kind: Literal["tag"] = "tag"

    @property
    def is_comment(self) -> bool:
        return self.name in COMMENT_TAGS


@dataclass(frozen=True)
class CommentLine:
    """A source comment, not meant to be rendered (``# ...`` in ChordPro)."""

    text: str
    kind: Literal["comment"] = "comment"


Line = SegmentLine | TagLine | CommentLine


@dataclass(frozen=True)
class Song:
    """Complete parsed song.

    Parameters
    ----------
    lines : tuple[Line, ...]
        All lines of the song in source order.
    """

    lines: tuple[Line, ...] = ()

    @property
    def metadata(self) -> dict[str, str]:
        """First value of every non-section tag, keyed by tag name."""
        result: dict[str, str] = {}
        for line in self.lines:
            if line.kind != "tag" or line.name in SECTION_TAGS or line.name in SECTION_END_TAGS:
                continue
            result.setdefault(line.name, line.value)
        return result

    @property
    def title(self) -> str | None:
        return self.metadata.get(TITLE)

    @property
    def artist(self) -> str | None:
        return self.metadata.get(ARTIST)

    @property
    def segment_lines(self) -> tuple[SegmentLine, ...]:
        return tuple(line for line in self.lines if line.kind == "segments")


def split_lines(text: str) -> list[str]:
    """Split input text into lines.

    Normalizes line endings and preserves original line content
    (only strips the newline character). A final newline does not
    start an extra line.

    Parameters
    ----------
    text : str
        The raw input text.

    Returns
    -------
    list[str]
        List of lines without trailing newlines.

    Examples
    --------
    >>> split_lines("a\\r\\nb\\n")
    ['a', 'b']
    >>> split_lines("")
    []
    """
    # Normalize line endings
    text = text.replace("\r\n", "\n").replace("\r", "\n")

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines
