"""Main chords-over-lyrics parser orchestration.

This module provides the parse() function that turns a plain-text chord
sheet (chord names above the lyric line they annotate) into a
:class:`~chordsheet.song.Song`.
"""

from __future__ import annotations

import logging

from chordsheet.chordpro.parser import parse_directive
from chordsheet.song import (
    COMMENT,
    SECTION_END_TAGS,
    SECTION_TAGS,
    START_OF_BRIDGE,
    START_OF_CHORUS,
    START_OF_TAB,
    START_OF_VERSE,
    Line,
    Segment,
    SegmentLine,
    Song,
    TagLine,
    split_lines,
)
from chordsheet.tab_parser.attachment import split_segments
from chordsheet.tab_parser.chord_detector import (
    classify_line,
    classify_tokens,
    comment_text,
    section_name,
)
from chordsheet.tab_parser.models import Token
from chordsheet.tab_parser.tokenizer import tokenize_line

logger = logging.getLogger(__name__)

DEFAULT_MAX_BLANK_LINES = 1

# First word of a section header -> section start tag
SECTION_KEYWORDS: dict[str, str] = {
    "verse": START_OF_VERSE,
    "chorus": START_OF_CHORUS,
    "bridge": START_OF_BRIDGE,
    "tab": START_OF_TAB,
}


def tokenize_and_classify(line: str) -> list[Token]:
    """Tokenize a line and classify all tokens."""
    return classify_tokens(tokenize_line(line))


def section_tag(name: str) -> str | None:
    """Return the section start tag for a header name, if it has one.

    Examples
    --------
    >>> section_tag("Verse 2")
    'start_of_verse'
    >>> section_tag("Intro") is None
    True
    """
    words = name.split()
    if not words:
        return None
    return SECTION_KEYWORDS.get(words[0].lower().rstrip(":"))


def create_segment_line(chord_line: str, lyric_line: str) -> SegmentLine:
    """Create a segment line from a chord line and the lyric line below it.

    Parameters
    ----------
    chord_line : str
        The chord line (raw).
    lyric_line : str
        The lyric line (raw).

    Returns
    -------
    SegmentLine
        The lyric split at the chord columns.
    """
    chords = [t for t in tokenize_and_classify(chord_line) if t.kind == "chord"]
    return SegmentLine(segments=split_segments(chords, lyric_line))


def create_chord_only_line(chord_line: str) -> SegmentLine:
    """Create a segment line for a chord line with no lyrics below.

    The gaps between chords become whitespace lyrics so the chord
    columns survive formatting.

    Examples
    --------
    >>> [(s.chord, s.lyrics) for s in create_chord_only_line("Am  G").segments]
    [('Am', '    '), ('G', '')]
    """
    chords = [t for t in tokenize_and_classify(chord_line) if t.kind == "chord"]
    spacing = " " * chords[-1].start if chords else ""
    return SegmentLine(segments=split_segments(chords, spacing))


class _SheetReader:
    """Accumulates lines while tracking the open section."""

    def __init__(self, preserve_whitespace: bool, max_blank_lines: int) -> None:
        self.preserve_whitespace = preserve_whitespace
        self.max_blank_lines = max_blank_lines
        self.lines: list[Line] = []
        self.open_section: str | None = None
        self.blank_run = 0

    def add(self, line: Line) -> None:
        self.blank_run = 0
        self.lines.append(line)

    def add_blank(self) -> None:
        self.blank_run += 1
        if self.preserve_whitespace or self.blank_run <= self.max_blank_lines:
            self.lines.append(SegmentLine())

    def close_section(self) -> None:
        if self.open_section is not None:
            self.lines.append(TagLine(name=SECTION_TAGS[self.open_section]))
            self.open_section = None

    def add_tag(self, tag: TagLine) -> None:
        if tag.name in SECTION_TAGS:
            self.close_section()
            self.open_section = tag.name
        elif tag.name in SECTION_END_TAGS:
            if self.open_section is not None and SECTION_TAGS[self.open_section] == tag.name:
                self.open_section = None
        self.add(tag)

    def add_section_header(self, name: str) -> None:
        tag = section_tag(name)
        if tag is None:
            # Intro, Solo, Outro and friends have no ChordPro section
            self.close_section()
            self.add(TagLine(name=COMMENT, value=name))
            return
        self.add_tag(TagLine(name=tag, value=name))


def parse(
    text: str,
    *,
    preserve_whitespace: bool = True,
    max_blank_lines: int = DEFAULT_MAX_BLANK_LINES,
) -> Song:
    """Parse a chords-over-lyrics sheet into a Song.

    This is the main entry point for chord sheet parsing.

    Algorithm
    ---------
    1. Split *text* into lines and classify each one.
    2. Pair each chord line with the lyric line that immediately follows
       it and split the lyric at the chord columns.
    3. Chord lines not followed by a lyric line become chord-only lines.
    4. ``[Verse]``/``[Chorus]``/``[Bridge]``/``[Tab]`` headers open a
       section, closed by the next header or the end of the text; other
       headers and ``(...)`` lines become comment tags.

    Parameters
    ----------
    text : str
        The raw chord sheet text.
    preserve_whitespace : bool
        Keep every blank line. When False, runs of blank lines collapse
        to at most ``max_blank_lines``.
    max_blank_lines : int
        Maximum consecutive blank lines kept when not preserving whitespace.

    Returns
    -------
    Song
        Structured representation of the chord sheet.

    Examples
    --------
    >>> song = parse("C       G\\nHello there friend")
    >>> [(s.chord, s.lyrics) for s in song.lines[0].segments]
    [('C', 'Hello '), ('G', 'there friend')]
    """
    lines = split_lines(text)
    reader = _SheetReader(preserve_whitespace, max_blank_lines)
    i = 0
    n = len(lines)

    while i < n:
        line = lines[i]
        tokens = tokenize_and_classify(line)
        line_type = classify_line(line, tokens)

        if line_type == "empty":
            reader.add_blank()
            i += 1
            continue

        if line_type == "section_header":
            reader.add_section_header(section_name(line) or "")
            i += 1
            continue

        if line_type == "directive":
            reader.add_tag(parse_directive(line.strip(), i + 1))
            i += 1
            continue

        if line_type == "comment":
            reader.add(TagLine(name=COMMENT, value=comment_text(line) or ""))
            i += 1
            continue

        if line_type == "chord":
            # Check if next line is a lyric line (for pairing)
            if i + 1 < n and classify_line(lines[i + 1]) == "lyric":
                reader.add(create_segment_line(line, lines[i + 1]))
                i += 2
                continue

            reader.add(create_chord_only_line(line))
            i += 1
            continue

        # Lyric line with no chord line above
        reader.add(SegmentLine(segments=(Segment(lyrics=line),)))
        i += 1

    reader.close_section()
    logger.debug("Parsed chord sheet with %d lines", len(reader.lines))
    return Song(lines=tuple(reader.lines))
