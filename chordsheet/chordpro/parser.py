"""ChordPro parser.

This module turns ChordPro source text into a :class:`~chordsheet.song.Song`:

  1. strip_tab_sections()  - optional pre-pass removing tab sections
  2. parse_directive()     - ``{name: value}`` lines into tag lines
  3. parse_lyrics()        - ``[Chord]lyrics`` lines into segments
  4. parse()               - full pipeline: raw text → Song
"""

from __future__ import annotations

import logging
from enum import Enum, auto

from chordsheet.exceptions import ParseError
from chordsheet.song import (
    END_OF_TAB,
    START_OF_TAB,
    CommentLine,
    Line,
    Segment,
    SegmentLine,
    Song,
    TagLine,
    normalize_tag_name,
    split_lines,
)

logger = logging.getLogger(__name__)


class _ScanState(Enum):
    NORMAL = auto()
    INSIDE_TAB = auto()


def _directive_name(line: str) -> str | None:
    """Return the long-form name of a well-formed directive line, else None."""
    stripped = line.strip()
    if not (stripped.startswith("{") and stripped.endswith("}")):
        return None
    body = stripped[1:-1]
    name = body.split(":", 1)[0].split(None, 1)
    return normalize_tag_name(name[0]) if name else None


def strip_tab_sections(text: str) -> str:
    """Remove every ``{start_of_tab}`` … ``{end_of_tab}`` section from *text*.

    Lines are scanned with a two-state machine. A start marker switches to
    INSIDE_TAB; the matching end marker (including its line) switches back.
    Start markers inside a tab section are ignored, an end marker outside
    one is kept as-is, and an unterminated tab section is left untouched.

    Parameters
    ----------
    text : str
        ChordPro source text.

    Returns
    -------
    str
        The text without its tab sections.

    Examples
    --------
    >>> strip_tab_sections("A\\n{sot}\\ne|--0--\\n{eot}\\nB\\n")
    'A\\nB\\n'
    """
    kept: list[str] = []
    pending: list[str] = []
    state = _ScanState.NORMAL

    for line in text.splitlines(keepends=True):
        name = _directive_name(line)

        if state is _ScanState.NORMAL:
            if name == START_OF_TAB:
                state = _ScanState.INSIDE_TAB
                pending = [line]
            else:
                kept.append(line)
            continue

        pending.append(line)
        if name == END_OF_TAB:
            logger.debug("Stripped tab section of %d lines", len(pending))
            state = _ScanState.NORMAL
            pending = []

    if state is _ScanState.INSIDE_TAB:
        logger.warning("Unterminated tab section left in place")
        kept.extend(pending)

    return "".join(kept)


def parse_directive(line: str, line_number: int) -> TagLine:
    """Parse a ``{name: value}`` directive line into a tag line.

    Parameters
    ----------
    line : str
        The stripped directive line, starting with ``{``.
    line_number : int
        1-based line number for error reporting.

    Returns
    -------
    TagLine
        The tag with its long-form name.

    Raises
    ------
    ParseError
        If the directive is not closed or has no name.

    Examples
    --------
    >>> parse_directive("{t: Amazing Grace}", 1)
    TagLine(name='title', value='Amazing Grace', kind='tag')
    >>> parse_directive("{soc}", 1).name
    'start_of_chorus'
    """
    if not line.endswith("}"):
        raise ParseError(f"unterminated directive {line!r}", line_number)

    body = line[1:-1]
    if "{" in body or "}" in body:
        raise ParseError(f"unexpected brace in directive {line!r}", line_number)

    if ":" in body:
        name, value = body.split(":", 1)
    else:
        # "{title Some Title}" form
        name, _, value = body.strip().partition(" ")

    name = name.strip()
    if not name:
        raise ParseError(f"directive without a name {line!r}", line_number)

    return TagLine(name=normalize_tag_name(name), value=value.strip())


def parse_lyrics(line: str, line_number: int) -> SegmentLine:
    """Split a lyric line with inline ``[Chord]`` markers into segments.

    Text before the first chord becomes a chordless segment; each chord
    starts a new segment holding the text up to the next chord. Empty
    brackets ``[]`` are dropped.

    Parameters
    ----------
    line : str
        The raw lyric line.
    line_number : int
        1-based line number for error reporting.

    Returns
    -------
    SegmentLine
        The line's segments.

    Raises
    ------
    ParseError
        If a ``[`` is never closed or a chord contains another ``[``.

    Examples
    --------
    >>> [(s.chord, s.lyrics) for s in parse_lyrics("[C]Hello [G]world", 1).segments]
    [('C', 'Hello '), ('G', 'world')]
    """
    segments: list[Segment] = []
    chord = ""
    text: list[str] = []
    i = 0
    n = len(line)

    while i < n:
        char = line[i]
        if char != "[":
            text.append(char)
            i += 1
            continue

        end = line.find("]", i + 1)
        if end == -1:
            raise ParseError(f"unclosed chord bracket at column {i + 1}", line_number)

        name = line[i + 1 : end].strip()
        if "[" in name:
            raise ParseError(f"nested chord bracket at column {i + 1}", line_number)
        i = end + 1

        if not name:
            continue

        if chord or text:
            segments.append(Segment(chord=chord, lyrics="".join(text)))
        chord = name
        text = []

    if chord or text:
        segments.append(Segment(chord=chord, lyrics="".join(text)))

    return SegmentLine(segments=tuple(segments))


def parse(text: str, *, show_tabs: bool = True) -> Song:
    """Parse ChordPro source text into a Song.

    This is the main entry point for ChordPro parsing.

    Parameters
    ----------
    text : str
        The ChordPro source text.
    show_tabs : bool
        When False, tab sections are removed by :func:`strip_tab_sections`
        before parsing.

    Returns
    -------
    Song
        Structured representation of the song.

    Raises
    ------
    ParseError
        If a directive or chord marker is malformed.

    Examples
    --------
    >>> song = parse("{title: Test}\\n[C]Hello [G]world\\n")
    >>> song.title
    'Test'
    >>> len(song.lines)
    2
    """
    if not show_tabs:
        text = strip_tab_sections(text)

    lines: list[Line] = []
    in_tab = False

    for number, raw in enumerate(split_lines(text), start=1):
        stripped = raw.strip()

        if stripped.startswith("{"):
            tag = parse_directive(stripped, number)
            if tag.name == START_OF_TAB:
                in_tab = True
            elif tag.name == END_OF_TAB:
                in_tab = False
            lines.append(tag)
            continue

        if not stripped:
            lines.append(SegmentLine())
            continue

        if in_tab:
            # Tablature is literal text, brackets included
            lines.append(SegmentLine(segments=(Segment(lyrics=raw),)))
            continue

        if stripped.startswith("#"):
            lines.append(CommentLine(text=stripped[1:].strip()))
            continue

        lines.append(parse_lyrics(raw, number))

    logger.debug("Parsed ChordPro song with %d lines", len(lines))
    return Song(lines=tuple(lines))
