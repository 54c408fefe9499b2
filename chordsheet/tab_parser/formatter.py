"""Chords-over-lyrics formatter.

Renders a :class:`~chordsheet.song.Song` as plain text with each chord
written on its own line, directly above the syllable it belongs to.
"""

from __future__ import annotations

from chordsheet.chordpro.formatter import format_directive
from chordsheet.song import (
    SECTION_END_TAGS,
    SECTION_TAGS,
    Line,
    Segment,
    SegmentLine,
    Song,
    TagLine,
)
from chordsheet.tab_parser.chord_detector import section_name
from chordsheet.tab_parser.parser import section_tag


def _past_end(segments: tuple[Segment, ...], index: int) -> bool:
    """True when this and every later segment has no lyrics."""
    return all(not segment.lyrics for segment in segments[index:])


def _keeps_attachment(segments: tuple[Segment, ...], index: int, shift: int, before: str) -> bool:
    """Check whether a chord drawn ``shift`` columns right of its segment
    start still attaches to that segment when the text is parsed again.

    It does when the segment starts a word that reaches the chord column.
    """
    lyrics = segments[index].lyrics
    starts_word = not before or before[-1].isspace()
    within_word = shift < len(lyrics) and not any(c.isspace() for c in lyrics[: shift + 1])
    return starts_word and within_word


def format_segment_line(line: SegmentLine) -> list[str]:
    """Return the output rows for a segment line.

    Each chord starts at the offset of its segment's first character. A
    chord that would touch the previous one moves right; the lyric line is
    padded with spaces at the segment boundary when the move would attach
    the chord to a different syllable.

    Parameters
    ----------
    line : SegmentLine
        The line to render.

    Returns
    -------
    list[str]
        ``[chord_row, lyric_row]``, ``[chord_row]`` for chord-only lines or
        ``[lyric_row]`` for lines without chords.

    Examples
    --------
    >>> line = SegmentLine((Segment("C", "Hello "), Segment("G", "there friend")))
    >>> format_segment_line(line)
    ['C     G', 'Hello there friend']
    """
    if not line.has_chords:
        return [line.lyrics]

    chord_row = ""
    lyric_row = ""
    last_chord_offset = -1

    for index, segment in enumerate(line.segments):
        if segment.has_chord:
            offset = len(lyric_row)
            position = max(offset, len(chord_row) + 1) if chord_row else offset
            shift = position - offset

            if (
                shift
                and not _past_end(line.segments, index)
                and (
                    offset <= last_chord_offset
                    or not _keeps_attachment(line.segments, index, shift, lyric_row)
                )
            ):
                lyric_row += " " * shift
                offset = position

            chord_row = chord_row.ljust(position) + segment.chord
            last_chord_offset = offset

        lyric_row += segment.lyrics

    if not lyric_row.strip():
        return [chord_row]
    return [chord_row, lyric_row]


def _ends_implicitly(lines: tuple[Line, ...], index: int) -> bool:
    """True when the section end at ``index`` is implied by what follows it.

    Reading the text back closes an open section at the next section
    header or at the end of the sheet.
    """
    following = index + 1
    if following == len(lines):
        return True
    line = lines[following]
    return line.kind == "tag" and line.name in SECTION_TAGS


def _reads_back_as_header(tag: TagLine) -> bool:
    return (
        bool(tag.value)
        and section_name(f"[{tag.value}]") == tag.value
        and section_tag(tag.value) == tag.name
    )


def format_tag(tag: TagLine) -> list[str]:
    """Return the output rows for a tag line.

    A section start becomes a ``[Name]`` header when its value reads back
    as the same section, otherwise a ``{start_of_...}`` directive. Section
    ends produce no row (see :meth:`ChordsOverLyricsFormatter.format`).
    Comments are wrapped in parentheses and any other tag is kept as a
    ``{name: value}`` directive.

    Examples
    --------
    >>> format_tag(TagLine("start_of_chorus", "Chorus 2"))
    ['[Chorus 2]']
    >>> format_tag(TagLine("start_of_chorus"))
    ['{start_of_chorus}']
    >>> format_tag(TagLine("comment", "x2"))
    ['(x2)']
    """
    if tag.name in SECTION_TAGS:
        if _reads_back_as_header(tag):
            return [f"[{tag.value}]"]
        return [format_directive(tag)]
    if tag.name in SECTION_END_TAGS:
        return []
    if tag.is_comment:
        return [f"({tag.value})"]
    return [format_directive(tag)]


class ChordsOverLyricsFormatter:
    """Render a :class:`~chordsheet.song.Song` as chords-over-lyrics text."""

    def format(self, song: Song) -> str:
        """Return chords-over-lyrics text for *song*, ending with a newline.

        A section end is written as an ``{end_of_...}`` directive only where
        the next line would not close the section anyway.
        """
        rows: list[str] = []
        for index, line in enumerate(song.lines):
            if (
                line.kind == "tag"
                and line.name in SECTION_END_TAGS
                and not _ends_implicitly(song.lines, index)
            ):
                rows.append(format_directive(line))
                continue
            rows.extend(self.format_line(line))
        if not rows:
            return ""
        return "\n".join(rows) + "\n"

    def format_line(self, line: Line) -> list[str]:
        if line.kind == "segments":
            return format_segment_line(line)
        if line.kind == "tag":
            return format_tag(line)
        if line.kind == "comment":
            # Source comments are not part of the rendered sheet
            return []
        msg = f"Unknown line kind: {line.kind}"
        raise TypeError(msg)


def format_song(song: Song) -> str:
    """Shortcut for ``ChordsOverLyricsFormatter().format(song)``."""
    return ChordsOverLyricsFormatter().format(song)
