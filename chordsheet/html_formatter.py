"""HTML formatter.

Renders a :class:`~chordsheet.song.Song` as nested ``<div>`` elements:
one ``row`` per line and one ``column`` per segment, each column holding a
``chord`` cell above a ``lyrics`` cell. Styling is left to the page.

Usage::

    from chordsheet.html_formatter import HtmlFormatter
    html = HtmlFormatter().format(song)
"""

from __future__ import annotations

from html import escape

from chordsheet.song import (
    ARTIST,
    SECTION_END_TAGS,
    SECTION_LABELS,
    SECTION_TAGS,
    TITLE,
    Line,
    Segment,
    Song,
    TagLine,
)

INDENT = "  "


def _div(css_class: str | None, content: str = "") -> str:
    if css_class is None:
        return f"<div>{content}</div>"
    return f'<div class="{css_class}">{content}</div>'


def format_segment(segment: Segment) -> str:
    """Return the column for one segment.

    Lyrics no longer than the chord are padded so neighbouring chords do
    not run together.

    Examples
    --------
    >>> format_segment(Segment("Am", "I"))
    '<div class="column"><div class="chord">Am</div><div class="lyrics">I  </div></div>'
    """
    lyrics = segment.lyrics
    if segment.chord and len(lyrics) <= len(segment.chord):
        lyrics += " " * (len(segment.chord) - len(lyrics) + 1)
    return _div(
        "column",
        _div("chord", escape(segment.chord)) + _div("lyrics", escape(lyrics)),
    )


def format_tag(tag: TagLine) -> str:
    """Return the row content for a tag line ("" for an empty row)."""
    value = escape(tag.value)
    if tag.name == TITLE:
        return _div("title", value)
    if tag.name == ARTIST:
        return _div("artist", value)
    if tag.name in SECTION_TAGS:
        return _div("comment", value or SECTION_LABELS[tag.name])
    if tag.name in SECTION_END_TAGS:
        return ""
    if tag.is_comment:
        return _div("comment", value)
    if tag.value:
        return _div(None, _div("meta-label", escape(tag.name)) + _div("meta-value", value))
    return ""


class HtmlFormatter:
    """Render a :class:`~chordsheet.song.Song` as an HTML fragment."""

    def format(self, song: Song) -> str:
        """Return the ``chord-sheet`` block for *song*, ending with a newline."""
        rows = [row for row in (self.format_line(line) for line in song.lines) if row is not None]
        body = "".join(f"{INDENT}{row}\n" for row in rows)
        return f'<div class="chord-sheet">\n{body}</div>\n'

    def format_line(self, line: Line) -> str | None:
        """Return the ``row`` element for *line*, or None when it is not rendered."""
        if line.kind == "segments":
            return _div("row", "".join(format_segment(s) for s in line.segments))
        if line.kind == "tag":
            return _div("row", format_tag(line))
        if line.kind == "comment":
            return None
        msg = f"Unknown line kind: {line.kind}"
        raise TypeError(msg)


def format_song(song: Song) -> str:
    """Shortcut for ``HtmlFormatter().format(song)``."""
    return HtmlFormatter().format(song)
