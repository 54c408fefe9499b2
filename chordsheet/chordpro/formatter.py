"""ChordPro formatter.

Renders a :class:`~chordsheet.song.Song` back to ChordPro (``.cho``) text.

Usage::

    from chordsheet.chordpro import ChordProFormatter
    formatter = ChordProFormatter()
    text = formatter.format(song)
    Path("output.cho").write_text(text)
"""

from chordsheet.song import Line, SegmentLine, Song, TagLine


class ChordProFormatter:
    """Render a :class:`~chordsheet.song.Song` to ChordPro text."""

    def format(self, song: Song) -> str:
        """Return ChordPro text for *song*.

        The returned string ends with a single newline (empty for a song
        without lines) and uses Unix line endings throughout.
        """
        if not song.lines:
            return ""
        return "\n".join(self.format_line(line) for line in song.lines) + "\n"

    def format_line(self, line: Line) -> str:
        if line.kind == "segments":
            return format_segments(line)
        if line.kind == "tag":
            return format_directive(line)
        if line.kind == "comment":
            return f"# {line.text}" if line.text else "#"
        msg = f"Unknown line kind: {line.kind}"
        raise TypeError(msg)


def format_segments(line: SegmentLine) -> str:
    """Return a segment line with inline ``[Chord]`` markers.

    Examples
    --------
    >>> from chordsheet.song import Segment
    >>> format_segments(SegmentLine((Segment("C", "Hello "), Segment("G", "world"))))
    '[C]Hello [G]world'
    """
    return "".join(
        f"[{segment.chord}]{segment.lyrics}" if segment.chord else segment.lyrics
        for segment in line.segments
    )


def format_directive(tag: TagLine) -> str:
    """Return ``{name: value}``, or ``{name}`` for a tag without value."""
    if tag.value:
        return f"{{{tag.name}: {tag.value}}}"
    return f"{{{tag.name}}}"


def format_song(song: Song) -> str:
    """Shortcut for ``ChordProFormatter().format(song)``."""
    return ChordProFormatter().format(song)
