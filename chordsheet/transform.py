"""Song-wide chord transforms.

This module applies chord operations across a whole
:class:`~chordsheet.song.Song`, independent of the parser that produced
it: transposition, collection of the distinct chords, and detection of
chord annotations that do not parse.
"""

from __future__ import annotations

import logging
import re
from dataclasses import replace

from chordsheet import chordpro, tab_parser
from chordsheet.chordpro.formatter import format_segments
from chordsheet.converter import parse_chord
from chordsheet.exceptions import ChordParseFailure, ParseError
from chordsheet.models import Chord
from chordsheet.song import Line, Segment, SegmentLine, Song
from chordsheet.tab_parser.formatter import format_segment_line

logger = logging.getLogger(__name__)

# URL-encoding leftovers such as "%20" found in stored comments
ENCODED_CHAR_RE = re.compile(r"%\d{2}")


def _transpose_segment(segment: Segment, semitones: int, line_index: int) -> Segment:
    if not segment.has_chord:
        return segment

    chord = parse_chord(segment.chord)
    if chord is None:
        logger.warning(
            "Could not parse chord %r on line %d, left unchanged", segment.chord, line_index + 1
        )
        return segment

    return replace(segment, chord=str(chord.transpose(semitones)))


def _transpose_segment_line(line: SegmentLine, semitones: int, line_index: int) -> SegmentLine:
    if not line.has_chords:
        return line
    segments = tuple(_transpose_segment(s, semitones, line_index) for s in line.segments)
    return SegmentLine(segments=segments)


def _transpose_chord_row(text: str, semitones: int, line_index: int) -> str:
    """Transpose a comment that holds only chord names, such as "Am G C"."""
    try:
        embedded = tab_parser.parse(text)
    except ParseError:
        return text
    if len(embedded.lines) != 1:
        return text

    line = embedded.lines[0]
    if line.kind != "segments" or not line.has_chords or line.lyrics.strip():
        return text
    return format_segment_line(_transpose_segment_line(line, semitones, line_index))[0]


def _transpose_embedded(text: str, semitones: int, line_index: int) -> str:
    """Transpose the chords embedded in comment text."""
    if "[" not in text:
        return _transpose_chord_row(text, semitones, line_index)

    try:
        embedded = chordpro.parse(text)
    except ParseError:
        logger.warning("Comment on line %d has malformed chords, left unchanged", line_index + 1)
        return text

    rows: list[str] = []
    for line in embedded.lines:
        if line.kind != "segments":
            return text
        rows.append(format_segments(_transpose_segment_line(line, semitones, line_index)))

    return "\n".join(rows)


def transpose(song: Song, semitones: int) -> Song:
    """Transpose every chord of a song.

    Chord texts are parsed, transposed and written back in canonical
    form. Chord texts that do not parse are kept as they are and a warning
    is logged. Chords embedded in comment tags and ``#`` comment lines
    (``[Chord]`` markers or a bare row of chord names) are transposed too.

    Parameters
    ----------
    song : Song
        The song to transpose. It is not modified.
    semitones : int
        Number of semitones (positive = up), taken mod 12.

    Returns
    -------
    Song
        The transposed song, or ``song`` itself for a shift of 0 mod 12.

    Examples
    --------
    >>> song = chordpro.parse("[C]Hello [G/B]world")
    >>> [s.chord for s in transpose(song, 2).lines[0].segments]
    ['D', 'A/C#']
    """
    if semitones % 12 == 0:
        return song

    lines: list[Line] = []
    for index, line in enumerate(song.lines):
        if line.kind == "segments":
            lines.append(_transpose_segment_line(line, semitones, index))
        elif line.kind == "tag" and line.is_comment:
            lines.append(replace(line, value=_transpose_embedded(line.value, semitones, index)))
        elif line.kind == "comment":
            lines.append(replace(line, text=_transpose_embedded(line.text, semitones, index)))
        else:
            lines.append(line)

    logger.debug("Transposed song by %d semitones", semitones)
    return Song(lines=tuple(lines))


def _parse_embedded(text: str) -> Song:
    """Parse chords embedded in comment text.

    Bracketed chords are read as ChordPro, anything else as a
    chords-over-lyrics line (e.g., "Intro: Am G" stays lyrics, "Am G C"
    is a chord line).
    """
    cleaned = ENCODED_CHAR_RE.sub("", text)
    try:
        if "[" in cleaned:
            return chordpro.parse(cleaned)
        return tab_parser.parse(cleaned)
    except ParseError as exc:
        logger.warning("Could not read chords from comment %r: %s", text, exc)
        return Song()


def _collect_chords(song: Song, chords: list[Chord], seen: set[str]) -> None:
    for index, line in enumerate(song.lines):
        if line.kind == "segments":
            for segment in line.segments:
                if not segment.has_chord:
                    continue
                chord = parse_chord(segment.chord)
                if chord is None:
                    logger.warning(
                        "Could not parse chord %r on line %d", segment.chord, index + 1
                    )
                    continue
                name = str(chord)
                if name not in seen:
                    seen.add(name)
                    chords.append(chord)
        elif line.kind == "tag":
            if line.is_comment and line.value:
                _collect_chords(_parse_embedded(line.value), chords, seen)
        elif line.kind == "comment":
            if line.text:
                _collect_chords(_parse_embedded(line.text), chords, seen)
        else:
            msg = f"Unknown line kind: {line.kind}"
            raise TypeError(msg)


def extract_chords(song: Song) -> list[Chord]:
    """Return the distinct chords of a song in first-seen order.

    Chords are deduplicated by their canonical string. Comments are read
    for embedded chords as well, after removing URL-encoding leftovers
    such as ``%20``.

    Parameters
    ----------
    song : Song
        The song to scan.

    Returns
    -------
    list[Chord]
        Distinct chords, ordered by first appearance.

    Examples
    --------
    >>> song = chordpro.parse("[Am]One [C]two [Am]three\\n{c: [Dm]hidden chord}")
    >>> [str(c) for c in extract_chords(song)]
    ['Am', 'C', 'Dm']
    """
    chords: list[Chord] = []
    _collect_chords(song, chords, set())
    return chords


def find_unparseable_chords(song: Song) -> list[ChordParseFailure]:
    """Return every chord annotation of a song that does not parse.

    Examples
    --------
    >>> find_unparseable_chords(chordpro.parse("[C]ok [*Riff]hm"))
    [ChordParseFailure(text='*Riff', line_index=0)]
    """
    failures: list[ChordParseFailure] = []
    for index, line in enumerate(song.lines):
        if line.kind != "segments":
            continue
        for segment in line.segments:
            if segment.has_chord and parse_chord(segment.chord) is None:
                failures.append(ChordParseFailure(text=segment.chord, line_index=index))
    return failures
