"""Chord-to-syllable attachment for chords-over-lyrics text.

This module splits a lyric line into segments at the columns of the
chords written above it. A chord standing inside a word attaches to the
start of that word, so ``G`` over the ``e`` of "there" begins the segment
at "there".
"""

from __future__ import annotations

from chordsheet.song import Segment
from chordsheet.tab_parser.models import Token


def find_word_start(lyric: str, column: int) -> int:
    """Return the column where the word covering ``column`` begins.

    Examples
    --------
    >>> find_word_start("Hello there friend", 8)
    6
    >>> find_word_start("Hello there friend", 0)
    0
    """
    start = column
    while start > 0 and not lyric[start - 1].isspace():
        start -= 1
    return start


def segment_boundary(chord: Token, lyric: str, previous: int) -> int:
    """Return the lyric column where the segment of ``chord`` begins.

    Strategy:
    1. Chord at or past the end of the lyric: the end of the lyric
    2. Chord over whitespace: the chord's own column
    3. Chord inside a word: the start of that word, unless an earlier
       chord already starts there, in which case the chord's own column

    Parameters
    ----------
    chord : Token
        The chord token.
    lyric : str
        The lyric line below the chord line.
    previous : int
        Boundary of the previous chord on the line, -1 for the first one.

    Returns
    -------
    int
        The boundary column, never before ``previous``.

    Examples
    --------
    >>> segment_boundary(Token("G", 8, 9, "chord"), "Hello there friend", 0)
    6
    >>> segment_boundary(Token("D", 30, 31, "chord"), "Hello", 0)
    5
    """
    column = chord.start
    if column >= len(lyric):
        return len(lyric)

    if lyric[column].isspace():
        return column

    word_start = find_word_start(lyric, column)
    if word_start > previous:
        return word_start
    return column


def split_segments(chords: list[Token], lyric: str) -> tuple[Segment, ...]:
    """Split a lyric line into segments at the chord boundaries.

    Text before the first boundary becomes a chordless segment. The last
    chord's segment runs to the end of the line; chords past the end get
    empty segments. Concatenating the segment lyrics gives back ``lyric``.

    Parameters
    ----------
    chords : list[Token]
        Chord tokens from the chord line, ordered by column.
    lyric : str
        The lyric line.

    Returns
    -------
    tuple[Segment, ...]
        The segments of the line.

    Examples
    --------
    >>> chords = [Token("C", 0, 1, "chord"), Token("G", 8, 9, "chord")]
    >>> [(s.chord, s.lyrics) for s in split_segments(chords, "Hello there friend")]
    [('C', 'Hello '), ('G', 'there friend')]
    """
    if not chords:
        return (Segment(lyrics=lyric),) if lyric else ()

    boundaries: list[int] = []
    previous = -1
    for chord in chords:
        previous = segment_boundary(chord, lyric, previous)
        boundaries.append(previous)

    segments: list[Segment] = []
    if boundaries[0] > 0:
        segments.append(Segment(lyrics=lyric[: boundaries[0]]))

    ends = [*boundaries[1:], len(lyric)]
    for chord, start, end in zip(chords, boundaries, ends):
        segments.append(Segment(chord=chord.text, lyrics=lyric[start:end]))

    return tuple(segments)
