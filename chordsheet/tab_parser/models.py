"""Data models for chords-over-lyrics parsing.

This module defines the column-aware tokens produced while reading a
chord sheet, and the line classifications derived from them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from chordsheet.models import Chord


TokenKind = Literal["chord", "word", "punct", "other"]

LineType = Literal["chord", "lyric", "empty", "comment", "section_header", "directive"]


@dataclass(frozen=True)
class Token:
    """A token with column span information.

    Parameters
    ----------
    text : str
        The token text content.
    start : int
        Inclusive start column (0-indexed).
    end : int
        Exclusive end column.
    kind : TokenKind
        The token classification.
    chord : Chord | None
        Parsed Chord object if kind is "chord", None otherwise.

    Examples
    --------
    >>> token = Token(text="Gm7", start=0, end=3, kind="chord")
    >>> token.start, token.end
    (0, 3)
    """

    text: str
    start: int
    end: int
    kind: TokenKind = "other"
    chord: Chord | None = None
