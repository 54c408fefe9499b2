"""Chord detection and line classification for chord sheets.

This module classifies tokens and whole lines of chords-over-lyrics text.
A line is a chord line only when every token on it parses as a chord.
"""

from __future__ import annotations

import re

from chordsheet.converter import parse_chord
from chordsheet.tab_parser.models import LineType, Token
from chordsheet.tab_parser.tokenizer import tokenize_line

# Section header pattern: [Section Name]
SECTION_HEADER_RE = re.compile(r"^\s*\[([^\[\]]+)\]\s*$")

# Comment line pattern: (something), typically instructions
COMMENT_RE = re.compile(r"^\s*\((.+)\)\s*$")

# Directive pattern: {name: value}
DIRECTIVE_RE = re.compile(r"^\s*\{[^{}]+\}\s*$")


def classify_token(token: Token) -> Token:
    """Classify a single token as chord, word, punct, or other.

    Parameters
    ----------
    token : Token
        The token to classify (with kind="other").

    Returns
    -------
    Token
        A new token with updated kind and chord fields.

    Examples
    --------
    >>> t = Token(text="Gm7", start=0, end=3)
    >>> classify_token(t).kind
    'chord'
    """
    text = token.text

    chord = parse_chord(text)
    if chord is not None:
        return Token(text=text, start=token.start, end=token.end, kind="chord", chord=chord)

    # Punctuation only
    if all(not c.isalnum() for c in text):
        return Token(text=text, start=token.start, end=token.end, kind="punct")

    # Contains alphabetic characters
    if any(c.isalpha() for c in text):
        return Token(text=text, start=token.start, end=token.end, kind="word")

    return token


def classify_tokens(tokens: list[Token]) -> list[Token]:
    """Classify all tokens in a list."""
    return [classify_token(t) for t in tokens]


def section_name(line: str) -> str | None:
    """Extract the section name from a header line.

    Bracketed chords such as ``[Am]`` are not section headers.

    Examples
    --------
    >>> section_name("[Verse 1]")
    'Verse 1'
    >>> section_name("[Am]") is None
    True
    >>> section_name("Hello world") is None
    True
    """
    match = SECTION_HEADER_RE.match(line)
    if match is None:
        return None
    name = match.group(1).strip()
    if not name or parse_chord(name) is not None:
        return None
    return name


def comment_text(line: str) -> str | None:
    """Extract the text of a parenthesized comment line.

    Examples
    --------
    >>> comment_text("(repeat 2x)")
    'repeat 2x'
    """
    match = COMMENT_RE.match(line)
    return match.group(1).strip() if match else None


def classify_line(line: str, tokens: list[Token] | None = None) -> LineType:
    """Classify a line based on its content.

    Parameters
    ----------
    line : str
        The line to classify.
    tokens : list[Token] | None
        Pre-classified tokens, or None to classify internally.

    Returns
    -------
    LineType
        The line classification.

    Examples
    --------
    >>> classify_line("")
    'empty'
    >>> classify_line("[Verse 1]")
    'section_header'
    >>> classify_line("(repeat)")
    'comment'
    >>> classify_line("C       G")
    'chord'
    >>> classify_line("Xyz123")
    'lyric'
    """
    if not line.strip():
        return "empty"

    if section_name(line) is not None:
        return "section_header"

    if DIRECTIVE_RE.match(line):
        return "directive"

    if COMMENT_RE.match(line):
        return "comment"

    if tokens is None:
        tokens = classify_tokens(tokenize_line(line))

    # Every token must be a chord; a single word makes it a lyric line
    if tokens and all(t.kind == "chord" for t in tokens):
        return "chord"

    return "lyric"
