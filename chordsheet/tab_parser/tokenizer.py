"""Column-aware tokenizer for chord sheets.

Chord-to-syllable alignment depends on the column where each chord
starts in monospace text, so tokens keep their spans.
"""

import re

from chordsheet.tab_parser.models import Token

_TOKEN_RE = re.compile(r"\S+")


def tokenize_line(line: str) -> list[Token]:
    """Tokenize a line preserving column spans.

    Splits on whitespace while tracking the start and end column positions
    of each token. The line is not stripped, so columns match the source.

    Parameters
    ----------
    line : str
        The line to tokenize. Should not include newline characters.

    Returns
    -------
    list[Token]
        Tokens with text, start (inclusive), end (exclusive) and kind
        "other" (classification happens in chord_detector).

    Examples
    --------
    >>> [(t.text, t.start, t.end) for t in tokenize_line("C       G")]
    [('C', 0, 1), ('G', 8, 9)]
    """
    return [Token(text=m.group(), start=m.start(), end=m.end()) for m in _TOKEN_RE.finditer(line)]
