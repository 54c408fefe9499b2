"""Chord symbol parsing backed by pychord.

This module splits chord symbols such as "F#m7/C#" into a
:class:`~chordsheet.models.Chord` and validates the quality against
pychord's quality table.
"""

from __future__ import annotations

import logging
import re

from chordsheet.models import Chord
from chordsheet.notes import normalize_note

logger = logging.getLogger(__name__)

MAX_CHORD_LENGTH = 15

# Root with optional accidental, free-form suffix, optional slash bass
CHORD_SYMBOL_RE = re.compile(
    r"^(?P<root>[A-G](?:#|b|♯|♭)?)"
    r"(?P<quality>[^/\s]*)"
    r"(?:/(?P<bass>[A-G](?:#|b|♯|♭)?))?$"
)

# Suffix spellings mapped to an equivalent pychord quality.
# Only used for validation, the chord keeps the suffix as written.
QUALITY_ALIASES: dict[str, str] = {
    "+": "aug",
    "+7": "aug7",
    "7+": "aug7",
    "sus": "sus4",
    "7sus": "7sus4",
    "min": "m",
    "min7": "m7",
    "-": "m",
    "-7": "m7",
    "M": "",
    "maj": "",
    "°": "dim",
    "°7": "dim7",
    "ø": "m7-5",
    "ø7": "m7-5",
}


def _is_known_quality(quality: str) -> bool:
    """Check a chord suffix against pychord's quality table."""
    from pychord import Chord as PyChord

    candidate = QUALITY_ALIASES.get(quality, quality)
    try:
        PyChord(f"C{candidate}")
    except Exception:  # pychord may raise various exceptions
        return False
    return True


def parse_chord(text: str) -> Chord | None:
    """Parse a chord symbol into a Chord object.

    Parameters
    ----------
    text : str
        The chord symbol (e.g., "Gm7", "C/E", "Bbsus4").

    Returns
    -------
    Chord | None
        The parsed Chord, or None if ``text`` is not a chord symbol.

    Examples
    --------
    >>> parse_chord("Gm7")
    Chord(root='G', quality='m7', bass=None)
    >>> str(parse_chord("B♭/D"))
    'Bb/D'
    >>> parse_chord("Hello") is None
    True
    """
    if not text or len(text) > MAX_CHORD_LENGTH:
        return None

    match = CHORD_SYMBOL_RE.match(text)
    if match is None:
        return None

    quality = match.group("quality")
    if not _is_known_quality(quality):
        return None

    bass = match.group("bass")
    return Chord(
        root=normalize_note(match.group("root")),
        quality=quality,
        bass=normalize_note(bass) if bass else None,
    )


def is_chord(text: str) -> bool:
    """Check if text is a chord symbol.

    Examples
    --------
    >>> is_chord("C/E")
    True
    >>> is_chord("Xyz123")
    False
    """
    return parse_chord(text) is not None


def to_pychord(chord: Chord) -> str:
    """Convert to pychord notation string.

    Parameters
    ----------
    chord : Chord
        The chord to convert.

    Returns
    -------
    str
        Chord in pychord notation (e.g., "Gm7", "Caug/E").

    Examples
    --------
    >>> to_pychord(Chord(root="C", quality="+"))
    'Caug'
    """
    result = f"{chord.root}{QUALITY_ALIASES.get(chord.quality, chord.quality)}"
    if chord.bass:
        result = f"{result}/{chord.bass}"
    return result


def chord_components(chord: Chord) -> list[str]:
    """Return the note names that make up a chord.

    Parameters
    ----------
    chord : Chord
        The chord to spell out.

    Returns
    -------
    list[str]
        Note names from the root upwards, bass first for slash chords.
        Empty if pychord cannot spell the chord.

    Examples
    --------
    >>> chord_components(Chord(root="A", quality="m"))
    ['A', 'C', 'E']
    """
    from pychord import Chord as PyChord

    try:
        return list(PyChord(to_pychord(chord)).components())
    except Exception:  # pychord may raise various exceptions
        logger.warning("Could not spell chord: %s", chord)
        return []
