"""Pitch class operations for note spelling and transposition.

This module provides the fixed 12-tone chromatic mapping used to
transpose chord roots and bass notes.
"""

from __future__ import annotations

# Note name to pitch class (0-11, where C=0)
NOTE_TO_PC: dict[str, int] = {
    "C": 0,
    "C#": 1,
    "Db": 1,
    "D": 2,
    "D#": 3,
    "Eb": 3,
    "E": 4,
    "Fb": 4,
    "E#": 5,
    "F": 5,
    "F#": 6,
    "Gb": 6,
    "G": 7,
    "G#": 8,
    "Ab": 8,
    "A": 9,
    "A#": 10,
    "Bb": 10,
    "B": 11,
    "Cb": 11,
    "B#": 0,
}

# Pitch class to note name, one table per accidental preference
SHARP_NOTES: tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
FLAT_NOTES: tuple[str, ...] = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")

# Typographic accidentals accepted on input
ACCIDENTAL_ALIASES: dict[str, str] = {
    "♯": "#",
    "♭": "b",
}


def normalize_note(note: str) -> str:
    """Return the canonical spelling of a note name.

    The letter is upper-cased and typographic accidentals are replaced
    by their ASCII form.

    Examples
    --------
    >>> normalize_note("b♭")
    'Bb'
    >>> normalize_note("F♯")
    'F#'
    """
    if not note:
        return note
    accidental = "".join(ACCIDENTAL_ALIASES.get(c, c) for c in note[1:])
    return note[0].upper() + accidental


def note_to_pc(note: str) -> int:
    """Convert a note name to pitch class (0-11).

    Parameters
    ----------
    note : str
        Note name (e.g., "C", "F#", "Bb").

    Returns
    -------
    int
        Pitch class (0-11, where C=0).

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> note_to_pc("C")
    0
    >>> note_to_pc("F#")
    6
    >>> note_to_pc("Bb")
    10
    """
    if note in NOTE_TO_PC:
        return NOTE_TO_PC[note]
    msg = f"Unknown note: {note}"
    raise ValueError(msg)


def transpose_note(note: str, semitones: int) -> str:
    """Transpose a note name by a number of semitones.

    Notes spelled with a flat are re-spelled from the flat table, every
    other note from the sharp table. A shift of 0 (mod 12) returns the
    note unchanged.

    Parameters
    ----------
    note : str
        Note name (e.g., "C", "F#", "Bb").
    semitones : int
        Number of semitones to transpose (positive = up).

    Returns
    -------
    str
        The transposed note name.

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> transpose_note("C", 2)
    'D'
    >>> transpose_note("C", -1)
    'B'
    >>> transpose_note("Bb", 1)
    'B'
    >>> transpose_note("Bb", 3)
    'Db'
    """
    delta = semitones % 12
    if delta == 0:
        return note

    pc = (note_to_pc(note) + delta) % 12
    table = FLAT_NOTES if note.endswith("b") else SHARP_NOTES
    return table[pc]
