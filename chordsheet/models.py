"""Chord data model for chordsheet.

This module provides the value type for a single musical chord as it
appears in a chord sheet (e.g., "Am7", "G/B", "Csus4").
"""

from dataclasses import dataclass

from chordsheet.notes import transpose_note


@dataclass(frozen=True)
class Chord:
    """Chord symbol split into root, quality and bass.

    Parameters
    ----------
    root : str
        The root note of the chord (e.g., "C", "F#", "Bb").
    quality : str
        The chord suffix exactly as written (e.g., "", "m", "maj7", "sus4", "+").
    bass : str | None
        The bass note if different from root (for slash chords).

    Examples
    --------
    >>> chord = Chord(root="G", quality="m7")
    >>> str(chord)
    'Gm7'
    >>> str(Chord(root="C", quality="", bass="E"))
    'C/E'
    """

    root: str
    quality: str = ""
    bass: str | None = None

    def transpose(self, semitones: int) -> "Chord":
        """Return a new chord shifted by ``semitones``.

        The root and bass are moved along the chromatic scale; the quality
        is kept verbatim.

        Parameters
        ----------
        semitones : int
            Number of semitones to transpose (positive = up), taken mod 12.

        Returns
        -------
        Chord
            Transposed chord.

        Examples
        --------
        >>> Chord(root="A", quality="m").transpose(3).root
        'C'
        >>> str(Chord(root="G", bass="B").transpose(-2))
        'F/A'
        """
        if semitones % 12 == 0:
            return self

        bass = transpose_note(self.bass, semitones) if self.bass else None
        return Chord(
            root=transpose_note(self.root, semitones),
            quality=self.quality,
            bass=bass,
        )

    def __str__(self) -> str:
        """Return the canonical chord symbol."""
        result = f"{self.root}{self.quality}"
        if self.bass:
            result = f"{result}/{self.bass}"
        return result
