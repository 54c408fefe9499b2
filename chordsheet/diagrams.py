"""Guitar chord diagram lookup.

Chord diagrams are stored as a JSON object keyed by chord name, each
entry a list of voicings::

    {"Am": [{"positions": ["x", "0", "2", "2", "1", "0"],
             "fingerings": [["0", "0", "2", "3", "1", "0"]]}]}

Names follow the usual diagram-book spelling: "C", "Am", "C+", "G7",
"D/F#".
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from chordsheet.models import Chord

logger = logging.getLogger(__name__)

MAJOR_QUALITIES = frozenset({"", "M", "maj"})
MINOR_QUALITIES = frozenset({"m", "min", "-"})
AUGMENTED_QUALITIES = frozenset({"aug", "+"})


def diagram_name(chord: Chord, *, fix_suspended: bool = False) -> str:
    """Return the name a chord is filed under in a diagram collection.

    Parameters
    ----------
    chord : Chord
        The chord to look up.
    fix_suspended : bool
        Spell a bare ``sus`` suffix as ``sus4``.

    Returns
    -------
    str
        The diagram name.

    Examples
    --------
    >>> diagram_name(Chord("A", "min"))
    'Am'
    >>> diagram_name(Chord("C", "aug", "E"))
    'C+/E'
    >>> diagram_name(Chord("D", "7sus"), fix_suspended=True)
    'D7sus4'
    """
    quality = chord.quality
    if quality in MAJOR_QUALITIES:
        suffix = ""
    elif quality in MINOR_QUALITIES:
        suffix = "m"
    elif quality in AUGMENTED_QUALITIES:
        suffix = "+"
    elif fix_suspended and quality.endswith("sus"):
        suffix = f"{quality}4"
    else:
        suffix = quality

    name = f"{chord.root}{suffix}"
    if chord.bass:
        name = f"{name}/{chord.bass}"
    return name


@dataclass(frozen=True)
class ChordPosition:
    """One voicing of a chord.

    Parameters
    ----------
    positions : tuple[str, ...]
        Fret per string, low to high ("x" for a muted string).
    fingerings : tuple[tuple[str, ...], ...]
        Alternative finger assignments for the positions.
    """

    positions: tuple[str, ...]
    fingerings: tuple[tuple[str, ...], ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping) -> ChordPosition:
        if "positions" not in data:
            msg = f"Chord position without 'positions': {data!r}"
            raise ValueError(msg)
        return cls(
            positions=tuple(str(p) for p in data["positions"]),
            fingerings=tuple(tuple(str(f) for f in row) for row in data.get("fingerings", ())),
        )


class ChordDiagrams:
    """Collection of chord voicings.

    Lookup tries the exact name first and then ignores case, so "CM7" and
    "Cm7" stay distinct when both are present.

    Parameters
    ----------
    data : Mapping[str, list]
        Chord name to list of ``{"positions": ..., "fingerings": ...}``.

    Examples
    --------
    >>> diagrams = ChordDiagrams({"Am": [{"positions": ["x", "0", "2", "2", "1", "0"]}]})
    >>> diagrams.lookup(Chord("A", "min"))[0].positions[2]
    '2'
    """

    def __init__(self, data: Mapping[str, list]):
        self._voicings: dict[str, tuple[ChordPosition, ...]] = {
            name: tuple(ChordPosition.from_dict(entry) for entry in entries)
            for name, entries in data.items()
        }
        self._folded: dict[str, str] = {}
        for name in self._voicings:
            self._folded.setdefault(name.lower(), name)

    @classmethod
    def from_file(cls, path: str | Path) -> ChordDiagrams:
        """Load diagrams from a JSON file."""
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            msg = f"Expected a JSON object of chord diagrams in {path}"
            raise ValueError(msg)
        logger.debug("Loaded %d chord diagrams from %s", len(data), path)
        return cls(data)

    def __len__(self) -> int:
        return len(self._voicings)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._resolve(name) is not None

    def _resolve(self, name: str) -> str | None:
        if name in self._voicings:
            return name
        return self._folded.get(name.lower())

    def lookup(self, chord: Chord, *, fix_suspended: bool = False) -> tuple[ChordPosition, ...]:
        """Return the voicings for *chord*.

        A slash chord without its own diagram falls back to the chord
        without bass. Returns an empty tuple when nothing matches.
        """
        candidates = [diagram_name(chord, fix_suspended=fix_suspended)]
        if chord.bass:
            candidates.append(diagram_name(replace(chord, bass=None), fix_suspended=fix_suspended))

        for name in candidates:
            key = self._resolve(name)
            if key is not None and self._voicings[key]:
                return self._voicings[key]

        logger.debug("No diagram for chord %s", chord)
        return ()
