"""Pitch classes and absolute pitches.

This module provides the twelve chromatic pitch classes (spelled with sharps,
the canonical naming used throughout fretpick) and the ``Pitch`` value type
that the fretboard lattice hands out for every (string, fret) position.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique
from functools import total_ordering
from typing import Dict

MAX_NOTES = 12
"""Number of distinct note names in the chromatic scale."""


@unique
class NoteName(Enum):
    """Enumeration of the twelve chromatic note names.

    Values correspond to semitone offsets from C within an octave.
    Accidentals are always spelled as sharps; flats are normalized on input.
    """

    C = 0
    Cs = 1
    D = 2
    Ds = 3
    E = 4
    F = 5
    Fs = 6
    G = 7
    Gs = 8
    A = 9
    As = 10
    B = 11

    @property
    def label(self) -> str:
        """The printable name of this note, e.g. ``C#``."""
        return self.name.replace("s", "#")

    def add_steps(self, steps: int) -> NoteName:
        """Add semitone steps to this note name.

        Args:
            steps: Number of semitones to add (can be negative).

        Returns:
            The resulting note name after adding the steps.
        """
        return NOTE_LOOKUP[(self.value + steps) % MAX_NOTES]

    def steps_from(self, root: NoteName) -> int:
        """Semitone distance upward from ``root`` to this note, modulo 12."""
        return (self.value - root.value) % MAX_NOTES

    @staticmethod
    def from_parts(letter: str, accidental: str = "") -> NoteName:
        """Build a note name from a natural letter and an optional accidental.

        Enharmonic spellings collapse onto the sharp-based name, so ``Db`` is
        ``C#`` and ``Cb`` is ``B``.

        Raises:
            KeyError: If the letter or accidental is not recognized.
        """
        offset = _NATURALS[letter] + _ACCIDENTALS[accidental]
        return NOTE_LOOKUP[offset % MAX_NOTES]

    def __str__(self) -> str:
        return self.label


_NATURALS: Dict[str, int] = {
    "C": 0,
    "D": 2,
    "E": 4,
    "F": 5,
    "G": 7,
    "A": 9,
    "B": 11,
}

_ACCIDENTALS: Dict[str, int] = {
    "": 0,
    "#": 1,
    "♯": 1,
    "b": -1,
    "♭": -1,
}


def _build_note_lookup() -> Dict[int, NoteName]:
    d: Dict[int, NoteName] = {}
    for n in NoteName:
        d[n.value] = n
    assert len(d) == MAX_NOTES
    return d


NOTE_LOOKUP = _build_note_lookup()
"""Lookup table from semitone offset (0-11) to NoteName."""


@total_ordering
@dataclass(frozen=True)
class Pitch:
    """An absolute pitch: pitch class, octave and MIDI note number.

    Octaves follow scientific pitch notation, so middle C (MIDI 60) is C4.
    Pitches order by MIDI number.
    """

    name: NoteName
    octave: int
    midi: int

    @staticmethod
    def from_midi(midi: int) -> Pitch:
        """Derive a pitch from a MIDI note number."""
        return Pitch(name=NOTE_LOOKUP[midi % MAX_NOTES], octave=midi // 12 - 1, midi=midi)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self.midi < other.midi

    def __str__(self) -> str:
        return f"{self.name.label}{self.octave}"
