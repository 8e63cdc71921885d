"""Fretboard pitch model.

This module implements the static lattice that maps every (string, fret)
position of a six-string guitar in standard tuning to an absolute pitch.
The lattice is total over ``0..max_fret`` and never changes after
construction, so one instance can be shared freely.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, unique
from typing import Dict, Generator, Iterable, List, Tuple

from fretpick.base import OutOfRangeError
from fretpick.notes import NoteName, Pitch

DEFAULT_MAX_FRET = 7
"""Highest fret modelled by the default lattice."""

STANDARD_TUNING: Tuple[int, ...] = (40, 45, 50, 55, 59, 64)  # E2 A2 D3 G3 B3 E4
"""Open-string MIDI notes, lowest string first."""


@unique
class GuitarString(Enum):
    """The six strings of the guitar, ordered from lowest to highest pitch.

    Values are 0-based indices into the tuning; labels follow the usual
    "string number + open note" naming (``6E`` is the low E string).
    """

    E6 = 0
    A5 = 1
    D4 = 2
    G3 = 3
    B2 = 4
    E1 = 5

    @property
    def index(self) -> int:
        """Position of this string in low-to-high order (0-5)."""
        return self.value

    @property
    def number(self) -> int:
        """Conventional string number (6 for the low E, 1 for the high e)."""
        return 6 - self.value

    @property
    def label(self) -> str:
        """Printable label such as ``6E`` or ``1e``."""
        return _STRING_LABELS[self.value]

    @property
    def open_midi(self) -> int:
        """MIDI note of the open string in standard tuning."""
        return STANDARD_TUNING[self.value]

    def is_adjacent(self, other: GuitarString) -> bool:
        """Check whether two strings sit next to each other."""
        return abs(self.value - other.value) == 1

    def __str__(self) -> str:
        return self.label


_STRING_LABELS = ("6E", "5A", "4D", "3G", "2B", "1e")

STRINGS: Tuple[GuitarString, ...] = tuple(GuitarString)
"""All strings, lowest first."""


@dataclass(frozen=True)
class StringPos:
    """A position on the fretboard as a string and fret combination."""

    string: GuitarString
    """The string being played."""
    fret: int
    """The fret position (0 is the open string)."""

    @property
    def is_open(self) -> bool:
        return self.fret == 0

    def __str__(self) -> str:
        return f"{self.string.label}:{self.fret}"


class Fretboard:
    """Read-only lattice of (string, fret) -> pitch.

    The lattice is computed once from the tuning and a fret range and then
    only queried.
    """

    def __init__(self, max_fret: int = DEFAULT_MAX_FRET) -> None:
        """Build the lattice.

        Args:
            max_fret: Highest fret included in the lattice (inclusive).
        """
        if max_fret < 0:
            raise ValueError(f"max_fret must be non-negative, got {max_fret}")
        self._max_fret = max_fret
        self._pitches: Dict[Tuple[GuitarString, int], Pitch] = {
            (string, fret): Pitch.from_midi(string.open_midi + fret)
            for string in STRINGS
            for fret in range(max_fret + 1)
        }

    @property
    def max_fret(self) -> int:
        return self._max_fret

    def __repr__(self) -> str:
        return f"Fretboard(max_fret={self._max_fret})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Fretboard) and other._max_fret == self._max_fret

    def __hash__(self) -> int:
        return hash(self._max_fret)

    def in_range(self, fret: int) -> bool:
        return 0 <= fret <= self._max_fret

    def pitch_at(self, string: GuitarString, fret: int) -> Pitch:
        """Look up the pitch sounding at a position.

        Args:
            string: The string being fretted.
            fret: The fret (0 for the open string).

        Returns:
            The pitch at that position.

        Raises:
            OutOfRangeError: If the fret lies outside the lattice.
        """
        if not self.in_range(fret):
            raise OutOfRangeError(string, fret, self._max_fret)
        return self._pitches[(string, fret)]

    def pitch_at_pos(self, pos: StringPos) -> Pitch:
        return self.pitch_at(pos.string, pos.fret)

    def iter_positions(self) -> Generator[StringPos, None, None]:
        """Iterate over every position, string by string, lowest fret first."""
        for string in STRINGS:
            for fret in range(self._max_fret + 1):
                yield StringPos(string, fret)

    def open_positions(self) -> List[StringPos]:
        """The open position of every string, lowest string first."""
        return [StringPos(string, 0) for string in STRINGS]

    def frets_of(self, string: GuitarString, name: NoteName) -> List[int]:
        """All frets on one string where the given pitch class sounds, ascending."""
        return [
            fret
            for fret in range(self._max_fret + 1)
            if self._pitches[(string, fret)].name == name
        ]

    def all_occurrences(self, name: NoteName) -> List[StringPos]:
        """Find every position sounding the given pitch class.

        Returns:
            Positions ordered by absolute pitch ascending, with ties broken by
            string order (lowest string first).
        """
        found = [pos for pos in self.iter_positions() if self.pitch_at_pos(pos).name == name]
        found.sort(key=lambda pos: (self.pitch_at_pos(pos).midi, pos.string.index))
        return found

    def positions_by_note(self, names: Iterable[NoteName]) -> Dict[NoteName, List[StringPos]]:
        """Collect the occurrences of several pitch classes at once.

        Pitch classes with no occurrence map to an empty list and are reported
        at warning level.
        """
        result: Dict[NoteName, List[StringPos]] = {}
        for name in names:
            result[name] = self.all_occurrences(name)
        missing = [name.label for name, found in result.items() if not found]
        if missing:
            logging.warning(
                "No positions within frets 0-%d for notes: %s",
                self._max_fret,
                ", ".join(missing),
            )
        return result
