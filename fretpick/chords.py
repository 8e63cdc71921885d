"""Chord qualities, interval tables and the parsed chord value type."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto, unique
from typing import Dict, List, Optional, Tuple

from fretpick.notes import MAX_NOTES, NoteName


@unique
class Quality(Enum):
    """The closed set of chord qualities fretpick knows how to voice."""

    Major = auto()
    Minor = auto()
    Diminished = auto()
    Augmented = auto()
    Dominant7 = auto()
    Major7 = auto()
    Minor7 = auto()
    Sus2 = auto()
    Sus4 = auto()
    Add9 = auto()
    Six = auto()

    @property
    def intervals(self) -> Tuple[int, ...]:
        """Semitone offsets from the root, root first."""
        return _QUALITY_INTERVALS[self]

    @property
    def suffix(self) -> str:
        """Canonical suffix used when spelling a chord of this quality."""
        return _QUALITY_SUFFIXES[self]


@unique
class Tonality(Enum):
    """Coarse major/minor flavour of a chord, decided by its third."""

    Major = auto()
    Minor = auto()
    Unspecified = auto()


# Chord note intervals (semitones from root)
_QUALITY_INTERVALS: Dict[Quality, Tuple[int, ...]] = {
    Quality.Major: (0, 4, 7),
    Quality.Minor: (0, 3, 7),
    Quality.Diminished: (0, 3, 6),
    Quality.Augmented: (0, 4, 8),
    Quality.Dominant7: (0, 4, 7, 10),
    Quality.Major7: (0, 4, 7, 11),
    Quality.Minor7: (0, 3, 7, 10),
    Quality.Sus2: (0, 2, 7),
    Quality.Sus4: (0, 5, 7),
    Quality.Add9: (0, 4, 7, 14),
    Quality.Six: (0, 4, 7, 9),
}

_QUALITY_SUFFIXES: Dict[Quality, str] = {
    Quality.Major: "",
    Quality.Minor: "m",
    Quality.Diminished: "dim",
    Quality.Augmented: "aug",
    Quality.Dominant7: "7",
    Quality.Major7: "maj7",
    Quality.Minor7: "m7",
    Quality.Sus2: "sus2",
    Quality.Sus4: "sus4",
    Quality.Add9: "add9",
    Quality.Six: "6",
}

# Matching is exact: "M7" and "m7" are different chords.
QUALITY_ALIASES: Dict[str, Quality] = {
    # Major
    "": Quality.Major,
    "maj": Quality.Major,
    "M": Quality.Major,
    "major": Quality.Major,
    # Minor
    "m": Quality.Minor,
    "min": Quality.Minor,
    "-": Quality.Minor,
    "minor": Quality.Minor,
    # Diminished
    "dim": Quality.Diminished,
    "°": Quality.Diminished,
    "o": Quality.Diminished,
    # Augmented
    "aug": Quality.Augmented,
    "+": Quality.Augmented,
    # Dominant seventh
    "7": Quality.Dominant7,
    "dom7": Quality.Dominant7,
    # Major seventh
    "maj7": Quality.Major7,
    "M7": Quality.Major7,
    "Δ": Quality.Major7,
    "ma7": Quality.Major7,
    # Minor seventh
    "m7": Quality.Minor7,
    "min7": Quality.Minor7,
    "-7": Quality.Minor7,
    # Suspended
    "sus2": Quality.Sus2,
    "sus4": Quality.Sus4,
    "sus": Quality.Sus4,
    # Added ninth
    "add9": Quality.Add9,
    "2": Quality.Add9,
    # Sixth
    "6": Quality.Six,
    "maj6": Quality.Six,
    "M6": Quality.Six,
}


def lookup_quality(token: str) -> Optional[Quality]:
    """Resolve a quality suffix to its canonical quality, if known."""
    return QUALITY_ALIASES.get(token)


def supported_qualities() -> List[str]:
    """Every quality suffix accepted by the parser, in table order."""
    return list(QUALITY_ALIASES.keys())


@dataclass(frozen=True)
class ChordDef:
    """A parsed chord: its root, quality and interval set.

    The interval tuple always starts with 0 (the root) and holds no two
    offsets that are equal modulo 12.
    """

    symbol: str
    """The symbol as written by the caller."""
    root: NoteName
    quality: Quality
    intervals: Tuple[int, ...]

    def __post_init__(self) -> None:
        assert self.intervals and self.intervals[0] == 0
        assert len({i % MAX_NOTES for i in self.intervals}) == len(self.intervals)

    @staticmethod
    def mk(symbol: str, root: NoteName, quality: Quality) -> ChordDef:
        return ChordDef(symbol=symbol, root=root, quality=quality, intervals=quality.intervals)

    @property
    def letter(self) -> str:
        """The root letter as written, without its accidental (``B`` for ``Bbm``)."""
        return self.symbol.strip()[:1]

    @property
    def name(self) -> str:
        """Canonical sharp-based spelling, e.g. ``A#m`` for ``Bbm``."""
        return f"{self.root.label}{self.quality.suffix}"

    @property
    def tones(self) -> List[NoteName]:
        """The chord's pitch classes in interval order, root first."""
        return [self.root.add_steps(i) for i in self.intervals]

    @property
    def tonality(self) -> Tonality:
        """Major if the chord has a major third, minor if only a minor third."""
        steps = {i % MAX_NOTES for i in self.intervals}
        if 4 in steps:
            return Tonality.Major
        elif 3 in steps:
            return Tonality.Minor
        else:
            return Tonality.Unspecified

    @property
    def has_seventh(self) -> bool:
        steps = {i % MAX_NOTES for i in self.intervals}
        return 10 in steps or 11 in steps

    def __str__(self) -> str:
        return self.name
