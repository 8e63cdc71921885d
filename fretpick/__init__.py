"""Guitar chord fingering resolution.

Turns chord symbols such as ``"Cmaj7"`` or ``"Bbm"`` into six-string
fingerings, preferring idiomatic shapes built around the chord's root and
falling back to a scored combinatorial search.
"""

from fretpick.base import (
    ChordError,
    FretpickError,
    NoFingeringFound,
    OutOfRangeError,
    RootNotFoundError,
    UnknownRootError,
    UnsupportedQualityError,
)
from fretpick.chords import ChordDef, Quality, Tonality
from fretpick.config import ResolverConfig, init_config
from fretpick.fingering import Fingering, Fretted
from fretpick.fretboard import Fretboard, GuitarString, StringPos
from fretpick.notes import NoteName, Pitch
from fretpick.parser import parse, parse_chord
from fretpick.resolver import Resolution, ResolutionPath, Resolver, resolve

__all__ = [
    "ChordDef",
    "ChordError",
    "Fingering",
    "Fretboard",
    "FretpickError",
    "Fretted",
    "GuitarString",
    "NoFingeringFound",
    "NoteName",
    "OutOfRangeError",
    "Pitch",
    "Quality",
    "Resolution",
    "ResolutionPath",
    "Resolver",
    "ResolverConfig",
    "RootNotFoundError",
    "StringPos",
    "Tonality",
    "UnknownRootError",
    "UnsupportedQualityError",
    "init_config",
    "parse",
    "parse_chord",
    "resolve",
]
