"""Fingering metrics and the weighted scoring formula.

A fingering is scored as

    score = w_span * fret_span + w_open * open_strings
          + w_barre * barre_required + w_standard * standard_similarity

with the weights from ``ScoreWeights``. Higher is better.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple, TypeAlias

from fretpick.chords import ChordDef
from fretpick.config import ScoreWeights
from fretpick.fingering import Fingering
from fretpick.fretboard import STRINGS
from fretpick.notes import Pitch

Shape: TypeAlias = Tuple[Optional[int], ...]
"""Six frets, lowest string first; ``None`` is a muted string."""

# Common open-position shapes, keyed by root letter alone; every chord on
# that letter (C, Cm, C#7, ...) is compared against the same shape.
STANDARD_SHAPES: Dict[str, Shape] = {
    "C": (None, 3, 2, 0, 1, 0),
    "G": (3, 2, 0, 0, 0, 3),
    "D": (None, None, 0, 2, 3, 2),
    "A": (None, 0, 2, 2, 1, 0),  # Am
    "E": (0, 2, 2, 0, 0, 0),  # Em
}


@dataclass(frozen=True)
class Metrics:
    """Ergonomic measurements of a single fingering."""

    fret_span: int
    """Distance between the highest and lowest fretted (non-open) strings."""
    open_strings: int
    barre_required: bool
    standard_similarity: float
    """Fraction of a known open shape reproduced, 0 when there is none."""


@dataclass(frozen=True)
class ScoredCandidate:
    """A fingering with its score and the metrics behind it."""

    fingering: Fingering
    score: float
    metrics: Metrics


def fret_span(fingering: Fingering) -> int:
    frets = [e.fret for e in fingering.played() if e.fret > 0]
    if not frets:
        return 0
    return max(frets) - min(frets)


def open_string_count(fingering: Fingering) -> int:
    return sum(1 for e in fingering.played() if e.fret == 0)


def barre_required(fingering: Fingering) -> bool:
    """Check whether two adjacent sounding strings are stopped at the same fret."""
    entries = fingering.entries
    for lo, hi in zip(entries, entries[1:]):
        if lo is not None and hi is not None and lo.fret > 0 and lo.fret == hi.fret:
            return True
    return False


def standard_shape_for(chord: ChordDef) -> Optional[Shape]:
    return STANDARD_SHAPES.get(chord.letter)


def standard_similarity(fingering: Fingering, chord: ChordDef) -> float:
    """Fraction of the chord's standard shape matched fret-for-fret and note-for-note.

    Muted strings of the standard shape are not counted.
    """
    shape = standard_shape_for(chord)
    if shape is None:
        return 0.0
    total = 0
    matches = 0
    for string, std_fret, entry in zip(STRINGS, shape, fingering.entries):
        if std_fret is None:
            continue
        total += 1
        std_name = Pitch.from_midi(string.open_midi + std_fret).name
        if entry is not None and entry.fret == std_fret and entry.name == std_name:
            matches += 1
    return matches / total if total else 0.0


def measure(fingering: Fingering, chord: ChordDef) -> Metrics:
    return Metrics(
        fret_span=fret_span(fingering),
        open_strings=open_string_count(fingering),
        barre_required=barre_required(fingering),
        standard_similarity=standard_similarity(fingering, chord),
    )


def weighted_score(metrics: Metrics, weights: ScoreWeights) -> float:
    return (
        weights.fret_span * metrics.fret_span
        + weights.open_strings * metrics.open_strings
        + weights.barre * int(metrics.barre_required)
        + weights.standard * metrics.standard_similarity
    )


def score_fingering(fingering: Fingering, chord: ChordDef, weights: ScoreWeights) -> ScoredCandidate:
    """Measure and score a fingering for a chord."""
    metrics = measure(fingering, chord)
    return ScoredCandidate(fingering, weighted_score(metrics, weights), metrics)
