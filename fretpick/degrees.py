"""Scale-degree classification of chord tones.

Each chord tone is labelled with its functional degree (1, 3, 5, 7, ...) by
looking up its semitone distance from the root. The mapping is lossy on
purpose: a minor and a major third are both degree 3, and both a flat and a
sharp fifth are degree 5. Code that has to tell them apart must look at the
chord's intervals, not at the degrees.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional

from fretpick.notes import NoteName

UNCLASSIFIED = -1
"""Degree given to tones whose distance has no table entry."""


@dataclass(frozen=True, eq=False)
class DegreeTable:
    """A fixed mapping from semitone distance (0-11) to scale degree."""

    name: str
    steps: Mapping[int, int]

    def degree(self, distance: int) -> int:
        return self.steps.get(distance % 12, UNCLASSIFIED)


STANDARD = DegreeTable(
    name="standard",
    steps={
        0: 1,
        3: 3,  # minor third
        4: 3,  # major third
        7: 5,
        8: 5,  # augmented fifth
        10: 7,  # minor seventh
        11: 7,  # major seventh
    },
)
"""Triads and sevenths only."""

EXTENDED = DegreeTable(
    name="extended",
    steps={
        **STANDARD.steps,
        1: 2,
        2: 2,
        5: 4,
        6: 5,  # diminished fifth
        9: 6,
    },
)
"""Adds seconds, fourths, sixths and the diminished fifth."""


def degree_of(tone: NoteName, root: NoteName, table: DegreeTable = EXTENDED) -> int:
    """Classify a single tone relative to a root."""
    return table.degree(tone.steps_from(root))


def degrees_of(
    tones: Iterable[NoteName], root: NoteName, table: DegreeTable = EXTENDED
) -> Dict[NoteName, int]:
    """Label every chord tone with its degree relative to the root.

    Args:
        tones: The chord's pitch classes.
        root: The chosen root.
        table: Interval-to-degree table to apply.

    Returns:
        Mapping from pitch class to degree, ``UNCLASSIFIED`` where the
        distance has no entry.
    """
    return {tone: degree_of(tone, root, table) for tone in tones}


def tone_for_degree(
    tones: Iterable[NoteName],
    root: NoteName,
    degree: int,
    table: DegreeTable = EXTENDED,
) -> Optional[NoteName]:
    """Pick the chord tone that plays a given degree.

    Degree 1 is always the root. Otherwise the first tone in list order with
    a matching degree wins, so collisions resolve deterministically.
    """
    if degree == 1:
        return root
    for tone in tones:
        if degree_of(tone, root, table) == degree:
            return tone
    return None
