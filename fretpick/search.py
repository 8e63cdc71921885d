"""Fallback fingering search.

When no template applies, candidate fingerings are enumerated by giving
every chord tone one fretboard occurrence, never two tones on the same
string. Enumeration is depth first over the chord tones (in chord order)
and over each tone's occurrences (in pitch order), and stops early once a
fixed number of candidates has been produced. Candidates are then filtered
by fret span, scored and ranked.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Generator, List, Optional, Sequence, Set

from fretpick.chords import ChordDef
from fretpick.config import ScoreWeights, SearchConfig
from fretpick.fingering import Fingering
from fretpick.fretboard import Fretboard, GuitarString, StringPos
from fretpick.notes import NoteName
from fretpick.scoring import ScoredCandidate, fret_span, score_fingering


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a fallback search.

    ``ranked`` is empty when no candidate could be generated; that is an
    ordinary result, not an exception.
    """

    chord: ChordDef
    ranked: List[ScoredCandidate]
    """Top candidates, best first."""
    total_candidates: int
    """How many candidates were generated (at most the configured cap)."""
    valid_candidates: int
    """How many of those fit the maximum fret span."""
    has_good_fingering: bool
    """Whether the best score reaches the configured threshold."""

    @property
    def found(self) -> bool:
        return bool(self.ranked)

    @property
    def best(self) -> Optional[ScoredCandidate]:
        return self.ranked[0] if self.ranked else None

    @property
    def alternatives(self) -> List[ScoredCandidate]:
        return self.ranked[1:]


def _assignments(
    tones: Sequence[NoteName],
    occurrences: Dict[NoteName, List[StringPos]],
    chosen: List[StringPos],
    used: Set[GuitarString],
) -> Generator[List[StringPos], None, None]:
    if len(chosen) == len(tones):
        yield list(chosen)
        return
    tone = tones[len(chosen)]
    for pos in occurrences[tone]:
        if pos.string in used:
            continue
        chosen.append(pos)
        used.add(pos.string)
        yield from _assignments(tones, occurrences, chosen, used)
        used.remove(pos.string)
        chosen.pop()


def generate_candidates(
    chord: ChordDef, fretboard: Fretboard, max_candidates: int
) -> List[Fingering]:
    """Enumerate fingerings that play each chord tone on its own string.

    Args:
        chord: The chord to voice.
        fretboard: The lattice to search.
        max_candidates: Stop after this many candidates (first found, not best).

    Returns:
        Candidate fingerings in generation order; empty if some tone has no
        occurrence or the tones cannot be spread over distinct strings.
    """
    tones = chord.tones
    occurrences = fretboard.positions_by_note(tones)
    candidates: List[Fingering] = []
    if max_candidates <= 0:
        return candidates
    for positions in _assignments(tones, occurrences, [], set()):
        candidates.append(Fingering.from_positions(fretboard, positions))
        if len(candidates) >= max_candidates:
            logging.debug("Candidate cap %d reached for %s", max_candidates, chord.symbol)
            break
    return candidates


class FallbackSearch:
    """Generates, scores and ranks candidate fingerings."""

    def __init__(self, fretboard: Fretboard, config: SearchConfig, weights: ScoreWeights) -> None:
        self._fretboard = fretboard
        self._config = config
        self._weights = weights

    def rank(self, chord: ChordDef, candidates: Sequence[Fingering]) -> List[ScoredCandidate]:
        """Score candidates and sort them best first (stable on ties)."""
        scored = [score_fingering(f, chord, self._weights) for f in candidates]
        scored.sort(key=lambda c: c.score, reverse=True)
        return scored

    def search(self, chord: ChordDef) -> SearchResult:
        """Run the fallback search for a chord.

        Candidates wider than the maximum fret span are dropped, unless that
        would leave nothing, in which case every generated candidate is ranked.
        """
        candidates = generate_candidates(chord, self._fretboard, self._config.max_candidates)
        valid = [f for f in candidates if fret_span(f) <= self._config.max_fret_span]
        pool = valid if valid else candidates
        ranked = self.rank(chord, pool)[: self._config.candidate_count]
        good = bool(ranked) and ranked[0].score >= self._config.score_threshold
        logging.debug(
            "Fallback search for %s: %d generated, %d within span",
            chord.symbol,
            len(candidates),
            len(valid),
        )
        return SearchResult(
            chord=chord,
            ranked=ranked,
            total_candidates=len(candidates),
            valid_candidates=len(valid),
            has_good_fingering=good,
        )
