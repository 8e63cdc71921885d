"""Chord symbol to fingering resolution.

The resolver runs the whole pipeline for one symbol:

    Parsed -> Classified -> AnchorResolved -> TemplateBuilt | FallbackScored -> Finalized

Any failure ends the run with a typed exception; nothing is retried. A
resolver holds only immutable configuration, so a single instance can serve
any number of callers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto, unique
from typing import Dict, List, Optional

from fretpick.anchor import Anchor, AnchorResolver
from fretpick.base import MatchException, NoFingeringFound
from fretpick.chords import ChordDef
from fretpick.config import ResolverConfig
from fretpick.degrees import degrees_of
from fretpick.fingering import Fingering
from fretpick.notes import NoteName
from fretpick.parser import parse_chord
from fretpick.scoring import ScoredCandidate, score_fingering
from fretpick.search import FallbackSearch, SearchResult
from fretpick.shapes import BuiltShape, TemplateBuilder


@unique
class ResolutionState(Enum):
    """Stages of a resolution run."""

    Parsed = auto()
    Classified = auto()
    AnchorResolved = auto()
    TemplateBuilt = auto()
    FallbackScored = auto()
    Finalized = auto()


@unique
class ResolutionPath(Enum):
    """Which strategy produced the fingering."""

    Template = auto()
    Fallback = auto()


@dataclass(frozen=True)
class Resolution:
    """A resolved chord: the fingering plus how it was found."""

    chord: ChordDef
    degrees: Dict[NoteName, int]
    anchor: Anchor
    path: ResolutionPath
    result: ScoredCandidate
    """The chosen fingering with its score and metrics."""
    shape: Optional[BuiltShape] = None
    """Set on the template path."""
    search: Optional[SearchResult] = None
    """Set on the fallback path."""

    @property
    def fingering(self) -> Fingering:
        return self.result.fingering

    @property
    def alternatives(self) -> List[ScoredCandidate]:
        """Runner-up fingerings; only the fallback search produces these."""
        return [] if self.search is None else self.search.alternatives

    @property
    def template_name(self) -> Optional[str]:
        return None if self.shape is None else self.shape.template.name


class Resolver:
    """Resolves chord symbols into fingerings."""

    def __init__(self, config: Optional[ResolverConfig] = None) -> None:
        self._config = ResolverConfig() if config is None else config
        fretboard = self._config.fretboard
        self._anchors = AnchorResolver(fretboard, self._config.anchor)
        self._builder = TemplateBuilder(fretboard, self._config.shape)
        self._search = FallbackSearch(fretboard, self._config.search, self._config.weights)

    @property
    def config(self) -> ResolverConfig:
        return self._config

    def _enter(self, symbol: str, state: ResolutionState) -> None:
        logging.debug("%s: %s", symbol, state.name)

    def resolve(self, symbol: str) -> Resolution:
        """Resolve a chord symbol into a fingering.

        Args:
            symbol: A chord symbol such as ``"Cmaj7"``.

        Returns:
            The resolution, including the path taken and its metrics.

        Raises:
            UnknownRootError: If the root cannot be parsed.
            UnsupportedQualityError: If the quality suffix is unknown.
            RootNotFoundError: If the root does not occur on the fretboard.
            NoFingeringFound: If the fallback search generates nothing.
        """
        chord = parse_chord(symbol)
        self._enter(symbol, ResolutionState.Parsed)
        degrees = degrees_of(chord.tones, chord.root, self._config.shape.degree_table)
        self._enter(symbol, ResolutionState.Classified)
        anchor = self._anchors.anchor_for(chord.root, symbol)
        self._enter(symbol, ResolutionState.AnchorResolved)
        shape = self._builder.build(chord, anchor)
        if shape is not None:
            self._enter(symbol, ResolutionState.TemplateBuilt)
            result = score_fingering(shape.fingering, chord, self._config.weights)
            resolution = Resolution(
                chord=chord,
                degrees=degrees,
                anchor=anchor,
                path=ResolutionPath.Template,
                result=result,
                shape=shape,
            )
        else:
            search = self._search.search(chord)
            self._enter(symbol, ResolutionState.FallbackScored)
            if search.best is None:
                raise NoFingeringFound(symbol)
            resolution = Resolution(
                chord=chord,
                degrees=degrees,
                anchor=anchor,
                path=ResolutionPath.Fallback,
                result=search.best,
                search=search,
            )
        self._enter(symbol, ResolutionState.Finalized)
        logging.info(
            "Resolved %s via %s: %s",
            symbol,
            resolution.path.name.lower(),
            resolution.fingering.tab(),
        )
        return resolution

    def describe(self, resolution: Resolution) -> str:
        """Render a human-readable report of a resolution."""
        chord = resolution.chord
        result = resolution.result
        metrics = result.metrics
        lines = [
            f"Chord: {chord.symbol} ({chord.name})",
            f"Notes: {', '.join(t.label for t in chord.tones)}",
            f"Root: {resolution.anchor}",
        ]
        if resolution.path == ResolutionPath.Template:
            assert resolution.shape is not None
            lines.append(f"Shape: {resolution.shape.template.name}")
        elif resolution.path == ResolutionPath.Fallback:
            assert resolution.search is not None
            lines.append(
                f"Search: {resolution.search.total_candidates} candidates,"
                f" {resolution.search.valid_candidates} within span"
            )
        else:
            raise MatchException(resolution.path)
        lines.extend(
            [
                f"Tab: {resolution.fingering.tab()}",
                f"Score: {result.score:.2f}",
                f"Fret span: {metrics.fret_span}",
                f"Open strings: {metrics.open_strings}",
                f"Barre: {'yes' if metrics.barre_required else 'no'}",
                f"Standard match: {metrics.standard_similarity * 100:.0f}%",
                resolution.fingering.diagram(),
            ]
        )
        for i, alt in enumerate(resolution.alternatives, start=1):
            lines.append(f"Alternative {i}: {alt.fingering.tab()} (score {alt.score:.2f})")
        return "\n".join(lines)


def resolve(symbol: str) -> Resolution:
    """Resolve a chord symbol with the default configuration."""
    return Resolver().resolve(symbol)
