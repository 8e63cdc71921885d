"""Configuration for the fretpick resolver.

Every tunable of the resolution pipeline lives in one of the frozen
dataclasses below. A ``ResolverConfig`` bundles them together with the
fretboard lattice; instances are immutable and safe to share.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict

from fretpick.degrees import EXTENDED, DegreeTable
from fretpick.fretboard import Fretboard


@dataclass(frozen=True)
class AnchorConfig:
    """Bounds of the low-register window searched for the root."""

    window_strings: int = 3
    """Number of lowest strings in the window."""
    window_max_fret: int = 4
    """Highest fret (inclusive) in the window."""


@dataclass(frozen=True)
class ShapeConfig:
    """Settings for template instantiation."""

    template_window: int = 2
    """Frets either side of the anchor fret searched before the full range."""
    degree_table: DegreeTable = EXTENDED
    """Interval-to-degree table used to pick tones for template degrees."""


@dataclass(frozen=True)
class SearchConfig:
    """Bounds of the fallback combinatorial search."""

    max_candidates: int = 50
    """Stop generating candidates once this many have been produced."""
    max_fret_span: int = 4
    """Candidates spanning more frets than this are filtered out when possible."""
    candidate_count: int = 3
    """How many ranked candidates to return (best plus alternatives)."""
    score_threshold: float = -5.0
    """Minimum score for a result to count as a good fingering."""


@dataclass(frozen=True)
class ScoreWeights:
    """Weights of the fallback scoring formula.

    Span and barre are penalties (negative), open strings and standard-shape
    similarity are bonuses (positive).
    """

    fret_span: float = -2.0
    open_strings: float = 1.5
    barre: float = -1.0
    standard: float = 2.0


@dataclass(frozen=True)
class ResolverConfig:
    """Everything a resolver needs, bundled."""

    fretboard: Fretboard = field(default_factory=Fretboard)
    anchor: AnchorConfig = field(default_factory=AnchorConfig)
    shape: ShapeConfig = field(default_factory=ShapeConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    weights: ScoreWeights = field(default_factory=ScoreWeights)


def init_config(**overrides: Any) -> ResolverConfig:
    """Create a resolver configuration, overriding search settings by name.

    Unset (``None``) overrides keep their defaults, which makes this easy to
    call straight from parsed command-line arguments.

    Args:
        **overrides: Field names of ``SearchConfig`` and their new values.

    Returns:
        A new resolver configuration.

    Raises:
        TypeError: If an override does not name a ``SearchConfig`` field.
    """
    search_fields: Dict[str, Any] = {k: v for k, v in overrides.items() if v is not None}
    search = replace(SearchConfig(), **search_fields)
    return ResolverConfig(search=search)
