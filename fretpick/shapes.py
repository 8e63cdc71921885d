"""Shape templates and the template-based fingering builder.

A template is a fixed set of strings with a degree assigned to each, keyed by
the string the root sits on. Instantiating a template means finding, string
by string, a fret that sounds the chord tone for that degree.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from fretpick.anchor import Anchor
from fretpick.chords import ChordDef, Tonality
from fretpick.config import ShapeConfig
from fretpick.degrees import tone_for_degree
from fretpick.fingering import Fingering
from fretpick.fretboard import Fretboard, GuitarString, StringPos
from fretpick.notes import NoteName


@dataclass(frozen=True)
class ShapeTemplate:
    """A per-string degree pattern rooted on a particular string."""

    name: str
    strings: Tuple[GuitarString, ...]
    degrees: Tuple[int, ...]
    tonality: Optional[Tonality] = None
    """Restrict the template to one tonality; ``None`` fits any chord."""
    requires_seventh: bool = False
    """Only offer the template to chords that contain a seventh."""

    def __post_init__(self) -> None:
        assert len(self.strings) == len(self.degrees)

    @property
    def root_string(self) -> GuitarString:
        return self.strings[0]

    def fits(self, chord: ChordDef) -> bool:
        """Check whether this template applies to the chord's flavour."""
        if self.requires_seventh and not chord.has_seventh:
            return False
        if self.tonality is None:
            return True
        tonality = chord.tonality
        # Chords without a third default to the major shapes
        if tonality == Tonality.Unspecified:
            tonality = Tonality.Major
        return tonality == self.tonality


_FROM_6: Tuple[GuitarString, ...] = tuple(GuitarString)
_FROM_5: Tuple[GuitarString, ...] = _FROM_6[1:]
_FROM_4: Tuple[GuitarString, ...] = _FROM_6[2:]

# Templates are tried in this order; sevenths before triads so that a
# seventh chord keeps its seventh when a shape can voice it.
TEMPLATE_CATALOG: Dict[GuitarString, Tuple[ShapeTemplate, ...]] = {
    GuitarString.E6: (
        ShapeTemplate("E7 shape", _FROM_6, (1, 5, 7, 3, 5, 1), requires_seventh=True),
        ShapeTemplate("E shape", _FROM_6, (1, 5, 1, 3, 5, 1)),
    ),
    GuitarString.A5: (
        ShapeTemplate(
            "Cmaj7 shape", _FROM_5, (1, 3, 5, 7, 3), Tonality.Major, requires_seventh=True
        ),
        ShapeTemplate(
            "C7 shape", _FROM_5, (1, 3, 7, 1, 3), Tonality.Major, requires_seventh=True
        ),
        ShapeTemplate("A7 shape", _FROM_5, (1, 5, 7, 3, 5), requires_seventh=True),
        ShapeTemplate("C shape", _FROM_5, (1, 3, 5, 1, 3), Tonality.Major),
        ShapeTemplate("A shape", _FROM_5, (1, 5, 1, 3, 5)),
    ),
    GuitarString.D4: (
        ShapeTemplate("D7 shape", _FROM_4, (1, 5, 7, 3), requires_seventh=True),
        ShapeTemplate("D shape", _FROM_4, (1, 5, 1, 3)),
    ),
}
"""Templates keyed by the string holding the root."""


@dataclass(frozen=True)
class BuiltShape:
    """A template instantiated for a chord."""

    template: ShapeTemplate
    fingering: Fingering
    unresolved: Tuple[GuitarString, ...]
    """Templated strings that ended up muted."""

    @property
    def complete(self) -> bool:
        return not self.unresolved


class TemplateBuilder:
    """Builds fingerings from the shape template catalog."""

    def __init__(
        self,
        fretboard: Fretboard,
        config: ShapeConfig,
        catalog: Dict[GuitarString, Tuple[ShapeTemplate, ...]] = TEMPLATE_CATALOG,
    ) -> None:
        self._fretboard = fretboard
        self._config = config
        self._catalog = catalog

    def templates_for(self, chord: ChordDef, anchor: Anchor) -> List[ShapeTemplate]:
        """Templates applicable to a chord anchored at the given position."""
        return [t for t in self._catalog.get(anchor.pos.string, ()) if t.fits(chord)]

    def locate(self, string: GuitarString, target: NoteName, anchor_fret: int) -> Optional[int]:
        """Find a fret on one string sounding the target pitch class.

        Checks the open string first, then a window around the anchor fret,
        then the whole fretted range. Within each phase the lowest fret wins.
        """
        frets = self._fretboard.frets_of(string, target)
        if 0 in frets:
            return 0
        window = self._config.template_window
        for fret in frets:
            if anchor_fret - window <= fret <= anchor_fret + window:
                return fret
        # frets_of is ascending and fret 0 is already ruled out
        return frets[0] if frets else None

    def instantiate(self, template: ShapeTemplate, chord: ChordDef, anchor: Anchor) -> BuiltShape:
        """Fill a template in with frets; strings with no usable tone are muted."""
        tones = chord.tones
        positions: List[StringPos] = []
        unresolved: List[GuitarString] = []
        for string, degree in zip(template.strings, template.degrees):
            target = tone_for_degree(tones, chord.root, degree, self._config.degree_table)
            fret = None if target is None else self.locate(string, target, anchor.pos.fret)
            if fret is None:
                logging.debug(
                    "%s: no degree %d tone on string %s", template.name, degree, string
                )
                unresolved.append(string)
            else:
                positions.append(StringPos(string, fret))
        fingering = Fingering.from_positions(self._fretboard, positions)
        return BuiltShape(template, fingering, tuple(unresolved))

    def build(self, chord: ChordDef, anchor: Anchor) -> Optional[BuiltShape]:
        """Build a fingering for a chord from its anchor.

        Applicable templates are instantiated in catalog order and the first
        that resolves every string wins; otherwise the one with the fewest
        muted strings (earliest on ties).

        Returns:
            The built shape, or ``None`` when no template is keyed by the
            anchor's string.
        """
        templates = self.templates_for(chord, anchor)
        if not templates:
            logging.debug("No template for root on string %s", anchor.pos.string)
            return None
        best: Optional[BuiltShape] = None
        for template in templates:
            built = self.instantiate(template, chord, anchor)
            if built.complete:
                return built
            if best is None or len(built.unresolved) < len(best.unresolved):
                best = built
        assert best is not None
        logging.info(
            "%s for %s leaves strings muted: %s",
            best.template.name,
            chord.symbol,
            ", ".join(s.label for s in best.unresolved),
        )
        return best
