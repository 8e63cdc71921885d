"""Root anchor resolution.

Finds the fretboard position of the root that a fingering is built around.
Three passes run in priority order and the first hit wins:

1. an open string carrying the root;
2. the lowest-pitched root within a low-register window (lowest strings,
   first few frets);
3. the lowest-pitched root anywhere on the lattice.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto, unique
from typing import List, Optional

from fretpick.base import RootNotFoundError
from fretpick.config import AnchorConfig
from fretpick.fretboard import Fretboard, StringPos
from fretpick.notes import NoteName, Pitch


@unique
class AnchorMethod(Enum):
    """Which pass found the anchor."""

    Open = auto()
    Window = auto()
    Lattice = auto()


@dataclass(frozen=True)
class Anchor:
    """The chosen root position and how it was found."""

    pos: StringPos
    pitch: Pitch
    method: AnchorMethod

    def __str__(self) -> str:
        return f"{self.pitch} at {self.pos} ({self.method.name.lower()})"


class AnchorResolver:
    """Locates the root of a chord on the fretboard."""

    def __init__(self, fretboard: Fretboard, config: AnchorConfig) -> None:
        self._fretboard = fretboard
        self._config = config

    def _lowest(self, candidates: List[StringPos]) -> Optional[StringPos]:
        # all_occurrences already orders by pitch then string
        return candidates[0] if candidates else None

    def find_open(self, root: NoteName) -> Optional[StringPos]:
        """Scan open strings from low to high for the root."""
        for pos in self._fretboard.open_positions():
            if self._fretboard.pitch_at_pos(pos).name == root:
                return pos
        return None

    def find_in_window(self, root: NoteName) -> Optional[StringPos]:
        """Lowest-pitched root among the lowest strings and first frets."""
        window_max_fret = min(self._config.window_max_fret, self._fretboard.max_fret)
        return self._lowest(
            [
                pos
                for pos in self._fretboard.all_occurrences(root)
                if pos.string.index < self._config.window_strings
                and pos.fret <= window_max_fret
            ]
        )

    def find_anywhere(self, root: NoteName) -> Optional[StringPos]:
        """Lowest-pitched root anywhere on the lattice."""
        return self._lowest(self._fretboard.all_occurrences(root))

    def anchor_for(self, root: NoteName, symbol: Optional[str] = None) -> Anchor:
        """Find the anchor position for a root.

        Args:
            root: The chord's root pitch class.
            symbol: The chord symbol, used only for error reporting.

        Returns:
            The anchor position, its pitch and the pass that found it.

        Raises:
            RootNotFoundError: If the root does not occur on the lattice.
        """
        passes = (
            (AnchorMethod.Open, self.find_open),
            (AnchorMethod.Window, self.find_in_window),
            (AnchorMethod.Lattice, self.find_anywhere),
        )
        for method, finder in passes:
            pos = finder(root)
            if pos is not None:
                anchor = Anchor(pos, self._fretboard.pitch_at_pos(pos), method)
                logging.debug("Anchored root %s: %s", root, anchor)
                return anchor
        raise RootNotFoundError(root.label if symbol is None else symbol, root)
