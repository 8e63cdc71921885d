"""Fingerings: one fret (or a mute) for each of the six strings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Generator, Iterable, List, Optional, Tuple, TypeAlias

from fretpick.fretboard import STRINGS, Fretboard, GuitarString, StringPos
from fretpick.notes import NoteName, Pitch

MUTED_MARK = "x"
"""Tab symbol for a muted string."""


@dataclass(frozen=True)
class Fretted:
    """A sounding string: where it is fretted and the pitch it produces."""

    pos: StringPos
    pitch: Pitch

    @property
    def string(self) -> GuitarString:
        return self.pos.string

    @property
    def fret(self) -> int:
        return self.pos.fret

    @property
    def name(self) -> NoteName:
        return self.pitch.name


Entry: TypeAlias = Optional[Fretted]
"""One string of a fingering; ``None`` means the string is muted."""


@dataclass(frozen=True)
class Fingering:
    """Exactly six entries, lowest string first, each fretted or muted."""

    entries: Tuple[Entry, ...]

    def __post_init__(self) -> None:
        assert len(self.entries) == len(STRINGS)
        for string, entry in zip(STRINGS, self.entries):
            assert entry is None or entry.string == string

    @staticmethod
    def from_positions(fretboard: Fretboard, positions: Iterable[StringPos]) -> Fingering:
        """Build a fingering from the positions to play; other strings are muted.

        Raises:
            ValueError: If two positions share a string.
        """
        by_string: Dict[GuitarString, Fretted] = {}
        for pos in positions:
            if pos.string in by_string:
                raise ValueError(f"String {pos.string} fretted twice")
            by_string[pos.string] = Fretted(pos, fretboard.pitch_at_pos(pos))
        return Fingering(tuple(by_string.get(string) for string in STRINGS))

    @staticmethod
    def from_frets(fretboard: Fretboard, frets: Iterable[Optional[int]]) -> Fingering:
        """Build a fingering from six frets, low string first (``None`` mutes)."""
        fret_list = list(frets)
        if len(fret_list) != len(STRINGS):
            raise ValueError(f"Expected {len(STRINGS)} frets, got {len(fret_list)}")
        return Fingering.from_positions(
            fretboard,
            [StringPos(s, f) for s, f in zip(STRINGS, fret_list) if f is not None],
        )

    def __iter__(self) -> Generator[Entry, None, None]:
        yield from self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def entry(self, string: GuitarString) -> Entry:
        return self.entries[string.index]

    def played(self) -> List[Fretted]:
        """The non-muted entries, lowest string first."""
        return [e for e in self.entries if e is not None]

    def muted(self) -> List[GuitarString]:
        return [s for s, e in zip(STRINGS, self.entries) if e is None]

    def frets(self) -> List[Optional[int]]:
        return [None if e is None else e.fret for e in self.entries]

    def note_names(self) -> List[NoteName]:
        """Pitch classes sounded, low to high, repeats included."""
        return [e.name for e in self.played()]

    def bass(self) -> Optional[Fretted]:
        """The lowest sounding string, if any."""
        played = self.played()
        return played[0] if played else None

    def tab(self) -> str:
        """Compact tab, low string first: ``x32010`` for an open C.

        Frets above 9 are separated with dashes (``x-10-12-...``) so the
        string stays unambiguous.
        """
        marks = [MUTED_MARK if f is None else str(f) for f in self.frets()]
        if any(len(m) > 1 for m in marks):
            return "-".join(marks)
        return "".join(marks)

    def diagram(self) -> str:
        """Multi-line tab diagram, high string on top as printed tab reads."""
        lines = []
        for string, entry in reversed(list(zip(STRINGS, self.entries))):
            if entry is None:
                lines.append(f"{string.label:>2} |-{MUTED_MARK}-")
            else:
                lines.append(f"{string.label:>2} |-{entry.fret}- {entry.pitch}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.tab()
