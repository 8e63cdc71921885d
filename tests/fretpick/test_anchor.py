"""Tests for root anchor resolution."""

import pytest

from fretpick.anchor import AnchorMethod, AnchorResolver
from fretpick.base import RootNotFoundError
from fretpick.config import AnchorConfig
from fretpick.fretboard import Fretboard, GuitarString, StringPos
from fretpick.notes import NoteName

RESOLVER = AnchorResolver(Fretboard(), AnchorConfig())


@pytest.mark.parametrize(
    "root, pos, method",
    [
        (NoteName.E, StringPos(GuitarString.E6, 0), AnchorMethod.Open),
        (NoteName.A, StringPos(GuitarString.A5, 0), AnchorMethod.Open),
        (NoteName.D, StringPos(GuitarString.D4, 0), AnchorMethod.Open),
        (NoteName.G, StringPos(GuitarString.G3, 0), AnchorMethod.Open),
        (NoteName.B, StringPos(GuitarString.B2, 0), AnchorMethod.Open),
        (NoteName.C, StringPos(GuitarString.A5, 3), AnchorMethod.Window),
        (NoteName.F, StringPos(GuitarString.E6, 1), AnchorMethod.Window),
        (NoteName.As, StringPos(GuitarString.A5, 1), AnchorMethod.Window),
        (NoteName.Gs, StringPos(GuitarString.E6, 4), AnchorMethod.Window),
    ],
)
def test_anchor_for(root: NoteName, pos: StringPos, method: AnchorMethod) -> None:
    anchor = RESOLVER.anchor_for(root)
    assert anchor.pos == pos
    assert anchor.method == method
    assert anchor.pitch.name == root


def test_window_covers_every_root() -> None:
    for root in NoteName:
        assert RESOLVER.anchor_for(root).method != AnchorMethod.Lattice


def test_lattice_pass() -> None:
    narrow = AnchorResolver(Fretboard(), AnchorConfig(window_strings=1, window_max_fret=0))
    anchor = narrow.anchor_for(NoteName.C)
    assert anchor.method == AnchorMethod.Lattice
    assert anchor.pos == StringPos(GuitarString.A5, 3)


def test_root_not_found() -> None:
    open_only = AnchorResolver(Fretboard(max_fret=0), AnchorConfig())
    with pytest.raises(RootNotFoundError) as info:
        open_only.anchor_for(NoteName.C, "Cmaj7")
    assert info.value.symbol == "Cmaj7"
    assert info.value.root == NoteName.C
