"""Tests for the fretboard pitch lattice."""

import pytest

from fretpick.base import OutOfRangeError
from fretpick.fretboard import STRINGS, Fretboard, GuitarString, StringPos
from fretpick.notes import NoteName

FRETBOARD = Fretboard()


def test_strings() -> None:
    assert [s.label for s in STRINGS] == ["6E", "5A", "4D", "3G", "2B", "1e"]
    assert [s.number for s in STRINGS] == [6, 5, 4, 3, 2, 1]
    assert GuitarString.A5.is_adjacent(GuitarString.D4)
    assert not GuitarString.A5.is_adjacent(GuitarString.G3)


@pytest.mark.parametrize(
    "string, fret, label, midi",
    [
        (GuitarString.E6, 0, "E2", 40),
        (GuitarString.A5, 3, "C3", 48),
        (GuitarString.D4, 2, "E3", 52),
        (GuitarString.G3, 0, "G3", 55),
        (GuitarString.B2, 0, "B3", 59),
        (GuitarString.B2, 1, "C4", 60),
        (GuitarString.E1, 0, "E4", 64),
        (GuitarString.E1, 7, "B4", 71),
    ],
)
def test_pitch_at(string: GuitarString, fret: int, label: str, midi: int) -> None:
    pitch = FRETBOARD.pitch_at(string, fret)
    assert str(pitch) == label
    assert pitch.midi == midi


@pytest.mark.parametrize("fret", [-1, 8, 12])
def test_pitch_at_out_of_range(fret: int) -> None:
    with pytest.raises(OutOfRangeError):
        FRETBOARD.pitch_at(GuitarString.E6, fret)


def test_lattice_is_total() -> None:
    positions = list(FRETBOARD.iter_positions())
    assert len(positions) == 6 * 8
    for pos in positions:
        pitch = FRETBOARD.pitch_at_pos(pos)
        assert pitch.midi == pos.string.open_midi + pos.fret
        assert pitch.octave == pitch.midi // 12 - 1


def test_all_occurrences_sorted_by_pitch_then_string() -> None:
    assert FRETBOARD.all_occurrences(NoteName.C) == [
        StringPos(GuitarString.A5, 3),
        StringPos(GuitarString.G3, 5),
        StringPos(GuitarString.B2, 1),
    ]
    assert FRETBOARD.all_occurrences(NoteName.E) == [
        StringPos(GuitarString.E6, 0),
        StringPos(GuitarString.A5, 7),
        StringPos(GuitarString.D4, 2),
        StringPos(GuitarString.B2, 5),
        StringPos(GuitarString.E1, 0),
    ]


def test_frets_of() -> None:
    assert FRETBOARD.frets_of(GuitarString.E6, NoteName.E) == [0]
    assert FRETBOARD.frets_of(GuitarString.B2, NoteName.As) == []
    assert Fretboard(max_fret=12).frets_of(GuitarString.E6, NoteName.E) == [0, 12]


def test_positions_by_note_reports_missing() -> None:
    open_only = Fretboard(max_fret=0)
    found = open_only.positions_by_note([NoteName.G, NoteName.As])
    assert found[NoteName.G] == [StringPos(GuitarString.G3, 0)]
    assert found[NoteName.As] == []


def test_invalid_max_fret() -> None:
    with pytest.raises(ValueError):
        Fretboard(max_fret=-1)
