"""Tests for scale-degree classification."""

from fretpick.degrees import (
    EXTENDED,
    STANDARD,
    UNCLASSIFIED,
    degree_of,
    degrees_of,
    tone_for_degree,
)
from fretpick.notes import NoteName
from fretpick.parser import parse_chord


def test_major_and_minor_triads() -> None:
    assert degrees_of(parse_chord("C").tones, NoteName.C) == {
        NoteName.C: 1,
        NoteName.E: 3,
        NoteName.G: 5,
    }
    assert degrees_of(parse_chord("Cm").tones, NoteName.C) == {
        NoteName.C: 1,
        NoteName.Ds: 3,
        NoteName.G: 5,
    }


def test_sevenths() -> None:
    assert degree_of(NoteName.As, NoteName.C) == 7
    assert degree_of(NoteName.B, NoteName.C) == 7


def test_tables_differ_on_extensions() -> None:
    assert degree_of(NoteName.D, NoteName.C, STANDARD) == UNCLASSIFIED
    assert degree_of(NoteName.D, NoteName.C, EXTENDED) == 2
    assert degree_of(NoteName.F, NoteName.C, STANDARD) == UNCLASSIFIED
    assert degree_of(NoteName.F, NoteName.C, EXTENDED) == 4
    assert degree_of(NoteName.A, NoteName.C, EXTENDED) == 6
    assert degree_of(NoteName.Fs, NoteName.C, EXTENDED) == 5


def test_degrees_relative_to_other_root() -> None:
    # The same tones read against A instead of C
    assert degrees_of([NoteName.C, NoteName.E, NoteName.A], NoteName.A) == {
        NoteName.C: 3,
        NoteName.E: 5,
        NoteName.A: 1,
    }


def test_tone_for_degree_first_match_wins() -> None:
    # Both F# (diminished fifth) and G# (augmented fifth) are degree 5
    assert tone_for_degree([NoteName.C, NoteName.Fs, NoteName.Gs], NoteName.C, 5) == NoteName.Fs
    assert tone_for_degree([NoteName.C, NoteName.Gs, NoteName.Fs], NoteName.C, 5) == NoteName.Gs


def test_tone_for_degree() -> None:
    tones = parse_chord("C7").tones
    assert tone_for_degree(tones, NoteName.C, 1) == NoteName.C
    assert tone_for_degree(tones, NoteName.C, 7) == NoteName.As
    assert tone_for_degree(parse_chord("C").tones, NoteName.C, 7) is None


def test_fixed_degrees_in_every_table() -> None:
    for table in (STANDARD, EXTENDED):
        assert table.degree(0) == 1
        # Minor and major thirds collapse onto the same degree
        assert table.degree(3) == table.degree(4) == 3
