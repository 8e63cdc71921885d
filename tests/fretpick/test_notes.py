"""Tests for pitch classes and absolute pitches."""

import pytest

from fretpick.notes import NoteName, Pitch


@pytest.mark.parametrize(
    "letter, accidental, expected",
    [
        ("C", "", NoteName.C),
        ("C", "#", NoteName.Cs),
        ("D", "b", NoteName.Cs),
        ("D", "♭", NoteName.Cs),
        ("F", "♯", NoteName.Fs),
        ("B", "b", NoteName.As),
        ("E", "#", NoteName.F),
        ("C", "b", NoteName.B),
        ("B", "#", NoteName.C),
    ],
)
def test_from_parts(letter: str, accidental: str, expected: NoteName) -> None:
    assert NoteName.from_parts(letter, accidental) == expected


@pytest.mark.parametrize("letter, accidental", [("H", ""), ("c", ""), ("C", "x")])
def test_from_parts_unknown(letter: str, accidental: str) -> None:
    with pytest.raises(KeyError):
        NoteName.from_parts(letter, accidental)


def test_labels_use_sharps() -> None:
    assert [n.label for n in NoteName] == [
        "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B",
    ]
    assert str(NoteName.As) == "A#"


def test_steps() -> None:
    assert NoteName.C.add_steps(4) == NoteName.E
    assert NoteName.A.add_steps(3) == NoteName.C
    assert NoteName.C.add_steps(-1) == NoteName.B
    assert NoteName.E.steps_from(NoteName.C) == 4
    assert NoteName.C.steps_from(NoteName.A) == 3
    assert NoteName.G.steps_from(NoteName.G) == 0


def test_pitch_from_midi() -> None:
    assert Pitch.from_midi(60) == Pitch(NoteName.C, 4, 60)
    assert Pitch.from_midi(40) == Pitch(NoteName.E, 2, 40)
    # B3 and C4 straddle the octave boundary
    assert Pitch.from_midi(59) == Pitch(NoteName.B, 3, 59)
    assert str(Pitch.from_midi(61)) == "C#4"


def test_pitch_ordering() -> None:
    assert Pitch.from_midi(59) < Pitch.from_midi(60)
    assert max(Pitch.from_midi(64), Pitch.from_midi(40)).midi == 64
