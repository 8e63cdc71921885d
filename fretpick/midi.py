"""MIDI rendering of fingerings.

Turns a fingering into a list of ``mido`` messages that downstream players
can send or write out. Only message data is produced here; nothing is
opened, scheduled or played.
"""

from __future__ import annotations

from typing import List

from mido.frozen import FrozenMessage

from fretpick.fingering import Fingering

DEFAULT_VELOCITY = 100
"""Note-on velocity used when none is given."""

DEFAULT_HOLD_TICKS = 480
"""Ticks between the last note-on and the first note-off."""


def fingering_notes(fingering: Fingering) -> List[int]:
    """MIDI note numbers sounded by a fingering, lowest string first."""
    return [e.pitch.midi for e in fingering.played()]


def fingering_messages(
    fingering: Fingering,
    velocity: int = DEFAULT_VELOCITY,
    channel: int = 0,
    spread_ticks: int = 0,
    hold_ticks: int = DEFAULT_HOLD_TICKS,
) -> List[FrozenMessage]:
    """Render a fingering as note-on then note-off messages.

    Message ``time`` fields are delta ticks, as in a MIDI track. With
    ``spread_ticks`` 0 every string starts together; a positive spread strums
    (or, with larger values, arpeggiates) from the low string up.

    Args:
        fingering: The fingering to render. Muted strings are skipped.
        velocity: Note-on velocity (1-127).
        channel: MIDI channel (0-15).
        spread_ticks: Delay between successive note-ons.
        hold_ticks: Delay between the last note-on and the note-offs.

    Returns:
        Note-on messages low to high followed by matching note-offs.
    """
    if not 1 <= velocity <= 127:
        raise ValueError(f"velocity must be in 1-127, got {velocity}")
    notes = fingering_notes(fingering)
    msgs: List[FrozenMessage] = []
    for i, note in enumerate(notes):
        msgs.append(
            FrozenMessage(
                type="note_on",
                channel=channel,
                note=note,
                velocity=velocity,
                time=0 if i == 0 else spread_ticks,
            )
        )
    for i, note in enumerate(notes):
        msgs.append(
            FrozenMessage(
                type="note_off",
                channel=channel,
                note=note,
                velocity=0,
                time=hold_ticks if i == 0 else 0,
            )
        )
    return msgs
