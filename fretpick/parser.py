"""Parser for chord symbols using Lark."""

from __future__ import annotations

import logging
import re
from typing import List, Tuple

from lark import Lark, Transformer
from lark.exceptions import UnexpectedInput

from fretpick.base import UnknownRootError, UnsupportedQualityError
from fretpick.chords import ChordDef, lookup_quality, supported_qualities
from fretpick.notes import NoteName

# Lark grammar for chord symbols: a root letter, an optional accidental and
# an optional quality suffix. The quality terminal may not start with an
# accidental so that "Bbm" splits as "B" "b" "m".
CHORD_GRAMMAR = """
NOTE: /[A-G]/
ACCIDENTAL: /[#b♯♭]/
QUALITY: /[^#b♯♭\\s]\\S*/

start: root quality?
root: NOTE ACCIDENTAL?
quality: QUALITY
"""

_WHITESPACE = re.compile(r"\s+")


class ChordTransformer(Transformer):
    """Transform a parsed chord symbol into a (root, quality token) pair."""

    def start(self, items):
        root = items[0]
        quality = items[1] if len(items) > 1 else ""
        return root, quality

    def root(self, items):
        letter = str(items[0])
        accidental = str(items[1]) if len(items) > 1 else ""
        return NoteName.from_parts(letter, accidental)

    def quality(self, items):
        return str(items[0])


_PARSER = Lark(CHORD_GRAMMAR, parser="lalr", transformer=ChordTransformer())


def normalize_symbol(symbol: str) -> str:
    """Strip all whitespace from a chord symbol."""
    return _WHITESPACE.sub("", symbol)


def split_symbol(symbol: str) -> Tuple[NoteName, str]:
    """Split a chord symbol into its root and raw quality token.

    Args:
        symbol: A chord symbol such as ``"Bbm7"``.

    Returns:
        The normalized root and the (possibly empty) quality token.

    Raises:
        UnknownRootError: If the symbol does not start with a note name.
        UnsupportedQualityError: If the text after the root cannot form a
            quality token at all.
    """
    normalized = normalize_symbol(symbol)
    if not normalized:
        raise UnknownRootError(symbol, "")
    try:
        return _PARSER.parse(normalized)
    except UnexpectedInput as e:
        pos = e.pos_in_stream
        if not pos:
            raise UnknownRootError(symbol, normalized[:1]) from None
        raise UnsupportedQualityError(symbol, normalized[pos:]) from None


def parse_chord(symbol: str) -> ChordDef:
    """Parse a chord symbol into a chord definition.

    An empty quality is an implicit major chord; enharmonic roots are
    normalized to sharps (``Db`` becomes ``C#``).

    Raises:
        UnknownRootError: If the note token cannot be parsed.
        UnsupportedQualityError: If the quality token has no table entry.
    """
    root, token = split_symbol(symbol)
    quality = lookup_quality(token)
    if quality is None:
        raise UnsupportedQualityError(symbol, token)
    chord = ChordDef.mk(symbol, root, quality)
    logging.debug("Parsed %r as %s %s", symbol, chord.name, chord.intervals)
    return chord


def parse(symbol: str) -> Tuple[NoteName, Tuple[int, ...]]:
    """Parse a chord symbol into its root and interval offsets."""
    chord = parse_chord(symbol)
    return chord.root, chord.intervals


def chord_note_names(symbol: str) -> List[str]:
    """The pitch-class names of a chord, root first (e.g. ``["C", "E", "G"]``)."""
    return [tone.label for tone in parse_chord(symbol).tones]


def is_supported_chord(symbol: str) -> bool:
    """Check whether a symbol parses to a known chord."""
    try:
        parse_chord(symbol)
    except (UnknownRootError, UnsupportedQualityError):
        return False
    return True


def all_chord_symbols() -> List[str]:
    """Every root and quality alias combination the parser accepts."""
    return [
        f"{root.label}{suffix}" for root in NoteName for suffix in supported_qualities()
    ]


def suggest_chords(query: str, limit: int = 10) -> List[str]:
    """Suggest chord symbols containing the query, case-insensitively.

    Args:
        query: Partial chord symbol typed so far.
        limit: Maximum number of suggestions.

    Returns:
        Matching symbols in root then alias order; empty for a blank query.
    """
    needle = normalize_symbol(query).lower()
    if not needle:
        return []
    matches = [s for s in all_chord_symbols() if needle in s.lower()]
    return matches[:limit]
