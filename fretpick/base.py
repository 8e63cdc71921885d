"""Base exceptions for the fretpick package.

Every failure the resolver can report is a subclass of ``FretpickError``.
Chord-level failures carry the offending symbol (and token, where there is
one) so callers can render a message without re-parsing anything.
"""

from __future__ import annotations

from typing import Any, Optional


class FretpickError(Exception):
    """Base class for all fretpick errors."""


class MatchException(FretpickError):
    """Exception raised when pattern matching fails."""

    def __init__(self, value: Any) -> None:
        """Initialize a MatchException with the unmatched value.

        Args:
            value: The value that failed to match any pattern.
        """
        super().__init__(f"Failed to match value: {value}")


class OutOfRangeError(FretpickError):
    """Raised when a fretboard position lies outside the lattice."""

    def __init__(self, string: Any, fret: int, max_fret: int) -> None:
        super().__init__(f"Fret {fret} on string {string} outside range 0-{max_fret}")
        self.string = string
        self.fret = fret
        self.max_fret = max_fret


class ChordError(FretpickError):
    """Base class for failures tied to a particular chord symbol."""

    def __init__(self, symbol: str, message: str) -> None:
        super().__init__(message)
        self.symbol = symbol


class UnknownRootError(ChordError):
    """The note token of a chord symbol could not be parsed."""

    def __init__(self, symbol: str, token: Optional[str] = None) -> None:
        token = symbol if token is None else token
        super().__init__(symbol, f"Unknown root note {token!r} in chord {symbol!r}")
        self.token = token


class UnsupportedQualityError(ChordError):
    """The quality suffix of a chord symbol has no interval table entry."""

    def __init__(self, symbol: str, token: str) -> None:
        super().__init__(
            symbol, f"Unsupported chord quality {token!r} in chord {symbol!r}"
        )
        self.token = token


class RootNotFoundError(ChordError):
    """The root pitch class does not occur anywhere on the fretboard."""

    def __init__(self, symbol: str, root: Any) -> None:
        super().__init__(symbol, f"Root {root} of chord {symbol!r} not on fretboard")
        self.root = root


class NoFingeringFound(ChordError):
    """The fallback search produced no candidate fingering."""

    def __init__(self, symbol: str) -> None:
        super().__init__(symbol, f"No fingering found for chord {symbol!r}")
