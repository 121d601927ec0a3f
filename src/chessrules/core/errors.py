"""Error taxonomy raised by the rules engine.

Every error is a :class:`ValueError`: they all report invalid input that was
available at the time of the call, so nothing is retried.
"""

from __future__ import annotations


class ChessError(ValueError):
    """Base class for all rules-engine errors."""


class InvalidCoordinateError(ChessError):
    """A file or rank outside 1-8 (or a square index outside 0-63)."""


class MalformedRecordError(ChessError):
    """A position record that cannot be parsed."""


class MalformedTokenError(ChessError):
    """Algebraic or encoded-move text that does not match its grammar."""


class InvalidPieceSymbolError(ChessError):
    """A board cell outside the recognized piece/space alphabet."""


class WrongPieceKindError(ChessError):
    """A per-kind operation invoked on an empty or mismatched square."""


class IllegalMoveError(ChessError):
    """A move that is not legal in the current position."""
