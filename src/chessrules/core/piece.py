"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, PieceKind
from chessrules.core.errors import InvalidPieceSymbolError

# Record letter ↔ (Color, PieceKind); uppercase is MAJOR.
_CHAR_MAP: dict[str, tuple[Color, PieceKind]] = {
    "P": (Color.MAJOR, PieceKind.PAWN),
    "N": (Color.MAJOR, PieceKind.KNIGHT),
    "B": (Color.MAJOR, PieceKind.BISHOP),
    "R": (Color.MAJOR, PieceKind.ROOK),
    "Q": (Color.MAJOR, PieceKind.QUEEN),
    "K": (Color.MAJOR, PieceKind.KING),
    "p": (Color.MINOR, PieceKind.PAWN),
    "n": (Color.MINOR, PieceKind.KNIGHT),
    "b": (Color.MINOR, PieceKind.BISHOP),
    "r": (Color.MINOR, PieceKind.ROOK),
    "q": (Color.MINOR, PieceKind.QUEEN),
    "k": (Color.MINOR, PieceKind.KING),
}

_LETTERS: dict[tuple[Color, PieceKind], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    kind: PieceKind

    def __str__(self) -> str:
        """Record letter (uppercase = MAJOR, lowercase = MINOR)."""
        return _LETTERS[(self.color, self.kind)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from a record letter, e.g. 'N' → major knight."""
        try:
            color, kind = _CHAR_MAP[char]
        except KeyError:
            raise InvalidPieceSymbolError(f"Invalid piece character: {char!r}") from None
        return cls(color, kind)
