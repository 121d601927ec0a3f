"""Core enumerations and flags for the rules engine."""

from __future__ import annotations

from enum import IntEnum, IntFlag, StrEnum


class Color(IntEnum):
    """Side color. MAJOR moves first (conventional white)."""

    MAJOR = 0
    MINOR = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def letter(self) -> str:
        """Active-color field of a position record."""
        return "w" if self is Color.MAJOR else "b"

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class MoveFlag(IntFlag):
    """4-bit move classification.

    Four independent bits whose combinations carry fixed meanings::

        0000 quiet              0100 capture
        0001 double pawn push   0101 en-passant capture
        0010 kingside castle    1000..1011 promotion (N, B, R, Q)
        0011 queenside castle   1100..1111 promotion capture (N, B, R, Q)
    """

    QUIET = 0
    SPECIAL_0 = 0b0001
    SPECIAL_1 = 0b0010
    CAPTURE = 0b0100
    PROMOTION = 0b1000

    DOUBLE_PAWN_PUSH = SPECIAL_0
    KING_CASTLE = SPECIAL_1
    QUEEN_CASTLE = SPECIAL_1 | SPECIAL_0
    EN_PASSANT = CAPTURE | SPECIAL_0


# Low two bits of a promotion flag select the new piece.
PROMOTION_KINDS: tuple[PieceKind, ...] = (
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.ROOK,
    PieceKind.QUEEN,
)

# 0110 and 0111 have no meaning.
VALID_FLAG_VALUES: frozenset[int] = frozenset(range(16)) - {0b0110, 0b0111}


class CastlingRights(IntFlag):
    """Bitmask for castling availability, MSB to LSB: K, Q, k, q."""

    NONE = 0
    MINOR_QUEENSIDE = 0x1
    MINOR_KINGSIDE = 0x2
    MAJOR_QUEENSIDE = 0x4
    MAJOR_KINGSIDE = 0x8

    MAJOR_BOTH = MAJOR_KINGSIDE | MAJOR_QUEENSIDE
    MINOR_BOTH = MINOR_KINGSIDE | MINOR_QUEENSIDE
    ALL = MAJOR_BOTH | MINOR_BOTH

    @classmethod
    def kingside(cls, color: Color) -> CastlingRights:
        return cls.MAJOR_KINGSIDE if color == Color.MAJOR else cls.MINOR_KINGSIDE

    @classmethod
    def queenside(cls, color: Color) -> CastlingRights:
        return cls.MAJOR_QUEENSIDE if color == Color.MAJOR else cls.MINOR_QUEENSIDE

    @classmethod
    def both(cls, color: Color) -> CastlingRights:
        return cls.MAJOR_BOTH if color == Color.MAJOR else cls.MINOR_BOTH


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    MAJOR_WINS = 1
    MINOR_WINS = 2
    DRAW = 3


class GameStatus(StrEnum):
    """State of the side to move, as reported to a game loop."""

    IN_PROGRESS = "in progress"
    CHECK = "check"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"
    DRAW_FIFTY_MOVE = "draw by 50 moves"
