"""Move value object (4-bit flag encoding)."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import PROMOTION_KINDS, MoveFlag, PieceKind
from chessrules.core.notation.algebraic import square_name
from chessrules.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move.

    ``flags`` is the 4-bit :class:`MoveFlag` field; see its docstring for the
    meaning of each combination.
    """

    from_sq: Square
    to_sq: Square
    flags: MoveFlag = MoveFlag.QUIET

    # ── Classification ───────────────────────────────────────────────────

    @property
    def is_capture(self) -> bool:
        return bool(self.flags & MoveFlag.CAPTURE)

    @property
    def is_promotion(self) -> bool:
        return bool(self.flags & MoveFlag.PROMOTION)

    @property
    def is_double_pawn_push(self) -> bool:
        return self.flags == MoveFlag.DOUBLE_PAWN_PUSH

    @property
    def is_en_passant(self) -> bool:
        return self.flags == MoveFlag.EN_PASSANT

    @property
    def is_kingside_castle(self) -> bool:
        return self.flags == MoveFlag.KING_CASTLE

    @property
    def is_queenside_castle(self) -> bool:
        return self.flags == MoveFlag.QUEEN_CASTLE

    @property
    def is_castle(self) -> bool:
        return self.is_kingside_castle or self.is_queenside_castle

    @property
    def promotion(self) -> PieceKind | None:
        """Piece a pawn turns into, selected by the low two flag bits."""
        if not self.is_promotion:
            return None
        return PROMOTION_KINDS[int(self.flags) & 0b11]

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Encoded text form, e.g. ``"e2 e4 1"``."""
        return f"{square_name(self.from_sq)} {square_name(self.to_sq)} {int(self.flags)}"


def promotion_flags(kind: PieceKind, capture: bool = False) -> MoveFlag:
    """Flag value for promoting to *kind*, optionally with a capture."""
    flags = MoveFlag.PROMOTION | MoveFlag(PROMOTION_KINDS.index(kind))
    if capture:
        flags |= MoveFlag.CAPTURE
    return flags
