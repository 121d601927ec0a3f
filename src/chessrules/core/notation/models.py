"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color
from chessrules.core.types import Square


@dataclass(slots=True)
class PositionRecord:
    """The six fields of a position record, parsed."""

    board: Board
    side_to_move: Color
    castling: CastlingRights
    en_passant: Square | None
    halfmove_clock: int
    fullmove_number: int
