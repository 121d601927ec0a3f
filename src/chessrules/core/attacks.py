"""Attack maps over the live board.

Bitboards are plain ``int`` masks, bit *i* set for square *i*. Nothing is
cached between calls: every query walks the current board.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceKind
from chessrules.core.types import Bitboard, Square, file_of, make_square, on_board, rank_of

if TYPE_CHECKING:
    from chessrules.core.position import Position


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

SLIDER_DIRS: dict[PieceKind, tuple[tuple[int, int], ...]] = {
    PieceKind.BISHOP: BISHOP_DIRS,
    PieceKind.ROOK: ROOK_DIRS,
    PieceKind.QUEEN: QUEEN_DIRS,
}


def pawn_forward(color: Color) -> int:
    """Rank step a pawn of *color* moves by: +1 for MAJOR, -1 for MINOR."""
    return 1 if color == Color.MAJOR else -1


# -- Occupancy ---------------------------------------------------------------


def occupied(position: Position) -> Bitboard:
    """All occupied squares."""
    return position.board.occupancy()


def occupied_by(position: Position, color: Color) -> Bitboard:
    return position.board.all_pieces_bitboard(color)


def occupied_by_kind(position: Position, kind: PieceKind) -> Bitboard:
    return position.board.kind_bitboard(kind)


# -- Attack patterns ---------------------------------------------------------


def _offset_attacks(sq: Square, offsets: tuple[tuple[int, int], ...]) -> Bitboard:
    file_idx = file_of(sq)
    rank_idx = rank_of(sq)
    mask = 0
    for df, dr in offsets:
        af = file_idx + df
        ar = rank_idx + dr
        if on_board(af, ar):
            mask |= 1 << make_square(af, ar)
    return mask


def _ray_attacks(
    board: Board, sq: Square, directions: tuple[tuple[int, int], ...]
) -> Bitboard:
    file_idx = file_of(sq)
    rank_idx = rank_of(sq)
    mask = 0
    for df, dr in directions:
        af = file_idx + df
        ar = rank_idx + dr
        while on_board(af, ar):
            to_sq = make_square(af, ar)
            mask |= 1 << to_sq
            # The first occupied square is attacked and ends the ray.
            if not board.is_empty(to_sq):
                break
            af += df
            ar += dr
    return mask


def attacks_from(board: Board, sq: Square) -> Bitboard:
    """Squares attacked by the occupant of *sq* (0 for an empty square)."""
    piece = board[sq]
    if piece is None:
        return 0

    kind = piece.kind
    if kind == PieceKind.KNIGHT:
        return _offset_attacks(sq, KNIGHT_OFFSETS)
    if kind == PieceKind.KING:
        return _offset_attacks(sq, KING_OFFSETS)
    if kind == PieceKind.PAWN:
        dr = pawn_forward(piece.color)
        return _offset_attacks(sq, ((-1, dr), (1, dr)))
    return _ray_attacks(board, sq, SLIDER_DIRS[kind])


def attacked(position: Position, by_color: Color) -> Bitboard:
    """Union of attacks from every piece of *by_color*.

    Squares held by *by_color*'s own pieces are included when another of its
    pieces covers them.
    """
    board = position.board
    mask = 0
    for sq in board.all_pieces(by_color):
        mask |= attacks_from(board, sq)
    return mask


# -- King safety -------------------------------------------------------------


def king_square(position: Position, color: Color) -> Square | None:
    """Square of *color*'s king, or ``None`` if it has none on the board."""
    board = position.board
    for sq in range(64):
        piece = board[sq]
        if piece is not None and piece.color == color and piece.kind == PieceKind.KING:
            return sq
    return None


def is_square_attacked(position: Position, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color*?"""
    return bool(attacked(position, by_color) >> sq & 1)


def is_in_check(position: Position, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent? ``False`` without a king."""
    sq = king_square(position, color)
    if sq is None:
        return False
    return is_square_attacked(position, sq, color.opposite)
