"""Pseudo-legal and legal move generation."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessrules.core.attacks import (
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    SLIDER_DIRS,
    attacked,
    pawn_forward,
)
from chessrules.core.enums import PROMOTION_KINDS, CastlingRights, Color, MoveFlag, PieceKind
from chessrules.core.errors import WrongPieceKindError
from chessrules.core.legality import LegalityFilter
from chessrules.core.move import Move, promotion_flags
from chessrules.core.notation.algebraic import square_index, square_name
from chessrules.core.piece import Piece
from chessrules.core.types import (
    A1,
    A8,
    B1,
    B8,
    C1,
    C8,
    D1,
    D8,
    E1,
    E8,
    F1,
    F8,
    G1,
    G8,
    H1,
    H8,
    Bitboard,
    Square,
    file_of,
    make_square,
    on_board,
    rank_of,
)

if TYPE_CHECKING:
    from chessrules.core.position import Position


def _mask(*squares: Square) -> Bitboard:
    mask = 0
    for sq in squares:
        mask |= 1 << sq
    return mask


@dataclass(frozen=True, slots=True)
class _CastlingPath:
    right: CastlingRights
    flag: MoveFlag
    rook_sq: Square
    king_to: Square
    must_be_empty: Bitboard
    must_be_safe: Bitboard


_KING_HOME: tuple[Square, Square] = (E1, E8)

_CASTLING_PATHS: tuple[tuple[_CastlingPath, ...], tuple[_CastlingPath, ...]] = (
    (
        _CastlingPath(
            CastlingRights.MAJOR_KINGSIDE, MoveFlag.KING_CASTLE, H1, G1,
            _mask(F1, G1), _mask(E1, F1, G1),
        ),
        _CastlingPath(
            CastlingRights.MAJOR_QUEENSIDE, MoveFlag.QUEEN_CASTLE, A1, C1,
            _mask(B1, C1, D1), _mask(C1, D1, E1),
        ),
    ),
    (
        _CastlingPath(
            CastlingRights.MINOR_KINGSIDE, MoveFlag.KING_CASTLE, H8, G8,
            _mask(F8, G8), _mask(E8, F8, G8),
        ),
        _CastlingPath(
            CastlingRights.MINOR_QUEENSIDE, MoveFlag.QUEEN_CASTLE, A8, C8,
            _mask(B8, C8, D8), _mask(C8, D8, E8),
        ),
    ),
)


class MoveGenerator:
    """Generates moves for a given :class:`Position`.

    Per-kind generators take 1-indexed ``(file, rank)`` coordinates and
    produce moves for whatever color occupies that square.
    :meth:`legal_moves` mutates the position while testing candidates but
    always restores it before returning.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def legal_moves(self) -> list[Move]:
        """All strictly legal moves for the side to move."""
        return LegalityFilter(self._pos).filter(self.pseudo_legal_moves())

    def pseudo_legal_moves(self) -> list[Move]:
        """All pseudo-legal moves (may leave own king in check), a1 to h8."""
        moves: list[Move] = []
        color = self._pos.side_to_move
        board = self._board
        generators = self._generators()

        for sq in range(64):
            piece = board[sq]
            if piece is None or piece.color != color:
                continue
            generators[piece.kind](sq, color, moves)
        return moves

    def moves_from(self, file: int, rank: int) -> list[Move]:
        """Pseudo-legal moves of whatever piece stands on ``(file, rank)``."""
        sq = square_index(file, rank)
        piece = self._board[sq]
        if piece is None:
            raise WrongPieceKindError(f"No piece on {square_name(sq)}")
        moves: list[Move] = []
        self._generators()[piece.kind](sq, piece.color, moves)
        return moves

    # -- Per-kind API (1-indexed coordinates) ------------------------------

    def pawn_moves(self, file: int, rank: int) -> list[Move]:
        return self._moves_for(file, rank, PieceKind.PAWN)

    def knight_moves(self, file: int, rank: int) -> list[Move]:
        return self._moves_for(file, rank, PieceKind.KNIGHT)

    def bishop_moves(self, file: int, rank: int) -> list[Move]:
        return self._moves_for(file, rank, PieceKind.BISHOP)

    def rook_moves(self, file: int, rank: int) -> list[Move]:
        return self._moves_for(file, rank, PieceKind.ROOK)

    def queen_moves(self, file: int, rank: int) -> list[Move]:
        return self._moves_for(file, rank, PieceKind.QUEEN)

    def king_moves(self, file: int, rank: int) -> list[Move]:
        """King steps plus any castling the mover's rights allow."""
        return self._moves_for(file, rank, PieceKind.KING)

    def _moves_for(self, file: int, rank: int, kind: PieceKind) -> list[Move]:
        sq = square_index(file, rank)
        piece = self._board[sq]
        if piece is None or piece.kind != kind:
            raise WrongPieceKindError(
                f"Expected a {kind.name.lower()} on {square_name(sq)}, found {piece!r}"
            )
        moves: list[Move] = []
        self._generators()[kind](sq, piece.color, moves)
        return moves

    def _generators(self) -> dict[PieceKind, Callable[[Square, Color, list[Move]], None]]:
        return {
            PieceKind.PAWN: self._gen_pawn,
            PieceKind.KNIGHT: self._gen_knight,
            PieceKind.BISHOP: self._gen_sliding,
            PieceKind.ROOK: self._gen_sliding,
            PieceKind.QUEEN: self._gen_sliding,
            PieceKind.KING: self._gen_king,
        }

    # -- Piece-specific generators (private) -------------------------------

    def _capturable(self, sq: Square, color: Color) -> bool:
        target = self._board[sq]
        return target is not None and target.color != color and target.kind != PieceKind.KING

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        file_idx = file_of(sq)
        rank_idx = rank_of(sq)
        dr = pawn_forward(color)
        start_rank = 1 if color == Color.MAJOR else 6
        last_rank = 7 if color == Color.MAJOR else 0

        to_rank = rank_idx + dr
        if not 0 <= to_rank < 8:
            return
        promoting = to_rank == last_rank

        one_step = make_square(file_idx, to_rank)
        if board.is_empty(one_step):
            if promoting:
                for kind in PROMOTION_KINDS:
                    moves.append(Move(sq, one_step, promotion_flags(kind)))
            else:
                moves.append(Move(sq, one_step))
                if rank_idx == start_rank:
                    two_step = make_square(file_idx, rank_idx + 2 * dr)
                    if board.is_empty(two_step):
                        moves.append(Move(sq, two_step, MoveFlag.DOUBLE_PAWN_PUSH))

        for df in (-1, 1):
            if not on_board(file_idx + df, to_rank):
                continue
            cap_sq = make_square(file_idx + df, to_rank)
            if self._capturable(cap_sq, color):
                if promoting:
                    for kind in PROMOTION_KINDS:
                        moves.append(Move(sq, cap_sq, promotion_flags(kind, capture=True)))
                else:
                    moves.append(Move(sq, cap_sq, MoveFlag.CAPTURE))
            elif cap_sq == self._pos.en_passant and color == self._pos.side_to_move:
                moves.append(Move(sq, cap_sq, MoveFlag.EN_PASSANT))

    def _gen_offsets(
        self,
        sq: Square,
        color: Color,
        offsets: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        file_idx = file_of(sq)
        rank_idx = rank_of(sq)
        for df, dr in offsets:
            af = file_idx + df
            ar = rank_idx + dr
            if not on_board(af, ar):
                continue
            to_sq = make_square(af, ar)
            if board.is_empty(to_sq):
                moves.append(Move(sq, to_sq))
            elif self._capturable(to_sq, color):
                moves.append(Move(sq, to_sq, MoveFlag.CAPTURE))

    def _gen_knight(self, sq: Square, color: Color, moves: list[Move]) -> None:
        self._gen_offsets(sq, color, KNIGHT_OFFSETS, moves)

    def _gen_sliding(self, sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        piece = board[sq]
        assert piece is not None
        file_idx = file_of(sq)
        rank_idx = rank_of(sq)
        for df, dr in SLIDER_DIRS[piece.kind]:
            af = file_idx + df
            ar = rank_idx + dr
            while on_board(af, ar):
                to_sq = make_square(af, ar)
                if board.is_empty(to_sq):
                    moves.append(Move(sq, to_sq))
                    af += df
                    ar += dr
                    continue
                if self._capturable(to_sq, color):
                    moves.append(Move(sq, to_sq, MoveFlag.CAPTURE))
                break

    def _gen_king(self, sq: Square, color: Color, moves: list[Move]) -> None:
        self._gen_offsets(sq, color, KING_OFFSETS, moves)
        self._gen_castling(sq, color, moves)

    def _gen_castling(self, king_sq: Square, color: Color, moves: list[Move]) -> None:
        if king_sq != _KING_HOME[int(color)]:
            return
        rights = self._pos.castling
        if not rights & CastlingRights.both(color):
            return

        board = self._board
        occupancy = board.occupancy()
        own_rook = Piece(color, PieceKind.ROOK)
        threats: Bitboard | None = None

        for path in _CASTLING_PATHS[int(color)]:
            if not rights & path.right:
                continue
            if board[path.rook_sq] != own_rook or occupancy & path.must_be_empty:
                continue
            if threats is None:
                threats = attacked(self._pos, color.opposite)
            if threats & path.must_be_safe:
                continue
            moves.append(Move(king_sq, path.king_to, path.flag))
