"""Tests for Board."""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceKind
from chessrules.core.errors import (
    InvalidCoordinateError,
    InvalidPieceSymbolError,
    MalformedRecordError,
)
from chessrules.core.piece import Piece
from chessrules.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    E2,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E4,
)

EMPTY_RANK = [" "] * 8


class TestBoardInitial:
    def test_major_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceKind.ROOK), (B1, PieceKind.KNIGHT), (C1, PieceKind.BISHOP),
            (D1, PieceKind.QUEEN), (E1, PieceKind.KING), (F1, PieceKind.BISHOP),
            (G1, PieceKind.KNIGHT), (H1, PieceKind.ROOK),
        ]
        for sq, kind in expected:
            assert board[sq] == Piece(Color.MAJOR, kind), f"Mismatch at square {sq}"

    def test_minor_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceKind.ROOK), (B8, PieceKind.KNIGHT), (C8, PieceKind.BISHOP),
            (D8, PieceKind.QUEEN), (E8, PieceKind.KING), (F8, PieceKind.BISHOP),
            (G8, PieceKind.KNIGHT), (H8, PieceKind.ROOK),
        ]
        for sq, kind in expected:
            assert board[sq] == Piece(Color.MINOR, kind), f"Mismatch at square {sq}"

    def test_pawns(self) -> None:
        board = Board.initial()
        assert all(8 <= sq < 16 for sq in board.pieces(Color.MAJOR, PieceKind.PAWN))
        assert all(48 <= sq < 56 for sq in board.pieces(Color.MINOR, PieceKind.PAWN))
        assert len(board.pieces(Color.MINOR, PieceKind.PAWN)) == 8

    def test_occupancy(self) -> None:
        board = Board.initial()
        assert board.occupancy().bit_count() == 32
        assert board.all_pieces_bitboard(Color.MAJOR) == 0xFFFF


class TestBoardMutation:
    def test_set_and_clear_updates_bitboards(self) -> None:
        board = Board()
        board[E4] = Piece(Color.MAJOR, PieceKind.KNIGHT)
        assert board.pieces_bitboard(Color.MAJOR, PieceKind.KNIGHT) == 1 << E4
        assert board.kind_bitboard(PieceKind.KNIGHT) == 1 << E4
        board[E4] = None
        assert board.occupancy() == 0

    def test_replace_piece(self) -> None:
        board = Board()
        board[E4] = Piece(Color.MAJOR, PieceKind.KNIGHT)
        board[E4] = Piece(Color.MINOR, PieceKind.QUEEN)
        assert board.all_pieces_bitboard(Color.MAJOR) == 0
        assert board.pieces(Color.MINOR, PieceKind.QUEEN) == [E4]

    def test_out_of_range_index(self) -> None:
        board = Board()
        with pytest.raises(InvalidCoordinateError):
            board[64]
        with pytest.raises(InvalidCoordinateError):
            board[-1] = None

    def test_copy_is_independent(self) -> None:
        board = Board.initial()
        clone = board.copy()
        clone[E2] = None
        assert board[E2] == Piece(Color.MAJOR, PieceKind.PAWN)
        assert clone != board

    def test_assign_refills_in_place(self) -> None:
        board = Board()
        board.assign(Board.initial())
        assert board == Board.initial()
        assert board.occupancy().bit_count() == 32

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert board == Board()


class TestBoardGrid:
    def test_from_grid(self) -> None:
        grid = [list(EMPTY_RANK) for _ in range(8)]
        grid[0][4] = "K"
        grid[7][4] = "k"
        board = Board.from_grid(grid)
        assert board[E1] == Piece(Color.MAJOR, PieceKind.KING)
        assert board[E8] == Piece(Color.MINOR, PieceKind.KING)
        assert board.occupancy().bit_count() == 2

    def test_grid_round_trip(self) -> None:
        board = Board.initial()
        assert Board.from_grid(board.to_grid()) == board

    def test_grid_is_copied(self) -> None:
        grid = Board.initial().to_grid()
        board = Board.from_grid(grid)
        grid[0][4] = " "
        assert board[E1] == Piece(Color.MAJOR, PieceKind.KING)

    def test_wrong_shape(self) -> None:
        with pytest.raises(MalformedRecordError):
            Board.from_grid([EMPTY_RANK] * 7)
        with pytest.raises(MalformedRecordError):
            Board.from_grid([EMPTY_RANK] * 7 + [[" "] * 9])

    def test_bad_symbol(self) -> None:
        grid = [list(EMPTY_RANK) for _ in range(8)]
        grid[3][3] = "x"
        with pytest.raises(InvalidPieceSymbolError):
            Board.from_grid(grid)
