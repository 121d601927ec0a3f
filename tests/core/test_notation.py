"""Tests for algebraic squares and the encoded-move text codec."""

import pytest

from chessrules.core.enums import MoveFlag
from chessrules.core.errors import (
    ChessError,
    InvalidCoordinateError,
    MalformedTokenError,
)
from chessrules.core.move import Move
from chessrules.core.notation import (
    from_algebraic,
    parse_square,
    square_coords,
    square_index,
    square_name,
    to_algebraic,
)
from chessrules.core.notation.move_text import decode_move, encode_move
from chessrules.core.types import A1, B7, E2, E4, E7, E8, H8


class TestAlgebraic:
    def test_corners(self) -> None:
        assert to_algebraic(1, 1) == "a1"
        assert to_algebraic(8, 8) == "h8"

    def test_to_algebraic(self) -> None:
        assert to_algebraic(2, 7) == "b7"

    def test_from_algebraic(self) -> None:
        assert from_algebraic("b7") == (2, 7)
        assert from_algebraic("e4") == (5, 4)

    @pytest.mark.parametrize(("file", "rank"), [(0, 1), (9, 1), (1, 0), (1, 9), (-3, 4)])
    def test_out_of_range_coordinate(self, file: int, rank: int) -> None:
        with pytest.raises(InvalidCoordinateError):
            to_algebraic(file, rank)

    @pytest.mark.parametrize("text", ["", "a", "i1", "a9", "a0", "A1", "e44", " e4", "e4 "])
    def test_malformed_token(self, text: str) -> None:
        with pytest.raises(MalformedTokenError):
            from_algebraic(text)

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            from_algebraic("z9")
        assert issubclass(MalformedTokenError, ChessError)


class TestSquareIndex:
    def test_index_formula(self) -> None:
        assert square_index(1, 1) == A1
        assert square_index(8, 8) == H8
        assert square_index(2, 7) == B7 == 49

    def test_coords_inverse(self) -> None:
        for sq in range(64):
            assert square_index(*square_coords(sq)) == sq

    def test_square_name(self) -> None:
        assert square_name(0) == "a1"
        assert square_name(63) == "h8"
        assert parse_square("e4") == E4

    def test_index_out_of_range(self) -> None:
        with pytest.raises(InvalidCoordinateError):
            square_index(9, 1)
        with pytest.raises(InvalidCoordinateError):
            square_coords(64)


class TestMoveText:
    def test_encode_double_push(self) -> None:
        assert encode_move(Move(E2, E4, MoveFlag.DOUBLE_PAWN_PUSH)) == "e2 e4 1"

    def test_str_is_encoded_text(self) -> None:
        move = Move(E7, E8, MoveFlag.PROMOTION | MoveFlag.SPECIAL_1 | MoveFlag.SPECIAL_0)
        assert str(move) == "e7 e8 11"

    def test_decode(self) -> None:
        move = decode_move("e2 e4 1")
        assert move == Move(E2, E4, MoveFlag.DOUBLE_PAWN_PUSH)
        assert move.is_double_pawn_push

    def test_decode_promotion_capture(self) -> None:
        move = decode_move("b7 a8 15")
        assert move.is_capture
        assert move.is_promotion

    @pytest.mark.parametrize(
        "text",
        [
            "e2 e4",
            "e2 e4 1 0",
            "e2 e9 0",
            "e2 e4 x",
            "e2 e4 -1",
            "e2 e4 16",
            "e2 e4 6",
            "e2 e4 7",
        ],
    )
    def test_decode_rejects(self, text: str) -> None:
        with pytest.raises(MalformedTokenError):
            decode_move(text)
