"""Tests for Rules: check, checkmate, stalemate, 50-move draw, play."""

import pytest

from chessrules.core.enums import Color, GameResult, GameStatus, MoveFlag
from chessrules.core.errors import IllegalMoveError, MalformedTokenError
from chessrules.core.move import Move
from chessrules.core.notation import parse_square
from chessrules.core.position import Position
from chessrules.core.rules import DrawPolicy, Rules

FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"
SMOTHERED = "6rk/5Npp/8/8/8/8/8/K7 b - - 0 1"
STALEMATE = "7k/8/5KQ1/8/8/8/8/8 b - - 0 1"
ROOK_ENDING = "4k3/8/8/8/8/8/8/R3K3 w - - {halfmove} 80"


class TestCheck:
    def test_starting_not_in_check(self, start_position: Position) -> None:
        assert not Rules.is_in_check(start_position)

    def test_fools_mate_in_check(self) -> None:
        assert Rules.is_in_check(Position.import_record(FOOLS_MATE))


class TestCheckmate:
    def test_fools_mate(self) -> None:
        pos = Position.import_record(FOOLS_MATE)
        assert Rules.is_checkmate(pos)
        assert Rules.game_result(pos) == GameResult.MINOR_WINS

    def test_boxed_in_king(self) -> None:
        pos = Position.import_record(SMOTHERED)
        assert Rules.is_checkmate(pos)
        assert Rules.status(pos) == GameStatus.CHECKMATE
        assert Rules.game_result(pos) == GameResult.MAJOR_WINS

    def test_back_rank_mate(self) -> None:
        pos = Position.import_record("R2k4/8/3K4/8/8/8/8/8 b - - 0 1")
        assert Rules.is_checkmate(pos)

    def test_not_checkmate_when_can_escape(self) -> None:
        pos = Position.import_record("4k3/8/8/8/8/8/8/r3K3 w - - 0 1")
        assert not Rules.is_checkmate(pos)
        assert Rules.status(pos) == GameStatus.CHECK


class TestStalemate:
    def test_king_trapped(self) -> None:
        pos = Position.import_record(STALEMATE)
        assert Rules.is_stalemate(pos)
        assert Rules.status(pos) == GameStatus.STALEMATE
        assert Rules.game_result(pos) == GameResult.DRAW

    def test_not_stalemate_when_has_moves(self) -> None:
        pos = Position.import_record("7k/8/5K2/8/8/8/8/8 b - - 0 1")
        assert not Rules.is_stalemate(pos)


class TestFiftyMoveRule:
    def test_not_triggered_at_start(self, start_position: Position) -> None:
        assert not Rules.is_fifty_move_draw(start_position)

    def test_triggered_at_100_halfmoves(self) -> None:
        pos = Position.import_record(ROOK_ENDING.format(halfmove=100))
        assert Rules.legal_moves(pos)
        assert Rules.is_fifty_move_draw(pos)
        assert Rules.status(pos) == GameStatus.DRAW_FIFTY_MOVE
        assert Rules.game_result(pos) == GameResult.DRAW

    def test_not_triggered_at_99(self) -> None:
        pos = Position.import_record(ROOK_ENDING.format(halfmove=99))
        assert Rules.status(pos) == GameStatus.IN_PROGRESS

    def test_draw_overrides_mate(self) -> None:
        pos = Position.import_record(SMOTHERED.replace(" 0 1", " 100 60"))
        assert Rules.is_checkmate(pos)
        assert Rules.status(pos) == GameStatus.DRAW_FIFTY_MOVE
        assert Rules.game_result(pos) == GameResult.DRAW

    def test_draw_overrides_fools_mate(self) -> None:
        pos = Position.import_record(
            "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 100 3"
        )
        assert Rules.status(pos) == GameStatus.DRAW_FIFTY_MOVE

    def test_mate_below_limit(self) -> None:
        pos = Position.import_record(SMOTHERED.replace(" 0 1", " 99 60"))
        assert Rules.status(pos) == GameStatus.CHECKMATE

    def test_custom_policy(self) -> None:
        pos = Position.import_record(ROOK_ENDING.format(halfmove=100))
        policy = DrawPolicy(halfmove_limit=150)
        assert Rules.status(pos, policy) == GameStatus.IN_PROGRESS
        assert Rules.game_result(pos, policy) == GameResult.IN_PROGRESS


class TestPlay:
    def test_play_encoded_text(self, start_position: Position) -> None:
        move = Rules.play(start_position, "e2 e4 1")
        assert move == Move(parse_square("e2"), parse_square("e4"), MoveFlag.DOUBLE_PAWN_PUSH)
        assert start_position.side_to_move == Color.MINOR
        assert start_position.export_record().split()[3] == "e3"

    def test_play_move_object(self, start_position: Position) -> None:
        Rules.play(start_position, Move(parse_square("g1"), parse_square("f3")))
        assert start_position.halfmove_clock == 1

    def test_illegal_move(self, start_position: Position) -> None:
        with pytest.raises(IllegalMoveError):
            Rules.play(start_position, "e2 e5 0")
        assert start_position == Position.initial()

    def test_wrong_flags_are_illegal(self, start_position: Position) -> None:
        with pytest.raises(IllegalMoveError):
            Rules.play(start_position, "e2 e4 0")

    def test_malformed_text(self, start_position: Position) -> None:
        with pytest.raises(MalformedTokenError):
            Rules.play(start_position, "e2e4")

    def test_cannot_leave_king_in_check(self) -> None:
        pos = Position.import_record("4k3/4r3/8/8/8/8/4B3/4K3 w - - 0 1")
        with pytest.raises(IllegalMoveError):
            Rules.play(pos, "e2 d3 0")

    def test_scholars_mate(self, start_position: Position) -> None:
        for text in (
            "e2 e4 1", "e7 e5 1",
            "f1 c4 0", "b8 c6 0",
            "d1 h5 0", "g8 f6 0",
            "h5 f7 4",
        ):
            Rules.play(start_position, text)
        assert Rules.status(start_position) == GameStatus.CHECKMATE
        assert Rules.game_result(start_position) == GameResult.MAJOR_WINS


class TestGameResult:
    def test_in_progress_at_start(self, start_position: Position) -> None:
        assert Rules.game_result(start_position) == GameResult.IN_PROGRESS
        assert Rules.status(start_position) == GameStatus.IN_PROGRESS
