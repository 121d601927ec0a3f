"""High-level chess rules: check, checkmate, stalemate, 50-move draw."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessrules.core import attacks
from chessrules.core.enums import Color, GameResult, GameStatus
from chessrules.core.errors import IllegalMoveError
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation.move_text import decode_move

if TYPE_CHECKING:
    from chessrules.core.position import Position

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class DrawPolicy:
    """Draw thresholds applied by :class:`Rules`."""

    halfmove_limit: int = 100  # 100 half-moves = 50 full moves


_DEFAULT_POLICY = DrawPolicy()


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    @staticmethod
    def is_in_check(position: Position) -> bool:
        return attacks.is_in_check(position, position.side_to_move)

    @staticmethod
    def legal_moves(position: Position) -> list[Move]:
        return MoveGenerator(position).legal_moves()

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        if not Rules.is_in_check(position):
            return False
        return len(Rules.legal_moves(position)) == 0

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        if Rules.is_in_check(position):
            return False
        return len(Rules.legal_moves(position)) == 0

    @staticmethod
    def is_fifty_move_draw(position: Position, policy: DrawPolicy = _DEFAULT_POLICY) -> bool:
        return position.halfmove_clock >= policy.halfmove_limit

    @staticmethod
    def status(position: Position, policy: DrawPolicy = _DEFAULT_POLICY) -> GameStatus:
        """Status of the side to move.

        The 50-move draw is reported first, even on a mated or stalemated
        board.
        """
        in_check = Rules.is_in_check(position)

        if Rules.is_fifty_move_draw(position, policy):
            status = GameStatus.DRAW_FIFTY_MOVE
        elif not Rules.legal_moves(position):
            status = GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE
        elif in_check:
            return GameStatus.CHECK
        else:
            return GameStatus.IN_PROGRESS

        _LOGGER.debug("Game over (%s): %s", status, position.export_record())
        return status

    @staticmethod
    def game_result(position: Position, policy: DrawPolicy = _DEFAULT_POLICY) -> GameResult:
        """Determine the current game result."""
        status = Rules.status(position, policy)
        if status == GameStatus.CHECKMATE:
            return (
                GameResult.MINOR_WINS
                if position.side_to_move == Color.MAJOR
                else GameResult.MAJOR_WINS
            )
        if status in (GameStatus.STALEMATE, GameStatus.DRAW_FIFTY_MOVE):
            return GameResult.DRAW
        return GameResult.IN_PROGRESS

    @staticmethod
    def play(position: Position, move: Move | str) -> Move:
        """Apply *move* if it is legal, returning the applied move.

        *move* may be a :class:`Move` or its encoded text (``"e2 e4 1"``).
        """
        if isinstance(move, str):
            move = decode_move(move)
        if move not in Rules.legal_moves(position):
            _LOGGER.debug("Illegal move %s in %s", move, position.export_record())
            raise IllegalMoveError(f"Illegal move: {str(move)!r}")
        position.make_move(move)
        return move
