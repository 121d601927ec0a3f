"""Legality filter: drop pseudo-legal moves that leave the mover's king attacked."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from chessrules.core.attacks import attacked, king_square
from chessrules.core.enums import PieceKind
from chessrules.core.move import Move

if TYPE_CHECKING:
    from chessrules.core.position import Position

_LOGGER = logging.getLogger(__name__)


class LegalityFilter:
    """Tests candidates by playing them on the position and restoring it.

    Every candidate is judged against the position as it stood when
    :meth:`filter` was called. The position must not be shared with another
    caller while a filter runs.
    """

    __slots__ = ("_pos",)

    def __init__(self, position: Position) -> None:
        self._pos = position

    def filter(self, moves: Iterable[Move]) -> list[Move]:
        """Candidates from *moves* that are legal, in the order given."""
        pos = self._pos
        mover = pos.side_to_move
        if king_square(pos, mover) is None:
            return list(moves)

        legal: list[Move] = []
        for move in moves:
            snapshot = pos.snapshot()
            try:
                pos.make_move(move)
                moved = pos.board[move.to_sq]
                if moved is not None and moved.kind == PieceKind.KING:
                    king_sq = move.to_sq
                else:
                    king_sq = king_square(pos, mover)
                assert king_sq is not None
                if attacked(pos, mover.opposite) >> king_sq & 1:
                    _LOGGER.debug("Rejected %s: king left attacked", move)
                    continue
                legal.append(move)
            finally:
                pos.restore(snapshot)
        return legal
