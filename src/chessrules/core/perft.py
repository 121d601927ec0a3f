"""Perft: leaf-node counts of the legal move tree, for move-generator checks."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chessrules.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessrules.core.position import Position

_LOGGER = logging.getLogger(__name__)


def perft(position: Position, depth: int) -> int:
    """Number of leaf nodes *depth* plies below *position*."""
    if depth < 0:
        raise ValueError(f"Perft depth must be non-negative: {depth!r}")
    if depth == 0:
        return 1
    moves = MoveGenerator(position).legal_moves()
    if depth == 1:
        return len(moves)
    nodes = 0
    for move in moves:
        position.make_move(move)
        nodes += perft(position, depth - 1)
        position.unmake_move(move)
    return nodes


def divide(position: Position, depth: int) -> dict[str, int]:
    """Per-root-move perft counts keyed by encoded move text."""
    if depth < 1:
        raise ValueError(f"Divide depth must be at least 1: {depth!r}")
    counts: dict[str, int] = {}
    for move in MoveGenerator(position).legal_moves():
        position.make_move(move)
        counts[str(move)] = perft(position, depth - 1)
        position.unmake_move(move)
        _LOGGER.debug("%s: %d", move, counts[str(move)])
    return counts
