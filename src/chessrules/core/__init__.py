"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Position, Rules

    pos = Position.initial()
    for move in Rules.legal_moves(pos):
        print(move)
    Rules.play(pos, "e2 e4 1")
    print(pos.export_record())
"""

from chessrules.core.attacks import attacked, attacks_from, is_in_check, king_square
from chessrules.core.board import Board
from chessrules.core.enums import (
    CastlingRights,
    Color,
    GameResult,
    GameStatus,
    MoveFlag,
    PieceKind,
)
from chessrules.core.errors import (
    ChessError,
    IllegalMoveError,
    InvalidCoordinateError,
    InvalidPieceSymbolError,
    MalformedRecordError,
    MalformedTokenError,
    WrongPieceKindError,
)
from chessrules.core.legality import LegalityFilter
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import (
    STARTING_RECORD,
    from_algebraic,
    parse_square,
    square_index,
    square_name,
    to_algebraic,
)
from chessrules.core.notation.move_text import decode_move, encode_move
from chessrules.core.perft import divide, perft
from chessrules.core.piece import Piece
from chessrules.core.position import Position, Snapshot, export_record, import_record
from chessrules.core.rules import DrawPolicy, Rules
from chessrules.core.types import Square

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameResult",
    "GameStatus",
    "MoveFlag",
    "PieceKind",
    # Errors
    "ChessError",
    "IllegalMoveError",
    "InvalidCoordinateError",
    "InvalidPieceSymbolError",
    "MalformedRecordError",
    "MalformedTokenError",
    "WrongPieceKindError",
    # Types / helpers
    "Square",
    "from_algebraic",
    "parse_square",
    "square_index",
    "square_name",
    "to_algebraic",
    # Domain objects
    "Board",
    "DrawPolicy",
    "LegalityFilter",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    "Snapshot",
    # Attack maps
    "attacked",
    "attacks_from",
    "is_in_check",
    "king_square",
    # Notation / tooling
    "STARTING_RECORD",
    "decode_move",
    "divide",
    "encode_move",
    "export_record",
    "import_record",
    "perft",
]
