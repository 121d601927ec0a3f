"""Notation package: algebraic squares and position records.

The encoded-move codec lives in :mod:`chessrules.core.notation.move_text`; it
depends on :class:`~chessrules.core.move.Move` and is not re-exported here.
"""

from chessrules.core.notation.algebraic import (
    from_algebraic,
    parse_square,
    square_coords,
    square_index,
    square_name,
    to_algebraic,
)
from chessrules.core.notation.models import PositionRecord
from chessrules.core.notation.record import STARTING_RECORD, format_record, parse_record

__all__ = [
    "STARTING_RECORD",
    "PositionRecord",
    "format_record",
    "from_algebraic",
    "parse_record",
    "parse_square",
    "square_coords",
    "square_index",
    "square_name",
    "to_algebraic",
]
