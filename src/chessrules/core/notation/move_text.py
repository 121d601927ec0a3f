"""Encoded move text: ``"<from> <to> <flags>"``, e.g. ``"e2 e4 1"``."""

from __future__ import annotations

from chessrules.core.enums import VALID_FLAG_VALUES, MoveFlag
from chessrules.core.errors import MalformedTokenError
from chessrules.core.move import Move
from chessrules.core.notation.algebraic import parse_square


def encode_move(move: Move) -> str:
    """Serialise *move* to its text form."""
    return str(move)


def decode_move(text: str) -> Move:
    """Parse the text form produced by :func:`encode_move`."""
    parts = text.split()
    if len(parts) != 3:
        raise MalformedTokenError(f"Encoded move needs 3 tokens: {text!r}")
    from_part, to_part, flags_part = parts

    if not (flags_part.isascii() and flags_part.isdigit()):
        raise MalformedTokenError(f"Invalid move flags: {flags_part!r}")
    flags = int(flags_part)
    if flags not in VALID_FLAG_VALUES:
        raise MalformedTokenError(f"Undefined move flags: {flags_part!r}")

    return Move(parse_square(from_part), parse_square(to_part), MoveFlag(flags))
