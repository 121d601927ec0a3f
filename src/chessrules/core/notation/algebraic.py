"""Algebraic notation: (file, rank) coordinates <-> square names and indices.

Files and ranks are 1-indexed here: ``(2, 7)`` is ``"b7"``.
"""

from __future__ import annotations

import re

from chessrules.core.errors import InvalidCoordinateError, MalformedTokenError
from chessrules.core.types import Square, file_of, is_valid_square, rank_of

_SQUARE_RE = re.compile(r"[a-h][1-8]")


def _check_coordinate(file: int, rank: int) -> None:
    if not 1 <= file <= 8:
        raise InvalidCoordinateError(f"File is out of range: {file!r}")
    if not 1 <= rank <= 8:
        raise InvalidCoordinateError(f"Rank is out of range: {rank!r}")


def to_algebraic(file: int, rank: int) -> str:
    """``(5, 4)`` → ``'e4'``."""
    _check_coordinate(file, rank)
    return chr(ord("a") + file - 1) + str(rank)


def from_algebraic(text: str) -> tuple[int, int]:
    """``'e4'`` → ``(5, 4)``. The text must already be trimmed."""
    if not isinstance(text, str) or _SQUARE_RE.fullmatch(text) is None:
        raise MalformedTokenError(f"Invalid algebraic square: {text!r}")
    return ord(text[0]) - ord("a") + 1, int(text[1])


def square_index(file: int, rank: int) -> Square:
    """Linear index of ``(file, rank)``: ``(file - 1) + (rank - 1) * 8``."""
    _check_coordinate(file, rank)
    return (file - 1) + (rank - 1) * 8


def square_coords(sq: Square) -> tuple[int, int]:
    """Inverse of :func:`square_index`."""
    if not is_valid_square(sq):
        raise InvalidCoordinateError(f"Square index is out of range: {sq!r}")
    return file_of(sq) + 1, rank_of(sq) + 1


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. 0 → 'a1', 63 → 'h8'."""
    return to_algebraic(*square_coords(sq))


def parse_square(text: str) -> Square:
    """Parse square name, e.g. 'e4' → 28."""
    return square_index(*from_algebraic(text))
