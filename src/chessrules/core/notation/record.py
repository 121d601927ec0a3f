"""Position record (FEN-equivalent) parsing and serialization.

A record has six space-separated fields::

    <placement> <active color> <castling> <en passant> <halfmove> <fullmove>

e.g. the standard start is
``rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1``.
"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color
from chessrules.core.errors import ChessError, MalformedRecordError
from chessrules.core.notation.algebraic import parse_square, square_name
from chessrules.core.notation.models import PositionRecord
from chessrules.core.piece import Piece
from chessrules.core.types import Square, make_square, rank_of

STARTING_RECORD = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_LETTERS: tuple[tuple[str, CastlingRights], ...] = (
    ("K", CastlingRights.MAJOR_KINGSIDE),
    ("Q", CastlingRights.MAJOR_QUEENSIDE),
    ("k", CastlingRights.MINOR_KINGSIDE),
    ("q", CastlingRights.MINOR_QUEENSIDE),
)
_SIDE_LETTERS: dict[str, Color] = {"w": Color.MAJOR, "b": Color.MINOR}


def parse_record(text: str) -> PositionRecord:
    """Parse a position record into its fields."""
    parts = text.split()
    if len(parts) != 6:
        raise MalformedRecordError(
            f"Invalid record (need 6 fields, got {len(parts)}): {text!r}"
        )
    placement, side_part, castling_part, ep_part, halfmove_part, fullmove_part = parts

    board = _parse_placement(placement)

    side = _SIDE_LETTERS.get(side_part)
    if side is None:
        raise MalformedRecordError(f"Invalid record side-to-move field: {side_part!r}")

    castling = _parse_castling(castling_part)
    ep = _parse_en_passant(ep_part, side, board)
    halfmove = _parse_counter(halfmove_part, "halfmove clock", minimum=0)
    fullmove = _parse_counter(fullmove_part, "fullmove number", minimum=1)

    return PositionRecord(board, side, castling, ep, halfmove, fullmove)


def format_record(record: PositionRecord) -> str:
    """Serialise record fields to text."""
    # 1. Board
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = record.board[make_square(file, rank)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Castling
    castling_str = "".join(
        letter for letter, right in _CASTLING_LETTERS if record.castling & right
    )

    # 3. En passant
    ep_str = square_name(record.en_passant) if record.en_passant is not None else "-"

    return (
        f"{board_str} {record.side_to_move.letter} {castling_str or '-'} {ep_str} "
        f"{record.halfmove_clock} {record.fullmove_number}"
    )


# -- Field parsers ----------------------------------------------------------


def _parse_placement(placement: str) -> Board:
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise MalformedRecordError(
            f"Invalid record board (must contain 8 ranks): {placement!r}"
        )
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch in "0123456789":
                step = int(ch)
                if not (1 <= step <= 8):
                    raise MalformedRecordError(f"Invalid record digit {ch!r}: {placement!r}")
                file += step
            else:
                if file >= 8:
                    raise MalformedRecordError(f"Invalid record rank width: {rank_text!r}")
                try:
                    board[make_square(file, rank)] = Piece.from_char(ch)
                except ChessError as exc:
                    raise MalformedRecordError(
                        f"Invalid record piece {ch!r}: {placement!r}"
                    ) from exc
                file += 1
        if file != 8:
            raise MalformedRecordError(f"Invalid record rank width: {rank_text!r}")
    return board


def _parse_castling(castling_part: str) -> CastlingRights:
    castling = CastlingRights.NONE
    if castling_part == "-":
        return castling
    rights = dict(_CASTLING_LETTERS)
    seen: set[str] = set()
    for ch in castling_part:
        right = rights.get(ch)
        if right is None or ch in seen:
            raise MalformedRecordError(f"Invalid record castling field: {castling_part!r}")
        seen.add(ch)
        castling |= right
    return castling


def _parse_en_passant(ep_part: str, side: Color, board: Board) -> Square | None:
    if ep_part == "-":
        return None
    try:
        ep = parse_square(ep_part)
    except ChessError as exc:
        raise MalformedRecordError(f"Invalid record en-passant square: {ep_part!r}") from exc
    check_en_passant(ep, side, board)
    return ep


def _parse_counter(text: str, name: str, minimum: int) -> int:
    if not (text.isascii() and text.isdigit()):
        raise MalformedRecordError(f"Invalid record {name}: {text!r}")
    value = int(text)
    check_counter(value, name, minimum)
    return value


# -- State checks -----------------------------------------------------------


def check_en_passant(ep: Square, side: Color, board: Board) -> None:
    """Raise :class:`MalformedRecordError` unless *ep* is a usable target."""
    # The target sits behind a pawn that the opponent just pushed two squares.
    expected_rank = 5 if side == Color.MAJOR else 2
    if rank_of(ep) != expected_rank:
        raise MalformedRecordError(
            f"Invalid record en-passant square for side-to-move: {square_name(ep)!r}"
        )
    if not board.is_empty(ep):
        raise MalformedRecordError(
            f"Record en-passant square is occupied: {square_name(ep)!r}"
        )


def check_counter(value: int, name: str, minimum: int) -> None:
    if value < minimum:
        raise MalformedRecordError(f"Invalid record {name}: {str(value)!r}")
