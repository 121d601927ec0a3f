"""Position: complete game state (board + metadata) with make/unmake."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, PieceKind
from chessrules.core.errors import WrongPieceKindError
from chessrules.core.move import Move
from chessrules.core.notation.algebraic import square_index, square_name
from chessrules.core.notation.models import PositionRecord
from chessrules.core.notation.record import (
    check_counter,
    check_en_passant,
    format_record,
    parse_record,
)
from chessrules.core.piece import Piece
from chessrules.core.types import Square, file_of, make_square, rank_of


@dataclass(slots=True)
class _PositionState:
    """Snapshot saved before each move so we can undo it."""

    castling: CastlingRights
    en_passant: Square | None
    halfmove_clock: int
    captured_piece: Piece | None


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Full-state snapshot: the exported record plus the undo-stack depth."""

    record: str
    history_depth: int


class Position:
    """Full chess position: board + side to move + castling + en passant + clocks.

    The position owns its board: a board passed to the constructor is copied.
    Clocks and the en-passant target are validated as for an imported record.
    Supports :meth:`make_move` / :meth:`unmake_move` via an internal history
    stack and whole-state :meth:`snapshot` / :meth:`restore`.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
        "_history",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.MAJOR,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        self.board = board.copy() if board is not None else Board.initial()
        check_counter(halfmove_clock, "halfmove clock", minimum=0)
        check_counter(fullmove_number, "fullmove number", minimum=1)
        if en_passant is not None:
            check_en_passant(en_passant, side_to_move, self.board)
        self.side_to_move = side_to_move
        self.castling = castling
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number
        self._history: list[_PositionState] = []

    # ── Construction / records ───────────────────────────────────────────

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position, MAJOR to move."""
        return cls()

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[str]]) -> Position:
        """Position from an 8x8 character grid (rank 1 first) with default state."""
        return cls(Board.from_grid(grid))

    @classmethod
    def import_record(cls, text: str) -> Position:
        """Parse a position record."""
        record = parse_record(text)
        pos = cls()
        pos._load(record)
        return pos

    def export_record(self) -> str:
        """Serialise to a position record."""
        return format_record(self._record())

    def _record(self) -> PositionRecord:
        return PositionRecord(
            board=self.board,
            side_to_move=self.side_to_move,
            castling=self.castling,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
        )

    def _load(self, record: PositionRecord) -> None:
        # Refill in place so holders of ``self.board`` keep a live view.
        self.board.assign(record.board)
        self.side_to_move = record.side_to_move
        self.castling = record.castling
        self.en_passant = record.en_passant
        self.halfmove_clock = record.halfmove_clock
        self.fullmove_number = record.fullmove_number

    # ── Accessors ────────────────────────────────────────────────────────

    def get_piece(self, file: int, rank: int) -> Piece | None:
        """Occupant of ``(file, rank)``, 1-indexed."""
        return self.board[square_index(file, rank)]

    # ── Core move operations ─────────────────────────────────────────────

    def make_move(self, move: Move) -> None:
        """Apply *move*, pushing undo state onto the history stack."""
        piece = self.board[move.from_sq]
        if piece is None:
            raise WrongPieceKindError(f"No piece on {square_name(move.from_sq)}")

        captured = self.board[move.to_sq]
        capture_sq = move.to_sq

        # En passant: the captured pawn sits beside the origin, not on the target
        if move.is_en_passant:
            capture_sq = make_square(file_of(move.to_sq), rank_of(move.from_sq))
            captured = self.board[capture_sq]

        self._history.append(
            _PositionState(
                castling=self.castling,
                en_passant=self.en_passant,
                halfmove_clock=self.halfmove_clock,
                captured_piece=captured,
            )
        )

        self.board[move.from_sq] = None
        if captured is not None:
            self.board[capture_sq] = None

        promotion = move.promotion
        self.board[move.to_sq] = (
            Piece(piece.color, promotion) if promotion is not None else piece
        )

        if move.is_castle:
            rook_from, rook_to = _rook_squares(move)
            self.board[rook_to] = self.board[rook_from]
            self.board[rook_from] = None

        if move.is_double_pawn_push:
            self.en_passant = make_square(
                file_of(move.from_sq),
                (rank_of(move.from_sq) + rank_of(move.to_sq)) // 2,
            )
        else:
            self.en_passant = None

        self._update_castling(move, piece)

        if piece.kind == PieceKind.PAWN or captured is not None:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1

        if self.side_to_move == Color.MINOR:
            self.fullmove_number += 1

        self.side_to_move = self.side_to_move.opposite

    def unmake_move(self, move: Move) -> None:
        """Undo the last :meth:`make_move`."""
        state = self._history.pop()

        self.side_to_move = self.side_to_move.opposite
        if self.side_to_move == Color.MINOR:
            self.fullmove_number -= 1

        piece = self.board[move.to_sq]
        assert piece is not None

        if move.is_promotion:
            piece = Piece(piece.color, PieceKind.PAWN)

        self.board[move.from_sq] = piece
        if move.is_en_passant:
            self.board[move.to_sq] = None
            ep_capture_sq = make_square(file_of(move.to_sq), rank_of(move.from_sq))
            self.board[ep_capture_sq] = state.captured_piece
        else:
            self.board[move.to_sq] = state.captured_piece

        if move.is_castle:
            rook_from, rook_to = _rook_squares(move)
            self.board[rook_from] = self.board[rook_to]
            self.board[rook_to] = None

        self.castling = state.castling
        self.en_passant = state.en_passant
        self.halfmove_clock = state.halfmove_clock

    # ── Snapshot / restore ───────────────────────────────────────────────

    def snapshot(self) -> Snapshot:
        """Capture the full state as an exported record."""
        return Snapshot(self.export_record(), len(self._history))

    def restore(self, snapshot: Snapshot) -> None:
        """Return to *snapshot*, discarding undo entries made since."""
        self._load(parse_record(snapshot.record))
        del self._history[snapshot.history_depth :]

    # ── Castling bookkeeping ─────────────────────────────────────────────

    _ROOK_CORNERS: dict[Square, CastlingRights] = {
        make_square(0, 0): CastlingRights.MAJOR_QUEENSIDE,
        make_square(7, 0): CastlingRights.MAJOR_KINGSIDE,
        make_square(0, 7): CastlingRights.MINOR_QUEENSIDE,
        make_square(7, 7): CastlingRights.MINOR_KINGSIDE,
    }

    def _update_castling(self, move: Move, piece: Piece) -> None:
        # Rights are only ever cleared here, never granted.
        if piece.kind == PieceKind.KING:
            self.castling &= ~CastlingRights.both(piece.color)

        for sq in (move.from_sq, move.to_sq):
            if sq in self._ROOK_CORNERS:
                self.castling &= ~self._ROOK_CORNERS[sq]

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Independent copy without history."""
        return Position(
            board=self.board,
            side_to_move=self.side_to_move,
            castling=self.castling,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.side_to_move == other.side_to_move
            and self.castling == other.castling
            and self.en_passant == other.en_passant
            and self.halfmove_clock == other.halfmove_clock
            and self.fullmove_number == other.fullmove_number
        )

    def __repr__(self) -> str:
        return f"Position({self.export_record()!r})"


def _rook_squares(move: Move) -> tuple[Square, Square]:
    """Rook origin and destination for a castling move."""
    r = rank_of(move.from_sq)
    if move.is_kingside_castle:
        return make_square(7, r), make_square(5, r)
    return make_square(0, r), make_square(3, r)


def import_record(text: str) -> Position:
    """Parse a position record into a new :class:`Position`."""
    return Position.import_record(text)


def export_record(position: Position) -> str:
    """Serialise *position* to a position record."""
    return position.export_record()
