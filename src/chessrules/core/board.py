"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Sequence

from chessrules.core.enums import Color, PieceKind
from chessrules.core.errors import InvalidCoordinateError, MalformedRecordError
from chessrules.core.piece import Piece
from chessrules.core.types import Bitboard, Square, is_valid_square, make_square, squares_of

_PIECE_KIND_COUNT = 6
_COLOR_COUNT = 2
_EMPTY_CELL = " "

_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class Board:
    """Mutable 64-square board with incremental piece bitboards."""

    __slots__ = ("_squares", "_piece_bitboards", "_color_bitboards")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64
        # [color][kind-1] -> bitboard of occupied squares.
        self._piece_bitboards: list[list[Bitboard]] = [
            [0] * _PIECE_KIND_COUNT for _ in range(_COLOR_COUNT)
        ]
        # [color] -> bitboard of all occupied squares for that color.
        self._color_bitboards: list[Bitboard] = [0] * _COLOR_COUNT

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        if not is_valid_square(sq):
            raise InvalidCoordinateError(f"Square index is out of range: {sq!r}")
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        if not is_valid_square(sq):
            raise InvalidCoordinateError(f"Square index is out of range: {sq!r}")
        old_piece = self._squares[sq]
        if old_piece == piece:
            return

        mask = 1 << sq

        if old_piece is not None:
            old_color_idx = int(old_piece.color)
            self._piece_bitboards[old_color_idx][int(old_piece.kind) - 1] &= ~mask
            self._color_bitboards[old_color_idx] &= ~mask

        self._squares[sq] = piece

        if piece is None:
            return

        color_idx = int(piece.color)
        self._piece_bitboards[color_idx][int(piece.kind) - 1] |= mask
        self._color_bitboards[color_idx] |= mask

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color, kind: PieceKind) -> list[Square]:
        """Squares occupied by *color*'s *kind*."""
        return squares_of(self.pieces_bitboard(color, kind))

    def pieces_bitboard(self, color: Color, kind: PieceKind) -> Bitboard:
        """Bitboard of squares occupied by *color*'s *kind*."""
        return self._piece_bitboards[int(color)][int(kind) - 1]

    def kind_bitboard(self, kind: PieceKind) -> Bitboard:
        """Bitboard of squares holding *kind*, either color."""
        idx = int(kind) - 1
        return self._piece_bitboards[0][idx] | self._piece_bitboards[1][idx]

    def all_pieces_bitboard(self, color: Color) -> Bitboard:
        """Bitboard of all squares occupied by *color*."""
        return self._color_bitboards[int(color)]

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return squares_of(self.all_pieces_bitboard(color))

    def occupancy(self) -> Bitboard:
        return self._color_bitboards[0] | self._color_bitboards[1]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b._piece_bitboards = [row.copy() for row in self._piece_bitboards]
        b._color_bitboards = self._color_bitboards.copy()
        return b

    def assign(self, other: Board) -> None:
        """Overwrite this board in place with *other*'s placement."""
        self._squares = other._squares.copy()
        self._piece_bitboards = [row.copy() for row in other._piece_bitboards]
        self._color_bitboards = other._color_bitboards.copy()

    def clear(self) -> None:
        self._squares = [None] * 64
        self._piece_bitboards = [[0] * _PIECE_KIND_COUNT for _ in range(_COLOR_COUNT)]
        self._color_bitboards = [0] * _COLOR_COUNT

    # -- Factories ----------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(8):
            b[make_square(f, 1)] = Piece(Color.MAJOR, PieceKind.PAWN)
            b[make_square(f, 6)] = Piece(Color.MINOR, PieceKind.PAWN)

        for f, kind in enumerate(_BACK_RANK):
            b[make_square(f, 0)] = Piece(Color.MAJOR, kind)
            b[make_square(f, 7)] = Piece(Color.MINOR, kind)
        return b

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[str]]) -> Board:
        """Build a board from 8 ranks of 8 cells, rank 1 first, file a first.

        Each cell is a piece letter or a space for an empty square. The grid
        is copied; later changes to it do not affect the board.
        """
        if len(grid) != 8:
            raise MalformedRecordError(f"Grid must have 8 ranks, got {len(grid)}")
        b = cls()
        for rank_idx, row in enumerate(grid):
            if len(row) != 8:
                raise MalformedRecordError(
                    f"Grid rank {rank_idx + 1} must have 8 files, got {len(row)}"
                )
            for file_idx, cell in enumerate(row):
                if cell != _EMPTY_CELL:
                    b[make_square(file_idx, rank_idx)] = Piece.from_char(cell)
        return b

    def to_grid(self) -> list[list[str]]:
        """Inverse of :meth:`from_grid`."""
        return [
            [
                str(piece) if (piece := self._squares[make_square(f, r)]) else _EMPTY_CELL
                for f in range(8)
            ]
            for r in range(8)
        ]

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares
