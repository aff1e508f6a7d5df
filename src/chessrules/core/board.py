"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square, in_bounds

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Board:
    """64-cell board stored as one flat, fixed-size arena.

    Copies are plain list copies, so a simulated move on a copy never
    touches the original.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[Piece | None] = [None] * 64

    @staticmethod
    def _index(sq: Square) -> int:
        if not in_bounds(sq):
            raise IndexError(f"Square off board: ({sq.row}, {sq.col})")
        return sq.row * 8 + sq.col

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._cells[self._index(sq)]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._cells[self._index(sq)] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._cells[self._index(sq)] is None

    # -- Query helpers ------------------------------------------------------

    def path_clear(self, from_sq: Square, to_sq: Square) -> bool:
        """Whether every square strictly between two collinear squares is empty.

        The squares must share a row, a column or an exact diagonal.
        """
        d_row = _sign(to_sq.row - from_sq.row)
        d_col = _sign(to_sq.col - from_sq.col)
        current = from_sq.offset(d_row, d_col)
        while current != to_sq:
            if self[current] is not None:
                return False
            current = current.offset(d_row, d_col)
        return True

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied cell, a8 to h1."""
        for idx, piece in enumerate(self._cells):
            if piece is not None:
                yield Square(idx >> 3, idx & 7), piece

    def pieces(self, color: Color) -> list[Square]:
        """Squares occupied by *color*."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def piece_count(self) -> int:
        return sum(1 for piece in self._cells if piece is not None)

    def find_king(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` if it is not on the board."""
        for sq, piece in self.occupied():
            if piece.kind == PieceType.KING and piece.color == color:
                return sq
        return None

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._cells = self._cells.copy()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col in range(8):
            b[Square(1, col)] = Piece(PieceType.PAWN, Color.BLACK)
            b[Square(6, col)] = Piece(PieceType.PAWN, Color.WHITE)

        for col, kind in enumerate(_BACK_RANK):
            b[Square(0, col)] = Piece(kind, Color.BLACK)
            b[Square(7, col)] = Piece(kind, Color.WHITE)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(tuple(self._cells))

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(8):
            cells = self._cells[row * 8 : row * 8 + 8]
            rows.append(f"{8 - row} {' '.join(str(p) if p else '.' for p in cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
