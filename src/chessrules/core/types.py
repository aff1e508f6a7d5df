"""Square value type and coordinate helpers.

Board layout (row-major, as stored in the grid):
    row 0 = rank 8 (black's back rank), row 7 = rank 1 (white's back rank)
    col 0 = file a, col 7 = file h

So a8 = Square(0, 0), h8 = Square(0, 7), a1 = Square(7, 0), h1 = Square(7, 7).
"""

from __future__ import annotations

from dataclasses import dataclass

_FILES = "abcdefgh"
_RANKS = "87654321"


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable (row, col) board coordinate.

    Off-board values are representable; use :func:`in_bounds` before
    indexing a board with a computed square.
    """

    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> Square:
        return Square(self.row + d_row, self.col + d_col)

    def __str__(self) -> str:
        if in_bounds(self):
            return to_algebraic(self)
        return f"({self.row}, {self.col})"


def in_bounds(sq: Square) -> bool:
    """Whether both coordinates lie within 0..7."""
    return 0 <= sq.row < 8 and 0 <= sq.col < 8


def squares_equal(a: Square, b: Square) -> bool:
    return a.row == b.row and a.col == b.col


def file_letter(col: int) -> str:
    """File letter for a column index, e.g. 4 → 'e'."""
    return _FILES[col]


def to_algebraic(sq: Square) -> str:
    """Square name, e.g. Square(6, 4) → 'e2'."""
    if not in_bounds(sq):
        raise ValueError(f"Square off board: ({sq.row}, {sq.col})")
    return _FILES[sq.col] + _RANKS[sq.row]


def from_algebraic(name: str) -> Square:
    """Parse a square name, e.g. 'e2' → Square(6, 4)."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(_RANKS.index(name[1]), _FILES.index(name[0]))


def all_squares() -> list[Square]:
    """Every board square, a8 first, h1 last."""
    return [Square(row, col) for row in range(8) for col in range(8)]


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = (Square(0, col) for col in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(1, col) for col in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(2, col) for col in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(3, col) for col in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(4, col) for col in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(5, col) for col in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(6, col) for col in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = (Square(7, col) for col in range(8))
