"""Move candidates and the immutable move-history record."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessrules.core.enums import PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square, from_algebraic, to_algebraic


@dataclass(frozen=True, slots=True)
class Move:
    """A ``(from, to)`` pair, e.g. one entry of a side's legal-move list."""

    from_sq: Square
    to_sq: Square

    def __str__(self) -> str:
        return f"{to_algebraic(self.from_sq)}{to_algebraic(self.to_sq)}"

    @property
    def uci(self) -> str:
        """Coordinate notation, e.g. ``e2e4``."""
        return str(self)

    @classmethod
    def from_uci(cls, text: str) -> Move:
        """Parse coordinate notation such as ``e2e4``.

        A trailing promotion letter (``e7e8q``) is accepted and ignored:
        pawns always promote to a queen.
        """
        text = text.strip()
        if len(text) not in (4, 5):
            raise ValueError(f"Invalid move text: {text!r}")
        try:
            return cls(from_algebraic(text[:2]), from_algebraic(text[2:4]))
        except ValueError:
            raise ValueError(f"Invalid move text: {text!r}") from None


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    from_sq: Square
    to_sq: Square
    piece: Piece
    notation: str
    timestamp: float = field(compare=False)
    captured: Piece | None = None
    is_check: bool = False
    is_checkmate: bool = False
    is_castling: bool = False
    is_en_passant: bool = False
    promotion: PieceType | None = None

    @property
    def move(self) -> Move:
        return Move(self.from_sq, self.to_sq)

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    def __str__(self) -> str:
        return self.notation
