"""Move notation in the engine's simplified algebraic form.

No disambiguation between identical pieces, and no check or mate suffix:
those are carried as flags on :class:`~chessrules.core.move.MoveRecord`.
"""

from __future__ import annotations

from chessrules.core.enums import PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square, file_letter, to_algebraic

EN_PASSANT_SUFFIX = " e.p."


def notate(
    piece: Piece,
    from_sq: Square,
    to_sq: Square,
    is_capture: bool,
    is_castling: bool,
    is_en_passant: bool,
) -> str:
    """Render a move, e.g. ``Nf3``, ``exd5``, ``Bxc6``, ``O-O``, ``exd6 e.p.``."""
    if is_castling:
        return "O-O" if to_sq.col > from_sq.col else "O-O-O"

    text = piece.kind.letter
    if is_capture:
        if piece.kind == PieceType.PAWN:
            text += file_letter(from_sq.col)
        text += "x"
    text += to_algebraic(to_sq)

    if is_en_passant:
        text += EN_PASSANT_SUFFIX
    return text
