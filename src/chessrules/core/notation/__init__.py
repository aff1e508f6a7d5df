"""Notation package: move notation and FEN serialisation."""

from chessrules.core.notation.algebraic import EN_PASSANT_SUFFIX, notate
from chessrules.core.notation.fen import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    state_from_fen,
    state_to_fen,
)

__all__ = [
    "EN_PASSANT_SUFFIX",
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
    "notate",
    "state_from_fen",
    "state_to_fen",
]
