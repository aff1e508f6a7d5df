"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import GameState, from_algebraic

    state = GameState.initial()
    print(state.legal_moves(from_algebraic("g1")))
    state = state.apply_move(from_algebraic("e2"), from_algebraic("e4"))
"""

from chessrules.core.board import Board
from chessrules.core.config import DEFAULT_RULES, RulesConfig
from chessrules.core.enums import CastlingRights, Color, GameStatus, PieceType
from chessrules.core.move import Move, MoveRecord
from chessrules.core.move_generator import MoveGenerator, legal_moves
from chessrules.core.notation import (
    STARTING_FEN,
    board_to_fen,
    notate,
    state_from_fen,
    state_to_fen,
)
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules, classify_status
from chessrules.core.state import CapturedPieces, GameState, apply_move
from chessrules.core.types import (
    Square,
    from_algebraic,
    in_bounds,
    squares_equal,
    to_algebraic,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameStatus",
    "PieceType",
    # Types / helpers
    "Square",
    "from_algebraic",
    "in_bounds",
    "squares_equal",
    "to_algebraic",
    # Domain objects
    "Board",
    "CapturedPieces",
    "GameState",
    "Move",
    "MoveGenerator",
    "MoveRecord",
    "Piece",
    "Rules",
    # Configuration
    "DEFAULT_RULES",
    "RulesConfig",
    # Operations
    "apply_move",
    "classify_status",
    "legal_moves",
    # Notation
    "STARTING_FEN",
    "board_to_fen",
    "notate",
    "state_from_fen",
    "state_to_fen",
]
