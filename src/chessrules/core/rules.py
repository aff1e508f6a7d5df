"""High-level chess rules: check, checkmate, stalemate, draw detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.config import DEFAULT_RULES, RulesConfig
from chessrules.core.enums import GameStatus
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.state import GameState


class Rules:
    """Static rule-checker that operates on a :class:`GameState`."""

    # Draw policy:
    # - half-move clock at the configured threshold,
    # - few pieces left and all of them kings or minor pieces.
    # Repetition is not tracked.

    @staticmethod
    def is_in_check(state: GameState) -> bool:
        gen = MoveGenerator(state.board)
        return gen.is_in_check(state.current_player)

    @staticmethod
    def legal_moves(state: GameState) -> list[Move]:
        """All legal moves for the side to move."""
        gen = MoveGenerator.for_state(state)
        return gen.legal_moves_for(state.current_player)

    @staticmethod
    def is_checkmate(state: GameState) -> bool:
        if not Rules.is_in_check(state):
            return False
        return not MoveGenerator.for_state(state).has_legal_move(state.current_player)

    @staticmethod
    def is_stalemate(state: GameState) -> bool:
        if Rules.is_in_check(state):
            return False
        return not MoveGenerator.for_state(state).has_legal_move(state.current_player)

    @staticmethod
    def is_fifty_move_draw(state: GameState) -> bool:
        return state.halfmove_clock >= state.rules.fifty_move_threshold

    @staticmethod
    def is_insufficient_material(
        board: Board, rules: RulesConfig = DEFAULT_RULES
    ) -> bool:
        """Few pieces left, and every one of them a king, knight or bishop."""
        pieces = [piece for _, piece in board.occupied()]
        if len(pieces) > rules.insufficient_material_max_pieces:
            return False
        return all(piece.is_minor_or_king for piece in pieces)

    @staticmethod
    def classify(state: GameState) -> GameStatus:
        """Determine the status of *state* for the side to move."""
        gen = MoveGenerator.for_state(state)
        in_check = gen.is_in_check(state.current_player)

        if not gen.has_legal_move(state.current_player):
            return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE

        if in_check:
            return GameStatus.CHECK

        if Rules.is_fifty_move_draw(state):
            return GameStatus.DRAW

        if Rules.is_insufficient_material(state.board, state.rules):
            return GameStatus.DRAW

        return GameStatus.ACTIVE


def classify_status(state: GameState) -> GameStatus:
    return Rules.classify(state)
