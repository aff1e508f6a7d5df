"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.core.move import Move
from chessrules.core.state import GameState

Play = Callable[..., GameState]


def play_moves(state: GameState, *moves: str) -> GameState:
    """Apply coordinate moves in order, failing the test on any rejection."""
    for text in moves:
        move = Move.from_uci(text)
        next_state = state.apply_move(move.from_sq, move.to_sq)
        assert next_state is not None, f"{text} was rejected"
        state = next_state
    return state


@pytest.fixture
def initial_state() -> GameState:
    return GameState.initial()


@pytest.fixture
def play() -> Play:
    """``play(state, "e2e4", "e7e5", ...)`` → resulting state."""
    return play_moves
