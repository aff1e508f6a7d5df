"""Game layer: snapshot history, undo and single-writer move submission."""

from chessrules.game.session import (
    GameOverCallback,
    GameSession,
    MoveCallback,
    SessionEvents,
)

__all__ = [
    "GameOverCallback",
    "GameSession",
    "MoveCallback",
    "SessionEvents",
]
