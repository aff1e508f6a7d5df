"""GameSession — snapshot history over immutable game states.

Keeps every :class:`GameState` reached in the game plus a cursor to the
current one. Undo and redo only move the cursor; a new move submitted
after an undo drops the snapshots beyond the cursor.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.core.enums import GameStatus
from chessrules.core.move import Move, MoveRecord
from chessrules.core.state import GameState
from chessrules.core.types import Square

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]  # record, state after
GameOverCallback = Callable[[GameStatus, GameState], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """Single game driven by one writer at a time.

    Thread-safety: :meth:`submit_move`, :meth:`undo`, :meth:`redo` and
    :meth:`reset` hold the session lock, so two callers can never both
    advance the same snapshot. Callbacks run after the new snapshot is
    committed and outside the lock; a failing callback propagates to the
    caller but does not roll the session back.
    """

    __slots__ = ("_snapshots", "_cursor", "_lock", "events")

    def __init__(self, state: GameState | None = None) -> None:
        self._snapshots: list[GameState] = [
            state if state is not None else GameState.initial()
        ]
        self._cursor = 0
        self._lock = threading.Lock()
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._snapshots[self._cursor]

    @property
    def history(self) -> tuple[GameState, ...]:
        """Snapshots from the start up to and including the current one."""
        return tuple(self._snapshots[: self._cursor + 1])

    @property
    def ply_count(self) -> int:
        """Number of half-moves played since the session's first snapshot."""
        return self._cursor

    @property
    def is_game_over(self) -> bool:
        return self.state.is_game_over

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._snapshots) - 1

    # ── Moves ────────────────────────────────────────────────────────────

    def legal_moves(self, from_sq: Square) -> list[Square]:
        return self.state.legal_moves(from_sq)

    def submit_move(self, from_sq: Square, to_sq: Square) -> MoveRecord | None:
        """Play a move on the current snapshot; ``None`` if it is rejected."""
        with self._lock:
            current = self._snapshots[self._cursor]
            if current.is_game_over:
                _LOGGER.info("Move %s-%s ignored: game is over", from_sq, to_sq)
                return None

            next_state = current.apply_move(from_sq, to_sq)
            if next_state is None:
                return None

            del self._snapshots[self._cursor + 1 :]
            self._snapshots.append(next_state)
            self._cursor += 1
            ply = self._cursor

        record = next_state.move_history[-1]
        _LOGGER.info("Move %d: %s (%s)", ply, record.notation, next_state.status)

        self._emit_move(record, next_state)
        if next_state.is_game_over:
            _LOGGER.info("Game over: %s", next_state.status)
            self._emit_game_over(next_state.status, next_state)
        return record

    def submit_uci(self, text: str) -> MoveRecord | None:
        """Submit a coordinate move such as ``e2e4``.

        Raises:
            ValueError: If *text* is not coordinate notation.
        """
        move = Move.from_uci(text)
        return self.submit_move(move.from_sq, move.to_sq)

    def undo(self) -> MoveRecord | None:
        """Step back one snapshot. Returns the undone record, or ``None``."""
        with self._lock:
            if self._cursor == 0:
                return None
            record = self._snapshots[self._cursor].move_history[-1]
            self._cursor -= 1
        _LOGGER.info("Undo %s", record.notation)
        return record

    def redo(self) -> MoveRecord | None:
        """Step forward over a previously undone snapshot."""
        with self._lock:
            if not self.can_redo:
                return None
            self._cursor += 1
            record = self._snapshots[self._cursor].move_history[-1]
        _LOGGER.info("Redo %s", record.notation)
        return record

    def reset(self, state: GameState | None = None) -> None:
        """Start over from *state* or the initial position."""
        with self._lock:
            self._snapshots = [state if state is not None else GameState.initial()]
            self._cursor = 0
        _LOGGER.info("New game")

    def to_fen(self) -> str:
        return self.state.to_fen()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, record: MoveRecord, state: GameState) -> None:
        for cb in self.events.on_move:
            try:
                cb(record, state)
            except Exception:
                _LOGGER.exception("Move listener failed after %s", record.notation)
                raise

    def _emit_game_over(self, status: GameStatus, state: GameState) -> None:
        for cb in self.events.on_game_over:
            try:
                cb(status, state)
            except Exception:
                _LOGGER.exception("Game-over listener failed on %s", status)
                raise
