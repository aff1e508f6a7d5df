"""GameState — the complete game value and the move transition."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field, replace

from chessrules.core.board import Board
from chessrules.core.config import DEFAULT_RULES, RulesConfig
from chessrules.core.enums import CastlingRights, Color, GameStatus, PieceType
from chessrules.core.move import Move, MoveRecord
from chessrules.core.move_generator import MoveGenerator, legal_moves
from chessrules.core.notation.algebraic import notate
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.types import Square, in_bounds

_LOGGER = logging.getLogger(__name__)

# Rook home square -> (owner, castling right lost when that rook leaves it)
_ROOK_HOMES: dict[Square, tuple[Color, CastlingRights]] = {
    Square(7, 0): (Color.WHITE, CastlingRights.WHITE_QUEENSIDE),
    Square(7, 7): (Color.WHITE, CastlingRights.WHITE_KINGSIDE),
    Square(0, 0): (Color.BLACK, CastlingRights.BLACK_QUEENSIDE),
    Square(0, 7): (Color.BLACK, CastlingRights.BLACK_KINGSIDE),
}


@dataclass(frozen=True, slots=True)
class CapturedPieces:
    """Append-only capture ledger, one sequence per captured piece's color."""

    white: tuple[Piece, ...] = ()
    black: tuple[Piece, ...] = ()

    def __getitem__(self, color: Color) -> tuple[Piece, ...]:
        return self.white if color == Color.WHITE else self.black

    def with_capture(self, piece: Piece) -> CapturedPieces:
        if piece.color == Color.WHITE:
            return replace(self, white=self.white + (piece,))
        return replace(self, black=self.black + (piece,))


@dataclass(frozen=True, slots=True)
class GameState:
    """Full game value: board, side to move, rights, clocks and history.

    Never mutated after construction. :meth:`apply_move` returns a new
    state built on an independent board copy, so earlier states can be
    kept and compared freely. Callers must not write to ``board``.
    """

    board: Board = field(default_factory=Board.initial)
    current_player: Color = Color.WHITE
    status: GameStatus = GameStatus.ACTIVE
    move_history: tuple[MoveRecord, ...] = ()
    captured: CapturedPieces = field(default_factory=CapturedPieces)
    castling: CastlingRights = CastlingRights.ALL
    en_passant: Square | None = None
    halfmove_clock: int = 0
    fullmove_number: int = 1
    rules: RulesConfig = field(default=DEFAULT_RULES, compare=False, repr=False)

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def initial(cls, rules: RulesConfig = DEFAULT_RULES) -> GameState:
        """The standard starting position, white to move."""
        return cls(rules=rules)

    # ── Moves ────────────────────────────────────────────────────────────

    def legal_moves(self, from_sq: Square) -> list[Square]:
        """Legal targets for the piece on *from_sq* (any color)."""
        return legal_moves(self.board, from_sq, self)

    def all_legal_moves(self) -> list[Move]:
        """Every legal move for the side to move."""
        return Rules.legal_moves(self)

    def apply_move(self, from_sq: Square, to_sq: Square) -> GameState | None:
        return apply_move(self, from_sq, to_sq)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def last_move(self) -> MoveRecord | None:
        return self.move_history[-1] if self.move_history else None

    @property
    def is_game_over(self) -> bool:
        return self.status.is_terminal

    def to_fen(self) -> str:
        from chessrules.core.notation.fen import state_to_fen

        return state_to_fen(self)


def apply_move(state: GameState, from_sq: Square, to_sq: Square) -> GameState | None:
    """Play *from_sq* → *to_sq* on *state*.

    Returns the resulting state, or ``None`` when the move is rejected
    (empty or off-board origin, wrong side, or not a legal target). The
    input state is never modified.
    """
    if not (in_bounds(from_sq) and in_bounds(to_sq)):
        _LOGGER.debug("Rejected move %s-%s: off board", from_sq, to_sq)
        return None

    board = state.board
    mover = state.current_player
    piece = board[from_sq]
    if piece is None or piece.color != mover:
        _LOGGER.debug(
            "Rejected move %s-%s: no %s piece on origin", from_sq, to_sq, mover
        )
        return None

    gen = MoveGenerator.for_state(state)
    if to_sq not in gen.legal_moves(from_sq):
        _LOGGER.debug("Rejected move %s-%s: not a legal target", from_sq, to_sq)
        return None

    new_board = board.copy()
    captured = new_board[to_sq]

    # En passant: the captured pawn sits beside the origin, behind the target
    is_en_passant = gen.is_en_passant(from_sq, to_sq)
    if is_en_passant:
        victim_sq = Square(from_sq.row, to_sq.col)
        captured = new_board[victim_sq]
        new_board[victim_sq] = None

    # Castling: slide the rook next to the king's landing square
    is_castling = piece.kind == PieceType.KING and abs(to_sq.col - from_sq.col) == 2
    if is_castling:
        rook_from_col, rook_to_col = (7, 5) if to_sq.col > from_sq.col else (0, 3)
        rook_from = Square(from_sq.row, rook_from_col)
        new_board[Square(from_sq.row, rook_to_col)] = new_board[rook_from]
        new_board[rook_from] = None

    new_board[to_sq] = piece
    new_board[from_sq] = None

    promotion: PieceType | None = None
    if piece.kind == PieceType.PAWN and to_sq.row == mover.opposite.back_row:
        promotion = PieceType.QUEEN
        new_board[to_sq] = Piece(PieceType.QUEEN, mover)

    captured_ledger = state.captured
    if captured is not None:
        captured_ledger = captured_ledger.with_capture(captured)

    next_en_passant: Square | None = None
    if piece.kind == PieceType.PAWN and abs(to_sq.row - from_sq.row) == 2:
        next_en_passant = Square((from_sq.row + to_sq.row) // 2, from_sq.col)

    if piece.kind == PieceType.PAWN or captured is not None:
        halfmove_clock = 0
    else:
        halfmove_clock = state.halfmove_clock + 1

    fullmove_number = state.fullmove_number
    if mover == Color.BLACK:
        fullmove_number += 1

    next_state = GameState(
        board=new_board,
        current_player=mover.opposite,
        status=GameStatus.ACTIVE,
        move_history=state.move_history,
        captured=captured_ledger,
        castling=_updated_castling(state.castling, piece, from_sq),
        en_passant=next_en_passant,
        halfmove_clock=halfmove_clock,
        fullmove_number=fullmove_number,
        rules=state.rules,
    )
    status = Rules.classify(next_state)

    record = MoveRecord(
        from_sq=from_sq,
        to_sq=to_sq,
        piece=piece,
        notation=notate(
            piece, from_sq, to_sq, captured is not None, is_castling, is_en_passant
        ),
        timestamp=time.time(),
        captured=captured,
        is_check=status in (GameStatus.CHECK, GameStatus.CHECKMATE),
        is_checkmate=status == GameStatus.CHECKMATE,
        is_castling=is_castling,
        is_en_passant=is_en_passant,
        promotion=promotion,
    )
    _LOGGER.debug("Applied %s (%s), status %s", record.notation, record.move, status)

    return replace(
        next_state,
        status=status,
        move_history=state.move_history + (record,),
    )


def _updated_castling(
    castling: CastlingRights, piece: Piece, from_sq: Square
) -> CastlingRights:
    if piece.kind == PieceType.KING:
        return castling & ~CastlingRights.both(piece.color)
    if piece.kind == PieceType.ROOK and from_sq in _ROOK_HOMES:
        owner, right = _ROOK_HOMES[from_sq]
        if owner == piece.color:
            return castling & ~right
    return castling
