"""FEN-style serialisation for the persistence layer, plus a lenient loader."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from chessrules.core.board import Board
from chessrules.core.config import DEFAULT_RULES, RulesConfig
from chessrules.core.enums import CastlingRights, Color
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.types import Square, from_algebraic, to_algebraic

if TYPE_CHECKING:
    from chessrules.core.state import GameState

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: tuple[tuple[str, CastlingRights], ...] = (
    ("K", CastlingRights.WHITE_KINGSIDE),
    ("Q", CastlingRights.WHITE_QUEENSIDE),
    ("k", CastlingRights.BLACK_KINGSIDE),
    ("q", CastlingRights.BLACK_QUEENSIDE),
)


def board_to_fen(board: Board) -> str:
    """Piece-placement field, rank 8 first."""
    rows: list[str] = []
    for row in range(8):
        empty = 0
        text = ""
        for col in range(8):
            piece = board[Square(row, col)]
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)


def board_from_fen(placement: str) -> Board:
    """Parse a piece-placement field into a :class:`Board`."""
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {placement!r}")
    board = Board()
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {placement!r}")
                col += step
            else:
                if col >= 8:
                    raise ValueError(f"Invalid FEN rank width: {placement!r}")
                board[Square(row, col)] = Piece.from_char(ch)
                col += 1
            if col > 8:
                raise ValueError(f"Invalid FEN rank width: {placement!r}")
        if col != 8:
            raise ValueError(f"Invalid FEN rank width: {placement!r}")
    return board


def state_to_fen(state: GameState) -> str:
    """Serialise a :class:`GameState` to a six-field FEN string."""
    side_str = "w" if state.current_player == Color.WHITE else "b"

    castling_str = "".join(
        ch for ch, right in _CASTLING_CHARS if state.castling & right
    )
    if not castling_str:
        castling_str = "-"

    ep_str = to_algebraic(state.en_passant) if state.en_passant is not None else "-"

    return (
        f"{board_to_fen(state.board)} {side_str} {castling_str} {ep_str} "
        f"{state.halfmove_clock} {state.fullmove_number}"
    )


def state_from_fen(fen: str, rules: RulesConfig = DEFAULT_RULES) -> GameState:
    """Build a :class:`GameState` from FEN, with its status classified.

    Only the text structure is checked; the position itself is taken as
    given. Move history and the capture ledger start empty.
    """
    from chessrules.core.state import GameState

    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]
    board = board_from_fen(placement)

    if side_part not in ("w", "b"):
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")
    side = Color.WHITE if side_part == "w" else Color.BLACK

    castling = CastlingRights.NONE
    if castling_part != "-":
        lookup = dict(_CASTLING_CHARS)
        for ch in castling_part:
            if ch not in lookup:
                raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
            castling |= lookup[ch]

    en_passant = None if ep_part == "-" else from_algebraic(ep_part)

    try:
        halfmove = int(parts[4]) if len(parts) > 4 else 0
        fullmove = int(parts[5]) if len(parts) > 5 else 1
    except ValueError:
        raise ValueError(f"Invalid FEN move counters: {fen!r}") from None
    if halfmove < 0 or fullmove < 1:
        raise ValueError(f"Invalid FEN move counters: {fen!r}")

    state = GameState(
        board=board,
        current_player=side,
        castling=castling,
        en_passant=en_passant,
        halfmove_clock=halfmove,
        fullmove_number=fullmove,
        rules=rules,
    )
    return replace(state, status=Rules.classify(state))
