"""Legal and pseudo-legal move generation + attack detection."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import Square, in_bounds

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.state import GameState


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

_KING_HOME_COL = 4
# (rook home column, columns the king stands on / crosses / lands on)
_KINGSIDE_LANE: tuple[int, tuple[int, ...]] = (7, (4, 5, 6))
_QUEENSIDE_LANE: tuple[int, tuple[int, ...]] = (0, (4, 3, 2))


class MoveGenerator:
    """Generates moves for the pieces on a :class:`Board`.

    Castling rights and the en-passant target are passed in explicitly;
    a generator built from a bare board (both off) is what attack
    detection and the check-simulation use.
    """

    __slots__ = ("_board", "_castling", "_en_passant")

    def __init__(
        self,
        board: Board,
        castling: CastlingRights = CastlingRights.NONE,
        en_passant: Square | None = None,
    ) -> None:
        self._board = board
        self._castling = castling
        self._en_passant = en_passant

    @classmethod
    def for_state(cls, state: GameState) -> MoveGenerator:
        return cls(state.board, state.castling, state.en_passant)

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, from_sq: Square) -> list[Square]:
        """Targets of the piece on *from_sq* that keep its own king safe."""
        return [
            to_sq
            for to_sq in self.pseudo_legal_moves(from_sq)
            if not self.leaves_king_attacked(from_sq, to_sq)
        ]

    def pseudo_legal_moves(self, from_sq: Square) -> list[Square]:
        """Targets of the piece on *from_sq* (may leave its king in check)."""
        piece = self._board[from_sq]
        if piece is None:
            return []
        moves: list[Square] = []
        _PATTERNS[piece.kind](self, from_sq, piece.color, moves)
        return moves

    def legal_moves_for(self, color: Color) -> list[Move]:
        """Every legal move of every *color* piece."""
        moves: list[Move] = []
        for from_sq in self._board.pieces(color):
            for to_sq in self.legal_moves(from_sq):
                moves.append(Move(from_sq, to_sq))
        return moves

    def has_legal_move(self, color: Color) -> bool:
        return any(self.legal_moves(from_sq) for from_sq in self._board.pieces(color))

    def is_en_passant(self, from_sq: Square, to_sq: Square) -> bool:
        """Whether moving *from_sq* → *to_sq* is an en-passant capture."""
        piece = self._board[from_sq]
        return (
            piece is not None
            and piece.kind == PieceType.PAWN
            and to_sq == self._en_passant
            and to_sq.col != from_sq.col
            and self._board.is_empty(to_sq)
        )

    def leaves_king_attacked(self, from_sq: Square, to_sq: Square) -> bool:
        """Simulate the move on a scratch board and test the mover's king."""
        piece = self._board[from_sq]
        if piece is None:
            return False
        scratch = self._board.copy()
        if self.is_en_passant(from_sq, to_sq):
            scratch[Square(from_sq.row, to_sq.col)] = None
        scratch[to_sq] = piece
        scratch[from_sq] = None
        return MoveGenerator(scratch).is_in_check(piece.color)

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent? False without a king."""
        king_sq = self._board.find_king(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?

        Castling and en passant never count as attacks, and a king only
        covers its eight neighbours.
        """
        board = self._board

        pawn = Piece(PieceType.PAWN, by_color)
        pawn_row = sq.row - by_color.pawn_direction
        for d_col in (-1, 1):
            origin = Square(pawn_row, sq.col + d_col)
            if in_bounds(origin) and board[origin] == pawn:
                return True

        if self._any_at(sq, KNIGHT_OFFSETS, Piece(PieceType.KNIGHT, by_color)):
            return True

        if self._any_at(sq, KING_OFFSETS, Piece(PieceType.KING, by_color)):
            return True

        for directions, kinds in (
            (BISHOP_DIRS, (PieceType.BISHOP, PieceType.QUEEN)),
            (ROOK_DIRS, (PieceType.ROOK, PieceType.QUEEN)),
        ):
            for d_row, d_col in directions:
                current = sq.offset(d_row, d_col)
                while in_bounds(current):
                    piece = board[current]
                    if piece is None:
                        current = current.offset(d_row, d_col)
                        continue
                    if piece.color == by_color and piece.kind in kinds:
                        return True
                    break

        return False

    def _any_at(
        self, sq: Square, offsets: tuple[tuple[int, int], ...], piece: Piece
    ) -> bool:
        board = self._board
        for d_row, d_col in offsets:
            origin = sq.offset(d_row, d_col)
            if in_bounds(origin) and board[origin] == piece:
                return True
        return False

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Square]) -> None:
        board = self._board
        step = color.pawn_direction

        one_step = sq.offset(step, 0)
        if in_bounds(one_step) and board.is_empty(one_step):
            moves.append(one_step)
            if sq.row == color.back_row + step:
                two_step = sq.offset(2 * step, 0)
                if board.is_empty(two_step):
                    moves.append(two_step)

        for d_col in (-1, 1):
            cap_sq = sq.offset(step, d_col)
            if not in_bounds(cap_sq):
                continue
            target = board[cap_sq]
            if target is not None:
                if target.color != color:
                    moves.append(cap_sq)
            elif cap_sq == self._en_passant and board[
                Square(sq.row, cap_sq.col)
            ] == Piece(PieceType.PAWN, color.opposite):
                moves.append(cap_sq)

    def _gen_knight(self, sq: Square, color: Color, moves: list[Square]) -> None:
        self._gen_steps(sq, color, KNIGHT_OFFSETS, moves)

    def _gen_bishop(self, sq: Square, color: Color, moves: list[Square]) -> None:
        self._gen_sliding(sq, color, BISHOP_DIRS, moves)

    def _gen_rook(self, sq: Square, color: Color, moves: list[Square]) -> None:
        self._gen_sliding(sq, color, ROOK_DIRS, moves)

    def _gen_queen(self, sq: Square, color: Color, moves: list[Square]) -> None:
        self._gen_sliding(sq, color, QUEEN_DIRS, moves)

    def _gen_king(self, sq: Square, color: Color, moves: list[Square]) -> None:
        self._gen_steps(sq, color, KING_OFFSETS, moves)
        if self._castling:
            self._gen_castling(sq, color, moves)

    def _gen_steps(
        self,
        sq: Square,
        color: Color,
        offsets: tuple[tuple[int, int], ...],
        moves: list[Square],
    ) -> None:
        board = self._board
        for d_row, d_col in offsets:
            to_sq = sq.offset(d_row, d_col)
            if not in_bounds(to_sq):
                continue
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(to_sq)

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        directions: tuple[tuple[int, int], ...],
        moves: list[Square],
    ) -> None:
        board = self._board
        for d_row, d_col in directions:
            to_sq = sq.offset(d_row, d_col)
            while in_bounds(to_sq):
                target = board[to_sq]
                if target is None:
                    moves.append(to_sq)
                    to_sq = to_sq.offset(d_row, d_col)
                    continue
                if target.color != color:
                    moves.append(to_sq)
                break

    def _gen_castling(self, king_sq: Square, color: Color, moves: list[Square]) -> None:
        row = color.back_row
        if king_sq != Square(row, _KING_HOME_COL):
            return

        board = self._board
        opponent = color.opposite
        rook = Piece(PieceType.ROOK, color)

        for right, (rook_col, king_cols) in (
            (CastlingRights.kingside(color), _KINGSIDE_LANE),
            (CastlingRights.queenside(color), _QUEENSIDE_LANE),
        ):
            if not self._castling & right:
                continue
            rook_sq = Square(row, rook_col)
            if board[rook_sq] != rook or not board.path_clear(king_sq, rook_sq):
                continue
            if any(
                self.is_square_attacked(Square(row, col), opponent) for col in king_cols
            ):
                continue
            moves.append(Square(row, king_cols[-1]))


PatternFn = Callable[[MoveGenerator, Square, Color, list[Square]], None]

_PATTERNS: dict[PieceType, PatternFn] = {
    PieceType.PAWN: MoveGenerator._gen_pawn,
    PieceType.KNIGHT: MoveGenerator._gen_knight,
    PieceType.BISHOP: MoveGenerator._gen_bishop,
    PieceType.ROOK: MoveGenerator._gen_rook,
    PieceType.QUEEN: MoveGenerator._gen_queen,
    PieceType.KING: MoveGenerator._gen_king,
}


def legal_moves(board: Board, from_sq: Square, state: GameState) -> list[Square]:
    """Legal targets for the piece on *from_sq*, using *state*'s castling
    rights and en-passant target."""
    return MoveGenerator(board, state.castling, state.en_passant).legal_moves(from_sq)
