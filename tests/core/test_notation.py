"""Tests for move notation, FEN import/export and coordinate parsing."""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, GameStatus, PieceType
from chessrules.core.move import Move, MoveRecord
from chessrules.core.notation import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    notate,
    state_from_fen,
    state_to_fen,
)
from chessrules.core.piece import Piece
from chessrules.core.types import (
    A1, A8, B5, C1, C6, D5, D6, E1, E2, E4, E5, E7, E8, F3, G1, Square,
)

KIWIPETE = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"

WHITE_PAWN = Piece(PieceType.PAWN, Color.WHITE)


class TestNotate:
    @pytest.mark.parametrize(
        ("piece", "from_sq", "to_sq", "capture", "expected"),
        [
            (WHITE_PAWN, E2, E4, False, "e4"),
            (Piece(PieceType.KNIGHT, Color.WHITE), G1, F3, False, "Nf3"),
            (WHITE_PAWN, E4, D5, True, "exd5"),
            (Piece(PieceType.BISHOP, Color.WHITE), B5, C6, True, "Bxc6"),
            (Piece(PieceType.KING, Color.BLACK), E8, E7, False, "Ke7"),
            (Piece(PieceType.QUEEN, Color.BLACK), Square(0, 3), E7, False, "Qe7"),
            (Piece(PieceType.ROOK, Color.WHITE), A1, A8, True, "Rxa8"),
        ],
    )
    def test_plain_moves(
        self,
        piece: Piece,
        from_sq: Square,
        to_sq: Square,
        capture: bool,
        expected: str,
    ) -> None:
        assert notate(piece, from_sq, to_sq, capture, False, False) == expected

    def test_knight_letter_is_n(self) -> None:
        knight = Piece(PieceType.KNIGHT, Color.BLACK)
        assert notate(knight, Square(0, 6), Square(2, 5), False, False, False) == "Nf6"

    def test_castling(self) -> None:
        king = Piece(PieceType.KING, Color.WHITE)
        assert notate(king, E1, G1, False, True, False) == "O-O"
        assert notate(king, E1, C1, False, True, False) == "O-O-O"

    def test_en_passant(self) -> None:
        assert notate(WHITE_PAWN, E5, D6, True, False, True) == "exd6 e.p."


class TestFenParsing:
    def test_starting_position(self) -> None:
        state = state_from_fen(STARTING_FEN)
        assert state.board == Board.initial()
        assert state.current_player == Color.WHITE
        assert state.castling == CastlingRights.ALL
        assert state.en_passant is None
        assert state.halfmove_clock == 0
        assert state.fullmove_number == 1
        assert state.status == GameStatus.ACTIVE

    def test_side_and_en_passant(self) -> None:
        state = state_from_fen(
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        )
        assert state.current_player == Color.BLACK
        assert state.en_passant == Square(5, 4)

    def test_partial_castling(self) -> None:
        state = state_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w Kq - 0 1")
        assert state.castling == (
            CastlingRights.WHITE_KINGSIDE | CastlingRights.BLACK_QUEENSIDE
        )

    def test_counters_optional(self) -> None:
        state = state_from_fen("4k3/8/8/8/8/8/8/4K3 w - -")
        assert state.halfmove_clock == 0
        assert state.fullmove_number == 1

    def test_status_classified(self) -> None:
        fen = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"
        assert state_from_fen(fen).status == GameStatus.CHECKMATE

    def test_history_and_ledger_empty(self) -> None:
        state = state_from_fen(KIWIPETE)
        assert state.move_history == ()
        assert state.captured.white == ()
        assert state.captured.black == ()

    @pytest.mark.parametrize(
        "fen",
        [
            "",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR x KQkq - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
            "rnbqkbnr/ppppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
            "rnbqkbnr/pppppppp/9/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
            "rnbqkbnr/pppppppp/7/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
            "rnbqkbnX/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KX - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq z9 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - a 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - -1 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 0",
        ],
    )
    def test_invalid_raises(self, fen: str) -> None:
        with pytest.raises(ValueError):
            state_from_fen(fen)


class TestFenSerialisation:
    def test_initial_board(self) -> None:
        assert board_to_fen(Board.initial()) == STARTING_FEN.split()[0]

    def test_board_round_trip(self) -> None:
        placement = KIWIPETE.split()[0]
        assert board_to_fen(board_from_fen(placement)) == placement

    @pytest.mark.parametrize(
        "fen",
        [
            STARTING_FEN,
            KIWIPETE,
            "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8 w - - 0 1",
            "rnbqkbnr/ppp1p1pp/8/3pPp2/8/8/PPPP1PPP/RNBQKBNR w KQkq f6 0 3",
        ],
    )
    def test_state_round_trip(self, fen: str) -> None:
        assert state_to_fen(state_from_fen(fen)) == fen

    def test_no_castling_dash(self) -> None:
        state = state_from_fen("4k3/8/8/8/8/8/8/4K3 b - - 12 40")
        assert state.to_fen() == "4k3/8/8/8/8/8/8/4K3 b - - 12 40"


class TestPiece:
    def test_fen_chars(self) -> None:
        assert str(Piece(PieceType.KNIGHT, Color.WHITE)) == "N"
        assert str(Piece(PieceType.QUEEN, Color.BLACK)) == "q"
        assert Piece.from_char("k") == Piece(PieceType.KING, Color.BLACK)

    def test_invalid_char(self) -> None:
        with pytest.raises(ValueError):
            Piece.from_char("X")

    def test_symbol(self) -> None:
        assert Piece(PieceType.KNIGHT, Color.BLACK).symbol == "♞"

    def test_minor_or_king(self) -> None:
        assert Piece(PieceType.BISHOP, Color.WHITE).is_minor_or_king
        assert not Piece(PieceType.ROOK, Color.WHITE).is_minor_or_king


class TestMoveText:
    def test_uci(self) -> None:
        move = Move(E2, E4)
        assert str(move) == "e2e4"
        assert move.uci == "e2e4"
        assert Move.from_uci("e2e4") == move

    def test_promotion_letter_ignored(self) -> None:
        assert Move.from_uci("a7a8q") == Move(Square(1, 0), Square(0, 0))

    @pytest.mark.parametrize("text", ["", "e2", "e2e4e6", "z9e4", "e2e0"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            Move.from_uci(text)

    def test_record_helpers(self) -> None:
        record = MoveRecord(
            from_sq=E4,
            to_sq=D5,
            piece=WHITE_PAWN,
            notation="exd5",
            timestamp=0.0,
            captured=Piece(PieceType.PAWN, Color.BLACK),
        )
        assert str(record) == "exd5"
        assert record.move == Move(E4, D5)
        assert record.is_capture
