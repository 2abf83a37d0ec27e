"""Tests for FEN import and export."""

import pytest

from chessroom.core.enums import CastlingRights, Color, PieceType
from chessroom.core.piece import Piece
from chessroom.core.types import E1, E3, E8
from chessroom.notation.fen import STARTING_FEN, position_from_fen, position_to_fen


class TestFenParsing:
    def test_starting_position(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.side_to_move == Color.WHITE
        assert pos.castling == CastlingRights.ALL
        assert pos.en_passant is None
        assert (pos.halfmove_clock, pos.fullmove_number) == (0, 1)
        assert pos.board[E1] == Piece(Color.WHITE, PieceType.KING)
        assert pos.board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_en_passant_square(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        assert position_from_fen(fen).en_passant == E3

    def test_partial_castling(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w Kq - 0 1"
        assert position_from_fen(fen).castling == (
            CastlingRights.WHITE_KINGSIDE | CastlingRights.BLACK_QUEENSIDE
        )

    def test_counters_optional(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4K3 w - -")
        assert (pos.halfmove_clock, pos.fullmove_number) == (0, 1)


class TestFenErrors:
    @pytest.mark.parametrize(
        ("fen", "match"),
        [
            ("invalid", "4-6 fields"),
            ("4k3/8/8/8/8/8/8/4K3 x - - 0 1", "side-to-move"),
            ("4k3/8/8/8/8/8/4K3 w - - 0 1", "8 ranks"),
            ("9/4k3/8/8/8/8/8/4K3 w - - 0 1", "Invalid FEN"),
            ("4k4/8/8/8/8/8/8/4K3 w - - 0 1", "rank width"),
            ("4k3/8/8/8/8/8/8/4K3 w KX - 0 1", "castling"),
            ("4k3/8/8/8/8/8/8/4K3 w KK - 0 1", "castling"),
            ("4k3/8/8/8/8/8/8/4K3 w - e3 0 1", "en-passant"),
            ("4k3/8/8/8/8/8/8/4K3 w - - x 1", "counters"),
            ("4k3/8/8/8/8/8/8/4K3 w - - 0 0", "counters"),
            ("8/8/8/8/8/8/8/4K3 w - - 0 1", "one black king"),
            ("4k3/8/8/8/8/8/8/3KK3 w - - 0 1", "one white king"),
            ("4k3/8/8/8/8/8/8/P3K3 w - - 0 1", "back rank"),
            ("4k3/4R3/8/8/8/8/8/4K3 w - - 0 1", "not to move in check"),
        ],
    )
    def test_rejected(self, fen: str, match: str) -> None:
        with pytest.raises(ValueError, match=match):
            position_from_fen(fen)

    def test_bad_piece_letter(self) -> None:
        with pytest.raises(ValueError):
            position_from_fen("4k3/8/8/8/8/8/8/4K2X w - - 0 1")


class TestFenExport:
    @pytest.mark.parametrize(
        "fen",
        [
            STARTING_FEN,
            "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1",
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1",
            "8/8/4k3/8/8/4K3/8/8 b - - 42 77",
        ],
    )
    def test_exact_text(self, fen: str) -> None:
        assert position_to_fen(position_from_fen(fen)) == fen
