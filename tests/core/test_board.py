"""Tests for Board."""

import pytest

from chessroom.core.board import Board
from chessroom.core.enums import Color, PieceType
from chessroom.core.errors import InvalidPosition
from chessroom.core.piece import Piece
from chessroom.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    E2,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E4,
)


class TestBoardInitial:
    def test_kings(self) -> None:
        board = Board.initial()
        assert board.get(E1) == Piece(Color.WHITE, PieceType.KING)
        assert board.get(E8) == Piece(Color.BLACK, PieceType.KING)

    def test_back_ranks(self) -> None:
        board = Board.initial()
        expected = [
            (A1, A8, PieceType.ROOK), (B1, B8, PieceType.KNIGHT),
            (C1, C8, PieceType.BISHOP), (D1, D8, PieceType.QUEEN),
            (E1, E8, PieceType.KING), (F1, F8, PieceType.BISHOP),
            (G1, G8, PieceType.KNIGHT), (H1, H8, PieceType.ROOK),
        ]
        for white_sq, black_sq, pt in expected:
            assert board[white_sq] == Piece(Color.WHITE, pt)
            assert board[black_sq] == Piece(Color.BLACK, pt)

    def test_pawns_on_second_and_seventh_rank(self) -> None:
        board = Board.initial()
        assert board.pieces(Color.WHITE, PieceType.PAWN) == list(range(8, 16))
        assert board.pieces(Color.BLACK, PieceType.PAWN) == list(range(48, 56))

    def test_empty_middle(self) -> None:
        board = Board.initial()
        assert all(board.is_empty(sq) for sq in range(16, 48))

    def test_piece_count(self) -> None:
        assert Board.initial().piece_count() == 32


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board.set(E4, piece)
        assert board.get(E4) == piece
        assert board.is_empty(E2)

    def test_set_none_clears(self) -> None:
        board = Board.initial()
        board.set(E2, None)
        assert board.get(E2) is None

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[E1] = None
        assert board != copy
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_find_king(self) -> None:
        board = Board.initial()
        assert board.find_king(Color.WHITE) == E1
        assert board.find_king(Color.BLACK) == E8

    def test_find_king_follows_moves(self) -> None:
        board = Board.initial()
        board[E1] = None
        board[E2] = Piece(Color.WHITE, PieceType.KING)
        assert board.find_king(Color.WHITE) == E2

    def test_find_king_missing_raises(self) -> None:
        board = Board()
        with pytest.raises(InvalidPosition, match="No WHITE king"):
            board.find_king(Color.WHITE)

    def test_king_captured_raises(self) -> None:
        board = Board.initial()
        board[E8] = Piece(Color.WHITE, PieceType.QUEEN)
        with pytest.raises(InvalidPosition):
            board.find_king(Color.BLACK)

    def test_occupied_counts(self) -> None:
        board = Board.initial()
        assert len(board.occupied(Color.WHITE)) == 16
        assert len(board.occupied(Color.BLACK)) == 16

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert all(board[sq] is None for sq in range(64))
        with pytest.raises(InvalidPosition):
            board.find_king(Color.BLACK)

    def test_repr(self) -> None:
        text = repr(Board.initial())
        assert text.splitlines()[0] == "8 r n b q k b n r"
        assert text.splitlines()[-1] == "  a b c d e f g h"
