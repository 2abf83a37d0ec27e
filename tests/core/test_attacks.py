"""Tests for attack queries and the legality filter."""

from chessroom.core.attacks import KNIGHT_TARGETS, is_attacked, is_in_check
from chessroom.core.board import Board
from chessroom.core.enums import Color, PieceType
from chessroom.core.legality import filter_legal, leaves_king_safe
from chessroom.core.move import Move
from chessroom.core.piece import Piece
from chessroom.core.types import A1, D4, D5, E1, E4, E5, E8, F3, H8, parse_square
from chessroom.notation.fen import position_from_fen


def board_of(fen: str) -> Board:
    return position_from_fen(fen).board


class TestTables:
    def test_knight_corner(self) -> None:
        assert sorted(KNIGHT_TARGETS[A1]) == [parse_square("c2"), parse_square("b3")]

    def test_knight_center_has_eight(self) -> None:
        assert len(KNIGHT_TARGETS[D4]) == 8


class TestIsAttacked:
    def test_pawn_attacks_diagonally_only(self) -> None:
        board = Board()
        board[E4] = Piece(Color.WHITE, PieceType.PAWN)
        assert is_attacked(board, D5, Color.WHITE)
        assert not is_attacked(board, E5, Color.WHITE)

    def test_black_pawn_direction(self) -> None:
        board = Board()
        board[E5] = Piece(Color.BLACK, PieceType.PAWN)
        assert is_attacked(board, D4, Color.BLACK)
        assert not is_attacked(board, D5, Color.BLACK)

    def test_slider_blocked(self) -> None:
        board = board_of("4k3/8/8/8/8/8/4P3/4R1K1 w - - 0 1")
        assert not is_attacked(board, E8, Color.WHITE)

    def test_slider_open(self) -> None:
        board = board_of("4k3/8/8/8/8/8/8/4R1K1 b - - 0 1")
        assert is_attacked(board, E8, Color.WHITE)

    def test_queen_diagonal(self) -> None:
        board = Board()
        board[A1] = Piece(Color.BLACK, PieceType.QUEEN)
        assert is_attacked(board, H8, Color.BLACK)
        assert not is_attacked(board, H8, Color.WHITE)

    def test_knight_jumps(self) -> None:
        board = board_of("4k3/8/8/8/8/8/PPPPPPPP/RNBQKBNR w - - 0 1")
        assert is_attacked(board, F3, Color.WHITE)

    def test_in_check(self) -> None:
        board = board_of("4k3/8/8/8/8/8/8/r3K3 w - - 0 1")
        assert is_in_check(board, Color.WHITE)
        assert not is_in_check(board, Color.BLACK)


class TestLegality:
    def test_pinned_piece_cannot_leave_line(self) -> None:
        board = board_of("4r1k1/8/8/8/8/8/4B3/4K3 w - - 0 1")
        move = Move(parse_square("e2"), parse_square("d3"))
        assert not leaves_king_safe(board, move, Color.WHITE)

    def test_king_cannot_step_into_attack(self) -> None:
        board = board_of("4k3/8/8/8/8/8/8/r3K3 w - - 0 1")
        moves = [Move(E1, parse_square("d1")), Move(E1, parse_square("e2"))]
        assert filter_legal(board, moves, Color.WHITE) == [moves[1]]

    def test_scratch_copy_leaves_board_alone(self) -> None:
        board = board_of("4k3/8/8/8/8/8/8/r3K3 w - - 0 1")
        before = board.copy()
        leaves_king_safe(board, Move(E1, parse_square("f2")), Color.WHITE)
        assert board == before
