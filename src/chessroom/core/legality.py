"""Legality filter: drop pseudo-legal moves that leave the mover in check."""

from __future__ import annotations

from collections.abc import Iterable

from chessroom.core.attacks import is_attacked, is_in_check
from chessroom.core.board import Board
from chessroom.core.enums import Color
from chessroom.core.mechanics import relocate
from chessroom.core.move import Move


def in_check(board: Board, color: Color) -> bool:
    """Whether *color*'s king currently stands attacked."""
    return is_in_check(board, color)


def leaves_king_safe(board: Board, move: Move, color: Color) -> bool:
    """Play *move* on a scratch copy of *board* and re-run the attack query."""
    scratch = board.copy()
    relocate(scratch, move)
    return not is_attacked(scratch, scratch.find_king(color), color.opposite)


def filter_legal(board: Board, moves: Iterable[Move], color: Color) -> list[Move]:
    """Keep the moves after which *color*'s king is not attacked, in order."""
    return [move for move in moves if leaves_king_safe(board, move, color)]
