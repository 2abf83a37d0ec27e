"""Piece relocation for a single move, shared by legality checks and play."""

from __future__ import annotations

from chessroom.core.board import Board
from chessroom.core.enums import MoveFlag
from chessroom.core.errors import InvalidPosition
from chessroom.core.move import Move
from chessroom.core.piece import Piece
from chessroom.core.types import Square, file_of, make_square, rank_of

# castle side -> (rook origin file, rook destination file)
_CASTLE_ROOK_FILES: dict[MoveFlag, tuple[int, int]] = {
    MoveFlag.CASTLE_KINGSIDE: (7, 5),
    MoveFlag.CASTLE_QUEENSIDE: (0, 3),
}


def en_passant_victim(move: Move) -> Square:
    """Square of the pawn removed by an en-passant capture."""
    return make_square(file_of(move.to_sq), rank_of(move.from_sq))


def castle_rook_squares(move: Move) -> tuple[Square, Square]:
    """(rook origin, rook destination) for a castling move."""
    side = move.flags & MoveFlag.CASTLE
    rook_from, rook_to = _CASTLE_ROOK_FILES[MoveFlag(side)]
    rank = rank_of(move.from_sq)
    return make_square(rook_from, rank), make_square(rook_to, rank)


def relocate(board: Board, move: Move) -> Piece | None:
    """Carry out *move* on *board* and return the captured piece, if any.

    Only piece placement changes; side to move, rights and clocks belong to
    :class:`~chessroom.core.position.Position`.
    """
    piece = board[move.from_sq]
    if piece is None:
        raise InvalidPosition(f"No piece to move on {move}")

    if move.flags & MoveFlag.EN_PASSANT:
        victim_sq = en_passant_victim(move)
        captured = board[victim_sq]
        board[victim_sq] = None
    else:
        captured = board[move.to_sq]

    board[move.from_sq] = None
    if move.promotion is not None:
        board[move.to_sq] = Piece(piece.color, move.promotion)
    else:
        board[move.to_sq] = piece

    if move.flags & MoveFlag.CASTLE:
        rook_from, rook_to = castle_rook_squares(move)
        rook = board[rook_from]
        if rook is None:
            raise InvalidPosition(f"Castling {move} without a rook on the corner")
        board[rook_from] = None
        board[rook_to] = rook

    return captured
