"""SAN (Standard Algebraic Notation) output for recorded moves."""

from __future__ import annotations

from collections.abc import Iterable

from chessroom.core.attacks import is_in_check
from chessroom.core.enums import MoveFlag, PieceType
from chessroom.core.move import Move
from chessroom.core.move_generator import legal_moves
from chessroom.core.position import Position
from chessroom.core.types import FILE_NAMES, file_of, rank_of, square_name

_SAN_PIECE: dict[PieceType, str] = {
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}


def _disambiguation(position: Position, move: Move, legal: list[Move]) -> str:
    board = position.board
    piece = board[move.from_sq]
    rivals = [
        m.from_sq
        for m in legal
        if m.to_sq == move.to_sq
        and m.from_sq != move.from_sq
        and board[m.from_sq] == piece
    ]
    if not rivals:
        return ""
    if all(file_of(sq) != file_of(move.from_sq) for sq in rivals):
        return FILE_NAMES[file_of(move.from_sq)]
    if all(rank_of(sq) != rank_of(move.from_sq) for sq in rivals):
        return str(rank_of(move.from_sq) + 1)
    return square_name(move.from_sq)


def _resolve(move: Move, legal: list[Move]) -> Move:
    try:
        return legal[legal.index(move)]
    except ValueError:
        raise ValueError(f"Illegal move: {move}") from None


def move_to_san(position: Position, move: Move) -> str:
    """SAN of a legal *move* in *position*, the position before the move.

    *move* is matched against the generated moves, so a bare move works too.

    Raises:
        ValueError: *move* is not legal in *position*.
    """
    legal = legal_moves(position)
    return _san(position, _resolve(move, legal), legal)


def _san(position: Position, move: Move, legal: list[Move]) -> str:
    piece = position.board[move.from_sq]
    assert piece is not None

    if move.flags & MoveFlag.CASTLE_KINGSIDE:
        san = "O-O"
    elif move.flags & MoveFlag.CASTLE_QUEENSIDE:
        san = "O-O-O"
    else:
        if piece.piece_type == PieceType.PAWN:
            san = FILE_NAMES[file_of(move.from_sq)] if move.is_capture else ""
        else:
            san = _SAN_PIECE[piece.piece_type]
            san += _disambiguation(position, move, legal)
        if move.is_capture:
            san += "x"
        san += square_name(move.to_sq)
        if move.promotion is not None:
            san += "=" + _SAN_PIECE[move.promotion]

    after = position.copy()
    after.push(move)
    if is_in_check(after.board, after.side_to_move):
        san += "+" if legal_moves(after) else "#"
    return san


def moves_to_san(position: Position, moves: Iterable[Move]) -> list[str]:
    """SAN for a sequence of moves played from *position*, which is unchanged."""
    current = position.copy()
    sans: list[str] = []
    for move in moves:
        legal = legal_moves(current)
        resolved = _resolve(move, legal)
        sans.append(_san(current, resolved, legal))
        current.push(resolved)
    return sans
