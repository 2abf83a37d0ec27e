"""Rules engine - board, move generation, legality and terminal detection.

Nothing in this package performs I/O or keeps state between games.

Quick start::

    from chessroom.core import Position, legal_moves

    pos = Position()
    for move in legal_moves(pos):
        print(move)
"""

from chessroom.core.attacks import is_attacked, is_in_check
from chessroom.core.board import Board
from chessroom.core.codec import board_from_base64, board_to_base64
from chessroom.core.enums import (
    CastlingRights,
    Color,
    MoveFlag,
    OutcomeKind,
    PieceType,
)
from chessroom.core.errors import (
    ChessError,
    GameOver,
    IllegalMove,
    InvalidPosition,
    SnapshotError,
)
from chessroom.core.move import Move
from chessroom.core.move_generator import MoveGenerator, legal_moves
from chessroom.core.outcome import Outcome
from chessroom.core.piece import Piece
from chessroom.core.position import Position
from chessroom.core.rules import Rules
from chessroom.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "MoveFlag",
    "OutcomeKind",
    "PieceType",
    # Squares
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Outcome",
    "Piece",
    "Position",
    "Rules",
    # Queries
    "is_attacked",
    "is_in_check",
    "legal_moves",
    # Snapshots
    "board_from_base64",
    "board_to_base64",
    # Errors
    "ChessError",
    "GameOver",
    "IllegalMove",
    "InvalidPosition",
    "SnapshotError",
]
