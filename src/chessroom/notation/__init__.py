"""Text notation adapters for the API layer: coordinate moves, FEN, SAN and PGN."""

from chessroom.notation.coords import (
    move_from_coords,
    move_to_coords,
    parse_move,
    parse_promotion,
)
from chessroom.notation.fen import STARTING_FEN, position_from_fen, position_to_fen
from chessroom.notation.pgn import build_pgn, pgn_movetext, pgn_result_token
from chessroom.notation.san import move_to_san, moves_to_san

__all__ = [
    "STARTING_FEN",
    "build_pgn",
    "move_from_coords",
    "move_to_coords",
    "move_to_san",
    "moves_to_san",
    "parse_move",
    "parse_promotion",
    "pgn_movetext",
    "pgn_result_token",
    "position_from_fen",
    "position_to_fen",
]
