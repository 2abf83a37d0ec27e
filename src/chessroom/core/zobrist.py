"""Zobrist keys used to hash positions for repetition detection."""

from __future__ import annotations

from typing import Final

from chessroom.core.enums import CastlingRights, Color
from chessroom.core.piece import Piece
from chessroom.core.types import Square

_SEED: Final = 0x5C0FFEE5D1CE0B0A
_MASK_64: Final = 0xFFFFFFFFFFFFFFFF


def _splitmix64(state: int) -> int:
    z = (state + 0x9E3779B97F4A7C15) & _MASK_64
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK_64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK_64
    return z ^ (z >> 31)


def _key_stream(count: int, offset: int = 0) -> tuple[int, ...]:
    return tuple(_splitmix64(_SEED + offset + i) for i in range(count))


_PIECE_BLOCK: Final = 2 * 6 * 64
_PIECE_KEYS: Final = _key_stream(_PIECE_BLOCK)
_BLACK_TO_MOVE_KEY: Final = _key_stream(1, _PIECE_BLOCK)[0]
_CASTLING_KEYS: Final = _key_stream(16, _PIECE_BLOCK + 1)
_EN_PASSANT_FILE_KEYS: Final = _key_stream(8, _PIECE_BLOCK + 17)


def piece_key(piece: Piece, sq: Square) -> int:
    index = (int(piece.color) * 6 + int(piece.piece_type) - 1) * 64 + sq
    return _PIECE_KEYS[index]


def side_key(color: Color) -> int:
    return _BLACK_TO_MOVE_KEY if color == Color.BLACK else 0


def castling_key(castling: CastlingRights) -> int:
    return _CASTLING_KEYS[int(castling) & 0xF]


def en_passant_key(ep_square: Square) -> int:
    """Key for an en-passant target; only the file matters once it is set."""
    return _EN_PASSANT_FILE_KEYS[ep_square & 7]
