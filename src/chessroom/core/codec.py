"""Compact base64 board snapshots for storage and transport.

Layout: eight 64-bit big-endian bitboards, 64 bytes before encoding. Bit ``n``
of each bitboard is square ``n`` (a1 = bit 0).

    0  white occupancy
    1  black occupancy
    2  pawns
    3  bishops
    4  knights
    5  rooks
    6  queens
    7  kings

Only piece placement is stored. Side to move, rights and clocks travel with
the game state, not the snapshot.
"""

from __future__ import annotations

import base64
import binascii

from chessroom.core.board import Board
from chessroom.core.enums import Color, PieceType
from chessroom.core.errors import SnapshotError
from chessroom.core.piece import Piece

_COLOR_ORDER: tuple[Color, ...] = (Color.WHITE, Color.BLACK)
_PIECE_ORDER: tuple[PieceType, ...] = (
    PieceType.PAWN,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
    PieceType.QUEEN,
    PieceType.KING,
)
_BOARD_COUNT = len(_COLOR_ORDER) + len(_PIECE_ORDER)
SNAPSHOT_BYTES = _BOARD_COUNT * 8


def _bitboards(board: Board) -> list[int]:
    colors = [0] * len(_COLOR_ORDER)
    kinds = [0] * len(_PIECE_ORDER)
    for sq, piece in board.items():
        colors[_COLOR_ORDER.index(piece.color)] |= 1 << sq
        kinds[_PIECE_ORDER.index(piece.piece_type)] |= 1 << sq
    return colors + kinds


def board_to_bytes(board: Board) -> bytes:
    return b"".join(bb.to_bytes(8, "big") for bb in _bitboards(board))


def board_to_base64(board: Board) -> str:
    """Encode the placement of *board* as standard base64 text."""
    return base64.b64encode(board_to_bytes(board)).decode("ascii")


def board_from_bytes(raw: bytes) -> Board:
    if len(raw) != SNAPSHOT_BYTES:
        raise SnapshotError(
            f"Snapshot must be {SNAPSHOT_BYTES} bytes, got {len(raw)}"
        )
    boards = [int.from_bytes(raw[i : i + 8], "big") for i in range(0, len(raw), 8)]
    colors = boards[: len(_COLOR_ORDER)]
    kinds = boards[len(_COLOR_ORDER) :]

    if colors[0] & colors[1]:
        raise SnapshotError("Snapshot assigns a square to both colors")
    occupied = colors[0] | colors[1]
    kinds_union = 0
    for bb in kinds:
        if kinds_union & bb:
            raise SnapshotError("Snapshot assigns a square to two piece kinds")
        kinds_union |= bb
    if kinds_union != occupied:
        raise SnapshotError("Snapshot color and piece bitboards disagree")

    board = Board()
    for color, color_bb in zip(_COLOR_ORDER, colors):
        for piece_type, kind_bb in zip(_PIECE_ORDER, kinds):
            squares = color_bb & kind_bb
            while squares:
                lsb = squares & -squares
                board[lsb.bit_length() - 1] = Piece(color, piece_type)
                squares ^= lsb
    return board


def board_from_base64(text: str) -> Board:
    """Decode a snapshot produced by :func:`board_to_base64`.

    Raises:
        SnapshotError: the text is not valid base64 or not a consistent board.
    """
    try:
        raw = base64.b64decode(text.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as exc:
        raise SnapshotError(f"Snapshot is not valid base64: {exc}") from exc
    return board_from_bytes(raw)
