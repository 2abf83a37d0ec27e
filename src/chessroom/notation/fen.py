"""FEN import and export for setting up and exporting positions."""

from __future__ import annotations

from chessroom.core.attacks import is_in_check
from chessroom.core.board import Board
from chessroom.core.enums import CastlingRights, Color, PieceType
from chessroom.core.piece import Piece
from chessroom.core.position import Position
from chessroom.core.types import Square, make_square, parse_square, rank_of, square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_LETTERS: tuple[tuple[str, CastlingRights], ...] = (
    ("K", CastlingRights.WHITE_KINGSIDE),
    ("Q", CastlingRights.WHITE_QUEENSIDE),
    ("k", CastlingRights.BLACK_KINGSIDE),
    ("q", CastlingRights.BLACK_QUEENSIDE),
)


def _parse_placement(placement: str, fen: str) -> Board:
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += step
            else:
                if file >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                board[make_square(file, rank)] = Piece.from_char(ch)
                file += 1
            if file > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if file != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")
    return board


def _check_placement(board: Board, side: Color, fen: str) -> None:
    for color in Color:
        kings = board.pieces(color, PieceType.KING)
        if len(kings) != 1:
            raise ValueError(f"FEN must have exactly one {color} king: {fen!r}")
    for sq, piece in board.items():
        if piece.piece_type == PieceType.PAWN and rank_of(sq) in (0, 7):
            raise ValueError(f"FEN has a pawn on a back rank: {fen!r}")
    if is_in_check(board, side.opposite):
        raise ValueError(f"FEN leaves the side not to move in check: {fen!r}")


def _parse_castling(text: str) -> CastlingRights:
    if text == "-":
        return CastlingRights.NONE
    rights = CastlingRights.NONE
    letters = dict(_CASTLING_LETTERS)
    for ch in text:
        right = letters.get(ch)
        if right is None or rights & right:
            raise ValueError(f"Invalid FEN castling field: {text!r}")
        rights |= right
    return rights


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`.

    Raises:
        ValueError: malformed text, or a placement no game can reach
            (king count, pawns on back ranks, opponent left in check).
    """
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]
    board = _parse_placement(placement, fen)

    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    _check_placement(board, side, fen)
    castling = _parse_castling(castling_part)

    ep: Square | None = None
    if ep_part != "-":
        ep = parse_square(ep_part)
        expected_rank = 5 if side == Color.WHITE else 2
        if rank_of(ep) != expected_rank:
            raise ValueError(f"Invalid FEN en-passant square: {ep_part!r}")

    try:
        halfmove = int(parts[4]) if len(parts) > 4 else 0
        fullmove = int(parts[5]) if len(parts) > 5 else 1
    except ValueError:
        raise ValueError(f"Invalid FEN move counters: {fen!r}") from None
    if halfmove < 0 or fullmove < 1:
        raise ValueError(f"Invalid FEN move counters: {fen!r}")

    return Position(board, side, castling, ep, halfmove, fullmove)


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = pos.board[make_square(file, rank)]
            if piece is None:
                empty += 1
                continue
            if empty:
                row += str(empty)
                empty = 0
            row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)

    side = "w" if pos.side_to_move == Color.WHITE else "b"
    castling = "".join(ch for ch, right in _CASTLING_LETTERS if pos.castling & right)
    ep = square_name(pos.en_passant) if pos.en_passant is not None else "-"
    return (
        f"{'/'.join(rows)} {side} {castling or '-'} {ep} "
        f"{pos.halfmove_clock} {pos.fullmove_number}"
    )
