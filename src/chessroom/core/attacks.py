"""Precomputed movement tables and the square-attack query."""

from __future__ import annotations

from chessroom.core.board import Board
from chessroom.core.enums import Color, PieceType
from chessroom.core.types import Square, file_of, rank_of

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)
KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

SquareTable = tuple[tuple[Square, ...], ...]
RayTable = tuple[tuple[tuple[Square, ...], ...], ...]


def _on_board(file: int, rank: int) -> bool:
    return 0 <= file < 8 and 0 <= rank < 8


def _build_targets(offsets: tuple[tuple[int, int], ...]) -> SquareTable:
    table: list[tuple[Square, ...]] = []
    for sq in range(64):
        f, r = file_of(sq), rank_of(sq)
        table.append(
            tuple(
                (r + dr) * 8 + f + df
                for df, dr in offsets
                if _on_board(f + df, r + dr)
            )
        )
    return tuple(table)


def _build_rays(directions: tuple[tuple[int, int], ...]) -> RayTable:
    table: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            f, r = file_of(sq) + df, rank_of(sq) + dr
            ray: list[Square] = []
            while _on_board(f, r):
                ray.append(r * 8 + f)
                f += df
                r += dr
            rays.append(tuple(ray))
        table.append(tuple(rays))
    return tuple(table)


def _build_pawn_sources(color: Color) -> SquareTable:
    """For each square, the squares from which a *color* pawn attacks it."""
    back = -1 if color == Color.WHITE else 1
    return _build_targets(((-1, back), (1, back)))


def _build_pawn_captures(color: Color) -> SquareTable:
    """For each square, the diagonal squares a *color* pawn there attacks."""
    ahead = 1 if color == Color.WHITE else -1
    return _build_targets(((-1, ahead), (1, ahead)))


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)
BISHOP_RAYS = _build_rays(BISHOP_DIRS)
ROOK_RAYS = _build_rays(ROOK_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)
PAWN_CAPTURES: tuple[SquareTable, SquareTable] = (
    _build_pawn_captures(Color.WHITE),
    _build_pawn_captures(Color.BLACK),
)
_PAWN_SOURCES: tuple[SquareTable, SquareTable] = (
    _build_pawn_sources(Color.WHITE),
    _build_pawn_sources(Color.BLACK),
)

_DIAGONAL_SLIDERS = (PieceType.BISHOP, PieceType.QUEEN)
_STRAIGHT_SLIDERS = (PieceType.ROOK, PieceType.QUEEN)


def _ray_hits(
    board: Board,
    rays: tuple[tuple[Square, ...], ...],
    by_color: Color,
    kinds: tuple[PieceType, PieceType],
) -> bool:
    for ray in rays:
        for sq in ray:
            piece = board[sq]
            if piece is None:
                continue
            if piece.color == by_color and piece.piece_type in kinds:
                return True
            break
    return False


def is_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Whether any piece of *by_color* attacks *sq*.

    Pawns attack diagonally only; forward pushes never count. Whether the
    attacker would expose its own king is ignored.
    """
    for src in _PAWN_SOURCES[by_color][sq]:
        piece = board[src]
        if (
            piece is not None
            and piece.color == by_color
            and piece.piece_type == PieceType.PAWN
        ):
            return True

    for src in KNIGHT_TARGETS[sq]:
        piece = board[src]
        if (
            piece is not None
            and piece.color == by_color
            and piece.piece_type == PieceType.KNIGHT
        ):
            return True

    for src in KING_TARGETS[sq]:
        piece = board[src]
        if (
            piece is not None
            and piece.color == by_color
            and piece.piece_type == PieceType.KING
        ):
            return True

    return _ray_hits(board, BISHOP_RAYS[sq], by_color, _DIAGONAL_SLIDERS) or _ray_hits(
        board, ROOK_RAYS[sq], by_color, _STRAIGHT_SLIDERS
    )


def is_in_check(board: Board, color: Color) -> bool:
    """Whether *color*'s king is attacked by the opponent."""
    return is_attacked(board, board.find_king(color), color.opposite)
