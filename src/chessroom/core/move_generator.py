"""Move generation: piece patterns, then the legality filter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessroom.core.attacks import (
    BISHOP_RAYS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    PAWN_CAPTURES,
    QUEEN_RAYS,
    ROOK_RAYS,
    is_attacked,
)
from chessroom.core.enums import (
    PROMOTION_TYPES,
    CastlingRights,
    Color,
    MoveFlag,
    PieceType,
)
from chessroom.core.legality import filter_legal, in_check
from chessroom.core.move import Move
from chessroom.core.piece import Piece
from chessroom.core.types import Square, make_square, rank_of

if TYPE_CHECKING:
    from chessroom.core.position import Position

_SLIDER_RAYS = {
    PieceType.BISHOP: BISHOP_RAYS,
    PieceType.ROOK: ROOK_RAYS,
    PieceType.QUEEN: QUEEN_RAYS,
}


class MoveGenerator:
    """Generates moves for the side to move of a :class:`Position`.

    The position is only read. Output order is stable: piece types from pawn
    to king, squares ascending, targets in table order.
    """

    __slots__ = ("_pos", "_board", "_color")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board
        self._color = position.side_to_move

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self) -> list[Move]:
        """Moves that do not leave the mover's own king attacked."""
        return filter_legal(self._board, self.generate_pseudo_legal_moves(), self._color)

    def generate_pseudo_legal_moves(self) -> list[Move]:
        """Moves that obey piece patterns and occupancy (may expose the king)."""
        moves: list[Move] = []
        board = self._board
        color = self._color
        for piece_type in PieceType:
            for sq in board.pieces(color, piece_type):
                if piece_type == PieceType.PAWN:
                    self._gen_pawn(sq, moves)
                elif piece_type == PieceType.KNIGHT:
                    self._gen_steps(sq, KNIGHT_TARGETS[sq], moves)
                elif piece_type == PieceType.KING:
                    self._gen_steps(sq, KING_TARGETS[sq], moves)
                    self._gen_castling(sq, moves)
                else:
                    self._gen_sliding(sq, _SLIDER_RAYS[piece_type][sq], moves)
        return moves

    # -- Piece-specific generators -----------------------------------------

    def _gen_pawn(self, sq: Square, moves: list[Move]) -> None:
        board = self._board
        color = self._color
        step = color.pawn_direction
        start_rank = 1 if color == Color.WHITE else 6
        last_rank = 7 if color == Color.WHITE else 0

        one_step = sq + step
        if board.is_empty(one_step):
            self._add_pawn_move(sq, one_step, MoveFlag.NONE, last_rank, moves)
            two_step = one_step + step
            if rank_of(sq) == start_rank and board.is_empty(two_step):
                moves.append(Move(sq, two_step, flags=MoveFlag.DOUBLE_PAWN))

        for target in PAWN_CAPTURES[color][sq]:
            victim = board[target]
            if victim is not None:
                if victim.color != color:
                    self._add_pawn_move(sq, target, MoveFlag.CAPTURE, last_rank, moves)
            elif target == self._pos.en_passant:
                moves.append(
                    Move(sq, target, flags=MoveFlag.CAPTURE | MoveFlag.EN_PASSANT)
                )

    @staticmethod
    def _add_pawn_move(
        sq: Square,
        target: Square,
        flags: MoveFlag,
        last_rank: int,
        moves: list[Move],
    ) -> None:
        if rank_of(target) != last_rank:
            moves.append(Move(sq, target, flags=flags))
            return
        for piece_type in PROMOTION_TYPES:
            moves.append(Move(sq, target, piece_type, flags | MoveFlag.PROMOTION))

    def _gen_steps(
        self, sq: Square, targets: tuple[Square, ...], moves: list[Move]
    ) -> None:
        board = self._board
        for target in targets:
            occupant = board[target]
            if occupant is None:
                moves.append(Move(sq, target))
            elif occupant.color != self._color:
                moves.append(Move(sq, target, flags=MoveFlag.CAPTURE))

    def _gen_sliding(
        self,
        sq: Square,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for ray in rays:
            for target in ray:
                occupant = board[target]
                if occupant is None:
                    moves.append(Move(sq, target))
                    continue
                if occupant.color != self._color:
                    moves.append(Move(sq, target, flags=MoveFlag.CAPTURE))
                break

    def _gen_castling(self, king_sq: Square, moves: list[Move]) -> None:
        color = self._color
        rank = color.back_rank
        if king_sq != make_square(4, rank):
            return
        rights = self._pos.castling
        can_kingside = bool(rights & CastlingRights.kingside(color))
        can_queenside = bool(rights & CastlingRights.queenside(color))
        if not (can_kingside or can_queenside):
            return
        if in_check(self._board, color):
            return

        if can_kingside and self._castle_path_clear(
            rook_file=7, empty_files=(5, 6), king_path_files=(5, 6)
        ):
            moves.append(
                Move(king_sq, make_square(6, rank), flags=MoveFlag.CASTLE_KINGSIDE)
            )
        if can_queenside and self._castle_path_clear(
            rook_file=0, empty_files=(1, 2, 3), king_path_files=(3, 2)
        ):
            moves.append(
                Move(king_sq, make_square(2, rank), flags=MoveFlag.CASTLE_QUEENSIDE)
            )

    def _castle_path_clear(
        self,
        *,
        rook_file: int,
        empty_files: tuple[int, ...],
        king_path_files: tuple[int, ...],
    ) -> bool:
        board = self._board
        color = self._color
        rank = color.back_rank
        if board[make_square(rook_file, rank)] != Piece(color, PieceType.ROOK):
            return False
        if any(not board.is_empty(make_square(f, rank)) for f in empty_files):
            return False
        opponent = color.opposite
        return not any(
            is_attacked(board, make_square(f, rank), opponent) for f in king_path_files
        )


def legal_moves(position: Position) -> list[Move]:
    """Legal moves for the side to move of *position*."""
    return MoveGenerator(position).generate_legal_moves()
