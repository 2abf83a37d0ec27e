"""Position - board plus side to move, castling rights, en passant and clocks."""

from __future__ import annotations

from chessroom.core.attacks import PAWN_CAPTURES
from chessroom.core.board import Board
from chessroom.core.enums import CastlingRights, Color, MoveFlag, PieceType
from chessroom.core.errors import InvalidPosition
from chessroom.core.legality import leaves_king_safe
from chessroom.core.mechanics import relocate
from chessroom.core.move import Move
from chessroom.core.piece import Piece
from chessroom.core.types import A1, A8, H1, H8, Square
from chessroom.core.zobrist import castling_key, en_passant_key, piece_key, side_key

# Any move from or onto one of these squares ends the matching right.
_ROOK_CORNERS: dict[Square, CastlingRights] = {
    A1: CastlingRights.WHITE_QUEENSIDE,
    H1: CastlingRights.WHITE_KINGSIDE,
    A8: CastlingRights.BLACK_QUEENSIDE,
    H8: CastlingRights.BLACK_KINGSIDE,
}


class Position:
    """Everything needed to generate moves and judge the next ply.

    :meth:`push` applies a move in place. There is no unmake: callers that need
    the previous position keep a :meth:`copy`.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.castling = castling
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number

    # -- Move application ---------------------------------------------------

    def push(self, move: Move) -> Piece | None:
        """Apply a generated *move* and advance to the next ply.

        *move* must carry the flags the generator assigned to it. Returns the
        captured piece, if any.
        """
        mover = self.board[move.from_sq]
        if mover is None:
            raise InvalidPosition(f"No piece on the origin square of {move}")
        if mover.color != self.side_to_move:
            raise InvalidPosition(f"{move} moves a {mover.color} piece out of turn")

        captured = relocate(self.board, move)

        self._update_castling(move, mover)

        if move.flags & MoveFlag.DOUBLE_PAWN:
            self.en_passant = (move.from_sq + move.to_sq) // 2
        else:
            self.en_passant = None

        if mover.piece_type == PieceType.PAWN or captured is not None:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1

        if self.side_to_move == Color.BLACK:
            self.fullmove_number += 1
        self.side_to_move = self.side_to_move.opposite
        return captured

    def _update_castling(self, move: Move, mover: Piece) -> None:
        rights = self.castling
        if mover.piece_type == PieceType.KING:
            rights &= ~CastlingRights.both(mover.color)
        for sq in (move.from_sq, move.to_sq):
            corner = _ROOK_CORNERS.get(sq)
            if corner is not None:
                rights &= ~corner
        self.castling = rights

    # -- Hashing ------------------------------------------------------------

    def en_passant_capturable(self) -> bool:
        """Whether the side to move has a legal en-passant capture.

        A pawn on a capturing square that is pinned to its king does not count.
        """
        if self.en_passant is None:
            return False
        side = self.side_to_move
        own_pawn = Piece(side, PieceType.PAWN)
        flags = MoveFlag.CAPTURE | MoveFlag.EN_PASSANT
        target = self.en_passant
        return any(
            self.board[sq] == own_pawn
            and leaves_king_safe(self.board, Move(sq, target, flags=flags), side)
            for sq in PAWN_CAPTURES[side.opposite][target]
        )

    def position_hash(self) -> int:
        """Zobrist key of placement, side to move, rights and live en passant.

        Clocks are excluded, so positions reached at different move numbers
        hash the same.
        """
        key = side_key(self.side_to_move) ^ castling_key(self.castling)
        if self.en_passant is not None and self.en_passant_capturable():
            key ^= en_passant_key(self.en_passant)
        for sq, piece in self.board.items():
            key ^= piece_key(piece, sq)
        return key

    # -- Utilities ----------------------------------------------------------

    def copy(self) -> Position:
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.side_to_move == other.side_to_move
            and self.castling == other.castling
            and self.en_passant == other.en_passant
            and self.halfmove_clock == other.halfmove_clock
            and self.fullmove_number == other.fullmove_number
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Position(side_to_move={self.side_to_move}, castling={self.castling!r}, "
            f"en_passant={self.en_passant}, halfmove_clock={self.halfmove_clock}, "
            f"fullmove_number={self.fullmove_number})\n{self.board!r}"
        )
