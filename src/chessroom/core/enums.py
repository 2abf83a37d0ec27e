"""Enumerations and flag sets shared by the rules engine."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @property
    def back_rank(self) -> int:
        """Rank index where this side's pieces start."""
        return 0 if self is Color.WHITE else 7

    @property
    def pawn_direction(self) -> int:
        """Square delta of a single pawn step."""
        return 8 if self is Color.WHITE else -8

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Piece kinds, in the order the generator visits them."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


class MoveFlag(IntFlag):
    """Properties of a generated move. Several may be combined."""

    NONE = 0
    CAPTURE = auto()
    DOUBLE_PAWN = auto()
    EN_PASSANT = auto()
    CASTLE_KINGSIDE = auto()
    CASTLE_QUEENSIDE = auto()
    PROMOTION = auto()

    CASTLE = CASTLE_KINGSIDE | CASTLE_QUEENSIDE


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    @classmethod
    def kingside(cls, color: Color) -> CastlingRights:
        return cls.WHITE_KINGSIDE if color is Color.WHITE else cls.BLACK_KINGSIDE

    @classmethod
    def queenside(cls, color: Color) -> CastlingRights:
        return cls.WHITE_QUEENSIDE if color is Color.WHITE else cls.BLACK_QUEENSIDE

    @classmethod
    def both(cls, color: Color) -> CastlingRights:
        return cls.WHITE_BOTH if color is Color.WHITE else cls.BLACK_BOTH


class OutcomeKind(IntEnum):
    """Tag of an :class:`~chessroom.core.outcome.Outcome`."""

    ONGOING = 0
    CHECK = 1
    CHECKMATE = 2
    STALEMATE = 3
    DRAW_FIFTY_MOVE = 4
    DRAW_REPETITION = 5
    DRAW_INSUFFICIENT_MATERIAL = 6
