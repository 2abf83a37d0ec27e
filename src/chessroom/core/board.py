"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from chessroom.core.enums import Color, PieceType
from chessroom.core.errors import InvalidPosition
from chessroom.core.piece import Piece
from chessroom.core.types import Square, make_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-slot board. Holds pieces, knows nothing about legality.

    A king-square cache per color is kept in step with every write so that
    check detection does not need to scan the board.
    """

    __slots__ = ("_squares", "_kings")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64
        self._kings: list[Square | None] = [None, None]

    # -- Element access -----------------------------------------------------

    def get(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def set(self, sq: Square, piece: Piece | None) -> None:
        old = self._squares[sq]
        if old is not None and old.piece_type == PieceType.KING:
            if self._kings[old.color] == sq:
                self._kings[old.color] = None
        self._squares[sq] = piece
        if piece is not None and piece.piece_type == PieceType.KING:
            self._kings[piece.color] = sq

    __getitem__ = get
    __setitem__ = set

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    # -- Queries ------------------------------------------------------------

    def find_king(self, color: Color) -> Square:
        """Square of *color*'s king.

        Raises:
            InvalidPosition: the king is not on the board.
        """
        sq = self._kings[color]
        if sq is None:
            raise InvalidPosition(f"No {color.name} king on board")
        return sq

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares holding *color*'s *piece_type*, ascending."""
        wanted = Piece(color, piece_type)
        return [sq for sq, p in enumerate(self._squares) if p == wanted]

    def occupied(self, color: Color) -> list[Square]:
        """All squares holding a piece of *color*, ascending."""
        return [
            sq for sq, p in enumerate(self._squares) if p is not None and p.color == color
        ]

    def items(self) -> Iterator[tuple[Square, Piece]]:
        """(square, piece) pairs for every occupied square."""
        for sq, piece in enumerate(self._squares):
            if piece is not None:
                yield sq, piece

    def piece_count(self) -> int:
        return sum(1 for p in self._squares if p is not None)

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b._kings = self._kings.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * 64
        self._kings = [None, None]

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for file, piece_type in enumerate(_BACK_RANK):
            b[make_square(file, 0)] = Piece(Color.WHITE, piece_type)
            b[make_square(file, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            b[make_square(file, 6)] = Piece(Color.BLACK, PieceType.PAWN)
            b[make_square(file, 7)] = Piece(Color.BLACK, piece_type)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            cells = (str(self[make_square(f, rank)] or ".") for f in range(8))
            rows.append(f"{rank + 1} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
