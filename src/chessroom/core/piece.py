"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessroom.core.enums import Color, PieceType

_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
_TYPES_BY_LETTER: dict[str, PieceType] = {v: k for k, v in _LETTERS.items()}

_FIGURINES: dict[PieceType, tuple[str, str]] = {
    PieceType.PAWN: ("♙", "♟"),
    PieceType.KNIGHT: ("♘", "♞"),
    PieceType.BISHOP: ("♗", "♝"),
    PieceType.ROOK: ("♖", "♜"),
    PieceType.QUEEN: ("♕", "♛"),
    PieceType.KING: ("♔", "♚"),
}


def piece_type_letter(piece_type: PieceType) -> str:
    """Lowercase letter of a piece type, e.g. KNIGHT -> 'n'."""
    return _LETTERS[piece_type]


def piece_type_from_letter(letter: str) -> PieceType:
    try:
        return _TYPES_BY_LETTER[letter.lower()]
    except KeyError:
        raise ValueError(f"Invalid piece letter: {letter!r}") from None


@dataclass(frozen=True, slots=True)
class Piece:
    """A colored piece. Plain value; boards hold these directly."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """FEN letter: uppercase for white, lowercase for black."""
        letter = _LETTERS[self.piece_type]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create a piece from its FEN letter, e.g. 'N' -> white knight."""
        if len(char) != 1:
            raise ValueError(f"Invalid piece character: {char!r}")
        piece_type = piece_type_from_letter(char)
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, piece_type)

    @property
    def symbol(self) -> str:
        """Unicode figurine, e.g. ♞."""
        return _FIGURINES[self.piece_type][int(self.color)]
