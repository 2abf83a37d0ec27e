"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessroom.core.enums import MoveFlag, PieceType
from chessroom.core.piece import piece_type_letter
from chessroom.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """A single move: origin, destination and optional promotion piece.

    ``flags`` describe what the move does on the board (capture, castle, en
    passant, double push, promotion). They are filled in by the move generator
    and do not take part in equality, so a bare ``Move(E2, E4)`` submitted by a
    client matches the generated ``Move(E2, E4, flags=DOUBLE_PAWN)``.
    """

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None
    flags: MoveFlag = field(default=MoveFlag.NONE, compare=False)

    # -- Flag helpers -------------------------------------------------------

    @property
    def is_capture(self) -> bool:
        return bool(self.flags & MoveFlag.CAPTURE)

    @property
    def is_castle(self) -> bool:
        return bool(self.flags & MoveFlag.CASTLE)

    @property
    def is_en_passant(self) -> bool:
        return bool(self.flags & MoveFlag.EN_PASSANT)

    @property
    def is_double_pawn_push(self) -> bool:
        return bool(self.flags & MoveFlag.DOUBLE_PAWN)

    @property
    def is_promotion(self) -> bool:
        return self.promotion is not None

    # -- Display ------------------------------------------------------------

    def __str__(self) -> str:
        text = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            text += piece_type_letter(self.promotion)
        return text

    @property
    def coords(self) -> tuple[str, str, PieceType | None]:
        """(from, to, promotion) with algebraic square names."""
        return square_name(self.from_sq), square_name(self.to_sq), self.promotion
