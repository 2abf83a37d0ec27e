"""Coordinate move notation used at the service boundary.

Accepted forms (case-insensitive): ``e2e4``, ``e7e8q``, ``e2-e4``,
``e7-e8=q`` and ``E2->E4``.
"""

from __future__ import annotations

import re

from chessroom.core.enums import PROMOTION_TYPES, PieceType
from chessroom.core.move import Move
from chessroom.core.piece import piece_type_from_letter
from chessroom.core.types import parse_square

_MOVE_RE = re.compile(
    r"^\s*([a-h][1-8])\s*(?:-|->)?\s*([a-h][1-8])\s*(?:=?\s*([nbrq]))?\s*$",
    re.IGNORECASE,
)


def parse_promotion(text: str | None) -> PieceType | None:
    """Promotion piece from a letter or name: 'q', 'Q', 'queen' -> QUEEN."""
    if text is None or not text.strip():
        return None
    cleaned = text.strip().lower()
    if len(cleaned) > 1:
        try:
            piece_type = PieceType[cleaned.upper()]
        except KeyError:
            raise ValueError(f"Invalid promotion piece: {text!r}") from None
    else:
        piece_type = piece_type_from_letter(cleaned)
    if piece_type not in PROMOTION_TYPES:
        raise ValueError(f"Cannot promote to {piece_type.name.lower()}: {text!r}")
    return piece_type


def move_from_coords(
    from_square: str, to_square: str, promotion: str | None = None
) -> Move:
    """Build a bare move request from square names and an optional promotion."""
    return Move(
        parse_square(from_square), parse_square(to_square), parse_promotion(promotion)
    )


def parse_move(text: str) -> Move:
    """Parse a coordinate move such as ``'e7e8q'``. Flags are left empty."""
    match = _MOVE_RE.match(text)
    if match is None:
        raise ValueError(f"Invalid coordinate move: {text!r}")
    from_name, to_name, promo = match.groups()
    return move_from_coords(from_name, to_name, promo)


def move_to_coords(move: Move) -> str:
    """Compact coordinate text, e.g. ``'e7e8q'``."""
    return str(move)
