"""Game outcome value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessroom.core.enums import Color, OutcomeKind

_TERMINAL = frozenset(
    {
        OutcomeKind.CHECKMATE,
        OutcomeKind.STALEMATE,
        OutcomeKind.DRAW_FIFTY_MOVE,
        OutcomeKind.DRAW_REPETITION,
        OutcomeKind.DRAW_INSUFFICIENT_MATERIAL,
    }
)
_DRAWS = _TERMINAL - {OutcomeKind.CHECKMATE}


@dataclass(frozen=True, slots=True)
class Outcome:
    """Result of evaluating a position after a move.

    ``color`` is the side in check for ``CHECK`` and the winner for
    ``CHECKMATE``; it is ``None`` for every other kind.
    """

    kind: OutcomeKind
    color: Color | None = None

    def __post_init__(self) -> None:
        needs_color = self.kind in (OutcomeKind.CHECK, OutcomeKind.CHECKMATE)
        if needs_color and self.color is None:
            raise ValueError(f"{self.kind.name} outcome requires a color")
        if not needs_color and self.color is not None:
            raise ValueError(f"{self.kind.name} outcome takes no color")

    # -- Constructors --------------------------------------------------------

    @classmethod
    def ongoing(cls) -> Outcome:
        return cls(OutcomeKind.ONGOING)

    @classmethod
    def check(cls, color: Color) -> Outcome:
        return cls(OutcomeKind.CHECK, color)

    @classmethod
    def checkmate(cls, winner: Color) -> Outcome:
        return cls(OutcomeKind.CHECKMATE, winner)

    @classmethod
    def stalemate(cls) -> Outcome:
        return cls(OutcomeKind.STALEMATE)

    # -- Queries -------------------------------------------------------------

    @property
    def is_terminal(self) -> bool:
        return self.kind in _TERMINAL

    @property
    def is_draw(self) -> bool:
        return self.kind in _DRAWS

    @property
    def winner(self) -> Color | None:
        return self.color if self.kind == OutcomeKind.CHECKMATE else None

    def __str__(self) -> str:
        name = self.kind.name.lower()
        if self.color is None:
            return name
        return f"{name}({self.color})"
