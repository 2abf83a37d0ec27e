"""Exceptions raised by the rules engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessroom.core.move import Move
    from chessroom.core.outcome import Outcome


class ChessError(Exception):
    """Base class for every error raised by chessroom."""


class IllegalMove(ChessError):
    """The requested move is not in the legal-move set of the position."""

    def __init__(self, move: Move, reason: str = "not a legal move") -> None:
        super().__init__(f"Illegal move {move}: {reason}")
        self.move = move
        self.reason = reason


class GameOver(ChessError):
    """A move was submitted after the game reached a terminal outcome."""

    def __init__(self, outcome: Outcome) -> None:
        super().__init__(f"Game is over ({outcome})")
        self.outcome = outcome


class InvalidPosition(ChessError):
    """The board violates an engine invariant, e.g. a king is missing.

    Never raised for user input on a well-formed game; treat it as a defect.
    """


class SnapshotError(ChessError, ValueError):
    """An encoded board snapshot could not be decoded."""
