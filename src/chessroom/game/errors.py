"""Errors raised by game sessions and the session registry."""

from __future__ import annotations

from chessroom.core.enums import Color
from chessroom.core.errors import ChessError


class SessionError(ChessError):
    """Base class for session-level rejections."""


class SessionNotFound(SessionError):
    def __init__(self, session_id: str) -> None:
        super().__init__(f"No game session with id {session_id!r}")
        self.session_id = session_id


class NotAParticipant(SessionError):
    """The supplied player key belongs to neither side of the game."""

    def __init__(self) -> None:
        super().__init__("You are not a player in this game")


class NotYourTurn(SessionError):
    def __init__(self, color: Color) -> None:
        super().__init__(f"It is not {color}'s turn")
        self.color = color


class RegistryFull(SessionError):
    def __init__(self, capacity: int) -> None:
        super().__init__(f"Session limit of {capacity} reached")
        self.capacity = capacity


class Resigned(SessionError):
    """The game ended by resignation; no further moves or resignations."""

    def __init__(self, color: Color) -> None:
        super().__init__(f"Game is already finished: {color} resigned")
        self.color = color
