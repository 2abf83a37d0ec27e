"""Game layer - state machine, functional boundary and sessions.

Quick start::

    from chessroom.game import apply_move, new_game, outcome
    from chessroom.notation import parse_move

    state = new_game()
    state = apply_move(state, parse_move("e2e4"))
    print(outcome(state))
"""

from chessroom.game.api import (
    LegalMoveSummary,
    apply_move,
    board_snapshot,
    history,
    legal_move_summary,
    legal_moves,
    new_game,
    outcome,
)
from chessroom.game.errors import (
    NotAParticipant,
    NotYourTurn,
    RegistryFull,
    Resigned,
    SessionError,
    SessionNotFound,
)
from chessroom.game.registry import SessionRegistry
from chessroom.game.session import GameSession, SessionEvents
from chessroom.game.state import GameState, MoveRecord

__all__ = [
    # Boundary
    "LegalMoveSummary",
    "apply_move",
    "board_snapshot",
    "history",
    "legal_move_summary",
    "legal_moves",
    "new_game",
    "outcome",
    # State
    "GameState",
    "MoveRecord",
    # Sessions
    "GameSession",
    "SessionEvents",
    "SessionRegistry",
    # Errors
    "NotAParticipant",
    "NotYourTurn",
    "RegistryFull",
    "Resigned",
    "SessionError",
    "SessionNotFound",
]
