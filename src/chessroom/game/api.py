"""Functional boundary consumed by the HTTP and rendering layers.

Every function here treats :class:`GameState` as a value: ``apply_move``
returns a new state and never touches its argument, so callers may hand states
across threads without sharing mutable data.
"""

from __future__ import annotations

from dataclasses import dataclass

from chessroom.core.board import Board
from chessroom.core.enums import Color, MoveFlag
from chessroom.core.move import Move
from chessroom.core.move_generator import legal_moves as _position_legal_moves
from chessroom.core.outcome import Outcome
from chessroom.game.state import GameState


@dataclass(frozen=True, slots=True)
class LegalMoveSummary:
    """Legal moves of one color, split into plain moves and castling."""

    color: Color
    current_turn: bool
    moves: tuple[Move, ...]
    castle_kingside: bool
    castle_queenside: bool


def new_game(fen: str | None = None) -> GameState:
    """Game at the standard starting position, or at *fen* when given."""
    return GameState.new(fen)


def apply_move(state: GameState, move: Move) -> GameState:
    """Return the state after *move*; *state* itself is left unchanged.

    Raises:
        GameOver: *state* already has a terminal outcome.
        IllegalMove: *move* is not legal in *state*.
    """
    successor = state.copy()
    successor.apply_move(move)
    return successor


def legal_moves(state: GameState) -> frozenset[Move]:
    return frozenset(state.legal_moves())


def outcome(state: GameState) -> Outcome:
    return state.outcome


def history(state: GameState) -> tuple[Move, ...]:
    """Applied moves, oldest first."""
    return state.history


def board_snapshot(state: GameState) -> Board:
    """Independent copy of the current board for rendering."""
    return state.position.board.copy()


def legal_move_summary(state: GameState, color: Color) -> LegalMoveSummary:
    """Legal moves for *color*, whether or not it is that color's turn.

    For the side not to move, moves are computed as if it were its turn with no
    en-passant target, which is what a client shows while waiting.
    """
    current_turn = state.side_to_move == color
    if state.is_game_over:
        moves: list[Move] = []
    elif current_turn:
        moves = state.legal_moves()
    else:
        view = state.position.copy()
        view.side_to_move = color
        view.en_passant = None
        moves = _position_legal_moves(view)

    plain = tuple(m for m in moves if not m.flags & MoveFlag.CASTLE)
    return LegalMoveSummary(
        color=color,
        current_turn=current_turn,
        moves=plain,
        castle_kingside=any(m.flags & MoveFlag.CASTLE_KINGSIDE for m in moves),
        castle_queenside=any(m.flags & MoveFlag.CASTLE_QUEENSIDE for m in moves),
    )
