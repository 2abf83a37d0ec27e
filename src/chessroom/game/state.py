"""Game state machine - validates and applies moves, keeps history and outcome."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from chessroom.core.enums import Color, PieceType
from chessroom.core.errors import GameOver, IllegalMove
from chessroom.core.move import Move
from chessroom.core.move_generator import legal_moves
from chessroom.core.outcome import Outcome
from chessroom.core.piece import Piece
from chessroom.core.position import Position
from chessroom.core.rules import Rules
from chessroom.notation.fen import STARTING_FEN, position_from_fen

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """One applied ply, as the rendering layer needs it."""

    ply: int
    move: Move
    color: Color
    piece: Piece
    captured: Piece | None
    position_hash: int
    outcome: Outcome


@dataclass
class GameState:
    """A single game: position, append-only history and current outcome.

    One caller at a time. Sessions serialize access; the functional boundary in
    :mod:`chessroom.game.api` works on copies.
    """

    position: Position = field(default_factory=Position)
    start_fen: str = STARTING_FEN
    outcome: Outcome = field(default_factory=Outcome.ongoing)
    records: list[MoveRecord] = field(default_factory=list)
    position_hashes: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.position_hashes:
            self.position_hashes.append(self.position.position_hash())
            self.outcome = Rules.evaluate(self.position, self.position_hashes)

    # -- Construction -------------------------------------------------------

    @classmethod
    def new(cls, fen: str | None = None) -> GameState:
        """Fresh game from the starting position or from *fen*."""
        start_fen = fen or STARTING_FEN
        return cls(position=position_from_fen(start_fen), start_fen=start_fen)

    @classmethod
    def replay(cls, moves: Iterable[Move], fen: str | None = None) -> GameState:
        """Rebuild a game by applying *moves* from the start position.

        This is how a game is taken back: replay a prefix of its history.
        """
        state = cls.new(fen)
        for move in moves:
            state.apply_move(move)
        return state

    def copy(self) -> GameState:
        return GameState(
            position=self.position.copy(),
            start_fen=self.start_fen,
            outcome=self.outcome,
            records=self.records.copy(),
            position_hashes=self.position_hashes.copy(),
        )

    # -- Move application ---------------------------------------------------

    def apply_move(self, move: Move) -> MoveRecord:
        """Validate and play *move*, then re-evaluate the outcome.

        *move* is matched on origin, destination and promotion piece; its
        flags are ignored. Nothing changes when the move is rejected.

        Raises:
            GameOver: the game already has a terminal outcome.
            IllegalMove: *move* is not legal in the current position.
        """
        if self.outcome.is_terminal:
            raise GameOver(self.outcome)

        resolved = self._resolve(move)
        mover = self.position.board[resolved.from_sq]
        assert mover is not None
        color = self.position.side_to_move

        captured = self.position.push(resolved)
        key = self.position.position_hash()
        self.position_hashes.append(key)
        self.outcome = Rules.evaluate(self.position, self.position_hashes)

        record = MoveRecord(
            ply=len(self.records) + 1,
            move=resolved,
            color=color,
            piece=mover,
            captured=captured,
            position_hash=key,
            outcome=self.outcome,
        )
        self.records.append(record)

        _LOGGER.debug("ply %d: %s %s -> %s", record.ply, color, resolved, self.outcome)
        if self.outcome.is_terminal:
            _LOGGER.info("game over after %d plies: %s", record.ply, self.outcome)
        return record

    def _resolve(self, move: Move) -> Move:
        for candidate in self.legal_moves():
            if candidate == move:
                return candidate
        raise IllegalMove(move, self._rejection_reason(move))

    def _rejection_reason(self, move: Move) -> str:
        piece = self.position.board[move.from_sq]
        if piece is None:
            return "no piece on the origin square"
        if piece.color != self.position.side_to_move:
            return f"it is {self.position.side_to_move}'s turn"
        if piece.piece_type == PieceType.PAWN and move.promotion is None:
            if Move(move.from_sq, move.to_sq, PieceType.QUEEN) in self.legal_moves():
                return "a promotion piece is required"
        if move.promotion is not None:
            if Move(move.from_sq, move.to_sq) in self.legal_moves():
                return "this move does not promote"
        return "not a legal move"

    # -- Queries ------------------------------------------------------------

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move; empty once the game is over."""
        if self.outcome.is_terminal:
            return []
        return legal_moves(self.position)

    @property
    def history(self) -> tuple[Move, ...]:
        return tuple(record.move for record in self.records)

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_terminal

    @property
    def ply_count(self) -> int:
        return len(self.records)
