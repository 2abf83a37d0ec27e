"""GameSession - one game owned by two key-holding players.

The session is the unit of mutual exclusion: every mutation of its
:class:`GameState` happens under the session lock, so at most one move is in
flight per game while distinct sessions proceed in parallel.
"""

from __future__ import annotations

import logging
import secrets
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone

from chessroom.core.board import Board
from chessroom.core.enums import Color
from chessroom.core.errors import GameOver
from chessroom.core.move import Move
from chessroom.core.outcome import Outcome
from chessroom.game.api import LegalMoveSummary, legal_move_summary
from chessroom.game.errors import NotAParticipant, NotYourTurn, Resigned
from chessroom.game.state import GameState, MoveRecord
from chessroom.notation.fen import STARTING_FEN, position_from_fen
from chessroom.notation.pgn import build_pgn, pgn_result_token
from chessroom.notation.san import moves_to_san

_LOGGER = logging.getLogger(__name__)

MoveCallback = Callable[["GameSession", MoveRecord], None]
GameOverCallback = Callable[["GameSession", Outcome], None]
ResignCallback = Callable[["GameSession", Color], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event.

    Handlers run after the change is committed. A handler that raises is
    logged and skipped; the submission still succeeds.
    """

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_resign: list[ResignCallback] = field(default_factory=list)


def new_player_key(key_bytes: int = 16) -> str:
    return secrets.token_urlsafe(key_bytes)


class GameSession:
    """A game plus the keys that authorize each side to move."""

    __slots__ = (
        "session_id",
        "name",
        "created_ns",
        "events",
        "_keys",
        "_state",
        "_resigned",
        "_lock",
    )

    def __init__(
        self,
        session_id: str,
        name: str,
        *,
        state: GameState | None = None,
        white_key: str | None = None,
        black_key: str | None = None,
        key_bytes: int = 16,
    ) -> None:
        self.session_id = session_id
        self.name = name
        self.created_ns = time.time_ns()
        self.events = SessionEvents()
        self._keys: dict[Color, str] = {
            Color.WHITE: white_key or new_player_key(key_bytes),
            Color.BLACK: black_key or new_player_key(key_bytes),
        }
        if self._keys[Color.WHITE] == self._keys[Color.BLACK]:
            raise ValueError("White and black must use different player keys")
        self._state = state if state is not None else GameState.new()
        self._resigned: Color | None = None
        self._lock = threading.Lock()

    # -- Players ------------------------------------------------------------

    def key_for(self, color: Color) -> str:
        return self._keys[color]

    def color_of(self, key: str) -> Color:
        """Side played by the holder of *key*."""
        given = key.encode()
        for color, candidate in self._keys.items():
            if secrets.compare_digest(candidate.encode(), given):
                return color
        raise NotAParticipant

    def can_move(self, key: str) -> bool:
        try:
            color = self.color_of(key)
        except NotAParticipant:
            return False
        with self._lock:
            return not self._finished() and self._state.side_to_move == color

    # -- Moves --------------------------------------------------------------

    def submit_move(self, key: str, move: Move) -> MoveRecord:
        """Play *move* for the holder of *key*.

        Raises:
            NotAParticipant: *key* belongs to neither player.
            Resigned: a player has resigned.
            NotYourTurn: it is the other side's move.
            GameOver: the game has ended on the board.
            IllegalMove: *move* is not legal.
        """
        color = self.color_of(key)
        with self._lock:
            if self._resigned is not None:
                raise Resigned(self._resigned)
            # a finished game reports GameOver from apply_move, not NotYourTurn
            if not self._state.is_game_over and self._state.side_to_move != color:
                _LOGGER.warning(
                    "session %s: %s tried to move out of turn", self.session_id, color
                )
                raise NotYourTurn(color)
            record = self._state.apply_move(move)
            outcome = self._state.outcome

        self._emit_move(record)
        if outcome.is_terminal:
            _LOGGER.info("session %s finished: %s", self.session_id, outcome)
            self._emit_game_over(outcome)
        return record

    def resign(self, key: str) -> Color:
        """Give up the game for the holder of *key*. Returns the winner.

        Either player may resign at any time while the game is running.

        Raises:
            NotAParticipant: *key* belongs to neither player.
            Resigned: a player has already resigned.
            GameOver: the game has already ended on the board.
        """
        color = self.color_of(key)
        with self._lock:
            if self._resigned is not None:
                raise Resigned(self._resigned)
            if self._state.is_game_over:
                raise GameOver(self._state.outcome)
            self._resigned = color

        _LOGGER.info("session %s: %s resigned", self.session_id, color)
        self._emit_resign(color)
        return color.opposite

    # -- Queries ------------------------------------------------------------

    @property
    def outcome(self) -> Outcome:
        """Outcome on the board; a resignation does not change it."""
        with self._lock:
            return self._state.outcome

    @property
    def resigned(self) -> Color | None:
        """The side that resigned, if any."""
        with self._lock:
            return self._resigned

    @property
    def winner(self) -> Color | None:
        with self._lock:
            if self._resigned is not None:
                return self._resigned.opposite
            return self._state.outcome.winner

    @property
    def is_finished(self) -> bool:
        with self._lock:
            return self._finished()

    def _finished(self) -> bool:
        return self._resigned is not None or self._state.is_game_over

    def history(self) -> tuple[Move, ...]:
        with self._lock:
            return self._state.history

    def records(self) -> tuple[MoveRecord, ...]:
        with self._lock:
            return tuple(self._state.records)

    def snapshot(self) -> Board:
        """Copy of the current board."""
        with self._lock:
            return self._state.position.board.copy()

    def state_copy(self) -> GameState:
        with self._lock:
            return self._state.copy()

    def legal_move_summary(self, key: str) -> LegalMoveSummary:
        """Legal moves for the side played by the holder of *key*.

        Empty once the game is finished, resignation included.
        """
        color = self.color_of(key)
        with self._lock:
            summary = legal_move_summary(self._state, color)
            if self._resigned is None:
                return summary
        return LegalMoveSummary(
            color=color,
            current_turn=summary.current_turn,
            moves=(),
            castle_kingside=False,
            castle_queenside=False,
        )

    # -- Export -------------------------------------------------------------

    def to_pgn(self, white: str = "Unknown", black: str = "Unknown") -> str:
        """The game so far as a PGN document with SAN movetext.

        *white* and *black* are the display names for the player headers.
        """
        with self._lock:
            state = self._state.copy()
            resigned = self._resigned

        start = position_from_fen(state.start_fen)
        sans = moves_to_san(start, state.history)
        result = pgn_result_token(state.outcome, resigned)
        date = datetime.fromtimestamp(self.created_ns / 1e9, tz=timezone.utc)

        headers = {
            "Event": f"chessroom game: '{self.name}'",
            "Date": date.strftime("%Y.%m.%d"),
            "White": white,
            "Black": black,
            "Result": result,
        }
        if state.start_fen != STARTING_FEN:
            headers["SetUp"] = "1"
            headers["FEN"] = state.start_fen
        return build_pgn(
            headers,
            sans,
            result,
            first_move_number=start.fullmove_number,
            black_first=start.side_to_move == Color.BLACK,
        )

    # -- Event emission -----------------------------------------------------

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            try:
                cb(self, record)
            except Exception:
                _LOGGER.exception("session %s: on_move handler failed", self.session_id)

    def _emit_game_over(self, outcome: Outcome) -> None:
        for cb in self.events.on_game_over:
            try:
                cb(self, outcome)
            except Exception:
                _LOGGER.exception(
                    "session %s: on_game_over handler failed", self.session_id
                )

    def _emit_resign(self, color: Color) -> None:
        for cb in self.events.on_resign:
            try:
                cb(self, color)
            except Exception:
                _LOGGER.exception(
                    "session %s: on_resign handler failed", self.session_id
                )

    def __repr__(self) -> str:
        return f"GameSession(id={self.session_id!r}, name={self.name!r})"
