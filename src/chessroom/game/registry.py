"""SessionRegistry - game sessions keyed by id."""

from __future__ import annotations

import logging
import secrets
import threading
from collections.abc import Iterator

from chessroom.config import Settings, get_settings
from chessroom.game.errors import RegistryFull, SessionNotFound
from chessroom.game.session import GameSession
from chessroom.game.state import GameState

_LOGGER = logging.getLogger(__name__)


class SessionRegistry:
    """Thread-safe map of session id to :class:`GameSession`.

    The registry lock guards only the map; moves lock the individual session.
    """

    __slots__ = ("_settings", "_sessions", "_lock")

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        self._sessions: dict[str, GameSession] = {}
        self._lock = threading.Lock()

    def create(
        self,
        name: str,
        *,
        fen: str | None = None,
        white_key: str | None = None,
        black_key: str | None = None,
    ) -> GameSession:
        """Open a new game. *fen* selects a custom start position.

        Raises:
            RegistryFull: the configured session limit is reached.
            ValueError: *fen* is malformed.
        """
        state = GameState.new(fen)
        with self._lock:
            if len(self._sessions) >= self._settings.max_sessions:
                _LOGGER.warning("session limit %d reached", self._settings.max_sessions)
                raise RegistryFull(self._settings.max_sessions)
            session_id = self._fresh_id()
            session = GameSession(
                session_id,
                name,
                state=state,
                white_key=white_key,
                black_key=black_key,
                key_bytes=self._settings.key_bytes,
            )
            self._sessions[session_id] = session
        _LOGGER.info("opened session %s (%s)", session_id, name)
        return session

    def get(self, session_id: str) -> GameSession:
        with self._lock:
            try:
                return self._sessions[session_id]
            except KeyError:
                raise SessionNotFound(session_id) from None

    def remove(self, session_id: str) -> GameSession:
        with self._lock:
            try:
                session = self._sessions.pop(session_id)
            except KeyError:
                raise SessionNotFound(session_id) from None
        _LOGGER.info("closed session %s", session_id)
        return session

    def sessions(self) -> list[GameSession]:
        """Open sessions, oldest first."""
        with self._lock:
            return sorted(self._sessions.values(), key=lambda s: s.created_ns)

    def _fresh_id(self) -> str:
        while True:
            session_id = secrets.token_hex(8)
            if session_id not in self._sessions:
                return session_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        with self._lock:
            return session_id in self._sessions

    def __iter__(self) -> Iterator[GameSession]:
        return iter(self.sessions())
