"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from chessroom.config import Settings
from chessroom.game.registry import SessionRegistry
from chessroom.game.state import GameState


@pytest.fixture
def game() -> GameState:
    """Fresh game at the standard starting position."""
    return GameState.new()


@pytest.fixture
def registry() -> SessionRegistry:
    return SessionRegistry(Settings(max_sessions=4, key_bytes=8))


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """Environment without any CHESSROOM_* overrides."""
    for name in ("CHESSROOM_MAX_SESSIONS", "CHESSROOM_KEY_BYTES", "CHESSROOM_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield monkeypatch
