"""Tests for SessionRegistry."""

import pytest

from chessroom.core.enums import Color
from chessroom.game.errors import RegistryFull, SessionNotFound
from chessroom.game.registry import SessionRegistry


class TestCreate:
    def test_create_and_get(self, registry: SessionRegistry) -> None:
        session = registry.create("friendly")
        assert registry.get(session.session_id) is session
        assert session.session_id in registry
        assert len(registry) == 1

    def test_ids_unique(self, registry: SessionRegistry) -> None:
        ids = {registry.create(f"game {i}").session_id for i in range(4)}
        assert len(ids) == 4

    def test_key_length_follows_settings(self, registry: SessionRegistry) -> None:
        session = registry.create("friendly")
        # 8 random bytes -> 11 urlsafe base64 characters
        assert len(session.key_for(Color.WHITE)) == 11

    def test_custom_keys_and_fen(self, registry: SessionRegistry) -> None:
        session = registry.create(
            "study",
            fen="4k3/8/8/8/8/8/8/4K2R b K - 0 1",
            white_key="alice",
            black_key="bob",
        )
        assert session.color_of("bob") == Color.BLACK
        assert session.can_move("bob")

    def test_bad_fen_registers_nothing(self, registry: SessionRegistry) -> None:
        with pytest.raises(ValueError):
            registry.create("broken", fen="not a fen")
        assert len(registry) == 0

    def test_capacity(self, registry: SessionRegistry) -> None:
        for i in range(4):
            registry.create(f"game {i}")
        with pytest.raises(RegistryFull) as excinfo:
            registry.create("one too many")
        assert excinfo.value.capacity == 4


class TestLookup:
    def test_unknown_id(self, registry: SessionRegistry) -> None:
        with pytest.raises(SessionNotFound):
            registry.get("missing")

    def test_remove(self, registry: SessionRegistry) -> None:
        session = registry.create("friendly")
        assert registry.remove(session.session_id) is session
        assert session.session_id not in registry
        with pytest.raises(SessionNotFound):
            registry.remove(session.session_id)

    def test_remove_frees_capacity(self, registry: SessionRegistry) -> None:
        sessions = [registry.create(f"game {i}") for i in range(4)]
        registry.remove(sessions[0].session_id)
        registry.create("replacement")
        assert len(registry) == 4

    def test_sessions_oldest_first(self, registry: SessionRegistry) -> None:
        created = [registry.create(f"game {i}") for i in range(3)]
        assert registry.sessions() == created
        assert list(registry) == created
