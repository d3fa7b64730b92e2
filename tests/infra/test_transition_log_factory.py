"""Testes da factory de TransitionLog e compatibilidade com o protocolo."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from statesman import TransitionLogProtocol
from statesman.config.settings import Settings
from statesman.infra import (
    FirestoreTransitionLog,
    InMemoryTransitionLog,
    RedisTransitionLog,
    TransitionLog,
    create_transition_log,
    create_transition_log_from_settings,
)


def test_transition_log_implements_protocol() -> None:
    assert issubclass(TransitionLog, TransitionLogProtocol)
    for impl in (InMemoryTransitionLog, RedisTransitionLog, FirestoreTransitionLog):
        assert issubclass(impl, TransitionLog)


class TestCreateTransitionLog:
    def test_memory(self) -> None:
        assert isinstance(create_transition_log("memory"), InMemoryTransitionLog)

    def test_backend_name_case_insensitive(self) -> None:
        assert isinstance(create_transition_log("MEMORY"), InMemoryTransitionLog)

    def test_redis(self) -> None:
        log = create_transition_log("redis", redis_client=MagicMock())
        assert isinstance(log, RedisTransitionLog)

    def test_redis_requires_client(self) -> None:
        with pytest.raises(ValueError, match="redis_client required"):
            create_transition_log("redis")

    def test_firestore(self) -> None:
        log = create_transition_log("firestore", firestore_client=MagicMock())
        assert isinstance(log, FirestoreTransitionLog)

    def test_firestore_requires_client(self) -> None:
        with pytest.raises(ValueError, match="firestore_client required"):
            create_transition_log("firestore")

    def test_unknown_backend(self) -> None:
        with pytest.raises(ValueError, match="Unknown transition log backend"):
            create_transition_log("postgres")


class TestCreateFromSettings:
    def test_uses_settings_prefix(self) -> None:
        settings = Settings(
            transition_log_backend="redis",
            redis_url="redis://localhost:6379/0",
            redis_key_prefix="orders",
        )
        mock_redis = MagicMock()

        log = create_transition_log_from_settings(settings, redis_client=mock_redis)
        log.record_transition("o1", "a", "b")

        assert mock_redis.rpush.call_args[0][0] == "orders:o1"

    def test_uses_settings_collection(self) -> None:
        settings = Settings(
            transition_log_backend="firestore",
            firestore_project_id="proj",
            firestore_collection="order_fsm",
        )
        client = MagicMock()

        log = create_transition_log_from_settings(settings, firestore_client=client)
        log.record_transition("o1", "a", "b")

        client.collection.assert_called_with("order_fsm")
