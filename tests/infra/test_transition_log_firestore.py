"""Testes para TransitionLog baseado em Firestore."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from statesman import InvalidArgumentError, TransitionLogError
from statesman.infra import FirestoreTransitionLog, StateCodec
from statesman.infra.transition_log_firestore import HISTORY_SUBCOLLECTION
from tests.helpers.orders import Order, OrderState


def _mock_doc(exists: bool, data: dict | None = None) -> MagicMock:
    doc = MagicMock()
    doc.exists = exists
    doc.to_dict.return_value = data
    return doc


class TestFirestoreTransitionLogRecord:
    def test_record_writes_document_and_history_in_batch(self) -> None:
        client = MagicMock()
        batch = client.batch.return_value
        doc_ref = client.collection.return_value.document.return_value
        log = FirestoreTransitionLog(client, codec=StateCodec(OrderState))

        log.record_transition(Order(id="o1"), OrderState.PENDING, OrderState.CONFIRMED)

        client.collection.assert_called_with("state_machines")
        client.collection.return_value.document.assert_called_with("o1")
        doc_ref.collection.assert_called_once_with(HISTORY_SUBCOLLECTION)
        assert batch.set.call_count == 2

        latest_call, history_call = batch.set.call_args_list
        assert latest_call.args[0] is doc_ref
        assert latest_call.args[1]["latest_state"] == "CONFIRMED"
        assert latest_call.kwargs == {"merge": True}
        assert history_call.args[1]["from_state"] == "PENDING"
        assert history_call.args[1]["to_state"] == "CONFIRMED"
        assert history_call.args[1]["model_key"] == "o1"
        batch.commit.assert_called_once()

    def test_custom_collection(self) -> None:
        client = MagicMock()
        log = FirestoreTransitionLog(client, collection="order_fsm")

        log.record_transition("o1", "a", "b")

        client.collection.assert_called_with("order_fsm")

    def test_commit_error_wrapped(self) -> None:
        client = MagicMock()
        client.batch.return_value.commit.side_effect = Exception("Firestore unavailable")
        log = FirestoreTransitionLog(client)

        with pytest.raises(TransitionLogError, match="Firestore write failed"):
            log.record_transition("o1", "a", "b")

    def test_none_arguments_rejected(self) -> None:
        client = MagicMock()
        log = FirestoreTransitionLog(client)

        with pytest.raises(InvalidArgumentError):
            log.record_transition(None, "a", "b")
        client.batch.assert_not_called()

    def test_enum_states_need_state_type(self) -> None:
        client = MagicMock()
        log = FirestoreTransitionLog(client)

        with pytest.raises(InvalidArgumentError, match="state_type"):
            log.record_transition(Order(id="o1"), OrderState.PENDING, OrderState.CONFIRMED)
        client.batch.assert_not_called()


class TestFirestoreTransitionLogLatest:
    def test_document_missing(self) -> None:
        client = MagicMock()
        client.collection.return_value.document.return_value.get.return_value = _mock_doc(False)
        log = FirestoreTransitionLog(client)

        assert log.get_latest_state("o1") is None

    def test_latest_state_decoded(self) -> None:
        client = MagicMock()
        client.collection.return_value.document.return_value.get.return_value = _mock_doc(
            True, {"latest_state": "CANCELLED"}
        )
        log = FirestoreTransitionLog(client, codec=StateCodec(OrderState))

        assert log.get_latest_state(Order(id="o1")) is OrderState.CANCELLED

    def test_document_without_latest_state(self) -> None:
        client = MagicMock()
        client.collection.return_value.document.return_value.get.return_value = _mock_doc(
            True, None
        )
        log = FirestoreTransitionLog(client)

        assert log.get_latest_state("o1") is None

    def test_read_error_wrapped(self) -> None:
        client = MagicMock()
        client.collection.return_value.document.return_value.get.side_effect = Exception(
            "Firestore unavailable"
        )
        log = FirestoreTransitionLog(client)

        with pytest.raises(TransitionLogError, match="Firestore read failed"):
            log.get_latest_state("o1")

    def test_none_model_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            FirestoreTransitionLog(MagicMock()).get_latest_state(None)
