"""Implementação de TransitionLog usando Firestore (produção)."""

from __future__ import annotations

import logging
from typing import Any

from statesman.domain.errors import TransitionLogError
from statesman.domain.models import TransitionRecord
from statesman.infra.transition_log_contract import ModelKey, StateCodec, TransitionLog
from statesman.observability.logging import get_logger

logger: logging.Logger = get_logger(__name__)

HISTORY_SUBCOLLECTION = "transitions"


class FirestoreTransitionLog(TransitionLog):
    """Histórico de transições em Firestore.

    Coleção padrão: state_machines/{model_key}
    - documento guarda `latest_state` (consulta O(1) do estado atual)
    - subcoleção transitions/ recebe um documento por registro

    Documento e registro são gravados no mesmo batch.
    """

    def __init__(
        self,
        firestore_client: Any,
        collection: str = "state_machines",
        codec: StateCodec | None = None,
        model_key: ModelKey | None = None,
    ) -> None:
        super().__init__(model_key)
        self._client = firestore_client
        self._collection = collection
        self._codec = codec or StateCodec()

    def get_latest_state(self, model: Any) -> Any | None:
        model_key = self.key_for(model)
        doc_ref = self._client.collection(self._collection).document(model_key)

        try:
            doc = doc_ref.get()
        except Exception as e:
            logger.error(
                "Failed to read latest transition from Firestore",
                extra={"model_key": model_key, "error": str(e)},
            )
            raise TransitionLogError(f"Firestore read failed: {e}") from e

        if not doc.exists:
            logger.debug("No transition history (Firestore)", extra={"model_key": model_key})
            return None

        data = doc.to_dict() or {}
        latest = data.get("latest_state")
        if latest is None:
            return None
        return self._codec.decode(latest)

    def record_transition(self, model: Any, from_state: Any, to_state: Any) -> None:
        model_key = self._require_transition_args(model, from_state, to_state)
        record = TransitionRecord(
            model_key=model_key,
            from_state=self._codec.encode(from_state),
            to_state=self._codec.encode(to_state),
        )
        doc_ref = self._client.collection(self._collection).document(model_key)

        try:
            batch = self._client.batch()
            batch.set(
                doc_ref,
                {"latest_state": record.to_state, "updated_at": record.recorded_at},
                merge=True,
            )
            batch.set(
                doc_ref.collection(HISTORY_SUBCOLLECTION).document(),
                record.model_dump(),
            )
            batch.commit()
        except Exception as e:
            logger.error(
                "Failed to record transition to Firestore",
                extra={"model_key": model_key, "error": str(e)},
            )
            raise TransitionLogError(f"Firestore write failed: {e}") from e

        logger.debug(
            "Transition recorded (Firestore)",
            extra={
                "model_key": model_key,
                "from_state": record.from_state,
                "to_state": record.to_state,
            },
        )
