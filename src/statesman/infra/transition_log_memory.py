"""Implementação de TransitionLog em memória (apenas dev/testes)."""

from __future__ import annotations

import logging
import threading
from typing import Any

from statesman.domain.errors import StaleTransitionError
from statesman.domain.models import TransitionRecord
from statesman.infra.transition_log_contract import ModelKey, TransitionLog
from statesman.observability.logging import get_logger

logger: logging.Logger = get_logger(__name__)


class InMemoryTransitionLog(TransitionLog):
    """Histórico append-only em memória (não usar em produção).

    Com `enforce_sequence=True`, o append é rejeitado quando `from_state`
    difere do último `to_state` registrado para o model. Verificação e
    append ocorrem sob o mesmo lock, então duas transições concorrentes
    a partir do mesmo estado não geram histórico duplicado.
    """

    def __init__(
        self,
        model_key: ModelKey | None = None,
        enforce_sequence: bool = True,
    ) -> None:
        super().__init__(model_key)
        self._enforce_sequence = enforce_sequence
        self._history: dict[str, list[TransitionRecord]] = {}
        self._lock = threading.Lock()

    def get_latest_state(self, model: Any) -> Any | None:
        key = self.key_for(model)
        with self._lock:
            records = self._history.get(key)
            if not records:
                return None
            return records[-1].to_state

    def record_transition(self, model: Any, from_state: Any, to_state: Any) -> None:
        key = self._require_transition_args(model, from_state, to_state)
        record = TransitionRecord(model_key=key, from_state=from_state, to_state=to_state)

        with self._lock:
            records = self._history.setdefault(key, [])
            if self._enforce_sequence and records and records[-1].to_state != from_state:
                raise StaleTransitionError(
                    f"stale transition for {key}: expected from {records[-1].to_state}, "
                    f"got {from_state}"
                )
            records.append(record)

        logger.debug(
            "Transition recorded (in-memory)",
            extra={"model_key": key, "from_state": str(from_state), "to_state": str(to_state)},
        )

    def history(self, model: Any) -> list[TransitionRecord]:
        """Registros do model em ordem de gravação (cópia)."""
        key = self.key_for(model)
        with self._lock:
            return list(self._history.get(key, ()))

    def clear(self) -> None:
        with self._lock:
            self._history.clear()
