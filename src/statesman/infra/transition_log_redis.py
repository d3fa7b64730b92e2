"""Implementação de TransitionLog usando Redis (produção).

Layout: uma lista por model em `{prefix}:{model_key}`; cada item é um
TransitionRecord em JSON. O último item da lista é o estado atual.
"""

from __future__ import annotations

import logging
from typing import Any

from statesman.domain.errors import TransitionLogError
from statesman.domain.models import TransitionRecord
from statesman.infra.transition_log_contract import ModelKey, StateCodec, TransitionLog
from statesman.observability.logging import get_logger

logger: logging.Logger = get_logger(__name__)


class RedisTransitionLog(TransitionLog):
    """Histórico de transições em listas Redis.

    Não há controle otimista: dois appends concorrentes para o mesmo model
    são ambos gravados, na ordem em que o Redis os recebe.
    """

    def __init__(
        self,
        redis_client: Any,
        codec: StateCodec | None = None,
        model_key: ModelKey | None = None,
        key_prefix: str = "transitions",
    ) -> None:
        super().__init__(model_key)
        self._redis = redis_client
        self._codec = codec or StateCodec()
        self._key_prefix = key_prefix

    def _redis_key(self, model_key: str) -> str:
        return f"{self._key_prefix}:{model_key}"

    def get_latest_state(self, model: Any) -> Any | None:
        key = self._redis_key(self.key_for(model))

        try:
            payload = self._redis.lindex(key, -1)
        except Exception as e:
            logger.error(
                "Failed to read latest transition from Redis",
                extra={"redis_key": key, "error": str(e)},
            )
            raise TransitionLogError(f"Redis read failed: {e}") from e

        if not payload:
            logger.debug("No transition history (Redis)", extra={"redis_key": key})
            return None

        if isinstance(payload, bytes):
            payload = payload.decode("utf-8")

        try:
            record = TransitionRecord.model_validate_json(payload)
        except ValueError as e:
            logger.error(
                "Corrupted transition record in Redis",
                extra={"redis_key": key, "error": type(e).__name__},
            )
            raise TransitionLogError(f"Corrupted transition record at {key}") from e

        return self._codec.decode(record.to_state)

    def record_transition(self, model: Any, from_state: Any, to_state: Any) -> None:
        model_key = self._require_transition_args(model, from_state, to_state)
        key = self._redis_key(model_key)
        record = TransitionRecord(
            model_key=model_key,
            from_state=self._codec.encode(from_state),
            to_state=self._codec.encode(to_state),
        )

        try:
            self._redis.rpush(key, record.model_dump_json())
        except Exception as e:
            logger.error(
                "Failed to record transition to Redis",
                extra={"redis_key": key, "error": str(e)},
            )
            raise TransitionLogError(f"Redis append failed: {e}") from e

        logger.debug(
            "Transition recorded (Redis)",
            extra={
                "redis_key": key,
                "from_state": record.from_state,
                "to_state": record.to_state,
            },
        )

    def history(self, model: Any) -> list[TransitionRecord]:
        """Registros do model em ordem (estados já decodificados)."""
        key = self._redis_key(self.key_for(model))

        try:
            payloads = self._redis.lrange(key, 0, -1) or []
        except Exception as e:
            logger.error(
                "Failed to read transition history from Redis",
                extra={"redis_key": key, "error": str(e)},
            )
            raise TransitionLogError(f"Redis read failed: {e}") from e

        records: list[TransitionRecord] = []
        for payload in payloads:
            if isinstance(payload, bytes):
                payload = payload.decode("utf-8")
            try:
                raw = TransitionRecord.model_validate_json(payload)
            except ValueError as e:
                logger.error(
                    "Corrupted transition record in Redis",
                    extra={"redis_key": key, "error": type(e).__name__},
                )
                raise TransitionLogError(f"Corrupted transition record at {key}") from e
            records.append(
                raw.model_copy(
                    update={
                        "from_state": self._codec.decode(raw.from_state),
                        "to_state": self._codec.decode(raw.to_state),
                    }
                )
            )
        return records
