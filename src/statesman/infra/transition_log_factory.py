"""Factory para TransitionLog: criação backend-agnóstica.

Responsabilidades:
- Criar instâncias de TransitionLog baseado em config
- Validar clientes obrigatórios
- Registrar escolha de backend
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any

from statesman.infra.transition_log_contract import ModelKey, StateCodec, TransitionLog
from statesman.infra.transition_log_firestore import FirestoreTransitionLog
from statesman.infra.transition_log_memory import InMemoryTransitionLog
from statesman.infra.transition_log_redis import RedisTransitionLog
from statesman.observability.logging import get_logger

if TYPE_CHECKING:
    from statesman.config.settings import Settings

logger: logging.Logger = get_logger(__name__)


def create_transition_log(
    backend: str,
    redis_client: Any | None = None,
    firestore_client: Any | None = None,
    codec: StateCodec | None = None,
    state_type: type[Enum] | None = None,
    model_key: ModelKey | None = None,
    redis_key_prefix: str = "transitions",
    firestore_collection: str = "state_machines",
) -> TransitionLog:
    """Factory para TransitionLog.

    Args:
        backend: "memory", "redis" ou "firestore"
        redis_client: Cliente Redis (obrigatório se backend="redis")
        firestore_client: Cliente Firestore (obrigatório se backend="firestore")
        codec: conversão de estados para os backends serializados
        state_type: enum dos estados; cria StateCodec(state_type) se codec ausente
        model_key: função model → chave de armazenamento

    Returns:
        TransitionLog configurado

    Raises:
        ValueError: Se backend inválido ou cliente não fornecido
    """
    backend = backend.lower()
    if codec is None and state_type is not None:
        codec = StateCodec(state_type)

    if backend == "memory":
        logger.warning("Using in-memory transition log (dev only)")
        return InMemoryTransitionLog(model_key=model_key)

    if backend == "redis":
        if not redis_client:
            msg = "redis_client required for redis backend"
            raise ValueError(msg)
        logger.info("Using Redis transition log", extra={"key_prefix": redis_key_prefix})
        return RedisTransitionLog(
            redis_client, codec=codec, model_key=model_key, key_prefix=redis_key_prefix
        )

    if backend == "firestore":
        if not firestore_client:
            msg = "firestore_client required for firestore backend"
            raise ValueError(msg)
        logger.info("Using Firestore transition log", extra={"collection": firestore_collection})
        return FirestoreTransitionLog(
            firestore_client, collection=firestore_collection, codec=codec, model_key=model_key
        )

    msg = f"Unknown transition log backend: {backend}"
    raise ValueError(msg)


def create_transition_log_from_settings(
    settings: Settings,
    redis_client: Any | None = None,
    firestore_client: Any | None = None,
    codec: StateCodec | None = None,
    state_type: type[Enum] | None = None,
    model_key: ModelKey | None = None,
) -> TransitionLog:
    """Cria o TransitionLog configurado em Settings (clientes injetados pelo caller)."""
    return create_transition_log(
        settings.transition_log_backend,
        redis_client=redis_client,
        firestore_client=firestore_client,
        codec=codec,
        state_type=state_type,
        model_key=model_key,
        redis_key_prefix=settings.redis_key_prefix,
        firestore_collection=settings.firestore_collection,
    )
