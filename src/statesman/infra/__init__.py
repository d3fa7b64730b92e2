"""Camada de infraestrutura: implementações do Transition Log.

- InMemoryTransitionLog: dev/testes
- RedisTransitionLog, FirestoreTransitionLog: produção (clientes injetados)
- create_transition_log: factory por nome de backend

Uso típico:
    from statesman.infra import create_transition_log
"""

from statesman.infra.transition_log_contract import (
    StateCodec,
    TransitionLog,
    resolve_model_key,
)
from statesman.infra.transition_log_factory import (
    create_transition_log,
    create_transition_log_from_settings,
)
from statesman.infra.transition_log_firestore import FirestoreTransitionLog
from statesman.infra.transition_log_memory import InMemoryTransitionLog
from statesman.infra.transition_log_redis import RedisTransitionLog

__all__ = [
    "FirestoreTransitionLog",
    "InMemoryTransitionLog",
    "RedisTransitionLog",
    "StateCodec",
    "TransitionLog",
    "create_transition_log",
    "create_transition_log_from_settings",
    "resolve_model_key",
]
