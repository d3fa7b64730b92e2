"""Domínio: regras de transição, erros e contratos.

Exporta:
- TransitionRules: tabela imutável estado → alcançáveis
- StatePair: chave ordenada (from, to)
- CallbackPhase: BEFORE | AFTER
- TransitionRecord: registro persistido
"""

from statesman.domain.errors import (
    IllegalTransitionError,
    InvalidArgumentError,
    StaleTransitionError,
    StatesmanError,
    TransitionLogError,
)
from statesman.domain.models import TransitionRecord
from statesman.domain.rules import CallbackPhase, StatePair, TransitionRules

__all__ = [
    "CallbackPhase",
    "IllegalTransitionError",
    "InvalidArgumentError",
    "StaleTransitionError",
    "StatePair",
    "StatesmanError",
    "TransitionLogError",
    "TransitionRecord",
    "TransitionRules",
]
