"""statesman: máquina de estados genérica orientada a tabela de regras.

Uso típico:
    from statesman import CallbackPhase, StateMachine
    from statesman.infra import InMemoryTransitionLog

    machine = StateMachine(OrderState.PENDING, RULES, InMemoryTransitionLog())
    machine.add_guard(OrderState.PENDING, OrderState.CONFIRMED, lambda o: o.amount > 0)
    machine.transition_to(order, OrderState.CONFIRMED)
"""

from statesman.application.state_machine import StateMachine
from statesman.domain.errors import (
    IllegalTransitionError,
    InvalidArgumentError,
    StaleTransitionError,
    StatesmanError,
    TransitionLogError,
)
from statesman.domain.models import TransitionRecord
from statesman.domain.protocols.transition_log import TransitionLogProtocol
from statesman.domain.rules import CallbackPhase, StatePair, TransitionRules

__version__ = "0.1.0"

__all__ = [
    "CallbackPhase",
    "IllegalTransitionError",
    "InvalidArgumentError",
    "StaleTransitionError",
    "StateMachine",
    "StatePair",
    "StatesmanError",
    "TransitionLogError",
    "TransitionLogProtocol",
    "TransitionRecord",
    "TransitionRules",
]
