"""Engine de máquina de estados orientada a tabela de regras.

Fluxo de uma transição:
1. current = current_state(model) (consulta o Transition Log)
2. valida target contra RULES[current] e o guard de (current, target)
3. callback BEFORE → record_transition → callback AFTER

A engine não guarda estado por model e não aplica lock em torno da sequência
acima; exclusão por model é responsabilidade do Transition Log ou do caller.
Erros do log e dos callbacks propagam sem tratamento local.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Mapping
from typing import Generic, TypeVar

from statesman.application.registry import (
    Callback,
    CallbackRegistry,
    Guard,
    GuardRegistry,
    coerce_phase,
)
from statesman.domain.errors import IllegalTransitionError, InvalidArgumentError
from statesman.domain.protocols.transition_log import TransitionLogProtocol
from statesman.domain.rules import CallbackPhase, StatePair, TransitionRules
from statesman.observability.logging import describe_model, get_logger

logger: logging.Logger = get_logger(__name__)

M = TypeVar("M")
S = TypeVar("S", bound=Hashable)


class StateMachine(Generic[M, S]):
    """Máquina de estados genérica sobre (Model, State).

    Tabela de regras, estado inicial e Transition Log são fixos após a
    construção. Guards e callbacks podem ser registrados depois, e devem
    estar completos antes do tráfego de transições para comportamento
    determinístico.
    """

    def __init__(
        self,
        initial_state: S,
        transition_rules: Mapping[S, Iterable[S]] | None,
        transition_log: TransitionLogProtocol[M, S],
    ) -> None:
        """Cria a máquina de estados.

        Args:
            initial_state: estado usado quando o log não tem histórico do model
            transition_rules: estado → estados alcançáveis (None = tabela vazia)
            transition_log: consulta e persiste registros de transição

        Raises:
            InvalidArgumentError: initial_state ou transition_log ausentes
        """
        if initial_state is None:
            raise InvalidArgumentError("the initial state must be provided")
        if transition_log is None:
            raise InvalidArgumentError("transition_log must not be None")

        self._initial_state = initial_state
        self._rules: TransitionRules[S] = TransitionRules.coerce(transition_rules)
        self._log = transition_log
        self._guards = GuardRegistry()
        self._callbacks = CallbackRegistry()

    @property
    def initial_state(self) -> S:
        return self._initial_state

    @property
    def transition_rules(self) -> TransitionRules[S]:
        return self._rules

    def current_state(self, model: M) -> S:
        """Estado atual do model: último registrado ou o estado inicial."""
        latest = self._log.get_latest_state(model)
        return self._initial_state if latest is None else latest

    def add_guard(self, from_state: S, to_state: S, guard: Guard) -> None:
        """Registra (ou substitui) o guard da transição from_state → to_state.

        Raises:
            InvalidArgumentError: algum argumento ausente ou guard não chamável
        """
        if from_state is None or to_state is None or guard is None:
            raise InvalidArgumentError("all arguments must not be None")
        if not callable(guard):
            raise InvalidArgumentError("guard must be callable")

        pair = StatePair(from_state, to_state)
        replaced = self._guards.register(pair, guard)
        logger.debug(
            "Transition guard registered",
            extra={"transition": str(pair), "replaced": replaced is not None},
        )

    def add_callback(
        self,
        from_state: S,
        to_state: S,
        phase: CallbackPhase | str,
        callback: Callback,
    ) -> None:
        """Registra (ou substitui) o callback da transição para a fase dada.

        Raises:
            InvalidArgumentError: algum argumento ausente, fase desconhecida
                ou callback não chamável
        """
        if from_state is None or to_state is None or phase is None or callback is None:
            raise InvalidArgumentError("all arguments must not be None")
        if not callable(callback):
            raise InvalidArgumentError("callback must be callable")

        resolved = coerce_phase(phase)
        pair = StatePair(from_state, to_state)
        replaced = self._callbacks.register(pair, resolved, callback)
        logger.debug(
            "Transition callback registered",
            extra={
                "transition": str(pair),
                "phase": resolved.value,
                "replaced": replaced is not None,
            },
        )

    def can_transition_to(self, model: M, target: S) -> bool:
        """True se o model pode transicionar do estado atual para `target`.

        Raises:
            InvalidArgumentError: target ausente
        """
        if target is None:
            raise InvalidArgumentError("the target state must not be None")
        return self._is_allowed(model, self.current_state(model), target)

    def available_transitions(self, model: M) -> frozenset[S]:
        """Destinos permitidos agora (tabela de regras + guards)."""
        current = self.current_state(model)
        return frozenset(
            target for target in self._rules.targets(current)
            if self._is_allowed(model, current, target)
        )

    def transition_to(self, model: M, target: S) -> None:
        """Executa a transição para `target`.

        Raises:
            InvalidArgumentError: target ausente
            IllegalTransitionError: transição não permitida (nenhum side effect)
        """
        if target is None:
            raise InvalidArgumentError("the target state must not be None")

        current = self.current_state(model)
        if not self._is_allowed(model, current, target):
            raise IllegalTransitionError(model, current, target)

        pair = StatePair(current, target)
        before = self._callbacks.get(pair, CallbackPhase.BEFORE)
        if before is not None:
            before(model)

        self._log.record_transition(model, current, target)
        logger.debug(
            "Transition recorded",
            extra={"model": describe_model(model), "transition": str(pair)},
        )

        after = self._callbacks.get(pair, CallbackPhase.AFTER)
        if after is not None:
            after(model)

    def _is_allowed(self, model: M, current: S, target: S) -> bool:
        if not self._rules.allows(current, target):
            return False
        guard = self._guards.get(StatePair(current, target))
        return guard is None or bool(guard(model))
