"""Protocolo de domínio para o histórico de transições (Transition Log Port)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

M = TypeVar("M")
S = TypeVar("S")


class TransitionLogProtocol(ABC, Generic[M, S]):
    """Contrato mínimo consultado pela engine.

    - get_latest_state(model) -> State | None
    - record_transition(model, from_state, to_state)

    `record_transition` é o ponto de commit: se falhar, a transição não
    aconteceu do ponto de vista da engine.
    """

    @abstractmethod
    def get_latest_state(self, model: M) -> S | None:
        """Retorna o último estado registrado, ou None se não há histórico.

        Raises:
            InvalidArgumentError: se model for None
        """

    @abstractmethod
    def record_transition(self, model: M, from_state: S, to_state: S) -> None:
        """Anexa um registro de transição.

        Raises:
            InvalidArgumentError: se algum argumento for None
        """
