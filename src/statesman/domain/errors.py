"""Taxonomia de erros do runtime de máquina de estados.

- InvalidArgumentError: parâmetro obrigatório ausente (antes de qualquer side effect)
- IllegalTransitionError: transição rejeitada pela tabela de regras ou por guard
- TransitionLogError: falha do backend de persistência do histórico
"""

from __future__ import annotations

from typing import Any


class StatesmanError(Exception):
    """Erro base do pacote."""

    pass


class InvalidArgumentError(StatesmanError, ValueError):
    """Argumento obrigatório ausente ou inválido."""

    pass


class IllegalTransitionError(StatesmanError):
    """Transição não permitida a partir do estado atual do model."""

    def __init__(self, model: Any, current_state: Any, target_state: Any) -> None:
        self.model = model
        self.current_state = current_state
        self.target_state = target_state
        super().__init__(
            f"the model ({model!r}) can not transition from {current_state} to {target_state}"
        )


class TransitionLogError(StatesmanError):
    """Erro ao persistir ou consultar o histórico de transições."""

    pass


class StaleTransitionError(TransitionLogError):
    """O estado de origem informado não corresponde mais ao último registrado."""

    pass
