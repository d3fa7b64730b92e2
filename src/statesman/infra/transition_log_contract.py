"""Contrato de persistência do histórico de transições (TransitionLog).

Separado para manter SRP e permitir reuso entre implementações
(memória, Redis, Firestore).
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable
from enum import Enum
from typing import Any

from statesman.domain.errors import InvalidArgumentError, TransitionLogError
from statesman.domain.protocols.transition_log import TransitionLogProtocol

ModelKey = Callable[[Any], str]


def resolve_model_key(model: Any) -> str:
    """Chave estável do model: o próprio valor (str/int) ou `model.id`.

    Raises:
        InvalidArgumentError: model sem identificador utilizável
    """
    if isinstance(model, str):
        return model
    if isinstance(model, int) and not isinstance(model, bool):
        return str(model)

    model_id = getattr(model, "id", None)
    if model_id is None:
        raise InvalidArgumentError(
            f"cannot derive a key for {type(model).__name__}; "
            "provide an `id` attribute or a model_key function"
        )
    return str(model_id)


class StateCodec:
    """Converte estados em string para backends serializados.

    Enums exigem `state_type`: são gravados pelo nome e reconstruídos via
    `state_type[name]`. Sem `state_type`, apenas estados não-enum são
    aceitos, gravados com str() e devolvidos como string.
    """

    def __init__(self, state_type: type[Enum] | None = None) -> None:
        self._state_type = state_type

    def encode(self, state: Any) -> str:
        if isinstance(state, Enum):
            if self._state_type is None:
                raise InvalidArgumentError(
                    f"{type(state).__name__} states need StateCodec(state_type=...) "
                    "to be decoded back from the transition log"
                )
            if not isinstance(state, self._state_type):
                raise InvalidArgumentError(
                    f"{state!r} is not a {self._state_type.__name__} member"
                )
            return state.name
        return str(state)

    def decode(self, raw: str) -> Any:
        if self._state_type is None:
            return raw
        try:
            return self._state_type[raw]
        except KeyError as e:
            raise TransitionLogError(
                f"unknown {self._state_type.__name__} member in transition log: {raw!r}"
            ) from e


class TransitionLog(TransitionLogProtocol[Any, Any]):
    """Contrato abstrato para armazenamento do histórico de transições."""

    def __init__(self, model_key: ModelKey | None = None) -> None:
        self._model_key: ModelKey = model_key or resolve_model_key

    @abstractmethod
    def get_latest_state(self, model: Any) -> Any | None:
        """Último estado registrado para o model (None se sem histórico)."""
        ...

    @abstractmethod
    def record_transition(self, model: Any, from_state: Any, to_state: Any) -> None:
        """Anexa registro (model, from_state, to_state)."""
        ...

    def key_for(self, model: Any) -> str:
        """Valida o model e retorna sua chave de armazenamento."""
        if model is None:
            raise InvalidArgumentError("model must not be None")
        return self._model_key(model)

    def _require_transition_args(self, model: Any, from_state: Any, to_state: Any) -> str:
        if model is None or from_state is None or to_state is None:
            raise InvalidArgumentError("none of model, from_state, to_state can be None")
        return self._model_key(model)
