"""Registros thread-safe de guards e callbacks indexados por StatePair.

Registro incremental é permitido após a construção da engine. Não há
garantia de ordenação entre um registro concorrente e uma transição em
andamento para a mesma chave: a transição observa o valor antigo ou o novo.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Hashable
from typing import Any, Generic, TypeVar

from statesman.domain.errors import InvalidArgumentError
from statesman.domain.rules import CallbackPhase, StatePair

V = TypeVar("V")

Guard = Callable[[Any], bool]
Callback = Callable[[Any], None]


class HookRegistry(Generic[V]):
    """Mapa StatePair → valor protegido por lock (último registro vence)."""

    def __init__(self) -> None:
        self._entries: dict[StatePair[Hashable], V] = {}
        self._lock = threading.Lock()

    def register(self, pair: StatePair[Hashable], value: V) -> V | None:
        """Registra (ou substitui) o valor do par; retorna o anterior, se houver."""
        with self._lock:
            previous = self._entries.get(pair)
            self._entries[pair] = value
        return previous

    def get(self, pair: StatePair[Hashable]) -> V | None:
        with self._lock:
            return self._entries.get(pair)

    def __contains__(self, pair: object) -> bool:
        with self._lock:
            return pair in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class GuardRegistry(HookRegistry[Guard]):
    """No máximo um guard por par ordenado."""


class CallbackRegistry:
    """Dois registros independentes, um por fase (BEFORE/AFTER)."""

    def __init__(self) -> None:
        self._phases: dict[CallbackPhase, HookRegistry[Callback]] = {
            phase: HookRegistry() for phase in CallbackPhase
        }

    def register(
        self, pair: StatePair[Hashable], phase: CallbackPhase, callback: Callback
    ) -> Callback | None:
        return self._phases[phase].register(pair, callback)

    def get(self, pair: StatePair[Hashable], phase: CallbackPhase) -> Callback | None:
        return self._phases[phase].get(pair)

    def count(self, phase: CallbackPhase) -> int:
        return len(self._phases[phase])


def coerce_phase(phase: CallbackPhase | str | None) -> CallbackPhase:
    """Converte "BEFORE"/"AFTER" (case-insensitive) em CallbackPhase."""
    if phase is None:
        raise InvalidArgumentError("the callback phase must not be None")
    if isinstance(phase, CallbackPhase):
        return phase
    try:
        return CallbackPhase(str(phase).upper())
    except ValueError as e:
        raise InvalidArgumentError(
            f"unknown callback phase {phase!r}; use BEFORE or AFTER"
        ) from e
