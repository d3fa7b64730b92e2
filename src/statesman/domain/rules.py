"""Tabela de regras de transição e chave composta (from, to).

A tabela é imutável após a construção:
- RULES[estado] = frozenset de estados alcançáveis
- Estado ausente equivale a conjunto vazio (nenhuma transição de saída)
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Generic, TypeVar

from statesman.domain.errors import InvalidArgumentError

S = TypeVar("S", bound=Hashable)

_EMPTY: frozenset = frozenset()


class CallbackPhase(StrEnum):
    """Momento de execução de um callback em relação à persistência."""

    BEFORE = "BEFORE"
    """Executa antes de registrar a transição; falha impede a persistência."""

    AFTER = "AFTER"
    """Executa depois de registrar; falha não desfaz a transição."""


@dataclass(slots=True, frozen=True)
class StatePair(Generic[S]):
    """Par ordenado (from_state, to_state) usado como chave de lookup.

    Igualdade e hash são estruturais; a direção importa: (A, B) != (B, A).
    """

    from_state: S
    to_state: S

    def __str__(self) -> str:
        return f"{self.from_state} -> {self.to_state}"


class TransitionRules(Mapping[S, frozenset[S]]):
    """Mapeamento somente-leitura estado → estados alcançáveis."""

    __slots__ = ("_rules",)

    def __init__(self, rules: Mapping[S, Iterable[S]] | None = None) -> None:
        frozen: dict[S, frozenset[S]] = {}
        for state, targets in (rules or {}).items():
            if state is None:
                raise InvalidArgumentError("transition rules must not use None as a state")
            if targets is None:
                frozen[state] = _EMPTY
                continue
            target_set = frozenset(targets)
            if None in target_set:
                raise InvalidArgumentError(
                    f"transition rules for {state} must not contain None as a target"
                )
            frozen[state] = target_set
        self._rules = MappingProxyType(frozen)

    @classmethod
    def coerce(cls, rules: Mapping[S, Iterable[S]] | None) -> TransitionRules[S]:
        """Reaproveita uma instância existente ou congela o mapping recebido."""
        if isinstance(rules, TransitionRules):
            return rules
        return cls(rules)

    def __getitem__(self, state: S) -> frozenset[S]:
        return self._rules[state]

    def __iter__(self) -> Iterator[S]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"TransitionRules({dict(self._rules)!r})"

    def targets(self, state: S) -> frozenset[S]:
        """Estados alcançáveis a partir de `state` (vazio se não listado)."""
        return self._rules.get(state, _EMPTY)

    def allows(self, from_state: S, to_state: S) -> bool:
        return to_state in self.targets(from_state)

    def states(self) -> frozenset[S]:
        """Todos os estados mencionados na tabela (origens e destinos)."""
        known: set[S] = set(self._rules)
        for targets in self._rules.values():
            known.update(targets)
        return frozenset(known)
