"""Testes dos registros thread-safe de guards e callbacks."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from statesman import CallbackPhase, InvalidArgumentError, StatePair
from statesman.application.registry import (
    CallbackRegistry,
    GuardRegistry,
    HookRegistry,
    coerce_phase,
)


def _always(model: object) -> bool:
    return True


def _never(model: object) -> bool:
    return False


class TestHookRegistry:
    def test_register_and_get(self) -> None:
        registry: HookRegistry[int] = HookRegistry()
        pair = StatePair("a", "b")

        assert registry.register(pair, 1) is None
        assert registry.get(pair) == 1
        assert pair in registry
        assert len(registry) == 1

    def test_missing_pair_returns_none(self) -> None:
        registry: HookRegistry[int] = HookRegistry()
        assert registry.get(StatePair("a", "b")) is None
        assert StatePair("a", "b") not in registry

    def test_last_registration_wins(self) -> None:
        registry = GuardRegistry()
        pair = StatePair("a", "b")

        registry.register(pair, _never)
        previous = registry.register(pair, _always)

        assert previous is _never
        assert registry.get(pair) is _always
        assert len(registry) == 1

    def test_concurrent_registration(self) -> None:
        registry: HookRegistry[int] = HookRegistry()

        def register(i: int) -> None:
            registry.register(StatePair(i, i + 1), i)
            assert registry.get(StatePair(i, i + 1)) == i

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(register, range(500)))

        assert len(registry) == 500


class TestCallbackRegistry:
    def test_phases_are_separate(self) -> None:
        registry = CallbackRegistry()
        pair = StatePair("a", "b")

        registry.register(pair, CallbackPhase.BEFORE, print)

        assert registry.get(pair, CallbackPhase.BEFORE) is print
        assert registry.get(pair, CallbackPhase.AFTER) is None
        assert registry.count(CallbackPhase.BEFORE) == 1
        assert registry.count(CallbackPhase.AFTER) == 0


class TestCoercePhase:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (CallbackPhase.BEFORE, CallbackPhase.BEFORE),
            ("AFTER", CallbackPhase.AFTER),
            ("before", CallbackPhase.BEFORE),
        ],
    )
    def test_valid(self, raw, expected) -> None:
        assert coerce_phase(raw) is expected

    @pytest.mark.parametrize("raw", [None, "DURING", ""])
    def test_invalid(self, raw) -> None:
        with pytest.raises(InvalidArgumentError):
            coerce_phase(raw)
