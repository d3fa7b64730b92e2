from __future__ import annotations

import pytest

from statesman import StateMachine
from statesman.config.settings import get_settings
from statesman.infra import InMemoryTransitionLog
from tests.helpers.orders import ORDER_RULES, Order, OrderState


@pytest.fixture()
def transition_log() -> InMemoryTransitionLog:
    return InMemoryTransitionLog()


@pytest.fixture()
def machine(transition_log: InMemoryTransitionLog) -> StateMachine[Order, OrderState]:
    return StateMachine(OrderState.PENDING, ORDER_RULES, transition_log)


@pytest.fixture()
def order() -> Order:
    return Order(id="order-1")


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
