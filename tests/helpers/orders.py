"""Domínio de exemplo (pedidos) usado pelos testes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum


class OrderState(StrEnum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    PAID = "PAID"
    CANCELLED = "CANCELLED"


class Priority(Enum):
    LOW = 1
    HIGH = 2


ORDER_RULES = {
    OrderState.PENDING: {OrderState.CONFIRMED, OrderState.CANCELLED},
    OrderState.CONFIRMED: {OrderState.CANCELLED},
}


@dataclass
class Order:
    id: str
    amount: int = 100
