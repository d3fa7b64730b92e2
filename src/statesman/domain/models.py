"""Modelos de domínio do histórico de transições."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TransitionRecord(BaseModel):
    """Registro imutável de uma transição persistida.

    Estados são opacos: em memória mantêm o valor original; nos backends
    serializados (Redis/Firestore) são gravados já codificados como string.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
        protected_namespaces=(),
    )

    model_key: str
    from_state: Any
    to_state: Any
    recorded_at: datetime = Field(default_factory=lambda: datetime.now(tz=UTC))
