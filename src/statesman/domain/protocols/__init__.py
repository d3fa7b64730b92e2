"""Re-exports dos Protocolos de domínio para uso por Application."""

from __future__ import annotations

from statesman.domain.protocols.transition_log import TransitionLogProtocol

__all__ = [
    "TransitionLogProtocol",
]
