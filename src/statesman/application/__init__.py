"""Application: engine de transições e registros de guards/callbacks."""

from statesman.application.registry import (
    Callback,
    CallbackRegistry,
    Guard,
    GuardRegistry,
    HookRegistry,
)
from statesman.application.state_machine import StateMachine

__all__ = [
    "Callback",
    "CallbackRegistry",
    "Guard",
    "GuardRegistry",
    "HookRegistry",
    "StateMachine",
]
