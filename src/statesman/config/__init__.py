"""Configurações centralizadas do statesman.

Uso típico:
    from statesman.config import get_settings
"""

from statesman.config.settings import (
    ENV_PREFIX,
    TRANSITION_LOG_BACKENDS,
    Settings,
    get_settings,
)

__all__ = [
    "Settings",
    "get_settings",
    "TRANSITION_LOG_BACKENDS",
    "ENV_PREFIX",
]
