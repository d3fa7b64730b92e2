"""Observabilidade: logging JSON e correlation id."""

from statesman.observability.context import correlation_scope, get_correlation_id
from statesman.observability.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "correlation_scope",
    "get_correlation_id",
    "get_logger",
]
