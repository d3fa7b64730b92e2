"""Logging estruturado (JSON) para hosts que embutem a máquina de estados.

A biblioteca só emite records nos loggers `statesman.*`; quem configura
handlers é o host, via `configure_logging`.
"""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

from statesman.observability.context import get_correlation_id

LIBRARY_LOGGER = "statesman"

_JSON_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s %(correlation_id)s %(service)s"
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(correlation_id)s] %(message)s"


class CorrelationIdFilter(logging.Filter):
    """Anota cada record com o correlation_id da transição e o serviço host.

    O correlation_id vem de `correlation_scope()`; um valor passado via
    `extra` tem precedência. Records de transição carregam só chaves do
    model, nunca o payload.
    """

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self._service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        if not getattr(record, "correlation_id", None):
            record.correlation_id = get_correlation_id()
        record.service = self._service_name
        return True


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format == "text":
        return logging.Formatter(_TEXT_FORMAT)
    return JsonFormatter(_JSON_FIELDS, rename_fields={"levelname": "level", "name": "logger"})


def configure_logging(
    level: str,
    service_name: str,
    log_format: str = "json",
    logger_name: str | None = None,
) -> logging.Logger:
    """Instala um único handler (JSON ou texto) e retorna o logger configurado.

    Com `logger_name=None` o root logger é configurado; com
    `logger_name=LIBRARY_LOGGER` apenas os records da biblioteca passam pelo
    handler e não propagam para o root do host.
    """

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(_build_formatter(log_format))
    handler.addFilter(CorrelationIdFilter(service_name))

    target = logging.getLogger(logger_name)
    target.setLevel(level)
    target.handlers = [handler]
    if logger_name is not None:
        target.propagate = False
    return target


def get_logger(name: str) -> logging.Logger:
    """Logger do módulo; service/correlation_id são injetados pelo handler."""

    return logging.getLogger(name)


def describe_model(model: object) -> str:
    """Identificação curta do model para logs (tipo + id, sem payload)."""

    model_id = getattr(model, "id", None)
    if model_id is None:
        return type(model).__name__
    return f"{type(model).__name__}:{model_id}"
