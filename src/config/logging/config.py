"""Configuração centralizada de logging.

Logging JSON estruturado com correlation_id e service em todo record.
Nunca logar número de telefone ou texto de mensagem.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", correlation_id_getter=get_correlation_id)
    logger = get_logger(__name__)
    logger.info("callback_delivered", extra={"callback": "twilio"})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter
from config.settings.base import DEFAULT_SERVICE_NAME

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado no logger raiz.

    Deve ser chamada uma vez na inicialização do processo.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço injetado em cada record.
        correlation_id_getter: Função que retorna o correlation_id corrente.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger do módulo (geralmente __name__)."""
    return logging.getLogger(name)


def log_forward_skipped(
    logger: logging.Logger,
    callback: str,
    reason: str,
    message_id: str = "",
) -> None:
    """Log de evento não encaminhado (skip intencional, sem PII).

    Args:
        logger: Logger instance.
        callback: Nome do callback (ex: "device", "twilio").
        reason: Motivo do skip (ex: "not_from_me", "group_message").
        message_id: ID da mensagem, quando disponível.
    """
    extra: dict[str, object] = {
        "forward_skipped": True,
        "callback": callback,
        "reason": reason,
    }
    if message_id:
        extra["message_id"] = message_id

    logger.debug("forward_skipped", extra=extra)
