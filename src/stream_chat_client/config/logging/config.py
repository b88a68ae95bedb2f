"""Configuração de logging estruturado do SDK.

O SDK apenas emite logs via `logging.getLogger(__name__)`; nenhum handler é
instalado na importação. A aplicação que usa o cliente decide se quer a saída
JSON chamando configure_logging().

Uso:
    from stream_chat_client.config.logging import configure_logging

    configure_logging(level="DEBUG")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from stream_chat_client.config.logging.filters import (
    CorrelationIdFilter,
    SecretRedactionFilter,
)
from stream_chat_client.config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "stream_chat_client"

# Logger raiz do pacote; todos os módulos do SDK são filhos dele
SDK_LOGGER_NAME = "stream_chat_client"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    propagate: bool = False,
) -> logging.Logger:
    """Instala handler JSON no logger do SDK.

    Args:
        level: DEBUG, INFO, WARNING, ERROR ou CRITICAL (sem distinção de caixa)
        service_name: Valor do campo `service` em cada log
        correlation_id_getter: Callable que devolve o correlation_id da
            requisição corrente na aplicação hospedeira
        propagate: Se True, os records também chegam ao logger raiz

    Returns:
        O logger "stream_chat_client", já com o handler instalado.

    Raises:
        ValueError: Se o nível não estiver em VALID_LOG_LEVELS
    """
    normalized = _normalize_level(level)

    handler = logging.StreamHandler()
    handler.setLevel(normalized)
    handler.setFormatter(create_json_formatter())
    for log_filter in (
        CorrelationIdFilter(service_name, correlation_id_getter),
        SecretRedactionFilter(),
    ):
        handler.addFilter(log_filter)

    sdk_logger = logging.getLogger(SDK_LOGGER_NAME)
    sdk_logger.setLevel(normalized)
    # Chamadas repetidas não acumulam handlers
    sdk_logger.handlers = [handler]
    sdk_logger.propagate = propagate
    return sdk_logger


def _normalize_level(level: str) -> str:
    normalized = level.strip().upper()
    if normalized in VALID_LOG_LEVELS:
        return normalized
    accepted = "/".join(sorted(VALID_LOG_LEVELS))
    raise ValueError(f"Nível de log inválido '{level}' (aceitos: {accepted})")


def get_logger(name: str) -> logging.Logger:
    """Atalho para logging.getLogger; use com __name__."""
    return logging.getLogger(name)
