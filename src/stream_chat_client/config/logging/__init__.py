"""Logging estruturado (JSON) do SDK.

Uso:
    from stream_chat_client.config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="meu_backend")
    logger = get_logger(__name__)

Campos presentes em todo log:
- correlation_id
- service
- sdk_version
- level
- logger
- message
- asctime

Tokens, secrets e payloads de mensagens nunca são logados.
"""

from stream_chat_client.config.logging.config import (
    DEFAULT_SERVICE_NAME,
    SDK_LOGGER_NAME,
    configure_logging,
    get_logger,
)
from stream_chat_client.config.logging.filters import (
    CorrelationIdFilter,
    SecretRedactionFilter,
)
from stream_chat_client.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "SDK_LOGGER_NAME",
    "CorrelationIdFilter",
    "SecretRedactionFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
