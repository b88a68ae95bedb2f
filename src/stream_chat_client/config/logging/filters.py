"""Filters de logging do SDK.

- CorrelationIdFilter: injeta correlation_id, service e sdk_version
- SecretRedactionFilter: mascara campos sensíveis passados via `extra`
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from stream_chat_client.version import VERSION

if TYPE_CHECKING:
    from collections.abc import Callable

# Atributos de LogRecord que nunca devem aparecer em claro
SENSITIVE_FIELDS = frozenset({"api_secret", "authorization", "token", "signature"})
REDACTED = "***"


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id, service e sdk_version em cada record.

    Se correlation_id já foi passado via `extra`, o valor é preservado.
    """

    def __init__(self, service: str, getter: Callable[[], str] | None = None) -> None:
        super().__init__()
        self.service = service
        self.getter = getter

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self.getter() if self.getter else ""
        record.service = self.service
        record.sdk_version = VERSION
        return True


class SecretRedactionFilter(logging.Filter):
    """Substitui valores de campos sensíveis por '***'."""

    def filter(self, record: logging.LogRecord) -> bool:
        for field in SENSITIVE_FIELDS:
            if getattr(record, field, None):
                setattr(record, field, REDACTED)
        return True
