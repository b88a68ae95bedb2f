"""Formatter JSON para logs do SDK."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos presentes em todo log do SDK
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
    "sdk_version",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com os campos padronizados do SDK.

    Exemplo de output:
        {
            "asctime": "2026-10-16 10:30:00,123",
            "level": "DEBUG",
            "logger": "stream_chat_client.connectors.stream_logging",
            "message": "stream_request",
            "correlation_id": "",
            "service": "stream_chat_client",
            "sdk_version": "1.0.0",
            "method": "GET",
            "path": "channels",
            "status_code": 200
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
