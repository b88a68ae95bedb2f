"""Conversões de data para o formato aceito pela API (RFC 3339)."""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Any


def to_rfc3339(value: Any) -> Any:
    """Converte datetime/date em string RFC 3339.

    Datetimes sem timezone são tratados como UTC. Strings e None
    são devolvidos sem alteração.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return value


def json_default(value: Any) -> Any:
    """Hook `default` de json.dumps para tipos de data."""
    if isinstance(value, (datetime, date)):
        return to_rfc3339(value)
    raise TypeError(f"Objeto do tipo {type(value).__name__} não é serializável em JSON")
