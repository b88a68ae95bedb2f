"""Helpers de logging para chamadas à API Stream (sem secrets nem payloads)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stream_chat_client.utils.errors import StreamAPIException

logger = logging.getLogger(__name__)


def log_api_error(
    error: StreamAPIException,
    method: str,
    path: str,
) -> None:
    """Loga erro da API sem expor dados sensíveis."""
    logger.warning(
        "stream_api_error",
        extra={
            "method": method,
            "path": path,
            "status_code": error.status_code,
            "error_code": error.error_code,
            "json_response": error.json_response,
        },
    )


def log_success(
    method: str,
    path: str,
    status_code: int,
) -> None:
    logger.debug(
        "stream_request",
        extra={
            "method": method,
            "path": path,
            "status_code": status_code,
        },
    )
