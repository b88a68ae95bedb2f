"""Configuração e construção do transporte HTTP (httpx)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import httpx

from stream_chat_client.constants import DEFAULT_TIMEOUT_SECONDS

if TYPE_CHECKING:
    from stream_chat_client.config.settings import StreamChatSettings


@dataclass(frozen=True)
class HttpClientConfig:
    """Configuração do transporte HTTP.

    O timeout vale para conexão e leitura e é fixo durante toda a vida do
    cliente. Não há retries.
    """

    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    max_connections: int = 5
    keepalive_expiry_seconds: float = 59.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True

    @classmethod
    def from_settings(cls, settings: StreamChatSettings) -> HttpClientConfig:
        return cls(
            timeout_seconds=settings.timeout_seconds,
            max_connections=settings.max_connections,
            keepalive_expiry_seconds=settings.keepalive_expiry_seconds,
        )


def build_http_client(config: HttpClientConfig | None = None) -> httpx.Client:
    """Cria httpx.Client com pool de conexões reutilizável entre chamadas."""
    cfg = config or HttpClientConfig()
    limits = httpx.Limits(
        max_connections=cfg.max_connections,
        max_keepalive_connections=cfg.max_connections,
        keepalive_expiry=cfg.keepalive_expiry_seconds,
    )
    return httpx.Client(
        timeout=httpx.Timeout(cfg.timeout_seconds),
        limits=limits,
        headers=cfg.default_headers,
        verify=cfg.verify_ssl,
    )
