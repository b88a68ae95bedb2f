"""Settings do cliente Stream Chat.

Credenciais e parâmetros de transporte carregados de variáveis de ambiente.
Substitui o "options bag" livre por uma estrutura explícita e imutável.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from urllib.parse import urlparse

from stream_chat_client.config.logging.config import VALID_LOG_LEVELS
from stream_chat_client.constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS


@dataclass(frozen=True)
class StreamChatSettings:
    """Configurações do cliente Stream Chat.

    Attributes:
        api_key: API key pública da aplicação
        api_secret: Secret usado para assinar JWTs (nunca transmitido)
        base_url: URL base da API
        timeout_seconds: Timeout de conexão e leitura por requisição
        max_connections: Tamanho do pool de conexões HTTP
        keepalive_expiry_seconds: Tempo de vida de conexões ociosas
        log_level: Nível usado por Client.from_settings(configure_logs=True)
    """

    # Credenciais
    api_key: str = ""
    api_secret: str = ""

    # API
    base_url: str = DEFAULT_BASE_URL

    # Transporte
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    max_connections: int = 5
    # Load balancer do backend encerra conexões ociosas após 60s
    keepalive_expiry_seconds: float = 59.0

    log_level: str = "INFO"

    def validate(self) -> list[str]:
        """Valida configurações mínimas do cliente.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_key:
            errors.append("STREAM_KEY não configurado")

        if not self.api_secret:
            errors.append("STREAM_SECRET não configurado")

        if self.timeout_seconds <= 0:
            errors.append("STREAM_CHAT_TIMEOUT deve ser > 0")

        if self.max_connections < 1:
            errors.append("STREAM_CHAT_MAX_CONNECTIONS deve ser >= 1")

        if urlparse(self.base_url).scheme not in ("http", "https"):
            errors.append(f"STREAM_CHAT_URL inválida: {self.base_url}")

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"STREAM_CHAT_LOG_LEVEL inválido: {self.log_level}")

        return errors


def _first_env(*names: str) -> str:
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return ""


def _load_from_env() -> StreamChatSettings:
    """Carrega StreamChatSettings a partir de variáveis de ambiente."""
    timeout = _first_env("STREAM_CHAT_TIMEOUT")
    return StreamChatSettings(
        api_key=_first_env("STREAM_KEY", "STREAM_CHAT_API_KEY"),
        api_secret=_first_env("STREAM_SECRET", "STREAM_CHAT_API_SECRET"),
        base_url=_first_env("STREAM_CHAT_URL", "STREAM_CHAT_API_HOST") or DEFAULT_BASE_URL,
        timeout_seconds=float(timeout) if timeout else DEFAULT_TIMEOUT_SECONDS,
        max_connections=int(os.getenv("STREAM_CHAT_MAX_CONNECTIONS", "5")),
        keepalive_expiry_seconds=float(os.getenv("STREAM_CHAT_KEEPALIVE_EXPIRY", "59")),
        log_level=os.getenv("STREAM_CHAT_LOG_LEVEL", "INFO").upper(),
    )

