"""Exceções do SDK Stream Chat.

Dois tipos de erro são expostos ao chamador:
- StreamAPIException: o backend respondeu com status >= 399 ou corpo ilegível
- StreamChannelException: uso incorreto de um recurso (ex.: canal sem id)

Erros de argumento (usuário sem id, credenciais ausentes) levantam ValueError
antes de qualquer chamada de rede.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx


class StreamChatError(Exception):
    """Base para todos os erros do SDK."""


class StreamAPIException(StreamChatError):
    """Erro retornado pela API Stream Chat.

    Attributes:
        response: Response HTTP recebida
        status_code: Status HTTP da resposta
        json_response: True se o corpo era um objeto JSON
        error_code: Código de erro do backend (quando JSON)
        error_message: Mensagem de erro do backend (quando JSON)
    """

    def __init__(self, response: httpx.Response) -> None:
        self.response = response
        self.status_code = response.status_code
        self.error_code: Any = None
        self.error_message: str | None = None
        self.json_response = False

        body = _parse_error_body(response)
        if body is not None:
            self.json_response = True
            self.error_code = body.get("code", "unknown")
            self.error_message = body.get("message", "unknown")

        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.json_response:
            return f"Stream Chat error code {self.error_code}: {self.error_message}"
        return f"Stream Chat error HTTP code: {self.status_code}"


class StreamChannelException(StreamChatError):
    """Operação inválida em um recurso (canal ou campanha sem id)."""


def _parse_error_body(response: httpx.Response) -> dict[str, Any] | None:
    try:
        parsed = json.loads(response.content or b"")
    except ValueError:
        return None
    return parsed if isinstance(parsed, dict) else None
