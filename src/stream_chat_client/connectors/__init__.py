"""Conector HTTP da API Stream Chat.

Único ponto de IO do SDK:
- Transporte httpx e configuração do pool
- Assinatura JWT das requisições
- Upload multipart
- Parsing de respostas e erros
- Verificação de webhooks
"""

from .http_base import HttpClientConfig, build_http_client
from .stream_http import StreamHttpClient, dumps_payload

__all__ = [
    "HttpClientConfig",
    "StreamHttpClient",
    "build_http_client",
    "dumps_payload",
]
