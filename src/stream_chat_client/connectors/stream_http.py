"""Cliente HTTP base da API Stream Chat.

Responsabilidades:
- Credenciais e token de servidor (JWT HS256)
- Montagem de requisições: headers padrão, api_key e query string ordenada
- Verbos HTTP (get, post, put, patch, delete) e upload multipart
- Parsing da resposta: erro (StreamAPIException) ou StreamResponse

Sem retries e sem cache: cada chamada é uma ida e volta ao backend.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, Self

from stream_chat_client.connectors.auth import (
    build_auth_headers,
    create_server_token,
    create_user_token,
)
from stream_chat_client.connectors.http_base import HttpClientConfig, build_http_client
from stream_chat_client.connectors.stream_logging import log_api_error, log_success
from stream_chat_client.connectors.uploads import DEFAULT_CONTENT_TYPE, resolve_upload
from stream_chat_client.connectors.webhook import parse_webhook_request, verify_webhook_signature
from stream_chat_client.constants import DEFAULT_BASE_URL
from stream_chat_client.models import StreamResponse
from stream_chat_client.utils.dates import json_default
from stream_chat_client.utils.errors import StreamAPIException
from stream_chat_client.version import VERSION

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime
    from types import TracebackType

    import httpx

    from stream_chat_client.connectors.uploads import UploadSource

logger: logging.Logger = logging.getLogger(__name__)

_METHODS_WITH_BODY = frozenset({"POST", "PUT", "PATCH"})


def dumps_payload(data: Any) -> str:
    """Serializa payload em JSON (datas em RFC 3339)."""
    return json.dumps(data, default=json_default)


class StreamHttpClient:
    """Cliente HTTP autenticado para a API Stream Chat.

    Args:
        api_key: API key da aplicação
        api_secret: Secret da aplicação (usado só para assinar localmente)
        timeout: Timeout em segundos; usa HttpClientConfig se None
        base_url: URL base da API
        http_client: httpx.Client a ser usado (injeção de transporte)
        http_config: Configuração do pool quando http_client não é informado

    Raises:
        ValueError: Se api_key ou api_secret estiverem vazios
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        timeout: float | None = None,
        *,
        base_url: str | None = None,
        http_client: httpx.Client | None = None,
        http_config: HttpClientConfig | None = None,
    ) -> None:
        if not api_key or not api_secret:
            raise ValueError("api_key e api_secret são obrigatórios")

        self.api_key = api_key
        self.api_secret = api_secret
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")

        config = http_config or HttpClientConfig()
        if timeout is not None:
            config = HttpClientConfig(
                timeout_seconds=float(timeout),
                max_connections=config.max_connections,
                keepalive_expiry_seconds=config.keepalive_expiry_seconds,
                default_headers=config.default_headers,
                verify_ssl=config.verify_ssl,
            )
        self.timeout = config.timeout_seconds
        self._auth_token = create_server_token(api_secret)
        self._http = http_client or build_http_client(config)

    @property
    def http_client(self) -> httpx.Client:
        return self._http

    def set_http_client(self, client: httpx.Client) -> None:
        """Substitui o httpx.Client subjacente."""
        self._http = client

    def close(self) -> None:
        """Fecha o pool de conexões."""
        self._http.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # Tokens e webhooks

    def create_token(
        self,
        user_id: str,
        exp: int | datetime | None = None,
        iat: int | datetime | None = None,
    ) -> str:
        """Gera JWT de usuário assinado com o secret da aplicação."""
        return create_user_token(user_id, self.api_secret, exp=exp, iat=iat)

    def verify_webhook(self, request_body: bytes | str, x_signature: bytes | str) -> bool:
        """Verifica o header X-Signature de um webhook recebido."""
        return verify_webhook_signature(request_body, x_signature, self.api_secret)

    def parse_webhook(self, raw_body: bytes, headers: Mapping[str, str]) -> dict[str, Any]:
        """Valida assinatura e retorna o evento do webhook.

        Raises:
            InvalidSignatureError: Se X-Signature ausente ou inválido
            InvalidJsonError: Se o corpo não for um objeto JSON
        """
        return parse_webhook_request(raw_body, headers, self.api_secret)

    # Verbos

    def get(self, relative_url: str, *, params: dict[str, Any] | None = None) -> StreamResponse:
        return self._make_http_request("GET", relative_url, params=params)

    def post(
        self,
        relative_url: str,
        *,
        params: dict[str, Any] | None = None,
        data: Any = None,
    ) -> StreamResponse:
        return self._make_http_request("POST", relative_url, params=params, data=data)

    def put(
        self,
        relative_url: str,
        *,
        params: dict[str, Any] | None = None,
        data: Any = None,
    ) -> StreamResponse:
        return self._make_http_request("PUT", relative_url, params=params, data=data)

    def patch(
        self,
        relative_url: str,
        *,
        params: dict[str, Any] | None = None,
        data: Any = None,
    ) -> StreamResponse:
        return self._make_http_request("PATCH", relative_url, params=params, data=data)

    def delete(
        self,
        relative_url: str,
        *,
        params: dict[str, Any] | None = None,
    ) -> StreamResponse:
        return self._make_http_request("DELETE", relative_url, params=params)

    def send_file(
        self,
        relative_url: str,
        file: UploadSource,
        user: dict[str, Any],
        content_type: str | None = None,
    ) -> StreamResponse:
        """Envia arquivo via multipart (campos `user` em JSON e `file` binário).

        Args:
            relative_url: Endpoint relativo (ex: channels/messaging/geral/file)
            file: URL http(s), caminho local, bytes ou arquivo binário aberto
            user: Usuário que envia o arquivo (precisa de `id`)
            content_type: MIME type do arquivo
        """
        filename, content = resolve_upload(file, self._http)
        headers = {"X-Stream-Client": self.get_user_agent(), **build_auth_headers(self._auth_token)}
        response = self._http.post(
            self._build_url(relative_url),
            params=self._build_params(None),
            headers=headers,
            data={"user": dumps_payload(user)},
            files={"file": (filename, content, content_type or DEFAULT_CONTENT_TYPE)},
        )
        return self._parse_response(response, "POST", relative_url)

    # Montagem da requisição

    def get_user_agent(self) -> str:
        return f"stream-python-client-{VERSION}"

    def get_default_params(self) -> dict[str, Any]:
        return {"api_key": self.api_key}

    def get_default_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-Stream-Client": self.get_user_agent(),
        }

    def _build_url(self, relative_url: str) -> str:
        return f"{self.base_url}/{relative_url.lstrip('/')}"

    def _build_params(self, params: dict[str, Any] | None) -> list[tuple[str, Any]]:
        """Mescla api_key, remove valores None e ordena por chave."""
        merged = {**self.get_default_params(), **(params or {})}
        return sorted(
            ((str(key), value) for key, value in merged.items() if value is not None),
            key=lambda item: item[0],
        )

    def _make_http_request(
        self,
        method: str,
        relative_url: str,
        *,
        params: dict[str, Any] | None = None,
        data: Any = None,
    ) -> StreamResponse:
        headers = {**self.get_default_headers(), **build_auth_headers(self._auth_token)}
        content = None
        if method in _METHODS_WITH_BODY:
            content = dumps_payload(data if data is not None else {})

        response = self._http.request(
            method,
            self._build_url(relative_url),
            params=self._build_params(params),
            headers=headers,
            content=content,
        )
        return self._parse_response(response, method, relative_url)

    def _parse_response(
        self,
        response: httpx.Response,
        method: str,
        path: str,
    ) -> StreamResponse:
        """Converte response em StreamResponse.

        Raises:
            StreamAPIException: Se o corpo não for um objeto JSON ou status >= 399
        """
        try:
            parsed = response.json()
        except ValueError:
            logger.error(
                "stream_invalid_json",
                extra={"method": method, "path": path, "status_code": response.status_code},
            )
            raise StreamAPIException(response) from None

        if response.status_code >= 399 or not isinstance(parsed, dict):
            error = StreamAPIException(response)
            log_api_error(error, method, path)
            raise error

        log_success(method, path, response.status_code)
        return StreamResponse(parsed, response)
