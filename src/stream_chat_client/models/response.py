"""Wrapper de resposta da API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from stream_chat_client.models.rate_limits import StreamRateLimits

if TYPE_CHECKING:
    import httpx


class StreamResponse(dict[str, Any]):
    """Corpo JSON da resposta decorado com metadados HTTP.

    Comporta-se como um dict com o corpo parseado. Metadados:
        status_code: Status HTTP
        headers: Headers da resposta
        rate_limit: StreamRateLimits ou None se o backend não enviou os headers
    """

    def __init__(self, data: dict[str, Any], response: httpx.Response) -> None:
        super().__init__(data)
        self.status_code: int = response.status_code
        self.headers = response.headers
        self.rate_limit: StreamRateLimits | None = StreamRateLimits.from_headers(
            response.headers
        )
