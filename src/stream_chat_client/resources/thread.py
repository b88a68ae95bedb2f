"""Consulta de threads (respostas agrupadas por mensagem pai)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from stream_chat_client.utils.sort import get_sort_fields

if TYPE_CHECKING:
    from stream_chat_client.models import StreamResponse
    from stream_chat_client.protocols import ChatApiProtocol
    from stream_chat_client.utils.sort import SortInput


class Thread:
    def __init__(self, client: ChatApiProtocol) -> None:
        self.client = client

    def query_threads(
        self,
        filter_conditions: dict[str, Any] | None = None,
        sort: SortInput = None,
        **options: Any,
    ) -> StreamResponse:
        """Lista threads; `options` aceita user_id, limit, next..."""
        data = {
            **options,
            "filter": filter_conditions or {},
            "sort": get_sort_fields(sort),
        }
        return self.client.post("threads", data=data)
