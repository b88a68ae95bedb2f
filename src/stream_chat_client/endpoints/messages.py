"""Mensagens: leitura, busca, edição, pin, tradução e ações."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from stream_chat_client.connectors.stream_http import StreamHttpClient, dumps_payload
from stream_chat_client.utils.dates import to_rfc3339
from stream_chat_client.utils.sort import get_sort_fields

if TYPE_CHECKING:
    from datetime import datetime

    from stream_chat_client.models import StreamResponse
    from stream_chat_client.utils.sort import SortInput


class MessageEndpoints(StreamHttpClient):
    def get_message(self, message_id: str, **options: Any) -> StreamResponse:
        return self.get(f"messages/{message_id}", params=options)

    def search(
        self,
        filter_conditions: dict[str, Any],
        query: str | dict[str, Any],
        sort: SortInput = None,
        **options: Any,
    ) -> StreamResponse:
        """Busca mensagens nos canais que casam com `filter_conditions`.

        Args:
            filter_conditions: Filtro de canais
            query: Texto livre ou condições de mensagem
            sort: Ordenação dos resultados
            **options: limit, offset, next...

        Raises:
            ValueError: Se offset for usado junto com sort ou next
        """
        offset = options.get("offset") or 0
        if offset > 0 and (options.get("next") or sort):
            raise ValueError("não é possível usar offset com next ou sort")

        payload: dict[str, Any] = {
            "filter_conditions": filter_conditions,
            "sort": get_sort_fields(sort),
            **options,
        }
        if isinstance(query, str):
            payload["query"] = query
        else:
            payload["message_filter_conditions"] = query
        return self.get("search", params={"payload": dumps_payload(payload)})

    def update_message(self, message: dict[str, Any]) -> StreamResponse:
        """Substitui uma mensagem existente.

        Raises:
            ValueError: Se a mensagem não tiver `id`
        """
        message_id = message.get("id")
        if not message_id:
            raise ValueError("message must have an id")
        return self.post(f"messages/{message_id}", data={"message": message})

    def update_message_partial(
        self,
        message_id: str,
        updates: dict[str, Any],
        user_id: str | None = None,
        **options: Any,
    ) -> StreamResponse:
        """Atualização parcial (`set`/`unset`) de uma mensagem."""
        data: dict[str, Any] = {**updates, **options}
        if user_id is not None:
            data["user"] = {"id": user_id}
        return self.put(f"messages/{message_id}", data=data)

    def pin_message(
        self,
        message_id: str,
        user_id: str,
        expiration: datetime | str | None = None,
    ) -> StreamResponse:
        updates = {"set": {"pinned": True, "pin_expires": to_rfc3339(expiration)}}
        return self.update_message_partial(message_id, updates, user_id=user_id)

    def unpin_message(self, message_id: str, user_id: str) -> StreamResponse:
        updates = {"set": {"pinned": False}}
        return self.update_message_partial(message_id, updates, user_id=user_id)

    def delete_message(self, message_id: str, **options: Any) -> StreamResponse:
        """Remove mensagem (soft por padrão; `hard=True` para definitivo)."""
        return self.delete(f"messages/{message_id}", params=options)

    def translate_message(self, message_id: str, language: str) -> StreamResponse:
        return self.post(f"messages/{message_id}/translate", data={"language": language})

    def run_message_action(self, message_id: str, data: dict[str, Any]) -> StreamResponse:
        """Executa ação de comando (ex: giphy shuffle/send)."""
        return self.post(f"messages/{message_id}/action", data=data)
