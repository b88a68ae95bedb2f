"""Usuários: upsert, atualização parcial, remoção, export e eventos."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from stream_chat_client.connectors.stream_http import StreamHttpClient, dumps_payload
from stream_chat_client.constants import SOFT_DELETE
from stream_chat_client.utils.sort import get_sort_fields

if TYPE_CHECKING:
    from collections.abc import Iterable

    from stream_chat_client.models import StreamResponse
    from stream_chat_client.utils.sort import SortInput

logger: logging.Logger = logging.getLogger(__name__)


class UserEndpoints(StreamHttpClient):
    def update_users(self, users: Iterable[dict[str, Any]]) -> StreamResponse:
        """Cria ou substitui usuários (upsert completo).

        Raises:
            ValueError: Se algum usuário não tiver `id`
        """
        payload: dict[str, dict[str, Any]] = {}
        for user in users:
            user_id = user.get("id")
            if not user_id:
                raise ValueError("user must have an id")
            payload[str(user_id)] = user
        logger.debug("stream_upsert_users", extra={"count": len(payload)})
        return self.post("users", data={"users": payload})

    def update_user(self, user: dict[str, Any]) -> StreamResponse:
        return self.update_users([user])

    def upsert_users(self, users: Iterable[dict[str, Any]]) -> StreamResponse:
        return self.update_users(users)

    def upsert_user(self, user: dict[str, Any]) -> StreamResponse:
        return self.update_users([user])

    def update_users_partial(self, updates: list[dict[str, Any]]) -> StreamResponse:
        """Atualização parcial: cada item tem `id` e `set` e/ou `unset`."""
        return self.patch("users", data={"users": updates})

    def update_user_partial(self, update: dict[str, Any]) -> StreamResponse:
        return self.update_users_partial([update])

    def query_users(
        self,
        filter_conditions: dict[str, Any],
        sort: SortInput = None,
        **options: Any,
    ) -> StreamResponse:
        payload = {
            "filter_conditions": filter_conditions,
            "sort": get_sort_fields(sort),
            **options,
        }
        return self.get("users", params={"payload": dumps_payload(payload)})

    def delete_user(self, user_id: str, **options: Any) -> StreamResponse:
        return self.delete(f"users/{user_id}", params=options)

    def delete_users(
        self,
        user_ids: list[str],
        user: str = SOFT_DELETE,
        messages: str | None = None,
        conversations: str | None = None,
    ) -> StreamResponse:
        """Remove usuários de forma assíncrona; retorna `task_id`.

        Args:
            user_ids: IDs dos usuários
            user: "soft" ou "hard"
            messages: "soft", "hard" ou None (mantém)
            conversations: "soft", "hard" ou None (mantém)
        """
        data: dict[str, Any] = {"user_ids": user_ids, "user": user}
        if messages is not None:
            data["messages"] = messages
        if conversations is not None:
            data["conversations"] = conversations
        return self.post("users/delete", data=data)

    def deactivate_user(self, user_id: str, **options: Any) -> StreamResponse:
        return self.post(f"users/{user_id}/deactivate", data=options)

    def reactivate_user(self, user_id: str, **options: Any) -> StreamResponse:
        return self.post(f"users/{user_id}/reactivate", data=options)

    def export_user(self, user_id: str, **options: Any) -> StreamResponse:
        return self.get(f"users/{user_id}/export", params=options)

    def create_guest(self, data: dict[str, Any]) -> StreamResponse:
        """Cria usuário convidado; `data` segue como corpo (ex: {"user": {...}})."""
        return self.post("guests", data=data)

    def send_user_event(self, user_id: str, data: dict[str, Any]) -> StreamResponse:
        """Envia evento customizado para todas as conexões do usuário.

        `data` segue como corpo, no formato {"event": {"type": ...}}.
        """
        return self.post(f"users/{user_id}/event", data=data)

    def mark_all_read(self, user_id: str) -> StreamResponse:
        return self.post("channels/read", data={"user": {"id": user_id}})
