"""Moderação v1: flags, banimentos e mutes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from stream_chat_client.connectors.stream_http import StreamHttpClient, dumps_payload
from stream_chat_client.utils.sort import get_sort_fields

if TYPE_CHECKING:
    from stream_chat_client.models import StreamResponse
    from stream_chat_client.utils.sort import SortInput


class ModerationEndpoints(StreamHttpClient):
    # Flags

    def flag_message(self, message_id: str, **options: Any) -> StreamResponse:
        return self.post("moderation/flag", data={"target_message_id": message_id, **options})

    def unflag_message(self, message_id: str, **options: Any) -> StreamResponse:
        return self.post("moderation/unflag", data={"target_message_id": message_id, **options})

    def flag_user(self, target_id: str, **options: Any) -> StreamResponse:
        return self.post("moderation/flag", data={"target_user_id": target_id, **options})

    def unflag_user(self, target_id: str, **options: Any) -> StreamResponse:
        return self.post("moderation/unflag", data={"target_user_id": target_id, **options})

    def query_message_flags(
        self,
        filter_conditions: dict[str, Any],
        **options: Any,
    ) -> StreamResponse:
        payload = {"filter_conditions": filter_conditions, **options}
        return self.get("moderation/flags/message", params={"payload": dumps_payload(payload)})

    # Banimentos

    def ban_user(self, target_id: str, **options: Any) -> StreamResponse:
        """Bane usuário globalmente ou num canal (`type` e `id` nas opções)."""
        return self.post("moderation/ban", data={"target_user_id": target_id, **options})

    def unban_user(self, target_id: str, **options: Any) -> StreamResponse:
        return self.delete("moderation/ban", params={"target_user_id": target_id, **options})

    def shadow_ban(self, target_id: str, **options: Any) -> StreamResponse:
        return self.ban_user(target_id, shadow=True, **options)

    def remove_shadow_ban(self, target_id: str, **options: Any) -> StreamResponse:
        return self.unban_user(target_id, shadow=True, **options)

    def query_banned_users(
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
        return self.get("query_banned_users", params={"payload": dumps_payload(payload)})

    # Mutes

    def mute_user(self, target_id: str, user_id: str, **options: Any) -> StreamResponse:
        data = {"target_id": target_id, "user_id": user_id, **options}
        return self.post("moderation/mute", data=data)

    def unmute_user(self, target_id: str, user_id: str) -> StreamResponse:
        return self.post("moderation/unmute", data={"target_id": target_id, "user_id": user_id})
