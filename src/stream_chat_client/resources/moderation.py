"""Moderação v2 (api/v2/moderation).

Flags, mutes, fila de revisão, configs e checagens de conteúdo.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from stream_chat_client.utils.sort import get_sort_fields

if TYPE_CHECKING:
    from stream_chat_client.models import StreamResponse
    from stream_chat_client.protocols import ChatApiProtocol
    from stream_chat_client.utils.sort import SortInput

MODERATION_ENTITY_TYPES: dict[str, str] = {
    "user": "stream:user",
    "message": "stream:chat:v1:message",
    "userprofile": "stream:v1:user_profile",
}

USER_PROFILE_CONFIG_KEY = "user_profile:default"

_BASE_PATH = "api/v2/moderation"


class Moderation:
    def __init__(self, client: ChatApiProtocol) -> None:
        self.client = client

    # Flags

    def flag_user(self, flagged_user_id: str, reason: str, **options: Any) -> StreamResponse:
        return self.flag(MODERATION_ENTITY_TYPES["user"], flagged_user_id, reason, **options)

    def flag_message(self, message_id: str, reason: str, **options: Any) -> StreamResponse:
        return self.flag(MODERATION_ENTITY_TYPES["message"], message_id, reason, **options)

    def flag(
        self,
        entity_type: str,
        entity_id: str,
        reason: str,
        entity_creator_id: str = "",
        **options: Any,
    ) -> StreamResponse:
        """Sinaliza qualquer entidade para revisão.

        Args:
            entity_type: Tipo da entidade (ver MODERATION_ENTITY_TYPES)
            entity_id: Id da entidade
            reason: Motivo informado pelo moderador
            entity_creator_id: Autor da entidade, quando conhecido
        """
        data = {
            "entity_type": entity_type,
            "entity_id": entity_id,
            "entity_creator_id": entity_creator_id,
            "reason": reason,
            **options,
        }
        return self.client.post(f"{_BASE_PATH}/flag", data=data)

    # Mutes

    def mute_user(self, target_id: str, **options: Any) -> StreamResponse:
        return self.client.post(f"{_BASE_PATH}/mute", data={"target_ids": [target_id], **options})

    def unmute_user(self, target_id: str, **options: Any) -> StreamResponse:
        return self.client.post(
            f"{_BASE_PATH}/unmute",
            data={"target_ids": [target_id], **options},
        )

    # Revisão

    def get_user_moderation_report(self, user_id: str, **options: Any) -> StreamResponse:
        return self.client.get(f"{_BASE_PATH}/user_report", params={"user_id": user_id, **options})

    def query_review_queue(
        self,
        filter_conditions: dict[str, Any] | None = None,
        sort: SortInput = None,
        **options: Any,
    ) -> StreamResponse:
        data = {
            "filter": filter_conditions or {},
            "sort": get_sort_fields(sort),
            **options,
        }
        return self.client.post(f"{_BASE_PATH}/review_queue", data=data)

    def submit_action(self, action_type: str, item_id: str, **options: Any) -> StreamResponse:
        data = {"action_type": action_type, "item_id": item_id, **options}
        return self.client.post(f"{_BASE_PATH}/submit_action", data=data)

    # Configs

    def upsert_config(self, config: dict[str, Any]) -> StreamResponse:
        return self.client.post(f"{_BASE_PATH}/config", data=config)

    def get_config(self, key: str, data: dict[str, Any] | None = None) -> StreamResponse:
        return self.client.get(f"{_BASE_PATH}/config/{key}", params=data)

    def delete_config(self, key: str, data: dict[str, Any] | None = None) -> StreamResponse:
        return self.client.delete(f"{_BASE_PATH}/config/{key}", params=data)

    def query_configs(
        self,
        filter_conditions: dict[str, Any],
        sort: SortInput = None,
        **options: Any,
    ) -> StreamResponse:
        data = {"filter": filter_conditions, "sort": get_sort_fields(sort), **options}
        return self.client.post(f"{_BASE_PATH}/configs", data=data)

    # Checagens

    def check(
        self,
        entity_type: str,
        entity_id: str,
        moderation_payload: dict[str, Any],
        config_key: str,
        entity_creator_id: str = "",
        options: dict[str, Any] | None = None,
    ) -> StreamResponse:
        """Executa a moderação configurada em `config_key` sobre o conteúdo.

        Args:
            moderation_payload: Conteúdo a checar (texts, images, videos, custom)
            options: Flags da checagem (ex: force_sync, test_mode)
        """
        data = {
            "entity_type": entity_type,
            "entity_id": entity_id,
            "entity_creator_id": entity_creator_id,
            "moderation_payload": moderation_payload,
            "config_key": config_key,
            "options": options or {},
        }
        return self.client.post(f"{_BASE_PATH}/check", data=data)

    def check_user_profile(self, user_id: str, profile: dict[str, Any]) -> StreamResponse:
        """Checa username e imagem de perfil sem persistir o resultado.

        Raises:
            ValueError: Se o perfil não tiver username nem image
        """
        username = profile.get("username")
        image = profile.get("image")
        if not username and not image:
            raise ValueError("profile precisa de username ou image")

        moderation_payload: dict[str, Any] = {}
        if username:
            moderation_payload["texts"] = [username]
        if image:
            moderation_payload["images"] = [image]

        return self.check(
            MODERATION_ENTITY_TYPES["userprofile"],
            user_id,
            moderation_payload,
            USER_PROFILE_CONFIG_KEY,
            entity_creator_id=user_id,
            options={"force_sync": True, "test_mode": True},
        )

    def add_custom_flags(
        self,
        entity_type: str,
        entity_id: str,
        moderation_payload: dict[str, Any],
        flags: list[dict[str, Any]],
        entity_creator_id: str = "",
    ) -> StreamResponse:
        """Registra flags de um moderador externo."""
        data = {
            "entity_type": entity_type,
            "entity_id": entity_id,
            "entity_creator_id": entity_creator_id,
            "moderation_payload": moderation_payload,
            "flags": flags,
        }
        return self.client.post(f"{_BASE_PATH}/custom_check", data=data)

    def add_custom_message_flags(
        self,
        message_id: str,
        flags: list[dict[str, Any]],
    ) -> StreamResponse:
        return self.add_custom_flags(MODERATION_ENTITY_TYPES["message"], message_id, {}, flags)
