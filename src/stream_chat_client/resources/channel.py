"""Recurso Channel: operações sobre um canal específico.

O canal é identificado por (channel_type, channel_id). O id pode ser
omitido na construção; nesse caso o backend gera um id no primeiro
create/query e o recurso passa a usá-lo.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from stream_chat_client.connectors.stream_http import dumps_payload
from stream_chat_client.utils.errors import StreamChannelException
from stream_chat_client.utils.sort import get_sort_fields

if TYPE_CHECKING:
    from stream_chat_client.connectors.uploads import UploadSource
    from stream_chat_client.models import StreamResponse
    from stream_chat_client.protocols import ChannelApiProtocol
    from stream_chat_client.utils.sort import SortInput

logger: logging.Logger = logging.getLogger(__name__)


def _add_user_id(payload: dict[str, Any], user_id: str) -> dict[str, Any]:
    return {**payload, "user": {"id": user_id}}


class Channel:
    """Canal de chat.

    Args:
        client: Cliente que executa as requisições
        channel_type: Tipo do canal (ex: "messaging")
        channel_id: Id do canal; None para id gerado pelo backend
        custom_data: Dados enviados em create/query (ex: members, name)
    """

    def __init__(
        self,
        client: ChannelApiProtocol,
        channel_type: str,
        channel_id: str | None = None,
        custom_data: dict[str, Any] | None = None,
    ) -> None:
        self.client = client
        self.channel_type = channel_type
        self.id = channel_id
        self.custom_data: dict[str, Any] = dict(custom_data or {})

    @property
    def cid(self) -> str:
        return f"{self.channel_type}:{self.id}"

    @property
    def url(self) -> str:
        """Caminho relativo do canal.

        Raises:
            StreamChannelException: Se o canal ainda não tiver id
        """
        return f"channels/{self.channel_type}/{self._require_id()}"

    def _require_id(self) -> str:
        if not self.id:
            raise StreamChannelException("canal sem id: chame create() ou query() antes")
        return self.id

    # Mensagens e eventos

    def send_message(self, message: dict[str, Any], user_id: str, **options: Any) -> StreamResponse:
        """Envia mensagem no canal em nome de `user_id`.

        Args:
            message: Corpo da mensagem (text, attachments, parent_id...)
            user_id: Autor da mensagem
            **options: skip_push, skip_enrich_url, pending...
        """
        payload = {"message": _add_user_id(message, user_id), **options}
        return self.client.post(f"{self.url}/message", data=payload)

    def send_event(self, event: dict[str, Any], user_id: str) -> StreamResponse:
        return self.client.post(f"{self.url}/event", data={"event": _add_user_id(event, user_id)})

    def send_reaction(
        self,
        message_id: str,
        reaction: dict[str, Any],
        user_id: str,
        **options: Any,
    ) -> StreamResponse:
        payload = {"reaction": _add_user_id(reaction, user_id), **options}
        return self.client.post(f"messages/{message_id}/reaction", data=payload)

    def delete_reaction(self, message_id: str, reaction_type: str, user_id: str) -> StreamResponse:
        return self.client.delete(
            f"messages/{message_id}/reaction/{reaction_type}",
            params={"user_id": user_id},
        )

    def get_replies(self, parent_id: str, **options: Any) -> StreamResponse:
        return self.client.get(f"messages/{parent_id}/replies", params=options)

    def get_reactions(self, message_id: str, **options: Any) -> StreamResponse:
        return self.client.get(f"messages/{message_id}/reactions", params=options)

    def get_messages(self, message_ids: list[str]) -> StreamResponse:
        return self.client.get(f"{self.url}/messages", params={"ids": ",".join(message_ids)})

    def mark_read(self, user_id: str, **options: Any) -> StreamResponse:
        payload = _add_user_id(options, user_id)
        return self.client.post(f"{self.url}/read", data=payload)

    # Ciclo de vida

    def create(self, user_id: str) -> StreamResponse:
        """Cria o canal (idempotente) com `user_id` como criador."""
        self.custom_data["created_by"] = {"id": user_id}
        return self.query(watch=False, state=False, presence=False)

    def query(self, **options: Any) -> StreamResponse:
        """Obtém (ou cria) o canal e seu estado.

        Se o canal foi construído sem id, adota o id devolvido pelo
        backend.
        """
        payload = {"state": True, "data": self.custom_data, **options}
        url = f"channels/{self.channel_type}"
        if self.id:
            url = f"{url}/{self.id}"
        url = f"{url}/query"

        state = self.client.post(url, data=payload)
        if not self.id:
            self.id = state["channel"]["id"]
            logger.debug("stream_channel_id_assigned", extra={"cid": self.cid})
        return state

    def query_members(
        self,
        filter_conditions: dict[str, Any] | None = None,
        sort: SortInput = None,
        **options: Any,
    ) -> StreamResponse:
        """Lista membros do canal que casam com o filtro.

        Canais sem id (distintos) são identificados pelos membros em
        `custom_data`.
        """
        payload: dict[str, Any] = {
            "type": self.channel_type,
            "filter_conditions": filter_conditions or {},
            "sort": get_sort_fields(sort),
            **options,
        }
        if self.id:
            payload["id"] = self.id
        elif self.custom_data.get("members"):
            payload["members"] = self.custom_data["members"]
        return self.client.get("members", params={"payload": dumps_payload(payload)})

    def update(
        self,
        channel_data: dict[str, Any] | None,
        update_message: dict[str, Any] | None = None,
        **options: Any,
    ) -> StreamResponse:
        """Substitui os dados do canal (campos omitidos são removidos)."""
        payload = {"data": channel_data, "message": update_message, **options}
        return self.client.post(self.url, data=payload)

    def update_partial(
        self,
        to_set: dict[str, Any] | None = None,
        to_unset: list[str] | None = None,
    ) -> StreamResponse:
        """Atualiza apenas os campos informados.

        Raises:
            StreamChannelException: Se to_set e to_unset forem ambos None
        """
        if to_set is None and to_unset is None:
            raise StreamChannelException("informe to_set ou to_unset")
        return self.client.patch(self.url, data={"set": to_set or {}, "unset": to_unset or []})

    def delete(self) -> StreamResponse:
        return self.client.delete(self.url)

    def truncate(self, **options: Any) -> StreamResponse:
        """Remove todas as mensagens do canal."""
        return self.client.post(f"{self.url}/truncate", data=options)

    # Membros

    def add_members(self, user_ids: list[Any], **options: Any) -> StreamResponse:
        """Adiciona membros (ids ou objetos com `user_id` e `channel_role`)."""
        return self.client.post(self.url, data={"add_members": user_ids, **options})

    def remove_members(self, user_ids: list[str]) -> StreamResponse:
        return self.client.post(self.url, data={"remove_members": user_ids})

    def invite_members(self, user_ids: list[str], **options: Any) -> StreamResponse:
        return self.client.post(self.url, data={"invites": user_ids, **options})

    def accept_invite(self, user_id: str, **options: Any) -> StreamResponse:
        payload = {"accept_invite": True, "user_id": user_id, **options}
        return self.client.post(self.url, data=payload)

    def reject_invite(self, user_id: str, **options: Any) -> StreamResponse:
        payload = {"reject_invite": True, "user_id": user_id, **options}
        return self.client.post(self.url, data=payload)

    def add_moderators(self, user_ids: list[str]) -> StreamResponse:
        return self.client.post(self.url, data={"add_moderators": user_ids})

    def demote_moderators(self, user_ids: list[str]) -> StreamResponse:
        return self.client.post(self.url, data={"demote_moderators": user_ids})

    def assign_roles(
        self,
        members: list[dict[str, Any]],
        message: dict[str, Any] | None = None,
    ) -> StreamResponse:
        """Atribui `channel_role` a membros existentes."""
        return self.client.post(self.url, data={"assign_roles": members, "message": message})

    def update_member_partial(
        self,
        user_id: str,
        to_set: dict[str, Any] | None = None,
        to_unset: list[str] | None = None,
    ) -> StreamResponse:
        payload = {"set": to_set or {}, "unset": to_unset or []}
        return self.client.patch(f"{self.url}/member/{quote(user_id, safe='')}", data=payload)

    def pin(self, user_id: str) -> StreamResponse:
        return self.update_member_partial(user_id, to_set={"pinned": True})

    def unpin(self, user_id: str) -> StreamResponse:
        return self.update_member_partial(user_id, to_set={"pinned": False})

    def archive(self, user_id: str) -> StreamResponse:
        return self.update_member_partial(user_id, to_set={"archived": True})

    def unarchive(self, user_id: str) -> StreamResponse:
        return self.update_member_partial(user_id, to_set={"archived": False})

    def add_filter_tags(self, tags: list[str]) -> StreamResponse:
        return self.client.post(self.url, data={"add_filter_tags": tags})

    def remove_filter_tags(self, tags: list[str]) -> StreamResponse:
        return self.client.post(self.url, data={"remove_filter_tags": tags})

    # Moderação no canal

    def ban_user(self, user_id: str, **options: Any) -> StreamResponse:
        channel_id = self._require_id()
        return self.client.ban_user(user_id, type=self.channel_type, id=channel_id, **options)

    def unban_user(self, user_id: str) -> StreamResponse:
        return self.client.unban_user(user_id, type=self.channel_type, id=self._require_id())

    def hide(self, user_id: str) -> StreamResponse:
        return self.client.post(f"{self.url}/hide", data={"user_id": user_id})

    def show(self, user_id: str) -> StreamResponse:
        return self.client.post(f"{self.url}/show", data={"user_id": user_id})

    def mute(self, user_id: str, expiration: int | None = None) -> StreamResponse:
        """Silencia o canal para `user_id` (expiration em milissegundos)."""
        self._require_id()
        data: dict[str, Any] = {"channel_cid": self.cid, "user_id": user_id}
        if expiration is not None:
            data["expiration"] = expiration
        return self.client.post("moderation/mute/channel", data=data)

    def unmute(self, user_id: str) -> StreamResponse:
        self._require_id()
        return self.client.post(
            "moderation/unmute/channel",
            data={"channel_cid": self.cid, "user_id": user_id},
        )

    # Arquivos

    def send_file(
        self,
        file: UploadSource,
        user: dict[str, Any],
        content_type: str | None = None,
    ) -> StreamResponse:
        return self.client.send_file(f"{self.url}/file", file, user, content_type)

    def send_image(
        self,
        file: UploadSource,
        user: dict[str, Any],
        content_type: str | None = None,
    ) -> StreamResponse:
        return self.client.send_file(f"{self.url}/image", file, user, content_type)

    def delete_file(self, file_url: str) -> StreamResponse:
        return self.client.delete(f"{self.url}/file", params={"url": file_url})

    def delete_image(self, image_url: str) -> StreamResponse:
        return self.client.delete(f"{self.url}/image", params={"url": image_url})

    # Rascunhos

    def create_draft(self, message: dict[str, Any], user_id: str) -> StreamResponse:
        return self.client.post(
            f"{self.url}/draft",
            data={"message": _add_user_id(message, user_id)},
        )

    def get_draft(self, user_id: str, parent_id: str | None = None) -> StreamResponse:
        params: dict[str, Any] = {"user_id": user_id}
        if parent_id:
            params["parent_id"] = parent_id
        return self.client.get(f"{self.url}/draft", params=params)

    def delete_draft(self, user_id: str, parent_id: str | None = None) -> StreamResponse:
        params: dict[str, Any] = {"user_id": user_id}
        if parent_id:
            params["parent_id"] = parent_id
        return self.client.delete(f"{self.url}/draft", params=params)

    def __repr__(self) -> str:
        return f"Channel(cid={self.cid!r})"
