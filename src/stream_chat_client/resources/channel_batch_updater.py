"""Operações em lote sobre todos os canais que casam com um filtro.

Cada método retorna a resposta com `task_id`; acompanhe com get_task.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from stream_chat_client.models import ChannelBatchUpdate

if TYPE_CHECKING:
    from stream_chat_client.models import BatchOperation, StreamResponse
    from stream_chat_client.protocols import BatchUpdateApiProtocol

Filter = dict[str, Any]
Members = list[str] | list[dict[str, Any]]


class ChannelBatchUpdater:
    def __init__(self, client: BatchUpdateApiProtocol) -> None:
        self.client = client

    def _send(
        self,
        operation: BatchOperation,
        filter_conditions: Filter,
        **fields: Any,
    ) -> StreamResponse:
        update = ChannelBatchUpdate(operation=operation, filter=filter_conditions, **fields)
        return self.client.update_channels_batch(update.to_payload())

    def add_members(self, filter_conditions: Filter, members: Members) -> StreamResponse:
        return self._send("addMembers", filter_conditions, members=members)

    def remove_members(self, filter_conditions: Filter, members: Members) -> StreamResponse:
        return self._send("removeMembers", filter_conditions, members=members)

    def invite_members(self, filter_conditions: Filter, members: Members) -> StreamResponse:
        return self._send("invites", filter_conditions, members=members)

    def add_moderators(self, filter_conditions: Filter, members: Members) -> StreamResponse:
        return self._send("addModerators", filter_conditions, members=members)

    def demote_moderators(self, filter_conditions: Filter, members: Members) -> StreamResponse:
        return self._send("demoteModerators", filter_conditions, members=members)

    def assign_roles(
        self,
        filter_conditions: Filter,
        members: list[dict[str, Any]],
    ) -> StreamResponse:
        """Atribui papéis; cada membro tem `user_id` e `channel_role`."""
        return self._send("assignRoles", filter_conditions, members=members)

    def hide(self, filter_conditions: Filter) -> StreamResponse:
        return self._send("hide", filter_conditions)

    def show(self, filter_conditions: Filter) -> StreamResponse:
        return self._send("show", filter_conditions)

    def archive(self, filter_conditions: Filter) -> StreamResponse:
        return self._send("archive", filter_conditions)

    def unarchive(self, filter_conditions: Filter) -> StreamResponse:
        return self._send("unarchive", filter_conditions)

    def update_data(self, filter_conditions: Filter, data: dict[str, Any]) -> StreamResponse:
        return self._send("updateData", filter_conditions, data=data)

    def add_filter_tags(self, filter_conditions: Filter, tags: list[str]) -> StreamResponse:
        return self._send("addFilterTags", filter_conditions, filter_tags_update=tags)

    def remove_filter_tags(self, filter_conditions: Filter, tags: list[str]) -> StreamResponse:
        return self._send("removeFilterTags", filter_conditions, filter_tags_update=tags)
