"""Canais e tipos de canal no nível da aplicação."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from stream_chat_client.connectors.stream_http import StreamHttpClient
from stream_chat_client.utils.sort import get_sort_fields

if TYPE_CHECKING:
    from stream_chat_client.models import StreamResponse
    from stream_chat_client.utils.sort import SortInput

_QUERY_CHANNELS_DEFAULTS: dict[str, Any] = {"state": True, "watch": False, "presence": False}


class ChannelEndpoints(StreamHttpClient):
    def query_channels(
        self,
        filter_conditions: dict[str, Any],
        sort: SortInput = None,
        **options: Any,
    ) -> StreamResponse:
        """Lista canais que casam com o filtro.

        Por padrão retorna estado sem watch e sem presence.
        """
        data = {
            **_QUERY_CHANNELS_DEFAULTS,
            "filter_conditions": filter_conditions,
            "sort": get_sort_fields(sort),
            **options,
        }
        return self.post("channels", data=data)

    def delete_channels(self, cids: list[str], hard_delete: bool = False) -> StreamResponse:
        """Remove canais de forma assíncrona; retorna `task_id`."""
        return self.post("channels/delete", data={"cids": cids, "hard_delete": hard_delete})

    def update_channels_batch(self, options: dict[str, Any]) -> StreamResponse:
        """Aplica operação em lote; ver ChannelBatchUpdater."""
        return self.put("channels/batch", data=options)

    # Tipos de canal

    def create_channel_type(self, data: dict[str, Any]) -> StreamResponse:
        """Cria tipo de canal; sem `commands` habilita todos ("all")."""
        payload = dict(data)
        if not payload.get("commands"):
            payload["commands"] = ["all"]
        return self.post("channeltypes", data=payload)

    def get_channel_type(self, channel_type: str) -> StreamResponse:
        return self.get(f"channeltypes/{channel_type}")

    def list_channel_types(self) -> StreamResponse:
        return self.get("channeltypes")

    def update_channel_type(self, channel_type: str, **options: Any) -> StreamResponse:
        return self.put(f"channeltypes/{channel_type}", data=options)

    def delete_channel_type(self, channel_type: str) -> StreamResponse:
        return self.delete(f"channeltypes/{channel_type}")
