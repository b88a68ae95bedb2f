"""Contratos do cliente usados pelos recursos (Channel, Thread, ...).

Os recursos dependem destes protocolos, não da classe Client concreta.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from stream_chat_client.connectors.uploads import UploadSource
    from stream_chat_client.models import StreamResponse


class ChatApiProtocol(Protocol):
    """Verbos HTTP autenticados da API."""

    def get(self, relative_url: str, *, params: dict[str, Any] | None = None) -> StreamResponse: ...

    def post(
        self,
        relative_url: str,
        *,
        params: dict[str, Any] | None = None,
        data: Any = None,
    ) -> StreamResponse: ...

    def put(
        self,
        relative_url: str,
        *,
        params: dict[str, Any] | None = None,
        data: Any = None,
    ) -> StreamResponse: ...

    def patch(
        self,
        relative_url: str,
        *,
        params: dict[str, Any] | None = None,
        data: Any = None,
    ) -> StreamResponse: ...

    def delete(
        self,
        relative_url: str,
        *,
        params: dict[str, Any] | None = None,
    ) -> StreamResponse: ...

    def send_file(
        self,
        relative_url: str,
        file: UploadSource,
        user: dict[str, Any],
        content_type: str | None = None,
    ) -> StreamResponse: ...


class ChannelApiProtocol(ChatApiProtocol, Protocol):
    """Verbos mais as operações de banimento usadas por Channel."""

    def ban_user(self, target_id: str, **options: Any) -> StreamResponse: ...

    def unban_user(self, target_id: str, **options: Any) -> StreamResponse: ...


class CampaignApiProtocol(Protocol):
    """Operações de campanha usadas por Campaign."""

    def create_campaign(
        self,
        campaign_id: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> StreamResponse: ...

    def get_campaign(self, campaign_id: str) -> StreamResponse: ...

    def update_campaign(self, campaign_id: str, data: dict[str, Any]) -> StreamResponse: ...

    def delete_campaign(self, campaign_id: str, **options: Any) -> StreamResponse: ...

    def start_campaign(
        self,
        campaign_id: str,
        scheduled_for: Any = None,
        stop_at: Any = None,
    ) -> StreamResponse: ...

    def stop_campaign(self, campaign_id: str) -> StreamResponse: ...


class BatchUpdateApiProtocol(Protocol):
    """Atualização de canais em lote usada por ChannelBatchUpdater."""

    def update_channels_batch(self, options: dict[str, Any]) -> StreamResponse: ...
