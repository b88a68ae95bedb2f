"""Campanhas de mensagens."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from stream_chat_client.connectors.stream_http import StreamHttpClient
from stream_chat_client.utils.dates import to_rfc3339
from stream_chat_client.utils.sort import get_sort_fields

if TYPE_CHECKING:
    from datetime import datetime

    from stream_chat_client.models import StreamResponse
    from stream_chat_client.utils.sort import SortInput


class CampaignEndpoints(StreamHttpClient):
    def create_campaign(
        self,
        campaign_id: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> StreamResponse:
        payload: dict[str, Any] = {}
        if campaign_id is not None:
            payload["id"] = campaign_id
        payload.update(data or {})
        return self.post("campaigns", data=payload)

    def get_campaign(self, campaign_id: str) -> StreamResponse:
        return self.get(f"campaigns/{campaign_id}")

    def update_campaign(self, campaign_id: str, data: dict[str, Any]) -> StreamResponse:
        return self.put(f"campaigns/{campaign_id}", data=data)

    def delete_campaign(self, campaign_id: str, **options: Any) -> StreamResponse:
        return self.delete(f"campaigns/{campaign_id}", params=options)

    def start_campaign(
        self,
        campaign_id: str,
        scheduled_for: datetime | str | None = None,
        stop_at: datetime | str | None = None,
    ) -> StreamResponse:
        """Inicia a campanha agora ou em `scheduled_for`."""
        data: dict[str, Any] = {}
        if scheduled_for is not None:
            data["scheduled_for"] = to_rfc3339(scheduled_for)
        if stop_at is not None:
            data["stop_at"] = to_rfc3339(stop_at)
        return self.post(f"campaigns/{campaign_id}/start", data=data)

    def stop_campaign(self, campaign_id: str) -> StreamResponse:
        return self.post(f"campaigns/{campaign_id}/stop")

    def query_campaigns(
        self,
        filter_conditions: dict[str, Any],
        sort: SortInput = None,
        **options: Any,
    ) -> StreamResponse:
        data = {"filter": filter_conditions, "sort": get_sort_fields(sort), **options}
        return self.post("campaigns/query", data=data)
