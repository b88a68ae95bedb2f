"""Recurso Campaign: envio de mensagens em massa."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from stream_chat_client.utils.errors import StreamChannelException

if TYPE_CHECKING:
    from datetime import datetime

    from stream_chat_client.models import StreamResponse
    from stream_chat_client.protocols import CampaignApiProtocol

logger: logging.Logger = logging.getLogger(__name__)


class Campaign:
    """Campanha identificada por `campaign_id`.

    Sem id na construção, o id gerado pelo backend é adotado após
    `create()` bem-sucedido.
    """

    def __init__(
        self,
        client: CampaignApiProtocol,
        campaign_id: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> None:
        self.client = client
        self.campaign_id = campaign_id
        self.data = data

    def _require_id(self) -> str:
        if self.campaign_id is None:
            raise StreamChannelException("campanha sem id: chame create() antes")
        return self.campaign_id

    def create(
        self,
        campaign_id: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> StreamResponse:
        if campaign_id:
            self.campaign_id = campaign_id
        if data:
            self.data = {**(self.data or {}), **data}

        state = self.client.create_campaign(campaign_id=self.campaign_id, data=self.data)
        if self.campaign_id is None and 200 <= state.status_code < 300 and state.get("campaign"):
            self.campaign_id = state["campaign"]["id"]
            logger.debug("stream_campaign_id_assigned", extra={"campaign_id": self.campaign_id})
        return state

    def get(self) -> StreamResponse:
        return self.client.get_campaign(self._require_id())

    def update(self, data: dict[str, Any]) -> StreamResponse:
        return self.client.update_campaign(self._require_id(), data)

    def delete(self, **options: Any) -> StreamResponse:
        return self.client.delete_campaign(self._require_id(), **options)

    def start(
        self,
        scheduled_for: datetime | str | None = None,
        stop_at: datetime | str | None = None,
    ) -> StreamResponse:
        return self.client.start_campaign(
            self._require_id(),
            scheduled_for=scheduled_for,
            stop_at=stop_at,
        )

    def stop(self) -> StreamResponse:
        return self.client.stop_campaign(self._require_id())
