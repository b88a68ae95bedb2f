"""Cliente Stream Chat (server-side).

Reúne os endpoints da API e expõe factories dos recursos.

Exemplo:
    >>> client = Client.from_env()
    >>> channel = client.channel("messaging", "geral")
    >>> channel.send_message({"text": "oi"}, "bob")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from stream_chat_client.config.logging import configure_logging
from stream_chat_client.config.settings import _load_from_env
from stream_chat_client.connectors.http_base import HttpClientConfig
from stream_chat_client.endpoints import (
    AppEndpoints,
    BlocklistEndpoints,
    CampaignEndpoints,
    ChannelEndpoints,
    CommandEndpoints,
    DeviceEndpoints,
    MessageEndpoints,
    ModerationEndpoints,
    PermissionEndpoints,
    TaskEndpoints,
    UserEndpoints,
)
from stream_chat_client.resources import (
    Campaign,
    Channel,
    ChannelBatchUpdater,
    Moderation,
    Thread,
)

if TYPE_CHECKING:
    import httpx

    from stream_chat_client.config.settings import StreamChatSettings

logger: logging.Logger = logging.getLogger(__name__)


class Client(
    AppEndpoints,
    UserEndpoints,
    MessageEndpoints,
    ModerationEndpoints,
    ChannelEndpoints,
    DeviceEndpoints,
    BlocklistEndpoints,
    CommandEndpoints,
    PermissionEndpoints,
    TaskEndpoints,
    CampaignEndpoints,
):
    """Cliente síncrono da API Stream Chat.

    Args:
        api_key: API key da aplicação
        api_secret: Secret da aplicação
        timeout: Timeout em segundos (padrão 6.0)
        base_url: URL base da API
        http_client: httpx.Client a usar (útil para testes)
        http_config: Configuração do pool quando http_client não é informado
    """

    @classmethod
    def from_settings(
        cls,
        settings: StreamChatSettings,
        *,
        http_client: httpx.Client | None = None,
        configure_logs: bool = False,
    ) -> Client:
        """Cria cliente a partir de StreamChatSettings.

        Args:
            settings: Credenciais e parâmetros de transporte
            http_client: httpx.Client a usar no lugar do pool padrão
            configure_logs: Se True, instala o handler JSON do SDK no
                nível `settings.log_level`

        Raises:
            ValueError: Se as settings forem inválidas
        """
        errors = settings.validate()
        if errors:
            logger.error("stream_settings_invalid", extra={"errors": errors})
            raise ValueError("; ".join(errors))

        if configure_logs:
            configure_logging(level=settings.log_level)

        return cls(
            settings.api_key,
            settings.api_secret,
            base_url=settings.base_url,
            http_client=http_client,
            http_config=HttpClientConfig.from_settings(settings),
        )

    @classmethod
    def from_env(
        cls,
        *,
        http_client: httpx.Client | None = None,
        configure_logs: bool = False,
    ) -> Client:
        """Cria cliente a partir de STREAM_KEY, STREAM_SECRET e afins."""
        return cls.from_settings(
            _load_from_env(),
            http_client=http_client,
            configure_logs=configure_logs,
        )

    # Factories de recursos

    def channel(
        self,
        channel_type: str,
        channel_id: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> Channel:
        return Channel(self, channel_type, channel_id, data)

    def thread(self) -> Thread:
        return Thread(self)

    def campaign(
        self,
        campaign_id: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> Campaign:
        return Campaign(self, campaign_id, data)

    def moderation(self) -> Moderation:
        return Moderation(self)

    def channel_batch_updater(self) -> ChannelBatchUpdater:
        return ChannelBatchUpdater(self)

    def __repr__(self) -> str:
        return f"Client(api_key={self.api_key!r}, base_url={self.base_url!r})"
