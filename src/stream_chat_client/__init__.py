"""SDK server-side para a API REST do Stream Chat."""

from stream_chat_client.client import Client
from stream_chat_client.config.logging import configure_logging
from stream_chat_client.config.settings import StreamChatSettings
from stream_chat_client.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_BLOCKLIST,
    DEFAULT_TIMEOUT_SECONDS,
    HARD_DELETE,
    SOFT_DELETE,
)
from stream_chat_client.models import StreamRateLimits, StreamResponse
from stream_chat_client.resources import (
    Campaign,
    Channel,
    ChannelBatchUpdater,
    Moderation,
    Thread,
)
from stream_chat_client.utils import (
    StreamAPIException,
    StreamChannelException,
    StreamChatError,
    get_sort_fields,
)
from stream_chat_client.version import VERSION

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_BLOCKLIST",
    "DEFAULT_TIMEOUT_SECONDS",
    "HARD_DELETE",
    "SOFT_DELETE",
    "VERSION",
    "Campaign",
    "Channel",
    "ChannelBatchUpdater",
    "Client",
    "Moderation",
    "StreamAPIException",
    "StreamChannelException",
    "StreamChatError",
    "StreamChatSettings",
    "StreamRateLimits",
    "StreamResponse",
    "Thread",
    "configure_logging",
    "get_sort_fields",
]
