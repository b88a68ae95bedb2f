"""Protocolos do cliente consumidos pelos recursos."""

from .chat_api import (
    BatchUpdateApiProtocol,
    CampaignApiProtocol,
    ChannelApiProtocol,
    ChatApiProtocol,
)

__all__ = [
    "BatchUpdateApiProtocol",
    "CampaignApiProtocol",
    "ChannelApiProtocol",
    "ChatApiProtocol",
]
