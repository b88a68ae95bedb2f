"""Configuração do SDK: settings e logging."""

from stream_chat_client.config.settings import StreamChatSettings

__all__ = [
    "StreamChatSettings",
]
