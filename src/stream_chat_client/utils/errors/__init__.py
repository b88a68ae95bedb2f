"""Exceções compartilhadas do SDK."""

from .exceptions import (
    StreamAPIException,
    StreamChannelException,
    StreamChatError,
)

__all__ = [
    "StreamAPIException",
    "StreamChannelException",
    "StreamChatError",
]
