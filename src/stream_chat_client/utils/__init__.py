"""Utilitários compartilhados: erros, ordenação e datas."""

from .dates import json_default, to_rfc3339
from .errors import StreamAPIException, StreamChannelException, StreamChatError
from .sort import get_sort_fields

__all__ = [
    "StreamAPIException",
    "StreamChannelException",
    "StreamChatError",
    "get_sort_fields",
    "json_default",
    "to_rfc3339",
]
