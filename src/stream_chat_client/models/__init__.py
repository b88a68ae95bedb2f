"""Modelos de resposta e de payload."""

from .batch import BatchOperation, ChannelBatchUpdate
from .rate_limits import StreamRateLimits
from .response import StreamResponse

__all__ = [
    "BatchOperation",
    "ChannelBatchUpdate",
    "StreamRateLimits",
    "StreamResponse",
]
