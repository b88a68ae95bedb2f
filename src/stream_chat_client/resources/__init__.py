"""Recursos que compõem payloads e delegam ao cliente."""

from .campaign import Campaign
from .channel import Channel
from .channel_batch_updater import ChannelBatchUpdater
from .moderation import MODERATION_ENTITY_TYPES, Moderation
from .thread import Thread

__all__ = [
    "MODERATION_ENTITY_TYPES",
    "Campaign",
    "Channel",
    "ChannelBatchUpdater",
    "Moderation",
    "Thread",
]
