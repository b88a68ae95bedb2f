"""Endpoints da API agrupados por área (mixins de Client)."""

from .app import AppEndpoints
from .blocklists import BlocklistEndpoints
from .campaigns import CampaignEndpoints
from .channels import ChannelEndpoints
from .commands import CommandEndpoints
from .devices import DeviceEndpoints
from .messages import MessageEndpoints
from .moderation import ModerationEndpoints
from .permissions import PermissionEndpoints
from .tasks import TaskEndpoints
from .users import UserEndpoints

__all__ = [
    "AppEndpoints",
    "BlocklistEndpoints",
    "CampaignEndpoints",
    "ChannelEndpoints",
    "CommandEndpoints",
    "DeviceEndpoints",
    "MessageEndpoints",
    "ModerationEndpoints",
    "PermissionEndpoints",
    "TaskEndpoints",
    "UserEndpoints",
]
