"""Dispositivos de push."""

from __future__ import annotations

from typing import TYPE_CHECKING

from stream_chat_client.connectors.stream_http import StreamHttpClient

if TYPE_CHECKING:
    from stream_chat_client.models import StreamResponse


class DeviceEndpoints(StreamHttpClient):
    def add_device(self, device_id: str, push_provider: str, user_id: str) -> StreamResponse:
        data = {"id": device_id, "push_provider": push_provider, "user_id": user_id}
        return self.post("devices", data=data)

    def delete_device(self, device_id: str, user_id: str) -> StreamResponse:
        return self.delete("devices", params={"id": device_id, "user_id": user_id})

    def get_devices(self, user_id: str) -> StreamResponse:
        return self.get("devices", params={"user_id": user_id})
