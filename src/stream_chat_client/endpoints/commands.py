"""Comandos customizados (slash commands)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from stream_chat_client.connectors.stream_http import StreamHttpClient

if TYPE_CHECKING:
    from stream_chat_client.models import StreamResponse


class CommandEndpoints(StreamHttpClient):
    def create_command(self, command: dict[str, Any]) -> StreamResponse:
        return self.post("commands", data=command)

    def get_command(self, name: str) -> StreamResponse:
        return self.get(f"commands/{name}")

    def update_command(self, name: str, command: dict[str, Any]) -> StreamResponse:
        return self.put(f"commands/{name}", data=command)

    def delete_command(self, name: str) -> StreamResponse:
        return self.delete(f"commands/{name}")

    def list_commands(self) -> StreamResponse:
        return self.get("commands")
