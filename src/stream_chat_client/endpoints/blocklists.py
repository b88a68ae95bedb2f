"""Blocklists de palavras."""

from __future__ import annotations

from typing import TYPE_CHECKING

from stream_chat_client.connectors.stream_http import StreamHttpClient

if TYPE_CHECKING:
    from stream_chat_client.models import StreamResponse


class BlocklistEndpoints(StreamHttpClient):
    def list_blocklists(self) -> StreamResponse:
        return self.get("blocklists")

    def get_blocklist(self, name: str) -> StreamResponse:
        return self.get(f"blocklists/{name}")

    def create_blocklist(self, name: str, words: list[str]) -> StreamResponse:
        return self.post("blocklists", data={"name": name, "words": words})

    def update_blocklist(self, name: str, words: list[str]) -> StreamResponse:
        """Substitui a lista de palavras (não faz merge)."""
        return self.put(f"blocklists/{name}", data={"words": words})

    def delete_blocklist(self, name: str) -> StreamResponse:
        return self.delete(f"blocklists/{name}")
