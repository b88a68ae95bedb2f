"""Tarefas assíncronas, exports de canais e imports."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from stream_chat_client.connectors.stream_http import StreamHttpClient

if TYPE_CHECKING:
    from stream_chat_client.models import StreamResponse


class TaskEndpoints(StreamHttpClient):
    def get_task(self, task_id: str) -> StreamResponse:
        """Status de tarefa assíncrona (delete_users, delete_channels...)."""
        return self.get(f"tasks/{task_id}")

    # Exports

    def export_channel(self, channel: dict[str, Any], **options: Any) -> StreamResponse:
        return self.export_channels(channel, **options)

    def export_channels(self, *channels: dict[str, Any], **options: Any) -> StreamResponse:
        """Exporta canais; cada item tem `type` e `id`. Retorna `task_id`."""
        return self.post("export_channels", data={"channels": list(channels), **options})

    def get_export_channel_status(self, task_id: str) -> StreamResponse:
        return self.get(f"export_channels/{task_id}")

    # Imports

    def create_import_url(self, filename: str) -> StreamResponse:
        """URL pré-assinada para upload do arquivo de import."""
        return self.post("import_urls", data={"filename": filename})

    def create_import(self, path: str, mode: str = "upsert") -> StreamResponse:
        return self.post("imports", data={"path": path, "mode": mode})

    def get_import(self, import_id: str) -> StreamResponse:
        return self.get(f"imports/{import_id}")

    def list_imports(self, **options: Any) -> StreamResponse:
        return self.get("imports", params=options)
