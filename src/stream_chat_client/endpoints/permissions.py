"""Permissões e papéis customizados."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from stream_chat_client.connectors.stream_http import StreamHttpClient

if TYPE_CHECKING:
    from stream_chat_client.models import StreamResponse


class PermissionEndpoints(StreamHttpClient):
    def list_permissions(self) -> StreamResponse:
        return self.get("permissions")

    def get_permission(self, permission_id: str) -> StreamResponse:
        return self.get(f"permissions/{permission_id}")

    def create_permission(self, permission: dict[str, Any]) -> StreamResponse:
        return self.post("permissions", data=permission)

    def update_permission(self, permission_id: str, permission: dict[str, Any]) -> StreamResponse:
        return self.put(f"permissions/{permission_id}", data=permission)

    def delete_permission(self, permission_id: str) -> StreamResponse:
        return self.delete(f"permissions/{permission_id}")

    # Papéis

    def create_role(self, name: str) -> StreamResponse:
        return self.post("roles", data={"name": name})

    def delete_role(self, name: str) -> StreamResponse:
        return self.delete(f"roles/{name}")

    def list_roles(self) -> StreamResponse:
        return self.get("roles")
