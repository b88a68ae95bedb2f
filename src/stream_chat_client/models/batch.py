"""Payload de atualização em lote de canais."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

BatchOperation = Literal[
    "addMembers",
    "removeMembers",
    "invites",
    "addModerators",
    "demoteModerators",
    "assignRoles",
    "hide",
    "show",
    "archive",
    "unarchive",
    "updateData",
    "addFilterTags",
    "removeFilterTags",
]


class ChannelBatchUpdate(BaseModel):
    """Operação aplicada a todos os canais que casam com `filter`.

    O filtro não é validado localmente: um filtro vazio é enviado e
    rejeitado pelo backend.
    """

    model_config = ConfigDict(frozen=True)

    operation: BatchOperation
    filter: dict[str, Any]
    members: list[str] | list[dict[str, Any]] | None = None
    data: dict[str, Any] | None = None
    filter_tags_update: list[str] | None = None

    def to_payload(self) -> dict[str, Any]:
        """Serializa para o corpo de PUT channels/batch (sem campos nulos)."""
        return self.model_dump(exclude_none=True)
