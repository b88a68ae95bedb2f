"""Configurações da aplicação, rate limits, push e revogação de tokens."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from stream_chat_client.connectors.stream_http import StreamHttpClient
from stream_chat_client.utils.dates import to_rfc3339

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime

    from stream_chat_client.models import StreamResponse


class AppEndpoints(StreamHttpClient):
    def get_app_settings(self) -> StreamResponse:
        return self.get("app")

    def update_app_settings(self, **settings: Any) -> StreamResponse:
        return self.patch("app", data=settings)

    def get_rate_limits(
        self,
        server_side: bool = False,
        android: bool = False,
        ios: bool = False,
        web: bool = False,
        endpoints: Iterable[str] | None = None,
    ) -> StreamResponse:
        """Consulta rate limits da aplicação.

        Plataformas só entram na query quando True; sem nenhuma, o
        backend retorna todas.
        """
        params: dict[str, Any] = {}
        if server_side:
            params["server_side"] = "true"
        if android:
            params["android"] = "true"
        if ios:
            params["ios"] = "true"
        if web:
            params["web"] = "true"
        if endpoints:
            params["endpoints"] = ",".join(endpoints)
        return self.get("rate_limits", params=params)

    def check_push(self, push_data: dict[str, Any]) -> StreamResponse:
        """Simula o envio de push para uma mensagem/usuário."""
        return self.post("check_push", data=push_data)

    def check_sqs(
        self,
        sqs_key: str | None = None,
        sqs_secret: str | None = None,
        sqs_url: str | None = None,
    ) -> StreamResponse:
        data = {"sqs_key": sqs_key, "sqs_secret": sqs_secret, "sqs_url": sqs_url}
        return self.post("check_sqs", data={k: v for k, v in data.items() if v is not None})

    def revoke_tokens(self, before: datetime | str | None) -> StreamResponse:
        """Invalida tokens emitidos antes de `before` (None desfaz)."""
        return self.update_app_settings(revoke_tokens_issued_before=to_rfc3339(before))

    def revoke_user_token(self, user_id: str, before: datetime | str | None) -> StreamResponse:
        return self.revoke_users_token([user_id], before)

    def revoke_users_token(
        self,
        user_ids: Iterable[str],
        before: datetime | str | None,
    ) -> StreamResponse:
        issued_before = to_rfc3339(before)
        updates = [
            {"id": user_id, "set": {"revoke_tokens_issued_before": issued_before}}
            for user_id in user_ids
        ]
        return self.patch("users", data={"users": updates})
