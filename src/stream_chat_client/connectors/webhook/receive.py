"""Parse e validação inicial de webhooks recebidos."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from .verify import verify_webhook_signature

if TYPE_CHECKING:
    from collections.abc import Mapping

SIGNATURE_HEADER = "x-signature"


class WebhookRequestError(ValueError):
    """Webhook rejeitado antes de chegar à aplicação."""


class InvalidSignatureError(WebhookRequestError):
    """X-Signature ausente ou divergente do HMAC calculado."""


class InvalidJsonError(WebhookRequestError):
    """Corpo ilegível ou que não é um objeto JSON."""


def parse_webhook_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str,
) -> dict[str, Any]:
    """Confere X-Signature e devolve o evento decodificado.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos (busca de X-Signature sem case)
        secret: API secret da aplicação

    Raises:
        InvalidSignatureError: Se assinatura ausente ou inválida
        InvalidJsonError: Se o JSON estiver inválido ou não for objeto

    Returns:
        Evento do webhook
    """
    signature = next(
        (value for key, value in headers.items() if key.lower() == SIGNATURE_HEADER),
        None,
    )
    if not signature:
        raise InvalidSignatureError("missing_signature")
    if not verify_webhook_signature(raw_body, signature, secret):
        raise InvalidSignatureError("invalid_signature")

    try:
        payload = json.loads(raw_body or b"{}")
    except json.JSONDecodeError as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("payload_not_object")

    return payload
