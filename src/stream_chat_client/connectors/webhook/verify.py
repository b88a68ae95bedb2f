"""Validação de assinatura HMAC-SHA256 de webhooks Stream."""

from __future__ import annotations

import hashlib
import hmac


def compute_signature(body: bytes | str, secret: str) -> str:
    """Calcula HMAC-SHA256(secret, body) em hexadecimal."""
    raw = body.encode("utf-8") if isinstance(body, str) else body
    return hmac.new(secret.encode("utf-8"), raw, hashlib.sha256).hexdigest()


def verify_webhook_signature(
    body: bytes | str,
    signature: bytes | str | None,
    secret: str,
) -> bool:
    """Compara a assinatura recebida com a calculada (tempo constante).

    Args:
        body: Corpo bruto do request
        signature: Valor do header X-Signature
        secret: API secret da aplicação

    Returns:
        True se assinatura válida
    """
    if not signature or not secret:
        return False
    received = signature.decode("utf-8") if isinstance(signature, bytes) else signature
    return hmac.compare_digest(compute_signature(body, secret), received.strip())
