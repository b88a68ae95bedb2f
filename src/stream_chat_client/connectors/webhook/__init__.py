"""Webhooks Stream: assinatura e parsing seguro."""

from .receive import (
    SIGNATURE_HEADER,
    InvalidJsonError,
    InvalidSignatureError,
    WebhookRequestError,
    parse_webhook_request,
)
from .verify import compute_signature, verify_webhook_signature

__all__ = [
    "SIGNATURE_HEADER",
    "InvalidJsonError",
    "InvalidSignatureError",
    "WebhookRequestError",
    "compute_signature",
    "parse_webhook_request",
    "verify_webhook_signature",
]
