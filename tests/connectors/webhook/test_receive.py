import hashlib
import hmac
import json

from stream_chat_client.connectors.webhook.receive import (
    InvalidJsonError,
    InvalidSignatureError,
    parse_webhook_request,
)


def _sign(payload: bytes, secret: str) -> str:
    return hmac.new(secret.encode("utf-8"), payload, hashlib.sha256).hexdigest()


def test_parse_webhook_request_ok() -> None:
    secret = "secret"
    body = json.dumps({"type": "message.new"}).encode("utf-8")
    headers = {"X-Signature": _sign(body, secret)}

    payload = parse_webhook_request(body, headers, secret)

    assert payload == {"type": "message.new"}


def test_parse_webhook_request_missing_signature() -> None:
    try:
        parse_webhook_request(b"{}", {}, "secret")
    except InvalidSignatureError as exc:
        assert "missing_signature" in str(exc)
    else:
        raise AssertionError("Expected InvalidSignatureError")


def test_parse_webhook_request_invalid_signature() -> None:
    body = json.dumps({"type": "message.new"}).encode("utf-8")
    headers = {"x-signature": "deadbeef"}

    try:
        parse_webhook_request(body, headers, "secret")
    except InvalidSignatureError as exc:
        assert "invalid_signature" in str(exc)
    else:
        raise AssertionError("Expected InvalidSignatureError")


def test_parse_webhook_request_invalid_json() -> None:
    secret = "secret"
    body = b"{invalid}"
    headers = {"x-signature": _sign(body, secret)}

    try:
        parse_webhook_request(body, headers, secret)
    except InvalidJsonError as exc:
        assert "invalid_json" in str(exc)
    else:
        raise AssertionError("Expected InvalidJsonError")


def test_parse_webhook_request_payload_not_object() -> None:
    secret = "secret"
    body = b"[1, 2]"
    headers = {"x-signature": _sign(body, secret)}

    try:
        parse_webhook_request(body, headers, secret)
    except InvalidJsonError as exc:
        assert "payload_not_object" in str(exc)
    else:
        raise AssertionError("Expected InvalidJsonError")
