"""Testes do StreamHttpClient: montagem da requisição e parsing."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime

import httpx
import jwt
import pytest
from fakes.fake_stream_api import FakeStreamApi

from stream_chat_client.connectors.http_base import HttpClientConfig, build_http_client
from stream_chat_client.connectors.stream_http import StreamHttpClient, dumps_payload
from stream_chat_client.models import StreamResponse
from stream_chat_client.utils.errors import StreamAPIException
from stream_chat_client.version import VERSION


@pytest.fixture
def http(fake_api: FakeStreamApi) -> StreamHttpClient:
    return StreamHttpClient("key", "secret", http_client=fake_api.build_client())


class TestConstruction:
    @pytest.mark.parametrize(("key", "secret"), [("", "s"), ("k", ""), ("", "")])
    def test_requires_credentials(self, key: str, secret: str) -> None:
        with pytest.raises(ValueError, match="api_key e api_secret"):
            StreamHttpClient(key, secret)

    def test_defaults(self) -> None:
        client = StreamHttpClient("key", "secret")

        assert client.base_url == "https://chat.stream-io-api.com"
        assert client.timeout == 6.0
        client.close()

    def test_custom_timeout_and_base_url(self) -> None:
        client = StreamHttpClient("key", "secret", 3, base_url="https://x.example.com/")

        assert client.timeout == 3.0
        assert client.base_url == "https://x.example.com"
        assert client.http_client.timeout.read == 3.0
        client.close()

    def test_set_http_client(self, fake_api: FakeStreamApi) -> None:
        client = StreamHttpClient("key", "secret")
        replacement = fake_api.build_client()

        client.set_http_client(replacement)
        client.get("app")

        assert client.http_client is replacement
        assert len(fake_api.requests) == 1

    def test_context_manager_closes_pool(self, fake_api: FakeStreamApi) -> None:
        with StreamHttpClient("key", "secret", http_client=fake_api.build_client()) as client:
            pass

        assert client.http_client.is_closed


class TestRequestConstruction:
    def test_headers(self, http: StreamHttpClient, fake_api: FakeStreamApi) -> None:
        http.get("app")
        headers = fake_api.last_request.headers

        assert headers["Content-Type"] == "application/json"
        assert headers["X-Stream-Client"] == f"stream-python-client-{VERSION}"
        assert headers["stream-auth-type"] == "jwt"
        assert jwt.decode(headers["Authorization"], "secret", algorithms=["HS256"]) == {
            "server": True
        }

    def test_api_key_always_present_and_params_sorted(
        self, http: StreamHttpClient, fake_api: FakeStreamApi
    ) -> None:
        http.get("users", params={"zeta": "1", "alpha": "2", "skip": None})

        query = fake_api.last_request.url.query.decode()
        assert query == "alpha=2&api_key=key&zeta=1"

    def test_url_joins_base_and_relative(self, http: StreamHttpClient, fake_api: FakeStreamApi) -> None:
        http.get("/channels/messaging/geral")

        assert str(fake_api.last_request.url).startswith(
            "https://chat.stream-io-api.com/channels/messaging/geral?"
        )

    def test_post_body_is_json(self, http: StreamHttpClient, fake_api: FakeStreamApi) -> None:
        at = datetime(2026, 1, 1, tzinfo=UTC)

        http.post("check_push", data={"at": at, "n": 1})

        assert fake_api.last_request.method == "POST"
        assert fake_api.last_json() == {"at": "2026-01-01T00:00:00+00:00", "n": 1}

    @pytest.mark.parametrize("verb", ["post", "put", "patch"])
    def test_body_defaults_to_empty_object(
        self, verb: str, http: StreamHttpClient, fake_api: FakeStreamApi
    ) -> None:
        getattr(http, verb)("app")

        assert fake_api.last_json() == {}

    @pytest.mark.parametrize("verb", ["get", "delete"])
    def test_no_body_for_get_and_delete(
        self, verb: str, http: StreamHttpClient, fake_api: FakeStreamApi
    ) -> None:
        getattr(http, verb)("app")

        assert fake_api.last_request.content == b""
        assert fake_api.last_request.method == verb.upper()


class TestResponseParsing:
    def test_success_returns_stream_response(
        self, http: StreamHttpClient, fake_api: FakeStreamApi
    ) -> None:
        fake_api.queue({"app": {"name": "demo"}}, headers={"X-Ratelimit-Limit": "10"})

        response = http.get("app")

        assert isinstance(response, StreamResponse)
        assert response["app"]["name"] == "demo"
        assert response.status_code == 200
        assert response.rate_limit is not None
        assert response.rate_limit.limit == 10

    @pytest.mark.parametrize("status_code", [399, 400, 404, 429, 500])
    def test_error_status_raises(
        self, status_code: int, http: StreamHttpClient, fake_api: FakeStreamApi
    ) -> None:
        fake_api.queue({"code": 16, "message": "does not exist"}, status_code=status_code)

        with pytest.raises(StreamAPIException) as exc_info:
            http.get("channels/messaging/x")

        assert exc_info.value.status_code == status_code
        assert exc_info.value.error_code == 16

    def test_error_status_with_invalid_body_raises(
        self, http: StreamHttpClient, fake_api: FakeStreamApi
    ) -> None:
        fake_api.queue(content=b"upstream error", status_code=503)

        with pytest.raises(StreamAPIException, match="HTTP code: 503"):
            http.get("app")

    def test_invalid_json_on_success_raises(
        self, http: StreamHttpClient, fake_api: FakeStreamApi
    ) -> None:
        fake_api.queue(content=b"not json", status_code=200)

        with pytest.raises(StreamAPIException):
            http.get("app")

    def test_non_object_json_raises(self, http: StreamHttpClient, fake_api: FakeStreamApi) -> None:
        fake_api.queue([1, 2, 3])

        with pytest.raises(StreamAPIException):
            http.get("app")

    def test_api_error_is_logged_without_secret(
        self,
        http: StreamHttpClient,
        fake_api: FakeStreamApi,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        fake_api.queue({"code": 4, "message": "bad"}, status_code=400)

        with caplog.at_level(logging.WARNING), pytest.raises(StreamAPIException):
            http.post("users", data={"users": {}})

        records = [r for r in caplog.records if r.getMessage() == "stream_api_error"]
        assert len(records) == 1
        assert records[0].path == "users"
        assert records[0].status_code == 400
        assert "secret" not in caplog.text


class TestSendFile:
    def test_multipart_fields(self, http: StreamHttpClient, fake_api: FakeStreamApi) -> None:
        fake_api.queue({"file": "https://cdn/x.txt"})

        response = http.send_file(
            "channels/messaging/geral/file",
            b"hello",
            {"id": "bob"},
            "text/plain",
        )

        request = fake_api.last_request
        assert response["file"] == "https://cdn/x.txt"
        assert request.method == "POST"
        assert request.headers["Content-Type"].startswith("multipart/form-data")
        assert request.url.params["api_key"] == "key"
        assert b'name="user"' in request.content
        assert json.dumps({"id": "bob"}).encode() in request.content
        assert b"Content-Type: text/plain" in request.content
        assert b"hello" in request.content

    def test_remote_url_is_downloaded(self, http: StreamHttpClient, fake_api: FakeStreamApi) -> None:
        fake_api.files["https://cdn.example.com/cat.jpg"] = b"jpegdata"

        http.send_file("channels/messaging/geral/image", "https://cdn.example.com/cat.jpg", {"id": "bob"})

        assert b'filename="cat.jpg"' in fake_api.last_request.content
        assert b"jpegdata" in fake_api.last_request.content
        assert b"application/octet-stream" in fake_api.last_request.content


class TestTokensAndWebhooks:
    def test_create_token(self, http: StreamHttpClient) -> None:
        token = http.create_token("bob")

        assert jwt.decode(token, "secret", algorithms=["HS256"]) == {"user_id": "bob"}

    def test_verify_webhook(self, http: StreamHttpClient) -> None:
        from stream_chat_client.connectors.webhook import compute_signature

        body = b'{"type":"user.updated"}'

        assert http.verify_webhook(body, compute_signature(body, "secret")) is True
        assert http.verify_webhook(body, "bad") is False

    def test_parse_webhook(self, http: StreamHttpClient) -> None:
        from stream_chat_client.connectors.webhook import compute_signature

        body = b'{"type":"user.updated"}'
        headers = {"X-Signature": compute_signature(body, "secret")}

        assert http.parse_webhook(body, headers) == {"type": "user.updated"}


def test_dumps_payload_serializes_dates() -> None:
    assert dumps_payload({"d": datetime(2026, 1, 1)}) == '{"d": "2026-01-01T00:00:00+00:00"}'


def test_build_http_client_applies_config() -> None:
    client = build_http_client(HttpClientConfig(timeout_seconds=2.5, max_connections=3))

    assert isinstance(client, httpx.Client)
    assert client.timeout.connect == 2.5
    client.close()
