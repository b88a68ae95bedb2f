"""Testes das exceções do SDK."""

from __future__ import annotations

import httpx

from stream_chat_client.utils.errors import (
    StreamAPIException,
    StreamChannelException,
    StreamChatError,
)


class TestStreamAPIException:
    def test_json_body_exposes_code_and_message(self) -> None:
        response = httpx.Response(400, json={"code": 4, "message": "bad input"})

        error = StreamAPIException(response)

        assert error.status_code == 400
        assert error.json_response is True
        assert error.error_code == 4
        assert error.error_message == "bad input"
        assert str(error) == "Stream Chat error code 4: bad input"
        assert error.response is response

    def test_json_body_without_fields_uses_unknown(self) -> None:
        error = StreamAPIException(httpx.Response(500, json={}))

        assert str(error) == "Stream Chat error code unknown: unknown"

    def test_non_json_body(self) -> None:
        error = StreamAPIException(httpx.Response(502, content=b"<html>bad gateway</html>"))

        assert error.json_response is False
        assert error.error_code is None
        assert str(error) == "Stream Chat error HTTP code: 502"

    def test_json_array_body_is_not_json_response(self) -> None:
        error = StreamAPIException(httpx.Response(400, json=[1, 2]))

        assert error.json_response is False


def test_exceptions_share_base() -> None:
    assert issubclass(StreamAPIException, StreamChatError)
    assert issubclass(StreamChannelException, StreamChatError)
