"""Testes dos endpoints de mensagens."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from fakes.fake_stream_api import FakeStreamApi

from stream_chat_client import Client


def test_get_message(client: Client, fake_api: FakeStreamApi) -> None:
    client.get_message("m1", show_deleted_message=True)

    assert fake_api.last_request.url.path == "/messages/m1"
    assert fake_api.last_params()["show_deleted_message"] == "true"


class TestSearch:
    def test_text_query(self, client: Client, fake_api: FakeStreamApi) -> None:
        client.search({"type": "messaging"}, "olá", limit=2)

        payload = fake_api.last_payload_param()
        assert fake_api.last_request.url.path == "/search"
        assert payload["query"] == "olá"
        assert payload["filter_conditions"] == {"type": "messaging"}
        assert payload["sort"] == []
        assert payload["limit"] == 2
        assert "message_filter_conditions" not in payload

    def test_message_filter_conditions(self, client: Client, fake_api: FakeStreamApi) -> None:
        client.search({"type": "messaging"}, {"text": {"$autocomplete": "ol"}}, {"created_at": 1})

        payload = fake_api.last_payload_param()
        assert payload["message_filter_conditions"] == {"text": {"$autocomplete": "ol"}}
        assert payload["sort"] == [{"field": "created_at", "direction": 1}]
        assert "query" not in payload

    @pytest.mark.parametrize(
        ("sort", "options"),
        [({"created_at": -1}, {}), (None, {"next": "cursor"})],
    )
    def test_offset_with_sort_or_next_fails(
        self, sort, options, client: Client, fake_api: FakeStreamApi
    ) -> None:
        with pytest.raises(ValueError, match="offset"):
            client.search({"type": "messaging"}, "x", sort, offset=5, **options)

        assert fake_api.requests == []

    def test_offset_alone_is_allowed(self, client: Client, fake_api: FakeStreamApi) -> None:
        client.search({"type": "messaging"}, "x", offset=5)

        assert fake_api.last_payload_param()["offset"] == 5


def test_update_message_requires_id(client: Client, fake_api: FakeStreamApi) -> None:
    with pytest.raises(ValueError, match="message must have an id"):
        client.update_message({"text": "sem id"})

    assert fake_api.requests == []


def test_update_message(client: Client, fake_api: FakeStreamApi) -> None:
    client.update_message({"id": "m1", "text": "editado", "user_id": "bob"})

    assert fake_api.last_request.method == "POST"
    assert fake_api.last_request.url.path == "/messages/m1"
    assert fake_api.last_json() == {"message": {"id": "m1", "text": "editado", "user_id": "bob"}}


def test_update_message_partial(client: Client, fake_api: FakeStreamApi) -> None:
    client.update_message_partial("m1", {"set": {"text": "novo"}}, user_id="bob", skip_enrich_url=True)

    assert fake_api.last_request.method == "PUT"
    assert fake_api.last_json() == {
        "set": {"text": "novo"},
        "user": {"id": "bob"},
        "skip_enrich_url": True,
    }


def test_pin_message_with_expiration(client: Client, fake_api: FakeStreamApi) -> None:
    client.pin_message("m1", "bob", datetime(2026, 2, 1, tzinfo=UTC))

    assert fake_api.last_json() == {
        "set": {"pinned": True, "pin_expires": "2026-02-01T00:00:00+00:00"},
        "user": {"id": "bob"},
    }


def test_unpin_message(client: Client, fake_api: FakeStreamApi) -> None:
    client.unpin_message("m1", "bob")

    assert fake_api.last_json()["set"] == {"pinned": False}


def test_delete_message_hard(client: Client, fake_api: FakeStreamApi) -> None:
    client.delete_message("m1", hard=True)

    assert fake_api.last_request.method == "DELETE"
    assert fake_api.last_params()["hard"] == "true"


def test_translate_message(client: Client, fake_api: FakeStreamApi) -> None:
    client.translate_message("m1", "pt")

    assert fake_api.last_request.url.path == "/messages/m1/translate"
    assert fake_api.last_json() == {"language": "pt"}


def test_run_message_action(client: Client, fake_api: FakeStreamApi) -> None:
    client.run_message_action("m1", {"user_id": "bob", "form_data": {"image_action": "shuffle"}})

    assert fake_api.last_request.url.path == "/messages/m1/action"
    assert fake_api.last_json()["form_data"] == {"image_action": "shuffle"}
