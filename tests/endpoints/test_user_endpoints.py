"""Testes dos endpoints de usuários."""

from __future__ import annotations

import pytest
from fakes.fake_stream_api import FakeStreamApi

from stream_chat_client import HARD_DELETE, Client


class TestUpsert:
    def test_update_users_keys_by_id(self, client: Client, fake_api: FakeStreamApi) -> None:
        client.update_users([{"id": "bob", "role": "admin"}, {"id": "alice"}])

        assert fake_api.last_request.method == "POST"
        assert fake_api.last_request.url.path == "/users"
        assert fake_api.last_json() == {
            "users": {"bob": {"id": "bob", "role": "admin"}, "alice": {"id": "alice"}}
        }

    def test_user_without_id_fails_before_request(
        self, client: Client, fake_api: FakeStreamApi
    ) -> None:
        with pytest.raises(ValueError, match="user must have an id"):
            client.upsert_users([{"id": "bob"}, {"name": "sem id"}])

        assert fake_api.requests == []

    def test_upsert_user(self, client: Client, fake_api: FakeStreamApi) -> None:
        client.upsert_user({"id": "bob"})

        assert fake_api.last_json() == {"users": {"bob": {"id": "bob"}}}


def test_update_user_partial(client: Client, fake_api: FakeStreamApi) -> None:
    client.update_user_partial({"id": "bob", "set": {"field": "value"}, "unset": ["old"]})

    assert fake_api.last_request.method == "PATCH"
    assert fake_api.last_json() == {
        "users": [{"id": "bob", "set": {"field": "value"}, "unset": ["old"]}]
    }


def test_query_users_uses_payload_param(client: Client, fake_api: FakeStreamApi) -> None:
    client.query_users({"id": {"$in": ["bob"]}}, {"last_active": -1}, limit=10)

    assert fake_api.last_request.method == "GET"
    assert fake_api.last_request.url.path == "/users"
    assert fake_api.last_payload_param() == {
        "filter_conditions": {"id": {"$in": ["bob"]}},
        "sort": [{"field": "last_active", "direction": -1}],
        "limit": 10,
    }


def test_delete_user_options_in_query(client: Client, fake_api: FakeStreamApi) -> None:
    client.delete_user("bob", mark_messages_deleted=True)

    assert fake_api.last_request.method == "DELETE"
    assert fake_api.last_request.url.path == "/users/bob"
    assert fake_api.last_params()["mark_messages_deleted"] == "true"


def test_delete_users(client: Client, fake_api: FakeStreamApi) -> None:
    fake_api.queue({"task_id": "t1"})

    response = client.delete_users(["a", "b"], HARD_DELETE, messages=HARD_DELETE)

    assert response["task_id"] == "t1"
    assert fake_api.last_request.url.path == "/users/delete"
    assert fake_api.last_json() == {"user_ids": ["a", "b"], "user": "hard", "messages": "hard"}


def test_delete_users_default_is_soft(client: Client, fake_api: FakeStreamApi) -> None:
    client.delete_users(["a"])

    assert fake_api.last_json() == {"user_ids": ["a"], "user": "soft"}


@pytest.mark.parametrize("action", ["deactivate", "reactivate"])
def test_deactivate_and_reactivate(action: str, client: Client, fake_api: FakeStreamApi) -> None:
    getattr(client, f"{action}_user")("bob", created_by_id="admin")

    assert fake_api.last_request.url.path == f"/users/bob/{action}"
    assert fake_api.last_json() == {"created_by_id": "admin"}


def test_export_user(client: Client, fake_api: FakeStreamApi) -> None:
    client.export_user("bob")

    assert fake_api.last_request.method == "GET"
    assert fake_api.last_request.url.path == "/users/bob/export"


def test_create_guest(client: Client, fake_api: FakeStreamApi) -> None:
    client.create_guest({"user": {"id": "guest-1"}})

    assert fake_api.last_request.url.path == "/guests"
    assert fake_api.last_json() == {"user": {"id": "guest-1"}}


def test_send_user_event(client: Client, fake_api: FakeStreamApi) -> None:
    client.send_user_event("bob", {"event": {"type": "friendship_request"}})

    assert fake_api.last_request.url.path == "/users/bob/event"
    assert fake_api.last_json() == {"event": {"type": "friendship_request"}}


def test_mark_all_read(client: Client, fake_api: FakeStreamApi) -> None:
    client.mark_all_read("bob")

    assert fake_api.last_request.url.path == "/channels/read"
    assert fake_api.last_json() == {"user": {"id": "bob"}}
