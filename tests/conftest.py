"""Configuração do pytest para o stream_chat_client."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ e tests/ ao PYTHONPATH para permitir imports absolutos
tests_path = Path(__file__).parent
src_path = tests_path.parent / "src"
for path in (src_path, tests_path):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from fakes.fake_stream_api import FakeStreamApi  # noqa: E402

from stream_chat_client import Client  # noqa: E402

API_KEY = "key"
API_SECRET = "secret"


@pytest.fixture
def fake_api() -> FakeStreamApi:
    return FakeStreamApi()


@pytest.fixture
def echo_api() -> FakeStreamApi:
    return FakeStreamApi(echo=True)


@pytest.fixture
def client(fake_api: FakeStreamApi) -> Client:
    return Client(API_KEY, API_SECRET, http_client=fake_api.build_client())


@pytest.fixture
def echo_client(echo_api: FakeStreamApi) -> Client:
    return Client(API_KEY, API_SECRET, http_client=echo_api.build_client())
