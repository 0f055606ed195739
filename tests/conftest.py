"""Pytest configuration and shared fixtures for yext-api tests."""

import os

import httpx
import pytest

from yext_api import Config
from yext_api.testing import RecordingTransport


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Keep YEXT_* variables from the developer's shell out of the tests."""
    for key in list(os.environ.keys()):
        if key.startswith(("YEXT_", "TEST_")):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def config():
    return Config(api_key="test-key")


@pytest.fixture
async def mock_http():
    """Factory: build an httpx.AsyncClient answering every request with ``handler``.

    Returns (http_client, transport) so tests can inspect recorded requests.
    """
    clients = []

    def factory(handler):
        transport = RecordingTransport(handler)
        client = httpx.AsyncClient(transport=transport)
        clients.append(client)
        return client, transport

    yield factory

    for client in clients:
        await client.aclose()
