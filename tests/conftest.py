"""Fixtures — isolated settings/client state and fake-page HTTP clients."""

from __future__ import annotations

import logging
import os

import httpx
import pytest
import pytest_asyncio

from fakes import make_transport
from titlefetch.config import get_settings
from titlefetch.titles import client as client_module


@pytest.fixture(autouse=True)
def _isolated_state(monkeypatch):
    """Clear TITLEFETCH_* env, cached settings, the shared client and logging handlers."""
    for name in list(os.environ):
        if name.startswith("TITLEFETCH_"):
            monkeypatch.delenv(name)
    root = logging.getLogger()
    level = root.level
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    client_module._client = None
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest_asyncio.fixture
async def make_client():
    """Factory for AsyncClients over fake pages; all are closed on teardown."""
    clients: list[httpx.AsyncClient] = []

    def factory(pages: dict, seen: list[httpx.Request] | None = None) -> httpx.AsyncClient:
        client = client_module.build_client(transport=make_transport(pages, seen))
        clients.append(client)
        return client

    yield factory
    for client in clients:
        await client.aclose()
