"""
Pytest configuration and fixtures for the NBP exchange MCP server tests.

Provides:
- A fake NBP upstream wired into core.nbp_client via httpx.MockTransport
- Payloads live in tests/payloads.py
"""

import asyncio
import copy

import httpx
import pytest

from core import nbp_client
from core.config import settings

API_BASE = "https://api.nbp.pl/api"


# ─────────────────────────────────────────────────────────────────────────────
# Fake upstream
# ─────────────────────────────────────────────────────────────────────────────

class FakeNbp:
    """In-process stand-in for api.nbp.pl.

    Routes map a URL path (e.g. "/api/cenyzlota/") to either a JSON body
    (served with 200), an httpx.Response, or an exception to raise.
    Unrouted paths answer 404, like the real API for non-trading days.
    """

    def __init__(self):
        self.routes = {}
        self.requests: list[httpx.Request] = []
        self.delay: float = 0.0
        self.cancelled = False

    def route(self, path: str, reply) -> None:
        self.routes[f"/api{path}"] = reply

    @property
    def call_count(self) -> int:
        return len(self.requests)

    async def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self.delay:
            try:
                await asyncio.sleep(self.delay)
            except asyncio.CancelledError:
                self.cancelled = True
                raise

        reply = self.routes.get(request.url.path)
        if reply is None:
            return httpx.Response(404, text="404 NotFound - Not Found - Brak danych")
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, httpx.Response):
            return reply
        return httpx.Response(200, json=copy.deepcopy(reply))


@pytest.fixture
def upstream(monkeypatch):
    """Point core.nbp_client at a FakeNbp for the duration of a test."""
    fake = FakeNbp()
    monkeypatch.setattr(settings, "api_base", API_BASE)
    monkeypatch.setattr(settings, "request_timeout", 10.0)
    build_client = nbp_client._build_client
    transport = httpx.MockTransport(fake.handle)
    monkeypatch.setattr(nbp_client, "_build_client", lambda: build_client(transport))
    return fake
