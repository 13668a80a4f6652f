"""
pytest configuration – app factory fixtures with a fake upstream and clock.
No test ever reaches the real word list source.
"""
from __future__ import annotations

import random
from typing import Callable, Dict, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from word_service.config import Settings
from word_service.main import create_app

BASE_URL = "https://words.test/master"


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start_ms: int = 1_700_000_000_000) -> None:
        self.now = start_ms

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


def word_list_transport(payloads: Dict[str, object], calls: Optional[list] = None) -> httpx.MockTransport:
    """
    Serve ``payloads`` keyed by URL path suffix ("words.json", "de", ...).
    A value that is an int is sent as that bare HTTP status; anything else
    is sent as JSON. Unknown paths return 404.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(str(request.url))
        path = request.url.path
        if path.endswith("/words.json"):
            key = "words.json"
        elif "/languages/" in path:
            key = path.rsplit("/", 1)[-1].removesuffix(".json")
        else:
            key = None
        if key not in payloads:
            return httpx.Response(404, text="404: Not Found")
        value = payloads[key]
        if isinstance(value, int):
            return httpx.Response(value)
        if isinstance(value, (bytes, str)):
            return httpx.Response(200, content=value)
        return httpx.Response(200, json=value)

    return httpx.MockTransport(handler)


def make_settings(**overrides) -> Settings:
    values = dict(words_source_base_url=BASE_URL, log_format="text", log_level="warning")
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_client(clock) -> Callable[..., TestClient]:
    """Build a TestClient around a fresh app. Defaults to an upstream that is down."""

    def _make(payloads: Optional[Dict[str, object]] = None, calls: Optional[list] = None, **overrides) -> TestClient:
        app = create_app(
            settings=make_settings(**overrides),
            transport=word_list_transport(payloads or {}, calls),
            clock=clock,
            rng=random.Random(1234),
        )
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()
