"""
Shared fixtures: a FakeDegiro server behind httpx.MockTransport and test Settings.
"""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from degiro_core import Settings
from fakes import BASE_URL, FakeDegiro


@pytest.fixture
def fake() -> FakeDegiro:
    return FakeDegiro()


@pytest.fixture
def http_client(fake: FakeDegiro) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(fake.handler))


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        username="jdoe",
        password="secret",
        base_url=BASE_URL,
        session_path=tmp_path / "session.txt",
        timeout=5.0,
    )


@pytest.fixture
def transport_for() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    """Build an AsyncClient around an ad-hoc handler."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make
