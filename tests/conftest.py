"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from device_monitor.config import runtime
from tests.helpers.fake_http import FakeHttpSession


@pytest.fixture(autouse=True)
def isolated_dotenv(monkeypatch):
    """Keep developer .env files out of configuration lookups."""
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", ())
    runtime.reset_default_values()
    yield
    runtime.reset_default_values()


@pytest.fixture
def fake_session_factory():
    """Provide a factory for scripted fake HTTP sessions."""

    def factory(*responses: Any, routes=None, default=None) -> FakeHttpSession:
        return FakeHttpSession(responses, routes=routes, default=default)

    return factory


@pytest.fixture
def shutdown_event() -> asyncio.Event:
    return asyncio.Event()


@pytest.fixture
def sleep_calls(monkeypatch) -> list[float]:
    """Replace asyncio.sleep with a recorder that returns immediately."""
    calls: list[float] = []

    async def fake_sleep(duration, *args, **kwargs):
        calls.append(duration)

    monkeypatch.setattr("device_monitor.connectivity_checker.asyncio.sleep", fake_sleep)
    return calls
