"""Pytest configuration and fixtures for testing."""

from __future__ import annotations

import json
from typing import Any, AsyncGenerator

import httpx
import pytest
import pytest_asyncio

from infiniax_proxy.config_loader import ProxySettings
from infiniax_proxy.main import create_app
from infiniax_proxy.testing import FakeUpstream

TEST_COOKIE = "session=test-cookie"


@pytest.fixture
def settings() -> ProxySettings:
    """Settings with a fake credential, independent of the environment."""
    return ProxySettings(cookie=TEST_COOKIE, port=3999, timeout=5.0)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def app(settings: ProxySettings, upstream: FakeUpstream):
    return create_app(settings, transport=upstream.transport)


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Async client talking to the proxy in-process."""
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://proxy.local",
    ) as http_client:
        yield http_client
    await app.state.upstream_client.aclose()


# =============================================================================
# Helper Functions for Tests
# =============================================================================


async def aiter_list(items: list[Any]):
    for item in items:
        yield item


async def collect(stream) -> list[Any]:
    return [item async for item in stream]


def parse_frames(raw: bytes | str) -> list[Any]:
    """Split an SSE body into frames, decoding JSON payloads.

    The ``[DONE]`` sentinel is returned as the plain string ``"[DONE]"``.
    """
    text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
    frames: list[Any] = []
    for block in text.split("\n\n"):
        if not block:
            continue
        assert block.startswith("data: "), block
        data = block[len("data: "):]
        frames.append(data if data == "[DONE]" else json.loads(data))
    return frames


def chat_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "model": "openai/gpt-4o",
        "messages": [{"role": "user", "content": "hi"}],
    }
    payload.update(overrides)
    return payload
