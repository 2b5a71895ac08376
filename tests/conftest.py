"""
pytest configuration and shared fixtures for the Cooking Compass API tests.

Tests must never reach the real OpenAI API. We achieve this by:
  1. Overriding the get_openai_client dependency with an OpenAIClient whose
     httpx transport is a MockTransport backed by FakeOpenAI.
  2. Replacing app.state.limiter with a zero-window CooldownLimiter, so
     several requests per test are fine. Rate-limit tests install their own.
"""

import os
from typing import Any

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

# Set env vars BEFORE importing the app so Settings picks them up correctly
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("OPENAI_API_KEY", "")

COMPASS_URL = "/api/v1/compass"


def chat_envelope(content: str) -> dict[str, Any]:
    """Minimal chat-completion response body wrapping *content*."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}],
    }


class FakeOpenAI:
    """
    Stand-in for the chat-completions endpoint.

    Records every outbound request; answers with a canned reply (wrapped in a
    chat envelope), or with a raw status/body pair for error scenarios.
    """

    def __init__(
        self,
        reply: str = "",
        status_code: int = 200,
        body: Any = None,
    ) -> None:
        self.reply = reply
        self.status_code = status_code
        self.body = body
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.body is not None:
            if isinstance(self.body, (dict, list)):
                return httpx.Response(self.status_code, json=self.body)
            return httpx.Response(self.status_code, text=self.body)
        return httpx.Response(self.status_code, json=chat_envelope(self.reply))

    def client(self, api_key: str = "sk-test"):
        from cooking_compass.ai.openai_client import OpenAIClient

        return OpenAIClient(api_key=api_key, transport=httpx.MockTransport(self.handler))

    @property
    def called(self) -> bool:
        return bool(self.requests)


@pytest.fixture(autouse=True)
def open_limiter():
    """Give every test an empty limiter that never blocks."""
    from cooking_compass.core.rate_limit import CooldownLimiter
    from cooking_compass.main import app

    original = app.state.limiter
    app.state.limiter = CooldownLimiter(window_ms=0)
    yield app.state.limiter
    app.state.limiter = original


@pytest.fixture()
def fake_openai():
    """
    Install a FakeOpenAI as the app's provider for the duration of a test.

    Tests tweak .reply / .status_code / .body before sending requests.
    """
    from cooking_compass.ai.openai_client import get_openai_client
    from cooking_compass.main import app

    fake = FakeOpenAI()
    provider = fake.client()
    app.dependency_overrides[get_openai_client] = lambda: provider
    yield fake
    app.dependency_overrides.pop(get_openai_client, None)


@pytest.fixture()
async def client():
    """
    HTTPX async test client wired to the FastAPI app.

    Usage:
        async def test_something(client):
            response = await client.get("/health")
            assert response.status_code == 200
    """
    from cooking_compass.main import app

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
