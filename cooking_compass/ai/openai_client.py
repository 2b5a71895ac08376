"""
OpenAIClient — Thin async wrapper around the OpenAI chat-completions REST API.

One request per call: no retries, no streaming. The timeout comes from
OPENAI_TIMEOUT_SECONDS rather than whatever the network stack defaults to.

A missing OPENAI_API_KEY does not fail at import time. The client reports
`configured = False` and the route turns that into a 500 for the request.

Tests inject an httpx transport (e.g. httpx.MockTransport) instead of
talking to the real API.
"""

import logging
from typing import Any

import httpx

from cooking_compass.core.config import settings

logger = logging.getLogger(__name__)


class ProviderError(Exception):
    """The provider answered with a non-success HTTP status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"OpenAI returned HTTP {status_code}")
        self.status_code = status_code
        self.body = body


def extract_content(envelope: Any) -> str:
    """
    Pull choices[0].message.content out of a chat-completion envelope.

    Any missing or mistyped level yields "" instead of raising.
    """
    if not isinstance(envelope, dict):
        return ""
    choices = envelope.get("choices")
    if not isinstance(choices, list) or not choices:
        return ""
    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str):
        return ""
    return content.strip()


class OpenAIClient:
    """
    Chat-completion client for the recipe coach.

    Don't instantiate per request; use the module-level `openai_client`
    singleton via the get_openai_client() dependency.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = settings.openai_api_key if api_key is None else api_key
        self.base_url = (base_url or settings.openai_base_url).rstrip("/")
        self.model = model or settings.openai_model
        self.temperature = settings.openai_temperature if temperature is None else temperature
        self.max_tokens = max_tokens or settings.openai_max_tokens
        self.timeout = timeout or settings.openai_timeout_seconds
        self._transport = transport

        if not self.configured:
            logger.warning("OPENAI_API_KEY not set — recipe suggestions will return 500")

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def build_payload(self, messages: list[dict[str, str]]) -> dict[str, Any]:
        return {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

    async def complete(self, messages: list[dict[str, str]]) -> str:
        """
        Send one chat-completion request and return the trimmed message text.

        Raises:
            ProviderError:       on any non-2xx response (body kept verbatim).
            httpx.HTTPError:     on transport failures and timeouts.
            ValueError:          if a 2xx response body is not JSON.
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.post(
                f"{self.base_url}/chat/completions",
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
                json=self.build_payload(messages),
            )

        if not response.is_success:
            logger.error(
                "OpenAI API error: %s — %s",
                response.status_code,
                response.text[:200],
            )
            raise ProviderError(response.status_code, response.text)

        return extract_content(response.json())


# Module-level singleton
openai_client = OpenAIClient()


def get_openai_client() -> OpenAIClient:
    """FastAPI dependency; override in tests with app.dependency_overrides."""
    return openai_client
