"""OpenRouter adapter - primary provider via /chat/completions."""

import logging

import httpx

from spacegen.domain.errors import ProviderError
from spacegen.domain.ports.config import OpenRouterConfig

logger = logging.getLogger(__name__)


class OpenRouterProvider:
    """OpenAI-style chat completions on OpenRouter. Implements ProviderPort."""

    name = "openrouter"

    def __init__(self, config: OpenRouterConfig, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._config = config
        self._base_url = config.base_url.rstrip("/")
        self._headers = {"Content-Type": "application/json"}
        if config.api_key:
            self._headers["Authorization"] = f"Bearer {config.api_key}"
        if config.referer:
            self._headers["HTTP-Referer"] = config.referer
        if config.title:
            self._headers["X-Title"] = config.title
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def is_configured(self) -> bool:
        return bool(self._config.api_key)

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create persistent async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self._config.timeout,
                headers=self._headers,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP client (call during app shutdown)."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    def _chat_body(self, prompt: str, max_tokens: int) -> dict:
        return {
            "model": self._config.model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": max_tokens,
            "temperature": self._config.temperature,
        }

    async def complete(self, prompt: str, max_tokens: int) -> str:
        """Single non-streaming completion. Raises ProviderError."""
        if not self.is_configured:
            raise ProviderError(self.name, detail="API key not configured", retryable=False)

        body = self._chat_body(prompt, max_tokens)
        try:
            resp = await self._get_client().post(f"{self._base_url}/chat/completions", json=body)
        except httpx.HTTPError as e:
            raise ProviderError(self.name, detail=f"{type(e).__name__}: {e}") from e

        if resp.status_code >= 400:
            logger.error("OpenRouter API error %s: %s", resp.status_code, resp.text[:500])
            raise ProviderError(self.name, status=resp.status_code, detail=resp.text[:200])

        try:
            data = resp.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise ProviderError(self.name, status=resp.status_code, detail="Malformed response body") from e

        if not isinstance(content, str) or not content.strip():
            raise ProviderError(self.name, status=resp.status_code, detail="Empty response")
        return content
