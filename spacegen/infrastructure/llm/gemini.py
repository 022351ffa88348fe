"""Gemini adapter - secondary provider via models/{model}:generateContent."""

import logging

import httpx

from spacegen.domain.errors import ProviderError
from spacegen.domain.ports.config import GeminiConfig

logger = logging.getLogger(__name__)


class GeminiProvider:
    """Google Generative Language API. Implements ProviderPort."""

    name = "gemini"

    def __init__(self, config: GeminiConfig, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._config = config
        self._base_url = config.base_url.rstrip("/")
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
                headers={"Content-Type": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    def _body(self, prompt: str, max_tokens: int) -> dict:
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "maxOutputTokens": max_tokens,
                "temperature": self._config.temperature,
            },
        }

    @staticmethod
    def _first_text(data: dict) -> str:
        parts = data["candidates"][0]["content"]["parts"]
        return "".join(p.get("text", "") for p in parts if isinstance(p, dict))

    async def complete(self, prompt: str, max_tokens: int) -> str:
        """Single generateContent call. Raises ProviderError."""
        if not self.is_configured:
            raise ProviderError(self.name, detail="API key not configured", retryable=False)

        url = f"{self._base_url}/models/{self._config.model}:generateContent"
        try:
            resp = await self._get_client().post(
                url,
                params={"key": self._config.api_key},
                json=self._body(prompt, max_tokens),
            )
        except httpx.HTTPError as e:
            raise ProviderError(self.name, detail=f"{type(e).__name__}: {e}") from e

        if resp.status_code >= 400:
            logger.error("Gemini API error %s: %s", resp.status_code, resp.text[:500])
            raise ProviderError(self.name, status=resp.status_code, detail=resp.text[:200])

        try:
            content = self._first_text(resp.json())
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise ProviderError(self.name, status=resp.status_code, detail="Malformed response body") from e

        if not content.strip():
            raise ProviderError(self.name, status=resp.status_code, detail="Empty response")
        return content
