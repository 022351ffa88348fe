"""LLM Port - interfaces for text-generation providers and the gateway over them."""

from typing import Protocol


class ProviderPort(Protocol):
    """A single text-generation provider (OpenRouter, Gemini).

    Implementations raise ProviderError on any failure, including an empty body.
    """

    name: str

    @property
    def is_configured(self) -> bool:
        """True when credentials are present."""
        ...

    async def complete(self, prompt: str, max_tokens: int) -> str:
        """Send one user prompt and return the generated text."""
        ...

    async def close(self) -> None:
        """Release the underlying HTTP client."""
        ...


class GatewayPort(Protocol):
    """Uniform generate() over several providers with retry and fallback."""

    async def generate(self, prompt: str, max_tokens: int = 2000) -> str:
        """Return generated text or raise AllProvidersFailedError."""
        ...
