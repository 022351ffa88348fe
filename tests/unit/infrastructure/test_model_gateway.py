"""Tests for ModelGateway retry and fallback policy."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from spacegen.domain.errors import AllProvidersFailedError, ProviderError
from spacegen.infrastructure.llm.gateway import ModelGateway
from spacegen.infrastructure.resilience import RetryPolicy, with_retry


def _provider(name: str, *results):
    provider = MagicMock()
    provider.name = name
    provider.complete = AsyncMock(side_effect=list(results))
    provider.close = AsyncMock()
    return provider


NO_WAIT = RetryPolicy.with_retries(1, backoff_seconds=0)


class TestRetryPolicy:
    def test_with_retries(self):
        assert RetryPolicy.with_retries(2).max_attempts == 3
        assert RetryPolicy.with_retries(-1).max_attempts == 1

    def test_rejects_invalid(self):
        with pytest.raises(ValueError):
            RetryPolicy(max_attempts=0)
        with pytest.raises(ValueError):
            RetryPolicy(backoff_seconds=-1)

    @pytest.mark.asyncio
    async def test_with_retry_returns_after_transient_failure(self):
        func = AsyncMock(side_effect=[RuntimeError("boom"), "ok"])
        result = await with_retry(RetryPolicy(max_attempts=2, backoff_seconds=0), func, "x")
        assert result == "ok"
        assert func.await_count == 2

    @pytest.mark.asyncio
    async def test_with_retry_reraises_last_error(self):
        func = AsyncMock(side_effect=[RuntimeError("one"), RuntimeError("two")])
        with pytest.raises(RuntimeError, match="two"):
            await with_retry(RetryPolicy(max_attempts=2, backoff_seconds=0), func)


class TestModelGateway:
    @pytest.mark.asyncio
    async def test_primary_success(self):
        primary = _provider("openrouter", "hello")
        secondary = _provider("gemini", "unused")
        gateway = ModelGateway(primary, secondary, NO_WAIT)

        assert await gateway.generate("prompt", 500) == "hello"
        primary.complete.assert_awaited_once_with("prompt", 500)
        secondary.complete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_primary_retried_then_succeeds(self):
        primary = _provider("openrouter", ProviderError("openrouter", 429, "rate limited"), "second try")
        gateway = ModelGateway(primary, _provider("gemini"), NO_WAIT)

        assert await gateway.generate("prompt") == "second try"
        assert primary.complete.await_count == 2

    @pytest.mark.asyncio
    async def test_falls_back_to_secondary_once(self):
        primary = _provider(
            "openrouter",
            ProviderError("openrouter", 500),
            ProviderError("openrouter", 500),
        )
        secondary = _provider("gemini", "from gemini")
        gateway = ModelGateway(primary, secondary, NO_WAIT)

        assert await gateway.generate("prompt") == "from gemini"
        assert primary.complete.await_count == 2
        secondary.complete.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_non_retryable_skips_retries(self):
        primary = _provider("openrouter", ProviderError("openrouter", detail="API key not configured", retryable=False))
        secondary = _provider("gemini", "from gemini")
        gateway = ModelGateway(primary, secondary, NO_WAIT)

        assert await gateway.generate("prompt") == "from gemini"
        assert primary.complete.await_count == 1

    @pytest.mark.asyncio
    async def test_all_failed(self):
        primary = _provider("openrouter", ProviderError("openrouter", 500), ProviderError("openrouter", 502))
        secondary = _provider("gemini", ProviderError("gemini", None, "timeout"))
        gateway = ModelGateway(primary, secondary, NO_WAIT)

        with pytest.raises(AllProvidersFailedError) as exc_info:
            await gateway.generate("prompt")
        assert [e.provider for e in exc_info.value.errors] == ["openrouter", "gemini"]
        assert exc_info.value.errors[0].status == 502
        assert secondary.complete.await_count == 1

    @pytest.mark.asyncio
    async def test_without_secondary(self):
        primary = _provider("openrouter", ProviderError("openrouter", 500), ProviderError("openrouter", 500))
        gateway = ModelGateway(primary, None, NO_WAIT)
        with pytest.raises(AllProvidersFailedError):
            await gateway.generate("prompt")

    @pytest.mark.asyncio
    async def test_close_closes_providers(self):
        primary, secondary = _provider("openrouter"), _provider("gemini")
        await ModelGateway(primary, secondary).close()
        primary.close.assert_awaited_once()
        secondary.close.assert_awaited_once()
