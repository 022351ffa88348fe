"""Model gateway - uniform generate() over a primary and a secondary provider.

The primary is called under the retry policy (retryable ProviderErrors only).
When it is exhausted the secondary gets a single attempt. If both fail the
caller sees AllProvidersFailedError carrying every provider's last error.
"""

import structlog

from spacegen.domain.errors import AllProvidersFailedError, ProviderError
from spacegen.domain.ports.llm import ProviderPort
from spacegen.infrastructure.resilience import RetryPolicy, with_retry

log = structlog.get_logger()

DEFAULT_MAX_TOKENS = 2000


def _is_retryable(exc: BaseException) -> bool:
    return isinstance(exc, ProviderError) and exc.retryable


class ModelGateway:
    """Implements GatewayPort."""

    def __init__(
        self,
        primary: ProviderPort,
        secondary: ProviderPort | None = None,
        policy: RetryPolicy | None = None,
    ) -> None:
        self._primary = primary
        self._secondary = secondary
        self._policy = policy or RetryPolicy.with_retries(1)

    @property
    def providers(self) -> list[ProviderPort]:
        return [p for p in (self._primary, self._secondary) if p is not None]

    async def generate(self, prompt: str, max_tokens: int = DEFAULT_MAX_TOKENS) -> str:
        """Return generated text or raise AllProvidersFailedError."""
        errors: list[ProviderError] = []

        try:
            return await with_retry(
                self._policy,
                self._primary.complete,
                prompt,
                max_tokens,
                retry_on=_is_retryable,
            )
        except ProviderError as e:
            log.warning("gateway_primary_failed", provider=e.provider, status=e.status, detail=e.detail[:200])
            errors.append(e)

        if self._secondary is not None:
            try:
                text = await self._secondary.complete(prompt, max_tokens)
                log.info("gateway_secondary_used", provider=self._secondary.name)
                return text
            except ProviderError as e:
                log.warning("gateway_secondary_failed", provider=e.provider, status=e.status, detail=e.detail[:200])
                errors.append(e)

        raise AllProvidersFailedError(errors)

    async def close(self) -> None:
        for provider in self.providers:
            await provider.close()
