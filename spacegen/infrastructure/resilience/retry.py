"""Retry policy value object and a generic async retry combinator (tenacity)."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_fixed,
)

logger = logging.getLogger(__name__)
T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """How many times to call and how long to wait between calls."""

    max_attempts: int = 1
    backoff_seconds: float = 1.0

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        if self.backoff_seconds < 0:
            raise ValueError("backoff_seconds must be >= 0")

    @classmethod
    def with_retries(cls, retries: int, backoff_seconds: float = 1.0) -> "RetryPolicy":
        """Policy making one call plus `retries` extra attempts."""
        return cls(max_attempts=max(0, retries) + 1, backoff_seconds=backoff_seconds)

    def retrying(self, retry_on: Callable[[BaseException], bool]) -> AsyncRetrying:
        """tenacity controller for this policy. The last exception is re-raised."""
        return AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_fixed(self.backoff_seconds),
            retry=retry_if_exception(retry_on),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )


def _always(exc: BaseException) -> bool:
    return isinstance(exc, Exception)


async def with_retry(
    policy: RetryPolicy,
    func: Callable[..., Awaitable[T]],
    *args,
    retry_on: Callable[[BaseException], bool] = _always,
    **kwargs,
) -> T:
    """Await func(*args, **kwargs) under the policy.

    Cancellation is never retried: CancelledError is not an Exception subclass.
    """
    return await policy.retrying(retry_on)(func, *args, **kwargs)
