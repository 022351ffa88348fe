"""Resilience patterns - retry policy and combinator."""

from spacegen.infrastructure.resilience.retry import RetryPolicy, with_retry

__all__ = [
    "RetryPolicy",
    "with_retry",
]
