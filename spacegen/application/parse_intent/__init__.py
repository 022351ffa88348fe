"""Parse-intent application layer."""

from spacegen.application.parse_intent.dto import ParseIntentRequest
from spacegen.application.parse_intent.use_case import ParseIntentUseCase

__all__ = [
    "ParseIntentRequest",
    "ParseIntentUseCase",
]
