"""Generate-content application layer."""

from spacegen.application.generate_content.dto import GenerateContentRequest
from spacegen.application.generate_content.use_case import GenerateContentUseCase

__all__ = [
    "GenerateContentRequest",
    "GenerateContentUseCase",
]
