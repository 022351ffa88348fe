"""Chat-create application layer."""

from spacegen.application.chat_create.dto import ChatCreateRequest
from spacegen.application.chat_create.use_case import ChatCreateUseCase

__all__ = [
    "ChatCreateRequest",
    "ChatCreateUseCase",
]
