"""FastAPI dependencies - resolved through the DI container."""

from typing import TYPE_CHECKING

from slowapi import Limiter
from slowapi.util import get_remote_address

from spacegen.api.container import get_container
from spacegen.domain.ports.config import AppConfig

if TYPE_CHECKING:
    from spacegen.application.build_space.use_case import BuildSpaceUseCase
    from spacegen.application.chat_create.use_case import ChatCreateUseCase
    from spacegen.application.generate_content.use_case import GenerateContentUseCase
    from spacegen.application.parse_intent.use_case import ParseIntentUseCase

limiter = Limiter(key_func=get_remote_address)


def get_config() -> AppConfig:
    """Config loaded once and cached by the container."""
    return get_container().config


def rate_limit() -> str:
    """slowapi limit string from config, e.g. '30/minute'."""
    return f"{get_config().security.rate_limit_requests_per_minute}/minute"


def get_build_space_use_case() -> "BuildSpaceUseCase":
    return get_container().build_space_use_case


def get_chat_create_use_case() -> "ChatCreateUseCase":
    return get_container().chat_create_use_case


def get_parse_intent_use_case() -> "ParseIntentUseCase":
    return get_container().parse_intent_use_case


def get_generate_content_use_case() -> "GenerateContentUseCase":
    return get_container().generate_content_use_case
