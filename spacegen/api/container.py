"""Dependency Injection Container - centralized service management."""

from functools import cached_property
from typing import TYPE_CHECKING

from spacegen.domain.ports.config import AppConfig
from spacegen.domain.ports.llm import ProviderPort
from spacegen.domain.services.wallpaper_matcher import WallpaperMatcher
from spacegen.infrastructure.config import load_config

if TYPE_CHECKING:
    from spacegen.application.build_space.use_case import BuildSpaceUseCase
    from spacegen.application.chat_create.use_case import ChatCreateUseCase
    from spacegen.application.generate_content.use_case import GenerateContentUseCase
    from spacegen.application.parse_intent.use_case import ParseIntentUseCase
    from spacegen.infrastructure.agents.content_builder import ContentBuilder
    from spacegen.infrastructure.llm.gateway import ModelGateway


class Container:
    """Dependency Injection Container with lazy initialization.

    All dependencies are created on first access and cached, so tests can
    pass a config override or replace any attribute before first use.
    """

    def __init__(self, config: AppConfig | None = None):
        """Initialize container with optional config override."""
        self._config_override = config

    @cached_property
    def config(self) -> AppConfig:
        """Application configuration."""
        if self._config_override:
            return self._config_override
        return load_config()

    @cached_property
    def providers(self) -> dict[str, ProviderPort]:
        """All known providers by name."""
        from spacegen.infrastructure.llm.gemini import GeminiProvider
        from spacegen.infrastructure.llm.openrouter import OpenRouterProvider

        return {
            "openrouter": OpenRouterProvider(self.config.openrouter),
            "gemini": GeminiProvider(self.config.gemini),
        }

    @cached_property
    def gateway(self) -> "ModelGateway":
        """Primary provider with retries, secondary as a single-shot fallback."""
        from spacegen.infrastructure.llm.gateway import ModelGateway
        from spacegen.infrastructure.resilience import RetryPolicy

        gw = self.config.gateway
        primary = self.providers[gw.primary]
        secondary = self.providers.get(gw.secondary) if gw.secondary != gw.primary else None
        return ModelGateway(
            primary=primary,
            secondary=secondary,
            policy=RetryPolicy.with_retries(gw.retries, gw.retry_delay_seconds),
        )

    @cached_property
    def wallpaper_matcher(self) -> WallpaperMatcher:
        return WallpaperMatcher()

    @cached_property
    def content_builder(self) -> "ContentBuilder":
        from spacegen.infrastructure.agents.content_builder import ContentBuilder

        return ContentBuilder(self.gateway)

    @cached_property
    def build_space_use_case(self) -> "BuildSpaceUseCase":
        """Build-space pipeline use case."""
        from spacegen.application.build_space.use_case import BuildSpaceUseCase

        return BuildSpaceUseCase(
            gateway=self.gateway,
            content_builder=self.content_builder,
            matcher=self.wallpaper_matcher,
            config=self.config.build,
        )

    @cached_property
    def chat_create_use_case(self) -> "ChatCreateUseCase":
        """Single-item chat-create use case."""
        from spacegen.application.chat_create.use_case import ChatCreateUseCase

        return ChatCreateUseCase(gateway=self.gateway, content_builder=self.content_builder)

    @cached_property
    def parse_intent_use_case(self) -> "ParseIntentUseCase":
        from spacegen.application.parse_intent.use_case import ParseIntentUseCase

        return ParseIntentUseCase(self.gateway)

    @cached_property
    def generate_content_use_case(self) -> "GenerateContentUseCase":
        from spacegen.application.generate_content.use_case import GenerateContentUseCase

        return GenerateContentUseCase(self.gateway)

    async def close(self) -> None:
        """Close provider HTTP clients (call during app shutdown)."""
        if "providers" in self.__dict__:
            for provider in self.providers.values():
                await provider.close()

    def reset(self) -> None:
        """Reset all cached instances (useful for testing)."""
        for attr in list(self.__dict__.keys()):
            if not attr.startswith("_"):
                delattr(self, attr)


# Global container instance
_container: Container | None = None


def get_container() -> Container:
    """Get or create global container instance."""
    global _container
    if _container is None:
        _container = Container()
    return _container


def reset_container() -> None:
    """Reset global container (for testing)."""
    global _container
    if _container:
        _container.reset()
    _container = None
