"""Config Port - interface for configuration access."""

from typing import Literal, Protocol

from pydantic import BaseModel


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = "0.0.0.0"
    port: int = 8000


class GatewayConfig(BaseModel):
    """Provider order and retry policy for the model gateway."""

    primary: Literal["openrouter", "gemini"] = "openrouter"
    secondary: Literal["openrouter", "gemini"] = "gemini"  # Same as primary disables the fallback
    retries: int = 1  # Extra attempts on the primary provider
    retry_delay_seconds: float = 1.0


class OpenRouterConfig(BaseModel):
    """OpenRouter chat-completions API (message-array envelope)."""

    base_url: str = "https://openrouter.ai/api/v1"
    api_key: str = ""
    model: str = "moonshotai/kimi-k2:free"
    timeout: int = 120
    temperature: float = 0.7
    # Optional attribution headers sent with every request
    referer: str = ""
    title: str = "Space Builder"


class GeminiConfig(BaseModel):
    """Google Gemini generateContent API (parts-array envelope)."""

    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    api_key: str = ""
    model: str = "gemini-2.0-flash"
    timeout: int = 120
    temperature: float = 0.7


class BuildConfig(BaseModel):
    """Pipeline behaviour."""

    min_prompt_length: int = 10
    # Delay after each emitted progress event. 0 disables pacing.
    event_pacing_seconds: float = 0.4
    # Server-side ceiling for one build; the pipeline task is cancelled after it.
    max_duration_seconds: float = 300.0


class SecurityConfig(BaseModel):
    """Security settings."""

    rate_limit_requests_per_minute: int = 30
    cors_origins: list[str] = ["http://localhost:3000"]


class AppConfig(BaseModel):
    """Full application configuration."""

    server: ServerConfig = ServerConfig()
    gateway: GatewayConfig = GatewayConfig()
    openrouter: OpenRouterConfig = OpenRouterConfig()
    gemini: GeminiConfig = GeminiConfig()
    build: BuildConfig = BuildConfig()
    security: SecurityConfig = SecurityConfig()
    log_level: str = "INFO"
    # Log file: path relative to cwd or absolute. Empty = only stdout. Rotation when file exceeds max_mb.
    log_file: str = ""
    log_rotation_max_mb: int = 5
    log_rotation_backups: int = 3


class ConfigPort(Protocol):
    """Interface for configuration providers."""

    def get_config(self) -> AppConfig:
        """Get the full application configuration."""
        ...
