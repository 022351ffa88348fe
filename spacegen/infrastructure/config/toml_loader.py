"""TOML configuration loader with env overrides."""

import logging
import os
import tomllib
from pathlib import Path

from spacegen.domain.ports.config import (
    AppConfig,
    BuildConfig,
    GatewayConfig,
    GeminiConfig,
    OpenRouterConfig,
    SecurityConfig,
    ServerConfig,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent.parent.parent.parent / "config"


def _load_toml(path: Path) -> dict:
    """Load TOML file."""
    with open(path, "rb") as f:
        return tomllib.load(f)


def _merge(base: dict, override: dict) -> dict:
    """Merge override into base, one level deep (per section)."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value
    return merged


def _set_int(config: dict, section: str, key: str, env: str) -> None:
    if raw := os.getenv(env):
        try:
            config.setdefault(section, {})[key] = int(raw)
        except ValueError:
            logger.warning("Invalid %s env value: %r, ignoring", env, raw)


def _set_float(config: dict, section: str, key: str, env: str) -> None:
    if raw := os.getenv(env):
        try:
            config.setdefault(section, {})[key] = float(raw)
        except ValueError:
            logger.warning("Invalid %s env value: %r, ignoring", env, raw)


def _apply_env_overrides(config: dict) -> dict:
    """Apply environment variable overrides."""
    if key := os.getenv("OPENROUTER_API_KEY"):
        config.setdefault("openrouter", {})["api_key"] = key.strip()
    if model := os.getenv("OPENROUTER_MODEL"):
        config.setdefault("openrouter", {})["model"] = model.strip()
    if key := os.getenv("GEMINI_API_KEY"):
        config.setdefault("gemini", {})["api_key"] = key.strip()
    if model := os.getenv("GEMINI_MODEL"):
        config.setdefault("gemini", {})["model"] = model.strip()
    _set_int(config, "gateway", "retries", "GATEWAY_RETRIES")
    _set_float(config, "build", "max_duration_seconds", "BUILD_MAX_DURATION")
    _set_int(config, "server", "port", "PORT")
    if level := os.getenv("LOG_LEVEL"):
        config.setdefault("logging", {})["level"] = level.upper()
    if path := os.getenv("LOG_FILE"):
        config.setdefault("logging", {})["file"] = path.strip()
    if origins := os.getenv("CORS_ORIGINS"):
        config.setdefault("security", {})["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]
    _set_int(config, "security", "rate_limit_requests_per_minute", "RATE_LIMIT_PER_MINUTE")
    return config


def load_config(config_dir: Path | None = None) -> AppConfig:
    """Load configuration from TOML files with env overrides.

    Loads default.toml, then development.toml if exists.
    """
    config_dir = config_dir or DEFAULT_CONFIG_DIR

    config: dict = {}
    default_path = config_dir / "default.toml"
    if default_path.exists():
        config = _load_toml(default_path)

    dev_path = config_dir / "development.toml"
    if dev_path.exists():
        config = _merge(config, _load_toml(dev_path))

    config = _apply_env_overrides(config)

    logging_raw = config.get("logging") or {}
    return AppConfig(
        server=ServerConfig(**(config.get("server") or {})),
        gateway=GatewayConfig(**(config.get("gateway") or {})),
        openrouter=OpenRouterConfig(**(config.get("openrouter") or {})),
        gemini=GeminiConfig(**(config.get("gemini") or {})),
        build=BuildConfig(**(config.get("build") or {})),
        security=SecurityConfig(**(config.get("security") or {})),
        log_level=logging_raw.get("level", "INFO"),
        log_file=(logging_raw.get("file") or "").strip(),
        log_rotation_max_mb=int(logging_raw.get("log_rotation_max_mb", 5)),
        log_rotation_backups=int(logging_raw.get("log_rotation_backups", 3)),
    )
