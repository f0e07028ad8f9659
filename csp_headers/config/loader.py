"""Env var config loading with pydantic-settings."""

from __future__ import annotations

from pathlib import Path

import structlog
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = structlog.get_logger()

_PRESETS_PATH = Path(__file__).parent / "header_presets.yaml"


class CspSettings(BaseSettings):
    """Library configuration, overridable through ``CSP_*`` env vars."""

    model_config = SettingsConfigDict(
        env_prefix="CSP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "info"
    log_json: bool = True

    # Presets
    header_preset: str = "balanced"
    presets_file: str = str(_PRESETS_PATH)

_settings: CspSettings | None = None


def get_settings() -> CspSettings:
    """Get or create the singleton settings instance."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def load_settings() -> CspSettings:
    """Load settings from env vars (env vars override model defaults)."""
    global _settings
    _settings = CspSettings()
    logger.info("config_loaded", header_preset=_settings.header_preset)
    return _settings
