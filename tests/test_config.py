"""Config loading tests."""

from __future__ import annotations

import os
from pathlib import Path

from csp_headers.config.loader import CspSettings, get_settings, load_settings


class TestCspSettings:
    """Test env var config loading."""

    def test_default_values(self, monkeypatch):
        """Settings have sensible defaults."""
        # Clear env vars that conftest sets, so we test true defaults
        for key in list(os.environ):
            if key.startswith("CSP_"):
                monkeypatch.delenv(key, raising=False)
        settings = CspSettings()
        assert settings.log_level == "info"
        assert settings.log_json is True
        assert settings.header_preset == "balanced"
        assert Path(settings.presets_file).name == "header_presets.yaml"

    def test_env_override(self, monkeypatch):
        """Environment variables override defaults."""
        monkeypatch.setenv("CSP_HEADER_PRESET", "strict")
        monkeypatch.setenv("CSP_LOG_LEVEL", "warning")
        settings = CspSettings()
        assert settings.header_preset == "strict"
        assert settings.log_level == "warning"

    def test_conftest_env_applied(self):
        settings = CspSettings()
        assert settings.log_json is False
        assert settings.log_level == "debug"

    def test_load_settings_returns_instance(self):
        """load_settings returns a CspSettings instance."""
        settings = load_settings()
        assert isinstance(settings, CspSettings)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_load_settings_replaces_singleton(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("CSP_HEADER_PRESET", "permissive")
        second = load_settings()
        assert second is not first
        assert get_settings() is second
        assert second.header_preset == "permissive"
