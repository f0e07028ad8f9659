"""Shared test fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch):
    """Provide default settings for all tests."""
    monkeypatch.setenv("CSP_LOG_JSON", "false")
    monkeypatch.setenv("CSP_LOG_LEVEL", "debug")
    monkeypatch.setenv("CSP_HEADER_PRESET", "balanced")

    # Reset cached settings and presets
    import csp_headers.config.loader as loader
    import csp_headers.presets as presets
    loader._settings = None
    presets.reset_presets_cache()
    yield
    loader._settings = None
    presets.reset_presets_cache()
