"""Tests for YAML-backed CSP presets."""

from __future__ import annotations

import pytest

from csp_headers.exceptions import InvalidArgumentError
from csp_headers.header.content_security_policy import ContentSecurityPolicy
from csp_headers.presets import get_preset, load_presets, reset_presets_cache


class TestLoadPresets:
    def test_bundled_presets(self):
        presets = load_presets()
        assert {"strict", "balanced", "permissive"} <= set(presets)

    def test_cached_after_first_load(self):
        assert load_presets() is load_presets()

    def test_reset_cache(self):
        first = load_presets()
        reset_presets_cache()
        assert load_presets() is not first

    def test_missing_file_yields_empty(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CSP_PRESETS_FILE", str(tmp_path / "missing.yaml"))
        assert load_presets() == {}

    def test_custom_file(self, monkeypatch, tmp_path):
        path = tmp_path / "presets.yaml"
        path.write_text("locked: \"default-src 'none';\"\n")
        monkeypatch.setenv("CSP_PRESETS_FILE", str(path))
        assert load_presets() == {"locked": "default-src 'none';"}

    def test_empty_file(self, monkeypatch, tmp_path):
        path = tmp_path / "presets.yaml"
        path.write_text("")
        monkeypatch.setenv("CSP_PRESETS_FILE", str(path))
        assert load_presets() == {}


class TestGetPreset:
    def test_strict(self):
        csp = get_preset("strict")
        assert isinstance(csp, ContentSecurityPolicy)
        directives = csp.directives
        assert len(directives) == 10
        assert directives["default-src"] == ["'self'"]
        assert directives["frame-ancestors"] == ["'none'"]
        assert directives["object-src"] == ["'none'"]

    def test_balanced(self):
        directives = get_preset("balanced").directives
        assert directives["script-src"] == ["'self'", "'unsafe-inline'"]
        assert directives["img-src"] == ["'self'", "data:", "https:"]

    def test_permissive(self):
        directives = get_preset("permissive").directives
        assert directives["img-src"] == ["*", "data:", "blob:"]

    def test_default_from_settings(self, monkeypatch):
        monkeypatch.setenv("CSP_HEADER_PRESET", "strict")
        assert get_preset() == get_preset("strict")

    def test_returns_fresh_instance(self):
        first = get_preset("strict")
        first.set_directive("img-src", ["*"])
        assert get_preset("strict").directives["img-src"] == ["'self'"]

    def test_unknown_preset(self):
        with pytest.raises(InvalidArgumentError, match="nope"):
            get_preset("nope")

    def test_invalid_directive_in_preset(self, monkeypatch, tmp_path):
        path = tmp_path / "presets.yaml"
        path.write_text("broken: \"default-src 'self'; fake-src *;\"\n")
        monkeypatch.setenv("CSP_PRESETS_FILE", str(path))
        with pytest.raises(InvalidArgumentError):
            get_preset("broken")

    def test_preset_renders_header_line(self):
        line = get_preset("strict").to_string()
        assert line.startswith("Content-Security-Policy: default-src 'self'; script-src 'self';")
        assert line.endswith("object-src 'none';")
