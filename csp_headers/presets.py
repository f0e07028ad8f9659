"""Named Content-Security-Policy presets loaded from YAML."""

from __future__ import annotations

from pathlib import Path

import structlog
import yaml

from csp_headers.config.loader import get_settings
from csp_headers.exceptions import InvalidArgumentError
from csp_headers.header.content_security_policy import ContentSecurityPolicy

logger = structlog.get_logger()

# Cache loaded presets
_presets: dict | None = None


def load_presets() -> dict:
    """Load presets from the configured YAML file, caching after first load."""
    global _presets
    if _presets is not None:
        return _presets
    path = Path(get_settings().presets_file)
    if not path.exists():
        logger.error("header_presets_not_found", path=str(path))
        _presets = {}
        return _presets
    with open(path) as f:
        _presets = yaml.safe_load(f) or {}
    return _presets


def reset_presets_cache() -> None:
    """Reset the presets cache (for testing)."""
    global _presets
    _presets = None


def get_preset(name: str | None = None) -> ContentSecurityPolicy:
    """Build a fresh ContentSecurityPolicy from preset ``name``.

    Falls back to the configured ``header_preset`` when no name is given.
    """
    preset_name = name or get_settings().header_preset
    presets = load_presets()
    if preset_name not in presets:
        logger.warning("header_preset_unknown", preset=preset_name, available=sorted(presets))
        raise InvalidArgumentError(f"Unknown CSP preset {preset_name!r}")
    return ContentSecurityPolicy.from_field_value(str(presets[preset_name]))
