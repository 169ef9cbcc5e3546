"""Configuration loader for syllabreak.

Loads defaults from config.json at project root, with hardcoded fallbacks.
SYLLABREAK_DICTIONARIES overrides the dictionary directory.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    "language": "en_US",
    "left": 2,
    "right": 2,
    "hyphen": "-",
    "dictionaries_dir": "dictionaries",
    "cache_dir": "sources",
    "verbose": False,
}

DICTIONARIES_ENV = "SYLLABREAK_DICTIONARIES"

_config: dict[str, Any] | None = None


def _find_config() -> Path | None:
    """Find config.json by walking up from current file."""
    paths = [
        Path(__file__).parent.parent.parent / "config.json",  # python/syllabreak -> root
        Path.cwd() / "config.json",
    ]
    for path in paths:
        if path.exists():
            return path
    return None


def load() -> dict[str, Any]:
    """Load configuration from config.json or use fallbacks."""
    global _config
    if _config is not None:
        return _config

    config_path = _find_config()
    if config_path:
        try:
            with open(config_path) as f:
                _config = json.load(f)
                return _config
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable config %s: %s", config_path, e)

    # Fallback
    _config = {"defaults": FALLBACK_DEFAULTS}
    return _config


def reset() -> None:
    """Forget the loaded configuration."""
    global _config
    _config = None


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    cfg = load()
    return cfg.get("defaults", {}).get(key, fallback)


# Convenience accessors
def default_left() -> int:
    return get_default("left", FALLBACK_DEFAULTS["left"])


def default_right() -> int:
    return get_default("right", FALLBACK_DEFAULTS["right"])


def default_hyphen() -> str:
    return get_default("hyphen", FALLBACK_DEFAULTS["hyphen"])


def default_dictionaries_dir() -> str:
    return os.environ.get(DICTIONARIES_ENV) or get_default(
        "dictionaries_dir", FALLBACK_DEFAULTS["dictionaries_dir"]
    )


def default_cache_dir() -> str:
    return get_default("cache_dir", FALLBACK_DEFAULTS["cache_dir"])


def default_language() -> str:
    return get_default("language", FALLBACK_DEFAULTS["language"])
