"""Optional user configuration from ~/.config/pagekit/config.toml."""

import tomllib
from pathlib import Path

from pagekit.daterange import DEFAULT_FORMAT, DEFAULT_RANGE_FORMATS
from pagekit.utils import DEFAULT_AFTER

CONFIG_PATH = Path.home() / ".config" / "pagekit" / "config.toml"

DEFAULTS = {
    "format": DEFAULT_FORMAT,
    "range_tolerance": 0,
    "timezone": "UTC",
    "truncate_suffix": DEFAULT_AFTER,
    "range_formats": {},
}


def load() -> dict:
    """Load user config, falling back to defaults for missing keys.

    ``range_formats`` holds overrides only; the full set is
    ``DEFAULT_RANGE_FORMATS`` with these merged over it.
    """
    config = dict(DEFAULTS)
    config["range_formats"] = {}
    if CONFIG_PATH.exists():
        try:
            user_config = tomllib.loads(CONFIG_PATH.read_text())
        except (tomllib.TOMLDecodeError, OSError):
            return config
        overrides = user_config.pop("range_formats", {})
        config.update(user_config)
        if isinstance(overrides, dict):
            config["range_formats"] = {
                k: v for k, v in overrides.items() if k in DEFAULT_RANGE_FORMATS
            }
    return config
