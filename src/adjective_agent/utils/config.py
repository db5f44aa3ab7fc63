"""Configuration file management.

Config is stored in TOML format at:
- macOS/Linux: ~/.config/adjective-agent/config.toml
- Windows: %APPDATA%\\adjective-agent\\config.toml

Usage:
    config = load_config()
    max_words = get_value(config, "analysis.max_adjectives", 10)
"""

import copy
import logging
import platform
from pathlib import Path
from typing import Any

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # type: ignore

import tomli_w

from ..constants import APP_NAME, DEFAULT_MAX_ADJECTIVES, Context
from ..exceptions import ConfigError

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get platform-appropriate config directory."""
    if platform.system() == "Windows":
        base = Path.home() / "AppData" / "Roaming"
    else:
        base = Path.home() / ".config"
    return base / APP_NAME


def get_config_path() -> Path:
    """Get path to config file."""
    return get_config_dir() / "config.toml"


DEFAULT_CONFIG = {
    "analysis": {
        "max_adjectives": DEFAULT_MAX_ADJECTIVES,
        "include_categories": True,
        "enhance_description": True,
        "learn_from_input": True,
        "expand_vocabulary": True,
    },
    "learning": {
        "default_context": Context.GENERAL.value,
        "custom_context": Context.CUSTOM.value,
    },
    "storage": {
        # Empty means the per-app default (~/.adjective-agent/data/vocabulary.json)
        "snapshot": "",
    },
}



def _with_defaults(config: dict) -> dict:
    """Fill tables and keys missing from a user config with the defaults."""
    merged = copy.deepcopy(DEFAULT_CONFIG)
    for table, values in config.items():
        if isinstance(values, dict) and isinstance(merged.get(table), dict):
            merged[table].update(values)
        else:
            merged[table] = values
    return merged


def load_config() -> dict:
    """Load configuration from file.

    Writes the default config on first use. A file that only sets some
    keys is completed from ``DEFAULT_CONFIG``.

    Returns:
        Dict with configuration values

    Raises:
        ConfigError: If config file is malformed
    """
    config_path = get_config_path()

    if not config_path.exists():
        save_config(DEFAULT_CONFIG)
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        with open(config_path, "rb") as f:
            return _with_defaults(tomllib.load(f))
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Failed to load config: {e}") from e


def save_config(config: dict) -> None:
    """Save configuration to file.

    Args:
        config: Dict with configuration values
    """
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)
    logger.debug(f"Saved config to {config_path}")


def get_value(config: dict, key: str, default: Any = None) -> Any:
    """Read ``table.key`` from a config dict.

    Example:
        >>> get_value({"analysis": {"max_adjectives": 5}}, "analysis.max_adjectives")
        5
    """
    table, _, name = key.partition(".")
    values = config.get(table)
    if not name or not isinstance(values, dict):
        return default
    return values.get(name, default)


def set_value(config: dict, key: str, value: Any) -> None:
    """Set ``table.key`` in a config dict, checked against the defaults.

    Only keys present in ``DEFAULT_CONFIG`` can be set, and the value must
    have the same type as the default (an int setting rejects ``true``).

    Raises:
        ConfigError: If the key is unknown or the value has the wrong type

    Example:
        >>> config = {}
        >>> set_value(config, "storage.snapshot", "/tmp/vocab.json")
        >>> config
        {'storage': {'snapshot': '/tmp/vocab.json'}}
    """
    table, _, name = key.partition(".")
    if name not in DEFAULT_CONFIG.get(table, {}):
        raise ConfigError(f"Unknown config key: {key}")

    expected = type(DEFAULT_CONFIG[table][name])
    if type(value) is not expected:
        raise ConfigError(f"{key} expects {expected.__name__}, got {type(value).__name__}")

    config.setdefault(table, {})[name] = value
