"""Utility functions for adjective-agent.

This module contains:
- Config file management
"""

from .config import get_config_path, get_value, load_config, save_config, set_value

__all__ = [
    "load_config",
    "save_config",
    "get_value",
    "set_value",
    "get_config_path",
]
