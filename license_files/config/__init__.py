"""Configuration handling for license-files."""
from __future__ import annotations

from license_files.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from license_files.config.loader import (
    find_config_file,
    load_config,
    load_config_file,
)
from license_files.models.config import FinderConfig

__all__ = [
    "DEFAULT_CONFIG_NAMES",
    "FinderConfig",
    "find_config_file",
    "get_default_config",
    "load_config",
    "load_config_file",
]
