"""Default configuration values for license-files."""

from __future__ import annotations

from license_files.models.config import FinderConfig

# Default configuration file names to search for
DEFAULT_CONFIG_NAMES = [".license-files.yaml", ".license-files.yml"]


def get_default_config() -> FinderConfig:
    """Get the default configuration.

    Returns:
        FinderConfig with all defaults (all fields None).
    """
    return FinderConfig()
