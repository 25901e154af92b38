"""Locate and read `.license-files.yaml` settings."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from license_files.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from license_files.exceptions import ConfigurationError
from license_files.logger import get_logger
from license_files.models.config import FinderConfig

logger = get_logger(__name__)


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Return the settings file of a directory, if it has one.

    Names are tried in DEFAULT_CONFIG_NAMES order. When both spellings
    exist the later one is never read, which is logged as a warning.

    Args:
        start_dir: Directory to look in. Defaults to the working directory.

    Returns:
        Path of the first settings file present, or None.
    """
    search_dir = start_dir or Path.cwd()
    candidates = [search_dir / name for name in DEFAULT_CONFIG_NAMES]
    present = [path for path in candidates if path.exists()]
    if not present:
        return None

    chosen, shadowed = present[0], present[1:]
    for other in shadowed:
        logger.warning("Ignoring %s; %s takes precedence", other, chosen.name)
    return chosen


def load_config_file(path: Path) -> FinderConfig:
    """Read one settings file into a FinderConfig.

    Blank files and files holding only comments give the defaults.

    Args:
        path: Settings file to read.

    Returns:
        Validated FinderConfig.

    Raises:
        ConfigurationError: On read errors, bad YAML, a non-mapping
            document or invalid settings.
    """
    data = _read_settings(path)
    if data is None:
        logger.debug("%s holds no settings; using defaults", path)
        return get_default_config()

    try:
        config = FinderConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in '{path}': {_describe_errors(e)}"
        ) from e

    if config.ignored_files:
        logger.debug("%s ignores %d file name(s)", path, len(config.ignored_files))
    return config


def _read_settings(path: Path) -> dict[str, Any] | None:
    """Parse a settings file into a mapping (None when it is empty)."""
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file '{path}': {e}") from e

    try:
        data = yaml.safe_load(content) if content.strip() else None
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in '{path}': {e}") from e

    if data is not None and not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration in '{path}': "
            f"expected a mapping at root level, got {type(data).__name__}"
        )
    return data


def _describe_errors(error: ValidationError) -> str:
    """Join pydantic errors as `field: message; ...`."""
    parts: list[str] = []
    for err in error.errors():
        loc = ".".join(str(x) for x in err["loc"]) if err["loc"] else "root"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def load_config(config_path: str | None = None) -> FinderConfig:
    """Settings for one run: the given file, a discovered one, or defaults.

    Args:
        config_path: Explicit settings file (from --config).

    Returns:
        FinderConfig to use.

    Raises:
        ConfigurationError: If the file that was picked is invalid.
    """
    if config_path is not None:
        logger.info("Using configuration file %s", config_path)
        return load_config_file(Path(config_path))

    discovered = find_config_file()
    if discovered is None:
        logger.debug("No configuration file in %s; using defaults", Path.cwd())
        return get_default_config()

    logger.info("Using discovered configuration file %s", discovered)
    return load_config_file(discovered)
