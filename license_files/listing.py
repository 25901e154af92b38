"""Directory listing and ignore filtering that feed the matcher."""

from __future__ import annotations

import os
from pathlib import Path
from typing import NamedTuple, Union

from license_files.exceptions import ListingError
from license_files.logger import get_logger
from license_files.models.config import FinderConfig

logger = get_logger(__name__)


class FilterResult(NamedTuple):
    """Result of filtering a listing.

    Attributes:
        filenames: Filenames left after filtering, in listing order.
        ignored_count: Number of filenames that were ignored.
        ignored_names: Filenames that were ignored.
    """

    filenames: list[str]
    ignored_count: int
    ignored_names: list[str]


def list_directory(path: Union[str, Path]) -> list[str]:
    """List the direct entries of one directory, sorted by name.

    Subdirectories are not descended into. Sorting makes the "first
    match per rule" choice independent of the filesystem's own order.

    Args:
        path: Directory to list.

    Returns:
        Entry names (not paths), sorted.

    Raises:
        ListingError: If the path is missing, not a directory, or unreadable.
    """
    directory = Path(path)
    if not directory.exists():
        raise ListingError(f"Directory not found: '{directory}'")
    if not directory.is_dir():
        raise ListingError(f"Not a directory: '{directory}'")

    try:
        names = sorted(os.listdir(directory))
    except OSError as e:
        raise ListingError(f"Cannot list directory '{directory}': {e}") from e

    logger.debug("Listed %d entries in %s", len(names), directory)
    return names


def filter_ignored_files(filenames: list[str], config: FinderConfig) -> FilterResult:
    """Drop ignored filenames before matching.

    Matching is exact and case-sensitive: "LICENSE.old" in the config
    does not hide "license.old".

    Args:
        filenames: Filenames from a listing.
        config: Configuration with the ignored_files list.

    Returns:
        FilterResult with the remaining filenames and what was dropped.
        If ignored_files is None or empty, returns all filenames.
    """
    if not config.ignored_files:
        return FilterResult(filenames=list(filenames), ignored_count=0, ignored_names=[])

    ignored_set = set(config.ignored_files)
    kept: list[str] = []
    ignored_names: list[str] = []

    for name in filenames:
        if name in ignored_set:
            ignored_names.append(name)
        else:
            kept.append(name)

    if ignored_names:
        logger.info("Ignoring %d file(s): %s", len(ignored_names), ", ".join(ignored_names))

    return FilterResult(
        filenames=kept,
        ignored_count=len(ignored_names),
        ignored_names=ignored_names,
    )
