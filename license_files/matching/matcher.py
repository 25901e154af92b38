"""Select license files from a directory listing in precedence order."""

from __future__ import annotations

from typing import Iterable, Optional

from license_files.exceptions import InvalidFilenameError
from license_files.logger import get_logger
from license_files.matching.basename import comparison_key, extract_basename
from license_files.matching.precedence import BASENAMES_PRECEDENCE
from license_files.models.match import LicenseFileMatch, MatchResult

logger = get_logger(__name__)


def _validate_filenames(filenames: Iterable[str]) -> list[str]:
    """Materialise the input once and reject anything that is not a string.

    Args:
        filenames: Directory entries to check.

    Returns:
        The entries as a list, in input order.

    Raises:
        InvalidFilenameError: If the input is a bare string/bytes or any
            entry is not a string.
    """
    if isinstance(filenames, (str, bytes)):
        raise InvalidFilenameError(
            f"Expected a sequence of filenames, got a single {type(filenames).__name__}"
        )
    try:
        entries = list(filenames)
    except TypeError as e:
        raise InvalidFilenameError(
            f"Expected a sequence of filenames, got {type(filenames).__name__}"
        ) from e

    for index, entry in enumerate(entries):
        if not isinstance(entry, str):
            raise InvalidFilenameError(
                f"Filename at index {index} must be a string, "
                f"got {type(entry).__name__}"
            )
    return entries


def match_license_files(filenames: Iterable[str]) -> MatchResult:
    """Match filenames against the precedence table.

    Each rule scans the whole input in order and keeps only its first
    hit, so a filename can be selected by several rules but no rule
    contributes more than one filename.

    Args:
        filenames: Filenames from a single directory listing.

    Returns:
        MatchResult with at most one match per rule, in rule order.

    Raises:
        InvalidFilenameError: If the input is not a sequence of strings.
    """
    entries = _validate_filenames(filenames)
    keys = [comparison_key(entry) for entry in entries]

    matches: list[LicenseFileMatch] = []
    for rule in BASENAMES_PRECEDENCE:
        for position, key in enumerate(keys):
            if rule.matches(key):
                filename = entries[position]
                logger.debug("Rule %s matched %r", rule.name, filename)
                matches.append(
                    LicenseFileMatch(
                        filename=filename,
                        basename=extract_basename(filename),
                        rule=rule.name,
                        rank=rule.rank,
                        position=position,
                    )
                )
                break

    logger.debug("%d of %d rules matched", len(matches), len(BASENAMES_PRECEDENCE))
    return MatchResult(matches=matches, candidates_checked=len(entries))


def find_license_files(filenames: Iterable[str]) -> list[str]:
    """Find and list license files in precedence order.

    Args:
        filenames: Filenames from a single directory listing.

    Returns:
        Matching filenames, unmodified, ordered by rule precedence.
        Empty if nothing matches.

    Raises:
        InvalidFilenameError: If the input is not a sequence of strings.
    """
    return match_license_files(filenames).filenames


def best_license_file(filenames: Iterable[str]) -> Optional[str]:
    """Return the highest-precedence license file, or None."""
    best = match_license_files(filenames).best
    return best.filename if best else None
