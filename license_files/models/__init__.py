"""Pydantic data models for license-files."""

from license_files.models.config import FinderConfig
from license_files.models.match import (
    FindOptions,
    LicenseFileMatch,
    MatchResult,
    Verbosity,
)
from license_files.models.rule import PrecedenceRule

__all__ = [
    "FindOptions",
    "FinderConfig",
    "LicenseFileMatch",
    "MatchResult",
    "PrecedenceRule",
    "Verbosity",
]
