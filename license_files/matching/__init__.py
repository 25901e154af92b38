"""License file matching for license-files."""
from license_files.matching.basename import comparison_key, extract_basename
from license_files.matching.matcher import (
    best_license_file,
    find_license_files,
    match_license_files,
)
from license_files.matching.precedence import BASENAMES_PRECEDENCE, get_rule

__all__ = [
    "BASENAMES_PRECEDENCE",
    "best_license_file",
    "comparison_key",
    "extract_basename",
    "find_license_files",
    "get_rule",
    "match_license_files",
]
