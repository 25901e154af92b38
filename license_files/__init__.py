"""license-files - find a directory's license documentation by filename."""

__version__ = "0.1.0"

from license_files.matching import (  # noqa: E402
    best_license_file,
    find_license_files,
    match_license_files,
)

__all__ = [
    "__version__",
    "best_license_file",
    "find_license_files",
    "match_license_files",
]
