"""Constants for license-files."""

# Exit codes
EXIT_FOUND = 0  # At least one license file matched
EXIT_NOT_FOUND = 1  # No filename matched any rule
EXIT_ERROR = 2  # Failed due to error

# Namespace for every logger created by the package
LOGGER_NAME = "license_files"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
FILE_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
