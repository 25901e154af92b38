"""Custom exceptions for license-files."""


class LicenseFilesError(Exception):
    """Base exception for all license-files errors."""

    pass


class ConfigurationError(LicenseFilesError):
    """Exception raised when configuration is invalid."""

    pass


class ListingError(LicenseFilesError):
    """Exception raised when a directory cannot be listed."""

    pass


class InvalidFilenameError(LicenseFilesError, TypeError):
    """Exception raised when matcher input is not a sequence of strings."""

    pass
