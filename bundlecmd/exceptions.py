"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class FileOperationError(BaseAppError):
    """Exception raised for filesystem operation errors."""

    pass


class IniFileError(BaseAppError):
    """Exception raised for INI configuration file errors."""

    pass


class HexEditError(BaseAppError):
    """Exception raised for binary patch errors."""

    pass


class DownloadError(BaseAppError):
    """Exception raised for download errors."""

    pass


class ArchiveError(BaseAppError):
    """Exception raised for archive extraction errors."""

    pass


class PlaceholderError(BaseAppError):
    """Exception raised when a data-source placeholder cannot be resolved."""

    pass


class PackageError(BaseAppError):
    """Exception raised for command package loading errors."""

    pass


class DeviceControlError(BaseAppError):
    """Exception raised for device power control errors."""

    pass
