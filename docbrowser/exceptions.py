"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FileRepositoryError(BaseAppError):
    """Exception raised for file repository errors."""

    pass


class ReadError(FileRepositoryError):
    """Exception raised when a directory or entry cannot be read."""

    pass


class DecodeError(FileRepositoryError):
    """Exception raised when a file is not valid text."""

    pass


class WriteError(FileRepositoryError):
    """Exception raised when file content cannot be written."""

    pass


class FileOperationError(FileRepositoryError):
    """Exception raised for copy, move, rename, delete and create failures."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
