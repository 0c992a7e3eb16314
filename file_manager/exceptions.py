"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class UsageError(BaseAppError):
    """Exception raised for a wrong argument count or an unsupported parameter."""

    pass


class PathNotFoundError(BaseAppError):
    """Exception raised when a target is missing or is not the expected kind."""

    pass


class PathExistsError(BaseAppError):
    """Exception raised when the target of a creating operation already exists."""

    pass


class FileRepositoryError(BaseAppError):
    """Exception raised for file repository errors."""

    pass


class PartialMoveError(FileRepositoryError):
    """Exception raised when a move copied the file but could not remove the source."""

    def __init__(self, message: str, source: str, destination: str):
        super().__init__(message)
        self.source = source
        self.destination = destination


class CompressionError(FileRepositoryError):
    """Exception raised when a compression or decompression transform fails."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
