"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FileRepositoryError(BaseAppError):
    """Exception raised when a directory cannot be enumerated."""

    pass


class GrantStoreError(BaseAppError):
    """Exception raised when the persisted access grants cannot be read."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
