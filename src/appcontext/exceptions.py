"""Custom exceptions for appcontext."""


class AppContextError(Exception):
    """Base exception for all appcontext errors."""

    pass


class NotInitializedError(AppContextError):
    """Raised when a handle is required but none has been stored."""

    pass


class AlreadyInitializedError(AppContextError):
    """Raised when re-initialization is forbidden and a handle is already stored."""

    pass
