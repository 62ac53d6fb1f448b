"""Errors raised by the domain and application layers."""


class NotifyError(Exception):
    """Base class for every error raised by the service."""


class ValidationError(NotifyError, ValueError):
    """A required field is missing or a value is outside its allowed set."""


class NotFoundError(NotifyError, LookupError):
    """A referenced post or notification does not exist."""


class StorageFailure(NotifyError):
    """A database round trip failed."""


__all__ = ["NotifyError", "ValidationError", "NotFoundError", "StorageFailure"]
