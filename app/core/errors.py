"""
Error kinds raised by the core.

The API layer maps each kind to a status code; the core never returns
errors as values.
"""


class MovieServiceError(Exception):
    """Base class for all errors raised by the movie service."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(MovieServiceError):
    """Malformed or missing input."""


class ConflictError(MovieServiceError):
    """The favorite already exists."""


class NotFoundError(MovieServiceError):
    """The requested favorite does not exist."""


class InternalError(MovieServiceError):
    """Persistence or upstream provider failure."""


class ConfigurationError(RuntimeError):
    """Required configuration is missing; fatal at startup."""
