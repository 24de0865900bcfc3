"""
Domain Exceptions

Errors raised by the service layer. Each kind maps to one HTTP status in
the exception handlers registered by bookstore.main:

- ValidationError → 400 Bad Request (missing or malformed input)
- NotFoundError   → 404 Not Found (referenced entity absent)
- ConflictError   → 409 Conflict (uniqueness violation, e.g. duplicate ISBN)

Anything else is an internal error.
"""


class BookstoreError(Exception):
    """Base class for all catalog errors. Carries a human-readable message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(BookstoreError):
    """Raised when request data fails a catalog rule."""


class NotFoundError(BookstoreError):
    """Raised when a referenced entity does not exist."""


class ConflictError(BookstoreError):
    """Raised when a write would break a uniqueness constraint."""


__all__ = [
    "BookstoreError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
]
