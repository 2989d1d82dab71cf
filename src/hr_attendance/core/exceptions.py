from __future__ import annotations

from .enums import ErrorKind


class DomainError(Exception):
    """Base exception for business rule violations."""

    kind = ErrorKind.INVALID_ARGUMENT
    status_code = 400

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""


class NotFoundError(DomainError):
    """Raised when a referenced employee does not exist."""

    kind = ErrorKind.NOT_FOUND
    status_code = 404


class ConflictError(DomainError):
    """Raised when a uniqueness constraint is violated."""

    kind = ErrorKind.CONFLICT
    status_code = 400


class DuplicateRecordError(ConflictError):
    """Raised by repositories when an insert hits a unique key."""
