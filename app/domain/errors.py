"""Error taxonomy shared by the wish store, use cases and controllers."""

from __future__ import annotations


class WishError(Exception):
    """Base class for guestbook errors that map onto an HTTP status."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(WishError):
    """Raised when a submitted wish is missing a required field."""

    status_code = 400


class NotFoundError(WishError):
    """Raised when a delete targets a wish that does not exist."""

    status_code = 404


class StorageError(WishError):
    """Raised when the underlying database fails."""

    status_code = 500


__all__ = ["WishError", "ValidationError", "NotFoundError", "StorageError"]
