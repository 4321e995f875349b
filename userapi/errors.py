"""Operational error taxonomy for userapi.

Errors carry a message and, for auth failures, a reason. They carry no HTTP
status: the mapping from error kind to response lives in `userapi.api.errors`.
"""

from enum import Enum


class AppError(Exception):
    """Base class for expected (operational) errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Malformed input."""


class ConflictError(AppError):
    """A write would violate email uniqueness."""


class NotFoundError(AppError):
    """The requested record does not exist."""


class AuthFailure(str, Enum):
    """Why a request could not be authenticated."""
    MISSING_TOKEN = "missing_token"
    INVALID_OR_EXPIRED = "invalid_or_expired"
    USER_GONE = "user_gone"
    UNKNOWN_CREDENTIALS = "unknown_credentials"


_AUTH_MESSAGES = {
    AuthFailure.MISSING_TOKEN: "Access denied. No token provided.",
    AuthFailure.INVALID_OR_EXPIRED: "Invalid or expired token.",
    AuthFailure.USER_GONE: "The user belonging to this token no longer exists.",
    AuthFailure.UNKNOWN_CREDENTIALS: "Incorrect email or password.",
}


class AuthError(AppError):
    """Missing, invalid or expired credentials."""

    def __init__(self, reason: AuthFailure, message: str = None):
        super().__init__(message or _AUTH_MESSAGES[reason])
        self.reason = reason
