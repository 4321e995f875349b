"""Data models for userapi."""

from userapi.models.user import AGE_MAX, User, UserCreate, UserUpdate, normalize_email

__all__ = [
    "AGE_MAX",
    "User",
    "UserCreate",
    "UserUpdate",
    "normalize_email",
]
