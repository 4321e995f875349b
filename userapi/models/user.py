"""User data models for userapi."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator


# Largest age the store accepts (signed 32-bit INTEGER).
AGE_MAX = 2**31 - 1


def normalize_email(email: str) -> str:
    """Canonical form used for storage and uniqueness checks."""
    return email.strip().lower()


class User(BaseModel):
    """User record as stored and returned over the wire."""

    id: str = Field(..., alias="_id", description="Unique user identifier (assigned at creation)")
    name: str = Field(..., description="User display name")
    email: str = Field(..., description="Normalized (trimmed, lowercase) email address")
    age: Optional[int] = Field(None, description="User age")
    created_at: datetime = Field(..., alias="createdAt", description="User creation timestamp")
    updated_at: datetime = Field(..., alias="updatedAt", description="User last update timestamp")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True


class UserCreate(BaseModel):
    """Payload accepted when creating a user."""

    name: str = Field(..., description="User display name")
    email: EmailStr = Field(..., description="User email address")
    age: Optional[int] = Field(None, ge=0, le=AGE_MAX, description="User age")

    class Config:
        """Pydantic configuration."""
        extra = "forbid"

    @field_validator("name")
    @classmethod
    def _validate_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("A user must have a name")
        return v

    @field_validator("email", mode="before")
    @classmethod
    def _normalize_email(cls, v):
        if isinstance(v, str):
            return normalize_email(v)
        return v


class UserUpdate(BaseModel):
    """Partial update; only fields present in the request are applied.

    `name` and `email` are required on the record, so they may be omitted
    but never set to null. `age` may be cleared with null.
    """

    name: Optional[str] = None
    email: Optional[EmailStr] = None
    age: Optional[int] = Field(None, ge=0, le=AGE_MAX)

    class Config:
        """Pydantic configuration."""
        extra = "forbid"

    @field_validator("name", mode="before")
    @classmethod
    def _validate_name(cls, v):
        if v is None:
            raise ValueError("A user must have a name")
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("A user must have a name")
        return v

    @field_validator("email", mode="before")
    @classmethod
    def _normalize_email(cls, v):
        if v is None:
            raise ValueError("A user must have an email")
        if isinstance(v, str):
            return normalize_email(v)
        return v
