"""Request/response models for authentication endpoints."""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Request model for email login."""
    email: str = Field(..., min_length=1, description="Email address of a registered user")


class TokenData(BaseModel):
    token: str = Field(..., description="Bearer token for protected endpoints")


class LoginResponse(BaseModel):
    """Response model for authentication."""
    status: str = "success"
    data: TokenData
