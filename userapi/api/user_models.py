"""Response envelopes for user endpoints."""

from typing import List
from pydantic import BaseModel

from userapi.models.user import User


class UserData(BaseModel):
    user: User


class UserResponse(BaseModel):
    """Single user envelope."""
    status: str = "success"
    data: UserData


class UserListData(BaseModel):
    users: List[User]


class UserListResponse(BaseModel):
    """User page envelope; `results` is the size of this page, not a total."""
    status: str = "success"
    results: int
    data: UserListData


class DeleteResponse(BaseModel):
    status: str = "success"
    message: str
