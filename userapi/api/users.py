"""User management endpoints. Every route requires a bearer token."""

from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from userapi.api.user_models import (
    DeleteResponse,
    UserData,
    UserListData,
    UserListResponse,
    UserResponse,
)
from userapi.auth.dependencies import get_current_user
from userapi.database.database import get_db
from userapi.database.user_repository import UserRepository
from userapi.models.user import AGE_MAX, UserCreate, UserUpdate
from userapi.services.user_directory import UserDirectory

router = APIRouter(
    prefix="/users",
    tags=["users"],
    dependencies=[Depends(get_current_user)],
)


def get_user_directory(db: Session = Depends(get_db)) -> UserDirectory:
    return UserDirectory(UserRepository(db))


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, directory: UserDirectory = Depends(get_user_directory)):
    """Create a user."""
    user = directory.create(payload)
    return UserResponse(data=UserData(user=user))


@router.get("", response_model=UserListResponse)
def list_users(
    page: int = Query(0, ge=0, description="Zero-based page number"),
    size: int = Query(10, ge=1, description="Users per page"),
    age: Optional[int] = Query(None, ge=0, le=AGE_MAX, description="Only users with exactly this age"),
    directory: UserDirectory = Depends(get_user_directory),
):
    """List users page by page, optionally filtered by age."""
    users = directory.list(page=page, size=size, age=age)
    return UserListResponse(results=len(users), data=UserListData(users=users))


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: str, directory: UserDirectory = Depends(get_user_directory)):
    """Get a single user."""
    user = directory.get_by_id(user_id)
    return UserResponse(data=UserData(user=user))


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: str,
    payload: UserUpdate,
    directory: UserDirectory = Depends(get_user_directory),
):
    """Update name, email and/or age of a user."""
    user = directory.update(user_id, payload)
    return UserResponse(data=UserData(user=user))


@router.delete("/{user_id}", response_model=DeleteResponse)
def delete_user(user_id: str, directory: UserDirectory = Depends(get_user_directory)):
    """Delete a user."""
    directory.delete(user_id)
    return DeleteResponse(message=f"User with ID {user_id} has been deleted successfully.")
