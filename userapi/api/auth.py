"""Authentication endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from userapi.api.auth_models import LoginRequest, LoginResponse, TokenData
from userapi.database.database import get_db
from userapi.database.user_repository import UserRepository
from userapi.services import auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    """Exchange a registered email for a bearer token."""
    token = auth_service.login(UserRepository(db), payload.email)
    return LoginResponse(data=TokenData(token=token))
