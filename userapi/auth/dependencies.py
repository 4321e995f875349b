"""FastAPI dependencies for authentication."""

import logging
from typing import Optional
from fastapi import Depends, Header
from sqlalchemy.orm import Session

from userapi.database.database import get_db
from userapi.database.user_repository import UserRepository
from userapi.auth.jwt import verify_access_token
from userapi.errors import AuthError, AuthFailure
from userapi.models.user import User

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def extract_bearer_token(authorization: Optional[str]) -> str:
    """Return the token from a literal `Bearer <token>` header value."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise AuthError(AuthFailure.MISSING_TOKEN)
    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise AuthError(AuthFailure.MISSING_TOKEN)
    return token


def get_current_user(
    authorization: Optional[str] = Header(default=None),
    db: Session = Depends(get_db)
) -> User:
    """Get current authenticated user from JWT token.

    Checks run in order and stop at the first failure: header present and
    well-formed, token valid and unexpired, user still exists.

    Args:
        authorization: Raw Authorization header
        db: Database session

    Returns:
        User object

    Raises:
        AuthError: If the header is missing, the token is invalid, or the user is gone
    """
    token = extract_bearer_token(authorization)
    user_id = verify_access_token(token)

    user = UserRepository(db).get(user_id)
    if not user:
        logger.info(f"Rejected token for deleted user {user_id}")
        raise AuthError(AuthFailure.USER_GONE)

    return user
