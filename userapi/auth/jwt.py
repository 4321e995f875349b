"""JWT token generation and validation for userapi.

Tokens are stateless: validity is decided by signature and expiry alone, so a
token cannot be revoked before it expires.
"""

import os
import jwt
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict
from dotenv import load_dotenv

from userapi.errors import AuthError, AuthFailure

load_dotenv()

# JWT configuration
JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "change-me-in-production")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_EXPIRATION_HOURS = int(os.getenv("JWT_EXPIRATION_HOURS", "24"))


def create_access_token(user_id: str, expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token for a user.

    Args:
        user_id: User ID to encode in token
        expires_delta: Token lifetime (defaults to JWT_EXPIRATION_HOURS)

    Returns:
        Encoded JWT token string
    """
    if expires_delta is None:
        expires_delta = timedelta(hours=JWT_EXPIRATION_HOURS)
    now = datetime.now(timezone.utc)
    payload = {
        "id": user_id,
        "exp": now + expires_delta,
        "iat": now,  # Issued at
    }
    token = jwt.encode(payload, JWT_SECRET_KEY, algorithm=JWT_ALGORITHM)
    return token


def decode_access_token(token: str) -> Optional[Dict]:
    """Decode and validate a JWT access token.

    Args:
        token: JWT token string to decode

    Returns:
        Decoded token payload (dict with 'id' key for user_id), or None if invalid
    """
    try:
        payload = jwt.decode(token, JWT_SECRET_KEY, algorithms=[JWT_ALGORITHM])
        return payload
    except jwt.ExpiredSignatureError:
        return None
    except jwt.InvalidTokenError:
        return None


def verify_access_token(token: str) -> str:
    """Return the user ID a valid token was issued for.

    Raises:
        AuthError: If the token is malformed, tampered with, expired, or has no user ID
    """
    payload = decode_access_token(token)
    user_id = payload.get("id") if payload else None
    if not user_id or not isinstance(user_id, str):
        raise AuthError(AuthFailure.INVALID_OR_EXPIRED)
    return user_id
