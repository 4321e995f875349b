"""Login: exchange a known email for a bearer token."""

import logging

from userapi.auth.jwt import create_access_token
from userapi.database.user_repository import UserRepository
from userapi.errors import AuthError, AuthFailure
from userapi.models.user import normalize_email

logger = logging.getLogger(__name__)


def login(repository: UserRepository, email: str) -> str:
    """Issue an access token for the user registered under `email`.

    Raises:
        AuthError: If no user has that email
    """
    user = repository.get_by_email(normalize_email(email))
    if not user:
        logger.info("Login rejected: unknown email")
        raise AuthError(AuthFailure.UNKNOWN_CREDENTIALS)

    logger.debug(f"Issuing token for user {user.id}")
    return create_access_token(user.id)
