"""Startup data initialization for userapi."""

import logging
import os
from typing import Optional
from sqlalchemy.orm import Session
from dotenv import load_dotenv

from userapi.database.models import utcnow
from userapi.database.user_repository import UserRepository
from userapi.models.user import User, normalize_email

load_dotenv()

logger = logging.getLogger(__name__)

SEED_ADMIN_EMAIL = os.getenv("SEED_ADMIN_EMAIL", "admin@example.com")
SEED_ADMIN_NAME = os.getenv("SEED_ADMIN_NAME", "Admin User")
SEED_ADMIN_AGE = 99


def seed_admin_user(db: Session) -> Optional[User]:
    """Create the admin user when the store holds no users.

    Safe to call on every startup: once any user exists this is a no-op.

    Returns:
        The created admin User, or None if seeding was skipped
    """
    repository = UserRepository(db)
    if repository.count() > 0:
        return None

    logger.info("No users found, creating admin user")
    return repository.create(
        name=SEED_ADMIN_NAME,
        email=normalize_email(SEED_ADMIN_EMAIL),
        age=SEED_ADMIN_AGE,
        now=utcnow(),
    )
