"""User directory: CRUD over the user store with uniqueness and existence rules.

Email uniqueness is checked before every write that sets an email. The check
and the write are not atomic; two concurrent requests for the same email can
both pass the check, in which case the unique index on `users.email` rejects
the second write and it is reported as the same conflict.
"""

import logging
from typing import List, Optional
from sqlalchemy.exc import IntegrityError

from userapi.database.models import utcnow
from userapi.database.user_repository import UserRepository
from userapi.errors import ConflictError, NotFoundError
from userapi.models.user import User, UserCreate, UserUpdate

logger = logging.getLogger(__name__)

# SQL OFFSET/LIMIT are signed 64-bit on every supported backend.
MAX_ROW_OFFSET = 2**63 - 1

EMAIL_EXISTS_MESSAGE = "An account with this email already exists."
EMAIL_IN_USE_MESSAGE = "This email is already in use by another account."


class UserDirectory:
    """Create/read/update/delete users with conflict and not-found semantics."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    def create(self, data: UserCreate) -> User:
        """Create a user, rejecting an email that is already registered."""
        if self.repository.get_by_email(data.email):
            logger.info(f"Rejected create: email already registered ({data.email})")
            raise ConflictError(EMAIL_EXISTS_MESSAGE)

        try:
            return self.repository.create(
                name=data.name,
                email=data.email,
                age=data.age,
                now=utcnow(),
            )
        except IntegrityError:
            raise ConflictError(EMAIL_EXISTS_MESSAGE)

    def list(self, page: int = 0, size: int = 10, age: Optional[int] = None) -> List[User]:
        """Return up to `size` users starting at `page * size`.

        No total count is returned; callers page until a short result. Pages
        past the largest offset the store can address are empty.
        """
        offset = page * size
        if offset > MAX_ROW_OFFSET:
            return []
        return self.repository.list(offset=offset, limit=min(size, MAX_ROW_OFFSET), age=age)

    def get_by_id(self, user_id: str) -> User:
        user = self.repository.get(user_id)
        if not user:
            raise NotFoundError(f"No user found with ID: {user_id}")
        return user

    def update(self, user_id: str, patch: UserUpdate) -> User:
        """Apply the fields present in `patch`.

        The uniqueness check only runs when the patch carries an email; a
        record keeping its own email passes because it is excluded from the
        lookup.
        """
        fields = patch.model_dump(exclude_unset=True)

        if "email" in fields and self.repository.email_taken_by_other(fields["email"], user_id):
            logger.info(f"Rejected update of {user_id}: email in use ({fields['email']})")
            raise ConflictError(EMAIL_IN_USE_MESSAGE)

        try:
            user = self.repository.update(user_id, fields, now=utcnow())
        except IntegrityError:
            raise ConflictError(EMAIL_IN_USE_MESSAGE)

        if not user:
            raise NotFoundError(f"No user found with ID: {user_id} to update.")
        return user

    def delete(self, user_id: str) -> None:
        if not self.repository.delete(user_id):
            raise NotFoundError(f"No user found with ID: {user_id} to delete.")
