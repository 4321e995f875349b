"""Repository for User database operations."""

import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from userapi.models.user import User
from userapi.database.models import UserDB

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: str) -> Optional[User]:
        """Get user by ID."""
        user_db = self.db.query(UserDB).filter(UserDB.id == user_id).first()
        return user_db.to_pydantic() if user_db else None

    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by (normalized) email."""
        user_db = self.db.query(UserDB).filter(UserDB.email == email).first()
        return user_db.to_pydantic() if user_db else None

    def email_taken_by_other(self, email: str, user_id: str) -> bool:
        """Whether a user other than `user_id` holds `email`."""
        user_db = self.db.query(UserDB.id).filter(
            UserDB.email == email,
            UserDB.id != user_id,
        ).first()
        return user_db is not None

    def count(self) -> int:
        return self.db.query(UserDB).count()

    def list(self, offset: int, limit: int, age: Optional[int] = None) -> List[User]:
        """Get a window of users in creation order, optionally with an exact age."""
        query = self.db.query(UserDB)
        if age is not None:
            query = query.filter(UserDB.age == age)
        users_db = (
            query.order_by(UserDB.created_at, UserDB.id)
            .offset(offset)
            .limit(limit)
            .all()
        )
        return [user_db.to_pydantic() for user_db in users_db]

    def create(self, name: str, email: str, age: Optional[int], now) -> User:
        """Insert a new user; the ID is assigned by the model default."""
        try:
            user_db = UserDB(
                name=name,
                email=email,
                age=age,
                created_at=now,
                updated_at=now,
            )
            self.db.add(user_db)
            self.db.commit()
            self.db.refresh(user_db)
            logger.debug(f"Created user {user_db.id}: {user_db.email}")
            return user_db.to_pydantic()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to create user {email}: {type(e).__name__}: {str(e)}")
            raise

    def update(self, user_id: str, fields: dict, now) -> Optional[User]:
        """Apply `fields` to a user and refresh updated_at.

        Returns None if the user does not exist.
        """
        user_db = self.db.query(UserDB).filter(UserDB.id == user_id).first()
        if not user_db:
            return None

        for key, value in fields.items():
            setattr(user_db, key, value)
        user_db.updated_at = now

        try:
            self.db.commit()
            self.db.refresh(user_db)
            logger.debug(f"Updated user {user_id}: {sorted(fields)}")
            return user_db.to_pydantic()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to update user {user_id}: {type(e).__name__}: {str(e)}")
            raise

    def delete(self, user_id: str) -> bool:
        """Hard-delete a user. Returns False if the user does not exist."""
        user_db = self.db.query(UserDB).filter(UserDB.id == user_id).first()
        if not user_db:
            return False

        try:
            self.db.delete(user_db)
            self.db.commit()
            logger.debug(f"Deleted user {user_id}")
            return True
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to delete user {user_id}: {type(e).__name__}: {str(e)}")
            raise
