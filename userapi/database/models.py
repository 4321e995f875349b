"""SQLAlchemy database models for userapi."""

from datetime import datetime, timezone
import uuid
from sqlalchemy import Column, String, Integer, DateTime

from userapi.database.database import Base


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to values read back naive (SQLite drops the offset)."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class UserDB(Base):
    """Database model for User."""

    __tablename__ = "users"

    # Primary key (assigned at insert, never reused)
    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))

    # User profile
    name = Column(String, nullable=False)
    # Unique index is the backstop for concurrent creates with the same email.
    email = Column(String, nullable=False, unique=True, index=True)
    age = Column(Integer, nullable=True, index=True)

    # Timestamps (UTC)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    def to_pydantic(self):
        """Convert database model to Pydantic model."""
        from userapi.models.user import User
        return User(
            id=self.id,
            name=self.name,
            email=self.email,
            age=self.age,
            created_at=as_utc(self.created_at),
            updated_at=as_utc(self.updated_at),
        )
