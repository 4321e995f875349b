"""Tests for UserRepository CRUD operations."""

import pytest
from datetime import datetime, timedelta, timezone
from sqlalchemy.exc import IntegrityError


class TestUserRepository:
    """Test UserRepository CRUD operations."""

    def test_create_assigns_id_and_timestamps(self, user_repository):
        """Test creating a user assigns an ID and sets both timestamps."""
        now = datetime.now(timezone.utc)
        created = user_repository.create(name="Ada", email="ada@example.com", age=36, now=now)

        assert created.id
        assert created.name == "Ada"
        assert created.email == "ada@example.com"
        assert created.age == 36
        assert created.created_at == now
        assert created.updated_at == now

    def test_ids_are_unique(self, user_repository):
        now = datetime.now(timezone.utc)
        a = user_repository.create(name="A", email="a@example.com", age=None, now=now)
        b = user_repository.create(name="B", email="b@example.com", age=None, now=now)

        assert a.id != b.id

    def test_get_and_get_by_email(self, user_repository):
        created = user_repository.create(name="Ada", email="ada@example.com", age=None, now=datetime.now(timezone.utc))

        assert user_repository.get(created.id).email == "ada@example.com"
        assert user_repository.get_by_email("ada@example.com").id == created.id

    def test_get_nonexistent_user(self, user_repository):
        """Test retrieving a nonexistent user returns None."""
        assert user_repository.get("nonexistent-id") is None
        assert user_repository.get_by_email("nobody@example.com") is None

    def test_unique_email_index_rejects_duplicates(self, user_repository):
        """The store itself refuses a second row with the same email."""
        now = datetime.now(timezone.utc)
        user_repository.create(name="A", email="dup@example.com", age=None, now=now)

        with pytest.raises(IntegrityError):
            user_repository.create(name="B", email="dup@example.com", age=None, now=now)

        # Session is usable again after the rollback
        assert user_repository.count() == 1

    def test_email_taken_by_other_excludes_self(self, user_repository):
        now = datetime.now(timezone.utc)
        a = user_repository.create(name="A", email="a@example.com", age=None, now=now)
        b = user_repository.create(name="B", email="b@example.com", age=None, now=now)

        assert user_repository.email_taken_by_other("a@example.com", a.id) is False
        assert user_repository.email_taken_by_other("a@example.com", b.id) is True
        assert user_repository.email_taken_by_other("free@example.com", a.id) is False

    def test_list_offset_limit_in_creation_order(self, user_repository):
        start = datetime.now(timezone.utc)
        for i in range(5):
            user_repository.create(
                name=f"User {i}",
                email=f"user{i}@example.com",
                age=None,
                now=start + timedelta(seconds=i),
            )

        page = user_repository.list(offset=2, limit=2)
        assert [u.name for u in page] == ["User 2", "User 3"]
        assert user_repository.list(offset=10, limit=2) == []

    def test_list_filters_by_exact_age(self, user_repository):
        now = datetime.now(timezone.utc)
        user_repository.create(name="A", email="a@example.com", age=30, now=now)
        user_repository.create(name="B", email="b@example.com", age=31, now=now)
        user_repository.create(name="C", email="c@example.com", age=None, now=now)

        result = user_repository.list(offset=0, limit=10, age=30)
        assert [u.name for u in result] == ["A"]

    def test_update_applies_fields_and_refreshes_updated_at(self, user_repository):
        created_at = datetime.now(timezone.utc) - timedelta(hours=1)
        created = user_repository.create(name="A", email="a@example.com", age=20, now=created_at)

        later = datetime.now(timezone.utc)
        updated = user_repository.update(created.id, {"name": "A2", "age": None}, now=later)

        assert updated.name == "A2"
        assert updated.age is None
        assert updated.email == "a@example.com"
        assert updated.created_at == created_at
        assert updated.updated_at == later

    def test_update_nonexistent_user_returns_none(self, user_repository):
        assert user_repository.update("nonexistent-id", {"name": "X"}, now=datetime.now(timezone.utc)) is None

    def test_delete(self, user_repository):
        created = user_repository.create(name="A", email="a@example.com", age=None, now=datetime.now(timezone.utc))

        assert user_repository.delete(created.id) is True
        assert user_repository.get(created.id) is None
        assert user_repository.delete(created.id) is False
