"""Pytest fixtures and configuration for userapi tests."""

import os

# Point module-level configuration at throwaway values before userapi is imported.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret-key-for-userapi-tests-0123456789"
os.environ.pop("ENVIRONMENT", None)

import pytest
from datetime import datetime, timezone
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from userapi.database.database import Base
from userapi.database import models  # noqa: F401
from userapi.database.user_repository import UserRepository
from userapi.services.user_directory import UserDirectory
from userapi.auth.jwt import create_access_token


# Use in-memory SQLite database for tests
TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture(scope="function")
def db_session():
    """Create a database session for testing.

    Uses an in-memory SQLite database that is created fresh for each test.
    """
    # StaticPool keeps one connection so every session sees the same in-memory DB
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )

    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def user_repository(db_session: Session):
    """Create a UserRepository instance for testing."""
    return UserRepository(db_session)


@pytest.fixture
def user_directory(user_repository):
    """Create a UserDirectory instance for testing."""
    return UserDirectory(user_repository)


@pytest.fixture
def auth_user(user_repository):
    """A stored user that tests authenticate as."""
    return user_repository.create(
        name="Auth User",
        email="auth@example.com",
        age=None,
        now=datetime.now(timezone.utc),
    )


@pytest.fixture
def auth_token(auth_user):
    """Bearer token for `auth_user`."""
    return create_access_token(auth_user.id)


@pytest.fixture
def auth_headers(auth_token):
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def test_client(db_session: Session):
    """Create a FastAPI test client with overridden database dependency.

    Authentication is not overridden: requests go through the real auth gate.
    """
    from userapi.api.app import app
    from userapi.database.database import get_db

    # Override the get_db dependency to use our test database session
    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Don't close the session here, let the fixture handle it

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as client:
        yield client

    # Clean up dependency overrides
    app.dependency_overrides.clear()
