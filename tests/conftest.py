"""Pytest configuration and fixtures."""

import os

# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL", "").startswith("postgresql"):
    # Running in Docker - use a PostgreSQL test database next to the main one
    base_url, db_name = os.environ["DATABASE_URL"].rsplit("/", 1)
    SQLALCHEMY_DATABASE_URL = f"{base_url}/{db_name}_test"
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

# Settings are read once at import time, so configure them before importing the app
os.environ["DATABASE_URL"] = SQLALCHEMY_DATABASE_URL
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from supersync.database import Base, get_db  # noqa: E402
from supersync.main import app  # noqa: E402


class AuthHeaders(dict):
    """Dict subclass that also stores user_id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        # For PostgreSQL, create the test database
        from sqlalchemy_utils import create_database, database_exists

        # Create test database if it doesn't exist
        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    from supersync import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    yield
    # Don't drop database - just leave it for next run (each test cleans up after itself)


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _register(client, email: str, name: str, password: str = "secret1") -> AuthHeaders:
    """Register a user and return auth headers for them."""
    response = client.post(
        "/api/auth/register",
        json={"email": email, "password": password, "name": name},
    )
    assert response.status_code == 201
    data = response.json()
    return AuthHeaders(
        {"Authorization": f"Bearer {data['token']}"},
        user_id=data["user"]["id"],
        email=data["user"]["email"],
    )


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return _register(client, "test@example.com", "Test User")


@pytest.fixture
def other_auth_headers(client):
    """A second, unrelated user."""
    return _register(client, "other@example.com", "Other User")


@pytest.fixture
def make_user(client):
    """Factory fixture: register another user and get their auth headers."""

    def factory(email: str, name: str = "Extra User", password: str = "secret1") -> AuthHeaders:
        return _register(client, email, name, password)

    return factory


@pytest.fixture
def isolated_sessions():
    """Give every request its own session, for tests that send requests concurrently."""

    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield
    app.dependency_overrides.clear()
