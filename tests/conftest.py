"""Pytest configuration and fixtures."""

import os

# Settings are read once at import time, so configure them before importing the app.
if os.getenv("TEST_DATABASE_URL"):
    # Running against PostgreSQL (e.g. in Docker)
    SQLALCHEMY_DATABASE_URL = os.environ["TEST_DATABASE_URL"]
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

os.environ["DATABASE_URL"] = SQLALCHEMY_DATABASE_URL
os.environ["JWT_SECRET"] = "test-secret-key"  # noqa: S105
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ENVIRONMENT"] = "test"
os.environ.pop("UNIFY_LOGIN_ERRORS", None)
os.environ.pop("COOKIE_SECURE", None)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from authdemo.database import Base, engine, get_db  # noqa: E402
from authdemo.main import app  # noqa: E402
from authdemo.services.passwords import PasswordHasher  # noqa: E402
from authdemo.services.tokens import TokenService  # noqa: E402

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TEST_SECRET = "test-secret-key"  # noqa: S105
TEST_PASSWORD = "Testpass1!"  # noqa: S105


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        # For PostgreSQL, create the test database
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    from authdemo import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    yield


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


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def tokens():
    return TokenService(secret=TEST_SECRET)


@pytest.fixture
def registered_user(client):
    """Register a user through the API and return its public fields."""
    response = client.post(
        "/api/auth/sign-up",
        json={"email": "test@example.com", "password": TEST_PASSWORD, "name": "Test User"},
    )
    assert response.status_code == 201
    # Start each test without the sign-up session
    client.cookies.clear()
    return response.json()["user"]
