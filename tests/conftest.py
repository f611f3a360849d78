"""Shared test fixtures for authgate."""

import sqlite3

import pytest

from authgate.auth import service, token as auth_token
from authgate.auth.schemas import RegistrationInput
from authgate.config import Settings
from authgate.db import SCHEMA_PATH
from authgate.db.user import UserOperations
from authgate.main import create_app

TEST_SECRET_KEY = "test-secret-key-for-authgate-suite"
TEST_PASSWORD = "Abcdef12"


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a temp-file database with a fast bcrypt work factor."""
    return Settings(
        database_path=str(tmp_path / "authgate.db"),
        jwt_secret_key=TEST_SECRET_KEY,
        bcrypt_work_factor=4,
    )


@pytest.fixture
def app(settings):
    """Flask app built from the test settings."""
    app = create_app(settings)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    """Create test client for API testing."""
    with app.test_client() as client:
        yield client


@pytest.fixture
def test_db():
    """Create in-memory test database with schema."""
    db = sqlite3.connect(":memory:")
    db.row_factory = sqlite3.Row
    db.executescript(SCHEMA_PATH.read_text())
    db.commit()

    yield db

    db.close()


@pytest.fixture
def users(test_db):
    """User operations bound to the in-memory database."""
    return UserOperations(test_db)


@pytest.fixture
def registered_user(users):
    """Register Ann in the in-memory database.

    Returns a tuple of (identity, password).
    """
    data = RegistrationInput(name="Ann", email="ann@x.com", password=TEST_PASSWORD)
    result = service.register_user(users, data, work_factor=4)
    return result.value, TEST_PASSWORD


@pytest.fixture
def jwt_token(registered_user):
    """JWT token for the registered user, signed with the test secret."""
    identity, _password = registered_user
    return auth_token.generate_access_token(identity, TEST_SECRET_KEY)


@pytest.fixture
def auth_headers(jwt_token):
    """Authorization header carrying the test user's token."""
    return {"Authorization": f"Bearer {jwt_token}"}
