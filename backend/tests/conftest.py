"""Pytest fixtures for the Lostify backend.

Provides reusable test fixtures for:
- In-memory SQLite database session, recreated for each test
- Test users (regular users and an admin)
- Test clients with the get_db dependency overridden, optionally
  authenticated with a JWT bearer token
- A factory for inserting posts

Usage:
    def test_admin_endpoint(admin_client):
        response = admin_client.get("/api/admin/users")
        assert response.status_code == 200
"""

import os

# Set environment variables BEFORE any application imports so that settings
# and the auth module pick them up
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ALLOWED_EMAIL_DOMAIN"] = "sst.scaler.com"
os.environ["LOG_JSON"] = "false"
os.environ.setdefault("PASSWORD_PEPPER", "test-pepper-secret-key-32-chars-long")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-key-256-bits-minimum-length-required-for-security")

from datetime import date, datetime, timedelta, timezone
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from lostify.auth.jwt import create_access_token
from lostify.auth.password import hash_password
from lostify.database import get_db
from lostify.models import Base, Post, User


# One shared in-memory connection so every session sees the same tables
test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

USER_PASSWORD = "UserP@ss123"
ADMIN_PASSWORD = "AdminP@ss123"


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test.

    Creates all tables before the test and drops them after.
    """
    Base.metadata.create_all(bind=test_engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


def _create_user(db: Session, username: str, password: str, role: str = "USER") -> User:
    user = User(
        username=username,
        email=f"{username}@sst.scaler.com",
        password_hash=hash_password(password),
        role=role,
        status="ACTIVE",
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture(scope="function")
def alice(db_session: Session) -> User:
    """Regular user who reports lost items."""
    return _create_user(db_session, "alice", USER_PASSWORD)


@pytest.fixture(scope="function")
def bob(db_session: Session) -> User:
    """Regular user who reports found items."""
    return _create_user(db_session, "bob", USER_PASSWORD)


@pytest.fixture(scope="function")
def admin_user(db_session: Session) -> User:
    """Create an ADMIN user for testing."""
    return _create_user(db_session, "admin", ADMIN_PASSWORD, role="ADMIN")


@pytest.fixture(scope="function")
def make_post(db_session: Session):
    """Factory inserting a post directly into the database.

    Posts get strictly increasing created_at values in call order unless
    `created_at` is given, so newest-first ordering is deterministic.
    """
    counter = {"n": 0}
    base_time = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def _make(owner: User, **fields) -> Post:
        counter["n"] += 1
        values = {
            "title": "Black Wallet",
            "description": "lost near gym",
            "category": "Wallets",
            "location": "Gym",
            "date": date(2024, 1, 1),
            "contact_info": "+91 98765 43210",
            "type": "lost",
            "status": "active",
            "created_at": base_time + timedelta(minutes=counter["n"]),
        }
        values.update(fields)
        post = Post(owner_id=owner.id, **values)
        db_session.add(post)
        db_session.commit()
        db_session.refresh(post)
        return post

    return _make


def _auth_headers(user: User) -> dict:
    token = create_access_token(
        user_id=user.id,
        username=user.username,
        role=user.role,
        email=user.email
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(scope="function")
def auth_headers():
    """Build an Authorization header carrying a valid token for a user."""
    return _auth_headers


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """Create an unauthenticated test client.

    Useful for public endpoints and the auth flow.
    """
    from lostify.main import app

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def alice_client(client: TestClient, alice: User) -> TestClient:
    """Test client authenticated as alice."""
    client.headers.update(_auth_headers(alice))
    return client


@pytest.fixture(scope="function")
def admin_client(client: TestClient, admin_user: User) -> TestClient:
    """Test client authenticated as the admin."""
    client.headers.update(_auth_headers(admin_user))
    return client
