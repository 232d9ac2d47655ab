"""
Pytest configuration and fixtures.

Every test gets a fresh in-memory SQLite database; the app's get_session
dependency is overridden to use it.
"""

import os

# Configure the app before it is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ["DEBUG"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from app.db.config import enable_sqlite_foreign_keys, get_session
from app.db.init import init_db
from app.main import app
from app.models.user import Role, User
from app.utils.security import create_access_token, hash_password

PASSWORD = "secret123"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    """HTTP client against the app, bound to the test database."""
    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_user(session: Session, email: str, role: Role = Role.USER) -> User:
    user = User(email=email, password_hash=hash_password(PASSWORD), role=role)
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def auth_headers(user: User) -> dict:
    token = create_access_token(user.email, user.id, user.role.value)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice(session):
    return make_user(session, "alice@example.com")


@pytest.fixture
def bob(session):
    return make_user(session, "bob@example.com")


@pytest.fixture
def alice_headers(alice):
    return auth_headers(alice)


@pytest.fixture
def bob_headers(bob):
    return auth_headers(bob)


@pytest.fixture
def headers_for():
    """Return a function building bearer headers for a user."""
    return auth_headers
