# tests/conftest.py

import os

# Point the application's own engine at a throwaway database before any
# app module is imported.
os.environ.setdefault("DATABASE_URL_LOCAL", "sqlite://")

import pytest
from unittest.mock import AsyncMock
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from starlette.testclient import TestClient

from app.main import app
from app.api import deps
from app.db.session import get_db
from app.models import Base
from app.web.api_client import ApiClient
from app.web.main import create_app


# --- Test Database Setup ---
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)


# --- Mock Dependencies Setup ---
class MockTokenPayload:
    def __init__(self, sub="user_123"):
        self.sub = sub


def override_get_current_user():
    return MockTokenPayload()


# --- Back-end Client Fixtures ---
@pytest.fixture(scope="function")
def client(db_session):
    """
    A TestClient for the back-end API using the test database, with
    authentication mocked out.
    """

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[deps.get_current_user] = override_get_current_user

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def anonymous_client(db_session):
    """Back-end TestClient with the real authentication dependency."""

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


# --- Front-end Fixtures ---
@pytest.fixture(scope="function")
def api_client_mock():
    """An ApiClient stand-in; every method is an AsyncMock."""
    mock = AsyncMock(spec=ApiClient)
    mock.get_attendee.return_value = None
    mock.get_sessions.return_value = []
    return mock


@pytest.fixture(scope="function")
def site_client(api_client_mock):
    """A TestClient for the front-end site backed by api_client_mock."""
    site = create_app(lambda: api_client_mock)
    with TestClient(site) as c:
        yield c
