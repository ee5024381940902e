import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SESSION_SECRET", "test-session-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from notes_database.init_db import init_db
from notes_database.models import Base
from notes_database.users import create_user
from notes_web.dependencies import get_db
from notes_web.main import create_app

@pytest.fixture(scope="session")
def sqlite_url():
    """Fixture to provide a SQLite in-memory database URL for testing."""
    return "sqlite://"

@pytest.fixture(scope="session")
def engine(sqlite_url):
    """Fixture for a persistent in-memory SQLite engine for the test session."""
    return create_engine(
        sqlite_url, connect_args={"check_same_thread": False}, poolclass=StaticPool
    )

@pytest.fixture
def tables(engine):
    """Create tables for each test and drop them afterwards."""
    init_db(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture
def db_session(engine, tables):
    """Provide a SQLAlchemy session for isolated test usage."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()

@pytest.fixture
def app(db_session):
    """Fresh application with the test DB dependency override."""
    application = create_app()

    def override_get_db():
        yield db_session

    application.dependency_overrides[get_db] = override_get_db
    return application

@pytest.fixture
def client(app):
    """Fixture for FastAPI TestClient."""
    with TestClient(app) as c:
        yield c

@pytest.fixture
def user_data():
    """Returns default user data for sign-up."""
    return {
        "email": "alice@example.com",
        "password": "alicepassword123"
    }

@pytest.fixture
def second_user_data():
    """Returns a second user's data."""
    return {
        "email": "bob@example.com",
        "password": "bobpassword456"
    }

@pytest.fixture
def user(db_session, user_data):
    return create_user(db_session, user_data["email"], user_data["password"])

@pytest.fixture
def second_user(db_session, second_user_data):
    return create_user(db_session, second_user_data["email"], second_user_data["password"])

def log_in(client, email, password):
    """Helper for logging in through the login form."""
    r = client.post("/login", data={"email": email, "password": password}, follow_redirects=False)
    assert r.status_code == 302
    return r

@pytest.fixture
def logged_in_client(client, user, user_data):
    """Client carrying a session cookie for the default user."""
    log_in(client, user_data["email"], user_data["password"])
    return client
