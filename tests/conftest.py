"""
Shared fixtures for all tests in the project.

The environment is set before the application is imported because settings
are read at import time.
"""

import os

os.environ.setdefault("JWT_SECRET", "test-secret-key-for-task-tracker-0123456789")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("TESTING_MODE", "true")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from task_tracker.auth.tokens import TokenManager
from task_tracker.config.database import Base, get_db
from task_tracker.main import app
from task_tracker.models.task import Task  # noqa: F401  registers the table

OWNER_ID = "user-1"
OTHER_ID = "user-2"


@pytest.fixture
def db_engine():
    # In-memory SQLite shared across threads
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(db_engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def token_manager():
    return TokenManager()


@pytest.fixture
def owner_headers(token_manager):
    return {"Authorization": f"Bearer {token_manager.create_token(OWNER_ID, email='owner@example.com')}"}


@pytest.fixture
def other_headers(token_manager):
    return {"Authorization": f"Bearer {token_manager.create_token(OTHER_ID)}"}
