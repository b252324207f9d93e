import os

# Must be set before any application module reads its configuration.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from core.credentials import create_admin
from core.security import issue_token, pwd_context
from database import build_engine, get_db, init_db
from main import app


ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"

# Keep bcrypt fast under test.
pwd_context.update(bcrypt__rounds=4)


@pytest.fixture
def session_factory():
    """A fresh in-memory database per test."""
    engine = build_engine("sqlite://")
    init_db(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield factory
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def admin(db):
    return create_admin(db, ADMIN_USERNAME, ADMIN_PASSWORD, "admin@portfolio.com")


@pytest.fixture
def auth_headers(admin):
    token = issue_token(admin.id, admin.username)
    return {"Authorization": f"Bearer {token}"}
