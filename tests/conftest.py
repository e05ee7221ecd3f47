# tests/conftest.py

"""
Shared fixtures. The app reads DATABASE_URL at import time, so it is pointed
at an in-memory SQLite database here, before any test module imports it.
Set TEST_DATABASE_URL to run the suite against a real PostgreSQL instead.
"""

import logging
import os

os.environ["DATABASE_URL"] = os.getenv("TEST_DATABASE_URL", "sqlite://")
os.environ.setdefault("DB_CONNECT_RETRY_DELAY_SECONDS", "0")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from inventory_service.db import Base, SessionLocal, engine, get_db
from inventory_service.main import app
from tests._helpers import product_body

# Suppress noisy logs from SQLAlchemy/FastAPI during tests for cleaner output
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
logging.getLogger("uvicorn.error").setLevel(logging.WARNING)
logging.getLogger("fastapi").setLevel(logging.WARNING)


@pytest.fixture(autouse=True)
def clean_database():
    """Every test starts from an empty Product table."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db_session_for_test():
    """
    Provides a database session and makes the app use it for every request,
    so tests can inspect rows written through the API.
    """
    db = SessionLocal()

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield db
    finally:
        db.close()
        app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def client():
    """
    Unauthenticated TestClient. Function scoped so session cookies never leak
    between tests.
    """
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_client(client: TestClient):
    """TestClient carrying a session cookie for the demo user."""
    response = client.post("/auth/login", json={"username": "admin", "password": "admin"})
    assert response.status_code == 200
    return client


@pytest.fixture(autouse=True)
def clear_overrides():
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def make_product(auth_client: TestClient, db_session_for_test: Session):
    """Creates a product through the API and returns its JSON."""

    def _make(**overrides):
        response = auth_client.post("/products", json=product_body(**overrides))
        assert response.status_code == 201, response.text
        return response.json()

    return _make
