"""
Shared fixtures: an app wired to a fresh in-memory SQLite database per test.
"""

import os

# Must be set before app.core.config builds the global settings
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.database import drop_database_tables
from app.main import create_app


@pytest.fixture
def test_settings() -> Settings:
    return Settings(DATABASE_URL="sqlite://", DB_CREATE_TABLES=True, DEBUG=False)


@pytest.fixture
def app(test_settings):
    application = create_app(test_settings)
    yield application
    drop_database_tables(application.state.engine)
    application.state.engine.dispose()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(client, app):
    """Session on the same database the client talks to."""
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_student(client):
    def _make(name="ana", **fields):
        response = client.post("/api/v1/students/", json={"name": name, **fields})
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def make_month(client):
    def _make(student_id, label="Marzo"):
        response = client.post(f"/api/v1/students/{student_id}/months", json={"label": label})
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def make_class(client):
    def _make(student_id, month_id, class_name="Torno", class_price="12000", **fields):
        payload = {
            "month_id": month_id,
            "class_name": class_name,
            "class_price": class_price,
            **fields,
        }
        response = client.post(f"/api/v1/students/{student_id}/classes", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _make
