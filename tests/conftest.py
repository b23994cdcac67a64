import os
import tempfile

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DB_PATH", os.path.join(tempfile.gettempdir(), "flashcards-test-db.json"))

from core.database import DocumentStore, get_store
from main import app


@pytest.fixture
def store(tmp_path):
    return DocumentStore(tmp_path / "data" / "db.json")


@pytest.fixture
def client(store):
    # Override the get_store dependency
    def override_get_store():
        yield store

    app.dependency_overrides[get_store] = override_get_store

    with TestClient(app) as test_client:
        yield test_client

    # Clear dependency override after test
    app.dependency_overrides.clear()


@pytest.fixture
def register_user(client):
    """Register a user and return bearer headers for it."""
    def _register(username="testuser", password="testpass"):
        response = client.post("/api/register", json={"username": username, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}
    return _register


@pytest.fixture
def auth_headers(register_user):
    return register_user("testuser")


@pytest.fixture
def other_headers(register_user):
    return register_user("intruder")


@pytest.fixture
def study_set(client, auth_headers):
    response = client.post(
        "/api/sets",
        headers=auth_headers,
        json={
            "name": "Test Set",
            "description": "Test Description",
            "defaultLanguage": "EN",
            "translationLanguage": "ES",
        },
    )
    assert response.status_code == 200, response.text
    return response.json()["set"]


@pytest.fixture
def add_card(client, auth_headers):
    def _add(set_id, content="Hello", translation="Hola", known=None, headers=None):
        body = {"content": content, "translation": translation, "language": "EN", "translationLang": "ES"}
        if known is not None:
            body["known"] = known
        response = client.post(f"/api/sets/{set_id}/flashcards", headers=headers or auth_headers, json=body)
        assert response.status_code == 200, response.text
        return response.json()
    return _add
