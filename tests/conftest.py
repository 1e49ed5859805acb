import pytest
from fastapi.testclient import TestClient

from customer_directory_api.app.main import create_app
from customer_directory_api.app.services.directory_store import DirectoryStore


@pytest.fixture()
def store():
    return DirectoryStore()


@pytest.fixture()
def app(store):
    return create_app(store=store)


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def make_customer(client):
    """Create a customer through the API and return the response body."""

    def _make(name="John Doe", email="john.doe@example.com", **extra):
        payload = {"name": name, "email": email, **extra}
        r = client.post("/customers", json=payload)
        assert r.status_code == 201, r.text
        return r.json()

    return _make
