import uuid

import pytest
from fastapi.testclient import TestClient

from customer_directory_api.app.core.config import Settings
from customer_directory_api.app.core.middleware import cors_headers
from customer_directory_api.app.main import create_app

ALLOWED_METHODS = "GET, POST, PUT, DELETE, OPTIONS"


def assert_cors(r):
    assert r.headers["access-control-allow-origin"] == "*"
    assert r.headers["access-control-allow-methods"] == ALLOWED_METHODS
    assert r.headers["access-control-allow-headers"] == "Content-Type, Authorization"


def test_headers_on_success(client, make_customer):
    customer = make_customer()
    assert_cors(client.get("/customers"))
    assert_cors(client.get(f"/customers/{customer['id']}"))
    assert_cors(client.put(f"/customers/{customer['id']}", json={"name": "A", "email": "a@b.com"}))
    assert_cors(client.delete(f"/customers/{customer['id']}"))
    assert_cors(client.post("/customers", json={"name": "A", "email": "a@b.com"}))


def test_headers_on_errors(client):
    assert_cors(client.get(f"/customers/{uuid.uuid4()}"))
    assert_cors(client.post("/customers", content="nope", headers={"Content-Type": "application/json"}))
    assert_cors(client.get("/unknown"))
    assert_cors(client.delete("/customers"))


def test_headers_with_origin(client):
    r = client.get("/customers", headers={"Origin": "https://example.com"})
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "*"


@pytest.mark.parametrize("path", ["/customers", f"/customers/{uuid.uuid4()}", "/anything"])
def test_options_preflight(client, path):
    r = client.options(
        path,
        headers={"Access-Control-Request-Method": "POST", "Access-Control-Request-Headers": "Content-Type"},
    )
    assert r.status_code == 204
    assert r.content == b""
    assert_cors(r)


def test_headers_are_consistent_across_requests(client):
    for _ in range(3):
        r = client.get("/customers")
        assert r.status_code == 200
        assert_cors(r)


def test_configured_headers():
    settings = Settings(cors_allow_origin="https://ui.example.com", cors_allow_methods="GET")
    assert cors_headers(settings)["Access-Control-Allow-Origin"] == "https://ui.example.com"

    client = TestClient(create_app(settings=settings))
    r = client.get("/customers")
    assert r.headers["access-control-allow-origin"] == "https://ui.example.com"
    assert r.headers["access-control-allow-methods"] == "GET"
