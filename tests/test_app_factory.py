"""Tests for the Flask application factory."""
from __future__ import annotations


def test_health_endpoint_returns_ok(client):
    """The health endpoint should respond with an OK payload."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}


def test_blueprints_registered(app):
    """Application factory should register expected blueprints."""
    assert {"auth", "products"}.issubset(set(app.blueprints.keys()))


def test_unknown_route_uses_json_envelope(client):
    response = client.get("/api/does-not-exist")

    assert response.status_code == 404
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["error"] is True
    assert payload["message"]
    assert payload["request_id"]


def test_request_id_is_echoed(client):
    response = client.get("/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"


def test_unexpected_errors_are_generic(app, monkeypatch):
    from routes import products

    def _explode(*args, **kwargs):
        raise RuntimeError("secret stack detail")

    monkeypatch.setattr(products, "json_success", _explode)
    response = app.test_client().get("/api/products")

    assert response.status_code == 500
    payload = response.get_json()
    assert payload["message"] == "An unexpected error occurred."
    assert "secret" not in response.get_data(as_text=True)
