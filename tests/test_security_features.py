"""Tests covering security and hardening features."""

from __future__ import annotations

from conftest import build_app


def test_cors_allows_configured_origin():
    app = build_app(CORS_ORIGINS=["https://client.example"])
    client = app.test_client()

    response = client.get(
        "/health", headers={"Origin": "https://client.example"}
    )

    assert response.status_code == 200
    assert response.headers.get("Access-Control-Allow-Origin") == "https://client.example"
    assert response.headers.get("X-Request-ID")


def test_rate_limit_exceeded_returns_json():
    app = build_app(RATE_LIMIT="2 per minute")
    client = app.test_client()

    client.get("/health")
    client.get("/health")
    response = client.get("/health")

    assert response.status_code == 429
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["error"] is True
    assert "request_id" in payload


def test_json_error_shape_for_invalid_request():
    app = build_app()
    client = app.test_client()

    response = client.post(
        "/api/signup",
        data="not-json",
        content_type="text/plain",
    )

    assert response.status_code == 400
    payload = response.get_json()
    assert payload["success"] is False
    assert "Request content type" in payload["message"]
    assert payload["request_id"]


def test_malformed_json_is_a_bad_request():
    app = build_app()
    client = app.test_client()

    response = client.post(
        "/api/signup",
        data="{not json",
        content_type="application/json",
    )

    assert response.status_code == 400
    assert response.get_json()["message"] == "Request body must be valid JSON."
