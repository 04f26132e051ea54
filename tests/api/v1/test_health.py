# -*- coding: utf-8 -*-
"""Health API tests."""


def test_health_check(client):
    """Test health check endpoint returns healthy status."""
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["app_name"] == "Newsdesk"
    assert data["database"] == "ok"
    assert "version" in data


def test_root_endpoint(client):
    """Test root endpoint returns welcome message."""
    response = client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert "Newsdesk" in data["message"]
    assert data["health"] == "/api/v1/health"


def test_request_id_header(client):
    response = client.get("/api/v1/health")

    assert len(response.headers["X-Request-ID"]) == 8
