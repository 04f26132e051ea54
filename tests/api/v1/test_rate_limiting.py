# -*- coding: utf-8 -*-
"""Rate limiting tests."""

from newsdesk.core.rate_limiter import RateLimits, get_rate_limit_key


class TestRateLimitingConfig:
    """Test rate limiting configuration."""

    def test_default_rate_limit_value(self):
        assert RateLimits.DEFAULT == "100/minute"

    def test_admin_write_rate_limit_value(self):
        assert RateLimits.ADMIN_WRITE == "30/minute"

    def test_bulk_rate_limit_value(self):
        assert RateLimits.BULK == "5/minute"


class TestRateLimitKey:
    """Test rate limit key selection."""

    def test_key_uses_user_header(self):
        class FakeRequest:
            headers = {"x-user-id": "admin-1"}

        assert get_rate_limit_key(FakeRequest()) == "user:admin-1"


class TestRateLimiting429Response:
    """Test 429 Too Many Requests response."""

    def test_bulk_limit_exceeded_returns_429(self, client_with_db, admin_headers):
        """Emptying the recycle bin is limited to five calls per minute."""
        url = "/api/v1/recycle-bin/empty?confirm=true"
        for _ in range(5):
            assert client_with_db.post(url, headers=admin_headers).status_code == 200

        response = client_with_db.post(url, headers=admin_headers)

        assert response.status_code == 429
        assert response.json()["detail"] == "Too Many Requests"
        assert "Retry-After" in response.headers

    def test_limits_are_per_user(self, client_with_db, admin_headers):
        url = "/api/v1/recycle-bin/empty?confirm=true"
        for _ in range(5):
            client_with_db.post(url, headers=admin_headers)

        other_admin = {"X-User-Id": "admin-2", "X-User-Role": "admin"}
        response = client_with_db.post(url, headers=other_admin)

        assert response.status_code == 200
