# -*- coding: utf-8 -*-
"""Scheduler API tests."""

from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture
def mock_scheduler():
    with patch("newsdesk.api.v1.scheduler.get_scheduler") as mock_get:
        scheduler = MagicMock()
        scheduler.is_running.return_value = True
        scheduler.get_jobs.return_value = [
            {
                "id": "purge_expired_recycle_bin",
                "name": "purge_expired_recycle_bin",
                "next_run": "2026-01-01T00:15:00+00:00",
                "trigger": "interval[0:15:00]",
            }
        ]
        scheduler.get_job_history.return_value = [
            {
                "job_id": "purge_expired_recycle_bin",
                "run_time": "2026-01-01T00:00:00+00:00",
                "status": "success",
                "error": None,
            }
        ]
        mock_get.return_value = scheduler
        yield scheduler


class TestSchedulerApi:
    """Tests for /scheduler endpoints."""

    def test_status(self, client, mock_scheduler, admin_headers):
        response = client.get("/api/v1/scheduler/status", headers=admin_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["running"] is True
        assert data["job_count"] == 1
        assert data["jobs"][0]["id"] == "purge_expired_recycle_bin"

    def test_history(self, client, mock_scheduler, admin_headers):
        response = client.get("/api/v1/scheduler/history", params={"limit": 5}, headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["total"] == 1
        mock_scheduler.get_job_history.assert_called_once_with(5)

    def test_run_job(self, client, mock_scheduler, admin_headers):
        response = client.post(
            "/api/v1/scheduler/jobs/purge_expired_recycle_bin/run", headers=admin_headers
        )

        assert response.status_code == 202
        mock_scheduler.run_job_now.assert_called_once_with("purge_expired_recycle_bin")

    def test_run_unknown_job(self, client, mock_scheduler, admin_headers):
        mock_scheduler.run_job_now.side_effect = ValueError("Job not found: nope")

        response = client.post("/api/v1/scheduler/jobs/nope/run", headers=admin_headers)

        assert response.status_code == 404

    def test_requires_admin(self, client, mock_scheduler, editor_headers):
        response = client.get("/api/v1/scheduler/status", headers=editor_headers)

        assert response.status_code == 403
