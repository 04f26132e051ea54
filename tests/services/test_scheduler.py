# -*- coding: utf-8 -*-
"""Tests for the background scheduler service."""

from datetime import datetime, UTC

import pytest
from apscheduler.events import EVENT_JOB_ERROR, EVENT_JOB_EXECUTED, JobExecutionEvent

from newsdesk.services.scheduler import SchedulerService, get_scheduler


def _noop():
    return None


@pytest.fixture
def scheduler():
    service = SchedulerService()
    yield service
    service.shutdown(wait=False)


class TestSchedulerService:
    """Tests for SchedulerService."""

    def test_add_interval_job(self, scheduler):
        scheduler.add_interval_job("purge_expired_recycle_bin", _noop, minutes=15)

        jobs = scheduler.get_jobs()

        assert len(jobs) == 1
        assert jobs[0]["id"] == "purge_expired_recycle_bin"
        assert "interval" in jobs[0]["trigger"]

    def test_add_job_replaces_existing(self, scheduler):
        scheduler.add_interval_job("publish", _noop, minutes=1)
        scheduler.add_interval_job("publish", _noop, minutes=5)

        assert len(scheduler.get_jobs()) == 1

    def test_add_cron_job(self, scheduler):
        scheduler.add_cron_job("nightly", _noop, hour=3)

        assert "cron" in scheduler.get_jobs()[0]["trigger"]

    def test_start_and_shutdown(self, scheduler):
        scheduler.add_interval_job("publish", _noop, minutes=1)

        scheduler.start()
        assert scheduler.is_running() is True
        assert scheduler.get_jobs()[0]["next_run"] is not None

        scheduler.shutdown(wait=False)
        assert scheduler.is_running() is False

    def test_run_job_now_unknown(self, scheduler):
        with pytest.raises(ValueError):
            scheduler.run_job_now("missing")

    def test_run_job_now(self, scheduler):
        scheduler.add_interval_job("publish", _noop, hours=1)
        scheduler.start()

        scheduler.run_job_now("publish")

        next_run = datetime.fromisoformat(scheduler.get_jobs()[0]["next_run"])
        assert (next_run - datetime.now(UTC)).total_seconds() < 60


class TestJobHistory:
    """Tests for job execution history."""

    def test_records_success_and_error(self, scheduler):
        run_time = datetime.now(UTC)
        scheduler._on_job_event(
            JobExecutionEvent(EVENT_JOB_EXECUTED, "publish", "default", run_time, retval={"published": 1})
        )
        scheduler._on_job_event(
            JobExecutionEvent(EVENT_JOB_ERROR, "purge", "default", run_time, exception=RuntimeError("db down"))
        )

        history = scheduler.get_job_history()

        assert [h["job_id"] for h in history] == ["purge", "publish"]
        assert history[0]["status"] == "error"
        assert history[0]["error"] == "db down"
        assert history[1]["status"] == "success"
        assert history[1]["error"] is None

    def test_history_limit(self, scheduler):
        run_time = datetime.now(UTC)
        for i in range(5):
            scheduler._on_job_event(
                JobExecutionEvent(EVENT_JOB_EXECUTED, f"job-{i}", "default", run_time)
            )

        assert len(scheduler.get_job_history(limit=3)) == 3


def test_get_scheduler_is_singleton():
    assert get_scheduler() is get_scheduler()
