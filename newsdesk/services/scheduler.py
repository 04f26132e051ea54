# -*- coding: utf-8 -*-
"""Background scheduler service built on APScheduler."""

from collections import deque
from datetime import datetime, UTC
from threading import Lock
from typing import Callable

from apscheduler.events import EVENT_JOB_ERROR, EVENT_JOB_EXECUTED, JobExecutionEvent
from apscheduler.schedulers.background import BackgroundScheduler

from newsdesk.core.logging import get_logger

logger = get_logger(__name__)


class SchedulerService:
    """Thin wrapper around BackgroundScheduler that records job history."""

    HISTORY_SIZE = 100

    def __init__(self):
        self._scheduler = BackgroundScheduler(timezone=UTC)
        self._history: deque[dict] = deque(maxlen=self.HISTORY_SIZE)
        self._history_lock = Lock()
        self._scheduler.add_listener(self._on_job_event, EVENT_JOB_EXECUTED | EVENT_JOB_ERROR)

    def add_interval_job(
        self,
        job_id: str,
        func: Callable,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
    ) -> None:
        """Run ``func`` every fixed interval, replacing any job with the same id."""
        self._scheduler.add_job(
            func,
            trigger="interval",
            id=job_id,
            name=job_id,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            replace_existing=True,
            coalesce=True,
            max_instances=1,
        )
        logger.info("Interval job registered", job_id=job_id, hours=hours, minutes=minutes)

    def add_cron_job(self, job_id: str, func: Callable, hour: int = 0, minute: int = 0) -> None:
        """Run ``func`` daily at the given UTC time."""
        self._scheduler.add_job(
            func,
            trigger="cron",
            id=job_id,
            name=job_id,
            hour=hour,
            minute=minute,
            replace_existing=True,
            coalesce=True,
            max_instances=1,
        )
        logger.info("Cron job registered", job_id=job_id, hour=hour, minute=minute)

    def start(self) -> None:
        if not self._scheduler.running:
            self._scheduler.start()

    def shutdown(self, wait: bool = True) -> None:
        if self._scheduler.running:
            self._scheduler.shutdown(wait=wait)

    def is_running(self) -> bool:
        return self._scheduler.running

    def get_jobs(self) -> list[dict]:
        """Describe registered jobs."""
        return [
            {
                "id": job.id,
                "name": job.name,
                "next_run": _iso(getattr(job, "next_run_time", None)),
                "trigger": str(job.trigger),
            }
            for job in self._scheduler.get_jobs()
        ]

    def get_job_history(self, limit: int = 20) -> list[dict]:
        """Most recent job executions, newest first."""
        with self._history_lock:
            entries = list(self._history)
        return list(reversed(entries))[:limit]

    def run_job_now(self, job_id: str) -> None:
        """Schedule a registered job to run immediately.

        Raises:
            ValueError: If no job has this id
        """
        job = self._scheduler.get_job(job_id)
        if job is None:
            raise ValueError(f"Job not found: {job_id}")
        job.modify(next_run_time=datetime.now(UTC))

    def _on_job_event(self, event: JobExecutionEvent) -> None:
        entry = {
            "job_id": event.job_id,
            "run_time": event.scheduled_run_time.isoformat(),
            "status": "error" if event.exception else "success",
            "error": str(event.exception) if event.exception else None,
        }
        with self._history_lock:
            self._history.append(entry)
        if event.exception:
            logger.error("Scheduled job failed", job_id=event.job_id, error=str(event.exception))


def _iso(value: datetime | None) -> str | None:
    # Pending jobs (scheduler not started yet) have no next_run_time
    return value.isoformat() if value else None


_scheduler: SchedulerService | None = None


def get_scheduler() -> SchedulerService:
    """Get the process-wide scheduler instance."""
    global _scheduler
    if _scheduler is None:
        _scheduler = SchedulerService()
    return _scheduler
