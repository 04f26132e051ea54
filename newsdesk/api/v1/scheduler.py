# -*- coding: utf-8 -*-
"""Scheduler monitoring API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from pydantic import BaseModel

from newsdesk.core.rate_limiter import limiter, RateLimits
from newsdesk.core.security import require_admin
from newsdesk.services.scheduler import get_scheduler

router = APIRouter(
    prefix="/scheduler",
    tags=["scheduler"],
    dependencies=[Depends(require_admin)],
)


class JobInfo(BaseModel):
    """A registered background job."""

    id: str
    name: str | None
    next_run: str | None
    trigger: str


class JobHistoryEntry(BaseModel):
    """One job execution."""

    job_id: str
    run_time: str
    status: str
    error: str | None


class SchedulerStatus(BaseModel):
    running: bool
    job_count: int
    jobs: list[JobInfo]


class SchedulerHistoryResponse(BaseModel):
    entries: list[JobHistoryEntry]
    total: int


@router.get(
    "/status",
    response_model=SchedulerStatus,
    summary="Get scheduler status",
)
@limiter.limit(RateLimits.DEFAULT)
def get_scheduler_status(request: Request) -> SchedulerStatus:
    """Running state and the registered jobs (recycle bin sweep, publisher)."""
    scheduler = get_scheduler()
    jobs = [JobInfo(**j) for j in scheduler.get_jobs()]
    return SchedulerStatus(running=scheduler.is_running(), job_count=len(jobs), jobs=jobs)


@router.get(
    "/history",
    response_model=SchedulerHistoryResponse,
    summary="Get job execution history",
)
@limiter.limit(RateLimits.DEFAULT)
def get_job_history(
    request: Request,
    limit: Annotated[int, Query(ge=1, le=100)] = 20,
) -> SchedulerHistoryResponse:
    """Most recent job executions, newest first."""
    entries = [JobHistoryEntry(**h) for h in get_scheduler().get_job_history(limit)]
    return SchedulerHistoryResponse(entries=entries, total=len(entries))


@router.post(
    "/jobs/{job_id}/run",
    status_code=status.HTTP_202_ACCEPTED,
    summary="Manually trigger a job",
)
@limiter.limit(RateLimits.BULK)
def run_job_manually(request: Request, job_id: str) -> dict:
    """Schedule a registered job to run immediately."""
    try:
        get_scheduler().run_job_now(job_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    return {"message": f"Job {job_id} triggered"}
