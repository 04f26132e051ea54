# -*- coding: utf-8 -*-
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from newsdesk.api.v1.router import api_router
from newsdesk.core.config import get_settings
from newsdesk.core.database import init_db
from newsdesk.core.exceptions import (
    ConflictError,
    InvalidItemTypeError,
    NewsdeskError,
    NotFoundError,
    StoreUnavailableError,
    ValidationError,
)
from newsdesk.core.logging import get_logger, setup_logging
from newsdesk.core.rate_limiter import limiter
from newsdesk.core.sentry import capture_exception, setup_sentry
from newsdesk.middleware.request_logging import RequestLoggingMiddleware
from newsdesk.middleware.timeout import RequestTimeoutMiddleware
from newsdesk.services.scheduler import get_scheduler
from newsdesk.services.scheduler_jobs import (
    publish_scheduled_articles,
    purge_expired_recycle_bin,
)

# Initialize structured logging first
setup_logging()

settings = get_settings()
logger = get_logger(__name__)

# Most specific class first
_ERROR_STATUS: list[tuple[type[NewsdeskError], int]] = [
    (NotFoundError, 404),
    (ConflictError, 409),
    (ValidationError, 422),
    (StoreUnavailableError, 503),
    (InvalidItemTypeError, 500),
]


def setup_scheduler():
    """Configure and start the background scheduler."""
    scheduler = get_scheduler()

    # Expiry sweep: recycle bin records past expires_at are deleted
    scheduler.add_interval_job(
        job_id="purge_expired_recycle_bin",
        func=purge_expired_recycle_bin,
        minutes=settings.recycle_bin_sweep_interval_minutes,
    )

    # Publish scheduled articles whose time has come
    scheduler.add_interval_job(
        job_id="publish_scheduled_articles",
        func=publish_scheduled_articles,
        minutes=settings.scheduled_publish_interval_minutes,
    )

    scheduler.start()
    logger.info("Background scheduler configured and started")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    setup_sentry()
    init_db()

    if settings.scheduler_enabled:
        setup_scheduler()

    logger.info(
        "Application started",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.app_env.value,
    )

    yield

    if settings.scheduler_enabled:
        get_scheduler().shutdown(wait=False)
        logger.info("Scheduler shutdown complete")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Newsroom content management API with a recycle bin for deleted content",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Rate limiting setup
app.state.limiter = limiter


@app.exception_handler(NewsdeskError)
async def newsdesk_error_handler(request: Request, exc: NewsdeskError):
    """Translate domain errors into JSON responses."""
    status_code = next(
        (code for error_type, code in _ERROR_STATUS if isinstance(exc, error_type)),
        500,
    )

    if status_code >= 500:
        logger.error(
            "Request failed with domain error",
            error=str(exc),
            error_code=exc.error_code,
            path=request.url.path,
        )
        if not isinstance(exc, StoreUnavailableError):
            capture_exception(exc, error_code=exc.error_code, path=request.url.path)
    else:
        logger.info(
            "Request rejected",
            error_code=exc.error_code,
            detail=exc.message,
            status_code=status_code,
        )

    response = JSONResponse(status_code=status_code, content=exc.to_dict())
    if isinstance(exc, StoreUnavailableError):
        response.headers["Retry-After"] = "5"
    return response


@app.exception_handler(RateLimitExceeded)
async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    """Custom rate limit exceeded handler with proper headers."""
    limit_value = getattr(exc, "detail", "Rate limit exceeded")

    response = JSONResponse(
        status_code=429,
        content={
            "detail": "Too Many Requests",
            "message": limit_value,
        },
    )

    if hasattr(request.state, "view_rate_limit"):
        rate_info = request.state.view_rate_limit
        # slowapi stores either a "10 per 1 minute" string or a (limit, ...) tuple
        if isinstance(rate_info, str):
            limit_parts = rate_info.split(" per ")
            if len(limit_parts) == 2:
                response.headers["X-RateLimit-Limit"] = limit_parts[0]
        elif isinstance(rate_info, tuple) and len(rate_info) > 0:
            response.headers["X-RateLimit-Limit"] = str(rate_info[0])

    response.headers["Retry-After"] = str(getattr(exc, "retry_after", 60))
    return response


app.add_middleware(
    RequestTimeoutMiddleware,
    timeout_seconds=settings.request_timeout_seconds,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Request logging middleware (outermost for accurate timing)
app.add_middleware(RequestLoggingMiddleware)

# Include API router
app.include_router(api_router, prefix=settings.api_v1_prefix)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": f"Welcome to {settings.app_name}",
        "docs": "/docs",
        "health": f"{settings.api_v1_prefix}/health",
    }
