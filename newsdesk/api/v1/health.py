# -*- coding: utf-8 -*-
"""Health check endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from newsdesk.core.config import get_settings
from newsdesk.core.database import get_db
from newsdesk.core.logging import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.get("/health")
def health_check(db: Annotated[Session, Depends(get_db)]) -> dict:
    """Report service and database status."""
    settings = get_settings()
    try:
        db.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as e:
        logger.warning("Database health check failed", error=str(e))
        database = "unavailable"

    return {
        "status": "healthy" if database == "ok" else "degraded",
        "app_name": settings.app_name,
        "version": settings.app_version,
        "database": database,
    }
