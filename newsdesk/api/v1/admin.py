# -*- coding: utf-8 -*-
"""Administrative maintenance endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from newsdesk.core.database import get_db
from newsdesk.core.logging import get_logger
from newsdesk.core.rate_limiter import limiter, RateLimits
from newsdesk.core.security import CurrentUser, require_admin
from newsdesk.models.article import PublishResult
from newsdesk.services.article_repository import ArticleRepository

router = APIRouter(prefix="/admin", tags=["admin"])
logger = get_logger(__name__)


@router.post(
    "/publish-scheduled",
    response_model=PublishResult,
    summary="Publish due scheduled articles now",
)
@limiter.limit(RateLimits.BULK)
def publish_scheduled(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_admin)],
) -> PublishResult:
    """Run the scheduled-article publisher outside its regular interval."""
    published = ArticleRepository(db).publish_due()
    logger.info("Manual publish of scheduled articles", published=published, user_id=user.id)
    return PublishResult(
        published=published,
        message=f"{published} scheduled article(s) published",
    )
