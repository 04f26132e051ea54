# -*- coding: utf-8 -*-
"""Breaking news API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session

from newsdesk.api.v1.common import DEFAULT_LIMIT, LimitParam, PageParam, move_to_recycle_bin
from newsdesk.core.database import get_db
from newsdesk.core.rate_limiter import limiter, RateLimits
from newsdesk.core.security import CurrentUser, require_admin, require_editor
from newsdesk.models.breaking_news import (
    BreakingNewsCreate,
    BreakingNewsList,
    BreakingNewsResponse,
    BreakingNewsUpdate,
)
from newsdesk.models.common import Pagination
from newsdesk.models.db_models import BreakingNews
from newsdesk.models.recycle_bin import ItemType, SoftDeleteResponse
from newsdesk.services.breaking_news_repository import BreakingNewsRepository

router = APIRouter(prefix="/breaking-news", tags=["breaking-news"])


@router.get(
    "/active",
    response_model=list[BreakingNewsResponse],
    summary="Get active breaking news",
)
@limiter.limit(RateLimits.DEFAULT)
def get_active_breaking_news(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    limit: Annotated[int, Query(ge=1, le=50)] = 10,
) -> list[BreakingNewsResponse]:
    """Public ticker: active, unexpired headlines by priority."""
    items = BreakingNewsRepository(db).get_active(limit=limit)
    return [BreakingNewsResponse.model_validate(i) for i in items]


@router.get("", response_model=BreakingNewsList, summary="List breaking news")
@limiter.limit(RateLimits.DEFAULT)
def list_breaking_news(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_editor)],
    page: PageParam = 1,
    limit: LimitParam = DEFAULT_LIMIT,
) -> BreakingNewsList:
    items, total = BreakingNewsRepository(db).list(
        page=page,
        limit=limit,
        order_by=[BreakingNews.priority.desc(), BreakingNews.created_at.desc()],
    )
    return BreakingNewsList(
        items=[BreakingNewsResponse.model_validate(i) for i in items],
        pagination=Pagination.build(page, limit, total),
    )


@router.get("/{item_id}", response_model=BreakingNewsResponse, summary="Get a headline")
@limiter.limit(RateLimits.DEFAULT)
def get_breaking_news(
    request: Request,
    item_id: str,
    db: Annotated[Session, Depends(get_db)],
) -> BreakingNewsResponse:
    return BreakingNewsResponse.model_validate(BreakingNewsRepository(db).get_or_404(item_id))


@router.post(
    "",
    response_model=BreakingNewsResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a headline",
)
@limiter.limit(RateLimits.DEFAULT)
def create_breaking_news(
    request: Request,
    body: BreakingNewsCreate,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_editor)],
) -> BreakingNewsResponse:
    item = BreakingNewsRepository(db).create(**body.model_dump(), created_by=user.id)
    return BreakingNewsResponse.model_validate(item)


@router.put("/{item_id}", response_model=BreakingNewsResponse, summary="Update a headline")
@limiter.limit(RateLimits.DEFAULT)
def update_breaking_news(
    request: Request,
    item_id: str,
    body: BreakingNewsUpdate,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_editor)],
) -> BreakingNewsResponse:
    repo = BreakingNewsRepository(db)
    item = repo.update(repo.get_or_404(item_id), **body.model_dump(exclude_unset=True))
    return BreakingNewsResponse.model_validate(item)


@router.post(
    "/{item_id}/toggle",
    response_model=BreakingNewsResponse,
    summary="Toggle a headline on or off",
)
@limiter.limit(RateLimits.DEFAULT)
def toggle_breaking_news(
    request: Request,
    item_id: str,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_editor)],
) -> BreakingNewsResponse:
    repo = BreakingNewsRepository(db)
    return BreakingNewsResponse.model_validate(repo.toggle_active(repo.get_or_404(item_id)))


@router.delete(
    "/{item_id}",
    response_model=SoftDeleteResponse,
    summary="Move a headline to the recycle bin",
)
@limiter.limit(RateLimits.ADMIN_WRITE)
def delete_breaking_news(
    request: Request,
    item_id: str,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_admin)],
) -> SoftDeleteResponse:
    return move_to_recycle_bin(db, ItemType.BREAKING_NEWS, item_id, user)
