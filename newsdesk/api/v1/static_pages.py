# -*- coding: utf-8 -*-
"""Static page API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from newsdesk.api.v1.common import DEFAULT_LIMIT, LimitParam, PageParam, move_to_recycle_bin
from newsdesk.core.database import get_db
from newsdesk.core.rate_limiter import limiter, RateLimits
from newsdesk.core.security import CurrentUser, require_admin, require_editor
from newsdesk.models.common import Pagination
from newsdesk.models.recycle_bin import ItemType, SoftDeleteResponse
from newsdesk.models.static_page import (
    StaticPageCreate,
    StaticPageList,
    StaticPageResponse,
    StaticPageUpdate,
)
from newsdesk.services.static_page_repository import StaticPageRepository

router = APIRouter(prefix="/pages", tags=["pages"])


@router.get("", response_model=StaticPageList, summary="List static pages")
@limiter.limit(RateLimits.DEFAULT)
def list_pages(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    page: PageParam = 1,
    limit: LimitParam = DEFAULT_LIMIT,
    published_only: bool = False,
) -> StaticPageList:
    """List pages in menu order."""
    pages, total = StaticPageRepository(db).list_pages(
        page=page, limit=limit, published_only=published_only
    )
    return StaticPageList(
        pages=[StaticPageResponse.model_validate(p) for p in pages],
        pagination=Pagination.build(page, limit, total),
    )


@router.get("/slug/{slug}", response_model=StaticPageResponse, summary="Get a published page")
@limiter.limit(RateLimits.DEFAULT)
def get_published_page(
    request: Request,
    slug: str,
    db: Annotated[Session, Depends(get_db)],
) -> StaticPageResponse:
    page = StaticPageRepository(db).get_published_by_slug(slug)
    if page is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Page not found: {slug}",
        )
    return StaticPageResponse.model_validate(page)


@router.get("/{page_id}", response_model=StaticPageResponse, summary="Get a static page")
@limiter.limit(RateLimits.DEFAULT)
def get_page(
    request: Request,
    page_id: str,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_editor)],
) -> StaticPageResponse:
    return StaticPageResponse.model_validate(StaticPageRepository(db).get_or_404(page_id))


@router.post(
    "",
    response_model=StaticPageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a static page",
)
@limiter.limit(RateLimits.DEFAULT)
def create_page(
    request: Request,
    body: StaticPageCreate,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_editor)],
) -> StaticPageResponse:
    page = StaticPageRepository(db).create(**body.model_dump())
    return StaticPageResponse.model_validate(page)


@router.put("/{page_id}", response_model=StaticPageResponse, summary="Update a static page")
@limiter.limit(RateLimits.DEFAULT)
def update_page(
    request: Request,
    page_id: str,
    body: StaticPageUpdate,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_editor)],
) -> StaticPageResponse:
    repo = StaticPageRepository(db)
    page = repo.update(repo.get_or_404(page_id), **body.model_dump(exclude_unset=True))
    return StaticPageResponse.model_validate(page)


@router.delete(
    "/{page_id}",
    response_model=SoftDeleteResponse,
    summary="Move a static page to the recycle bin",
)
@limiter.limit(RateLimits.ADMIN_WRITE)
def delete_page(
    request: Request,
    page_id: str,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_admin)],
) -> SoftDeleteResponse:
    return move_to_recycle_bin(db, ItemType.STATIC_PAGE, page_id, user)
