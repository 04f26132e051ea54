# -*- coding: utf-8 -*-
"""Article API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from sqlalchemy.orm import Session

from newsdesk.api.v1.common import DEFAULT_LIMIT, LimitParam, PageParam, move_to_recycle_bin
from newsdesk.core.database import get_db
from newsdesk.core.rate_limiter import limiter, RateLimits
from newsdesk.core.security import CurrentUser, require_admin, require_editor
from newsdesk.models.article import (
    ArticleCreate,
    ArticleList,
    ArticleResponse,
    ArticleStatus,
    ArticleUpdate,
)
from newsdesk.models.common import Pagination
from newsdesk.models.recycle_bin import ItemType, SoftDeleteResponse
from newsdesk.services.article_repository import ArticleRepository

router = APIRouter(prefix="/articles", tags=["articles"])


@router.get(
    "",
    response_model=ArticleList,
    summary="List articles",
)
@limiter.limit(RateLimits.DEFAULT)
def list_articles(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    page: PageParam = 1,
    limit: LimitParam = DEFAULT_LIMIT,
    status_filter: Annotated[ArticleStatus | None, Query(alias="status")] = None,
    category_id: str | None = None,
    author_id: str | None = None,
    search: Annotated[str | None, Query(max_length=100)] = None,
    featured: bool | None = None,
) -> ArticleList:
    """List articles, newest first, with optional filters."""
    repo = ArticleRepository(db)
    articles, total = repo.list_articles(
        page=page,
        limit=limit,
        status=status_filter.value if status_filter else None,
        category_id=category_id,
        author_id=author_id,
        search=search,
        featured=featured,
    )
    return ArticleList(
        articles=[ArticleResponse.model_validate(a) for a in articles],
        pagination=Pagination.build(page, limit, total),
    )


@router.get(
    "/slug/{slug}",
    response_model=ArticleResponse,
    summary="Get a published article by slug",
)
@limiter.limit(RateLimits.DEFAULT)
def get_published_article(
    request: Request,
    slug: str,
    db: Annotated[Session, Depends(get_db)],
) -> ArticleResponse:
    """Public read of a published article. Each call counts one view."""
    repo = ArticleRepository(db)
    article = repo.get_published_by_slug(slug)
    if article is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Article not found: {slug}",
        )
    return ArticleResponse.model_validate(repo.increment_views(article))


@router.get(
    "/{article_id}",
    response_model=ArticleResponse,
    summary="Get an article",
)
@limiter.limit(RateLimits.DEFAULT)
def get_article(
    request: Request,
    article_id: str,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_editor)],
) -> ArticleResponse:
    """Get an article in any status."""
    return ArticleResponse.model_validate(ArticleRepository(db).get_or_404(article_id))


@router.post(
    "",
    response_model=ArticleResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an article",
)
@limiter.limit(RateLimits.DEFAULT)
def create_article(
    request: Request,
    body: ArticleCreate,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_editor)],
) -> ArticleResponse:
    """Create an article. The slug is derived from the title when omitted."""
    article = ArticleRepository(db).create(**body.model_dump())
    return ArticleResponse.model_validate(article)


@router.put(
    "/{article_id}",
    response_model=ArticleResponse,
    summary="Update an article",
)
@limiter.limit(RateLimits.DEFAULT)
def update_article(
    request: Request,
    article_id: str,
    body: ArticleUpdate,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_editor)],
) -> ArticleResponse:
    """Update an article. Omitted fields are left unchanged."""
    repo = ArticleRepository(db)
    article = repo.update(repo.get_or_404(article_id), **body.model_dump(exclude_unset=True))
    return ArticleResponse.model_validate(article)


@router.delete(
    "/{article_id}",
    response_model=SoftDeleteResponse,
    summary="Move an article to the recycle bin",
)
@limiter.limit(RateLimits.ADMIN_WRITE)
def delete_article(
    request: Request,
    article_id: str,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_admin)],
) -> SoftDeleteResponse:
    """Soft delete an article. It can be restored until the record expires."""
    return move_to_recycle_bin(db, ItemType.ARTICLE, article_id, user)
