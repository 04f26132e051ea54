# -*- coding: utf-8 -*-
"""Author API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from newsdesk.api.v1.common import DEFAULT_LIMIT, LimitParam, PageParam, move_to_recycle_bin
from newsdesk.core.database import get_db
from newsdesk.core.rate_limiter import limiter, RateLimits
from newsdesk.core.security import CurrentUser, require_admin, require_editor
from newsdesk.models.author import AuthorCreate, AuthorList, AuthorResponse, AuthorUpdate
from newsdesk.models.common import Pagination
from newsdesk.models.recycle_bin import ItemType, SoftDeleteResponse
from newsdesk.services.author_repository import AuthorRepository

router = APIRouter(prefix="/authors", tags=["authors"])


@router.get("", response_model=AuthorList, summary="List authors")
@limiter.limit(RateLimits.DEFAULT)
def list_authors(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    page: PageParam = 1,
    limit: LimitParam = DEFAULT_LIMIT,
    active_only: bool = False,
) -> AuthorList:
    authors, total = AuthorRepository(db).list_authors(
        page=page, limit=limit, active_only=active_only
    )
    return AuthorList(
        authors=[AuthorResponse.model_validate(a) for a in authors],
        pagination=Pagination.build(page, limit, total),
    )


@router.get("/{author_id}", response_model=AuthorResponse, summary="Get an author")
@limiter.limit(RateLimits.DEFAULT)
def get_author(
    request: Request,
    author_id: str,
    db: Annotated[Session, Depends(get_db)],
) -> AuthorResponse:
    return AuthorResponse.model_validate(AuthorRepository(db).get_or_404(author_id))


@router.post(
    "",
    response_model=AuthorResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an author",
)
@limiter.limit(RateLimits.DEFAULT)
def create_author(
    request: Request,
    body: AuthorCreate,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_editor)],
) -> AuthorResponse:
    """Create an author profile. Emails are stored lowercased and must be unique."""
    author = AuthorRepository(db).create(**body.model_dump())
    return AuthorResponse.model_validate(author)


@router.put("/{author_id}", response_model=AuthorResponse, summary="Update an author")
@limiter.limit(RateLimits.DEFAULT)
def update_author(
    request: Request,
    author_id: str,
    body: AuthorUpdate,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_editor)],
) -> AuthorResponse:
    repo = AuthorRepository(db)
    author = repo.update(repo.get_or_404(author_id), **body.model_dump(exclude_unset=True))
    return AuthorResponse.model_validate(author)


@router.delete(
    "/{author_id}",
    response_model=SoftDeleteResponse,
    summary="Move an author to the recycle bin",
)
@limiter.limit(RateLimits.ADMIN_WRITE)
def delete_author(
    request: Request,
    author_id: str,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_admin)],
) -> SoftDeleteResponse:
    return move_to_recycle_bin(db, ItemType.AUTHOR, author_id, user)
