# -*- coding: utf-8 -*-
"""Tag API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session

from newsdesk.api.v1.common import DEFAULT_LIMIT, LimitParam, PageParam, move_to_recycle_bin
from newsdesk.core.database import get_db
from newsdesk.core.rate_limiter import limiter, RateLimits
from newsdesk.core.security import CurrentUser, require_admin, require_editor
from newsdesk.models.common import Pagination
from newsdesk.models.recycle_bin import ItemType, SoftDeleteResponse
from newsdesk.models.tag import TagCreate, TagList, TagResponse, TagUpdate
from newsdesk.services.tag_repository import TagRepository

router = APIRouter(prefix="/tags", tags=["tags"])


@router.get("", response_model=TagList, summary="List tags")
@limiter.limit(RateLimits.DEFAULT)
def list_tags(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    page: PageParam = 1,
    limit: LimitParam = DEFAULT_LIMIT,
    search: Annotated[str | None, Query(max_length=60)] = None,
) -> TagList:
    """List tags, most used first."""
    tags, total = TagRepository(db).list_tags(page=page, limit=limit, search=search)
    return TagList(
        tags=[TagResponse.model_validate(t) for t in tags],
        pagination=Pagination.build(page, limit, total),
    )


@router.get("/{tag_id}", response_model=TagResponse, summary="Get a tag")
@limiter.limit(RateLimits.DEFAULT)
def get_tag(
    request: Request,
    tag_id: str,
    db: Annotated[Session, Depends(get_db)],
) -> TagResponse:
    return TagResponse.model_validate(TagRepository(db).get_or_404(tag_id))


@router.post(
    "",
    response_model=TagResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a tag",
)
@limiter.limit(RateLimits.DEFAULT)
def create_tag(
    request: Request,
    body: TagCreate,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_editor)],
) -> TagResponse:
    return TagResponse.model_validate(TagRepository(db).create(**body.model_dump()))


@router.put("/{tag_id}", response_model=TagResponse, summary="Update a tag")
@limiter.limit(RateLimits.DEFAULT)
def update_tag(
    request: Request,
    tag_id: str,
    body: TagUpdate,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_editor)],
) -> TagResponse:
    repo = TagRepository(db)
    tag = repo.update(repo.get_or_404(tag_id), **body.model_dump(exclude_unset=True))
    return TagResponse.model_validate(tag)


@router.delete(
    "/{tag_id}",
    response_model=SoftDeleteResponse,
    summary="Move a tag to the recycle bin",
)
@limiter.limit(RateLimits.ADMIN_WRITE)
def delete_tag(
    request: Request,
    tag_id: str,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_admin)],
) -> SoftDeleteResponse:
    return move_to_recycle_bin(db, ItemType.TAG, tag_id, user)
