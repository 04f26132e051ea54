# -*- coding: utf-8 -*-
"""Category API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from newsdesk.api.v1.common import DEFAULT_LIMIT, LimitParam, PageParam, move_to_recycle_bin
from newsdesk.core.database import get_db
from newsdesk.core.rate_limiter import limiter, RateLimits
from newsdesk.core.security import CurrentUser, require_admin, require_editor
from newsdesk.models.category import (
    CategoryCreate,
    CategoryList,
    CategoryResponse,
    CategoryUpdate,
)
from newsdesk.models.common import Pagination
from newsdesk.models.recycle_bin import ItemType, SoftDeleteResponse
from newsdesk.services.category_repository import CategoryRepository

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get(
    "",
    response_model=CategoryList,
    summary="List categories",
)
@limiter.limit(RateLimits.DEFAULT)
def list_categories(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    page: PageParam = 1,
    limit: LimitParam = DEFAULT_LIMIT,
    active_only: bool = False,
) -> CategoryList:
    """List categories in display order."""
    categories, total = CategoryRepository(db).list_categories(
        page=page, limit=limit, active_only=active_only
    )
    return CategoryList(
        categories=[CategoryResponse.model_validate(c) for c in categories],
        pagination=Pagination.build(page, limit, total),
    )


@router.get(
    "/slug/{slug}",
    response_model=CategoryResponse,
    summary="Get a category by slug",
)
@limiter.limit(RateLimits.DEFAULT)
def get_category_by_slug(
    request: Request,
    slug: str,
    db: Annotated[Session, Depends(get_db)],
) -> CategoryResponse:
    category = CategoryRepository(db).get_by_slug(slug)
    if category is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Category not found: {slug}",
        )
    return CategoryResponse.model_validate(category)


@router.get(
    "/{category_id}",
    response_model=CategoryResponse,
    summary="Get a category",
)
@limiter.limit(RateLimits.DEFAULT)
def get_category(
    request: Request,
    category_id: str,
    db: Annotated[Session, Depends(get_db)],
) -> CategoryResponse:
    return CategoryResponse.model_validate(CategoryRepository(db).get_or_404(category_id))


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a category",
)
@limiter.limit(RateLimits.DEFAULT)
def create_category(
    request: Request,
    body: CategoryCreate,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_editor)],
) -> CategoryResponse:
    """Create a category. Names map to unique slugs."""
    category = CategoryRepository(db).create(**body.model_dump())
    return CategoryResponse.model_validate(category)


@router.put(
    "/{category_id}",
    response_model=CategoryResponse,
    summary="Update a category",
)
@limiter.limit(RateLimits.DEFAULT)
def update_category(
    request: Request,
    category_id: str,
    body: CategoryUpdate,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_editor)],
) -> CategoryResponse:
    repo = CategoryRepository(db)
    category = repo.update(repo.get_or_404(category_id), **body.model_dump(exclude_unset=True))
    return CategoryResponse.model_validate(category)


@router.delete(
    "/{category_id}",
    response_model=SoftDeleteResponse,
    summary="Move a category to the recycle bin",
)
@limiter.limit(RateLimits.ADMIN_WRITE)
def delete_category(
    request: Request,
    category_id: str,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_admin)],
) -> SoftDeleteResponse:
    """Soft delete a category. Articles keep their category_id reference."""
    return move_to_recycle_bin(db, ItemType.CATEGORY, category_id, user)
