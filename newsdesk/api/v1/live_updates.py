# -*- coding: utf-8 -*-
"""Live update API endpoints.

Deleting live coverage is permanent; it does not go through the recycle bin.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session

from newsdesk.api.v1.common import DEFAULT_LIMIT, LimitParam, PageParam
from newsdesk.core.database import get_db
from newsdesk.core.rate_limiter import limiter, RateLimits
from newsdesk.core.security import CurrentUser, require_admin, require_editor
from newsdesk.models.common import Pagination
from newsdesk.models.live_update import (
    LiveUpdateCreate,
    LiveUpdateEntryCreate,
    LiveUpdateList,
    LiveUpdateResponse,
    LiveUpdateStatus,
    LiveUpdateType,
    LiveUpdateUpdate,
)
from newsdesk.services.live_update_repository import LiveUpdateRepository

router = APIRouter(prefix="/live-updates", tags=["live-updates"])


@router.get("", response_model=LiveUpdateList, summary="List live updates")
@limiter.limit(RateLimits.DEFAULT)
def list_live_updates(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    page: PageParam = 1,
    limit: LimitParam = DEFAULT_LIMIT,
    status_filter: Annotated[LiveUpdateStatus | None, Query(alias="status")] = None,
    type_filter: Annotated[LiveUpdateType | None, Query(alias="type")] = None,
) -> LiveUpdateList:
    """List coverage, sticky first, with optional status and type filters."""
    items, total = LiveUpdateRepository(db).list_live_updates(
        page=page,
        limit=limit,
        status=status_filter.value if status_filter else None,
        update_type=type_filter.value if type_filter else None,
    )
    return LiveUpdateList(
        live_updates=[LiveUpdateResponse.model_validate(i) for i in items],
        pagination=Pagination.build(page, limit, total),
    )


@router.get(
    "/active",
    response_model=list[LiveUpdateResponse],
    summary="Get active live updates for the homepage",
)
@limiter.limit(RateLimits.DEFAULT)
def get_active_live_updates(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    limit: Annotated[int, Query(ge=1, le=20)] = 5,
) -> list[LiveUpdateResponse]:
    items = LiveUpdateRepository(db).get_active(limit=limit)
    return [LiveUpdateResponse.model_validate(i) for i in items]


@router.get(
    "/type/{update_type}",
    response_model=list[LiveUpdateResponse],
    summary="Get active live updates of one type",
)
@limiter.limit(RateLimits.DEFAULT)
def get_live_updates_by_type(
    request: Request,
    update_type: LiveUpdateType,
    db: Annotated[Session, Depends(get_db)],
    limit: Annotated[int, Query(ge=1, le=50)] = 10,
) -> list[LiveUpdateResponse]:
    items = LiveUpdateRepository(db).list_by_type(update_type.value, limit=limit)
    return [LiveUpdateResponse.model_validate(i) for i in items]


@router.get("/{live_update_id}", response_model=LiveUpdateResponse, summary="Get a live update")
@limiter.limit(RateLimits.DEFAULT)
def get_live_update(
    request: Request,
    live_update_id: str,
    db: Annotated[Session, Depends(get_db)],
) -> LiveUpdateResponse:
    """Public read. Each call counts one view."""
    repo = LiveUpdateRepository(db)
    return LiveUpdateResponse.model_validate(repo.increment_views(repo.get_or_404(live_update_id)))


@router.post(
    "",
    response_model=LiveUpdateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Start live coverage",
)
@limiter.limit(RateLimits.DEFAULT)
def create_live_update(
    request: Request,
    body: LiveUpdateCreate,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_editor)],
) -> LiveUpdateResponse:
    """Start coverage. The opening content becomes the first entry."""
    return LiveUpdateResponse.model_validate(LiveUpdateRepository(db).create(**body.model_dump()))


@router.post(
    "/{live_update_id}/updates",
    response_model=LiveUpdateResponse,
    summary="Add an entry to live coverage",
)
@limiter.limit(RateLimits.DEFAULT)
def add_live_update_entry(
    request: Request,
    live_update_id: str,
    body: LiveUpdateEntryCreate,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_editor)],
) -> LiveUpdateResponse:
    """Append an entry. Ended coverage is rejected with 422."""
    repo = LiveUpdateRepository(db)
    live_update = repo.add_entry(
        repo.get_or_404(live_update_id),
        content=body.content,
        author_id=body.author_id,
        attachments=body.attachments,
    )
    return LiveUpdateResponse.model_validate(live_update)


@router.put("/{live_update_id}", response_model=LiveUpdateResponse, summary="Update a live update")
@limiter.limit(RateLimits.DEFAULT)
def update_live_update(
    request: Request,
    live_update_id: str,
    body: LiveUpdateUpdate,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_editor)],
) -> LiveUpdateResponse:
    """Update coverage. Setting status to ended stamps ended_at."""
    repo = LiveUpdateRepository(db)
    live_update = repo.update(
        repo.get_or_404(live_update_id), **body.model_dump(exclude_unset=True)
    )
    return LiveUpdateResponse.model_validate(live_update)


@router.delete(
    "/{live_update_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a live update permanently",
)
@limiter.limit(RateLimits.ADMIN_WRITE)
def delete_live_update(
    request: Request,
    live_update_id: str,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_admin)],
) -> Response:
    repo = LiveUpdateRepository(db)
    repo.delete(repo.get_or_404(live_update_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
