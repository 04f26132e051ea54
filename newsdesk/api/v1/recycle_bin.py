# -*- coding: utf-8 -*-
"""Recycle bin API endpoints.

Every endpoint here requires an administrator. Entities enter the bin through
the DELETE endpoint of their own router.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from newsdesk.api.v1.common import DEFAULT_LIMIT, LimitParam, PageParam
from newsdesk.core.database import get_db
from newsdesk.core.rate_limiter import limiter, RateLimits
from newsdesk.core.security import require_admin
from newsdesk.models.common import Pagination
from newsdesk.models.recycle_bin import (
    DeletedItem,
    DeletedItemDetail,
    DeletedItemList,
    EmptyBinResponse,
    ItemType,
    RecycleBinStats,
    RestoreResponse,
)
from newsdesk.services.recycle_bin_registry import snapshot_entity
from newsdesk.services.recycle_bin_repository import RecycleBinRepository

router = APIRouter(
    prefix="/recycle-bin",
    tags=["recycle-bin"],
    dependencies=[Depends(require_admin)],
)


@router.get(
    "",
    response_model=DeletedItemList,
    summary="List recycle bin records",
)
@limiter.limit(RateLimits.DEFAULT)
def list_deleted_items(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    item_type: ItemType | None = None,
    page: PageParam = 1,
    limit: LimitParam = DEFAULT_LIMIT,
) -> DeletedItemList:
    """List deleted items, most recently deleted first.

    Args:
        item_type: Only records of this type
        page: Page number (1-based)
        limit: Page size
    """
    items, total = RecycleBinRepository(db).list_deleted(
        item_type=item_type, page=page, limit=limit
    )
    return DeletedItemList(
        items=[DeletedItem.model_validate(i) for i in items],
        total=total,
        pagination=Pagination.build(page, limit, total),
    )


@router.get(
    "/stats",
    response_model=RecycleBinStats,
    summary="Get recycle bin statistics",
)
@limiter.limit(RateLimits.DEFAULT)
def get_recycle_bin_stats(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
) -> RecycleBinStats:
    """Totals per type and the number of records expiring soon."""
    return RecycleBinStats.model_validate(RecycleBinRepository(db).get_stats())


@router.post(
    "/empty",
    response_model=EmptyBinResponse,
    summary="Empty the recycle bin",
)
@limiter.limit(RateLimits.BULK)
def empty_recycle_bin(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    confirm: bool = False,
    item_type: ItemType | None = None,
    expired_only: bool = False,
) -> EmptyBinResponse:
    """Permanently delete records. This cannot be undone.

    Args:
        confirm: Must be true
        item_type: Only records of this type
        expired_only: Only records already past their expiry time
    """
    if not confirm:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Emptying the recycle bin requires confirm=true",
        )

    count = RecycleBinRepository(db).empty(item_type=item_type, expired_only=expired_only)
    return EmptyBinResponse(
        deleted_count=count,
        message=f"{count} item(s) permanently deleted",
    )


@router.get(
    "/{deleted_item_id}",
    response_model=DeletedItemDetail,
    summary="Get a recycle bin record",
)
@limiter.limit(RateLimits.DEFAULT)
def get_deleted_item(
    request: Request,
    deleted_item_id: str,
    db: Annotated[Session, Depends(get_db)],
) -> DeletedItemDetail:
    """Get one record, including the snapshot of the deleted entity."""
    return DeletedItemDetail.model_validate(RecycleBinRepository(db).get_or_404(deleted_item_id))


@router.post(
    "/{deleted_item_id}/restore",
    response_model=RestoreResponse,
    summary="Restore a deleted item",
)
@limiter.limit(RateLimits.ADMIN_WRITE)
def restore_deleted_item(
    request: Request,
    deleted_item_id: str,
    db: Annotated[Session, Depends(get_db)],
) -> RestoreResponse:
    """Recreate the entity under its original ID and drop the record.

    Returns 404 when the record is gone and 409 when the entity collides
    with live data, in which case the record stays in the bin.
    """
    entry, entity = RecycleBinRepository(db).restore(deleted_item_id)
    return RestoreResponse(
        item_type=entry.item_type,
        id=entity.id,
        data=snapshot_entity(entity),
        message=f"{entry.item_type.value} '{entry.title_of(entity)}' has been restored",
    )


@router.delete(
    "/{deleted_item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Permanently delete a recycle bin record",
)
@limiter.limit(RateLimits.ADMIN_WRITE)
def delete_deleted_item(
    request: Request,
    deleted_item_id: str,
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    """Discard a record. The entity can no longer be restored."""
    RecycleBinRepository(db).permanently_delete(deleted_item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
