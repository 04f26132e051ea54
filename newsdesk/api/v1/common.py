# -*- coding: utf-8 -*-
"""Helpers shared by the entity routers."""

from typing import Annotated

from fastapi import Query
from sqlalchemy.orm import Session

from newsdesk.core.config import get_settings
from newsdesk.core.security import CurrentUser
from newsdesk.models.recycle_bin import ItemType, SoftDeleteResponse
from newsdesk.services.recycle_bin_repository import RecycleBinRepository

_settings = get_settings()

PageParam = Annotated[int, Query(ge=1, description="Page number (1-based)")]
LimitParam = Annotated[
    int,
    Query(ge=1, le=_settings.max_page_size, description="Items per page"),
]
DEFAULT_LIMIT = _settings.default_page_size


def move_to_recycle_bin(
    db: Session,
    item_type: ItemType,
    entity_id: str,
    user: CurrentUser,
) -> SoftDeleteResponse:
    """Soft delete a live entity on behalf of ``user``."""
    item = RecycleBinRepository(db).soft_delete(item_type, entity_id, deleted_by=user.id)
    return SoftDeleteResponse(
        deleted_item_id=item.id,
        item_type=item_type,
        original_id=entity_id,
        expires_at=item.expires_at,
        message=f"{item_type.value} '{item.title}' moved to recycle bin",
    )
