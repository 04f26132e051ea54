# -*- coding: utf-8 -*-
"""Recycle bin (soft delete) related models."""

from datetime import datetime, UTC
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from newsdesk.models.common import Pagination


def _utc_now() -> datetime:
    """Return current UTC datetime."""
    return datetime.now(UTC)


class ItemType(str, Enum):
    """Entity types that can be moved to the recycle bin."""

    ARTICLE = "article"
    CATEGORY = "category"
    AUTHOR = "author"
    STATIC_PAGE = "staticPage"
    BREAKING_NEWS = "breakingNews"
    TAG = "tag"


class DeletedItem(BaseModel):
    """A recycle bin record, without its snapshot."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="Recycle bin record ID")
    item_type: str = Field(..., description="Type of the deleted entity")
    original_id: str = Field(..., description="ID the entity had before deletion")
    title: str = Field(..., description="Title or name of the deleted entity")
    deleted_by: str = Field(..., description="ID of the user who deleted it")
    deleted_at: datetime = Field(..., description="When the entity was deleted")
    expires_at: datetime = Field(..., description="When the record is purged")


class DeletedItemDetail(DeletedItem):
    """A recycle bin record including the entity snapshot."""

    snapshot: dict[str, Any] = Field(..., description="Entity fields at deletion time")


class DeletedItemList(BaseModel):
    """Paginated list of recycle bin records, most recently deleted first."""

    items: list[DeletedItem] = Field(default_factory=list)
    total: int = Field(..., description="Total count of matching records")
    pagination: Pagination


class SoftDeleteResponse(BaseModel):
    """Response after moving a live entity to the recycle bin."""

    deleted_item_id: str = Field(..., description="Recycle bin record ID")
    item_type: ItemType
    original_id: str
    expires_at: datetime
    message: str


class RestoreResponse(BaseModel):
    """Response after restoring an entity from the recycle bin."""

    item_type: ItemType = Field(..., description="Type of restored entity")
    id: str = Field(..., description="Restored entity ID")
    data: dict[str, Any] = Field(..., description="Restored entity fields")
    message: str = Field(..., description="Success message")
    restored_at: datetime = Field(default_factory=_utc_now)


class EmptyBinResponse(BaseModel):
    """Response after emptying the recycle bin."""

    deleted_count: int = Field(..., description="Number of records permanently deleted")
    message: str


class TypeStats(BaseModel):
    """Recycle bin statistics for one item type."""

    item_type: str
    count: int
    oldest: datetime | None
    newest: datetime | None


class RecycleBinStats(BaseModel):
    """Recycle bin statistics."""

    total: int
    expiring_soon: int = Field(..., description="Records that expire within the warning window")
    by_type: list[TypeStats] = Field(default_factory=list)
