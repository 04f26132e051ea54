# -*- coding: utf-8 -*-
"""Tag models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from newsdesk.models.common import Pagination


class TagCreate(BaseModel):
    """Request model for creating a tag."""

    name: str = Field(..., min_length=1, max_length=60)
    slug: str | None = Field(None, max_length=80)
    description: str | None = Field(None, max_length=300)
    color: str | None = Field(None, max_length=20)


class TagUpdate(BaseModel):
    """Request model for updating a tag."""

    name: str | None = Field(None, min_length=1, max_length=60)
    slug: str | None = Field(None, max_length=80)
    description: str | None = Field(None, max_length=300)
    color: str | None = Field(None, max_length=20)


class TagResponse(BaseModel):
    """Response model for tag data."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    slug: str
    description: str | None
    color: str | None
    usage_count: int
    created_at: datetime
    updated_at: datetime


class TagList(BaseModel):
    """Paginated list of tags."""

    tags: list[TagResponse] = Field(default_factory=list)
    pagination: Pagination
