# -*- coding: utf-8 -*-
"""Breaking news models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from newsdesk.models.common import Pagination


class BreakingNewsCreate(BaseModel):
    """Request model for creating a breaking news headline."""

    title: str = Field(..., min_length=5, max_length=200)
    link: str | None = Field(None, max_length=500)
    is_active: bool = True
    priority: int = 0
    expires_at: datetime | None = None


class BreakingNewsUpdate(BaseModel):
    """Request model for updating a breaking news headline."""

    title: str | None = Field(None, min_length=5, max_length=200)
    link: str | None = Field(None, max_length=500)
    is_active: bool | None = None
    priority: int | None = None
    expires_at: datetime | None = None


class BreakingNewsResponse(BaseModel):
    """Response model for breaking news data."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    link: str | None
    is_active: bool
    priority: int
    expires_at: datetime | None
    created_by: str | None
    created_at: datetime
    updated_at: datetime


class BreakingNewsList(BaseModel):
    """Paginated list of breaking news headlines."""

    items: list[BreakingNewsResponse] = Field(default_factory=list)
    pagination: Pagination
