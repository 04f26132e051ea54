# -*- coding: utf-8 -*-
"""Category models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from newsdesk.models.common import Pagination


class CategoryCreate(BaseModel):
    """Request model for creating a category."""

    name: str = Field(..., min_length=1, max_length=100)
    slug: str | None = Field(None, max_length=120, description="Generated from name when omitted")
    description: str | None = Field(None, max_length=500)
    color: str | None = Field(None, max_length=20)
    parent_id: str | None = None
    display_order: int = 0
    is_active: bool = True


class CategoryUpdate(BaseModel):
    """Request model for updating a category."""

    name: str | None = Field(None, min_length=1, max_length=100)
    slug: str | None = Field(None, max_length=120)
    description: str | None = Field(None, max_length=500)
    color: str | None = Field(None, max_length=20)
    parent_id: str | None = None
    display_order: int | None = None
    is_active: bool | None = None


class CategoryResponse(BaseModel):
    """Response model for category data."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    slug: str
    description: str | None
    color: str | None
    parent_id: str | None
    display_order: int
    is_active: bool
    created_at: datetime
    updated_at: datetime


class CategorySummary(BaseModel):
    """Category reference embedded in article responses."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    slug: str


class CategoryList(BaseModel):
    """Paginated list of categories."""

    categories: list[CategoryResponse] = Field(default_factory=list)
    pagination: Pagination
