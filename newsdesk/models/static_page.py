# -*- coding: utf-8 -*-
"""Static page models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from newsdesk.models.common import Pagination


class StaticPageCreate(BaseModel):
    """Request model for creating a static page."""

    title: str = Field(..., min_length=1, max_length=200)
    slug: str | None = Field(None, max_length=220)
    content: str = ""
    meta_description: str | None = Field(None, max_length=300)
    is_published: bool = True
    show_in_menu: bool = False
    menu_order: int = 0


class StaticPageUpdate(BaseModel):
    """Request model for updating a static page."""

    title: str | None = Field(None, min_length=1, max_length=200)
    slug: str | None = Field(None, max_length=220)
    content: str | None = None
    meta_description: str | None = Field(None, max_length=300)
    is_published: bool | None = None
    show_in_menu: bool | None = None
    menu_order: int | None = None


class StaticPageResponse(BaseModel):
    """Response model for static page data."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    slug: str
    content: str
    meta_description: str | None
    is_published: bool
    show_in_menu: bool
    menu_order: int
    created_at: datetime
    updated_at: datetime


class StaticPageList(BaseModel):
    """Paginated list of static pages."""

    pages: list[StaticPageResponse] = Field(default_factory=list)
    pagination: Pagination
