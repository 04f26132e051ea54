# -*- coding: utf-8 -*-
"""Article models."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from newsdesk.models.author import AuthorSummary
from newsdesk.models.category import CategorySummary
from newsdesk.models.common import Pagination


class ArticleStatus(str, Enum):
    """Publication status of an article."""

    DRAFT = "draft"
    SCHEDULED = "scheduled"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class ArticleCreate(BaseModel):
    """Request model for creating an article."""

    model_config = ConfigDict(use_enum_values=True)

    title: str = Field(..., min_length=1, max_length=300)
    slug: str | None = Field(None, max_length=320, description="Generated from title when omitted")
    summary: str | None = Field(None, max_length=1000)
    content: str = ""
    status: ArticleStatus = ArticleStatus.DRAFT
    category_id: str | None = None
    author_id: str | None = None
    tags: list[str] = Field(default_factory=list)
    featured_image: str | None = Field(None, max_length=500)
    is_featured: bool = False
    is_breaking: bool = False
    scheduled_for: datetime | None = None

    @model_validator(mode="after")
    def check_schedule(self) -> "ArticleCreate":
        if self.status == ArticleStatus.SCHEDULED and self.scheduled_for is None:
            raise ValueError("scheduled_for is required for scheduled articles")
        return self


class ArticleUpdate(BaseModel):
    """Request model for updating an article."""

    model_config = ConfigDict(use_enum_values=True)

    title: str | None = Field(None, min_length=1, max_length=300)
    slug: str | None = Field(None, max_length=320)
    summary: str | None = Field(None, max_length=1000)
    content: str | None = None
    status: ArticleStatus | None = None
    category_id: str | None = None
    author_id: str | None = None
    tags: list[str] | None = None
    featured_image: str | None = Field(None, max_length=500)
    is_featured: bool | None = None
    is_breaking: bool | None = None
    scheduled_for: datetime | None = None


class ArticleResponse(BaseModel):
    """Response model for article data, with category and author populated."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    slug: str
    summary: str | None
    content: str
    status: ArticleStatus
    category_id: str | None
    author_id: str | None
    category: CategorySummary | None = None
    author: AuthorSummary | None = None
    tags: list[str]
    featured_image: str | None
    is_featured: bool
    is_breaking: bool
    views: int
    scheduled_for: datetime | None
    published_at: datetime | None
    created_at: datetime
    updated_at: datetime


class ArticleList(BaseModel):
    """Paginated list of articles."""

    articles: list[ArticleResponse] = Field(default_factory=list)
    pagination: Pagination


class PublishResult(BaseModel):
    """Result of a scheduled publishing run."""

    published: int = Field(..., description="Number of articles published")
    message: str
