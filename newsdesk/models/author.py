# -*- coding: utf-8 -*-
"""Author models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from newsdesk.models.common import Pagination


class AuthorCreate(BaseModel):
    """Request model for creating an author."""

    name: str = Field(..., min_length=1, max_length=100)
    slug: str | None = Field(None, max_length=120, description="Generated from name when omitted")
    email: str | None = Field(None, max_length=255, pattern=r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
    bio: str | None = Field(None, max_length=1000)
    avatar: str | None = Field(None, max_length=500)
    title: str | None = Field(None, max_length=100)
    expertise: list[str] = Field(default_factory=list)
    social_media: dict[str, str] = Field(default_factory=dict)
    location: str | None = Field(None, max_length=100)
    is_active: bool = True


class AuthorUpdate(BaseModel):
    """Request model for updating an author."""

    name: str | None = Field(None, min_length=1, max_length=100)
    slug: str | None = Field(None, max_length=120)
    email: str | None = Field(None, max_length=255, pattern=r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
    bio: str | None = Field(None, max_length=1000)
    avatar: str | None = Field(None, max_length=500)
    title: str | None = Field(None, max_length=100)
    expertise: list[str] | None = None
    social_media: dict[str, str] | None = None
    location: str | None = Field(None, max_length=100)
    is_active: bool | None = None


class AuthorResponse(BaseModel):
    """Response model for author data."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    slug: str
    email: str | None
    bio: str | None
    avatar: str | None
    title: str | None
    expertise: list[str]
    social_media: dict[str, str]
    location: str | None
    is_active: bool
    articles_count: int
    join_date: datetime
    created_at: datetime
    updated_at: datetime


class AuthorSummary(BaseModel):
    """Author reference embedded in article responses."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    slug: str
    avatar: str | None = None


class AuthorList(BaseModel):
    """Paginated list of authors."""

    authors: list[AuthorResponse] = Field(default_factory=list)
    pagination: Pagination
