# -*- coding: utf-8 -*-
"""Live update models."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from newsdesk.models.author import AuthorSummary
from newsdesk.models.category import CategorySummary
from newsdesk.models.common import Pagination


class LiveUpdateType(str, Enum):
    """Kind of event being covered."""

    BREAKING = "breaking"
    SPORTS = "sports"
    WEATHER = "weather"
    TRAFFIC = "traffic"
    ELECTION = "election"
    GENERAL = "general"


class LiveUpdateStatus(str, Enum):
    """Coverage state. Ended coverage accepts no further entries."""

    ACTIVE = "active"
    PAUSED = "paused"
    ENDED = "ended"


class LiveUpdateDetails(BaseModel):
    """Event-specific facts shown next to the coverage."""

    score: str | None = Field(None, max_length=100, description="e.g. 'Team A 2 - 1 Team B'")
    location: str | None = Field(None, max_length=200)
    temperature: str | None = Field(None, max_length=20)
    participants: list[str] = Field(default_factory=list)


class LiveUpdateCreate(BaseModel):
    """Request model for starting live coverage."""

    model_config = ConfigDict(use_enum_values=True)

    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)
    type: LiveUpdateType = LiveUpdateType.GENERAL
    priority: int = Field(3, ge=1, le=5, description="5 is highest")
    category_id: str | None = None
    author_id: str
    tags: list[str] = Field(default_factory=list)
    details: LiveUpdateDetails = Field(default_factory=LiveUpdateDetails)
    auto_refresh: bool = True
    refresh_interval: int = Field(30, ge=10, le=300, description="Seconds")
    is_sticky: bool = False
    show_on_homepage: bool = True


class LiveUpdateUpdate(BaseModel):
    """Request model for updating live coverage."""

    model_config = ConfigDict(use_enum_values=True)

    title: str | None = Field(None, min_length=1, max_length=200)
    content: str | None = Field(None, min_length=1)
    type: LiveUpdateType | None = None
    status: LiveUpdateStatus | None = None
    priority: int | None = Field(None, ge=1, le=5)
    category_id: str | None = None
    tags: list[str] | None = None
    details: LiveUpdateDetails | None = None
    auto_refresh: bool | None = None
    refresh_interval: int | None = Field(None, ge=10, le=300)
    is_sticky: bool | None = None
    show_on_homepage: bool | None = None
    ended_at: datetime | None = None


class LiveUpdateEntryCreate(BaseModel):
    """Request model for appending an entry to live coverage."""

    content: str = Field(..., min_length=1)
    author_id: str
    attachments: list[str] = Field(default_factory=list)


class LiveUpdateEntry(BaseModel):
    """One timestamped entry of live coverage."""

    timestamp: datetime
    content: str
    author_id: str | None = None
    attachments: list[str] = Field(default_factory=list)


class LiveUpdateResponse(BaseModel):
    """Response model for live coverage, with category and author populated."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    content: str
    type: LiveUpdateType
    status: LiveUpdateStatus
    priority: int
    category_id: str | None
    author_id: str | None
    category: CategorySummary | None = None
    author: AuthorSummary | None = None
    tags: list[str]
    entries: list[LiveUpdateEntry]
    details: LiveUpdateDetails
    started_at: datetime
    ended_at: datetime | None
    auto_refresh: bool
    refresh_interval: int
    is_sticky: bool
    show_on_homepage: bool
    view_count: int
    created_at: datetime
    updated_at: datetime


class LiveUpdateList(BaseModel):
    """Paginated list of live coverage."""

    live_updates: list[LiveUpdateResponse] = Field(default_factory=list)
    pagination: Pagination
