# -*- coding: utf-8 -*-
"""SQLAlchemy database models."""

import uuid
from datetime import datetime, UTC

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Index,
    Integer,
    String,
    Text,
    TypeDecorator,
)
from sqlalchemy.orm import relationship

from newsdesk.core.database import Base


def utc_now() -> datetime:
    """Return current UTC datetime."""
    return datetime.now(UTC)


def new_id() -> str:
    """Generate a new string identifier."""
    return str(uuid.uuid4())


class UTCDateTime(TypeDecorator):
    """Timezone-aware datetime stored as UTC.

    Aware values are converted to UTC before they are written or compared;
    naive values are taken to be UTC already. SQLite keeps no offset, so
    values read back are re-tagged as UTC.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value


class TimestampMixin:
    """created_at / updated_at columns shared by live entities."""

    created_at = Column(UTCDateTime(), default=utc_now, nullable=False)
    updated_at = Column(UTCDateTime(), default=utc_now, onupdate=utc_now, nullable=False)


class Category(TimestampMixin, Base):
    """News section (Politics, Sports, ...)."""

    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(100), nullable=False)
    slug = Column(String(120), unique=True, nullable=False, index=True)
    description = Column(String(500), nullable=True)
    color = Column(String(20), nullable=True)
    parent_id = Column(String(36), nullable=True, index=True)
    display_order = Column(Integer, default=0, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)


class Author(TimestampMixin, Base):
    """Byline author; not necessarily a login user."""

    __tablename__ = "authors"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(100), nullable=False)
    slug = Column(String(120), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=True)
    bio = Column(String(1000), nullable=True)
    avatar = Column(String(500), nullable=True)
    title = Column(String(100), nullable=True)
    expertise = Column(JSON, default=list, nullable=False)
    social_media = Column(JSON, default=dict, nullable=False)
    location = Column(String(100), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    articles_count = Column(Integer, default=0, nullable=False)
    join_date = Column(UTCDateTime(), default=utc_now, nullable=False)


class Article(TimestampMixin, Base):
    """News article."""

    __tablename__ = "articles"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String(300), nullable=False)
    slug = Column(String(320), unique=True, nullable=False, index=True)
    summary = Column(String(1000), nullable=True)
    content = Column(Text, nullable=False, default="")
    status = Column(String(20), nullable=False, default="draft", index=True)  # draft/scheduled/published/archived
    # Plain references: a category or author may sit in the recycle bin while
    # articles still point at it, and restoring it re-links them.
    category_id = Column(String(36), nullable=True, index=True)
    author_id = Column(String(36), nullable=True, index=True)
    tags = Column(JSON, default=list, nullable=False)
    featured_image = Column(String(500), nullable=True)
    is_featured = Column(Boolean, default=False, nullable=False)
    is_breaking = Column(Boolean, default=False, nullable=False)
    views = Column(Integer, default=0, nullable=False)
    scheduled_for = Column(UTCDateTime(), nullable=True, index=True)
    published_at = Column(UTCDateTime(), nullable=True)

    category = relationship(
        "Category",
        primaryjoin="foreign(Article.category_id) == Category.id",
        viewonly=True,
        lazy="select",
    )
    author = relationship(
        "Author",
        primaryjoin="foreign(Article.author_id) == Author.id",
        viewonly=True,
        lazy="select",
    )


class StaticPage(TimestampMixin, Base):
    """Static content page (About, Contact, Privacy, ...)."""

    __tablename__ = "static_pages"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String(200), nullable=False)
    slug = Column(String(220), unique=True, nullable=False, index=True)
    content = Column(Text, nullable=False, default="")
    meta_description = Column(String(300), nullable=True)
    is_published = Column(Boolean, default=True, nullable=False)
    show_in_menu = Column(Boolean, default=False, nullable=False)
    menu_order = Column(Integer, default=0, nullable=False)


class BreakingNews(TimestampMixin, Base):
    """Ticker headline shown across the site while active."""

    __tablename__ = "breaking_news"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String(200), nullable=False)
    link = Column(String(500), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False, index=True)
    priority = Column(Integer, default=0, nullable=False)
    expires_at = Column(UTCDateTime(), nullable=True)
    created_by = Column(String(64), nullable=True)


class LiveUpdate(TimestampMixin, Base):
    """Running coverage of an ongoing event, with timestamped entries.

    Live updates are hard-deleted; they never enter the recycle bin.
    """

    __tablename__ = "live_updates"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    type = Column(String(20), nullable=False, default="general")  # breaking/sports/weather/traffic/election/general
    status = Column(String(20), nullable=False, default="active")  # active/paused/ended
    priority = Column(Integer, default=3, nullable=False)
    category_id = Column(String(36), nullable=True, index=True)
    author_id = Column(String(36), nullable=True)
    tags = Column(JSON, default=list, nullable=False)
    # Entry dicts: timestamp (ISO string), content, author_id, attachments
    entries = Column(JSON, default=list, nullable=False)
    details = Column(JSON, default=dict, nullable=False)
    started_at = Column(UTCDateTime(), default=utc_now, nullable=False)
    ended_at = Column(UTCDateTime(), nullable=True)
    auto_refresh = Column(Boolean, default=True, nullable=False)
    refresh_interval = Column(Integer, default=30, nullable=False)
    is_sticky = Column(Boolean, default=False, nullable=False)
    show_on_homepage = Column(Boolean, default=True, nullable=False)
    view_count = Column(Integer, default=0, nullable=False)

    category = relationship(
        "Category",
        primaryjoin="foreign(LiveUpdate.category_id) == Category.id",
        viewonly=True,
        lazy="select",
    )
    author = relationship(
        "Author",
        primaryjoin="foreign(LiveUpdate.author_id) == Author.id",
        viewonly=True,
        lazy="select",
    )

    __table_args__ = (
        Index("ix_live_updates_status_priority", "status", "priority", "started_at"),
        Index("ix_live_updates_type_status", "type", "status"),
    )


class Tag(TimestampMixin, Base):
    """Free-form article tag."""

    __tablename__ = "tags"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(60), nullable=False)
    slug = Column(String(80), unique=True, nullable=False, index=True)
    description = Column(String(300), nullable=True)
    color = Column(String(20), nullable=True)
    usage_count = Column(Integer, default=0, nullable=False)


class DeletedItemDB(Base):
    """Recycle bin record: a snapshot of one soft-deleted entity.

    Rows are inserted once and only ever deleted (restore, permanent delete,
    bulk empty or expiry sweep).
    """

    __tablename__ = "recycle_bin"

    id = Column(String(36), primary_key=True, default=new_id)
    item_type = Column(String(32), nullable=False)
    original_id = Column(String(36), nullable=False, index=True)
    snapshot = Column(JSON, nullable=False)
    title = Column(String(300), nullable=False, default="")
    deleted_by = Column(String(64), nullable=False)
    deleted_at = Column(UTCDateTime(), default=utc_now, nullable=False)
    expires_at = Column(UTCDateTime(), nullable=False, index=True)

    __table_args__ = (
        Index("ix_recycle_bin_type_deleted_at", "item_type", "deleted_at"),
        Index("ix_recycle_bin_deleted_by_deleted_at", "deleted_by", "deleted_at"),
    )
