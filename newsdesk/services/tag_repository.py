# -*- coding: utf-8 -*-
"""Repository for tag database operations."""

from newsdesk.models.db_models import Tag
from newsdesk.services.content_repository import ContentRepository


class TagRepository(ContentRepository[Tag]):
    """Repository for tag operations."""

    model = Tag
    resource_name = "Tag"
    slug_source = "name"

    def list_tags(self, page: int = 1, limit: int = 20, search: str | None = None) -> tuple[list[Tag], int]:
        """List tags, most used first."""
        filters = [Tag.name.ilike(f"%{search}%")] if search else []
        return self.list(
            page=page,
            limit=limit,
            filters=filters,
            order_by=[Tag.usage_count.desc(), Tag.name.asc()],
        )
