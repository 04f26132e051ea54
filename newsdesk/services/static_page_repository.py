# -*- coding: utf-8 -*-
"""Repository for static page database operations."""

from newsdesk.models.db_models import StaticPage
from newsdesk.services.content_repository import ContentRepository


class StaticPageRepository(ContentRepository[StaticPage]):
    """Repository for static page operations."""

    model = StaticPage
    resource_name = "StaticPage"
    slug_source = "title"

    def get_published_by_slug(self, slug: str) -> StaticPage | None:
        """Get a published page by slug, or None."""
        return self.db.query(StaticPage).filter(
            StaticPage.slug == slug,
            StaticPage.is_published.is_(True),
        ).first()

    def list_pages(
        self,
        page: int = 1,
        limit: int = 20,
        published_only: bool = False,
    ) -> tuple[list[StaticPage], int]:
        """List pages in menu order."""
        filters = [StaticPage.is_published.is_(True)] if published_only else []
        return self.list(
            page=page,
            limit=limit,
            filters=filters,
            order_by=[StaticPage.menu_order.asc(), StaticPage.title.asc()],
        )
