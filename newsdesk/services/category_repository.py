# -*- coding: utf-8 -*-
"""Repository for category database operations."""

from newsdesk.models.db_models import Category
from newsdesk.services.content_repository import ContentRepository


class CategoryRepository(ContentRepository[Category]):
    """Repository for category operations."""

    model = Category
    resource_name = "Category"
    slug_source = "name"

    def list_categories(
        self,
        page: int = 1,
        limit: int = 20,
        active_only: bool = False,
    ) -> tuple[list[Category], int]:
        """List categories in display order.

        Args:
            page: Page number (1-based)
            limit: Page size
            active_only: Exclude inactive categories

        Returns:
            Tuple of (categories, total count)
        """
        filters = [Category.is_active.is_(True)] if active_only else []
        return self.list(
            page=page,
            limit=limit,
            filters=filters,
            order_by=[Category.display_order.asc(), Category.name.asc()],
        )
