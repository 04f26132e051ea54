# -*- coding: utf-8 -*-
"""Repository for breaking news database operations."""

from datetime import datetime, UTC

from sqlalchemy import or_

from newsdesk.models.db_models import BreakingNews
from newsdesk.services.content_repository import ContentRepository


class BreakingNewsRepository(ContentRepository[BreakingNews]):
    """Repository for breaking news operations."""

    model = BreakingNews
    resource_name = "BreakingNews"

    def get_active(self, limit: int = 10) -> list[BreakingNews]:
        """Get active, unexpired headlines, highest priority first.

        Args:
            limit: Maximum number of headlines

        Returns:
            List of headlines
        """
        now = datetime.now(UTC)
        return (
            self.db.query(BreakingNews)
            .filter(
                BreakingNews.is_active.is_(True),
                or_(BreakingNews.expires_at.is_(None), BreakingNews.expires_at > now),
            )
            .order_by(BreakingNews.priority.desc(), BreakingNews.created_at.desc())
            .limit(limit)
            .all()
        )

    def toggle_active(self, item: BreakingNews) -> BreakingNews:
        """Flip the active flag of a headline."""
        return self.update(item, is_active=not item.is_active)
