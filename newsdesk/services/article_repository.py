# -*- coding: utf-8 -*-
"""Repository for article database operations."""

from datetime import datetime, UTC
from typing import Any

from sqlalchemy import or_

from newsdesk.core.database import transaction
from newsdesk.core.exceptions import ValidationError
from newsdesk.models.article import ArticleStatus
from newsdesk.models.db_models import Article
from newsdesk.services.author_repository import AuthorRepository
from newsdesk.services.content_repository import ContentRepository


class ArticleRepository(ContentRepository[Article]):
    """Repository for article operations."""

    model = Article
    resource_name = "Article"
    slug_source = "title"

    def before_create(self, entity: Article) -> None:
        """Stamp publication time and count the article for its author."""
        if entity.status == ArticleStatus.PUBLISHED.value and entity.published_at is None:
            entity.published_at = datetime.now(UTC)
        AuthorRepository(self.db).adjust_articles_count(entity.author_id, 1)

    def before_update(self, entity: Article, changes: dict[str, Any]) -> None:
        """Keep author counts and publication time consistent with the change."""
        new_author = changes.get("author_id")
        if new_author is not None and new_author != entity.author_id:
            authors = AuthorRepository(self.db)
            authors.adjust_articles_count(entity.author_id, -1)
            authors.adjust_articles_count(new_author, 1)

        status = changes.get("status")
        if status == ArticleStatus.SCHEDULED.value:
            if changes.get("scheduled_for") is None and entity.scheduled_for is None:
                raise ValidationError(
                    "Scheduled articles need scheduled_for",
                    {"article_id": entity.id},
                )
        elif status == ArticleStatus.PUBLISHED.value and entity.published_at is None:
            changes["published_at"] = datetime.now(UTC)

    def list_articles(
        self,
        page: int = 1,
        limit: int = 20,
        status: str | None = None,
        category_id: str | None = None,
        author_id: str | None = None,
        search: str | None = None,
        featured: bool | None = None,
    ) -> tuple[list[Article], int]:
        """List articles, newest first.

        Args:
            page: Page number (1-based)
            limit: Page size
            status: Only articles with this status
            category_id: Only articles in this category
            author_id: Only articles by this author
            search: Substring match on title or summary
            featured: Only featured (True) or non-featured (False) articles

        Returns:
            Tuple of (articles, total count)
        """
        filters = []
        if status:
            filters.append(Article.status == status)
        if category_id:
            filters.append(Article.category_id == category_id)
        if author_id:
            filters.append(Article.author_id == author_id)
        if search:
            pattern = f"%{search}%"
            filters.append(or_(Article.title.ilike(pattern), Article.summary.ilike(pattern)))
        if featured is not None:
            filters.append(Article.is_featured.is_(featured))

        return self.list(
            page=page,
            limit=limit,
            filters=filters,
            order_by=[Article.published_at.desc(), Article.created_at.desc()],
        )

    def get_published_by_slug(self, slug: str) -> Article | None:
        """Get a published article by slug, or None."""
        return self.db.query(Article).filter(
            Article.slug == slug,
            Article.status == ArticleStatus.PUBLISHED.value,
        ).first()

    def increment_views(self, article: Article) -> Article:
        """Count one view of an article."""
        with transaction(self.db):
            article.views = (article.views or 0) + 1
        self.db.refresh(article)
        return article

    def publish_due(self, now: datetime | None = None) -> int:
        """Publish every scheduled article whose time has come.

        Args:
            now: Reference time (default: current UTC time)

        Returns:
            Number of articles published
        """
        now = now or datetime.now(UTC)
        with transaction(self.db):
            count = (
                self.db.query(Article)
                .filter(
                    Article.status == ArticleStatus.SCHEDULED.value,
                    Article.scheduled_for <= now,
                )
                .update(
                    {
                        Article.status: ArticleStatus.PUBLISHED.value,
                        Article.published_at: now,
                        Article.updated_at: now,
                    },
                    synchronize_session=False,
                )
            )
        return count
