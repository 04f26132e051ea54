# -*- coding: utf-8 -*-
"""Repository for author database operations."""

from typing import Any

from newsdesk.core.exceptions import ConflictError
from newsdesk.models.db_models import Author
from newsdesk.services.content_repository import ContentRepository


class AuthorRepository(ContentRepository[Author]):
    """Repository for author operations."""

    model = Author
    resource_name = "Author"
    slug_source = "name"

    def email_exists(self, email: str, exclude_id: str | None = None) -> bool:
        """Check whether ``email`` belongs to another author."""
        query = self.db.query(Author.id).filter(Author.email == email.lower())
        if exclude_id is not None:
            query = query.filter(Author.id != exclude_id)
        return query.first() is not None

    def create(self, **fields: Any) -> Author:
        """Create an author.

        Raises:
            ConflictError: If the slug or email is taken
        """
        if fields.get("email"):
            fields["email"] = self._check_email(fields["email"])
        return super().create(**fields)

    def update(self, entity: Author, **fields: Any) -> Author:
        """Update an author.

        Raises:
            ConflictError: If the new slug or email is taken
        """
        if fields.get("email"):
            fields["email"] = self._check_email(fields["email"], exclude_id=entity.id)
        return super().update(entity, **fields)

    def list_authors(
        self,
        page: int = 1,
        limit: int = 20,
        active_only: bool = False,
    ) -> tuple[list[Author], int]:
        """List authors alphabetically."""
        filters = [Author.is_active.is_(True)] if active_only else []
        return self.list(page=page, limit=limit, filters=filters, order_by=[Author.name.asc()])

    def adjust_articles_count(self, author_id: str | None, delta: int) -> None:
        """Add ``delta`` to an author's article count without committing.

        Missing authors are ignored; the count never drops below zero.
        """
        if not author_id:
            return
        author = self.db.get(Author, author_id)
        if author is not None:
            author.articles_count = max(0, (author.articles_count or 0) + delta)

    def _check_email(self, email: str, exclude_id: str | None = None) -> str:
        email = email.strip().lower()
        if self.email_exists(email, exclude_id=exclude_id):
            raise ConflictError("Author email already in use", {"email": email})
        return email
