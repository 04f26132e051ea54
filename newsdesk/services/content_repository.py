# -*- coding: utf-8 -*-
"""Shared repository behaviour for live content entities."""

import re
import uuid
from typing import Any, Generic, TypeVar

from sqlalchemy.orm import Session

from newsdesk.core.database import Base, transaction
from newsdesk.core.exceptions import ConflictError, NotFoundError

ModelT = TypeVar("ModelT", bound=Base)


def slugify(value: str) -> str:
    """Lower-case ``value`` and collapse non-alphanumerics into single dashes."""
    slug = re.sub(r"[^a-z0-9]+", "-", (value or "").strip().lower())
    return slug.strip("-")


class ContentRepository(Generic[ModelT]):
    """CRUD operations common to all live entity tables.

    Subclasses set ``model`` and ``resource_name``; entities with a slug set
    ``slug_source`` to the attribute the slug is derived from. Deletion is not
    offered here: live entities leave through the recycle bin.
    """

    model: type[ModelT]
    resource_name: str = "Resource"
    slug_source: str | None = None

    def __init__(self, db: Session):
        """Initialize repository with database session."""
        self.db = db

    def get_by_id(self, entity_id: str) -> ModelT | None:
        """Get entity by ID, or None."""
        return self.db.get(self.model, entity_id)

    def get_or_404(self, entity_id: str) -> ModelT:
        """Get entity by ID.

        Raises:
            NotFoundError: If no entity has this ID
        """
        entity = self.get_by_id(entity_id)
        if entity is None:
            raise NotFoundError(self.resource_name, entity_id)
        return entity

    def get_by_slug(self, slug: str) -> ModelT | None:
        """Get entity by slug, or None."""
        return self.db.query(self.model).filter(self.model.slug == slug).first()

    def slug_exists(self, slug: str, exclude_id: str | None = None) -> bool:
        """Check whether ``slug`` is taken by another entity."""
        query = self.db.query(self.model.id).filter(self.model.slug == slug)
        if exclude_id is not None:
            query = query.filter(self.model.id != exclude_id)
        return query.first() is not None

    def list(
        self,
        page: int = 1,
        limit: int = 20,
        filters: list | None = None,
        order_by: list | None = None,
    ) -> tuple[list[ModelT], int]:
        """Get a page of entities and the total matching count.

        Args:
            page: Page number (1-based)
            limit: Page size
            filters: SQLAlchemy filter expressions
            order_by: SQLAlchemy ordering expressions (default: newest first)

        Returns:
            Tuple of (entities on the page, total count)
        """
        query = self.db.query(self.model)
        for condition in filters or []:
            query = query.filter(condition)

        total = query.count()
        ordering = order_by or [self.model.created_at.desc()]
        items = (
            query.order_by(*ordering)
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
        return items, total

    def create(self, **fields: Any) -> ModelT:
        """Create an entity, deriving the slug when one is not supplied.

        Raises:
            ConflictError: If the slug or another unique key is taken
        """
        if self.slug_source is not None:
            fields["slug"] = self._resolve_slug(fields.get("slug"), fields.get(self.slug_source))

        entity = self.model(**fields)
        with transaction(self.db):
            self.db.add(entity)
            self.before_create(entity)
        self.db.refresh(entity)
        return entity

    def update(self, entity: ModelT, **fields: Any) -> ModelT:
        """Apply non-None field values to an entity.

        Raises:
            ConflictError: If the new slug or another unique key is taken
        """
        changes = {k: v for k, v in fields.items() if v is not None}
        if "slug" in changes:
            changes["slug"] = self._resolve_slug(changes["slug"], None, exclude_id=entity.id)

        with transaction(self.db):
            self.before_update(entity, changes)
            for key, value in changes.items():
                setattr(entity, key, value)
        self.db.refresh(entity)
        return entity

    def before_create(self, entity: ModelT) -> None:
        """Hook run inside the create transaction."""

    def before_update(self, entity: ModelT, changes: dict[str, Any]) -> None:
        """Hook run inside the update transaction, before changes apply."""

    def _resolve_slug(
        self,
        slug: str | None,
        source: str | None,
        exclude_id: str | None = None,
    ) -> str:
        resolved = slugify(slug or source or "")
        if not resolved:
            resolved = f"{slugify(self.resource_name)}-{uuid.uuid4().hex[:8]}"
        if self.slug_exists(resolved, exclude_id=exclude_id):
            raise ConflictError(
                f"{self.resource_name} slug already in use: {resolved}",
                {"slug": resolved},
            )
        return resolved
