# -*- coding: utf-8 -*-
"""Registry of entity types that can be moved to the recycle bin.

Each entry knows the live model, which field labels the entity in listings,
how to rebuild the entity from its snapshot, and what bookkeeping to undo when
the entity is deleted. Supporting a new type means registering one restore
function here.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable

from sqlalchemy import DateTime, inspect
from sqlalchemy.orm import Session

from newsdesk.core.exceptions import InvalidItemTypeError
from newsdesk.models.db_models import (
    Article,
    Author,
    BreakingNews,
    Category,
    StaticPage,
    Tag,
    UTCDateTime,
)
from newsdesk.models.recycle_bin import ItemType
from newsdesk.services.author_repository import AuthorRepository

RestoreFunc = Callable[[Session, dict[str, Any]], Any]
AfterDeleteFunc = Callable[[Session, dict[str, Any]], None]


@dataclass(frozen=True)
class SoftDeletable:
    """How one entity type enters and leaves the recycle bin."""

    item_type: ItemType
    model: type
    title_field: str
    restore: RestoreFunc
    after_delete: AfterDeleteFunc | None = None

    def title_of(self, entity: Any) -> str:
        return str(getattr(entity, self.title_field, "") or "")


_registry: dict[str, SoftDeletable] = {}


def register(
    item_type: ItemType,
    model: type,
    title_field: str = "title",
    after_delete: AfterDeleteFunc | None = None,
) -> Callable[[RestoreFunc], RestoreFunc]:
    """Register ``restore_fn`` as the reconstruction rule for ``item_type``."""

    def decorator(restore_fn: RestoreFunc) -> RestoreFunc:
        _registry[item_type.value] = SoftDeletable(
            item_type=item_type,
            model=model,
            title_field=title_field,
            restore=restore_fn,
            after_delete=after_delete,
        )
        return restore_fn

    return decorator


def get_soft_deletable(item_type: ItemType | str) -> SoftDeletable:
    """Look up the registry entry for ``item_type``.

    Raises:
        InvalidItemTypeError: If the type was never registered
    """
    key = item_type.value if isinstance(item_type, ItemType) else item_type
    try:
        return _registry[key]
    except KeyError:
        raise InvalidItemTypeError(key) from None


def registered_types() -> list[ItemType]:
    """All item types the recycle bin can restore."""
    return [entry.item_type for entry in _registry.values()]


# ========== Snapshots ==========

def snapshot_entity(entity: Any) -> dict[str, Any]:
    """Copy every column value of ``entity`` into a JSON-safe dict."""
    data = {}
    for attr in inspect(entity).mapper.column_attrs:
        value = getattr(entity, attr.key)
        if isinstance(value, datetime):
            value = value.isoformat()
        data[attr.key] = value
    return data


def entity_from_snapshot(model: type, snapshot: dict[str, Any]) -> Any:
    """Build a transient ``model`` instance from a snapshot.

    Keys that are no longer columns are ignored; columns missing from the
    snapshot fall back to their defaults.
    """
    values = {}
    for attr in inspect(model).column_attrs:
        if attr.key not in snapshot:
            continue
        value = snapshot[attr.key]
        if isinstance(value, str) and isinstance(attr.columns[0].type, (DateTime, UTCDateTime)):
            value = datetime.fromisoformat(value)
        values[attr.key] = value
    return model(**values)


def _restore_as_is(model: type) -> RestoreFunc:
    def restore(db: Session, snapshot: dict[str, Any]) -> Any:
        entity = entity_from_snapshot(model, snapshot)
        db.add(entity)
        return entity

    return restore


# ========== Registered types ==========

def _uncount_article(db: Session, snapshot: dict[str, Any]) -> None:
    AuthorRepository(db).adjust_articles_count(snapshot.get("author_id"), -1)


@register(ItemType.ARTICLE, Article, after_delete=_uncount_article)
def restore_article(db: Session, snapshot: dict[str, Any]) -> Article:
    """Recreate an article under its original ID.

    Status and published_at come back as snapshotted; publication hooks do not
    run again. The author's article count is restored.
    """
    article = entity_from_snapshot(Article, snapshot)
    db.add(article)
    AuthorRepository(db).adjust_articles_count(article.author_id, 1)
    return article


@register(ItemType.AUTHOR, Author, title_field="name")
def restore_author(db: Session, snapshot: dict[str, Any]) -> Author:
    """Recreate an author, recounting articles that still reference it."""
    author = entity_from_snapshot(Author, snapshot)
    author.articles_count = db.query(Article).filter(Article.author_id == author.id).count()
    db.add(author)
    return author


register(ItemType.CATEGORY, Category, title_field="name")(_restore_as_is(Category))
register(ItemType.STATIC_PAGE, StaticPage)(_restore_as_is(StaticPage))
register(ItemType.BREAKING_NEWS, BreakingNews)(_restore_as_is(BreakingNews))
register(ItemType.TAG, Tag, title_field="name")(_restore_as_is(Tag))
