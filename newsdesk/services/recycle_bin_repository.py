# -*- coding: utf-8 -*-
"""Repository for recycle bin (soft delete) operations."""

from datetime import datetime, UTC, timedelta
from typing import Any

from sqlalchemy import func
from sqlalchemy.orm import Session

from newsdesk.core.config import get_settings
from newsdesk.core.database import transaction
from newsdesk.core.exceptions import ConflictError, NotFoundError
from newsdesk.core.logging import get_logger
from newsdesk.models.db_models import DeletedItemDB
from newsdesk.models.recycle_bin import ItemType
from newsdesk.services.recycle_bin_registry import (
    SoftDeletable,
    get_soft_deletable,
    snapshot_entity,
)

logger = get_logger(__name__)


class RecycleBinRepository:
    """Repository for recycle bin operations.

    Every record moves through ALIVE -> RESTORED or ALIVE -> EXPIRED (or is
    discarded); records are never updated in place.
    """

    def __init__(self, db: Session, retention_days: int | None = None):
        """Initialize repository with database session.

        Args:
            db: Database session
            retention_days: Days a record is kept (default from settings)
        """
        self.db = db
        if retention_days is None:
            retention_days = get_settings().recycle_bin_retention_days
        self.retention_days = retention_days

    # ========== Soft Delete ==========

    def soft_delete(
        self,
        item_type: ItemType | str,
        entity_id: str,
        deleted_by: str,
    ) -> DeletedItemDB:
        """Move a live entity into the recycle bin.

        The snapshot insert and the live delete commit together; if the live
        row is already gone the whole operation rolls back.

        Args:
            item_type: Type of the entity
            entity_id: ID of the live entity
            deleted_by: ID of the acting user

        Returns:
            Created DeletedItemDB

        Raises:
            NotFoundError: If the live entity does not exist
            InvalidItemTypeError: If the type is not registered
        """
        entry = get_soft_deletable(item_type)
        model = entry.model

        entity = self.db.get(model, entity_id)
        if entity is None:
            raise NotFoundError(entry.item_type.value, entity_id)

        snapshot = snapshot_entity(entity)
        now = datetime.now(UTC)
        item = DeletedItemDB(
            item_type=entry.item_type.value,
            original_id=entity_id,
            snapshot=snapshot,
            title=entry.title_of(entity),
            deleted_by=deleted_by,
            deleted_at=now,
            expires_at=now + timedelta(days=self.retention_days),
        )

        with transaction(self.db):
            self.db.add(item)
            self.db.flush()
            removed = (
                self.db.query(model)
                .filter(model.id == entity_id)
                .delete(synchronize_session="fetch")
            )
            if removed != 1:
                raise NotFoundError(entry.item_type.value, entity_id)
            if entry.after_delete is not None:
                entry.after_delete(self.db, snapshot)

        logger.info(
            "Moved to recycle bin",
            item_type=entry.item_type.value,
            original_id=entity_id,
            deleted_item_id=item.id,
            deleted_by=deleted_by,
        )
        return item

    # ========== Query ==========

    def get(self, deleted_item_id: str) -> DeletedItemDB | None:
        """Get a recycle bin record by ID, or None."""
        return self.db.get(DeletedItemDB, deleted_item_id)

    def get_or_404(self, deleted_item_id: str) -> DeletedItemDB:
        """Get a recycle bin record by ID.

        Raises:
            NotFoundError: If the record does not exist
        """
        item = self.get(deleted_item_id)
        if item is None:
            raise NotFoundError("DeletedItem", deleted_item_id)
        return item

    def list_deleted(
        self,
        item_type: ItemType | str | None = None,
        page: int = 1,
        limit: int = 20,
    ) -> tuple[list[DeletedItemDB], int]:
        """List recycle bin records, most recently deleted first.

        Args:
            item_type: Only records of this type
            page: Page number (1-based)
            limit: Page size

        Returns:
            Tuple of (records on the page, total matching count)
        """
        query = self.db.query(DeletedItemDB)
        if item_type is not None:
            query = query.filter(DeletedItemDB.item_type == _type_value(item_type))

        total = query.count()
        items = (
            query.order_by(DeletedItemDB.deleted_at.desc(), DeletedItemDB.id.desc())
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
        return items, total

    # ========== Restore ==========

    def restore(self, deleted_item_id: str) -> tuple[SoftDeletable, Any]:
        """Recreate the original entity and remove its recycle bin record.

        The record is claimed by deleting it before the entity is inserted, so
        of two concurrent restores only one sees the row; the other gets
        NotFoundError. Any failure rolls both steps back.

        Args:
            deleted_item_id: Recycle bin record ID

        Returns:
            Tuple of (registry entry, restored entity)

        Raises:
            NotFoundError: If the record does not exist (restored, purged or expired)
            ConflictError: If the entity collides with live data; the record is kept
            InvalidItemTypeError: If the record's type is not registered
        """
        item = self.get_or_404(deleted_item_id)
        entry = get_soft_deletable(item.item_type)
        snapshot = dict(item.snapshot)
        original_id = item.original_id

        try:
            with transaction(self.db):
                claimed = (
                    self.db.query(DeletedItemDB)
                    .filter(DeletedItemDB.id == deleted_item_id)
                    .delete(synchronize_session="fetch")
                )
                if claimed != 1:
                    raise NotFoundError("DeletedItem", deleted_item_id)
                if self.db.get(entry.model, original_id) is not None:
                    raise ConflictError(
                        f"{entry.item_type.value} {original_id} already exists",
                        {"reason": "identifier in use"},
                    )
                entity = entry.restore(self.db, snapshot)
                self.db.flush()
        except ConflictError as e:
            logger.warning(
                "Restore conflicts with live data",
                item_type=entry.item_type.value,
                original_id=original_id,
                deleted_item_id=deleted_item_id,
            )
            raise ConflictError(
                f"Cannot restore {entry.item_type.value} {original_id}: "
                "it conflicts with an existing record",
                {
                    "item_type": entry.item_type.value,
                    "original_id": original_id,
                    "deleted_item_id": deleted_item_id,
                    **e.context,
                },
            ) from e

        self.db.refresh(entity)
        logger.info(
            "Restored from recycle bin",
            item_type=entry.item_type.value,
            original_id=original_id,
            deleted_item_id=deleted_item_id,
        )
        return entry, entity

    # ========== Permanent Delete ==========

    def permanently_delete(self, deleted_item_id: str) -> None:
        """Discard a recycle bin record.

        Raises:
            NotFoundError: If the record does not exist
        """
        with transaction(self.db):
            removed = (
                self.db.query(DeletedItemDB)
                .filter(DeletedItemDB.id == deleted_item_id)
                .delete(synchronize_session="fetch")
            )
            if removed != 1:
                raise NotFoundError("DeletedItem", deleted_item_id)

        logger.info("Permanently deleted from recycle bin", deleted_item_id=deleted_item_id)

    def empty(
        self,
        item_type: ItemType | str | None = None,
        expired_only: bool = False,
        now: datetime | None = None,
    ) -> int:
        """Permanently delete all matching records.

        Args:
            item_type: Only records of this type
            expired_only: Only records already past expires_at
            now: Reference time for expired_only (default: current UTC time)

        Returns:
            Number of records deleted
        """
        query = self.db.query(DeletedItemDB)
        if item_type is not None:
            query = query.filter(DeletedItemDB.item_type == _type_value(item_type))
        if expired_only:
            query = query.filter(DeletedItemDB.expires_at <= (now or datetime.now(UTC)))

        with transaction(self.db):
            count = query.delete(synchronize_session="fetch")

        logger.info(
            "Emptied recycle bin",
            item_type=_type_value(item_type) if item_type is not None else None,
            expired_only=expired_only,
            deleted_count=count,
        )
        return count

    # ========== Expiry ==========

    def purge_expired(self, now: datetime | None = None) -> int:
        """Delete every record whose expires_at has passed.

        Args:
            now: Reference time (default: current UTC time)

        Returns:
            Number of records deleted
        """
        return self.empty(expired_only=True, now=now)

    # ========== Stats ==========

    def get_stats(self, expiring_within_days: int | None = None) -> dict:
        """Get statistics about the recycle bin.

        Args:
            expiring_within_days: Warning window for expiring_soon
                (default from settings)

        Returns:
            Dict with total, expiring_soon and per-type counts
        """
        if expiring_within_days is None:
            expiring_within_days = get_settings().recycle_bin_expiring_soon_days
        horizon = datetime.now(UTC) + timedelta(days=expiring_within_days)

        rows = (
            self.db.query(
                DeletedItemDB.item_type,
                func.count(DeletedItemDB.id),
                func.min(DeletedItemDB.deleted_at),
                func.max(DeletedItemDB.deleted_at),
            )
            .group_by(DeletedItemDB.item_type)
            .order_by(DeletedItemDB.item_type)
            .all()
        )
        total = self.db.query(DeletedItemDB).count()
        expiring_soon = self.db.query(DeletedItemDB).filter(
            DeletedItemDB.expires_at <= horizon
        ).count()

        return {
            "total": total,
            "expiring_soon": expiring_soon,
            "by_type": [
                {"item_type": item_type, "count": count, "oldest": oldest, "newest": newest}
                for item_type, count, oldest, newest in rows
            ],
        }


def _type_value(item_type: ItemType | str) -> str:
    return item_type.value if isinstance(item_type, ItemType) else item_type
