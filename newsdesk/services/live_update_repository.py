# -*- coding: utf-8 -*-
"""Repository for live update database operations.

Live coverage is not part of the recycle bin: ``delete`` removes the row
for good.
"""

from datetime import datetime, UTC
from typing import Any

from newsdesk.core.database import transaction
from newsdesk.core.exceptions import ValidationError
from newsdesk.core.logging import get_logger
from newsdesk.models.db_models import LiveUpdate
from newsdesk.models.live_update import LiveUpdateStatus
from newsdesk.services.content_repository import ContentRepository

logger = get_logger(__name__)


def _normalize_tags(tags: list[str] | None) -> list[str]:
    return [t.strip().lower() for t in tags or [] if t and t.strip()]


def _new_entry(
    content: str,
    author_id: str | None,
    attachments: list[str] | None = None,
    timestamp: datetime | None = None,
) -> dict[str, Any]:
    return {
        "timestamp": (timestamp or datetime.now(UTC)).isoformat(),
        "content": content,
        "author_id": author_id,
        "attachments": list(attachments or []),
    }


class LiveUpdateRepository(ContentRepository[LiveUpdate]):
    """Repository for live update operations."""

    model = LiveUpdate
    resource_name = "LiveUpdate"

    _ordering = (
        LiveUpdate.is_sticky.desc(),
        LiveUpdate.priority.desc(),
        LiveUpdate.started_at.desc(),
    )

    def before_create(self, entity: LiveUpdate) -> None:
        """Start coverage now, seeded with the opening content as first entry."""
        now = datetime.now(UTC)
        entity.status = LiveUpdateStatus.ACTIVE.value
        entity.started_at = now
        entity.tags = _normalize_tags(entity.tags)
        entity.entries = [_new_entry(entity.content, entity.author_id, timestamp=now)]

    def before_update(self, entity: LiveUpdate, changes: dict[str, Any]) -> None:
        """Stamp ``ended_at`` when coverage ends."""
        if "tags" in changes:
            changes["tags"] = _normalize_tags(changes["tags"])
        if (
            changes.get("status") == LiveUpdateStatus.ENDED.value
            and "ended_at" not in changes
            and entity.ended_at is None
        ):
            changes["ended_at"] = datetime.now(UTC)

    def list_live_updates(
        self,
        page: int = 1,
        limit: int = 20,
        status: str | None = None,
        update_type: str | None = None,
    ) -> tuple[list[LiveUpdate], int]:
        """List coverage: sticky first, then by priority and start time.

        Args:
            page: Page number (1-based)
            limit: Page size
            status: Only coverage in this state
            update_type: Only coverage of this kind

        Returns:
            Tuple of (live updates, total count)
        """
        filters = []
        if status:
            filters.append(LiveUpdate.status == status)
        if update_type:
            filters.append(LiveUpdate.type == update_type)
        return self.list(page=page, limit=limit, filters=filters, order_by=list(self._ordering))

    def get_active(self, limit: int = 5) -> list[LiveUpdate]:
        """Active coverage flagged for the homepage."""
        return (
            self.db.query(LiveUpdate)
            .filter(
                LiveUpdate.status == LiveUpdateStatus.ACTIVE.value,
                LiveUpdate.show_on_homepage.is_(True),
            )
            .order_by(*self._ordering)
            .limit(limit)
            .all()
        )

    def list_by_type(self, update_type: str, limit: int = 10) -> list[LiveUpdate]:
        """Active coverage of one kind, highest priority first."""
        return (
            self.db.query(LiveUpdate)
            .filter(
                LiveUpdate.type == update_type,
                LiveUpdate.status == LiveUpdateStatus.ACTIVE.value,
            )
            .order_by(LiveUpdate.priority.desc(), LiveUpdate.started_at.desc())
            .limit(limit)
            .all()
        )

    def add_entry(
        self,
        live_update: LiveUpdate,
        content: str,
        author_id: str | None,
        attachments: list[str] | None = None,
    ) -> LiveUpdate:
        """Append a timestamped entry.

        Raises:
            ValidationError: If the coverage has ended
        """
        if live_update.status == LiveUpdateStatus.ENDED.value:
            raise ValidationError(
                "Cannot add entries to ended live coverage",
                {"live_update_id": live_update.id},
            )

        with transaction(self.db):
            # Reassign so the JSON column is flagged as changed
            live_update.entries = [
                *(live_update.entries or []),
                _new_entry(content, author_id, attachments),
            ]
        self.db.refresh(live_update)
        return live_update

    def increment_views(self, live_update: LiveUpdate) -> LiveUpdate:
        """Count one view of the coverage."""
        with transaction(self.db):
            live_update.view_count = (live_update.view_count or 0) + 1
        self.db.refresh(live_update)
        return live_update

    def delete(self, live_update: LiveUpdate) -> None:
        """Remove coverage permanently."""
        live_update_id = live_update.id
        with transaction(self.db):
            self.db.delete(live_update)
        logger.info("Live update deleted", live_update_id=live_update_id)
