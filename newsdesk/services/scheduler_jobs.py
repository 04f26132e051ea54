# -*- coding: utf-8 -*-
"""Scheduled job implementations.

This module contains the job functions executed by the scheduler service.
Each job opens its own database session.
"""

from newsdesk.core.database import SessionLocal
from newsdesk.core.logging import get_logger
from newsdesk.services.article_repository import ArticleRepository
from newsdesk.services.recycle_bin_repository import RecycleBinRepository

logger = get_logger(__name__)


def purge_expired_recycle_bin() -> dict:
    """Permanently delete recycle bin records past their expiry time.

    A record may outlive its expires_at by up to one sweep interval.
    """
    db = SessionLocal()
    try:
        deleted = RecycleBinRepository(db).purge_expired()
        if deleted:
            logger.info("Expired recycle bin records purged", deleted_count=deleted)
        return {"deleted": deleted}

    except Exception as e:
        logger.error("Error during recycle bin purge", error=str(e))
        raise
    finally:
        db.close()


def publish_scheduled_articles() -> dict:
    """Publish scheduled articles whose publication time has passed."""
    db = SessionLocal()
    try:
        published = ArticleRepository(db).publish_due()
        if published:
            logger.info("Scheduled articles published", published=published)
        return {"published": published}

    except Exception as e:
        logger.error("Error publishing scheduled articles", error=str(e))
        raise
    finally:
        db.close()
