# -*- coding: utf-8 -*-
"""Database configuration and session management."""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError
from sqlalchemy.orm import Session, sessionmaker, declarative_base

from newsdesk.core.config import get_settings
from newsdesk.core.exceptions import ConflictError, StoreUnavailableError
from newsdesk.core.logging import get_logger

logger = get_logger(__name__)

# Create Base class for declarative models
Base = declarative_base()

_settings = get_settings()

connect_args = {}
if _settings.is_sqlite:
    # Ensure data directory exists for file-backed SQLite
    _db_path = Path(_settings.database_url.replace("sqlite:///", ""))
    if _settings.database_url != "sqlite://" and ":memory:" not in _settings.database_url:
        _db_path.parent.mkdir(parents=True, exist_ok=True)
    connect_args = {"check_same_thread": False}  # Needed for SQLite

# Create engine
engine = create_engine(
    _settings.database_url,
    connect_args=connect_args,
    echo=_settings.debug,
    pool_pre_ping=not _settings.is_sqlite,
)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """Get database session.

    Yields:
        Database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Initialize database tables."""
    # Register models on Base.metadata before creating tables
    import newsdesk.models.db_models  # noqa: F401

    Base.metadata.create_all(bind=engine)


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """Run a unit of work and commit it, or roll everything back.

    IntegrityError becomes ConflictError and connection-level failures become
    StoreUnavailableError. Any other exception is re-raised unchanged after
    the rollback.

    Args:
        db: Database session

    Yields:
        The same session
    """
    try:
        yield db
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError(
            "Write conflicts with existing data",
            {"reason": str(e.orig)},
        ) from e
    except (OperationalError, InterfaceError) as e:
        db.rollback()
        logger.error("Database unavailable", error=str(e.orig))
        raise StoreUnavailableError("Database is unavailable") from e
    except Exception:
        db.rollback()
        raise
