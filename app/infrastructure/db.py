"""Database infrastructure setup."""

from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker

from app.infrastructure.config.settings import settings

# Engines are created on first use, one per database URL
_engines: dict[str, Engine] = {}
_session_factories: dict[str, sessionmaker] = {}


def _get_engine(database_url: Optional[str] = None) -> Engine:
    """
    Get or create the engine for a database URL.

    Args:
        database_url: SQLAlchemy URL (defaults to DATABASE_URL from settings)

    Returns:
        SQLAlchemy engine
    """
    database_url = database_url or settings.database_url
    if not database_url:
        raise ValueError("DATABASE_URL is required for database operations")
    engine = _engines.get(database_url)
    if engine is None:
        url = make_url(database_url)
        if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
            # SQLite creates the file but not its directory
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
        engine = create_engine(
            url,
            pool_pre_ping=True,  # Verify connections before using
            echo=settings.debug_mode,  # Log SQL queries in debug mode
        )
        _engines[database_url] = engine
    return engine


def init_db(database_url: Optional[str] = None) -> None:
    """Create missing tables (local SQLite databases are not migrated with alembic)."""
    from app.adapters.outbound.car_repository.models import Base

    Base.metadata.create_all(_get_engine(database_url))


def get_db_session(database_url: Optional[str] = None):
    """
    Get a database session.

    Args:
        database_url: SQLAlchemy URL (defaults to DATABASE_URL from settings)

    Returns:
        SQLAlchemy session instance
    """
    database_url = database_url or settings.database_url
    if database_url not in _session_factories:
        engine = _get_engine(database_url)
        _session_factories[database_url] = sessionmaker(
            autocommit=False, autoflush=False, bind=engine
        )
    return _session_factories[database_url]()
