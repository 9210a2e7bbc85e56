"""Database infrastructure for the driver dashboard.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine connected to the records database. It belongs to the infrastructure
layer because it deals with external systems (PostgreSQL or SQLite).
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


def _require_db_url(db_url: str | None) -> str:
    """Return the database URL or raise a descriptive error.

    Args:
        db_url: URL resolved from settings, possibly missing.

    Returns:
        str: The database URL.

    Raises:
        RuntimeError: If no URL was configured.
    """
    if not db_url:
        raise RuntimeError("Missing environment variable: DRIVER_DB_URL")
    return db_url


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_engines: dict[str, Engine] = {}


def get_engine(db_url: str | None) -> Engine:
    """Get a shared SQLAlchemy engine for the records database.

    Args:
        db_url: Database URL, usually ``DashboardSettings.db_url``.

    Returns:
        Engine: Lazily initialized engine, one per URL.

    Raises:
        RuntimeError: If ``db_url`` is empty.
    """
    url = _require_db_url(db_url)
    if url not in _engines:
        _engines[url] = _create_engine(url)
    return _engines[url]


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides pooling details behind the port so repositories can
    depend only on the protocol.
    """

    def __init__(self, db_url: str | None = None) -> None:
        self._db_url = db_url

    def get_engine(self) -> Engine:
        """Get the engine for the records database.

        Returns:
            Engine: SQLAlchemy engine connected to the records backend.
        """
        return get_engine(self._db_url)


__all__ = [
    "get_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
