"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.record_store import RecordStorePort
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.settings import DashboardSettings
from src.infrastructure.sqlalchemy_record_store import SqlAlchemyRecordStore


def build_settings() -> DashboardSettings:
    """Return dashboard settings read from the environment."""
    return DashboardSettings.from_env()


def build_database_adapter(
    settings: DashboardSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter for the configured records database."""
    resolved_settings = settings or build_settings()
    return SqlAlchemyDatabaseEngineAdapter(resolved_settings.db_url)


def build_record_store(
    db_port: DatabaseEnginePort | None = None,
) -> RecordStorePort:
    """Return the record store backed by the configured database."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyRecordStore(resolved_db)


__all__ = [
    "build_database_adapter",
    "build_record_store",
    "build_settings",
]
