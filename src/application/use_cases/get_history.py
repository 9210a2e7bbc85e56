"""Use case listing past daily records with their results."""

from src.application.ports.record_store import RecordStorePort
from src.domain.models import HistoryEntry
from src.domain.policies import DEFAULT_POLICIES, AnalysisPolicies
from src.domain.services.records import build_history
from src.infrastructure.logging.logger import get_app_logger


class GetHistoryUseCase:
    """List daily records, most recent first."""

    def __init__(
        self,
        record_store: RecordStorePort,
        logger=None,
        policies: AnalysisPolicies | None = None,
    ) -> None:
        self._record_store = record_store
        self._logger = logger or get_app_logger()
        self._policies = policies or DEFAULT_POLICIES

    def execute(self, limit: int | None = None) -> list[HistoryEntry]:
        """Return history entries.

        Args:
            limit: Optional maximum number of entries.

        Returns:
            list[HistoryEntry]: One entry per record.
        """
        records = self._record_store.fetch_daily_records()
        config = self._record_store.fetch_active_car_config()
        entries = build_history(records, config, self._policies, limit)
        self._logger.info(f"History built with {len(entries)} entries")
        return entries


__all__ = ["GetHistoryUseCase", "HistoryEntry"]
