"""Use case to analyze a single day of driving."""

from datetime import date

from src.application.ports.record_store import RecordStorePort
from src.domain.models import PerformanceAnalysis
from src.domain.policies import DEFAULT_POLICIES, AnalysisPolicies
from src.domain.services.analysis import analyze_day
from src.infrastructure.logging.logger import get_app_logger


class GetDailyAnalysisUseCase:
    """Compute the profitability breakdown of one calendar day."""

    def __init__(
        self,
        record_store: RecordStorePort,
        logger=None,
        policies: AnalysisPolicies | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            record_store: Port providing records and vehicle configs.
            logger: Optional logger compatible with logging.Logger-like API.
            policies: Optional cost allocation strategies.
        """
        self._record_store = record_store
        self._logger = logger or get_app_logger()
        self._policies = policies or DEFAULT_POLICIES

    def execute(self, target_date: date) -> PerformanceAnalysis | None:
        """Return the analysis for the day, or None without a record.

        Args:
            target_date: Calendar day to analyze.

        Returns:
            PerformanceAnalysis | None: Breakdown for the day, None when no
            activity was logged.
        """
        records = self._record_store.fetch_daily_records()
        config = self._record_store.fetch_active_car_config()
        analysis = analyze_day(target_date, records, config, self._policies)
        if analysis is None:
            self._logger.info(f"No daily record for {target_date}")
            return None
        self._logger.info(
            f"Daily analysis for {target_date}: "
            f"gross={analysis.gross_earnings}, "
            f"expenses={analysis.total_expenses}, "
            f"net={analysis.net_profit}"
        )
        return analysis


__all__ = ["GetDailyAnalysisUseCase", "PerformanceAnalysis"]
