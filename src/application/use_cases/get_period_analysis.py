"""Use case to analyze a week or a month of driving."""

from datetime import date

from src.application.ports.record_store import RecordStorePort
from src.domain.models import PerformanceAnalysis, PeriodKind
from src.domain.policies import DEFAULT_POLICIES, AnalysisPolicies
from src.domain.services.analysis import analyze_period
from src.infrastructure.logging.logger import get_app_logger


class GetPeriodAnalysisUseCase:
    """Compute the profitability breakdown of an ISO week or calendar month."""

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

    def execute(
        self,
        anchor: date,
        kind: PeriodKind | str = PeriodKind.WEEK,
    ) -> PerformanceAnalysis:
        """Return the analysis of the period containing ``anchor``.

        Args:
            anchor: Any date inside the wanted period.
            kind: ``week`` or ``month``.

        Returns:
            PerformanceAnalysis: Breakdown for the period, zero-valued when
            nothing was logged.
        """
        records = self._record_store.fetch_daily_records()
        config = self._record_store.fetch_active_car_config()
        analysis = analyze_period(
            anchor,
            records,
            config,
            kind,
            self._policies,
        )
        self._logger.info(
            f"{PeriodKind(kind).value.capitalize()} analysis "
            f"{analysis.start}..{analysis.end}: "
            f"records={analysis.record_count}, "
            f"gross={analysis.gross_earnings}, "
            f"expenses={analysis.total_expenses}, "
            f"net={analysis.net_profit}"
        )
        return analysis


__all__ = ["GetPeriodAnalysisUseCase", "PerformanceAnalysis"]
