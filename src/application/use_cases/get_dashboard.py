"""Use case assembling everything the dashboard renders for a view."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from src.application.ports.record_store import RecordStorePort
from src.domain.models import (
    CarConfig,
    GoalProgress,
    MileageProgress,
    PerformanceAnalysis,
    PeriodKind,
    WeekdayTotals,
)
from src.domain.policies import DEFAULT_POLICIES, AnalysisPolicies
from src.domain.services.analysis import analyze
from src.domain.services.categories import sort_categories
from src.domain.services.progress import (
    goal_progress,
    mileage_progress,
    weekday_breakdown,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class DashboardView:
    """Data for one dashboard render.

    Attributes:
        kind: Period kind being displayed.
        anchor: Date selected by the user.
        analysis: Breakdown, None for a day without a record.
        vehicle: Active vehicle config, if any.
        goal: Earnings goal progress (weeks and months only).
        mileage: Km limit progress (weeks and months only).
        weekdays: Monday to Sunday chart rows for the anchor's week.
        expense_categories: Expense categories sorted by amount.
    """

    kind: PeriodKind
    anchor: date
    analysis: PerformanceAnalysis | None
    vehicle: CarConfig | None = None
    goal: GoalProgress | None = None
    mileage: MileageProgress | None = None
    weekdays: list[WeekdayTotals] = field(default_factory=list)
    expense_categories: list[tuple[str, Decimal]] = field(default_factory=list)


class GetDashboardUseCase:
    """Build the dashboard view for a day, week or month."""

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
        kind: PeriodKind | str = PeriodKind.DAY,
    ) -> DashboardView:
        """Return the dashboard data for the period containing ``anchor``.

        Args:
            anchor: Date selected by the user.
            kind: ``day``, ``week`` or ``month``.

        Returns:
            DashboardView: Analysis plus progress and chart data.
        """
        kind = PeriodKind(kind)
        records = self._record_store.fetch_daily_records()
        config = self._record_store.fetch_active_car_config()
        if config is None:
            self._logger.warning("No active vehicle; fixed costs are skipped")

        analysis = analyze(anchor, records, config, kind, self._policies)
        weekdays = weekday_breakdown(anchor, records, config, self._policies)
        if analysis is None:
            return DashboardView(
                kind=kind,
                anchor=anchor,
                analysis=None,
                vehicle=config,
                weekdays=weekdays,
            )

        goal = None
        mileage = None
        if kind is not PeriodKind.DAY:
            goal = goal_progress(analysis, config, self._policies)
            mileage = mileage_progress(analysis)
        return DashboardView(
            kind=kind,
            anchor=anchor,
            analysis=analysis,
            vehicle=config,
            goal=goal,
            mileage=mileage,
            weekdays=weekdays,
            expense_categories=sort_categories(analysis.expenses_by_category),
        )


__all__ = ["DashboardView", "GetDashboardUseCase"]
