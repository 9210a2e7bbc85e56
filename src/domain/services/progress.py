"""Goal, mileage and weekday chart helpers for dashboard cards."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from src.domain.constants import DAYS_PER_WEEK, DEFAULT_PLATFORMS
from src.domain.models import (
    CarConfig,
    DailyRecord,
    GoalProgress,
    MileageProgress,
    PerformanceAnalysis,
    PeriodKind,
    WeekdayTotals,
)
from src.domain.policies import (
    DEFAULT_POLICIES,
    AnalysisPolicies,
    scale_weekly_to_month,
)
from src.domain.services.analysis import analyze_day, find_record
from src.domain.services.contract import effective_config
from src.domain.services.periods import week_bounds
from src.utils.decimal_utils import safe_divide


def period_goal(
    analysis: PerformanceAnalysis,
    config: CarConfig | None,
    policies: AnalysisPolicies = DEFAULT_POLICIES,
) -> Decimal:
    """Scale the weekly earnings goal to the analysis period."""
    active = effective_config(config)
    if active is None or active.weekly_earnings_goal <= 0:
        return Decimal("0")
    weekly_goal = active.weekly_earnings_goal
    if analysis.period.kind is PeriodKind.MONTH:
        return scale_weekly_to_month(
            weekly_goal,
            analysis.period.days,
            policies.monthly_km_limit,
        )
    if analysis.period.kind is PeriodKind.DAY:
        return weekly_goal / Decimal(DAYS_PER_WEEK)
    return weekly_goal


def goal_progress(
    analysis: PerformanceAnalysis,
    config: CarConfig | None,
    policies: AnalysisPolicies = DEFAULT_POLICIES,
) -> GoalProgress:
    """Measure gross earnings against the period goal."""
    goal = period_goal(analysis, config, policies)
    achieved = analysis.gross_earnings
    return GoalProgress(
        goal=goal,
        achieved=achieved,
        remaining=goal - achieved,
        percent=safe_divide(achieved * 100, goal),
    )


def mileage_progress(analysis: PerformanceAnalysis) -> MileageProgress:
    """Measure distance driven against the period km limit."""
    return MileageProgress(
        limit=analysis.km_limit,
        driven=analysis.total_km,
        remaining=analysis.km_limit - analysis.total_km,
        percent=safe_divide(analysis.total_km * 100, analysis.km_limit),
    )


def weekday_breakdown(
    anchor: date,
    records: Iterable[DailyRecord],
    config: CarConfig | None,
    policies: AnalysisPolicies = DEFAULT_POLICIES,
) -> list[WeekdayTotals]:
    """Return Monday to Sunday totals for the week containing ``anchor``.

    Expenses per day include the computed fuel cost, as in the daily view.
    """
    records = list(records)
    rows: list[WeekdayTotals] = []
    for day in week_bounds(anchor).iter_days():
        earnings = {name: Decimal("0") for name in DEFAULT_PLATFORMS}
        expenses = Decimal("0")
        record = find_record(records, day)
        if record is not None:
            for name, activity in record.platforms.items():
                earnings[name] = earnings.get(name, Decimal("0")) + activity.earnings
            daily = analyze_day(day, [record], config, policies)
            expenses = daily.total_expenses
        rows.append(
            WeekdayTotals(
                day=day,
                earnings_by_platform=earnings,
                expenses=expenses,
            )
        )
    return rows


__all__ = [
    "goal_progress",
    "mileage_progress",
    "period_goal",
    "weekday_breakdown",
]
