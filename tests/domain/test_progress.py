"""Tests for goal, mileage and weekday chart helpers."""

from datetime import date
from decimal import Decimal

from src.domain.models import CarConfig, DailyRecord, Expense, PlatformActivity
from src.domain.policies import AnalysisPolicies, MonthlyKmLimitPolicy
from src.domain.services.analysis import analyze_day, analyze_month, analyze_week
from src.domain.services.progress import (
    goal_progress,
    mileage_progress,
    period_goal,
    weekday_breakdown,
)


def _record(day: date, earnings: str, km: str, **kwargs) -> DailyRecord:
    return DailyRecord(
        record_date=day,
        minutes_worked=300,
        platforms={
            "uber": PlatformActivity(
                trips=6,
                km=Decimal(km),
                earnings=Decimal(earnings),
            )
        },
        **kwargs,
    )


CONFIG = CarConfig(
    model="Kwid",
    weekly_km_limit=Decimal("1000"),
    fuel_efficiency_km_l=Decimal("10"),
    fuel_price=Decimal("6"),
    weekly_earnings_goal=Decimal("1400"),
)


def test_goal_progress_for_week() -> None:
    """Weekly goal progress compares gross earnings with the goal."""
    records = [
        _record(date(2024, 6, 3), "500", "100"),
        _record(date(2024, 6, 4), "200", "50"),
    ]
    analysis = analyze_week(date(2024, 6, 3), records, CONFIG)

    progress = goal_progress(analysis, CONFIG)

    assert progress.goal == Decimal("1400")
    assert progress.achieved == Decimal("700")
    assert progress.remaining == Decimal("700")
    assert progress.percent == Decimal("50")
    assert progress.reached is False


def test_goal_scales_to_month_and_day() -> None:
    """Monthly goals follow the month km policy; daily goals are a seventh."""
    record = _record(date(2024, 6, 3), "500", "100")
    month = analyze_month(date(2024, 6, 3), [record], CONFIG)
    day = analyze_day(date(2024, 6, 3), [record], CONFIG)

    assert period_goal(month, CONFIG) == Decimal("7000")
    assert period_goal(
        month,
        CONFIG,
        AnalysisPolicies(monthly_km_limit=MonthlyKmLimitPolicy.PRO_RATA),
    ) == Decimal("6000")
    assert period_goal(day, CONFIG) == Decimal("200")
    assert period_goal(day, None) == Decimal("0")
    assert goal_progress(day, None).percent == Decimal("0")


def test_mileage_progress_flags_overage() -> None:
    """Driving past the limit reports a negative remainder."""
    records = [_record(date(2024, 6, 3), "900", "1250")]
    analysis = analyze_week(date(2024, 6, 3), records, CONFIG)

    progress = mileage_progress(analysis)

    assert progress.limit == Decimal("1000")
    assert progress.driven == Decimal("1250")
    assert progress.remaining == Decimal("-250")
    assert progress.percent == Decimal("125")
    assert progress.over_limit is True


def test_weekday_breakdown_has_seven_rows() -> None:
    """Rows run Monday to Sunday with fuel included in expenses."""
    records = [
        _record(
            date(2024, 6, 5),
            "320",
            "120",
            expenses=(Expense(amount=Decimal("15"), category="Meals"),),
        ),
    ]

    rows = weekday_breakdown(date(2024, 6, 8), records, CONFIG)

    assert [row.day for row in rows] == [
        date(2024, 6, day) for day in range(3, 10)
    ]
    wednesday = rows[2]
    assert wednesday.earnings_by_platform["uber"] == Decimal("320")
    assert wednesday.earnings_by_platform["99"] == Decimal("0")
    assert wednesday.expenses == Decimal("87")
    assert wednesday.total_earnings == Decimal("320")
    assert rows[0].expenses == Decimal("0")
