"""Tests for domain model helpers and Decimal utilities."""

from datetime import date
from decimal import Decimal

from src.domain.models import (
    CarConfig,
    DailyRecord,
    ExtraEarning,
    PeriodKind,
    PeriodRange,
    PlatformActivity,
)
from src.utils.decimal_utils import coerce_decimal, safe_divide, sum_decimals


def test_daily_record_totals_span_platforms() -> None:
    """Derived totals add up every platform."""
    record = DailyRecord(
        record_date=date(2024, 6, 3),
        minutes_worked=150,
        platforms={
            "uber": PlatformActivity(trips=3, km=Decimal("40.5"), earnings=Decimal("70")),
            "99": PlatformActivity(trips=2, km=Decimal("19.5"), earnings=Decimal("30")),
        },
        extra_earnings=(ExtraEarning(amount=Decimal("12"), category="Tips"),),
    )

    assert record.total_km == Decimal("60")
    assert record.total_trips == 5
    assert record.platform_earnings == Decimal("100")
    assert record.extra_earnings_total == Decimal("12")
    assert record.hours_worked == Decimal("2.5")
    assert record.platform("indrive") == PlatformActivity()


def test_contract_end_and_period_range() -> None:
    """Contract end is exclusive and ranges are inclusive."""
    config = CarConfig(
        model="Onix",
        contract_start=date(2024, 6, 5),
        contract_days=60,
    )
    week = PeriodRange(PeriodKind.WEEK, date(2024, 6, 3), date(2024, 6, 9))

    assert config.contract_end == date(2024, 8, 4)
    assert CarConfig(model="Onix").contract_end is None
    assert week.contains(date(2024, 6, 9)) is True
    assert week.contains(date(2024, 6, 10)) is False


def test_decimal_helpers() -> None:
    """Coercion, guarded division and sums work on mixed inputs."""
    assert coerce_decimal(None) == Decimal("0")
    assert coerce_decimal(5.79) == Decimal("5.79")
    assert safe_divide(10, 0) == Decimal("0")
    assert safe_divide(Decimal("122"), 8) == Decimal("15.25")
    assert sum_decimals([1, "2.5", Decimal("0.5")]) == Decimal("4")
