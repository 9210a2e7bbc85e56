"""Tests for earnings accumulation and history listing."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.models import (
    CarConfig,
    DailyRecord,
    Expense,
    ExtraEarning,
    PlatformActivity,
)
from src.domain.services.records import accumulate_daily_record, build_history


def test_accumulate_sums_activity_and_appends_entries() -> None:
    """A second submission adds up instead of replacing."""
    existing = DailyRecord(
        record_date=date(2024, 6, 3),
        minutes_worked=240,
        platforms={
            "uber": PlatformActivity(trips=4, km=Decimal("60"), earnings=Decimal("90")),
        },
        fuel_price=Decimal("5.80"),
        fuel_efficiency_km_l=Decimal("11"),
        expenses=(Expense(amount=Decimal("10"), category="Meals", id=1),),
        id=7,
    )
    submission = DailyRecord(
        record_date=date(2024, 6, 3),
        minutes_worked=120,
        platforms={
            "uber": PlatformActivity(trips=2, km=Decimal("30"), earnings=Decimal("40")),
            "99": PlatformActivity(trips=1, km=Decimal("12"), earnings=Decimal("18")),
        },
        fuel_price=Decimal("6.10"),
        expenses=(Expense(amount=Decimal("5"), category="Tolls"),),
        extra_earnings=(ExtraEarning(amount=Decimal("20"), category="Tips"),),
    )

    merged = accumulate_daily_record(existing, submission)

    assert merged.id == 7
    assert merged.minutes_worked == 360
    assert merged.platform("uber") == PlatformActivity(
        trips=6,
        km=Decimal("90"),
        earnings=Decimal("130"),
    )
    assert merged.platform("99").earnings == Decimal("18")
    assert merged.fuel_price == Decimal("6.10")
    assert merged.fuel_efficiency_km_l == Decimal("11")
    assert [e.category for e in merged.expenses] == ["Meals", "Tolls"]
    assert merged.extra_earnings_total == Decimal("20")


def test_accumulate_rejects_different_dates() -> None:
    """Only records for the same date can be merged."""
    with pytest.raises(ValueError):
        accumulate_daily_record(
            DailyRecord(record_date=date(2024, 6, 3)),
            DailyRecord(record_date=date(2024, 6, 4)),
        )


def test_build_history_sorts_most_recent_first() -> None:
    """History entries are newest first and honour the limit."""
    config = CarConfig(
        model="Onix",
        fuel_efficiency_km_l=Decimal("10"),
        fuel_price=Decimal("5"),
    )
    records = [
        DailyRecord(
            record_date=date(2024, 6, day),
            minutes_worked=60,
            platforms={
                "uber": PlatformActivity(
                    trips=2,
                    km=Decimal("20"),
                    earnings=Decimal("50"),
                )
            },
        )
        for day in (3, 5, 4)
    ]

    history = build_history(records, config, limit=2)

    assert [entry.record_date for entry in history] == [
        date(2024, 6, 5),
        date(2024, 6, 4),
    ]
    assert history[0].total_expenses == Decimal("10")
    assert history[0].net_profit == Decimal("40")
