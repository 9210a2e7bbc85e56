"""Tests for calendar period resolution."""

from datetime import date

import pytest

from src.domain.models import PeriodKind
from src.domain.services.periods import (
    month_bounds,
    resolve_period,
    week_bounds,
)


@pytest.mark.parametrize(
    "anchor",
    [date(2024, 6, 3), date(2024, 6, 6), date(2024, 6, 9)],
)
def test_week_bounds_run_monday_to_sunday(anchor) -> None:
    """Every day of a week resolves to the same Monday to Sunday range."""
    week = week_bounds(anchor)

    assert week.start == date(2024, 6, 3)
    assert week.end == date(2024, 6, 9)
    assert week.days == 7
    assert week.kind is PeriodKind.WEEK


def test_week_bounds_cross_month_boundary() -> None:
    """Weeks spanning two months are not cut at the month end."""
    week = week_bounds(date(2024, 7, 2))

    assert week.start == date(2024, 7, 1)
    assert week_bounds(date(2024, 6, 30)).start == date(2024, 6, 24)
    assert week_bounds(date(2024, 5, 31)).end == date(2024, 6, 2)


def test_month_bounds_handle_leap_february() -> None:
    """February 2024 has 29 days."""
    month = month_bounds(date(2024, 2, 10))

    assert month.start == date(2024, 2, 1)
    assert month.end == date(2024, 2, 29)
    assert month.days == 29


def test_resolve_period_accepts_strings() -> None:
    """Period kinds may be passed by value."""
    day = resolve_period(date(2024, 6, 5), "day")

    assert day.start == day.end == date(2024, 6, 5)
    assert resolve_period(date(2024, 6, 5), "month").days == 30
    assert list(resolve_period(date(2024, 6, 5), "week").iter_days())[2] == (
        date(2024, 6, 5)
    )
