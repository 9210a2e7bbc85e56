"""Tests for rental contract proration."""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from src.domain.models import CarConfig
from src.domain.services.contract import (
    contract_covers_period,
    contract_overlap_days,
    effective_config,
    prorated_weekly_rent,
)


def _config(start: date | None, days: int = 60, **overrides) -> CarConfig:
    values = {
        "model": "HB20",
        "weekly_rent": Decimal("700"),
        "contract_start": start,
        "contract_days": days,
    }
    values.update(overrides)
    return CarConfig(**values)


def _enumerated_overlap(start: date, end: date, config: CarConfig) -> int:
    window_end = config.contract_start + timedelta(days=config.contract_days)
    count = 0
    day = start
    while day <= end:
        if config.contract_start <= day < window_end:
            count += 1
        day += timedelta(days=1)
    return count


def test_full_week_inside_contract_charges_weekly_rent() -> None:
    """Seven overlapping days charge exactly the weekly rent."""
    config = _config(date(2024, 5, 1))

    rent = prorated_weekly_rent(date(2024, 6, 3), date(2024, 6, 9), config)

    assert contract_overlap_days(
        date(2024, 6, 3), date(2024, 6, 9), config
    ) == 7
    assert rent == Decimal("700")


def test_contract_starting_wednesday_prorates_five_days() -> None:
    """A contract starting mid-week only charges Wednesday to Sunday."""
    config = _config(date(2024, 6, 5))

    rent = prorated_weekly_rent(date(2024, 6, 3), date(2024, 6, 9), config)

    assert contract_overlap_days(
        date(2024, 6, 3), date(2024, 6, 9), config
    ) == 5
    assert rent == Decimal("700") / Decimal("7") * Decimal("5")


def test_contract_end_is_exclusive() -> None:
    """The day after the last contract day is outside the window."""
    config = _config(date(2024, 6, 1), days=3)

    assert config.contract_end == date(2024, 6, 4)
    assert contract_overlap_days(
        date(2024, 6, 3), date(2024, 6, 9), config
    ) == 1
    assert contract_overlap_days(
        date(2024, 6, 4), date(2024, 6, 4), config
    ) == 0


@pytest.mark.parametrize(
    ("start", "end"),
    [
        (date(2024, 4, 1), date(2024, 4, 7)),
        (date(2024, 8, 5), date(2024, 8, 11)),
    ],
)
def test_interval_outside_contract_costs_nothing(start, end) -> None:
    """Intervals wholly outside the window charge no rent."""
    config = _config(date(2024, 6, 5))

    assert contract_overlap_days(start, end, config) == 0
    assert prorated_weekly_rent(start, end, config) == Decimal("0")
    assert contract_covers_period(start, end, config) is False


def test_closed_form_overlap_matches_day_enumeration() -> None:
    """Closed-form intersection agrees with counting day by day."""
    config = _config(date(2024, 6, 5), days=10)
    base = date(2024, 5, 28)
    for offset in range(25):
        start = base + timedelta(days=offset)
        for length in (0, 1, 6, 30):
            end = start + timedelta(days=length)
            assert contract_overlap_days(start, end, config) == (
                _enumerated_overlap(start, end, config)
            )


def test_missing_start_or_inactive_config_contributes_nothing() -> None:
    """No contract start or an inactive vehicle means zero overlap."""
    week = (date(2024, 6, 3), date(2024, 6, 9))

    assert contract_overlap_days(*week, _config(None)) == 0
    assert contract_overlap_days(*week, None) == 0
    inactive = _config(date(2024, 5, 1), is_active=False)
    assert contract_overlap_days(*week, inactive) == 0
    assert prorated_weekly_rent(*week, inactive) == Decimal("0")
    assert effective_config(inactive) is None


def test_km_cap_applies_without_contract_start() -> None:
    """A vehicle with no known start keeps its km cap active."""
    week = (date(2024, 6, 3), date(2024, 6, 9))

    assert contract_covers_period(*week, _config(None)) is True
    assert contract_covers_period(*week, None) is False
