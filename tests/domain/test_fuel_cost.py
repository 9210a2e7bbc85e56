"""Tests for fuel cost computation and rate resolution."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.models import CarConfig, DailyRecord, PlatformActivity
from src.domain.services.fuel import (
    compute_fuel_cost,
    daily_fuel_cost,
    resolve_daily_fuel_rates,
    resolve_period_fuel_rates,
)


def _record(day: int, km: str, price: str = "0", efficiency: str = "0"):
    return DailyRecord(
        record_date=date(2024, 6, day),
        platforms={"uber": PlatformActivity(trips=1, km=Decimal(km))},
        fuel_price=Decimal(price),
        fuel_efficiency_km_l=Decimal(efficiency),
    )


def test_compute_fuel_cost_divides_distance_by_efficiency() -> None:
    """Fuel cost is distance / efficiency * price."""
    assert compute_fuel_cost(
        Decimal("180"),
        Decimal("10"),
        Decimal("6.00"),
    ) == Decimal("108")


@pytest.mark.parametrize(
    ("distance", "efficiency", "price"),
    [
        (Decimal("0"), Decimal("10"), Decimal("6")),
        (Decimal("100"), Decimal("0"), Decimal("6")),
        (Decimal("100"), Decimal("10"), Decimal("0")),
        (Decimal("100"), Decimal("-1"), Decimal("6")),
    ],
)
def test_compute_fuel_cost_zero_when_an_input_is_not_positive(
    distance,
    efficiency,
    price,
) -> None:
    """Any non-positive input short-circuits to 0."""
    assert compute_fuel_cost(distance, efficiency, price) == Decimal("0")


def test_higher_efficiency_never_costs_more() -> None:
    """Raising efficiency with fixed distance and price lowers the cost."""
    costs = [
        compute_fuel_cost(Decimal("250"), Decimal(efficiency), Decimal("5.79"))
        for efficiency in ("0", "1", "5", "8.5", "12", "30")
    ]
    assert costs[0] == Decimal("0")
    positive = costs[1:]
    assert all(a > b for a, b in zip(positive, positive[1:]))


def test_daily_rates_prefer_record_values() -> None:
    """Record rates win over the vehicle's when positive."""
    config = CarConfig(
        model="Onix",
        fuel_efficiency_km_l=Decimal("12"),
        fuel_price=Decimal("5.50"),
    )
    record = _record(3, "100", price="6.00", efficiency="10")

    assert resolve_daily_fuel_rates(record, config) == (
        Decimal("10"),
        Decimal("6.00"),
    )


def test_daily_rates_fill_missing_values_from_config() -> None:
    """Missing record rates fall back to the vehicle's."""
    config = CarConfig(
        model="Onix",
        fuel_efficiency_km_l=Decimal("12"),
        fuel_price=Decimal("5.50"),
    )
    record = _record(3, "120", price="6.00")

    assert resolve_daily_fuel_rates(record, config) == (
        Decimal("12"),
        Decimal("6.00"),
    )
    assert daily_fuel_cost(record, config) == Decimal("60")


def test_daily_fuel_cost_without_rates_is_zero() -> None:
    """No efficiency anywhere means no computed fuel."""
    assert daily_fuel_cost(_record(3, "120", price="6"), None) == Decimal("0")


def test_period_rates_prefer_config() -> None:
    """Vehicle rates apply to the whole period when set."""
    config = CarConfig(
        model="Onix",
        fuel_efficiency_km_l=Decimal("10"),
        fuel_price=Decimal("6"),
    )
    records = [_record(3, "100", price="5", efficiency="8")]

    assert resolve_period_fuel_rates(records, config) == (
        Decimal("10"),
        Decimal("6"),
    )


def test_period_rates_fall_back_to_km_weighted_average() -> None:
    """Without vehicle rates, each day's rates are weighted by its km."""
    records = [
        _record(3, "100", price="5", efficiency="10"),
        _record(4, "300", price="6", efficiency="12"),
        _record(5, "50"),
    ]

    efficiency, price = resolve_period_fuel_rates(records, None)

    assert efficiency == Decimal("11.5")
    assert price == Decimal("5.75")
