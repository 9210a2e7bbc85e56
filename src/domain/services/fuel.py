"""Fuel cost computation from distance and consumption."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models import CarConfig, DailyRecord
from src.utils.decimal_utils import coerce_decimal, safe_divide


def compute_fuel_cost(distance_km, efficiency_km_l, price) -> Decimal:
    """Return ``distance / efficiency * price``.

    Args:
        distance_km: Distance driven in km.
        efficiency_km_l: Km per unit of fuel.
        price: Price per unit of fuel.

    Returns:
        Decimal: Fuel cost, or 0 when any input is not positive.
    """
    distance = coerce_decimal(distance_km)
    efficiency = coerce_decimal(efficiency_km_l)
    unit_price = coerce_decimal(price)
    if distance <= 0 or efficiency <= 0 or unit_price <= 0:
        return Decimal("0")
    return distance / efficiency * unit_price


def resolve_daily_fuel_rates(
    record: DailyRecord,
    config: CarConfig | None,
) -> tuple[Decimal, Decimal]:
    """Return ``(efficiency, price)`` for one day.

    The day's own values win when positive; the vehicle's values fill in the
    rest.
    """
    efficiency = coerce_decimal(record.fuel_efficiency_km_l)
    price = coerce_decimal(record.fuel_price)
    if efficiency <= 0 and config is not None:
        efficiency = coerce_decimal(config.fuel_efficiency_km_l)
    if price <= 0 and config is not None:
        price = coerce_decimal(config.fuel_price)
    return efficiency, price


def resolve_period_fuel_rates(
    records: Iterable[DailyRecord],
    config: CarConfig | None,
) -> tuple[Decimal, Decimal]:
    """Return ``(efficiency, price)`` for a whole period.

    The vehicle's values win when positive. Missing values fall back to the
    km-weighted average of the values logged on each day. This is the
    reverse of ``resolve_daily_fuel_rates``, so when a day logs its own
    price the daily fuel costs of a week need not add up to the weekly
    fuel line; ``PeriodFuelPolicy.SUM_OF_DAILY`` keeps them consistent.
    """
    records = list(records)
    efficiency = coerce_decimal(config.fuel_efficiency_km_l) if config else Decimal("0")
    price = coerce_decimal(config.fuel_price) if config else Decimal("0")
    if efficiency <= 0:
        efficiency = _km_weighted_average(
            records, lambda r: r.fuel_efficiency_km_l
        )
    if price <= 0:
        price = _km_weighted_average(records, lambda r: r.fuel_price)
    return efficiency, price


def daily_fuel_cost(record: DailyRecord, config: CarConfig | None) -> Decimal:
    """Return the computed fuel cost of a single day."""
    efficiency, price = resolve_daily_fuel_rates(record, config)
    return compute_fuel_cost(record.total_km, efficiency, price)


def _km_weighted_average(records: list[DailyRecord], value_of) -> Decimal:
    weighted = Decimal("0")
    weight = Decimal("0")
    for record in records:
        value = coerce_decimal(value_of(record))
        km = record.total_km
        if value <= 0 or km <= 0:
            continue
        weighted += value * km
        weight += km
    return safe_divide(weighted, weight)


__all__ = [
    "compute_fuel_cost",
    "daily_fuel_cost",
    "resolve_daily_fuel_rates",
    "resolve_period_fuel_rates",
]
