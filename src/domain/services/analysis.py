"""Daily and period profitability analysis.

All functions are pure: they take the full in-memory record collection and
the active vehicle config, and recompute everything on each call.
"""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from src.domain.constants import (
    DEFAULT_PLATFORMS,
    FUEL_CATEGORY,
    MINUTES_PER_HOUR,
    OVERAGE_CATEGORY,
    RENT_CATEGORY,
)
from src.domain.models import (
    CarConfig,
    DailyRecord,
    PerformanceAnalysis,
    PeriodKind,
    PeriodRange,
)
from src.domain.policies import (
    DEFAULT_POLICIES,
    AnalysisPolicies,
    DailyContractCosts,
    PeriodFuelPolicy,
    merge_fuel,
    monthly_km_limit,
    monthly_rent,
)
from src.domain.services.categories import (
    add_to_category,
    group_by_category,
    split_fuel_expenses,
)
from src.domain.services.contract import (
    contract_covers_period,
    contract_overlap_days,
    effective_config,
    prorated_weekly_rent,
)
from src.domain.services.fuel import (
    compute_fuel_cost,
    daily_fuel_cost,
    resolve_period_fuel_rates,
)
from src.domain.services.periods import day_bounds, resolve_period
from src.utils.decimal_utils import safe_divide, sum_decimals


def find_record(
    records: Iterable[DailyRecord],
    target: date,
) -> DailyRecord | None:
    """Return the record logged for ``target``, if any."""
    for record in records:
        if record.record_date == target:
            return record
    return None


def analyze_day(
    target: date,
    records: Iterable[DailyRecord],
    config: CarConfig | None,
    policies: AnalysisPolicies = DEFAULT_POLICIES,
) -> PerformanceAnalysis | None:
    """Return the profitability breakdown of one calendar day.

    Args:
        target: Day to analyze.
        records: Full record collection.
        config: Active vehicle config, may be None.
        policies: Cost allocation strategies.

    Returns:
        PerformanceAnalysis | None: None when no record exists for the day,
        which callers must render as an empty state rather than zeros.
    """
    record = find_record(records, target)
    if record is None:
        return None
    active = effective_config(config)
    others, manual_fuel = split_fuel_expenses(record.expenses)
    fuel = merge_fuel(
        manual_fuel,
        daily_fuel_cost(record, active),
        policies.fuel_merge,
    )
    rent = Decimal("0")
    if policies.daily_contract_costs is DailyContractCosts.INCLUDE_RENT:
        rent = prorated_weekly_rent(target, target, active)
    return _build_analysis(
        day_bounds(target),
        [record],
        other_expenses=others,
        fuel_cost=fuel,
        rent_cost=rent,
        overage_km=Decimal("0"),
        overage_cost=Decimal("0"),
        km_limit=Decimal("0"),
    )


def analyze_period(
    anchor: date,
    records: Iterable[DailyRecord],
    config: CarConfig | None,
    kind: PeriodKind | str = PeriodKind.WEEK,
    policies: AnalysisPolicies = DEFAULT_POLICIES,
) -> PerformanceAnalysis:
    """Return the profitability breakdown of the week or month of ``anchor``.

    Unlike analyze_day, a period without records still yields a fully
    populated analysis with zero values.

    Raises:
        ValueError: If ``kind`` is not a week or a month.
    """
    period = resolve_period(anchor, kind)
    if period.kind is PeriodKind.DAY:
        raise ValueError("analyze_period expects a week or month period")
    in_period = [r for r in records if period.contains(r.record_date)]
    if not in_period:
        return _empty_analysis(period)
    active = effective_config(config)

    other_expenses = []
    manual_fuel_by_day: list[tuple[DailyRecord, Decimal]] = []
    for record in in_period:
        others, manual_fuel = split_fuel_expenses(record.expenses)
        other_expenses.extend(others)
        manual_fuel_by_day.append((record, manual_fuel))

    fuel = _period_fuel_cost(manual_fuel_by_day, active, policies)
    rent = _period_rent(period, active, policies)
    km_limit = _period_km_limit(period, active, policies)

    total_km = sum_decimals(r.total_km for r in in_period)
    overage_km = Decimal("0")
    overage_cost = Decimal("0")
    if km_limit > 0 and contract_covers_period(period.start, period.end, active):
        overage_km = max(Decimal("0"), total_km - km_limit)
        overage_cost = overage_km * active.overage_fee_per_km

    return _build_analysis(
        period,
        in_period,
        other_expenses=other_expenses,
        fuel_cost=fuel,
        rent_cost=rent,
        overage_km=overage_km,
        overage_cost=overage_cost,
        km_limit=km_limit,
    )


def analyze_week(
    anchor: date,
    records: Iterable[DailyRecord],
    config: CarConfig | None,
    policies: AnalysisPolicies = DEFAULT_POLICIES,
) -> PerformanceAnalysis:
    return analyze_period(anchor, records, config, PeriodKind.WEEK, policies)


def analyze_month(
    anchor: date,
    records: Iterable[DailyRecord],
    config: CarConfig | None,
    policies: AnalysisPolicies = DEFAULT_POLICIES,
) -> PerformanceAnalysis:
    return analyze_period(anchor, records, config, PeriodKind.MONTH, policies)


def analyze(
    target: date,
    records: Iterable[DailyRecord],
    config: CarConfig | None,
    kind: PeriodKind | str = PeriodKind.DAY,
    policies: AnalysisPolicies = DEFAULT_POLICIES,
) -> PerformanceAnalysis | None:
    """Dispatch to analyze_day or analyze_period according to ``kind``."""
    if PeriodKind(kind) is PeriodKind.DAY:
        return analyze_day(target, records, config, policies)
    return analyze_period(target, records, config, kind, policies)


def _empty_analysis(period: PeriodRange) -> PerformanceAnalysis:
    # No activity in the period: fixed costs are not charged either.
    return _build_analysis(
        period,
        [],
        other_expenses=[],
        fuel_cost=Decimal("0"),
        rent_cost=Decimal("0"),
        overage_km=Decimal("0"),
        overage_cost=Decimal("0"),
        km_limit=Decimal("0"),
    )


def _period_fuel_cost(
    manual_fuel_by_day: list[tuple[DailyRecord, Decimal]],
    config: CarConfig | None,
    policies: AnalysisPolicies,
) -> Decimal:
    if policies.period_fuel is PeriodFuelPolicy.SUM_OF_DAILY:
        return sum_decimals(
            merge_fuel(manual, daily_fuel_cost(record, config), policies.fuel_merge)
            for record, manual in manual_fuel_by_day
        )
    records = [record for record, _ in manual_fuel_by_day]
    efficiency, price = resolve_period_fuel_rates(records, config)
    computed = compute_fuel_cost(
        sum_decimals(r.total_km for r in records),
        efficiency,
        price,
    )
    manual = sum_decimals(manual for _, manual in manual_fuel_by_day)
    return merge_fuel(manual, computed, policies.fuel_merge)


def _period_rent(
    period: PeriodRange,
    config: CarConfig | None,
    policies: AnalysisPolicies,
) -> Decimal:
    if config is None or config.weekly_rent <= 0:
        return Decimal("0")
    if period.kind is PeriodKind.MONTH:
        overlap = contract_overlap_days(period.start, period.end, config)
        return monthly_rent(config.weekly_rent, overlap, policies.monthly_rent)
    return prorated_weekly_rent(period.start, period.end, config)


def _period_km_limit(
    period: PeriodRange,
    config: CarConfig | None,
    policies: AnalysisPolicies,
) -> Decimal:
    if config is None or config.weekly_km_limit <= 0:
        return Decimal("0")
    if period.kind is PeriodKind.MONTH:
        return monthly_km_limit(
            config.weekly_km_limit,
            period.days,
            policies.monthly_km_limit,
        )
    return config.weekly_km_limit


def _build_analysis(
    period: PeriodRange,
    records: list[DailyRecord],
    *,
    other_expenses: list,
    fuel_cost: Decimal,
    rent_cost: Decimal,
    overage_km: Decimal,
    overage_cost: Decimal,
    km_limit: Decimal,
) -> PerformanceAnalysis:
    earnings_by_platform = {name: Decimal("0") for name in DEFAULT_PLATFORMS}
    km_by_platform = {name: Decimal("0") for name in DEFAULT_PLATFORMS}
    trips_by_platform = {name: 0 for name in DEFAULT_PLATFORMS}
    for record in records:
        for name, activity in record.platforms.items():
            earnings_by_platform[name] = (
                earnings_by_platform.get(name, Decimal("0")) + activity.earnings
            )
            km_by_platform[name] = (
                km_by_platform.get(name, Decimal("0")) + activity.km
            )
            trips_by_platform[name] = (
                trips_by_platform.get(name, 0) + activity.trips
            )

    extras = [extra for record in records for extra in record.extra_earnings]
    extra_total = sum_decimals(extra.amount for extra in extras)
    gross = sum_decimals(earnings_by_platform.values()) + extra_total

    expenses_by_category = group_by_category(other_expenses)
    add_to_category(expenses_by_category, FUEL_CATEGORY, fuel_cost)
    add_to_category(expenses_by_category, RENT_CATEGORY, rent_cost)
    add_to_category(expenses_by_category, OVERAGE_CATEGORY, overage_cost)
    total_expenses = sum_decimals(expenses_by_category.values())
    net_profit = gross - total_expenses

    total_km = sum_decimals(km_by_platform.values())
    total_trips = sum(trips_by_platform.values())
    minutes = sum(record.minutes_worked for record in records)
    hours = safe_divide(minutes, MINUTES_PER_HOUR)

    return PerformanceAnalysis(
        period=period,
        gross_earnings=gross,
        extra_earnings=extra_total,
        total_expenses=total_expenses,
        net_profit=net_profit,
        fuel_cost=fuel_cost,
        rent_cost=rent_cost,
        overage_cost=overage_cost,
        total_km=total_km,
        overage_km=overage_km,
        km_limit=km_limit,
        minutes_worked=minutes,
        total_trips=total_trips,
        record_count=len(records),
        profit_per_hour=safe_divide(net_profit, hours),
        profit_per_km=safe_divide(net_profit, total_km),
        profit_per_trip=safe_divide(net_profit, total_trips),
        revenue_per_hour=safe_divide(gross, hours),
        revenue_per_km=safe_divide(gross, total_km),
        revenue_per_trip=safe_divide(gross, total_trips),
        cost_per_hour=safe_divide(total_expenses, hours),
        cost_per_km=safe_divide(total_expenses, total_km),
        cost_per_trip=safe_divide(total_expenses, total_trips),
        earnings_by_platform=earnings_by_platform,
        km_by_platform=km_by_platform,
        trips_by_platform=trips_by_platform,
        expenses_by_category=expenses_by_category,
        earnings_by_category=group_by_category(extras),
    )


__all__ = [
    "analyze",
    "analyze_day",
    "analyze_month",
    "analyze_period",
    "analyze_week",
    "find_record",
]
