"""Configurable business rules for cost allocation.

These rules were never settled by the product owners, so each one is a named
strategy that can be switched from settings without touching the
aggregation code.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
import math

from src.domain.constants import DAYS_PER_WEEK


class FuelMergePolicy(str, Enum):
    """How a manual fuel expense combines with the computed fuel cost."""

    PREFER_COMPUTED = "prefer_computed"
    PREFER_MANUAL = "prefer_manual"
    SUM = "sum"


class PeriodFuelPolicy(str, Enum):
    """How fuel is costed over a week or month."""

    PERIOD_TOTAL = "period_total"
    SUM_OF_DAILY = "sum_of_daily"


class DailyContractCosts(str, Enum):
    """Whether single-day analyses carry contract costs."""

    EXCLUDE = "exclude"
    INCLUDE_RENT = "include_rent"


class MonthlyRentPolicy(str, Enum):
    """How weekly rent is allocated to a calendar month."""

    CEIL_WEEKS = "ceil_weeks"
    PROPORTIONAL = "proportional"


class MonthlyKmLimitPolicy(str, Enum):
    """How the weekly km limit scales to a calendar month."""

    CEIL_WEEKS = "ceil_weeks"
    PRO_RATA = "pro_rata"


def merge_fuel(
    manual: Decimal,
    computed: Decimal,
    policy: FuelMergePolicy,
) -> Decimal:
    """Combine manually logged fuel with the computed fuel cost.

    Args:
        manual: Sum of expenses logged under the fuel category.
        computed: Fuel cost derived from distance and consumption.
        policy: Merge strategy.

    Returns:
        Decimal: The single fuel amount to report.
    """
    if policy is FuelMergePolicy.SUM:
        return manual + computed
    if policy is FuelMergePolicy.PREFER_MANUAL:
        return manual if manual > 0 else computed
    return computed if computed > 0 else manual


def monthly_rent(
    weekly_rent: Decimal,
    overlap_days: int,
    policy: MonthlyRentPolicy,
) -> Decimal:
    """Allocate weekly rent to the contract days falling in a month."""
    if overlap_days <= 0 or weekly_rent <= 0:
        return Decimal("0")
    if policy is MonthlyRentPolicy.PROPORTIONAL:
        return weekly_rent / Decimal(DAYS_PER_WEEK) * Decimal(overlap_days)
    weeks = math.ceil(overlap_days / DAYS_PER_WEEK)
    return weekly_rent * Decimal(weeks)


def scale_weekly_to_month(
    weekly_amount: Decimal,
    days_in_month: int,
    policy: MonthlyKmLimitPolicy,
) -> Decimal:
    """Scale a weekly quantity to a month of ``days_in_month`` days.

    Args:
        weekly_amount: Quantity granted per week.
        days_in_month: Calendar days in the month.
        policy: Whole started weeks or a per-day pro rata share.

    Returns:
        Decimal: The monthly quantity, 0 when either input is not positive.
    """
    if weekly_amount <= 0 or days_in_month <= 0:
        return Decimal("0")
    if policy is MonthlyKmLimitPolicy.PRO_RATA:
        return weekly_amount / Decimal(DAYS_PER_WEEK) * Decimal(days_in_month)
    weeks = math.ceil(days_in_month / DAYS_PER_WEEK)
    return weekly_amount * Decimal(weeks)


def monthly_km_limit(
    weekly_limit: Decimal,
    days_in_month: int,
    policy: MonthlyKmLimitPolicy,
) -> Decimal:
    """Scale the weekly km allowance to a month."""
    return scale_weekly_to_month(weekly_limit, days_in_month, policy)


@dataclass(frozen=True)
class AnalysisPolicies:
    """Bundle of the cost-allocation strategies used by the analyzers."""

    fuel_merge: FuelMergePolicy = FuelMergePolicy.PREFER_COMPUTED
    period_fuel: PeriodFuelPolicy = PeriodFuelPolicy.PERIOD_TOTAL
    daily_contract_costs: DailyContractCosts = DailyContractCosts.EXCLUDE
    monthly_rent: MonthlyRentPolicy = MonthlyRentPolicy.CEIL_WEEKS
    monthly_km_limit: MonthlyKmLimitPolicy = MonthlyKmLimitPolicy.CEIL_WEEKS


DEFAULT_POLICIES = AnalysisPolicies()


__all__ = [
    "AnalysisPolicies",
    "DEFAULT_POLICIES",
    "DailyContractCosts",
    "FuelMergePolicy",
    "MonthlyKmLimitPolicy",
    "MonthlyRentPolicy",
    "PeriodFuelPolicy",
    "merge_fuel",
    "monthly_km_limit",
    "monthly_rent",
    "scale_weekly_to_month",
]
