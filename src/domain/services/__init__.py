"""Domain services package."""

from .analysis import (
    analyze,
    analyze_day,
    analyze_month,
    analyze_period,
    analyze_week,
    find_record,
)
from .categories import group_by_category, sort_categories
from .contract import (
    contract_overlap_days,
    effective_config,
    prorated_weekly_rent,
)
from .fuel import compute_fuel_cost
from .periods import month_bounds, resolve_period, week_bounds
from .progress import goal_progress, mileage_progress, weekday_breakdown
from .records import accumulate_daily_record, build_history

__all__ = [
    "accumulate_daily_record",
    "analyze",
    "analyze_day",
    "analyze_month",
    "analyze_period",
    "analyze_week",
    "build_history",
    "compute_fuel_cost",
    "contract_overlap_days",
    "effective_config",
    "find_record",
    "goal_progress",
    "group_by_category",
    "mileage_progress",
    "month_bounds",
    "prorated_weekly_rent",
    "resolve_period",
    "sort_categories",
    "week_bounds",
    "weekday_breakdown",
]
