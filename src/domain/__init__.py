"""Domain package for driver earnings rules and core models."""

from .constants import (
    DEFAULT_PLATFORMS,
    FUEL_CATEGORY,
    OVERAGE_CATEGORY,
    RENT_CATEGORY,
)
from .models import (
    CarConfig,
    DailyRecord,
    Expense,
    ExtraEarning,
    PerformanceAnalysis,
    PeriodKind,
    PeriodRange,
    PlatformActivity,
)
from .policies import DEFAULT_POLICIES, AnalysisPolicies
from .services import (
    analyze,
    analyze_day,
    analyze_month,
    analyze_period,
    analyze_week,
    compute_fuel_cost,
    contract_overlap_days,
    group_by_category,
)

__all__ = [
    "AnalysisPolicies",
    "CarConfig",
    "DailyRecord",
    "DEFAULT_PLATFORMS",
    "DEFAULT_POLICIES",
    "Expense",
    "ExtraEarning",
    "FUEL_CATEGORY",
    "OVERAGE_CATEGORY",
    "PerformanceAnalysis",
    "PeriodKind",
    "PeriodRange",
    "PlatformActivity",
    "RENT_CATEGORY",
    "analyze",
    "analyze_day",
    "analyze_month",
    "analyze_period",
    "analyze_week",
    "compute_fuel_cost",
    "contract_overlap_days",
    "group_by_category",
]
