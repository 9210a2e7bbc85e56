"""Domain policies package."""

from .analysis_policies import (
    DEFAULT_POLICIES,
    AnalysisPolicies,
    DailyContractCosts,
    FuelMergePolicy,
    MonthlyKmLimitPolicy,
    MonthlyRentPolicy,
    PeriodFuelPolicy,
    merge_fuel,
    monthly_km_limit,
    monthly_rent,
    scale_weekly_to_month,
)

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
