"""Domain models package."""

from .analysis import (
    GoalProgress,
    HistoryEntry,
    MileageProgress,
    PerformanceAnalysis,
    PeriodKind,
    PeriodRange,
    WeekdayTotals,
)
from .records import (
    EMPTY_ACTIVITY,
    DailyRecord,
    Expense,
    ExtraEarning,
    PlatformActivity,
)
from .vehicle import CarConfig

__all__ = [
    "CarConfig",
    "DailyRecord",
    "EMPTY_ACTIVITY",
    "Expense",
    "ExtraEarning",
    "GoalProgress",
    "HistoryEntry",
    "MileageProgress",
    "PerformanceAnalysis",
    "PeriodKind",
    "PeriodRange",
    "PlatformActivity",
    "WeekdayTotals",
]
