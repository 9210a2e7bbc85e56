"""Application use cases package."""

from .get_daily_analysis import GetDailyAnalysisUseCase
from .get_dashboard import DashboardView, GetDashboardUseCase
from .get_history import GetHistoryUseCase
from .get_period_analysis import GetPeriodAnalysisUseCase
from .manage_entries import ManageEntriesUseCase
from .manage_vehicles import ManageVehiclesUseCase
from .record_daily_earnings import RecordDailyEarningsUseCase

__all__ = [
    "DashboardView",
    "GetDailyAnalysisUseCase",
    "GetDashboardUseCase",
    "GetHistoryUseCase",
    "GetPeriodAnalysisUseCase",
    "ManageEntriesUseCase",
    "ManageVehiclesUseCase",
    "RecordDailyEarningsUseCase",
]
