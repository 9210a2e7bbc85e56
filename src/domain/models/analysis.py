"""Domain models produced by the earnings analysis services."""

from dataclasses import dataclass, field
from datetime import date, timedelta
from decimal import Decimal
from enum import Enum

from src.domain.constants import (
    MINUTES_PER_HOUR,
    PLATFORM_99,
    PLATFORM_UBER,
)


class PeriodKind(str, Enum):
    """Aggregation window."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"


@dataclass(frozen=True)
class PeriodRange:
    """Inclusive calendar interval for an analysis."""

    kind: PeriodKind
    start: date
    end: date

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def iter_days(self):
        """Yield every date of the interval in order."""
        for offset in range(self.days):
            yield self.start + timedelta(days=offset)


@dataclass(frozen=True)
class PerformanceAnalysis:
    """Profitability breakdown for a day, week or month.

    Monetary fields are Decimal. Per-unit ratios are 0 whenever their
    divisor (hours, km, trips) is 0.
    """

    period: PeriodRange
    gross_earnings: Decimal
    extra_earnings: Decimal
    total_expenses: Decimal
    net_profit: Decimal
    fuel_cost: Decimal
    rent_cost: Decimal
    overage_cost: Decimal
    total_km: Decimal
    overage_km: Decimal
    km_limit: Decimal
    minutes_worked: int
    total_trips: int
    record_count: int
    profit_per_hour: Decimal
    profit_per_km: Decimal
    profit_per_trip: Decimal
    revenue_per_hour: Decimal
    revenue_per_km: Decimal
    revenue_per_trip: Decimal
    cost_per_hour: Decimal
    cost_per_km: Decimal
    cost_per_trip: Decimal
    earnings_by_platform: dict[str, Decimal] = field(default_factory=dict)
    km_by_platform: dict[str, Decimal] = field(default_factory=dict)
    trips_by_platform: dict[str, int] = field(default_factory=dict)
    expenses_by_category: dict[str, Decimal] = field(default_factory=dict)
    earnings_by_category: dict[str, Decimal] = field(default_factory=dict)

    @property
    def hours_worked(self) -> Decimal:
        return Decimal(self.minutes_worked) / Decimal(MINUTES_PER_HOUR)

    @property
    def start(self) -> str:
        return self.period.start.isoformat()

    @property
    def end(self) -> str:
        return self.period.end.isoformat()

    def as_payload(self) -> dict:
        """Return the analysis keyed by camelCase field names."""
        zero = Decimal("0")
        return {
            "periodo": {"inicio": self.start, "fim": self.end},
            "ganhosBrutos": self.gross_earnings,
            "ganhosUber": self.earnings_by_platform.get(PLATFORM_UBER, zero),
            "ganhos99": self.earnings_by_platform.get(PLATFORM_99, zero),
            "ganhosExtras": self.extra_earnings,
            "gastosTotal": self.total_expenses,
            "lucroLiquido": self.net_profit,
            "combustivel": self.fuel_cost,
            "aluguel": self.rent_cost,
            "custoKmExcedido": self.overage_cost,
            "kmTotais": self.total_km,
            "kmExcedidos": self.overage_km,
            "limiteKm": self.km_limit,
            "tempoTrabalhado": self.minutes_worked,
            "numCorridas": self.total_trips,
            "ganhoPorHora": self.profit_per_hour,
            "lucroPorKm": self.profit_per_km,
            "lucroPorCorrida": self.profit_per_trip,
            "receitaPorHora": self.revenue_per_hour,
            "receitaPorKm": self.revenue_per_km,
            "receitaPorCorrida": self.revenue_per_trip,
            "custoPorHora": self.cost_per_hour,
            "custoPorKm": self.cost_per_km,
            "custoPorCorrida": self.cost_per_trip,
            "expensesByCategory": dict(self.expenses_by_category),
            "earningsByCategory": dict(self.earnings_by_category),
        }


@dataclass(frozen=True)
class GoalProgress:
    """Gross earnings measured against the period goal."""

    goal: Decimal
    achieved: Decimal
    remaining: Decimal
    percent: Decimal

    @property
    def reached(self) -> bool:
        return self.goal > 0 and self.achieved >= self.goal


@dataclass(frozen=True)
class MileageProgress:
    """Distance driven measured against the period km limit."""

    limit: Decimal
    driven: Decimal
    remaining: Decimal
    percent: Decimal

    @property
    def over_limit(self) -> bool:
        return self.limit > 0 and self.remaining < 0


@dataclass(frozen=True)
class WeekdayTotals:
    """Earnings per platform and expenses for one day of a week chart."""

    day: date
    earnings_by_platform: dict[str, Decimal]
    expenses: Decimal

    @property
    def total_earnings(self) -> Decimal:
        return sum(self.earnings_by_platform.values(), start=Decimal("0"))


@dataclass(frozen=True)
class HistoryEntry:
    """Summary line for one daily record in the history view."""

    record_date: date
    gross_earnings: Decimal
    total_expenses: Decimal
    net_profit: Decimal
    total_km: Decimal
    total_trips: int
    minutes_worked: int


__all__ = [
    "PeriodKind",
    "PeriodRange",
    "PerformanceAnalysis",
    "GoalProgress",
    "MileageProgress",
    "WeekdayTotals",
    "HistoryEntry",
]
