"""Domain models for the driver's daily activity log."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from src.domain.constants import MINUTES_PER_HOUR
from src.utils.decimal_utils import sum_decimals


@dataclass(frozen=True)
class PlatformActivity:
    """Trips, distance and gross earnings on one platform for one day."""

    trips: int = 0
    km: Decimal = Decimal("0")
    earnings: Decimal = Decimal("0")


EMPTY_ACTIVITY = PlatformActivity()


@dataclass(frozen=True)
class Expense:
    """Manually entered expense attached to a daily record."""

    amount: Decimal
    category: str
    id: int | None = None


@dataclass(frozen=True)
class ExtraEarning:
    """Off-platform income such as tips, private rides or onboard sales."""

    amount: Decimal
    category: str
    earning_date: date | None = None
    description: str = ""
    id: int | None = None


@dataclass(frozen=True)
class DailyRecord:
    """One calendar day of driving activity.

    Attributes:
        record_date: Calendar date; at most one record exists per date.
        minutes_worked: Minutes spent working that day.
        platforms: Activity keyed by platform name.
        fuel_price: Fuel unit price paid that day, 0 when unknown.
        fuel_efficiency_km_l: Vehicle efficiency that day, 0 when unknown.
        expenses: Manual expenses in entry order.
        extra_earnings: Off-platform earnings in entry order.
        id: Store identifier, None until persisted.
    """

    record_date: date
    minutes_worked: int = 0
    platforms: Mapping[str, PlatformActivity] = field(default_factory=dict)
    fuel_price: Decimal = Decimal("0")
    fuel_efficiency_km_l: Decimal = Decimal("0")
    expenses: tuple[Expense, ...] = ()
    extra_earnings: tuple[ExtraEarning, ...] = ()
    id: int | None = None

    def platform(self, name: str) -> PlatformActivity:
        """Return the activity for a platform, empty when absent."""
        return self.platforms.get(name, EMPTY_ACTIVITY)

    @property
    def total_km(self) -> Decimal:
        return sum_decimals(a.km for a in self.platforms.values())

    @property
    def total_trips(self) -> int:
        return sum(a.trips for a in self.platforms.values())

    @property
    def platform_earnings(self) -> Decimal:
        return sum_decimals(a.earnings for a in self.platforms.values())

    @property
    def extra_earnings_total(self) -> Decimal:
        return sum_decimals(e.amount for e in self.extra_earnings)

    @property
    def hours_worked(self) -> Decimal:
        return Decimal(self.minutes_worked) / Decimal(MINUTES_PER_HOUR)


__all__ = [
    "PlatformActivity",
    "EMPTY_ACTIVITY",
    "Expense",
    "ExtraEarning",
    "DailyRecord",
]
