"""Domain model for vehicle rental contracts."""

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal


@dataclass(frozen=True)
class CarConfig:
    """Vehicle and rental contract terms.

    Attributes:
        model: Display name of the vehicle.
        weekly_rent: Rental fee charged per week.
        weekly_km_limit: Distance allowed per week before overage applies.
        overage_fee_per_km: Fee per km driven beyond the limit.
        fuel_efficiency_km_l: Km driven per unit of fuel.
        fuel_price: Price per unit of fuel.
        contract_start: First day of the contract, None when unknown.
        contract_days: Contract length in days.
        weekly_earnings_goal: Gross earnings goal per week.
        is_active: Whether this is the vehicle governing cost rollups.
        id: Store identifier, None until persisted.
    """

    model: str
    weekly_rent: Decimal = Decimal("0")
    weekly_km_limit: Decimal = Decimal("0")
    overage_fee_per_km: Decimal = Decimal("0")
    fuel_efficiency_km_l: Decimal = Decimal("0")
    fuel_price: Decimal = Decimal("0")
    contract_start: date | None = None
    contract_days: int = 0
    weekly_earnings_goal: Decimal = Decimal("0")
    is_active: bool = True
    id: int | None = None

    @property
    def contract_end(self) -> date | None:
        """Return the first day after the contract (exclusive bound)."""
        if self.contract_start is None:
            return None
        return self.contract_start + timedelta(days=max(self.contract_days, 0))


__all__ = ["CarConfig"]
