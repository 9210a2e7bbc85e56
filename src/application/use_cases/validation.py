"""Input validation shared by the recording use cases."""

from decimal import Decimal

from src.domain.models import DailyRecord
from src.utils.decimal_utils import coerce_decimal


def validate_amount(amount, label: str) -> Decimal:
    """Return the amount as Decimal, rejecting non-positive values.

    Raises:
        ValueError: If the amount is zero or negative.
    """
    value = coerce_decimal(amount)
    if value <= 0:
        raise ValueError(f"{label} must be greater than zero, got {value}")
    return value


def validate_category(category: str, label: str) -> str:
    cleaned = (category or "").strip()
    if not cleaned:
        raise ValueError(f"{label} category is required")
    return cleaned


def validate_daily_record(record: DailyRecord) -> None:
    """Reject negative activity values and invalid nested entries.

    Raises:
        ValueError: On the first invalid value found.
    """
    if record.minutes_worked < 0:
        raise ValueError("minutes_worked cannot be negative")
    for name, activity in record.platforms.items():
        if activity.trips < 0 or activity.km < 0 or activity.earnings < 0:
            raise ValueError(f"Negative activity values for platform {name}")
    if record.fuel_price < 0 or record.fuel_efficiency_km_l < 0:
        raise ValueError("Fuel price and efficiency cannot be negative")
    for expense in record.expenses:
        validate_amount(expense.amount, "Expense")
        validate_category(expense.category, "Expense")
    for earning in record.extra_earnings:
        validate_amount(earning.amount, "Extra earning")
        validate_category(earning.category, "Extra earning")


__all__ = ["validate_amount", "validate_category", "validate_daily_record"]
