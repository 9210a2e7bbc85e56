"""Domain constants for driver earnings analytics."""

PLATFORM_UBER = "uber"
PLATFORM_99 = "99"
DEFAULT_PLATFORMS = (PLATFORM_UBER, PLATFORM_99)

FUEL_CATEGORY = "Fuel"
RENT_CATEGORY = "Rent"
OVERAGE_CATEGORY = "Mileage overage"

# Labels found in older records for manually logged fuel.
FUEL_CATEGORY_ALIASES = frozenset({"fuel", "combustível", "combustivel"})

DEFAULT_EXPENSE_CATEGORIES = (
    FUEL_CATEGORY,
    "Cleaning",
    "Meals",
    "Tolls",
    "Parking",
    "Other",
)

DEFAULT_EXTRA_EARNING_CATEGORIES = (
    "Onboard sales",
    "Private ride",
    "Tips",
    "Other",
)

DAYS_PER_WEEK = 7
MINUTES_PER_HOUR = 60


__all__ = [
    "PLATFORM_UBER",
    "PLATFORM_99",
    "DEFAULT_PLATFORMS",
    "FUEL_CATEGORY",
    "RENT_CATEGORY",
    "OVERAGE_CATEGORY",
    "FUEL_CATEGORY_ALIASES",
    "DEFAULT_EXPENSE_CATEGORIES",
    "DEFAULT_EXTRA_EARNING_CATEGORIES",
    "DAYS_PER_WEEK",
    "MINUTES_PER_HOUR",
]
