"""Category grouping for expenses and extra earnings."""

from collections.abc import Iterable, Mapping
from decimal import Decimal

from src.domain.constants import FUEL_CATEGORY_ALIASES
from src.utils.decimal_utils import coerce_decimal


def group_by_category(items: Iterable) -> dict[str, Decimal]:
    """Sum item amounts per category, keeping only positive totals.

    Args:
        items: Objects exposing ``category`` and ``amount``.

    Returns:
        dict[str, Decimal]: Total per category label.
    """
    totals: dict[str, Decimal] = {}
    for item in items:
        totals[item.category] = (
            totals.get(item.category, Decimal("0"))
            + coerce_decimal(item.amount)
        )
    return {
        category: amount
        for category, amount in totals.items()
        if amount > 0
    }


def add_to_category(
    totals: dict[str, Decimal],
    category: str,
    amount: Decimal,
) -> None:
    """Add a positive amount to a category mapping in place."""
    if amount <= 0:
        return
    totals[category] = totals.get(category, Decimal("0")) + amount


def sort_categories(
    totals: Mapping[str, Decimal],
) -> list[tuple[str, Decimal]]:
    """Return categories ordered by amount, largest first."""
    return sorted(totals.items(), key=lambda item: (-item[1], item[0]))


def is_fuel_category(category: str) -> bool:
    return category.strip().casefold() in FUEL_CATEGORY_ALIASES


def split_fuel_expenses(expenses: Iterable) -> tuple[list, Decimal]:
    """Separate manual fuel expenses from the others.

    Returns:
        tuple: Non-fuel expenses and the summed manual fuel amount.
    """
    others = []
    fuel = Decimal("0")
    for expense in expenses:
        if is_fuel_category(expense.category):
            fuel += coerce_decimal(expense.amount)
        else:
            others.append(expense)
    return others, fuel


__all__ = [
    "group_by_category",
    "add_to_category",
    "sort_categories",
    "is_fuel_category",
    "split_fuel_expenses",
]
