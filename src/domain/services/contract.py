"""Rental contract proration."""

from datetime import date, timedelta
from decimal import Decimal

from src.domain.constants import DAYS_PER_WEEK
from src.domain.models import CarConfig


def effective_config(config: CarConfig | None) -> CarConfig | None:
    """Return the config when it may contribute costs, else None.

    Inactive vehicles never contribute to cost rollups.
    """
    if config is None or not config.is_active:
        return None
    return config


def contract_overlap_days(
    start: date,
    end: date,
    config: CarConfig | None,
) -> int:
    """Count the days of ``[start, end]`` inside the contract window.

    The contract window is ``[contract_start, contract_start + contract_days)``.

    Args:
        start: First day of the query interval (inclusive).
        end: Last day of the query interval (inclusive).
        config: Vehicle config, may be None.

    Returns:
        int: Number of overlapping days, 0 without an active contract.
    """
    active = effective_config(config)
    if active is None or active.contract_start is None:
        return 0
    window_start = max(start, active.contract_start)
    window_end = min(end + timedelta(days=1), active.contract_end)
    return max((window_end - window_start).days, 0)


def prorated_weekly_rent(
    start: date,
    end: date,
    config: CarConfig | None,
) -> Decimal:
    """Return ``weekly_rent / 7 * overlap_days`` for the interval."""
    days = contract_overlap_days(start, end, config)
    if days == 0 or config.weekly_rent <= 0:
        return Decimal("0")
    return config.weekly_rent / Decimal(DAYS_PER_WEEK) * Decimal(days)


def contract_covers_period(
    start: date,
    end: date,
    config: CarConfig | None,
) -> bool:
    """Return whether contract terms such as the km cap apply to the interval.

    A vehicle without a known contract start is treated as always under
    contract for its km cap.
    """
    active = effective_config(config)
    if active is None:
        return False
    if active.contract_start is None:
        return True
    return contract_overlap_days(start, end, active) > 0


__all__ = [
    "effective_config",
    "contract_overlap_days",
    "prorated_weekly_rent",
    "contract_covers_period",
]
