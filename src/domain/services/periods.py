"""Calendar period resolution (ISO weeks and calendar months)."""

import calendar
from datetime import date, timedelta

from src.domain.models import PeriodKind, PeriodRange


def day_bounds(anchor: date) -> PeriodRange:
    return PeriodRange(kind=PeriodKind.DAY, start=anchor, end=anchor)


def week_bounds(anchor: date) -> PeriodRange:
    """Return the Monday to Sunday week containing ``anchor``."""
    start = anchor - timedelta(days=anchor.weekday())
    return PeriodRange(
        kind=PeriodKind.WEEK,
        start=start,
        end=start + timedelta(days=6),
    )


def month_bounds(anchor: date) -> PeriodRange:
    """Return the calendar month containing ``anchor``."""
    last_day = calendar.monthrange(anchor.year, anchor.month)[1]
    return PeriodRange(
        kind=PeriodKind.MONTH,
        start=anchor.replace(day=1),
        end=anchor.replace(day=last_day),
    )


def resolve_period(anchor: date, kind: PeriodKind | str) -> PeriodRange:
    """Return the period of the given kind containing ``anchor``."""
    kind = PeriodKind(kind)
    if kind is PeriodKind.WEEK:
        return week_bounds(anchor)
    if kind is PeriodKind.MONTH:
        return month_bounds(anchor)
    return day_bounds(anchor)


__all__ = ["day_bounds", "week_bounds", "month_bounds", "resolve_period"]
