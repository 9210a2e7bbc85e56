"""Record lifecycle rules: earnings upsert and history listing."""

from collections.abc import Iterable
from dataclasses import replace

from src.domain.models import (
    CarConfig,
    DailyRecord,
    HistoryEntry,
    PlatformActivity,
)
from src.domain.policies import DEFAULT_POLICIES, AnalysisPolicies
from src.domain.services.analysis import analyze_day


def accumulate_daily_record(
    existing: DailyRecord,
    submission: DailyRecord,
) -> DailyRecord:
    """Merge a new earnings submission into the record for the same date.

    Trips, km, earnings and minutes add up; expenses and extra earnings are
    appended; fuel rates are replaced only by positive values.

    Raises:
        ValueError: If the two records are for different dates.
    """
    if existing.record_date != submission.record_date:
        raise ValueError(
            f"Cannot merge records for {existing.record_date} "
            f"and {submission.record_date}"
        )
    platforms = dict(existing.platforms)
    for name, activity in submission.platforms.items():
        current = platforms.get(name, PlatformActivity())
        platforms[name] = PlatformActivity(
            trips=current.trips + activity.trips,
            km=current.km + activity.km,
            earnings=current.earnings + activity.earnings,
        )
    return replace(
        existing,
        minutes_worked=existing.minutes_worked + submission.minutes_worked,
        platforms=platforms,
        fuel_price=(
            submission.fuel_price
            if submission.fuel_price > 0
            else existing.fuel_price
        ),
        fuel_efficiency_km_l=(
            submission.fuel_efficiency_km_l
            if submission.fuel_efficiency_km_l > 0
            else existing.fuel_efficiency_km_l
        ),
        expenses=existing.expenses + submission.expenses,
        extra_earnings=existing.extra_earnings + submission.extra_earnings,
    )


def build_history(
    records: Iterable[DailyRecord],
    config: CarConfig | None,
    policies: AnalysisPolicies = DEFAULT_POLICIES,
    limit: int | None = None,
) -> list[HistoryEntry]:
    """Return one summary per record, most recent first."""
    ordered = sorted(records, key=lambda r: r.record_date, reverse=True)
    if limit is not None:
        ordered = ordered[:limit]
    entries: list[HistoryEntry] = []
    for record in ordered:
        daily = analyze_day(record.record_date, [record], config, policies)
        entries.append(
            HistoryEntry(
                record_date=record.record_date,
                gross_earnings=daily.gross_earnings,
                total_expenses=daily.total_expenses,
                net_profit=daily.net_profit,
                total_km=daily.total_km,
                total_trips=daily.total_trips,
                minutes_worked=daily.minutes_worked,
            )
        )
    return entries


__all__ = ["accumulate_daily_record", "build_history"]
