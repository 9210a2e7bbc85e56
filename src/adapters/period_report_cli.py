"""CLI adapter printing the profitability analysis for a day, week or month."""

from datetime import date
import os

from src.application.use_cases.get_daily_analysis import (
    GetDailyAnalysisUseCase,
)
from src.application.use_cases.get_period_analysis import (
    GetPeriodAnalysisUseCase,
)
from src.domain.models import PerformanceAnalysis, PeriodKind
from src.domain.services.categories import sort_categories
from src.infrastructure.container import build_record_store, build_settings
from src.infrastructure.logging.logger import get_app_logger


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def _parse_period(value: str | None, logger) -> PeriodKind | None:
    """Parse a period name, defaulting to a week when unset."""
    if not value:
        return PeriodKind.WEEK
    try:
        return PeriodKind(value.strip().lower())
    except ValueError:
        logger.warning(
            f"Invalid period '{value}'. Expected day, week or month."
        )
        return None


def _print_analysis(analysis: PerformanceAnalysis) -> None:
    print(
        f"Period {analysis.period.kind.value}: "
        f"{analysis.start} to {analysis.end} "
        f"({analysis.record_count} records)"
    )
    print(
        f"gross={analysis.gross_earnings:.2f}, "
        f"expenses={analysis.total_expenses:.2f}, "
        f"net={analysis.net_profit:.2f}"
    )
    print(
        f"km={analysis.total_km}, trips={analysis.total_trips}, "
        f"minutes={analysis.minutes_worked}, "
        f"profit_per_hour={analysis.profit_per_hour:.2f}"
    )
    if analysis.km_limit > 0:
        print(
            f"km_limit={analysis.km_limit}, "
            f"overage_km={analysis.overage_km}"
        )
    for category, amount in sort_categories(analysis.expenses_by_category):
        print(f"  {category}: {amount:.2f}")


def main() -> None:
    """Print the analysis selected by REPORT_DATE and REPORT_PERIOD."""
    logger = get_app_logger()
    raw_date = os.getenv("REPORT_DATE")
    target = _parse_date(raw_date, logger)
    if raw_date and target is None:
        return
    kind = _parse_period(os.getenv("REPORT_PERIOD"), logger)
    if kind is None:
        return
    target = target or date.today()

    settings = build_settings()
    record_store = build_record_store()
    if kind is PeriodKind.DAY:
        analysis = GetDailyAnalysisUseCase(
            record_store,
            logger=logger,
            policies=settings.policies,
        ).execute(target)
        if analysis is None:
            print(f"No record for {target.isoformat()}")
            return
    else:
        analysis = GetPeriodAnalysisUseCase(
            record_store,
            logger=logger,
            policies=settings.policies,
        ).execute(target, kind)
    _print_analysis(analysis)


if __name__ == "__main__":  # pragma: no cover
    main()
