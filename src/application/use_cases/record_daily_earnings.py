"""Use case recording a day's earnings with upsert semantics.

A second submission for a date already on file accumulates into the
existing record instead of creating a duplicate.
"""

from src.application.ports.record_store import RecordStorePort
from src.application.use_cases.validation import (
    validate_daily_record,
)
from src.domain.models import DailyRecord
from src.domain.services.records import accumulate_daily_record
from src.infrastructure.logging.logger import get_app_logger


class RecordDailyEarningsUseCase:
    """Create or accumulate the daily record for a date."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            record_store: Port persisting daily records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def execute(self, submission: DailyRecord) -> DailyRecord:
        """Store the submission, merging it with any record for its date.

        Args:
            submission: Earnings, activity and entries for one date.

        Returns:
            DailyRecord: The stored record.

        Raises:
            ValueError: If the submission contains invalid values.
        """
        validate_daily_record(submission)
        existing = self._record_store.fetch_daily_record(
            submission.record_date
        )
        if existing is None:
            record = submission
            self._logger.info(
                f"Creating daily record for {submission.record_date}"
            )
        else:
            record = accumulate_daily_record(existing, submission)
            self._logger.info(
                f"Accumulating earnings into record {existing.id} "
                f"for {submission.record_date}"
            )
        return self._record_store.save_daily_record(record)


__all__ = ["RecordDailyEarningsUseCase"]
