"""Use case editing the expenses and extra earnings of daily records."""

from datetime import date

from src.application.ports.record_store import RecordStorePort
from src.application.use_cases.validation import (
    validate_amount,
    validate_category,
)
from src.domain.models import Expense, ExtraEarning
from src.infrastructure.logging.logger import get_app_logger


class ManageEntriesUseCase:
    """Add or remove nested entries and delete whole records."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            record_store: Port persisting daily records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def add_expense(self, record_id: int, amount, category: str) -> Expense:
        """Attach a manual expense to a record.

        Raises:
            ValueError: If the amount is not positive or the category empty.
        """
        expense = Expense(
            amount=validate_amount(amount, "Expense"),
            category=validate_category(category, "Expense"),
        )
        stored = self._record_store.add_expense(record_id, expense)
        self._logger.info(
            f"Added expense {stored.id} ({stored.category}={stored.amount}) "
            f"to record {record_id}"
        )
        return stored

    def remove_expense(self, expense_id: int) -> bool:
        removed = self._record_store.remove_expense(expense_id)
        if not removed:
            self._logger.warning(f"Expense {expense_id} not found")
        return removed

    def add_extra_earning(
        self,
        record_id: int,
        amount,
        category: str,
        description: str = "",
        earning_date: date | None = None,
    ) -> ExtraEarning:
        """Attach an off-platform earning to a record.

        Raises:
            ValueError: If the amount is not positive or the category empty.
        """
        earning = ExtraEarning(
            amount=validate_amount(amount, "Extra earning"),
            category=validate_category(category, "Extra earning"),
            earning_date=earning_date,
            description=description.strip(),
        )
        stored = self._record_store.add_extra_earning(record_id, earning)
        self._logger.info(
            f"Added extra earning {stored.id} "
            f"({stored.category}={stored.amount}) to record {record_id}"
        )
        return stored

    def remove_extra_earning(self, earning_id: int) -> bool:
        removed = self._record_store.remove_extra_earning(earning_id)
        if not removed:
            self._logger.warning(f"Extra earning {earning_id} not found")
        return removed

    def delete_record(self, record_id: int) -> bool:
        """Delete a daily record together with its nested entries."""
        removed = self._record_store.delete_daily_record(record_id)
        if removed:
            self._logger.info(f"Deleted daily record {record_id}")
        else:
            self._logger.warning(f"Daily record {record_id} not found")
        return removed


__all__ = ["ManageEntriesUseCase"]
