"""Application port for the driver's record store."""

from datetime import date
from typing import Protocol

from src.domain.models import CarConfig, DailyRecord, Expense, ExtraEarning


class RecordStorePort(Protocol):
    """Port exposing persistence of daily records and vehicle configs.

    Implementations hold at most one daily record per date and at most one
    active vehicle config.
    """

    def fetch_daily_records(self) -> list[DailyRecord]:
        """Return every daily record with its expenses and extra earnings."""

    def fetch_daily_record(self, record_date: date) -> DailyRecord | None:
        """Return the record for a date, if any."""

    def save_daily_record(self, record: DailyRecord) -> DailyRecord:
        """Insert or update the record keyed by its date.

        Nested expenses and extra earnings without an id are inserted.
        """

    def delete_daily_record(self, record_id: int) -> bool:
        """Delete a record and its nested entries."""

    def add_expense(self, record_id: int, expense: Expense) -> Expense:
        """Attach an expense to a record."""

    def remove_expense(self, expense_id: int) -> bool:
        """Delete an expense."""

    def add_extra_earning(
        self,
        record_id: int,
        earning: ExtraEarning,
    ) -> ExtraEarning:
        """Attach an extra earning to a record."""

    def remove_extra_earning(self, earning_id: int) -> bool:
        """Delete an extra earning."""

    def fetch_car_configs(self) -> list[CarConfig]:
        """Return every vehicle config, active first."""

    def fetch_active_car_config(self) -> CarConfig | None:
        """Return the active vehicle config, if any."""

    def save_car_config(self, config: CarConfig) -> CarConfig:
        """Insert or update a vehicle config.

        Saving an active config deactivates the others.
        """

    def activate_car_config(self, config_id: int) -> CarConfig | None:
        """Make a config the only active one; None when it does not exist."""


__all__ = ["RecordStorePort"]
