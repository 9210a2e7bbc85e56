"""Tests for the write-side use cases against an in-memory store."""

from dataclasses import replace
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.ports.record_store import RecordStorePort
from src.application.use_cases.manage_entries import ManageEntriesUseCase
from src.application.use_cases.manage_vehicles import ManageVehiclesUseCase
from src.application.use_cases.record_daily_earnings import (
    RecordDailyEarningsUseCase,
)
from src.domain.models import (
    CarConfig,
    DailyRecord,
    Expense,
    ExtraEarning,
    PlatformActivity,
)


class _FakeRecordStore(RecordStorePort):
    def __init__(self) -> None:
        self.records: dict[date, DailyRecord] = {}
        self.configs: dict[int, CarConfig] = {}
        self._next_id = 1

    def _new_id(self) -> int:
        value = self._next_id
        self._next_id += 1
        return value

    def fetch_daily_records(self) -> list[DailyRecord]:
        return list(self.records.values())

    def fetch_daily_record(self, record_date: date) -> DailyRecord | None:
        return self.records.get(record_date)

    def save_daily_record(self, record: DailyRecord) -> DailyRecord:
        stored = replace(
            record,
            id=record.id or self._new_id(),
            expenses=tuple(
                e if e.id else replace(e, id=self._new_id())
                for e in record.expenses
            ),
        )
        self.records[record.record_date] = stored
        return stored

    def delete_daily_record(self, record_id: int) -> bool:
        for key, record in list(self.records.items()):
            if record.id == record_id:
                del self.records[key]
                return True
        return False

    def _find(self, record_id: int) -> DailyRecord:
        for record in self.records.values():
            if record.id == record_id:
                return record
        raise LookupError(record_id)

    def add_expense(self, record_id: int, expense: Expense) -> Expense:
        record = self._find(record_id)
        stored = replace(expense, id=self._new_id())
        self.records[record.record_date] = replace(
            record,
            expenses=record.expenses + (stored,),
        )
        return stored

    def remove_expense(self, expense_id: int) -> bool:
        for key, record in self.records.items():
            kept = tuple(e for e in record.expenses if e.id != expense_id)
            if len(kept) != len(record.expenses):
                self.records[key] = replace(record, expenses=kept)
                return True
        return False

    def add_extra_earning(
        self,
        record_id: int,
        earning: ExtraEarning,
    ) -> ExtraEarning:
        record = self._find(record_id)
        stored = replace(
            earning,
            id=self._new_id(),
            earning_date=earning.earning_date or record.record_date,
        )
        self.records[record.record_date] = replace(
            record,
            extra_earnings=record.extra_earnings + (stored,),
        )
        return stored

    def remove_extra_earning(self, earning_id: int) -> bool:
        return False

    def fetch_car_configs(self) -> list[CarConfig]:
        return list(self.configs.values())

    def fetch_active_car_config(self) -> CarConfig | None:
        for config in self.configs.values():
            if config.is_active:
                return config
        return None

    def save_car_config(self, config: CarConfig) -> CarConfig:
        stored = replace(config, id=config.id or self._new_id())
        if stored.is_active:
            self._deactivate_all()
        self.configs[stored.id] = stored
        return stored

    def activate_car_config(self, config_id: int) -> CarConfig | None:
        if config_id not in self.configs:
            return None
        self._deactivate_all()
        self.configs[config_id] = replace(
            self.configs[config_id],
            is_active=True,
        )
        return self.configs[config_id]

    def _deactivate_all(self) -> None:
        for key, config in self.configs.items():
            self.configs[key] = replace(config, is_active=False)


def _submission(trips: int, km: str, earnings: str, **kwargs) -> DailyRecord:
    return DailyRecord(
        record_date=date(2024, 6, 3),
        minutes_worked=120,
        platforms={
            "uber": PlatformActivity(
                trips=trips,
                km=Decimal(km),
                earnings=Decimal(earnings),
            )
        },
        **kwargs,
    )


def test_record_daily_earnings_creates_then_accumulates() -> None:
    """Two submissions on the same date end up in one record."""
    store = _FakeRecordStore()
    logger = MagicMock()
    use_case = RecordDailyEarningsUseCase(store, logger=logger)

    first = use_case.execute(
        _submission(
            3,
            "40",
            "60",
            expenses=(Expense(amount=Decimal("8"), category="Meals"),),
        )
    )
    second = use_case.execute(_submission(2, "25", "35"))

    assert len(store.records) == 1
    assert second.id == first.id
    assert second.minutes_worked == 240
    assert second.platform("uber").trips == 5
    assert second.platform("uber").earnings == Decimal("95")
    assert len(second.expenses) == 1
    assert "Accumulating" in logger.info.call_args.args[0]


def test_record_daily_earnings_rejects_negative_values() -> None:
    """Invalid submissions never reach the store."""
    store = MagicMock()
    use_case = RecordDailyEarningsUseCase(store, logger=MagicMock())

    with pytest.raises(ValueError):
        use_case.execute(_submission(1, "-5", "10"))
    with pytest.raises(ValueError):
        use_case.execute(
            _submission(
                1,
                "5",
                "10",
                expenses=(Expense(amount=Decimal("0"), category="Meals"),),
            )
        )
    store.save_daily_record.assert_not_called()


def test_manage_entries_adds_and_removes_expenses() -> None:
    """Expenses are validated, attached and removable."""
    store = _FakeRecordStore()
    record = store.save_daily_record(_submission(1, "10", "20"))
    use_case = ManageEntriesUseCase(store, logger=MagicMock())

    expense = use_case.add_expense(record.id, "12.50", "  Tolls ")

    assert expense.amount == Decimal("12.50")
    assert expense.category == "Tolls"
    assert store.fetch_daily_record(date(2024, 6, 3)).expenses == (expense,)
    assert use_case.remove_expense(expense.id) is True
    assert use_case.remove_expense(expense.id) is False


@pytest.mark.parametrize(
    ("amount", "category"),
    [(0, "Meals"), (Decimal("-1"), "Meals"), (10, "   ")],
)
def test_manage_entries_rejects_invalid_expenses(amount, category) -> None:
    """Amounts must be positive and categories non-empty."""
    store = MagicMock()
    use_case = ManageEntriesUseCase(store, logger=MagicMock())

    with pytest.raises(ValueError):
        use_case.add_expense(1, amount, category)
    store.add_expense.assert_not_called()


def test_manage_entries_adds_extra_earning_with_record_date() -> None:
    """Extra earnings default to the record's date."""
    store = _FakeRecordStore()
    record = store.save_daily_record(_submission(1, "10", "20"))
    use_case = ManageEntriesUseCase(store, logger=MagicMock())

    earning = use_case.add_extra_earning(
        record.id,
        Decimal("45"),
        "Private ride",
        description=" airport ",
    )

    assert earning.earning_date == date(2024, 6, 3)
    assert earning.description == "airport"
    assert use_case.remove_extra_earning(999) is False


def test_manage_entries_deletes_record() -> None:
    """Deleting a record removes it from the store."""
    store = _FakeRecordStore()
    logger = MagicMock()
    record = store.save_daily_record(_submission(1, "10", "20"))
    use_case = ManageEntriesUseCase(store, logger=logger)

    assert use_case.delete_record(record.id) is True
    assert store.records == {}
    assert use_case.delete_record(record.id) is False
    logger.warning.assert_called_once()


def test_manage_vehicles_keeps_one_active_vehicle() -> None:
    """Saving or activating a vehicle deactivates the others."""
    store = _FakeRecordStore()
    use_case = ManageVehiclesUseCase(store, logger=MagicMock())

    first = use_case.save_vehicle(CarConfig(model="Onix"))
    second = use_case.save_vehicle(CarConfig(model="Kwid"))

    assert store.fetch_active_car_config().id == second.id
    use_case.activate_vehicle(first.id)
    active = [v for v in use_case.list_vehicles() if v.is_active]
    assert [v.id for v in active] == [first.id]


def test_manage_vehicles_validates_input() -> None:
    """Empty models, negative terms and unknown ids are rejected."""
    store = MagicMock()
    store.activate_car_config.return_value = None
    use_case = ManageVehiclesUseCase(store, logger=MagicMock())

    with pytest.raises(ValueError):
        use_case.save_vehicle(CarConfig(model=" "))
    with pytest.raises(ValueError):
        use_case.save_vehicle(
            CarConfig(model="Onix", weekly_rent=Decimal("-1"))
        )
    with pytest.raises(LookupError):
        use_case.activate_vehicle(42)
    store.save_car_config.assert_not_called()
