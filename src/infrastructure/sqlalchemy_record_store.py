"""SQLAlchemy-backed record store for daily records and vehicle configs.

Tables are created on first use. Dates are stored as ISO strings so the same
SQL runs on SQLite and PostgreSQL.
"""

from collections import defaultdict
from datetime import date

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.record_store import RecordStorePort
from src.domain.models import (
    CarConfig,
    DailyRecord,
    Expense,
    ExtraEarning,
    PlatformActivity,
)
from src.utils.decimal_utils import coerce_decimal


def _create_table_statements(engine: Engine) -> list[str]:
    if engine.dialect.name == "sqlite":
        id_column = "id INTEGER PRIMARY KEY AUTOINCREMENT"
    else:
        id_column = "id SERIAL PRIMARY KEY"
    return [
        f"""
        CREATE TABLE IF NOT EXISTS daily_records (
            {id_column},
            record_date TEXT NOT NULL UNIQUE,
            minutes_worked INTEGER NOT NULL DEFAULT 0,
            fuel_price NUMERIC NOT NULL DEFAULT 0,
            fuel_efficiency_km_l NUMERIC NOT NULL DEFAULT 0
        )
        """,
        """
        CREATE TABLE IF NOT EXISTS platform_activity (
            record_id INTEGER NOT NULL,
            platform TEXT NOT NULL,
            trips INTEGER NOT NULL DEFAULT 0,
            km NUMERIC NOT NULL DEFAULT 0,
            earnings NUMERIC NOT NULL DEFAULT 0,
            PRIMARY KEY (record_id, platform)
        )
        """,
        f"""
        CREATE TABLE IF NOT EXISTS expenses (
            {id_column},
            record_id INTEGER NOT NULL,
            amount NUMERIC NOT NULL,
            category TEXT NOT NULL
        )
        """,
        f"""
        CREATE TABLE IF NOT EXISTS extra_earnings (
            {id_column},
            record_id INTEGER NOT NULL,
            earning_date TEXT,
            amount NUMERIC NOT NULL,
            category TEXT NOT NULL,
            description TEXT NOT NULL DEFAULT ''
        )
        """,
        f"""
        CREATE TABLE IF NOT EXISTS car_configs (
            {id_column},
            model TEXT NOT NULL,
            weekly_rent NUMERIC NOT NULL DEFAULT 0,
            weekly_km_limit NUMERIC NOT NULL DEFAULT 0,
            overage_fee_per_km NUMERIC NOT NULL DEFAULT 0,
            fuel_efficiency_km_l NUMERIC NOT NULL DEFAULT 0,
            fuel_price NUMERIC NOT NULL DEFAULT 0,
            contract_start TEXT,
            contract_days INTEGER NOT NULL DEFAULT 0,
            weekly_earnings_goal NUMERIC NOT NULL DEFAULT 0,
            is_active BOOLEAN NOT NULL DEFAULT FALSE
        )
        """,
    ]


_CAR_CONFIG_COLUMNS = """
    id, model, weekly_rent, weekly_km_limit, overage_fee_per_km,
    fuel_efficiency_km_l, fuel_price, contract_start, contract_days,
    weekly_earnings_goal, is_active
"""


class SqlAlchemyRecordStore(RecordStorePort):
    """RecordStorePort implementation using plain SQL through SQLAlchemy."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the records engine.
        """
        self._db_port = db_port
        self._schema_ready = False

    def _engine(self) -> Engine:
        engine = self._db_port.get_engine()
        if not self._schema_ready:
            with engine.begin() as conn:
                for statement in _create_table_statements(engine):
                    conn.execute(text(statement))
            self._schema_ready = True
        return engine

    # Daily records

    def fetch_daily_records(self) -> list[DailyRecord]:
        with self._engine().connect() as conn:
            rows = conn.execute(
                text(
                    """
                    SELECT id, record_date, minutes_worked, fuel_price,
                           fuel_efficiency_km_l
                    FROM daily_records
                    ORDER BY record_date DESC
                    """
                )
            ).all()
            return self._hydrate_records(conn, rows)

    def fetch_daily_record(self, record_date: date) -> DailyRecord | None:
        with self._engine().connect() as conn:
            rows = conn.execute(
                text(
                    """
                    SELECT id, record_date, minutes_worked, fuel_price,
                           fuel_efficiency_km_l
                    FROM daily_records
                    WHERE record_date = :record_date
                    """
                ),
                {"record_date": record_date.isoformat()},
            ).all()
            records = self._hydrate_records(conn, rows)
        return records[0] if records else None

    def save_daily_record(self, record: DailyRecord) -> DailyRecord:
        params = {
            "record_date": record.record_date.isoformat(),
            "minutes_worked": record.minutes_worked,
            "fuel_price": str(record.fuel_price),
            "fuel_efficiency_km_l": str(record.fuel_efficiency_km_l),
        }
        with self._engine().begin() as conn:
            existing_id = conn.execute(
                text(
                    "SELECT id FROM daily_records "
                    "WHERE record_date = :record_date"
                ),
                {"record_date": params["record_date"]},
            ).scalar()
            if existing_id is None:
                record_id = conn.execute(
                    text(
                        """
                        INSERT INTO daily_records (
                            record_date, minutes_worked, fuel_price,
                            fuel_efficiency_km_l
                        )
                        VALUES (
                            :record_date, :minutes_worked, :fuel_price,
                            :fuel_efficiency_km_l
                        )
                        RETURNING id
                        """
                    ),
                    params,
                ).scalar_one()
            else:
                record_id = existing_id
                conn.execute(
                    text(
                        """
                        UPDATE daily_records
                        SET minutes_worked = :minutes_worked,
                            fuel_price = :fuel_price,
                            fuel_efficiency_km_l = :fuel_efficiency_km_l
                        WHERE id = :id
                        """
                    ),
                    {**params, "id": record_id},
                )
            conn.execute(
                text("DELETE FROM platform_activity WHERE record_id = :id"),
                {"id": record_id},
            )
            for name, activity in record.platforms.items():
                conn.execute(
                    text(
                        """
                        INSERT INTO platform_activity (
                            record_id, platform, trips, km, earnings
                        )
                        VALUES (:record_id, :platform, :trips, :km, :earnings)
                        """
                    ),
                    {
                        "record_id": record_id,
                        "platform": name,
                        "trips": activity.trips,
                        "km": str(activity.km),
                        "earnings": str(activity.earnings),
                    },
                )
            for expense in record.expenses:
                if expense.id is None:
                    self._insert_expense(conn, record_id, expense)
            for earning in record.extra_earnings:
                if earning.id is None:
                    self._insert_extra_earning(conn, record_id, earning)
            rows = conn.execute(
                text(
                    """
                    SELECT id, record_date, minutes_worked, fuel_price,
                           fuel_efficiency_km_l
                    FROM daily_records
                    WHERE id = :id
                    """
                ),
                {"id": record_id},
            ).all()
            return self._hydrate_records(conn, rows)[0]

    def delete_daily_record(self, record_id: int) -> bool:
        with self._engine().begin() as conn:
            for table in ("platform_activity", "expenses", "extra_earnings"):
                conn.execute(
                    text(f"DELETE FROM {table} WHERE record_id = :id"),
                    {"id": record_id},
                )
            result = conn.execute(
                text("DELETE FROM daily_records WHERE id = :id"),
                {"id": record_id},
            )
        return result.rowcount > 0

    # Nested entries

    def add_expense(self, record_id: int, expense: Expense) -> Expense:
        with self._engine().begin() as conn:
            self._require_record(conn, record_id)
            return self._insert_expense(conn, record_id, expense)

    def remove_expense(self, expense_id: int) -> bool:
        with self._engine().begin() as conn:
            result = conn.execute(
                text("DELETE FROM expenses WHERE id = :id"),
                {"id": expense_id},
            )
        return result.rowcount > 0

    def add_extra_earning(
        self,
        record_id: int,
        earning: ExtraEarning,
    ) -> ExtraEarning:
        with self._engine().begin() as conn:
            record_date = self._require_record(conn, record_id)
            if earning.earning_date is None:
                earning = ExtraEarning(
                    amount=earning.amount,
                    category=earning.category,
                    earning_date=record_date,
                    description=earning.description,
                )
            return self._insert_extra_earning(conn, record_id, earning)

    def remove_extra_earning(self, earning_id: int) -> bool:
        with self._engine().begin() as conn:
            result = conn.execute(
                text("DELETE FROM extra_earnings WHERE id = :id"),
                {"id": earning_id},
            )
        return result.rowcount > 0

    # Vehicle configs

    def fetch_car_configs(self) -> list[CarConfig]:
        with self._engine().connect() as conn:
            rows = conn.execute(
                text(
                    f"SELECT {_CAR_CONFIG_COLUMNS} FROM car_configs "
                    "ORDER BY is_active DESC, id DESC"
                )
            ).all()
        return [self._to_car_config(row) for row in rows]

    def fetch_active_car_config(self) -> CarConfig | None:
        with self._engine().connect() as conn:
            row = conn.execute(
                text(
                    f"SELECT {_CAR_CONFIG_COLUMNS} FROM car_configs "
                    "WHERE is_active = :active ORDER BY id DESC"
                ),
                {"active": True},
            ).first()
        return self._to_car_config(row) if row is not None else None

    def save_car_config(self, config: CarConfig) -> CarConfig:
        params = {
            "model": config.model,
            "weekly_rent": str(config.weekly_rent),
            "weekly_km_limit": str(config.weekly_km_limit),
            "overage_fee_per_km": str(config.overage_fee_per_km),
            "fuel_efficiency_km_l": str(config.fuel_efficiency_km_l),
            "fuel_price": str(config.fuel_price),
            "contract_start": (
                config.contract_start.isoformat()
                if config.contract_start
                else None
            ),
            "contract_days": config.contract_days,
            "weekly_earnings_goal": str(config.weekly_earnings_goal),
            "is_active": config.is_active,
        }
        with self._engine().begin() as conn:
            if config.id is None:
                config_id = conn.execute(
                    text(
                        """
                        INSERT INTO car_configs (
                            model, weekly_rent, weekly_km_limit,
                            overage_fee_per_km, fuel_efficiency_km_l,
                            fuel_price, contract_start, contract_days,
                            weekly_earnings_goal, is_active
                        )
                        VALUES (
                            :model, :weekly_rent, :weekly_km_limit,
                            :overage_fee_per_km, :fuel_efficiency_km_l,
                            :fuel_price, :contract_start, :contract_days,
                            :weekly_earnings_goal, :is_active
                        )
                        RETURNING id
                        """
                    ),
                    params,
                ).scalar_one()
            else:
                config_id = config.id
                conn.execute(
                    text(
                        """
                        UPDATE car_configs
                        SET model = :model,
                            weekly_rent = :weekly_rent,
                            weekly_km_limit = :weekly_km_limit,
                            overage_fee_per_km = :overage_fee_per_km,
                            fuel_efficiency_km_l = :fuel_efficiency_km_l,
                            fuel_price = :fuel_price,
                            contract_start = :contract_start,
                            contract_days = :contract_days,
                            weekly_earnings_goal = :weekly_earnings_goal,
                            is_active = :is_active
                        WHERE id = :id
                        """
                    ),
                    {**params, "id": config_id},
                )
            if config.is_active:
                self._deactivate_others(conn, config_id)
            row = conn.execute(
                text(
                    f"SELECT {_CAR_CONFIG_COLUMNS} FROM car_configs "
                    "WHERE id = :id"
                ),
                {"id": config_id},
            ).first()
        return self._to_car_config(row)

    def activate_car_config(self, config_id: int) -> CarConfig | None:
        with self._engine().begin() as conn:
            result = conn.execute(
                text("UPDATE car_configs SET is_active = :active WHERE id = :id"),
                {"active": True, "id": config_id},
            )
            if result.rowcount == 0:
                return None
            self._deactivate_others(conn, config_id)
            row = conn.execute(
                text(
                    f"SELECT {_CAR_CONFIG_COLUMNS} FROM car_configs "
                    "WHERE id = :id"
                ),
                {"id": config_id},
            ).first()
        return self._to_car_config(row)

    # Helpers

    @staticmethod
    def _deactivate_others(conn: Connection, config_id: int) -> None:
        conn.execute(
            text(
                "UPDATE car_configs SET is_active = :inactive "
                "WHERE id <> :id"
            ),
            {"inactive": False, "id": config_id},
        )

    @staticmethod
    def _require_record(conn: Connection, record_id: int) -> date:
        raw_date = conn.execute(
            text("SELECT record_date FROM daily_records WHERE id = :id"),
            {"id": record_id},
        ).scalar()
        if raw_date is None:
            raise LookupError(f"Daily record {record_id} does not exist")
        return _parse_date(raw_date)

    @staticmethod
    def _insert_expense(
        conn: Connection,
        record_id: int,
        expense: Expense,
    ) -> Expense:
        expense_id = conn.execute(
            text(
                """
                INSERT INTO expenses (record_id, amount, category)
                VALUES (:record_id, :amount, :category)
                RETURNING id
                """
            ),
            {
                "record_id": record_id,
                "amount": str(expense.amount),
                "category": expense.category,
            },
        ).scalar_one()
        return Expense(
            amount=coerce_decimal(expense.amount),
            category=expense.category,
            id=expense_id,
        )

    @staticmethod
    def _insert_extra_earning(
        conn: Connection,
        record_id: int,
        earning: ExtraEarning,
    ) -> ExtraEarning:
        earning_id = conn.execute(
            text(
                """
                INSERT INTO extra_earnings (
                    record_id, earning_date, amount, category, description
                )
                VALUES (
                    :record_id, :earning_date, :amount, :category,
                    :description
                )
                RETURNING id
                """
            ),
            {
                "record_id": record_id,
                "earning_date": (
                    earning.earning_date.isoformat()
                    if earning.earning_date
                    else None
                ),
                "amount": str(earning.amount),
                "category": earning.category,
                "description": earning.description,
            },
        ).scalar_one()
        return ExtraEarning(
            amount=coerce_decimal(earning.amount),
            category=earning.category,
            earning_date=earning.earning_date,
            description=earning.description,
            id=earning_id,
        )

    @staticmethod
    def _hydrate_records(conn: Connection, rows) -> list[DailyRecord]:
        if not rows:
            return []
        params = {f"id_{i}": row.id for i, row in enumerate(rows)}
        placeholders = ", ".join(f":{key}" for key in params)

        platforms: dict[int, dict[str, PlatformActivity]] = defaultdict(dict)
        for row in conn.execute(
            text(
                "SELECT record_id, platform, trips, km, earnings "
                f"FROM platform_activity WHERE record_id IN ({placeholders}) "
                "ORDER BY platform"
            ),
            params,
        ).all():
            platforms[row.record_id][row.platform] = PlatformActivity(
                trips=int(row.trips or 0),
                km=coerce_decimal(row.km),
                earnings=coerce_decimal(row.earnings),
            )

        expenses: dict[int, list[Expense]] = defaultdict(list)
        for row in conn.execute(
            text(
                "SELECT id, record_id, amount, category FROM expenses "
                f"WHERE record_id IN ({placeholders}) ORDER BY id"
            ),
            params,
        ).all():
            expenses[row.record_id].append(
                Expense(
                    amount=coerce_decimal(row.amount),
                    category=row.category,
                    id=row.id,
                )
            )

        extras: dict[int, list[ExtraEarning]] = defaultdict(list)
        for row in conn.execute(
            text(
                "SELECT id, record_id, earning_date, amount, category, "
                "description FROM extra_earnings "
                f"WHERE record_id IN ({placeholders}) ORDER BY id"
            ),
            params,
        ).all():
            extras[row.record_id].append(
                ExtraEarning(
                    amount=coerce_decimal(row.amount),
                    category=row.category,
                    earning_date=(
                        _parse_date(row.earning_date)
                        if row.earning_date
                        else None
                    ),
                    description=row.description or "",
                    id=row.id,
                )
            )

        return [
            DailyRecord(
                record_date=_parse_date(row.record_date),
                minutes_worked=int(row.minutes_worked or 0),
                platforms=platforms.get(row.id, {}),
                fuel_price=coerce_decimal(row.fuel_price),
                fuel_efficiency_km_l=coerce_decimal(row.fuel_efficiency_km_l),
                expenses=tuple(expenses.get(row.id, [])),
                extra_earnings=tuple(extras.get(row.id, [])),
                id=row.id,
            )
            for row in rows
        ]

    @staticmethod
    def _to_car_config(row) -> CarConfig:
        return CarConfig(
            model=row.model,
            weekly_rent=coerce_decimal(row.weekly_rent),
            weekly_km_limit=coerce_decimal(row.weekly_km_limit),
            overage_fee_per_km=coerce_decimal(row.overage_fee_per_km),
            fuel_efficiency_km_l=coerce_decimal(row.fuel_efficiency_km_l),
            fuel_price=coerce_decimal(row.fuel_price),
            contract_start=(
                _parse_date(row.contract_start)
                if row.contract_start
                else None
            ),
            contract_days=int(row.contract_days or 0),
            weekly_earnings_goal=coerce_decimal(row.weekly_earnings_goal),
            is_active=bool(row.is_active),
            id=row.id,
        )


def _parse_date(value) -> date:
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


__all__ = ["SqlAlchemyRecordStore"]
