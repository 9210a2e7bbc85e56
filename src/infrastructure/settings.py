"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass, field
from enum import Enum
import os

import dotenv

from src.domain.policies import (
    AnalysisPolicies,
    DailyContractCosts,
    FuelMergePolicy,
    MonthlyKmLimitPolicy,
    MonthlyRentPolicy,
    PeriodFuelPolicy,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class DashboardSettings:
    """Settings for the driver dashboard.

    Attributes:
        db_url: SQLAlchemy URL of the records database, if configured.
        policies: Cost allocation strategies used by the analyzers.
    """

    db_url: str | None = None
    policies: AnalysisPolicies = field(default_factory=AnalysisPolicies)

    @classmethod
    def from_env(cls) -> "DashboardSettings":
        """Build settings from environment variables and ``.env``.

        Returns:
            DashboardSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        policies = AnalysisPolicies(
            fuel_merge=cls._read_policy(
                "FUEL_MERGE_POLICY",
                FuelMergePolicy,
                FuelMergePolicy.PREFER_COMPUTED,
                logger,
            ),
            period_fuel=cls._read_policy(
                "PERIOD_FUEL_POLICY",
                PeriodFuelPolicy,
                PeriodFuelPolicy.PERIOD_TOTAL,
                logger,
            ),
            daily_contract_costs=cls._read_policy(
                "DAILY_CONTRACT_COSTS",
                DailyContractCosts,
                DailyContractCosts.EXCLUDE,
                logger,
            ),
            monthly_rent=cls._read_policy(
                "MONTHLY_RENT_POLICY",
                MonthlyRentPolicy,
                MonthlyRentPolicy.CEIL_WEEKS,
                logger,
            ),
            monthly_km_limit=cls._read_policy(
                "MONTHLY_KM_LIMIT_POLICY",
                MonthlyKmLimitPolicy,
                MonthlyKmLimitPolicy.CEIL_WEEKS,
                logger,
            ),
        )
        db_url = os.getenv("DRIVER_DB_URL") or None
        return cls(db_url=db_url, policies=policies)

    @staticmethod
    def _read_policy(
        name: str,
        enum_type: type[Enum],
        default: Enum,
        logger,
    ):
        """Parse a policy value, falling back to the default when invalid.

        Args:
            name: Environment variable name.
            enum_type: Policy enum to parse into.
            default: Value used when unset or invalid.
            logger: Logger used for warnings.

        Returns:
            Enum: Parsed policy member.
        """
        raw = os.getenv(name)
        if not raw:
            return default
        try:
            return enum_type(raw.strip().lower())
        except ValueError:
            allowed = ", ".join(member.value for member in enum_type)
            logger.warning(
                f"Invalid {name}='{raw}'. Expected one of: {allowed}. "
                f"Using {default.value}."
            )
            return default


__all__ = ["DashboardSettings"]
