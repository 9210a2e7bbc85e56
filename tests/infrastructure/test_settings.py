"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

from src.domain.policies import (
    AnalysisPolicies,
    FuelMergePolicy,
    MonthlyKmLimitPolicy,
    MonthlyRentPolicy,
)
from src.infrastructure import settings as settings_module
from src.infrastructure.settings import DashboardSettings

_POLICY_VARS = (
    "FUEL_MERGE_POLICY",
    "PERIOD_FUEL_POLICY",
    "DAILY_CONTRACT_COSTS",
    "MONTHLY_RENT_POLICY",
    "MONTHLY_KM_LIMIT_POLICY",
)


def _clear_env(monkeypatch) -> None:
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.delenv("DRIVER_DB_URL", raising=False)
    for name in _POLICY_VARS:
        monkeypatch.delenv(name, raising=False)


def test_from_env_defaults(monkeypatch) -> None:
    """Unset variables keep the default policies."""
    _clear_env(monkeypatch)

    settings = DashboardSettings.from_env()

    assert settings.db_url is None
    assert settings.policies == AnalysisPolicies()


def test_from_env_reads_policies(monkeypatch) -> None:
    """Policy values are parsed case-insensitively."""
    _clear_env(monkeypatch)
    monkeypatch.setenv("DRIVER_DB_URL", "sqlite:///records.db")
    monkeypatch.setenv("FUEL_MERGE_POLICY", "SUM")
    monkeypatch.setenv("MONTHLY_RENT_POLICY", " proportional ")
    monkeypatch.setenv("MONTHLY_KM_LIMIT_POLICY", "pro_rata")

    settings = DashboardSettings.from_env()

    assert settings.db_url == "sqlite:///records.db"
    assert settings.policies.fuel_merge is FuelMergePolicy.SUM
    assert settings.policies.monthly_rent is MonthlyRentPolicy.PROPORTIONAL
    assert (
        settings.policies.monthly_km_limit is MonthlyKmLimitPolicy.PRO_RATA
    )


def test_invalid_policy_falls_back_with_warning(monkeypatch) -> None:
    """Unknown values log a warning and keep the default."""
    _clear_env(monkeypatch)
    logger = MagicMock()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    monkeypatch.setenv("FUEL_MERGE_POLICY", "average")

    settings = DashboardSettings.from_env()

    assert settings.policies.fuel_merge is FuelMergePolicy.PREFER_COMPUTED
    logger.warning.assert_called_once()
    assert "FUEL_MERGE_POLICY" in logger.warning.call_args.args[0]
