"""Use case managing vehicle configs and the active vehicle."""

from src.application.ports.record_store import RecordStorePort
from src.domain.models import CarConfig
from src.infrastructure.logging.logger import get_app_logger


class ManageVehiclesUseCase:
    """Save vehicles and switch which one governs cost rollups."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            record_store: Port persisting vehicle configs.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def list_vehicles(self) -> list[CarConfig]:
        return self._record_store.fetch_car_configs()

    def save_vehicle(self, config: CarConfig) -> CarConfig:
        """Insert or update a vehicle.

        Raises:
            ValueError: If the model name is empty or a term is negative.
        """
        if not config.model.strip():
            raise ValueError("Vehicle model is required")
        numeric_terms = (
            config.weekly_rent,
            config.weekly_km_limit,
            config.overage_fee_per_km,
            config.fuel_efficiency_km_l,
            config.fuel_price,
            config.weekly_earnings_goal,
            config.contract_days,
        )
        if any(term < 0 for term in numeric_terms):
            raise ValueError("Vehicle terms cannot be negative")
        stored = self._record_store.save_car_config(config)
        self._logger.info(
            f"Saved vehicle {stored.id} ({stored.model}), "
            f"active={stored.is_active}"
        )
        return stored

    def activate_vehicle(self, config_id: int) -> CarConfig:
        """Make a vehicle the active one, deactivating the previous one.

        Raises:
            LookupError: If no vehicle has this id.
        """
        activated = self._record_store.activate_car_config(config_id)
        if activated is None:
            raise LookupError(f"Vehicle {config_id} does not exist")
        self._logger.info(f"Activated vehicle {config_id} ({activated.model})")
        return activated


__all__ = ["ManageVehiclesUseCase"]
