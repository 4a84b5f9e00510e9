"""Dependency injection container."""

from typing import Optional

from app.adapters.outbound.car_repository.in_memory_car_repository import InMemoryCarRepository
from app.adapters.outbound.car_repository.sql_car_repository import SqlCarRepository
from app.adapters.outbound.storage.local_car_storage import LocalCarStorage
from app.application.ports.car_repository import CarRepository
from app.application.ports.car_storage import CarStorage
from app.application.use_cases.manage_cars_use_case import ManageCarsUseCase
from app.infrastructure.config.settings import Settings, settings
from app.infrastructure.db import init_db


def build_car_repository(config: Settings) -> CarRepository:
    """
    Build the car repository selected in settings.

    Args:
        config: Application settings

    Returns:
        Car repository adapter

    Raises:
        ValueError: If car_repository names an unknown adapter
    """
    if config.car_repository == "in_memory":
        return InMemoryCarRepository()
    if config.car_repository == "sql":
        init_db(config.database_url)
        return SqlCarRepository(config.database_url)
    raise ValueError(f"Unknown car_repository '{config.car_repository}' (use sql or in_memory)")


class Container:
    """Dependency injection container."""

    def __init__(self, config: Optional[Settings] = None) -> None:
        """Initialize container with dependencies."""
        config = config or settings

        # Car repository
        self._car_repository: CarRepository = build_car_repository(config)

        # Image and import/export storage
        self._car_storage: CarStorage = LocalCarStorage(config.images_dir)

        # Use cases (loads the car list on construction)
        self._manage_cars_use_case = ManageCarsUseCase(self._car_repository, self._car_storage)

    @property
    def manage_cars_use_case(self) -> ManageCarsUseCase:
        """Get manage cars use case."""
        return self._manage_cars_use_case

    @property
    def car_repository(self) -> CarRepository:
        """Get car repository."""
        return self._car_repository

    @property
    def car_storage(self) -> CarStorage:
        """Get car storage."""
        return self._car_storage
