"""Car repository adapters."""

from app.adapters.outbound.car_repository.in_memory_car_repository import InMemoryCarRepository
from app.adapters.outbound.car_repository.sql_car_repository import SqlCarRepository

__all__ = [
    "InMemoryCarRepository",
    "SqlCarRepository",
]
