"""Dealership UI state DTOs."""

from enum import Enum

from pydantic import Field

from app.application.dtos.base import DTO
from app.application.dtos.car import Car
from app.application.dtos.car_form import CarForm


class OperationMode(str, Enum):
    """What the car form is being used for."""

    CREATE = "Nuevo"
    EDIT = "Editar"


class EngineFilter(str, Enum):
    """Engine type filter choices shown in the car list."""

    ALL = "Todos/as"
    GASOLINE = "Gasolina"
    DIESEL = "Diesel"
    ELECTRIC = "Eléctrico"
    HYBRID = "Híbrido"


class DealershipState(DTO):
    """Snapshot of everything the dealership screen renders."""

    engine_types: list[str] = Field(default_factory=list)
    cars: list[Car] = Field(default_factory=list)  # Sorted by license plate
    selected_car: CarForm = Field(default_factory=CarForm)
    operation_mode: OperationMode = OperationMode.CREATE
