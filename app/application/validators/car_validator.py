"""Business validation for cars."""

from datetime import date
from typing import Optional

from app.application.dtos.car import Car
from app.domain.errors import CarValidationError
from app.domain.value_objects.license_plate import LicensePlate


def validate_car(car: Car, today: Optional[date] = None) -> Car:
    """
    Check a car against the dealership business rules.

    Args:
        car: Car to validate
        today: Reference date for the registration check (defaults to today)

    Returns:
        The same car, when valid

    Raises:
        CarValidationError: On the first rule the car breaks
    """
    try:
        LicensePlate(car.license_plate)
    except ValueError as e:
        raise CarValidationError(str(e), field="license_plate") from None

    if not car.brand.strip():
        raise CarValidationError("Brand is required", field="brand")

    if not car.model.strip():
        raise CarValidationError("Model is required", field="model")

    if car.registration_date > (today or date.today()):
        raise CarValidationError(
            "Registration date cannot be in the future", field="registration_date"
        )

    return car
