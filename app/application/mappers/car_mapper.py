"""Conversions between cars and car forms."""

from pathlib import Path
from typing import Optional

from app.application.dtos.car import Car, ImageName
from app.application.dtos.car_form import CarForm
from app.domain.errors import CarValidationError
from app.domain.value_objects.engine_type import EngineType
from app.domain.value_objects.license_plate import LicensePlate


def form_to_car(form: CarForm) -> Car:
    """
    Build a Car from a form.

    Args:
        form: Car form as filled in by the user

    Returns:
        Car with normalized plate and text fields. The image is the staged
        file name, or NO_IMAGE when nothing is staged.

    Raises:
        CarValidationError: If the engine type name is unknown
    """
    try:
        engine_type = EngineType[form.engine_type.strip().upper()]
    except KeyError:
        raise CarValidationError(
            f"Unknown engine type '{form.engine_type}'", field="engine_type"
        ) from None

    return Car(
        id=form.id,
        license_plate=LicensePlate.normalize(form.license_plate),
        brand=form.brand.strip(),
        model=form.model.strip(),
        engine_type=engine_type,
        registration_date=form.registration_date,
        image=form.image_file.name if form.image_file else ImageName.NO_IMAGE.value,
    )


def car_to_form(car: Car, image: bytes, image_file: Optional[Path]) -> CarForm:
    """Build the form shown when a car is selected."""
    return CarForm(
        id=car.id,
        license_plate=car.license_plate,
        brand=car.brand,
        model=car.model,
        engine_type=car.engine_type.name,
        registration_date=car.registration_date,
        image=image,
        image_file=image_file,
    )
