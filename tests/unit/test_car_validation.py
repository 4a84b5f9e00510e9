"""Unit tests for car validation and form mapping."""

from datetime import date, timedelta
from pathlib import Path

import pytest

from app.application.dtos.car import ImageName
from app.application.mappers.car_mapper import car_to_form, form_to_car
from app.application.validators.car_validator import validate_car
from app.domain.errors import CarValidationError
from app.domain.value_objects.engine_type import EngineType
from app.domain.value_objects.license_plate import LicensePlate
from conftest import make_car, make_form


@pytest.mark.parametrize("plate", ["1234BCD", "0000ZZZ", "9876LMN"])
def test_valid_plates(plate: str) -> None:
    """Test plates in the current Spanish format."""
    assert LicensePlate(plate).value == plate


@pytest.mark.parametrize(
    "plate", ["", "1234ABC", "1234BC", "123BCD", "M1234BC", "1234bcd", "1234ÑBC"]
)
def test_invalid_plates(plate: str) -> None:
    """Test plates with vowels, wrong length or lowercase letters."""
    with pytest.raises(ValueError):
        LicensePlate(plate)


def test_normalize_plate() -> None:
    """Test that spaces and dashes are dropped and letters upper-cased."""
    assert LicensePlate.normalize(" 1234-bcd ") == "1234BCD"


def test_validate_accepts_valid_car() -> None:
    """Test that a valid car is returned unchanged."""
    car = make_car("1234BCD")

    assert validate_car(car) is car


@pytest.mark.parametrize(
    "changes, field",
    [
        ({"license_plate": "ABC"}, "license_plate"),
        ({"brand": "  "}, "brand"),
        ({"model": ""}, "model"),
        ({"registration_date": date(2030, 1, 2)}, "registration_date"),
    ],
)
def test_validate_rejects(changes: dict, field: str) -> None:
    """Test each business rule."""
    car = make_car("1234BCD").model_copy(update=changes)

    with pytest.raises(CarValidationError) as exc_info:
        validate_car(car, today=date(2025, 1, 1))

    assert exc_info.value.field == field


def test_validate_allows_registration_today() -> None:
    """Test that today's date is not in the future."""
    car = make_car("1234BCD", registration_date=date.today())

    assert validate_car(car) is car


def test_form_to_car_normalizes_fields() -> None:
    """Test that the mapper trims input and parses the engine type."""
    form = make_form(" 4321-xyz", brand=" Renault ", model="Clio ", engine_type="hybrid")

    car = form_to_car(form)

    assert car.license_plate == "4321XYZ"
    assert (car.brand, car.model) == ("Renault", "Clio")
    assert car.engine_type == EngineType.HYBRID
    assert car.image == ImageName.NO_IMAGE.value


def test_form_to_car_uses_staged_image_name() -> None:
    """Test that a staged file contributes its name as image reference."""
    car = form_to_car(make_form(image_file=Path("/tmp/pictures/clio.jpg")))

    assert car.image == "clio.jpg"


def test_form_to_car_rejects_unknown_engine() -> None:
    """Test that an empty engine type is a validation error."""
    with pytest.raises(CarValidationError):
        form_to_car(make_form(engine_type=""))


def test_car_to_form() -> None:
    """Test that a selected car fills every form field."""
    car = make_car(
        "1234BCD", EngineType.ELECTRIC, id=7, registration_date=date.today() - timedelta(days=3)
    )

    form = car_to_form(car, b"img", Path("/images/x.png"))

    assert form.id == 7
    assert form.engine_type == "ELECTRIC"
    assert form.registration_date == car.registration_date
    assert form.image == b"img"
    assert form.image_file == Path("/images/x.png")
