"""Shared fixtures for car management tests."""

from datetime import date
from pathlib import Path

import pytest

from app.adapters.outbound.car_repository.in_memory_car_repository import InMemoryCarRepository
from app.adapters.outbound.storage.local_car_storage import LocalCarStorage
from app.application.dtos.car import Car
from app.application.dtos.car_form import CarForm
from app.domain.value_objects.engine_type import EngineType


def make_car(
    license_plate: str,
    engine_type: EngineType = EngineType.GASOLINE,
    brand: str = "Seat",
    model: str = "Ibiza",
    **kwargs,
) -> Car:
    """Build a car with sensible defaults."""
    return Car(
        license_plate=license_plate,
        brand=brand,
        model=model,
        engine_type=engine_type,
        registration_date=kwargs.pop("registration_date", date(2020, 1, 15)),
        **kwargs,
    )


def make_form(license_plate: str = "4321XYZ", **kwargs) -> CarForm:
    """Build a filled-in car form."""
    fields = {
        "license_plate": license_plate,
        "brand": "Renault",
        "model": "Clio",
        "engine_type": "DIESEL",
        "registration_date": date(2021, 6, 1),
    }
    fields.update(kwargs)
    return CarForm(**fields)


@pytest.fixture
def seeded_cars() -> list[Car]:
    """Three cars with different engines, not sorted by plate."""
    return [
        make_car("9012JKL", EngineType.ELECTRIC, brand="Tesla", model="Model 3"),
        make_car("1234BCD", EngineType.GASOLINE, brand="Seat", model="Ibiza"),
        make_car("5678FGH", EngineType.DIESEL, brand="Peugeot", model="308"),
    ]


@pytest.fixture
def repository(seeded_cars: list[Car]) -> InMemoryCarRepository:
    """In-memory repository seeded with three cars."""
    return InMemoryCarRepository(seeded_cars)


@pytest.fixture
def images_dir(tmp_path: Path) -> Path:
    """Directory for stored images."""
    return tmp_path / "images"


@pytest.fixture
def storage(images_dir: Path) -> LocalCarStorage:
    """Local storage writing into a temporary directory."""
    return LocalCarStorage(images_dir)


@pytest.fixture
def source_image(tmp_path: Path) -> Path:
    """An image file picked by the user."""
    image = tmp_path / "photo.PNG"
    image.write_bytes(b"\x89PNG\r\n\x1a\nfirst-photo")
    return image


@pytest.fixture
def other_source_image(tmp_path: Path) -> Path:
    """A second image file picked by the user."""
    image = tmp_path / "other.jpg"
    image.write_bytes(b"\xff\xd8\xffsecond-photo")
    return image
