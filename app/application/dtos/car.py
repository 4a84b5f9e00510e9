"""Car DTOs."""

from datetime import date
from enum import Enum

from pydantic import ConfigDict

from app.application.dtos.base import DTO
from app.domain.value_objects.engine_type import EngineType

# Identity of a car the repository has not assigned an id to yet
NEW_CAR_ID = -1


class ImageName(str, Enum):
    """Image references that mean the car has no stored image."""

    NO_IMAGE = "sin-imagen.png"
    EMPTY = ""


class Car(DTO):
    """Car DTO."""

    id: int = NEW_CAR_ID
    license_plate: str
    brand: str
    model: str
    engine_type: EngineType
    registration_date: date
    image: str = ImageName.NO_IMAGE.value

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "license_plate": "1234BCD",
                "brand": "Seat",
                "model": "Ibiza",
                "engine_type": "GASOLINE",
                "registration_date": "2019-05-14",
                "image": "sin-imagen.png",
            }
        }
    )

    @property
    def is_new(self) -> bool:
        """Whether the repository still has to assign an id."""
        return self.id == NEW_CAR_ID

    @property
    def has_image(self) -> bool:
        """Whether the car references a stored image file."""
        return self.image not in (ImageName.NO_IMAGE.value, ImageName.EMPTY.value)
