"""Car form DTO."""

from datetime import date
from pathlib import Path
from typing import Optional

from pydantic import Field

from app.application.dtos.base import DTO
from app.application.dtos.car import NEW_CAR_ID
from app.infrastructure.resources import load_default_image


class CarForm(DTO):
    """Editing and display buffer for the selected car."""

    id: int = NEW_CAR_ID
    license_plate: str = ""
    brand: str = ""
    model: str = ""
    engine_type: str = ""
    registration_date: date = Field(default_factory=date.today)
    image: bytes = Field(default_factory=load_default_image, repr=False)
    image_file: Optional[Path] = None  # Source image staged for create/edit
