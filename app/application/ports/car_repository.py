"""Car repository port."""

from abc import ABC, abstractmethod
from typing import Optional

from app.application.dtos.car import Car


class CarRepository(ABC):
    """Port interface for car persistence."""

    @abstractmethod
    def find_all(self) -> list[Car]:
        """
        Get all persisted cars.

        Returns:
            List of all cars
        """
        pass

    @abstractmethod
    def find_by_license_plate(self, license_plate: str) -> Optional[Car]:
        """
        Get the car owning a license plate.

        Args:
            license_plate: License plate to look up

        Returns:
            Car DTO, or None if no car has that plate
        """
        pass

    @abstractmethod
    def save(self, car: Car) -> Car:
        """
        Insert a new car or update an existing one.

        Args:
            car: Car to save. A car with NEW_CAR_ID gets a fresh id.

        Returns:
            The car as persisted, with its assigned id
        """
        pass

    @abstractmethod
    def save_all(self, cars: list[Car]) -> list[Car]:
        """
        Save several cars.

        Args:
            cars: Cars to save

        Returns:
            The cars as persisted
        """
        pass

    @abstractmethod
    def delete_by_id(self, car_id: int) -> None:
        """
        Delete a car by id. Unknown ids are ignored.

        Args:
            car_id: Car identifier
        """
        pass

    @abstractmethod
    def delete_all(self) -> None:
        """Delete every car."""
        pass
