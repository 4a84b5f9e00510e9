"""In-memory car repository adapter."""

from typing import Optional

from app.application.dtos.car import Car
from app.application.ports.car_repository import CarRepository


class InMemoryCarRepository(CarRepository):
    """In-memory implementation of car repository."""

    def __init__(self, cars: Optional[list[Car]] = None) -> None:
        """
        Initialize in-memory repository.

        Args:
            cars: Optional cars to seed the repository with
        """
        self._storage: list[Car] = []
        self._next_id = 1
        if cars:
            self.save_all(cars)

    def find_all(self) -> list[Car]:
        """Get all cars."""
        return self._storage.copy()

    def find_by_license_plate(self, license_plate: str) -> Optional[Car]:
        """Get the car owning a license plate."""
        for car in self._storage:
            if car.license_plate == license_plate:
                return car
        return None

    def save(self, car: Car) -> Car:
        """
        Save a car.

        Args:
            car: Car to save

        Returns:
            The stored car with its id
        """
        if car.is_new:
            car = car.model_copy(update={"id": self._next_id})
        # Remove existing car with same id if present
        self._storage = [existing for existing in self._storage if existing.id != car.id]
        self._storage.append(car)
        self._next_id = max(self._next_id, car.id + 1)
        return car

    def save_all(self, cars: list[Car]) -> list[Car]:
        """Save several cars."""
        return [self.save(car) for car in cars]

    def delete_by_id(self, car_id: int) -> None:
        """Delete a car by id."""
        self._storage = [car for car in self._storage if car.id != car_id]

    def delete_all(self) -> None:
        """Delete every car."""
        self._storage = []
