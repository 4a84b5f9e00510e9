"""Domain error hierarchy for car management."""


class CarError(Exception):
    """Base exception for all car management errors."""


class CarValidationError(CarError):
    """A car failed business validation."""

    def __init__(self, message: str, *, field: str = "") -> None:
        self.field = field
        super().__init__(message)


class PlateExistsError(CarError):
    """Another car already owns the license plate."""

    def __init__(self, license_plate: str) -> None:
        self.license_plate = license_plate
        super().__init__(f"License plate {license_plate} already exists")


class CarStorageError(CarError):
    """Image or import/export file operation failed."""


class CarRepositoryError(CarError):
    """Persistence layer failed."""
