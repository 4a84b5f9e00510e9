"""Manage cars use case."""

import logging
from pathlib import Path
from typing import Optional

from app.application.dtos.car import NEW_CAR_ID, Car, ImageName
from app.application.dtos.car_form import CarForm
from app.application.dtos.dealership_state import DealershipState, OperationMode
from app.application.mappers.car_mapper import car_to_form, form_to_car
from app.application.ports.car_repository import CarRepository
from app.application.ports.car_storage import CarStorage
from app.application.state.state_store import StateStore
from app.application.validators.car_validator import validate_car
from app.domain.errors import CarRepositoryError, CarStorageError, PlateExistsError
from app.domain.value_objects.engine_type import EngineType
from app.infrastructure.logging.logger import log_operation
from app.infrastructure.resources import DEFAULT_IMAGE_PATH, load_default_image


class ManageCarsUseCase:
    """Use case behind the dealership screen.

    Every user intent validates its input, coordinates the repository and the
    storage service, and publishes a new DealershipState through the store.
    Failures are raised as CarError subclasses.
    """

    def __init__(
        self,
        repository: CarRepository,
        storage: CarStorage,
        store: Optional[StateStore] = None,
    ) -> None:
        """
        Initialize the use case and load the car list.

        Args:
            repository: Car persistence port
            storage: Image and import/export file port
            store: State store to publish into (a new one by default)
        """
        self._repository = repository
        self._storage = storage
        self._store = store if store is not None else StateStore()

        log_operation("use_case", "init")
        self._load_cars_from_repository()
        self._load_engine_types()

    @property
    def store(self) -> StateStore:
        """Store the UI subscribes to."""
        return self._store

    @property
    def state(self) -> DealershipState:
        """Current state snapshot."""
        return self._store.value

    def _load_engine_types(self) -> None:
        self._store.update(engine_types=EngineType.names())

    def _load_cars_from_repository(self) -> None:
        cars = self._repository.find_all()
        log_operation("use_case", "load_cars", cars_count=len(cars))
        self._update_cars(cars)

    def _is_new_image(
        self, image_file: Optional[Path], current_file: Optional[Path] = None
    ) -> bool:
        # The selected form carries the stored image or the bundled default, neither is a pick
        return image_file is not None and image_file not in (current_file, DEFAULT_IMAGE_PATH)

    def _replace_all_cars(self, cars: list[Car]) -> None:
        self._repository.delete_all()
        try:
            self._repository.save_all(cars)
        except CarRepositoryError:
            # Show what the repository holds after the failed import
            self._load_cars_from_repository()
            raise
        self._load_cars_from_repository()

    def _update_cars(self, cars: list[Car]) -> None:
        # The selection never survives a change to the list
        self._store.update(
            cars=sorted(cars, key=lambda car: car.license_plate),
            selected_car=CarForm(),
        )

    def filtered_cars(self, engine_filter: str, license_plate: str) -> list[Car]:
        """
        Filter the current car list.

        Args:
            engine_filter: EngineFilter name; ALL or any unknown value matches every car
            license_plate: Case-insensitive substring the plate must contain

        Returns:
            Matching cars in list order
        """
        log_operation(
            "use_case", "filtered_cars", engine_filter=engine_filter, license_plate=license_plate
        )
        # EngineFilter.ALL and unknown names leave the engine unfiltered
        engine_type = EngineType.__members__.get(engine_filter)

        needle = license_plate.lower()
        return [
            car
            for car in self._store.value.cars
            if (engine_type is None or car.engine_type == engine_type)
            and needle in car.license_plate.lower()
        ]

    def save_cars_to_json(self, file: Path) -> int:
        """
        Export the current car list to JSON.

        Args:
            file: Destination file

        Returns:
            Number of cars written
        """
        log_operation("use_case", "save_cars_to_json", file=str(file))
        return self._storage.store_json(file, self._store.value.cars)

    def load_cars_from_json(self, file: Path, with_images: bool = False) -> list[Car]:
        """
        Replace every car with the contents of a JSON file.

        Stored images are deleted first. Unless with_images is set, the loaded
        cars get new ids and no image.

        Args:
            file: Source file
            with_images: Keep ids and image references from the file

        Returns:
            Cars loaded from the file
        """
        log_operation("use_case", "load_cars_from_json", file=str(file), with_images=with_images)
        self._storage.delete_all_images()
        cars = self._storage.load_json(file)

        if with_images:
            self._replace_all_cars(cars)
        else:
            self._replace_all_cars(
                [
                    car.model_copy(update={"id": NEW_CAR_ID, "image": ImageName.NO_IMAGE.value})
                    for car in cars
                ]
            )
        return cars

    def select_car(self, car: Car) -> None:
        """
        Load a car into the selected form, with its image.

        Args:
            car: Car picked in the list
        """
        log_operation("use_case", "select_car", car_id=car.id, license_plate=car.license_plate)
        try:
            image_file = self._storage.load_image(car.image)
            image = image_file.read_bytes()
        except (CarStorageError, OSError):
            image_file = DEFAULT_IMAGE_PATH
            image = load_default_image()

        self._store.update(selected_car=car_to_form(car, image, image_file))

    def create_car(self, form: CarForm) -> Car:
        """
        Validate and persist a new car.

        Args:
            form: Car form, optionally with a staged image_file

        Returns:
            The persisted car

        Raises:
            CarValidationError: If the form breaks a business rule
            PlateExistsError: If another car already has the plate
        """
        log_operation("use_case", "create_car", license_plate=form.license_plate)
        new_car = validate_car(form_to_car(form).model_copy(update={"id": NEW_CAR_ID}))

        if self._is_new_image(form.image_file):
            stored = self._storage.save_image(form.image_file)
            new_car = new_car.model_copy(update={"image": stored.name})

        # An image copied above is kept even when the plate is rejected
        if self._repository.find_by_license_plate(new_car.license_plate) is not None:
            log_operation(
                "use_case",
                "create_car",
                level=logging.WARNING,
                error="plate_exists",
                license_plate=new_car.license_plate,
            )
            raise PlateExistsError(new_car.license_plate)

        created = self._repository.save(new_car)
        self._update_cars(self._store.value.cars + [created])
        return created

    def edit_car(self, form: CarForm) -> Car:
        """
        Validate and persist changes to the selected car.

        Args:
            form: Edited car form, optionally with a new staged image_file

        Returns:
            The updated car

        Raises:
            CarValidationError: If the form breaks a business rule
            PlateExistsError: If a different car already has the plate
        """
        log_operation("use_case", "edit_car", car_id=form.id, license_plate=form.license_plate)
        current_file = self._store.value.selected_car.image_file
        current_image = current_file.name if current_file else ImageName.NO_IMAGE.value
        updated_car = validate_car(form_to_car(form).model_copy(update={"image": current_image}))

        if self._is_new_image(form.image_file, current_file):
            if not updated_car.has_image:
                stored = self._storage.save_image(form.image_file)
                updated_car = updated_car.model_copy(update={"image": stored.name})
            else:
                self._storage.update_image(current_file, form.image_file)

        owner = self._repository.find_by_license_plate(updated_car.license_plate)
        if owner is not None and owner.id != updated_car.id:
            log_operation(
                "use_case",
                "edit_car",
                level=logging.WARNING,
                error="plate_exists",
                license_plate=updated_car.license_plate,
            )
            raise PlateExistsError(updated_car.license_plate)

        updated = self._repository.save(updated_car)
        self._update_cars(
            [car for car in self._store.value.cars if car.id != updated.id] + [updated]
        )
        return updated

    def delete_car(self) -> None:
        """Delete the selected car and its stored image."""
        # Work on a copy so a selection change cannot alter what gets deleted
        selected = self._store.value.selected_car.model_copy()
        log_operation("use_case", "delete_car", car_id=selected.id)

        if selected.image_file is not None and selected.image_file.name != ImageName.NO_IMAGE.value:
            self._storage.delete_image(selected.image_file)

        self._repository.delete_by_id(selected.id)
        self._update_cars([car for car in self._store.value.cars if car.id != selected.id])

    def export_to_zip(self, file: Path) -> None:
        """
        Export every persisted car and its image to a ZIP archive.

        Args:
            file: Destination archive
        """
        log_operation("use_case", "export_to_zip", file=str(file))
        self._storage.export_zip(file, self._repository.find_all())

    def load_cars_from_zip(self, file: Path) -> list[Car]:
        """
        Replace every car with the contents of a ZIP archive.

        Args:
            file: Archive produced by export_to_zip

        Returns:
            Cars loaded from the archive
        """
        log_operation("use_case", "load_cars_from_zip", file=str(file))
        cars = self._storage.load_from_zip(file)

        self._replace_all_cars([car.model_copy(update={"id": NEW_CAR_ID}) for car in cars])
        return cars

    def set_operation_mode(self, mode: OperationMode) -> None:
        """Switch the form between creating and editing."""
        log_operation("use_case", "set_operation_mode", mode=mode.name)
        self._store.update(operation_mode=mode)

    def default_image(self) -> bytes:
        """Placeholder image for cars without a picture."""
        return load_default_image()
