"""Local filesystem car storage adapter."""

import shutil
import uuid
import zipfile
from pathlib import Path
from typing import Union

from pydantic import TypeAdapter, ValidationError

from app.application.dtos.car import Car
from app.application.ports.car_storage import CarStorage
from app.domain.errors import CarStorageError
from app.infrastructure.logging.logger import log_bulk_transfer, log_operation, logger

_CARS_ADAPTER = TypeAdapter(list[Car])

# Layout of archives written by export_zip
ZIP_DATA_ENTRY = "cars.json"
ZIP_IMAGES_DIR = "images"


class LocalCarStorage(CarStorage):
    """Stores car images in a local directory and reads/writes JSON and ZIP files."""

    def __init__(self, images_dir: Union[str, Path]) -> None:
        """
        Initialize local storage.

        Args:
            images_dir: Directory holding stored car images (created if missing)
        """
        self._images_dir = Path(images_dir)
        self._images_dir.mkdir(parents=True, exist_ok=True)

    @property
    def images_dir(self) -> Path:
        """Directory holding stored car images."""
        return self._images_dir

    def _serialize(self, cars: list[Car]) -> bytes:
        return _CARS_ADAPTER.dump_json(cars, indent=2)

    def _deserialize(self, data: Union[str, bytes], source: Path) -> list[Car]:
        try:
            return _CARS_ADAPTER.validate_json(data)
        except ValidationError as e:
            logger.error(f"Invalid car data in {source}: {str(e)}")
            raise CarStorageError(f"Invalid car data in {source}") from e

    def store_json(self, file: Path, cars: list[Car]) -> int:
        """Write cars to a JSON file."""
        file = Path(file)
        try:
            file.write_bytes(self._serialize(cars))
        except OSError as e:
            logger.error(f"Could not write {file}: {str(e)}")
            raise CarStorageError(f"Could not write cars to {file}") from e
        log_bulk_transfer("store_json", file, len(cars))
        return len(cars)

    def load_json(self, file: Path) -> list[Car]:
        """Read cars from a JSON file."""
        file = Path(file)
        try:
            data = file.read_bytes()
        except OSError as e:
            logger.error(f"Could not read {file}: {str(e)}")
            raise CarStorageError(f"Could not read cars from {file}") from e
        cars = self._deserialize(data, file)
        log_bulk_transfer("load_json", file, len(cars))
        return cars

    def save_image(self, source: Path) -> Path:
        """Copy an image into storage under a fresh unique name."""
        source = Path(source)
        destination = self._images_dir / f"{uuid.uuid4()}{source.suffix.lower()}"
        try:
            shutil.copyfile(source, destination)
        except OSError as e:
            logger.error(f"Could not copy image {source}: {str(e)}")
            raise CarStorageError(f"Could not save image {source.name}") from e
        log_operation("storage", "save_image", source=str(source), stored=destination.name)
        return destination

    def update_image(self, old_file: Path, new_source: Path) -> Path:
        """Overwrite a stored image keeping its name."""
        destination = self._images_dir / Path(old_file).name
        if destination.exists() and destination.resolve() == Path(new_source).resolve():
            return destination
        try:
            shutil.copyfile(new_source, destination)
        except OSError as e:
            logger.error(f"Could not replace image {destination.name}: {str(e)}")
            raise CarStorageError(f"Could not update image {destination.name}") from e
        log_operation("storage", "update_image", stored=destination.name)
        return destination

    def delete_image(self, file: Path) -> None:
        """Delete a stored image; missing images are ignored."""
        target = self._images_dir / Path(file).name
        try:
            target.unlink(missing_ok=True)
        except OSError as e:
            logger.error(f"Could not delete image {target.name}: {str(e)}")
            raise CarStorageError(f"Could not delete image {target.name}") from e
        log_operation("storage", "delete_image", stored=target.name)

    def delete_all_images(self) -> int:
        """Delete every stored image."""
        deleted = 0
        try:
            for image in self._images_dir.iterdir():
                if image.is_file():
                    image.unlink()
                    deleted += 1
        except OSError as e:
            logger.error(f"Could not clear {self._images_dir}: {str(e)}")
            raise CarStorageError("Could not delete stored images") from e
        log_operation("storage", "delete_all_images", deleted=deleted)
        return deleted

    def load_image(self, name: str) -> Path:
        """Locate a stored image by name."""
        if not name:
            raise CarStorageError("Image name is empty")
        image = self._images_dir / Path(name).name
        if not image.is_file():
            raise CarStorageError(f"Image {name} not found")
        return image

    def export_zip(self, file: Path, cars: list[Car]) -> None:
        """Write cars.json plus every existing car image into a ZIP archive."""
        file = Path(file)
        images = 0
        try:
            with zipfile.ZipFile(file, "w", compression=zipfile.ZIP_DEFLATED) as archive:
                archive.writestr(ZIP_DATA_ENTRY, self._serialize(cars))
                for car in cars:
                    image = self._images_dir / Path(car.image).name
                    if car.has_image and image.is_file():
                        archive.write(image, f"{ZIP_IMAGES_DIR}/{image.name}")
                        images += 1
        except OSError as e:
            logger.error(f"Could not write archive {file}: {str(e)}")
            raise CarStorageError(f"Could not export cars to {file}") from e
        log_bulk_transfer("export_zip", file, len(cars), images_count=images)

    def load_from_zip(self, file: Path) -> list[Car]:
        """Read cars.json from an archive and restore its images."""
        file = Path(file)
        images = 0
        try:
            with zipfile.ZipFile(file) as archive:
                data = archive.read(ZIP_DATA_ENTRY)
                for member in archive.infolist():
                    if member.is_dir() or not member.filename.startswith(f"{ZIP_IMAGES_DIR}/"):
                        continue
                    # Only the base name is trusted, never the archive path
                    target = self._images_dir / Path(member.filename).name
                    with archive.open(member) as source, open(target, "wb") as destination:
                        shutil.copyfileobj(source, destination)
                    images += 1
        except KeyError as e:
            raise CarStorageError(f"Archive {file} has no {ZIP_DATA_ENTRY}") from e
        except (OSError, zipfile.BadZipFile) as e:
            logger.error(f"Could not read archive {file}: {str(e)}")
            raise CarStorageError(f"Could not import cars from {file}") from e
        cars = self._deserialize(data, file)
        log_bulk_transfer("load_from_zip", file, len(cars), images_count=images)
        return cars
