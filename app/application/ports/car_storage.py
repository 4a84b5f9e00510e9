"""Car storage port."""

from abc import ABC, abstractmethod
from pathlib import Path

from app.application.dtos.car import Car


class CarStorage(ABC):
    """Port interface for car images and bulk import/export files.

    Every method raises CarStorageError when the underlying file operation fails.
    """

    @abstractmethod
    def store_json(self, file: Path, cars: list[Car]) -> int:
        """
        Write cars to a JSON file.

        Args:
            file: Destination file
            cars: Cars to write

        Returns:
            Number of cars written
        """
        pass

    @abstractmethod
    def load_json(self, file: Path) -> list[Car]:
        """
        Read cars from a JSON file.

        Args:
            file: Source file

        Returns:
            Cars found in the file
        """
        pass

    @abstractmethod
    def save_image(self, source: Path) -> Path:
        """
        Copy an image into storage under a new unique name.

        Args:
            source: Image file to copy

        Returns:
            Path of the stored copy
        """
        pass

    @abstractmethod
    def update_image(self, old_file: Path, new_source: Path) -> Path:
        """
        Overwrite a stored image with the contents of another file.

        Args:
            old_file: Stored image to replace (only its name is used)
            new_source: Image file with the new contents

        Returns:
            Path of the stored image
        """
        pass

    @abstractmethod
    def delete_image(self, file: Path) -> None:
        """
        Delete a stored image.

        Args:
            file: Stored image (only its name is used)
        """
        pass

    @abstractmethod
    def delete_all_images(self) -> int:
        """
        Delete every stored image.

        Returns:
            Number of images deleted
        """
        pass

    @abstractmethod
    def load_image(self, name: str) -> Path:
        """
        Locate a stored image by file name.

        Args:
            name: Stored image file name

        Returns:
            Path of the stored image
        """
        pass

    @abstractmethod
    def export_zip(self, file: Path, cars: list[Car]) -> None:
        """
        Bundle cars and their images into a ZIP archive.

        Args:
            file: Destination archive
            cars: Cars to export
        """
        pass

    @abstractmethod
    def load_from_zip(self, file: Path) -> list[Car]:
        """
        Unpack a ZIP archive made by export_zip, restoring its images.

        Args:
            file: Source archive

        Returns:
            Cars found in the archive
        """
        pass
